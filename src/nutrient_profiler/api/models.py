"""Pydantic request and response models for the HTTP API."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from nutrient_profiler.domain.analysis import (
    AnalysisRecord,
    MealAnalysis,
    NormalizedNutrition,
)
from nutrient_profiler.domain.nutrition import (
    LabelData,
    NutrientProfile,
    RawNutrientEntry,
    RawNutrientRecord,
)
from nutrient_profiler.services.extraction import coerce_amount

# bool first so JSON true/false reach coerce_amount unchanged.
Amount = bool | float | str | None

MAX_PORTION_GRAMS = 10_000.0


class NutrientEntryIn(BaseModel):
    """Analytic nutrient row as sent by the caller."""

    name: str
    value: Amount = None


class LabelIn(BaseModel):
    """Per-serving label values."""

    calories: Amount = None
    carbs: Amount = None
    sugar: Amount = None
    protein: Amount = None
    fat: Amount = None
    fiber: Amount = None
    serving_size: Amount = None
    serving_unit: str = ""

    def to_domain(self) -> LabelData:
        """Convert to label data, coercing amounts."""
        return LabelData(
            profile=NutrientProfile(
                calories=coerce_amount(self.calories),
                carbs=coerce_amount(self.carbs),
                sugar=coerce_amount(self.sugar),
                protein=coerce_amount(self.protein),
                fat=coerce_amount(self.fat),
                fiber=coerce_amount(self.fiber),
            ),
            serving_size=coerce_amount(self.serving_size),
            serving_unit=self.serving_unit,
        )


class NormalizeRequest(BaseModel):
    """Raw record plus the portion to scale to."""

    analytic_entries: list[NutrientEntryIn] = Field(default_factory=list)
    label: LabelIn | None = None
    portion_grams: float = Field(gt=0, le=MAX_PORTION_GRAMS, allow_inf_nan=False)

    def to_record(self) -> RawNutrientRecord:
        """Convert to a raw nutrient record."""
        return RawNutrientRecord(
            analytic_entries=tuple(
                RawNutrientEntry(name=entry.name, value=entry.value)
                for entry in self.analytic_entries
            ),
            label=self.label.to_domain() if self.label else None,
        )


class ProfileOut(BaseModel):
    """Nutrient amounts in grams, calories in kcal."""

    calories: float
    carbs: float
    sugar: float
    protein: float
    fat: float
    fiber: float

    @classmethod
    def from_domain(cls, profile: NutrientProfile) -> "ProfileOut":
        return cls(**profile.as_dict())


class NormalizedOut(BaseModel):
    """Scaled profile, basis and risk tier."""

    profile: ProfileOut
    basis: str
    risk_tier: str

    @classmethod
    def from_domain(cls, nutrition: NormalizedNutrition) -> "NormalizedOut":
        return cls(
            profile=ProfileOut.from_domain(nutrition.profile),
            basis=nutrition.basis.value,
            risk_tier=nutrition.risk_tier.value,
        )


class AnalyzeRequest(BaseModel):
    """Identified food to analyze for a user."""

    user_id: UUID
    food_name: str
    portion_grams: float | None = Field(
        default=None, gt=0, le=MAX_PORTION_GRAMS, allow_inf_nan=False
    )
    estimated_portion_grams: float | None = Field(
        default=None, le=MAX_PORTION_GRAMS, allow_inf_nan=False
    )
    confidence: float | None = Field(default=None, ge=0, le=1)


class AnalysisOut(BaseModel):
    """Analysis result returned to the caller."""

    id: UUID | None
    food_name: str
    fdc_id: int | None
    portion_grams: float
    nutrition: NormalizedOut
    warnings: list[str]

    @classmethod
    def from_domain(cls, analysis: MealAnalysis) -> "AnalysisOut":
        return cls(
            id=analysis.analysis_id,
            food_name=analysis.food_name,
            fdc_id=analysis.fdc_id,
            portion_grams=analysis.portion_grams,
            nutrition=NormalizedOut.from_domain(analysis.nutrition),
            warnings=list(analysis.warnings),
        )


class HistoryItemOut(BaseModel):
    """Stored analysis row."""

    id: UUID
    created_at: datetime
    food_name: str
    portion_grams: float
    profile: ProfileOut
    basis: str
    risk_tier: str
    warnings: list[str]

    @classmethod
    def from_domain(cls, record: AnalysisRecord) -> "HistoryItemOut":
        return cls(
            id=record.id,
            created_at=record.created_at,
            food_name=record.food_name,
            portion_grams=record.portion_grams,
            profile=ProfileOut.from_domain(record.profile),
            basis=record.basis.value,
            risk_tier=record.risk_tier.value,
            warnings=list(record.warnings),
        )
