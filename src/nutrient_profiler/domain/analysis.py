"""Domain models for meal analysis results."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from nutrient_profiler.domain.nutrition import NutrientProfile
from nutrient_profiler.domain.risk import RiskTier
from nutrient_profiler.domain.selection import Basis


@dataclass(frozen=True)
class NormalizedNutrition:
    """Portion-scaled profile with the basis used and its risk tier."""

    profile: NutrientProfile
    basis: Basis
    risk_tier: RiskTier


@dataclass(frozen=True)
class MealAnalysisRequest:
    """Input for analyzing an identified food."""

    user_id: UUID
    food_name: str
    portion_grams: float | None = None
    estimated_portion_grams: float | None = None
    confidence: float | None = None


@dataclass(frozen=True)
class MealAnalysis:
    """Analysis result for a single food portion."""

    food_name: str
    portion_grams: float
    nutrition: NormalizedNutrition
    warnings: tuple[str, ...] = ()
    fdc_id: int | None = None
    analysis_id: UUID | None = None


@dataclass(frozen=True)
class AnalysisRecord:
    """Stored analysis row."""

    id: UUID
    user_id: UUID
    created_at: datetime
    food_name: str
    portion_grams: float
    profile: NutrientProfile
    basis: Basis
    risk_tier: RiskTier
    warnings: tuple[str, ...]
