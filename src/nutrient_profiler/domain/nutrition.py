"""Nutrition domain models."""

import math
from dataclasses import dataclass, fields

NUTRIENT_FIELDS: tuple[str, ...] = (
    "calories",
    "carbs",
    "sugar",
    "protein",
    "fat",
    "fiber",
)


@dataclass(frozen=True)
class NutrientProfile:
    """Six-nutrient profile, either per 100 g or for a scaled portion.

    Unknown values are 0.0, never None.
    """

    calories: float = 0.0
    carbs: float = 0.0
    sugar: float = 0.0
    protein: float = 0.0
    fat: float = 0.0
    fiber: float = 0.0

    def total(self) -> float:
        """Return the sum of all six fields."""
        return sum(getattr(self, field.name) for field in fields(self))

    def multiply(self, factor: float) -> "NutrientProfile":
        """Return a copy with every field multiplied by the same factor."""
        return NutrientProfile(
            **{
                name: _finite_or_zero(getattr(self, name) * factor)
                for name in NUTRIENT_FIELDS
            }
        )

    def divide(self, divisor: float) -> "NutrientProfile":
        """Return a copy with every field divided by the same positive divisor."""
        return NutrientProfile(
            **{
                name: _finite_or_zero(getattr(self, name) / divisor)
                for name in NUTRIENT_FIELDS
            }
        )

    def as_dict(self) -> dict[str, float]:
        """Return the profile keyed by field name."""
        return {name: getattr(self, name) for name in NUTRIENT_FIELDS}


def _finite_or_zero(value: float) -> float:
    # Overflowed values count as unknown.
    return value if math.isfinite(value) else 0.0


@dataclass(frozen=True)
class RawNutrientEntry:
    """Single nutrient row from an analytic source."""

    name: str
    value: object


@dataclass(frozen=True)
class LabelData:
    """Per-serving values as printed on a product label."""

    profile: NutrientProfile
    serving_size: float
    serving_unit: str


@dataclass(frozen=True)
class RawNutrientRecord:
    """Provider record with an analytic nutrient list and optional label data."""

    analytic_entries: tuple[RawNutrientEntry, ...] = ()
    label: LabelData | None = None
    fdc_id: int | None = None
    description: str | None = None


@dataclass(frozen=True)
class FoodSummary:
    """Summary information about a food from FDC."""

    fdc_id: int
    description: str
    brand_owner: str | None
    brand_name: str | None
    data_type: str | None
