"""Portion scaling of a selected nutrient profile."""

from nutrient_profiler.domain.nutrition import NutrientProfile
from nutrient_profiler.domain.selection import (
    AnalyticPer100g,
    LabelPerServing,
    SourceSelection,
)

DEFAULT_PORTION_GRAMS = 100.0
_REFERENCE_GRAMS = 100.0


def scale_profile(selection: SourceSelection, portion_grams: float) -> NutrientProfile:
    """Rescale the selected profile to the requested portion."""
    if isinstance(selection, AnalyticPer100g):
        return selection.profile.multiply(portion_grams / _REFERENCE_GRAMS)
    if isinstance(selection, LabelPerServing):
        return selection.per_gram.multiply(portion_grams)
    # Raw label values and the empty basis ignore the portion.
    return selection.profile


def resolve_portion_grams(
    requested: float | None,
    estimated: float | None = None,
    fallback: float = DEFAULT_PORTION_GRAMS,
) -> float:
    """Return the first positive portion among requested, estimated and fallback."""
    for candidate in (requested, estimated):
        if candidate is not None and candidate > 0:
            return float(candidate)
    return fallback
