"""Choice between analytic per-100g data and label data."""

from nutrient_profiler.domain.nutrition import LabelData, NutrientProfile
from nutrient_profiler.domain.selection import (
    AnalyticPer100g,
    LabelPerServing,
    LabelRaw,
    NoBasis,
    SourceSelection,
)

_GRAM_UNIT = "g"


def select_source(
    extracted: NutrientProfile, label: LabelData | None
) -> SourceSelection:
    """Pick the most reliable basis for the request.

    Analytic data wins whenever it carries any value. Label data is only
    rescaled when its serving is measured in grams; other units are passed
    through unscaled.
    """
    if extracted.total() > 0:
        return AnalyticPer100g(profile=extracted)
    if label is None:
        return NoBasis()
    if label.serving_unit.lower() == _GRAM_UNIT and label.serving_size > 0:
        return LabelPerServing(
            per_gram=label.profile.divide(label.serving_size),
            serving_size=label.serving_size,
        )
    return LabelRaw(profile=label.profile)
