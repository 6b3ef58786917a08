"""Composed normalization pipeline."""

from nutrient_profiler.domain.analysis import NormalizedNutrition
from nutrient_profiler.domain.nutrition import RawNutrientRecord
from nutrient_profiler.domain.risk import DEFAULT_THRESHOLDS, RiskThresholds
from nutrient_profiler.services.extraction import extract_nutrients
from nutrient_profiler.services.risk import classify_risk
from nutrient_profiler.services.scaling import scale_profile
from nutrient_profiler.services.selection import select_source


def normalize(
    record: RawNutrientRecord | None,
    portion_grams: float,
    thresholds: RiskThresholds = DEFAULT_THRESHOLDS,
) -> NormalizedNutrition:
    """Extract, select, scale and classify a provider record.

    A missing record (provider "no match") yields the empty basis.
    """
    resolved = record or RawNutrientRecord()
    extracted = extract_nutrients(resolved.analytic_entries)
    selection = select_source(extracted, resolved.label)
    profile = scale_profile(selection, portion_grams)
    return NormalizedNutrition(
        profile=profile,
        basis=selection.basis,
        risk_tier=classify_risk(profile.carbs, profile.sugar, thresholds),
    )
