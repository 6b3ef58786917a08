"""Glycemic risk classification."""

from nutrient_profiler.domain.risk import DEFAULT_THRESHOLDS, RiskThresholds, RiskTier


def classify_risk(
    carbs: float, sugar: float, thresholds: RiskThresholds = DEFAULT_THRESHOLDS
) -> RiskTier:
    """Map portion carbs and sugar (grams) to a risk tier."""
    if carbs >= thresholds.high_carbs or sugar >= thresholds.high_sugar:
        return RiskTier.HIGH
    if carbs >= thresholds.moderate_carbs or sugar >= thresholds.moderate_sugar:
        return RiskTier.MODERATE
    return RiskTier.LOW
