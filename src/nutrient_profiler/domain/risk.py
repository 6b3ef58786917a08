"""Glycemic risk domain models."""

from dataclasses import dataclass
from enum import Enum


class RiskTier(Enum):
    """Coarse glycemic risk of a portion."""

    LOW = "Low"
    MODERATE = "Moderate"
    HIGH = "High"

    @property
    def rank(self) -> int:
        """Ordinal position, Low being 0."""
        return _RANKS[self]


_RANKS = {RiskTier.LOW: 0, RiskTier.MODERATE: 1, RiskTier.HIGH: 2}


@dataclass(frozen=True)
class RiskThresholds:
    """Inclusive gram thresholds for each tier."""

    high_carbs: float = 45.0
    high_sugar: float = 25.0
    moderate_carbs: float = 20.0
    moderate_sugar: float = 10.0


DEFAULT_THRESHOLDS = RiskThresholds()
