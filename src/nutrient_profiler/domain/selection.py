"""Tagged union describing which data source a profile was taken from."""

from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar

from nutrient_profiler.domain.nutrition import NutrientProfile


class Basis(Enum):
    """Data source and scaling rule chosen for a request."""

    ANALYTIC_PER_100G = "analytic_per_100g"
    LABEL_PER_SERVING = "label_per_serving"
    LABEL_RAW = "label_raw"
    NONE = "none"


@dataclass(frozen=True)
class AnalyticPer100g:
    """Analytic values normalized to a 100 g reference portion."""

    basis: ClassVar[Basis] = Basis.ANALYTIC_PER_100G

    profile: NutrientProfile


@dataclass(frozen=True)
class LabelPerServing:
    """Label values converted to a per-gram rate."""

    basis: ClassVar[Basis] = Basis.LABEL_PER_SERVING

    per_gram: NutrientProfile
    serving_size: float


@dataclass(frozen=True)
class LabelRaw:
    """Label values that cannot be rescaled and are used as-is."""

    basis: ClassVar[Basis] = Basis.LABEL_RAW

    profile: NutrientProfile


@dataclass(frozen=True)
class NoBasis:
    """No usable data; the profile is all zeros."""

    basis: ClassVar[Basis] = Basis.NONE

    profile: NutrientProfile = field(default_factory=NutrientProfile)


SourceSelection = AnalyticPer100g | LabelPerServing | LabelRaw | NoBasis
