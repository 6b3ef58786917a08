"""Meal analysis orchestration."""

import logging
from dataclasses import dataclass, replace

from nutrient_profiler.domain.analysis import MealAnalysis, MealAnalysisRequest
from nutrient_profiler.domain.risk import DEFAULT_THRESHOLDS, RiskThresholds
from nutrient_profiler.services.history import AnalysisHistoryRepository
from nutrient_profiler.services.normalizer import normalize
from nutrient_profiler.services.nutrition import NutritionService
from nutrient_profiler.services.scaling import (
    DEFAULT_PORTION_GRAMS,
    resolve_portion_grams,
)

DISCLAIMER = "Not medical advice. Consult your clinician for treatment/insulin dosing."
LOW_CONFIDENCE_WARNING = "Low confidence in food recognition. Please confirm."
UNKNOWN_FOOD = "Unknown"

_logger = logging.getLogger(__name__)


@dataclass
class MealAnalysisService:
    """Looks up an identified food, normalizes it and stores the result."""

    nutrition_service: NutritionService
    repository: AnalysisHistoryRepository
    thresholds: RiskThresholds = DEFAULT_THRESHOLDS
    default_portion_grams: float = DEFAULT_PORTION_GRAMS
    low_confidence_threshold: float = 0.6

    async def analyze(self, request: MealAnalysisRequest) -> MealAnalysis:
        """Analyze one food portion and persist the outcome."""
        portion_grams = resolve_portion_grams(
            request.portion_grams,
            request.estimated_portion_grams,
            fallback=self.default_portion_grams,
        )
        food_name = request.food_name.strip() or UNKNOWN_FOOD
        record = await self.nutrition_service.resolve(food_name)
        if record is None:
            _logger.info("No nutrition match for food=%s", food_name)

        analysis = MealAnalysis(
            food_name=food_name,
            portion_grams=portion_grams,
            nutrition=normalize(record, portion_grams, self.thresholds),
            warnings=self._warnings(request.confidence),
            fdc_id=record.fdc_id if record else None,
        )
        analysis_id = self.repository.save_analysis(request.user_id, analysis)
        return replace(analysis, analysis_id=analysis_id)

    def _warnings(self, confidence: float | None) -> tuple[str, ...]:
        warnings = [DISCLAIMER]
        if confidence is not None and confidence < self.low_confidence_threshold:
            warnings.append(LOW_CONFIDENCE_WARNING)
        return tuple(warnings)
