"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from nutrient_profiler.adapters.fdc_client import HttpxFdcClient
from nutrient_profiler.adapters.supabase_history_repository import (
    SupabaseHistoryRepository,
)
from nutrient_profiler.config import Settings
from nutrient_profiler.services.analysis import MealAnalysisService
from nutrient_profiler.services.cache import InMemoryCache
from nutrient_profiler.services.history import HistoryService
from nutrient_profiler.services.nutrition import NutritionService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    nutrition_service: NutritionService
    analysis_service: MealAnalysisService
    history_service: HistoryService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    history_repository = SupabaseHistoryRepository(supabase_client)
    fdc_client = HttpxFdcClient.create(
        api_key=resolved_settings.fdc_api_key,
        base_url=resolved_settings.fdc_base_url,
    )
    nutrition_service = NutritionService(
        fdc_client=fdc_client,
        cache=InMemoryCache(),
        search_ttl_seconds=resolved_settings.fdc_search_ttl_seconds,
        food_ttl_seconds=resolved_settings.fdc_food_ttl_seconds,
        debug=resolved_settings.nutrition_debug,
        retry_attempts=resolved_settings.fdc_retry_attempts,
    )
    analysis_service = MealAnalysisService(
        nutrition_service=nutrition_service,
        repository=history_repository,
        thresholds=resolved_settings.risk_thresholds(),
        default_portion_grams=resolved_settings.default_portion_grams,
        low_confidence_threshold=resolved_settings.low_confidence_threshold,
    )

    async def close_resources() -> None:
        await fdc_client.close()

    return AppContainer(
        settings=resolved_settings,
        nutrition_service=nutrition_service,
        analysis_service=analysis_service,
        history_service=HistoryService(history_repository),
        close_resources=close_resources,
    )
