"""Nutrient source resolution over USDA FoodData Central."""

import asyncio
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

import httpx

from nutrient_profiler.adapters.fdc_client import FdcClient
from nutrient_profiler.domain.nutrition import (
    FoodSummary,
    LabelData,
    NutrientProfile,
    RawNutrientEntry,
    RawNutrientRecord,
)
from nutrient_profiler.services.cache import Cache
from nutrient_profiler.services.extraction import coerce_amount

# Profile field -> FDC labelNutrients key.
_LABEL_KEYS = {
    "calories": "calories",
    "carbs": "carbohydrates",
    "sugar": "sugars",
    "protein": "protein",
    "fat": "fat",
    "fiber": "fiber",
}

_logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable


@dataclass
class NutritionService:
    """Resolves food names to raw provider records, with caching and retry."""

    fdc_client: FdcClient
    cache: Cache
    search_ttl_seconds: int = 3600
    food_ttl_seconds: int = 86400
    debug: bool = False
    retry_attempts: int = 1
    retry_delay_seconds: float = 0.3

    async def search(self, query: str, limit: int = 5) -> list[FoodSummary]:
        """Search FDC foods with caching."""
        cache_key = f"fdc:search:{query.lower()}:{limit}"
        cached = self.cache.get(cache_key)
        if isinstance(cached, list):
            return cached

        payload = await self._call_with_retry(
            lambda: self.fdc_client.search_foods(query, page_size=limit),
            action="search",
        )
        foods = parse_search_results(payload)
        self.cache.set(cache_key, foods, ttl_seconds=self.search_ttl_seconds)
        if self.debug:
            _logger.info("FDC search: query=%s results=%s", query, len(foods))
        return foods

    async def get_record(self, fdc_id: int) -> RawNutrientRecord:
        """Fetch the detailed record for an FDC id."""
        cache_key = f"fdc:food:{fdc_id}"
        cached = self.cache.get(cache_key)
        if isinstance(cached, RawNutrientRecord):
            return cached

        payload = await self._call_with_retry(
            lambda: self.fdc_client.get_food(fdc_id),
            action=f"get_food:{fdc_id}",
        )
        record = parse_food_record(payload)
        self.cache.set(cache_key, record, ttl_seconds=self.food_ttl_seconds)
        if self.debug:
            _logger.info(
                "FDC food: fdc_id=%s entries=%s label=%s",
                fdc_id,
                len(record.analytic_entries),
                record.label is not None,
            )
        return record

    async def resolve(self, food_name: str) -> RawNutrientRecord | None:
        """Return the record of the best search hit, or None when nothing matches."""
        foods = await self.search(food_name, limit=1)
        if not foods:
            return None
        return await self.get_record(foods[0].fdc_id)

    async def _call_with_retry(
        self, func: "Callable[[], Awaitable[dict[str, object]]]", *, action: str
    ) -> dict[str, object]:
        """Call the provider, retrying transport and HTTP errors."""
        total_attempts = self.retry_attempts + 1
        for attempt in range(1, total_attempts + 1):
            try:
                return await func()
            except httpx.HTTPError as exc:
                if self.debug:
                    _logger.warning(
                        "FDC %s failed (attempt %s/%s, status=%s): %s",
                        action,
                        attempt,
                        total_attempts,
                        _status_code(exc),
                        exc,
                    )
                if attempt == total_attempts:
                    raise
                await asyncio.sleep(self.retry_delay_seconds)
        raise AssertionError("unreachable")


def parse_food_record(payload: dict[str, object]) -> RawNutrientRecord:
    """Convert an FDC food payload into a raw nutrient record."""
    nutrients = payload.get("foodNutrients") or []
    entries = tuple(
        _parse_entry(item) for item in nutrients if isinstance(item, dict)
    )
    fdc_id = payload.get("fdcId")
    return RawNutrientRecord(
        analytic_entries=entries,
        label=_parse_label(payload),
        fdc_id=fdc_id if isinstance(fdc_id, int) else None,
        description=payload.get("description"),
    )


def parse_search_results(payload: dict[str, object]) -> list[FoodSummary]:
    """Convert an FDC search payload into summaries, skipping rows without an id."""
    foods = payload.get("foods") or []
    return [
        _parse_summary(food)
        for food in foods
        if isinstance(food, dict) and isinstance(food.get("fdcId"), int)
    ]


def _parse_summary(food: dict[str, object]) -> FoodSummary:
    return FoodSummary(
        fdc_id=food["fdcId"],
        description=food.get("description", ""),
        brand_owner=food.get("brandOwner"),
        brand_name=food.get("brandName"),
        data_type=food.get("dataType"),
    )


def _parse_entry(item: dict[str, object]) -> RawNutrientEntry:
    """Read name and amount from either flat or nested FDC nutrient rows."""
    nutrient_info = item.get("nutrient")
    nested_name = nutrient_info.get("name") if isinstance(nutrient_info, dict) else None
    name = item.get("nutrientName") or nested_name or ""
    value = item.get("amount")
    if value is None:
        value = item.get("value")
    return RawNutrientEntry(name=str(name), value=value)


def _parse_label(payload: dict[str, object]) -> LabelData | None:
    label = payload.get("labelNutrients")
    if not isinstance(label, dict):
        return None
    values = {}
    for field, key in _LABEL_KEYS.items():
        item = label.get(key)
        amount = item.get("value") if isinstance(item, dict) else None
        values[field] = coerce_amount(amount)
    return LabelData(
        profile=NutrientProfile(**values),
        serving_size=coerce_amount(payload.get("servingSize")),
        serving_unit=str(payload.get("servingSizeUnit") or ""),
    )


def _status_code(exc: httpx.HTTPError) -> str:
    if isinstance(exc, httpx.HTTPStatusError):
        return str(exc.response.status_code)
    return "n/a"
