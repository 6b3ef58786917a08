"""Extraction of a canonical per-100g profile from raw nutrient lists."""

import math
import re
from collections.abc import Iterable, Mapping
from types import MappingProxyType

from nutrient_profiler.domain.nutrition import NutrientProfile, RawNutrientEntry

NUTRIENT_ALIASES: Mapping[str, tuple[str, ...]] = MappingProxyType(
    {
        "calories": ("Energy", "Energy (Atwater General Factors)"),
        "carbs": ("Carbohydrate, by difference", "Carbohydrate"),
        "sugar": ("Sugars, total including NLEA", "Sugars, total", "Sugar"),
        "protein": ("Protein",),
        "fat": ("Total lipid (fat)", "Fatty acids, total"),
        "fiber": ("Fiber, total dietary", "Dietary fiber", "Fiber"),
    }
)

_NUMERIC_PREFIX = re.compile(r"\s*[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")


def coerce_amount(value: object) -> float:
    """Convert a provider value to a non-negative float, 0.0 when unusable.

    Strings are read by their leading number, so "12.5 g" yields 12.5.
    """
    if isinstance(value, bool):
        return 0.0
    if isinstance(value, int | float):
        amount = float(value)
    elif isinstance(value, str):
        match = _NUMERIC_PREFIX.match(value)
        if match is None:
            return 0.0
        amount = float(match.group())
    else:
        return 0.0
    if not math.isfinite(amount) or amount < 0:
        return 0.0
    return amount


def extract_nutrients(entries: Iterable[RawNutrientEntry]) -> NutrientProfile:
    """Resolve each canonical nutrient from the first entry matching its aliases."""
    rows = [(entry.name.lower(), entry.value) for entry in entries]
    values = {
        field: _first_match(rows, aliases)
        for field, aliases in NUTRIENT_ALIASES.items()
    }
    return NutrientProfile(**values)


def _first_match(rows: list[tuple[str, object]], aliases: tuple[str, ...]) -> float:
    """Return the value of the first row whose name is one of the aliases."""
    wanted = {alias.lower() for alias in aliases}
    for name, value in rows:
        if name in wanted:
            return coerce_amount(value)
    return 0.0
