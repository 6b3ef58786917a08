"""Meal analysis endpoints with simple token auth."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

import httpx
from fastapi import (
    APIRouter,
    Depends,
    Header,
    HTTPException,
    Query,
    Request,
    status,
)

from nutrient_profiler.api.models import AnalysisOut, AnalyzeRequest, HistoryItemOut
from nutrient_profiler.domain.analysis import MealAnalysisRequest

if TYPE_CHECKING:
    from nutrient_profiler.containers import AppContainer

router = APIRouter(prefix="/meals", tags=["meals"])

_logger = logging.getLogger(__name__)


def _get_api_token(request: Request) -> str:
    container: AppContainer = request.app.state.container
    return container.settings.api_token


async def require_api_token(
    x_api_token: str | None = Header(default=None),
    api_token: str = Depends(_get_api_token),
) -> None:
    """Ensure requests include a valid API token."""
    if not x_api_token or x_api_token != api_token:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED)


@router.post("/analyze", dependencies=[Depends(require_api_token)])
async def analyze_meal(payload: AnalyzeRequest, request: Request) -> AnalysisOut:
    """Look up a food, normalize it to the portion and store the result."""
    container: AppContainer = request.app.state.container
    try:
        analysis = await container.analysis_service.analyze(
            MealAnalysisRequest(
                user_id=payload.user_id,
                food_name=payload.food_name,
                portion_grams=payload.portion_grams,
                estimated_portion_grams=payload.estimated_portion_grams,
                confidence=payload.confidence,
            )
        )
    except httpx.HTTPError as exc:
        _logger.exception("Nutrition lookup failed", extra={"food": payload.food_name})
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail="Nutrition lookup failed.",
        ) from exc
    return AnalysisOut.from_domain(analysis)


@router.get("/history/{user_id}", dependencies=[Depends(require_api_token)])
async def meal_history(
    user_id: UUID, request: Request, limit: int = Query(default=20, ge=1, le=100)
) -> dict[str, list[HistoryItemOut]]:
    """Return recent analyses for a user."""
    container: AppContainer = request.app.state.container
    records = container.history_service.list_history(user_id, limit=limit)
    return {"items": [HistoryItemOut.from_domain(record) for record in records]}
