"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI, HTTPException, Query, Request, status

from nutrient_profiler.api.meals import router as meals_router
from nutrient_profiler.api.models import NormalizedOut, NormalizeRequest
from nutrient_profiler.app_logging import configure_logging
from nutrient_profiler.containers import AppContainer
from nutrient_profiler.domain.nutrition import FoodSummary
from nutrient_profiler.services.normalizer import normalize


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)
    thresholds = container.settings.risk_thresholds()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    app.include_router(meals_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.post("/nutrition/normalize")
    async def normalize_record(payload: NormalizeRequest) -> NormalizedOut:
        """Normalize a raw record to the requested portion."""
        result = normalize(payload.to_record(), payload.portion_grams, thresholds)
        return NormalizedOut.from_domain(result)

    @app.get("/nutrition/search")
    async def search_foods(
        query: str, request: Request, limit: int = Query(default=5, ge=1, le=50)
    ) -> dict[str, list[FoodSummary]]:
        """Search the nutrition provider by food name."""
        state_container: AppContainer = request.app.state.container
        try:
            foods = await state_container.nutrition_service.search(query, limit=limit)
        except httpx.HTTPError as exc:
            logger.exception("Nutrition search failed", extra={"query": query})
            raise HTTPException(
                status_code=status.HTTP_502_BAD_GATEWAY,
                detail="Nutrition search failed.",
            ) from exc
        return {"foods": foods}

    return app
