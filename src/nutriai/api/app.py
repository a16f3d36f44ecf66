"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Request, status

from nutriai.api.models import MealRequest, ProfileUpdateRequest, WaterRequest
from nutriai.app_logging import configure_logging
from nutriai.containers import AppContainer
from nutriai.services.aggregation import DailyProgress
from nutriai.services.catalog import FoodNotFoundError
from nutriai.services.identification import ScanResult
from nutriai.services.serialization import (
    encode_food_dict,
    encode_log_dict,
    encode_profile_dict,
)
from nutriai.services.stats import PeriodSummary

_REQUIRED_PROFILE_FIELDS = ("name", "email", "goals")
_UNPROCESSABLE = 422


def create_app(container: AppContainer) -> FastAPI:  # noqa: PLR0915
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        state_container: AppContainer = app.state.container
        await state_container.state.initialize()
        logger.info("Nutrition state loaded")
        yield
        try:
            await state_container.close_resources()
        except Exception:
            logger.exception("Failed to close resources")

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/state")
    async def app_state(request: Request) -> dict[str, bool]:
        """Return loading and persistence flags."""
        state = _container(request).state
        return {
            "isLoading": state.is_loading,
            "persistenceDegraded": state.persistence_degraded,
        }

    @app.get("/profile")
    async def get_profile(request: Request) -> dict[str, object]:
        """Return the current user profile."""
        return encode_profile_dict(_container(request).state.profile)

    @app.patch("/profile")
    async def update_profile(
        body: ProfileUpdateRequest, request: Request
    ) -> dict[str, object]:
        """Merge profile fields; a goals object replaces all goals."""
        partial = body.model_dump(exclude_unset=True)
        for name in _REQUIRED_PROFILE_FIELDS:
            if name in partial and partial[name] is None:
                partial.pop(name)
        try:
            profile = _container(request).state.update_profile(partial)
        except ValueError as exc:
            raise HTTPException(status_code=_UNPROCESSABLE, detail=str(exc)) from exc
        return encode_profile_dict(profile)

    @app.get("/logs/today")
    async def today_log(request: Request) -> dict[str, object]:
        """Return today's log."""
        return encode_log_dict(_container(request).state.today_log)

    @app.get("/logs/today/progress")
    async def today_progress(request: Request) -> dict[str, float]:
        """Return today's progress percentages."""
        return _format_progress(_container(request).state.progress())

    @app.get("/logs/week")
    async def week_summary(request: Request) -> dict[str, object]:
        """Return week-to-date daily logs and averages."""
        return _format_period(_container(request).stats_service.get_week())

    @app.post("/logs/today/meals", status_code=status.HTTP_201_CREATED)
    async def add_meal(body: MealRequest, request: Request) -> dict[str, object]:
        """Log a catalog food for today."""
        try:
            log = _container(request).state.log_meal(
                body.food_id, body.quantity, body.meal_type
            )
        except FoodNotFoundError as exc:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"Unknown food: {body.food_id}",
            ) from exc
        except ValueError as exc:
            raise HTTPException(status_code=_UNPROCESSABLE, detail=str(exc)) from exc
        return encode_log_dict(log)

    @app.post("/logs/today/water")
    async def add_water(body: WaterRequest, request: Request) -> dict[str, object]:
        """Add water to today's intake."""
        try:
            log = _container(request).state.add_water(body.amount_ml)
        except ValueError as exc:
            raise HTTPException(status_code=_UNPROCESSABLE, detail=str(exc)) from exc
        return encode_log_dict(log)

    @app.get("/foods")
    async def search_foods(
        request: Request, query: str = "", limit: int | None = None
    ) -> dict[str, object]:
        """Search the food catalog by name."""
        foods = _container(request).catalog.search(query, limit=limit)
        return {"foods": [encode_food_dict(food) for food in foods]}

    @app.post("/foods/identify")
    async def identify_food(request: Request) -> dict[str, object]:
        """Identify a food from a raw image body."""
        image_bytes = await request.body()
        result = await _container(request).identification_service.scan(image_bytes)
        return _format_scan(result)

    return app


def _container(request: Request) -> AppContainer:
    return request.app.state.container


def _format_progress(progress: DailyProgress) -> dict[str, float]:
    return {
        "calories": progress.calories,
        "protein": progress.protein,
        "carbs": progress.carbs,
        "fat": progress.fat,
        "water": progress.water,
    }


def _format_period(summary: PeriodSummary) -> dict[str, object]:
    return {
        "daily": [encode_log_dict(log) for log in summary.daily],
        "averages": {
            "calories": summary.avg_calories,
            "protein": summary.avg_protein,
            "carbs": summary.avg_carbs,
            "fat": summary.avg_fat,
            "water": summary.avg_water,
        },
    }


def _format_scan(result: ScanResult) -> dict[str, object]:
    payload: dict[str, object] = {
        "label": result.label,
        "match": encode_food_dict(result.match) if result.match else None,
        "candidates": [encode_food_dict(food) for food in result.candidates],
    }
    if result.notice:
        payload["notice"] = result.notice
    return payload
