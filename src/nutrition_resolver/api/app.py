"""FastAPI application factory."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Request, status

from nutrition_resolver.api.models import BatchRequest, PortionRequest, ResolveRequest
from nutrition_resolver.app_logging import configure_logging
from nutrition_resolver.containers import AppContainer
from nutrition_resolver.domain.fdc import FoodRecord
from nutrition_resolver.domain.nutrition import NutritionProfile


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.debug)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.post("/nutrition/resolve")
    async def resolve(payload: ResolveRequest, request: Request) -> dict[str, object]:
        """Resolve nutrition for a food and measurement."""
        state_container: AppContainer = request.app.state.container
        profile = await state_container.nutrition_service.resolve_nutrition(
            payload.food_name, payload.measurement
        )
        return _format_profile(profile)

    @app.post("/nutrition/portion")
    async def resolve_portion(
        payload: PortionRequest, request: Request
    ) -> dict[str, object]:
        """Resolve nutrition for a food weighed in grams."""
        state_container: AppContainer = request.app.state.container
        profile = await state_container.nutrition_service.resolve_by_portion_grams(
            payload.food_name, payload.grams
        )
        return _format_profile(profile)

    @app.post("/nutrition/batch")
    async def resolve_batch(
        payload: BatchRequest, request: Request
    ) -> dict[str, object]:
        """Resolve several foods concurrently."""
        state_container: AppContainer = request.app.state.container
        profiles = await state_container.nutrition_service.resolve_many(
            [(item.food_name, item.measurement) for item in payload.items]
        )
        return {"items": [_format_profile(profile) for profile in profiles]}

    @app.get("/foods/{fdc_id}")
    async def food_detail(fdc_id: int, request: Request) -> dict[str, object]:
        """Return a cached or freshly fetched FDC record."""
        state_container: AppContainer = request.app.state.container
        record = await state_container.food_lookup_service.get_food(fdc_id)
        if record is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
        return _format_food(record)

    return app


def _format_profile(profile: NutritionProfile) -> dict[str, object]:
    return {
        "name": profile.name,
        "measurement": profile.measurement,
        "quantity": profile.quantity,
        "unit": profile.unit,
        "grams": profile.grams,
        "estimated_calories": profile.estimated_calories,
        "nutrients": profile.nutrients.as_dict(),
        "nutrition_per_100g": profile.nutrition_per_100g.as_dict(),
        "provenance": profile.provenance.value,
        "quality_score": profile.quality_score,
        "note": profile.note,
        "equivalent_measurement": profile.equivalent_measurement,
        "variation_note": profile.variation_note,
    }


def _format_food(record: FoodRecord) -> dict[str, object]:
    return {
        "fdc_id": record.fdc_id,
        "description": record.description,
        "data_type": record.data_type,
        "food_category": record.food_category,
        "brand_owner": record.brand_owner,
        "brand_name": record.brand_name,
        "serving_size": record.serving_size,
        "serving_size_unit": record.serving_size_unit,
        "nutrients": record.nutrients.model_dump(exclude={"schema_version"}),
    }
