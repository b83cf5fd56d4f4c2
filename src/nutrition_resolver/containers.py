"""Dependency container wiring for the resolver."""

import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from nutrition_resolver.adapters.fdc_client import HttpxFdcClient
from nutrition_resolver.adapters.supabase_food_cache_repository import (
    SupabaseFoodCacheRepository,
)
from nutrition_resolver.config import DEMO_API_KEY, Settings
from nutrition_resolver.services.aliases import AliasMatcher
from nutrition_resolver.services.cache import FoodCacheRepository, InMemoryFoodCache
from nutrition_resolver.services.candy import CandyMatcher
from nutrition_resolver.services.food_lookup import FoodLookupService
from nutrition_resolver.services.nutrition import NutritionService
from nutrition_resolver.services.scoring import CandidateSelector
from nutrition_resolver.services.units import UnitConverter

_logger = logging.getLogger(__name__)


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    food_cache: FoodCacheRepository
    food_lookup_service: FoodLookupService
    nutrition_service: NutritionService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    if resolved_settings.fdc_api_key == DEMO_API_KEY:
        _logger.warning("FDC_API_KEY is not set; using the rate-limited DEMO_KEY")

    food_cache: FoodCacheRepository
    if resolved_settings.uses_supabase_cache:
        supabase_client = create_client(
            resolved_settings.supabase_url, resolved_settings.supabase_service_key
        )
        food_cache = SupabaseFoodCacheRepository(supabase_client)
    else:
        _logger.warning("Supabase is not configured; using an in-process food cache")
        food_cache = InMemoryFoodCache()

    fdc_client = HttpxFdcClient.create(
        api_key=resolved_settings.fdc_api_key,
        base_url=resolved_settings.fdc_base_url,
        timeout_seconds=resolved_settings.fdc_timeout_seconds,
    )
    food_lookup_service = FoodLookupService(
        fdc_client=fdc_client,
        cache=food_cache,
        timeout_seconds=resolved_settings.fdc_timeout_seconds,
        debug=resolved_settings.debug,
    )
    nutrition_service = NutritionService(
        selector=CandidateSelector(food_lookup_service),
        alias_matcher=AliasMatcher(),
        unit_converter=UnitConverter(),
        candy_matcher=CandyMatcher(),
        debug=resolved_settings.debug,
    )

    async def close_resources() -> None:
        await fdc_client.close()

    return AppContainer(
        settings=resolved_settings,
        food_cache=food_cache,
        food_lookup_service=food_lookup_service,
        nutrition_service=nutrition_service,
        close_resources=close_resources,
    )
