"""Shared test fixtures."""

import asyncio
from dataclasses import dataclass, field

import httpx
import pytest

from nutrition_resolver.adapters.fdc_client import FdcClient
from nutrition_resolver.config import Settings
from nutrition_resolver.containers import AppContainer
from nutrition_resolver.services.aliases import AliasMatcher
from nutrition_resolver.services.cache import InMemoryFoodCache
from nutrition_resolver.services.food_lookup import FoodLookupService
from nutrition_resolver.services.nutrition import NutritionService
from nutrition_resolver.services.scoring import CandidateSelector
from nutrition_resolver.services.units import UnitConverter


def fdc_food(
    fdc_id: int,
    description: str,
    *,
    data_type: str = "SR Legacy",
    serving_size: float | None = None,
    **nutrients: float,
) -> dict[str, object]:
    """Build an FDC search hit with nutrients keyed by FDC nutrient id."""
    ids = {
        "calories": 1008,
        "protein": 1003,
        "fat": 1004,
        "carbs": 1005,
        "fiber": 1079,
        "sugar": 2000,
        "sodium": 1093,
        "iron": 1089,
        "calcium": 1087,
    }
    payload: dict[str, object] = {
        "fdcId": fdc_id,
        "description": description,
        "dataType": data_type,
        "foodNutrients": [
            {"nutrientId": ids[name], "nutrientName": name, "value": value}
            for name, value in nutrients.items()
        ],
    }
    if serving_size is not None:
        payload["servingSize"] = serving_size
        payload["servingSizeUnit"] = "g"
    return payload


SALMON = fdc_food(
    175167,
    "Fish, salmon, Atlantic, farmed, cooked, dry heat",
    calories=206,
    protein=22.1,
    fat=12.4,
    carbs=0,
    sodium=61,
)


@dataclass
class FakeFdcClient(FdcClient):
    """Fake FDC client returning canned results per query."""

    search_results: dict[str, list[dict[str, object]]] = field(default_factory=dict)
    details: dict[int, dict[str, object]] = field(default_factory=dict)
    fail: bool = False
    delay_seconds: float = 0.0
    search_calls: list[str] = field(default_factory=list)
    food_calls: list[int] = field(default_factory=list)

    async def search_foods(self, query: str, page_size: int = 5) -> dict[str, object]:
        self.search_calls.append(query)
        await asyncio.sleep(self.delay_seconds)
        if self.fail:
            raise httpx.ConnectError("FDC unreachable")
        return {"foods": list(self.search_results.get(query, []))[:page_size]}

    async def get_food(self, fdc_id: int) -> dict[str, object]:
        self.food_calls.append(fdc_id)
        await asyncio.sleep(self.delay_seconds)
        if self.fail:
            raise httpx.ConnectError("FDC unreachable")
        if fdc_id not in self.details:
            request = httpx.Request("GET", f"https://fdc.test/food/{fdc_id}")
            response = httpx.Response(404, request=request)
            raise httpx.HTTPStatusError("Not found", request=request, response=response)
        return self.details[fdc_id]


def build_nutrition_service(
    fdc_client: FakeFdcClient, cache: InMemoryFoodCache | None = None
) -> NutritionService:
    lookup = FoodLookupService(
        fdc_client=fdc_client,
        cache=cache if cache is not None else InMemoryFoodCache(),
        timeout_seconds=1.0,
    )
    return NutritionService(
        selector=CandidateSelector(lookup),
        alias_matcher=AliasMatcher(),
        unit_converter=UnitConverter(),
    )


@pytest.fixture
def settings() -> Settings:
    return Settings(
        fdc_api_key="fdc-key",
        fdc_base_url="https://fdc.test/v1",
        supabase_url=None,
        supabase_service_key=None,
    )


@pytest.fixture
def fdc_client() -> FakeFdcClient:
    return FakeFdcClient()


@pytest.fixture
def food_cache() -> InMemoryFoodCache:
    return InMemoryFoodCache()


@pytest.fixture
def lookup_service(
    fdc_client: FakeFdcClient, food_cache: InMemoryFoodCache
) -> FoodLookupService:
    return FoodLookupService(
        fdc_client=fdc_client, cache=food_cache, timeout_seconds=1.0
    )


@pytest.fixture
def nutrition_service(
    fdc_client: FakeFdcClient, food_cache: InMemoryFoodCache
) -> NutritionService:
    return build_nutrition_service(fdc_client, food_cache)


@pytest.fixture
def container(
    settings: Settings,
    food_cache: InMemoryFoodCache,
    nutrition_service: NutritionService,
) -> AppContainer:
    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        food_cache=food_cache,
        food_lookup_service=nutrition_service.selector.lookup,
        nutrition_service=nutrition_service,
        close_resources=close_resources,
    )
