"""Tests for cache-first FDC lookups."""

import asyncio

from nutrition_resolver.domain.fdc import CacheEntry, FoodRecord
from nutrition_resolver.services.cache import InMemoryFoodCache
from nutrition_resolver.services.food_lookup import (
    FoodLookupService,
    extract_nutrients,
    parse_food_record,
)
from tests.conftest import SALMON, FakeFdcClient, fdc_food


class BrokenFoodCache(InMemoryFoodCache):
    """Cache whose reads and writes always fail."""

    def search_by_description(self, query: str, limit: int) -> list[CacheEntry]:
        raise ConnectionError("cache down")

    def get_by_fdc_id(self, fdc_id: int) -> CacheEntry | None:
        raise ConnectionError("cache down")

    def upsert(self, record: FoodRecord) -> None:
        raise ConnectionError("cache down")


def test_search_populates_cache_and_reuses_it(
    lookup_service: FoodLookupService,
    fdc_client: FakeFdcClient,
    food_cache: InMemoryFoodCache,
) -> None:
    fdc_client.search_results["salmon"] = [SALMON]

    first = asyncio.run(lookup_service.search("salmon"))
    second = asyncio.run(lookup_service.search("salmon"))

    assert [record.fdc_id for record in first] == [175167]
    assert [record.fdc_id for record in second] == [175167]
    assert fdc_client.search_calls == ["salmon"]
    entry = food_cache.get_by_fdc_id(175167)
    assert entry is not None
    assert entry.search_count == 2


def test_concurrent_lookups_share_one_row(
    lookup_service: FoodLookupService,
    fdc_client: FakeFdcClient,
    food_cache: InMemoryFoodCache,
) -> None:
    fdc_client.search_results["salmon"] = [SALMON]

    async def run() -> None:
        await asyncio.gather(
            lookup_service.search("salmon"), lookup_service.search("salmon")
        )

    asyncio.run(run())

    assert len(fdc_client.search_calls) == 2
    assert len(food_cache.search_by_description("salmon", 10)) == 1
    entry = food_cache.get_by_fdc_id(175167)
    assert entry is not None
    assert entry.search_count == 2


def test_search_degrades_to_empty_when_remote_fails(
    lookup_service: FoodLookupService, fdc_client: FakeFdcClient
) -> None:
    fdc_client.fail = True

    results = asyncio.run(lookup_service.search("salmon"))

    assert results == []
    assert fdc_client.search_calls == ["salmon"]


def test_search_times_out(food_cache: InMemoryFoodCache) -> None:
    client = FakeFdcClient(search_results={"salmon": [SALMON]}, delay_seconds=1.0)
    service = FoodLookupService(
        fdc_client=client, cache=food_cache, timeout_seconds=0.01
    )

    assert asyncio.run(service.search("salmon")) == []
    assert food_cache.get_by_fdc_id(175167) is None


def test_search_skips_malformed_records(
    lookup_service: FoodLookupService, fdc_client: FakeFdcClient
) -> None:
    fdc_client.search_results["salmon"] = [{"description": "no id"}, SALMON]

    results = asyncio.run(lookup_service.search("salmon"))

    assert [record.fdc_id for record in results] == [175167]


def test_cache_failures_do_not_block_remote_results() -> None:
    client = FakeFdcClient(search_results={"salmon": [SALMON]})
    service = FoodLookupService(fdc_client=client, cache=BrokenFoodCache())

    results = asyncio.run(service.search("salmon"))
    detail = asyncio.run(service.get_food(175167))

    assert [record.fdc_id for record in results] == [175167]
    assert detail is None


def test_get_food_reads_detail_shape_and_caches(
    lookup_service: FoodLookupService, fdc_client: FakeFdcClient
) -> None:
    fdc_client.details[171077] = {
        "fdcId": 171077,
        "description": "Chicken, broiler, breast, meat only, cooked, roasted",
        "dataType": "SR Legacy",
        "foodCategory": {"description": "Poultry Products"},
        "servingSize": "",
        "foodNutrients": [
            {"nutrient": {"id": 1008, "name": "Energy"}, "amount": 165},
            {"nutrient": {"id": 1003, "name": "Protein"}, "amount": 31.0},
            {"nutrient": {"id": 1004, "name": "Total lipid (fat)"}, "amount": 3.57},
            {"nutrient": {"id": 1093, "name": "Sodium, Na"}, "amount": 74},
        ],
    }

    first = asyncio.run(lookup_service.get_food(171077))
    second = asyncio.run(lookup_service.get_food(171077))

    assert first is not None
    assert first.food_category == "Poultry Products"
    assert first.serving_size is None
    assert first.nutrients.calories == 165
    assert first.nutrients.sodium == 74
    assert first.nutrients.carbs is None
    assert second == first
    assert fdc_client.food_calls == [171077]


def test_get_food_returns_none_when_unknown(lookup_service: FoodLookupService) -> None:
    assert asyncio.run(lookup_service.get_food(1)) is None


def test_extract_nutrients_prefers_kcal_energy_ids() -> None:
    nutrients = extract_nutrients(
        [
            {"nutrientId": 2047, "nutrientName": "Energy (Atwater General Factors)",
             "unitName": "KCAL", "value": 120},
            {"nutrientId": 1062, "nutrientName": "Energy", "unitName": "kJ",
             "value": 500},
            {"nutrientId": 1008, "nutrientName": "Energy", "unitName": "KCAL",
             "value": 118},
            {"nutrientId": 1063, "nutrientName": "Sugars, Total", "value": 4.1},
            {"nutrientName": "Vitamin B-12", "unitName": "UG", "value": 0.3},
            {"nutrientName": "Vitamin D (D2 + D3), International Units",
             "unitName": "IU", "value": 40},
        ]
    )

    assert nutrients.calories == 118
    assert nutrients.sugar == 4.1
    assert nutrients.vitamin_b12 == 0.3
    assert nutrients.vitamin_d is None


def test_extract_nutrients_falls_back_to_atwater_energy() -> None:
    record = parse_food_record(
        {
            "fdcId": 2345,
            "description": "Tofu, raw, firm",
            "foodNutrients": [
                {"nutrientId": 2048, "unitName": "KCAL", "value": 144},
                {"nutrientId": 1003, "value": 17.3},
            ],
        }
    )

    assert record.nutrients.calories == 144
    assert record.nutrients.protein == 17.3


def test_parse_food_record_reads_search_shape() -> None:
    record = parse_food_record(fdc_food(5, "Apples, raw", calories=52, protein=0.3))

    assert record.data_type == "SR Legacy"
    assert record.nutrients.to_profile().calories == 52
    assert record.nutrients.to_profile().fat == 0.0
