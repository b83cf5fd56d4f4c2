"""Tests for the Supabase food cache adapter."""

from dataclasses import dataclass, field

from nutrition_resolver.adapters.supabase_food_cache_repository import (
    SupabaseFoodCacheRepository,
)
from nutrition_resolver.domain.fdc import FoodRecord, NutrientRecord


@dataclass
class FakeResponse:
    data: list[dict[str, object]] | None


@dataclass
class FakeTable:
    name: str
    responses: list[list[dict[str, object]]] = field(default_factory=list)
    last_filters: list[tuple[str, object]] = field(default_factory=list)
    last_order: tuple[str, bool] | None = None
    last_limit: int | None = None

    def queue(self, data: list[dict[str, object]]) -> None:
        self.responses.append(data)

    def select(self, *_args) -> "FakeTable":
        return self

    def eq(self, column: str, value) -> "FakeTable":  # type: ignore[no-untyped-def]
        self.last_filters.append((column, value))
        return self

    def ilike(self, column: str, value) -> "FakeTable":  # type: ignore[no-untyped-def]
        self.last_filters.append((column, value))
        return self

    def order(self, column: str, desc: bool = False) -> "FakeTable":
        self.last_order = (column, desc)
        return self

    def limit(self, count: int) -> "FakeTable":
        self.last_limit = count
        return self

    def execute(self) -> FakeResponse:
        data = self.responses.pop(0) if self.responses else []
        return FakeResponse(data=data)


@dataclass
class FakeRpc:
    calls: list[tuple[str, dict[str, object]]]
    name: str
    params: dict[str, object]

    def execute(self) -> FakeResponse:
        self.calls.append((self.name, self.params))
        return FakeResponse(data=None)


@dataclass
class FakeSupabaseClient:
    tables: dict[str, FakeTable] = field(default_factory=dict)
    rpc_calls: list[tuple[str, dict[str, object]]] = field(default_factory=list)

    def table(self, name: str) -> FakeTable:
        if name not in self.tables:
            self.tables[name] = FakeTable(name=name)
        return self.tables[name]

    def rpc(self, name: str, params: dict[str, object]) -> FakeRpc:
        return FakeRpc(calls=self.rpc_calls, name=name, params=params)


def _row(fdc_id: object = 175167, **overrides: object) -> dict[str, object]:
    row: dict[str, object] = {
        "fdc_id": fdc_id,
        "description": "Fish, salmon, Atlantic, farmed, cooked, dry heat",
        "data_type": "SR Legacy",
        "food_category": "Finfish and Shellfish Products",
        "serving_size": None,
        "serving_size_unit": None,
        "nutrients": {"schema_version": 1, "calories": 206, "protein": 22.1},
        "search_count": 4,
        "last_updated": "2024-05-01T12:00:00+00:00",
    }
    row.update(overrides)
    return row


def test_search_by_description_filters_and_orders() -> None:
    client = FakeSupabaseClient()
    table = client.table("usda_food_cache")
    table.queue([_row()])
    repository = SupabaseFoodCacheRepository(client)

    entries = repository.search_by_description("salmon", 5)

    assert table.last_filters == [("description", "%salmon%")]
    assert table.last_order == ("search_count", True)
    assert table.last_limit == 5
    assert len(entries) == 1
    entry = entries[0]
    assert entry.fdc_id == 175167
    assert entry.search_count == 4
    assert entry.last_updated is not None
    assert entry.record.nutrients.calories == 206
    assert entry.record.nutrients.fat is None


def test_search_skips_malformed_rows() -> None:
    client = FakeSupabaseClient()
    client.table("usda_food_cache").queue(
        [_row(fdc_id="not-a-number"), _row(fdc_id=2, description="Salmon, raw")]
    )
    repository = SupabaseFoodCacheRepository(client)

    entries = repository.search_by_description("salmon", 5)

    assert [entry.fdc_id for entry in entries] == [2]


def test_get_by_fdc_id() -> None:
    client = FakeSupabaseClient()
    table = client.table("usda_food_cache")
    table.queue([_row(last_updated=None, search_count=None)])
    repository = SupabaseFoodCacheRepository(client)

    entry = repository.get_by_fdc_id(175167)
    missing = repository.get_by_fdc_id(1)

    assert entry is not None
    assert entry.search_count == 0
    assert entry.last_updated is None
    assert ("fdc_id", 175167) in table.last_filters
    assert missing is None


def test_upsert_and_increment_use_rpc() -> None:
    client = FakeSupabaseClient()
    repository = SupabaseFoodCacheRepository(client)
    record = FoodRecord(
        fdc_id=175167,
        description="Fish, salmon, Atlantic, farmed, cooked, dry heat",
        data_type="SR Legacy",
        nutrients=NutrientRecord(calories=206, protein=22.1, fat=12.4),
    )

    repository.upsert(record)
    repository.increment_search_count(175167)

    (upsert_name, upsert_params), (increment_name, increment_params) = client.rpc_calls
    assert upsert_name == "upsert_usda_food_cache"
    payload = upsert_params["payload"]
    assert isinstance(payload, dict)
    assert payload["fdc_id"] == 175167
    assert payload["nutrients"]["calories"] == 206
    assert payload["nutrients"]["schema_version"] == 1
    assert "search_count" not in payload
    assert increment_name == "increment_usda_food_search_count"
    assert increment_params == {"p_fdc_id": 175167}
