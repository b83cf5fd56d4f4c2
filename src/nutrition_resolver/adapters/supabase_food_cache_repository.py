"""Supabase-backed FDC food cache."""

import logging
from dataclasses import dataclass
from datetime import datetime

from pydantic import ValidationError
from supabase import Client

from nutrition_resolver.domain.fdc import CacheEntry, FoodRecord
from nutrition_resolver.services.cache import FoodCacheRepository

_TABLE = "usda_food_cache"
_COLUMNS = (
    "fdc_id, description, data_type, food_category, brand_owner, brand_name, "
    "ingredients, serving_size, serving_size_unit, household_serving_full_text, "
    "nutrients, search_count, last_updated"
)

_logger = logging.getLogger(__name__)


@dataclass
class SupabaseFoodCacheRepository(FoodCacheRepository):
    """Supabase implementation of the permanent food cache.

    Writes go through Postgres functions so that concurrent lookups of the
    same FDC id increment one row instead of racing a read-modify-write.
    """

    client: Client

    def search_by_description(self, query: str, limit: int) -> list[CacheEntry]:
        """Return entries whose description contains the query."""
        response = (
            self.client.table(_TABLE)
            .select(_COLUMNS)
            .ilike("description", f"%{query}%")
            .order("search_count", desc=True)
            .limit(limit)
            .execute()
        )
        return _parse_rows(response.data or [])

    def get_by_fdc_id(self, fdc_id: int) -> CacheEntry | None:
        """Return the cached entry for an FDC id."""
        response = (
            self.client.table(_TABLE)
            .select(_COLUMNS)
            .eq("fdc_id", fdc_id)
            .limit(1)
            .execute()
        )
        entries = _parse_rows(response.data or [])
        return entries[0] if entries else None

    def upsert(self, record: FoodRecord) -> None:
        """Insert a record or increment its search count atomically."""
        self.client.rpc(
            "upsert_usda_food_cache", {"payload": _record_payload(record)}
        ).execute()

    def increment_search_count(self, fdc_id: int) -> None:
        """Increment the search count for a cached FDC id."""
        self.client.rpc(
            "increment_usda_food_search_count", {"p_fdc_id": fdc_id}
        ).execute()


def _record_payload(record: FoodRecord) -> dict[str, object]:
    return {
        "fdc_id": record.fdc_id,
        "description": record.description,
        "data_type": record.data_type,
        "food_category": record.food_category,
        "brand_owner": record.brand_owner,
        "brand_name": record.brand_name,
        "ingredients": record.ingredients,
        "serving_size": record.serving_size,
        "serving_size_unit": record.serving_size_unit,
        "household_serving_full_text": record.household_serving_full_text,
        "nutrients": record.nutrients.model_dump(),
    }


def _parse_rows(rows: list[dict[str, object]]) -> list[CacheEntry]:
    entries: list[CacheEntry] = []
    for row in rows:
        try:
            entries.append(_parse_row(row))
        except ValidationError as exc:
            _logger.warning(
                "Skipping malformed cache row %s: %s", row.get("fdc_id"), exc
            )
    return entries


def _parse_row(row: dict[str, object]) -> CacheEntry:
    record = FoodRecord.model_validate(
        {
            "fdc_id": row.get("fdc_id"),
            "description": row.get("description") or "",
            "data_type": row.get("data_type"),
            "food_category": row.get("food_category"),
            "brand_owner": row.get("brand_owner"),
            "brand_name": row.get("brand_name"),
            "ingredients": row.get("ingredients"),
            "serving_size": row.get("serving_size"),
            "serving_size_unit": row.get("serving_size_unit"),
            "household_serving_full_text": row.get("household_serving_full_text"),
            "nutrients": row.get("nutrients") or {},
        }
    )
    last_updated_raw = row.get("last_updated")
    last_updated = (
        datetime.fromisoformat(last_updated_raw)
        if isinstance(last_updated_raw, str) and last_updated_raw
        else None
    )
    return CacheEntry(
        record=record,
        search_count=int(row.get("search_count") or 0),
        last_updated=last_updated,
    )
