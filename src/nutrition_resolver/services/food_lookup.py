"""Cache-first FDC lookups."""

import asyncio
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from pydantic import ValidationError

from nutrition_resolver.adapters.fdc_client import FdcClient
from nutrition_resolver.domain.fdc import CacheEntry, FoodRecord, NutrientRecord
from nutrition_resolver.services.cache import FoodCacheRepository

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

# Listed in priority order; energy falls back to the Atwater factors.
_NUTRIENT_IDS: dict[str, tuple[int, ...]] = {
    "calories": (1008, 2047, 2048),
    "protein": (1003,),
    "carbs": (1005,),
    "fat": (1004,),
    "fiber": (1079,),
    "sugar": (2000, 1063),
    "sodium": (1093,),
    "iron": (1089,),
    "calcium": (1087,),
    "zinc": (1095,),
    "magnesium": (1090,),
    "vitamin_c": (1162,),
    "vitamin_d": (1114,),
    "vitamin_b12": (1178,),
    "folate": (1177, 1190),
}

_NUTRIENT_NAME_PREFIXES: dict[str, tuple[str, ...]] = {
    "calories": ("energy",),
    "protein": ("protein",),
    "carbs": ("carbohydrate",),
    "fat": ("total lipid",),
    "fiber": ("fiber",),
    "sugar": ("sugars, total", "total sugars"),
    "sodium": ("sodium",),
    "iron": ("iron",),
    "calcium": ("calcium",),
    "zinc": ("zinc",),
    "magnesium": ("magnesium",),
    "vitamin_c": ("vitamin c",),
    "vitamin_d": ("vitamin d (d2 + d3)",),
    "vitamin_b12": ("vitamin b-12", "vitamin b12"),
    "folate": ("folate, total", "folate, dfe"),
}

_IGNORED_UNITS = {"kj", "iu"}

_logger = logging.getLogger(__name__)


class RemoteUnavailableError(RuntimeError):
    """Raised when FDC cannot be reached or returns an unusable response."""


@dataclass
class FoodLookupService:
    """Look up FDC records through the permanent cache store."""

    fdc_client: FdcClient
    cache: FoodCacheRepository
    timeout_seconds: float = 10.0
    debug: bool = False

    async def search(self, query: str, page_size: int = 5) -> list[FoodRecord]:
        """Return records for a query, from the cache when it has any.

        Remote failures degrade to whatever the cache holds, possibly nothing.
        """
        cached = self._cached_search(query, page_size)
        if cached:
            self._increment(cached[0].fdc_id)
            if self.debug:
                _logger.info(
                    "Food search cache hit: query=%s rows=%s", query, len(cached)
                )
            return [entry.record for entry in cached]

        try:
            payload = await self._call_remote(
                lambda: self.fdc_client.search_foods(query, page_size=page_size),
                action="search",
            )
        except RemoteUnavailableError:
            return [entry.record for entry in self._cached_search(query, page_size)]

        foods = payload.get("foods") or []
        parsed = (_parse_record(food) for food in foods if isinstance(food, dict))
        records = [record for record in parsed if record is not None]
        for record in records:
            self._store(record)
        if self.debug:
            _logger.info("Food search FDC: query=%s results=%s", query, len(records))
        return records

    async def get_food(self, fdc_id: int) -> FoodRecord | None:
        """Return the record for an FDC id, or ``None`` if unavailable."""
        cached = self._cached_get(fdc_id)
        if cached is not None:
            self._increment(fdc_id)
            return cached.record

        try:
            payload = await self._call_remote(
                lambda: self.fdc_client.get_food(fdc_id),
                action=f"get_food:{fdc_id}",
            )
        except RemoteUnavailableError:
            return None

        record = _parse_record(payload)
        if record is None:
            return None
        self._store(record)
        if self.debug:
            _logger.info("Food detail FDC: fdc_id=%s", fdc_id)
        return record

    async def _call_remote(
        self, func: "Callable[[], Awaitable[dict[str, object]]]", *, action: str
    ) -> dict[str, object]:
        """Call FDC once within the configured timeout."""
        try:
            payload = await asyncio.wait_for(func(), timeout=self.timeout_seconds)
        except Exception as exc:
            _logger.warning(
                "FDC %s failed (status=%s): %r",
                action,
                _status_code_from_exception(exc),
                exc,
            )
            raise RemoteUnavailableError(f"FDC {action} failed") from exc
        if not isinstance(payload, dict):
            _logger.warning("FDC %s returned a non-object payload", action)
            raise RemoteUnavailableError(f"FDC {action} returned malformed data")
        return payload

    def _cached_search(self, query: str, limit: int) -> list[CacheEntry]:
        try:
            return self.cache.search_by_description(query, limit)
        except Exception:
            _logger.exception("Cache search failed: query=%s", query)
            return []

    def _cached_get(self, fdc_id: int) -> CacheEntry | None:
        try:
            return self.cache.get_by_fdc_id(fdc_id)
        except Exception:
            _logger.exception("Cache read failed: fdc_id=%s", fdc_id)
            return None

    def _store(self, record: FoodRecord) -> None:
        try:
            self.cache.upsert(record)
        except Exception:
            _logger.exception("Cache upsert failed: fdc_id=%s", record.fdc_id)

    def _increment(self, fdc_id: int) -> None:
        try:
            self.cache.increment_search_count(fdc_id)
        except Exception:
            _logger.exception("Cache increment failed: fdc_id=%s", fdc_id)


def parse_food_record(payload: dict[str, object]) -> FoodRecord:
    """Build a food record from an FDC search hit or detail response."""
    food_nutrients = payload.get("foodNutrients")
    if not isinstance(food_nutrients, list):
        food_nutrients = []
    nutrients = extract_nutrients(food_nutrients)
    fields = {key: value for key, value in payload.items() if key != "nutrients"}
    return FoodRecord.model_validate({**fields, "nutrients": nutrients})


def extract_nutrients(food_nutrients: list[object]) -> NutrientRecord:
    """Map FDC nutrient rows onto the typed nutrient record.

    Accepts both the search shape (``nutrientId``, ``nutrientName``,
    ``value``) and the detail shape (``nutrient.id``, ``nutrient.name``,
    ``amount``). Nutrients that are not reported stay ``None``.
    """
    found: dict[str, tuple[int, float]] = {}
    for row in food_nutrients:
        if not isinstance(row, dict):
            continue
        info = row.get("nutrient")
        if not isinstance(info, dict):
            info = {}
        nutrient_id = info.get("id") or row.get("nutrientId")
        name = str(info.get("name") or row.get("nutrientName") or "").lower()
        unit = str(info.get("unitName") or row.get("unitName") or "").lower()
        amount = row.get("amount", row.get("value"))
        if unit in _IGNORED_UNITS:
            continue
        if isinstance(amount, bool) or not isinstance(amount, int | float):
            continue
        for field_name, ids in _NUTRIENT_IDS.items():
            if nutrient_id in ids:
                rank = ids.index(nutrient_id)
            elif name.startswith(_NUTRIENT_NAME_PREFIXES[field_name]):
                rank = len(ids)
            else:
                continue
            current = found.get(field_name)
            if current is None or rank < current[0]:
                found[field_name] = (rank, float(amount))
            break
    return NutrientRecord(**{key: value for key, (_, value) in found.items()})


def _parse_record(payload: dict[str, object]) -> FoodRecord | None:
    try:
        return parse_food_record(payload)
    except ValidationError as exc:
        _logger.warning(
            "Skipping malformed FDC record %s: %s", payload.get("fdcId"), exc
        )
        return None


def _status_code_from_exception(exc: Exception) -> str:
    """Extract HTTP status code from an exception, if available."""
    response = getattr(exc, "response", None)
    status_code = getattr(response, "status_code", None)
    if isinstance(status_code, int):
        return str(status_code)
    return "n/a"
