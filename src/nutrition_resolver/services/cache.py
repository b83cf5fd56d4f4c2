"""Food cache store abstractions."""

from dataclasses import dataclass, replace
from datetime import UTC, datetime
from typing import Protocol

from nutrition_resolver.domain.fdc import CacheEntry, FoodRecord


class FoodCacheRepository(Protocol):
    """Permanent warm store of FDC records keyed by FDC id."""

    def search_by_description(self, query: str, limit: int) -> list[CacheEntry]:
        """Return entries whose description contains the query, most popular first."""

    def get_by_fdc_id(self, fdc_id: int) -> CacheEntry | None:
        """Return the entry for an FDC id, if cached."""

    def upsert(self, record: FoodRecord) -> None:
        """Insert a record, or bump its search count if already cached."""

    def increment_search_count(self, fdc_id: int) -> None:
        """Record another lookup of a cached FDC id."""


@dataclass
class InMemoryFoodCache(FoodCacheRepository):
    """In-process cache store for single-process deployments and tests."""

    _entries: dict[int, CacheEntry]

    def __init__(self) -> None:
        self._entries = {}

    def search_by_description(self, query: str, limit: int) -> list[CacheEntry]:
        """Return matching entries ordered by search count."""
        needle = query.lower().strip()
        if not needle or limit <= 0:
            return []
        matches = [
            entry
            for entry in self._entries.values()
            if needle in entry.record.description.lower()
        ]
        matches.sort(key=lambda entry: entry.search_count, reverse=True)
        return matches[:limit]

    def get_by_fdc_id(self, fdc_id: int) -> CacheEntry | None:
        """Return the cached entry for an FDC id."""
        return self._entries.get(fdc_id)

    def upsert(self, record: FoodRecord) -> None:
        """Insert with a count of one, or increment on conflict."""
        now = datetime.now(tz=UTC)
        existing = self._entries.get(record.fdc_id)
        if existing is None:
            self._entries[record.fdc_id] = CacheEntry(
                record=record, search_count=1, last_updated=now
            )
            return
        self._entries[record.fdc_id] = CacheEntry(
            record=record,
            search_count=existing.search_count + 1,
            last_updated=now,
        )

    def increment_search_count(self, fdc_id: int) -> None:
        """Bump the search count for an existing entry."""
        existing = self._entries.get(fdc_id)
        if existing is None:
            return
        self._entries[fdc_id] = replace(
            existing,
            search_count=existing.search_count + 1,
            last_updated=datetime.now(tz=UTC),
        )
