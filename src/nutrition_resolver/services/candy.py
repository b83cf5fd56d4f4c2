"""Candy lookup by name, alias and category keyword."""

from dataclasses import dataclass, field

from nutrition_resolver.data.candy import (
    CANDY_CATEGORY_KEYWORDS,
    CANDY_EXCLUDES,
    CANDY_FOODS,
    CANDY_TERMS,
)
from nutrition_resolver.domain.nutrition import AliasEntry
from nutrition_resolver.services.aliases import contains_phrase


def is_candy_related(name: str) -> bool:
    """Return whether ``name`` reads as a candy rather than a dish using one."""
    normalized = name.lower().strip()
    if any(word in normalized for word in CANDY_EXCLUDES):
        return False
    return any(contains_phrase(normalized, term) for term in CANDY_TERMS)


@dataclass
class CandyMatcher:
    """Find the candy entry for a normalized food name."""

    entries: tuple[AliasEntry, ...] = CANDY_FOODS
    category_keywords: tuple[tuple[tuple[str, ...], str], ...] = (
        CANDY_CATEGORY_KEYWORDS
    )
    _by_key: dict[str, AliasEntry] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._by_key = {entry.canonical_key: entry for entry in self.entries}

    def match(self, name: str) -> AliasEntry | None:
        """Return the entry matched by name, alias, then category keyword."""
        normalized = name.lower().strip()
        if not normalized or not is_candy_related(normalized):
            return None

        for entry in self.entries:
            if normalized == entry.display_name.lower():
                return entry

        for entry in self.entries:
            if any(
                contains_phrase(normalized, alias) or contains_phrase(alias, normalized)
                for alias in entry.aliases
            ):
                return entry

        for keywords, key in self.category_keywords:
            if any(contains_phrase(normalized, keyword) for keyword in keywords):
                return self._by_key.get(key)
        return None
