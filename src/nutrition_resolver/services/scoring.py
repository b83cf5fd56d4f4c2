"""Search-term generation, candidate validation and scoring."""

from dataclasses import dataclass

from nutrition_resolver.data.search_terms import (
    ALTERNATE_SEARCH_TERMS,
    SEARCH_STOP_WORDS,
)
from nutrition_resolver.domain.fdc import FoodRecord
from nutrition_resolver.domain.nutrition import FoodCandidate, Provenance
from nutrition_resolver.services.food_lookup import FoodLookupService
from nutrition_resolver.services.normalizer import strip_descriptors

MAX_CALORIES_PER_100G = 2000
_GRAM_UNITS = {"g", "grm", "gram", "grams", "ml", "mlt"}


def build_search_terms(name: str) -> list[str]:
    """Return search terms for a normalized name, most promising first.

    The original name always leads; the remaining terms are ordered
    longest first so specific phrases are tried before single words.
    """
    original = name.strip()
    if not original:
        return []
    terms = [original]

    stripped = strip_descriptors(original)
    if stripped:
        terms.append(stripped)

    words = original.split()
    for key, alternates in ALTERNATE_SEARCH_TERMS.items():
        if (
            key in original
            or words[0] in key.split()
            or any(len(word) > 3 and word in key for word in words)
        ):
            terms.extend(alternates)

    if len(words) > 1:
        terms.extend(
            word for word in words if len(word) > 3 and word not in SEARCH_STOP_WORDS
        )

    unique = list(dict.fromkeys(terms))
    rest = sorted(unique[1:], key=len, reverse=True)
    return [original, *rest]


def is_valid(record: FoodRecord) -> bool:
    """Return whether a record has usable per-100g macro data."""
    nutrients = record.nutrients
    if nutrients.calories is None or nutrients.protein is None or nutrients.fat is None:
        return False
    if not 0 < nutrients.calories < MAX_CALORIES_PER_100G:
        return False
    if nutrients.protein < 0 or nutrients.fat < 0:
        return False
    return nutrients.carbs is None or nutrients.carbs >= 0


def quality_score(record: FoodRecord) -> int:
    """Score a record by nutrient completeness and description quality."""
    nutrients = record.nutrients
    score = 0
    if nutrients.calories and nutrients.calories > 0:
        score += 20
    if nutrients.protein is not None:
        score += 15
    if nutrients.fat is not None:
        score += 15
    if nutrients.carbs:
        score += 15
    if nutrients.fiber:
        score += 10
    if nutrients.sugar:
        score += 10
    if nutrients.sodium:
        score += 10
    if len(record.description) > 10:
        score += 5
    if "generic" in record.description.lower():
        score -= 10
    return score


@dataclass(frozen=True)
class Selection:
    """Outcome of a candidate search."""

    candidate: FoodCandidate | None
    records_seen: bool


@dataclass
class CandidateSelector:
    """Pick the best FDC record across search terms."""

    lookup: FoodLookupService
    page_size: int = 5

    async def select(self, name: str) -> Selection:
        """Return the best candidate for the first term with any valid record.

        Later terms are not searched once a term produces a valid record,
        even if they might score higher.
        """
        records_seen = False
        for term in build_search_terms(name):
            records = await self.lookup.search(term, page_size=self.page_size)
            records_seen = records_seen or bool(records)
            valid = [record for record in records if is_valid(record)]
            if not valid:
                continue
            best = max(valid, key=quality_score)
            return Selection(candidate=to_candidate(best), records_seen=True)
        return Selection(candidate=None, records_seen=records_seen)


def to_candidate(record: FoodRecord) -> FoodCandidate:
    """Convert a validated FDC record into a per-100g candidate."""
    unit = (record.serving_size_unit or "").lower()
    serving_size = (
        record.serving_size
        if record.serving_size and record.serving_size > 0 and unit in _GRAM_UNITS
        else None
    )
    return FoodCandidate(
        name=record.description,
        per_100g=record.nutrients.to_profile(),
        provenance=Provenance.USDA,
        quality_score=quality_score(record),
        serving_size_grams=serving_size,
        note=(
            f"From USDA database ({record.data_type})"
            if record.data_type
            else "From USDA database"
        ),
    )
