"""Tests for search terms, validity and candidate scoring."""

import asyncio

from nutrition_resolver.data.search_terms import ALTERNATE_SEARCH_TERMS
from nutrition_resolver.domain.fdc import FoodRecord
from nutrition_resolver.domain.nutrition import Provenance
from nutrition_resolver.services.cache import InMemoryFoodCache
from nutrition_resolver.services.food_lookup import FoodLookupService, parse_food_record
from nutrition_resolver.services.scoring import (
    CandidateSelector,
    build_search_terms,
    is_valid,
    quality_score,
)
from tests.conftest import FakeFdcClient, fdc_food


def _record(
    description: str = "Chicken, breast, roasted", **nutrients: float
) -> FoodRecord:
    return parse_food_record(fdc_food(1, description, **nutrients))


def test_build_search_terms_orders_original_then_longest() -> None:
    terms = build_search_terms("cheese pizza")

    assert terms[0] == "cheese pizza"
    assert "pizza, cheese" in terms
    assert "pizza, regular crust, cheese" in terms
    assert len(terms) == len(set(terms))
    lengths = [len(term) for term in terms[1:]]
    assert lengths == sorted(lengths, reverse=True)


def test_build_search_terms_includes_stripped_and_significant_words() -> None:
    terms = build_search_terms("grilled salmon with rice")

    assert terms[0] == "grilled salmon with rice"
    assert "salmon with rice" in terms
    assert "salmon" in terms
    assert "with" not in terms


def test_is_valid_rejects_incomplete_or_implausible_records() -> None:
    assert is_valid(_record(calories=165, protein=31, fat=3.6, carbs=0))
    assert not is_valid(_record(calories=0, protein=31, fat=3.6))
    assert not is_valid(_record(calories=2500, protein=31, fat=3.6))
    assert not is_valid(_record(calories=165, fat=3.6))
    assert not is_valid(_record(calories=165, protein=31, fat=-1))


def test_quality_score_rewards_completeness() -> None:
    full = _record(
        "Chicken, breast, roasted",
        calories=165,
        protein=31,
        fat=3.6,
        carbs=1,
        fiber=0.5,
        sugar=0.2,
        sodium=74,
    )
    generic = _record("Generic chicken", calories=165, protein=31, fat=3.6)

    assert quality_score(full) == 100
    assert quality_score(generic) == 20 + 15 + 15 + 5 - 10


def test_selector_stops_at_first_term_with_valid_records() -> None:
    client = FakeFdcClient(
        search_results={
            "chicken breast": [
                fdc_food(1, "Chicken breast, breaded", calories=0, protein=20, fat=9),
            ],
            "chicken, breast, meat only": [
                fdc_food(
                    2, "Chicken, breast, meat only", calories=165, protein=31, fat=3.6
                ),
                fdc_food(
                    3,
                    "Chicken, broilers, breast, meat only, roasted",
                    calories=165,
                    protein=31,
                    fat=3.6,
                    carbs=0.1,
                    sodium=74,
                ),
            ],
            "chicken": [
                fdc_food(4, "Chicken, whole", calories=215, protein=18.6, fat=15.1),
            ],
        }
    )
    lookup = FoodLookupService(fdc_client=client, cache=InMemoryFoodCache())
    selector = CandidateSelector(lookup)

    selection = asyncio.run(selector.select("chicken breast"))

    assert selection.candidate is not None
    assert selection.candidate.name == "Chicken, broilers, breast, meat only, roasted"
    assert selection.candidate.provenance == Provenance.USDA
    assert client.search_calls == ["chicken breast", "chicken, breast, meat only"]


def test_selector_reports_seen_records_without_valid_candidate() -> None:
    client = FakeFdcClient(
        search_results={"mystery stew": [fdc_food(9, "Mystery stew", calories=0)]}
    )
    lookup = FoodLookupService(fdc_client=client, cache=InMemoryFoodCache())
    selector = CandidateSelector(lookup)

    selection = asyncio.run(selector.select("mystery stew"))

    assert selection.candidate is None
    assert selection.records_seen is True


def test_build_search_terms_matches_keys_on_first_word() -> None:
    terms = build_search_terms("ice")

    assert terms[0] == "ice"
    assert set(ALTERNATE_SEARCH_TERMS["ice cream"]) <= set(terms)
    assert "rice, cooked" not in terms
