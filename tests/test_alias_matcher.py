"""Tests for curated dish matching."""

import pytest

from nutrition_resolver.data.enhanced_foods import category_profile
from nutrition_resolver.services.aliases import AliasMatcher, should_use_fdc_data


@pytest.mark.parametrize(
    ("name", "expected_key"),
    [
        ("jamaican beef patty", "jamaican_beef_patty"),
        ("chicken fried rice", "fried_rice"),
        ("goat curry", "curry_goat"),
        ("curry with goat", "curry_goat"),
        ("snapper fillet over vegetables", "roast_snapper_vegetables"),
        ("leftover general tsos", "general_tso_chicken"),
        ("chicken burgers", "chicken_sandwich"),
        ("spicy burgers with chicken", "chicken_sandwich"),
        ("egg rolls", "egg_roll"),
    ],
)
def test_match_finds_curated_entry(name: str, expected_key: str) -> None:
    entry = AliasMatcher().match(name)

    assert entry is not None
    assert entry.canonical_key == expected_key


def test_salmon_composite_pattern_precedes_generic_fish_pattern() -> None:
    entry = AliasMatcher().match("salmon glazed with lemon butter and vegetable medley")

    assert entry is not None
    assert entry.canonical_key == "salmon_garlic_butter_vegetables"


def test_match_returns_none_for_unknown_or_partial_words() -> None:
    matcher = AliasMatcher()

    assert matcher.match("asdkjfasdkjf") is None
    assert matcher.match("phone case") is None
    assert matcher.match("eggplant parmesan") is None
    assert matcher.match("") is None


def test_entries_carry_portion_and_mg_sodium() -> None:
    entry = AliasMatcher().get("jamaican_beef_patty")

    assert entry is not None
    assert entry.portion_weight_grams == 142
    assert entry.per_100g.calories == 320
    assert entry.per_100g.sodium > 100


def test_category_profile_baselines() -> None:
    assert category_profile("thai")["calories"] == 155
    assert category_profile("unknown") == {}


def test_missing_nutrients_default_to_zero() -> None:
    entry = AliasMatcher().get("curry_goat")

    assert entry is not None
    assert entry.per_100g.sugar == 0.0
    assert entry.per_100g.magnesium == 24


def test_should_use_fdc_data_policy() -> None:
    assert should_use_fdc_data("cheese pizza") is True
    assert should_use_fdc_data("milk") is True
    assert should_use_fdc_data("chicken fried rice") is False
    assert should_use_fdc_data("pad thai with cheese") is False
    assert should_use_fdc_data("jamaican beef patty") is False
    assert should_use_fdc_data("breadfruit") is False
