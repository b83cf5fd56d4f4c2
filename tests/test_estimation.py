"""Tests for keyword estimation."""

import pytest

from nutrition_resolver.services.estimation import (
    DEFAULT_ESTIMATE,
    ESTIMATION_RULES,
    estimate_per_100g,
    is_zero_calorie_beverage,
)


@pytest.mark.parametrize(
    ("name", "label", "calories"),
    [
        ("chicken breast", "chicken breast", 165),
        ("roast chicken thigh", "chicken", 180),
        ("ground beef", "ground beef", 250),
        ("scrambled eggs", "egg", 143),
        ("brown rice", "brown rice", 123),
        ("cheddar cheese", "cheddar", 403),
        ("vanilla ice cream", "ice cream", 207),
        ("orange juice", "fruit, tree", 52),
    ],
)
def test_first_matching_rule_wins(name: str, label: str, calories: float) -> None:
    matched_label, profile = estimate_per_100g(name)

    assert matched_label == label
    assert profile.calories == calories


def test_exclusions_and_whole_words() -> None:
    assert estimate_per_100g("fried chicken")[0] != "chicken"
    assert estimate_per_100g("eggplant")[0] != "egg"
    assert estimate_per_100g("potato chips")[0] != "potato"


def test_unknown_food_uses_default() -> None:
    label, profile = estimate_per_100g("asdkjfasdkjf")

    assert label == "default"
    assert profile == DEFAULT_ESTIMATE
    assert profile.calories == 150


def test_every_rule_has_non_negative_nutrients() -> None:
    for rule in ESTIMATION_RULES:
        assert all(value >= 0 for value in rule.profile.as_dict().values()), rule.label


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("water", True),
        ("sparkling water", True),
        ("la croix", True),
        ("black coffee", True),
        ("diet coke", True),
        ("coconut water", False),
        ("vitamin water", False),
        ("watermelon", False),
        ("tuna in water", False),
        ("coffee with cream", False),
    ],
)
def test_zero_calorie_beverages(name: str, expected: bool) -> None:
    assert is_zero_calorie_beverage(name) is expected
