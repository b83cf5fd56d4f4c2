"""Tests for candy matching."""

import pytest

from nutrition_resolver.services.candy import CandyMatcher, is_candy_related


@pytest.mark.parametrize(
    ("name", "expected_key"),
    [
        ("fudge", "fudge"),
        ("gummy bears", "gummy_candy"),
        ("jelly beans", "jelly_beans"),
        ("chocolate", "chocolate_candy"),
        ("toffee", "caramel_candy"),
        ("sour gummy worms", "gummy_candy"),
        ("candy", "hard_candy"),
    ],
)
def test_match_finds_candy(name: str, expected_key: str) -> None:
    entry = CandyMatcher().match(name)

    assert entry is not None
    assert entry.canonical_key == expected_key


def test_brand_without_profile_is_not_matched() -> None:
    assert is_candy_related("snickers") is True
    assert CandyMatcher().match("snickers") is None


@pytest.mark.parametrize(
    "name", ["chocolate milk", "chocolate cake", "mint tea", "popcorn", ""]
)
def test_non_candy_names_are_ignored(name: str) -> None:
    assert CandyMatcher().match(name) is None


def test_entries_carry_piece_weight() -> None:
    entry = CandyMatcher().match("marshmallows")

    assert entry is not None
    assert entry.portion_weight_grams == 7
    assert entry.per_100g.calories == 318
    assert entry.per_100g.sodium == 80
