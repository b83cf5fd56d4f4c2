"""Tests for food name and measurement normalization."""

import pytest

from nutrition_resolver.domain.nutrition import Measurement
from nutrition_resolver.services.normalizer import (
    MAX_QUANTITY,
    normalize_name,
    parse_measurement,
    strip_descriptors,
)


def test_normalize_name_lowercases_and_collapses_whitespace() -> None:
    assert normalize_name("  Grilled   Chicken Breast ") == "grilled chicken breast"
    assert normalize_name(None) == ""


def test_strip_descriptors_removes_cooking_terms() -> None:
    assert strip_descriptors("grilled chicken breast") == "chicken breast"
    assert strip_descriptors("fast food fried fish") == "fish"
    assert strip_descriptors("banana") == "banana"


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("200g", Measurement(200.0, "g")),
        ("2 large", Measurement(2.0, "large")),
        ("1.5 oz", Measurement(1.5, "oz")),
        ("1 1/2 cups", Measurement(1.5, "cups")),
        ("1/2 cup", Measurement(0.5, "cup")),
        ("1/2_cup", Measurement(0.5, "cup")),
        ("½ cup", Measurement(0.5, "cup")),
        ("half a cup", Measurement(0.5, "cup")),
        ("two slices", Measurement(2.0, "slices")),
        ("a handful", Measurement(1.0, "handful")),
        ("1 cup (140g)", Measurement(1.0, "cup")),
        ("1/2", Measurement(0.5, "medium")),
        ("large", Measurement(1.0, "large")),
        ("200", Measurement(200.0, "")),
        ("one and a half cups", Measurement(1.5, "cups")),
        ("2 and 1/4 tsp", Measurement(2.25, "tsp")),
    ],
)
def test_parse_measurement(raw: str, expected: Measurement) -> None:
    assert parse_measurement(raw) == expected


def test_parse_measurement_defaults_when_empty() -> None:
    assert parse_measurement("") == Measurement(1.0, "")
    assert parse_measurement(None) == Measurement(1.0, "")
    assert parse_measurement("   ") == Measurement(1.0, "")


def test_parse_measurement_clamps_huge_quantities() -> None:
    assert parse_measurement("9" * 400 + " g") == Measurement(MAX_QUANTITY, "g")
    assert parse_measurement("9" * 400 + "/3 cup").quantity == MAX_QUANTITY
