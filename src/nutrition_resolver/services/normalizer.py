"""Food name and measurement normalization."""

import math
import re

from nutrition_resolver.domain.nutrition import Measurement

_DESCRIPTORS = re.compile(
    r"\b(grilled|fried|baked|roasted|steamed|boiled|sauteed|fresh|frozen|canned"
    r"|organic|homemade|restaurant|fast food)\b"
)
_WHITESPACE = re.compile(r"\s+")
_PARENTHETICAL = re.compile(r"\s*\([^)]*\)")
_LEADING_NUMBER = re.compile(r"^(\d+(?:\.\d+)?)\s*(.*)$")
_MIXED_NUMBER = re.compile(r"^(\d+)\s+(\d+)\s*/\s*(\d+)\s*(.*)$")
_FRACTION = re.compile(r"^(\d+)\s*/\s*(\d+)\s*(.*)$")
_UNICODE_FRACTION = re.compile(r"^(\d+)?\s*([½¼¾⅓⅔])\s*(.*)$")
_LEADING_ARTICLE = re.compile(r"^(?:an?|of)\s+")
_AND_FRACTION = re.compile(r"^(\d+)\s+and\s+(\d+\s*/\s*\d+)")

MAX_QUANTITY = 10_000.0

_UNICODE_FRACTIONS = {"½": 0.5, "¼": 0.25, "¾": 0.75, "⅓": 0.333, "⅔": 0.666}

# Longer phrases first so "a half" is not consumed as "half".
_FRACTION_WORDS = (
    ("three quarters", "3/4"),
    ("two thirds", "2/3"),
    ("one quarter", "1/4"),
    ("one third", "1/3"),
    ("one half", "1/2"),
    ("a quarter", "1/4"),
    ("a third", "1/3"),
    ("a half", "1/2"),
    ("quarter", "1/4"),
    ("third", "1/3"),
    ("half", "1/2"),
)

_WORD_NUMBERS = {
    "one": "1",
    "two": "2",
    "three": "3",
    "four": "4",
    "five": "5",
    "six": "6",
    "seven": "7",
    "eight": "8",
    "nine": "9",
    "ten": "10",
}


def normalize_name(raw: str | None) -> str:
    """Lowercase, trim and collapse whitespace in a food name."""
    return _collapse((raw or "").lower())


def strip_descriptors(name: str) -> str:
    """Remove cooking and state descriptors from a normalized name."""
    return _collapse(_DESCRIPTORS.sub(" ", name))


def parse_measurement(raw: str | None) -> Measurement:
    """Split a measurement string into quantity and unit.

    Never fails: text without a recognizable leading amount becomes
    quantity 1 with the whole normalized text as the unit.
    """
    text = _collapse((raw or "").lower().replace("_", " "))
    text = _collapse(_PARENTHETICAL.sub(" ", text))
    if not text:
        return Measurement(quantity=1.0, unit="")
    text = _words_to_numbers(text)

    match = _UNICODE_FRACTION.match(text)
    if match:
        whole = float(match.group(1) or 0)
        quantity = whole + _UNICODE_FRACTIONS[match.group(2)]
        return Measurement(
            quantity=clamp_quantity(quantity), unit=_unit(match.group(3))
        )

    match = _MIXED_NUMBER.match(text)
    if match:
        denominator = float(match.group(3))
        if denominator:
            quantity = float(match.group(1)) + float(match.group(2)) / denominator
            return Measurement(
                quantity=clamp_quantity(quantity), unit=_unit(match.group(4))
            )

    match = _FRACTION.match(text)
    if match:
        denominator = float(match.group(2))
        if denominator:
            quantity = float(match.group(1)) / denominator
            # A bare fraction means part of one medium item.
            unit = _unit(match.group(3)) or "medium"
            return Measurement(quantity=clamp_quantity(quantity), unit=unit)

    match = _LEADING_NUMBER.match(text)
    if match:
        quantity = clamp_quantity(float(match.group(1)))
        return Measurement(quantity=quantity, unit=_unit(match.group(2)))

    return Measurement(quantity=1.0, unit=text)


def clamp_quantity(quantity: float) -> float:
    """Bound a quantity to ``[0, MAX_QUANTITY]``; NaN becomes 0."""
    if math.isnan(quantity):
        return 0.0
    return min(max(quantity, 0.0), MAX_QUANTITY)


def _words_to_numbers(text: str) -> str:
    converted = text
    for phrase, fraction in _FRACTION_WORDS:
        converted = re.sub(rf"\b{phrase}\b", fraction, converted)
    for word, number in _WORD_NUMBERS.items():
        converted = re.sub(rf"\b{word}\b", number, converted)
    converted = _AND_FRACTION.sub(r"\1 \2", converted)
    return re.sub(r"^an?\s+(?=[a-z])", "1 ", converted)


def _unit(text: str) -> str:
    return _LEADING_ARTICLE.sub("", text.strip())


def _collapse(text: str) -> str:
    return _WHITESPACE.sub(" ", text).strip()
