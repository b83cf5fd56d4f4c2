"""Measurement to grams conversion for a specific food."""

import re
from dataclasses import dataclass, field

from nutrition_resolver.data.units import GENERIC_UNITS, INGREDIENT_UNITS
from nutrition_resolver.domain.nutrition import (
    IngredientUnits,
    Measurement,
    NutrientProfile,
    Portion,
    clamp_grams,
    round_half_up,
)
from nutrition_resolver.services.normalizer import clamp_quantity

DEFAULT_GRAMS_PER_SERVING = 100.0
TABLESPOONS_PER_CUP = 16

# Spelled-out spoon units are folded onto the keys used by ingredient tables.
_UNIT_SYNONYMS: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(r"\btablespoons?\b|\btbsps?\b|\btbs\b"), "tbsp"),
    (re.compile(r"\bteaspoons?\b|\btsps?\b"), "tsp"),
    (re.compile(r"\bcups\b"), "cup"),
)

_CUP = re.compile(r"\bcups?\b")
_GRAINS = re.compile(r"\b(rice|quinoa|pasta|oats|oatmeal|couscous|lentils?)\b")
_PACKABLE = re.compile(
    r"\b(flour|sugar|oats|nuts|almonds|walnuts|cheese|spinach|lettuce|greens|berries)\b"
)

_VARIATION_NOTES: tuple[tuple[re.Pattern[str], str], ...] = (
    (
        re.compile(r"\beggs?\b"),
        "Egg weight varies by size: small 38g, medium 44g, large 50g, "
        "extra large 56g.",
    ),
    (
        re.compile(r"\bgrapes?\b"),
        "Grape size varies by variety; about 5g per grape.",
    ),
    (
        re.compile(r"\bplantains?\b"),
        "Plantain weight varies with size and ripeness.",
    ),
)


@dataclass(frozen=True)
class _CompiledIngredient:
    pattern: re.Pattern[str]
    units: tuple[tuple[re.Pattern[str], float], ...]


@dataclass
class UnitConverter:
    """Convert a parsed measurement into grams for one food.

    Steps are tried in order: ingredient table, generic unit table,
    serving size, then a 100 g default serving.
    """

    ingredient_units: tuple[IngredientUnits, ...] = INGREDIENT_UNITS
    generic_units: tuple[tuple[str, float], ...] = GENERIC_UNITS
    _ingredients: list[_CompiledIngredient] = field(init=False, repr=False)
    _generic: list[tuple[re.Pattern[str], float]] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._ingredients = [
            _CompiledIngredient(
                pattern=re.compile(rf"\b{re.escape(table.ingredient)}(?:s|es)?\b"),
                units=tuple(
                    (re.compile(rf"\b{re.escape(unit)}(?:s|es)?\b"), grams)
                    for unit, grams in sorted(
                        table.units, key=lambda item: len(item[0]), reverse=True
                    )
                ),
            )
            for table in self.ingredient_units
        ]
        self._generic = [
            (re.compile(pattern), grams) for pattern, grams in self.generic_units
        ]

    def to_grams(
        self,
        food_name: str,
        measurement: Measurement,
        serving_size_grams: float | None = None,
    ) -> Portion:
        """Return the grams equivalent of a measurement of ``food_name``."""
        quantity = clamp_quantity(measurement.quantity)
        unit = measurement.unit.lower().strip()
        canonical = _canonical_unit(unit)
        name = food_name.lower()

        if canonical:
            for ingredient in self._ingredients:
                if not ingredient.pattern.search(name):
                    continue
                for pattern, grams in ingredient.units:
                    if pattern.search(canonical):
                        return _portion(quantity, unit, quantity * grams, "ingredient")

            for pattern, grams in self._generic:
                if pattern.search(unit):
                    return _portion(quantity, unit, quantity * grams, "unit")

        if serving_size_grams and serving_size_grams > 0:
            return _portion(quantity, unit, quantity * serving_size_grams, "serving")
        return _portion(quantity, unit, quantity * DEFAULT_GRAMS_PER_SERVING, "default")

    def equivalent_measurement(
        self, portion: Portion, per_100g: NutrientProfile
    ) -> str:
        """Describe the portion in friendlier terms with its calories."""
        if _CUP.search(portion.unit) and 0 < portion.quantity < 0.25:
            tablespoons = round_half_up(portion.quantity * TABLESPOONS_PER_CUP, 1)
            calories = int(round_half_up(per_100g.calories * portion.grams / 100, 0))
            return f"{tablespoons:g} tbsp ≈ {calories} kcal"
        return f"100g ≈ {int(round_half_up(per_100g.calories, 0))} kcal"

    def variation_note(self, food_name: str, unit: str) -> str | None:
        """Return a note about how much this kind of portion tends to vary."""
        name = food_name.lower()
        for pattern, note in _VARIATION_NOTES:
            if pattern.search(name):
                return note
        if _CUP.search(unit.lower()):
            if _GRAINS.search(name):
                return (
                    "Cooked and dry grains differ roughly threefold in weight "
                    "per cup; cooked is assumed."
                )
            if _PACKABLE.search(name):
                return "Cup weights vary with how tightly the food is packed."
        return None


def _canonical_unit(unit: str) -> str:
    canonical = unit
    for pattern, replacement in _UNIT_SYNONYMS:
        canonical = pattern.sub(replacement, canonical)
    return canonical


def _portion(quantity: float, unit: str, grams: float, basis: str) -> Portion:
    return Portion(
        quantity=quantity,
        unit=unit,
        grams=round_half_up(clamp_grams(grams), 1),
        basis=basis,
    )
