"""Nutrition domain models."""

import math
from dataclasses import dataclass, fields, replace
from enum import StrEnum


class Provenance(StrEnum):
    """Which source produced a nutrition profile."""

    USDA = "USDA"
    ENHANCED_DB = "EnhancedDB"
    ESTIMATION_NOT_FOUND = "Estimation(USDA not found)"
    ESTIMATION = "Estimation"


@dataclass(frozen=True)
class NutrientProfile:
    """Nutrient amounts for a portion, usually normalized to 100 g.

    Calories are kcal; protein, carbs, fat, fiber and sugar are grams;
    sodium, iron, calcium, zinc, magnesium and vitamin C are milligrams;
    vitamin D, vitamin B12 and folate are micrograms.
    """

    calories: float = 0.0
    protein: float = 0.0
    carbs: float = 0.0
    fat: float = 0.0
    fiber: float = 0.0
    sugar: float = 0.0
    sodium: float = 0.0
    iron: float = 0.0
    calcium: float = 0.0
    zinc: float = 0.0
    magnesium: float = 0.0
    vitamin_c: float = 0.0
    vitamin_d: float = 0.0
    vitamin_b12: float = 0.0
    folate: float = 0.0

    @classmethod
    def from_mapping(cls, values: dict[str, float | None]) -> "NutrientProfile":
        """Build a profile from a mapping, treating missing values as zero."""
        return cls(
            **{
                name: float(values.get(name) or 0.0)
                for name in NUTRIENT_FIELDS
            }
        )

    def as_dict(self) -> dict[str, float]:
        """Return the profile as a plain mapping."""
        return {name: getattr(self, name) for name in NUTRIENT_FIELDS}

    def scaled(self, grams: float) -> "NutrientProfile":
        """Scale a per-100g profile to ``grams`` and round each field.

        Calories round to the nearest integer, everything else to one
        decimal place.
        """
        multiplier = clamp_grams(grams) / 100.0
        values = {
            name: round_half_up(getattr(self, name) * multiplier, 1)
            for name in NUTRIENT_FIELDS
        }
        values["calories"] = round_half_up(self.calories * multiplier, 0)
        return replace(self, **values)


NUTRIENT_FIELDS: tuple[str, ...] = tuple(item.name for item in fields(NutrientProfile))

# Portions above one tonne are clamped.
MAX_PORTION_GRAMS = 1_000_000.0


def round_half_up(value: float, digits: int) -> float:
    """Round halves away from zero for non-negative values.

    Non-finite values, and values too large to carry a fraction, are
    returned unchanged.
    """
    factor = 10**digits
    shifted = value * factor
    if not math.isfinite(shifted) or abs(shifted) >= 2**52:
        return value
    return math.floor(shifted + 0.5) / factor


def clamp_grams(grams: float) -> float:
    """Bound a portion weight to ``[0, MAX_PORTION_GRAMS]``; NaN becomes 0."""
    if math.isnan(grams):
        return 0.0
    return min(max(grams, 0.0), MAX_PORTION_GRAMS)


@dataclass(frozen=True)
class AliasEntry:
    """Curated composite dish with a fixed per-100g profile."""

    canonical_key: str
    display_name: str
    aliases: tuple[str, ...]
    category: str
    portion_weight_grams: float
    per_100g: NutrientProfile
    note: str | None = None


@dataclass(frozen=True)
class IngredientUnits:
    """Grams per unit for one ingredient, most specific unit first."""

    ingredient: str
    units: tuple[tuple[str, float], ...]


@dataclass(frozen=True)
class FoodCandidate:
    """A per-100g profile chosen for one resolution call."""

    name: str
    per_100g: NutrientProfile
    provenance: Provenance
    quality_score: int | None = None
    serving_size_grams: float | None = None
    note: str | None = None


@dataclass(frozen=True)
class Measurement:
    """Parsed quantity and unit from a measurement string."""

    quantity: float
    unit: str


@dataclass(frozen=True)
class Portion:
    """Grams equivalent of a measurement for a specific ingredient."""

    quantity: float
    unit: str
    grams: float
    basis: str


@dataclass(frozen=True)
class NutritionProfile:
    """Resolved nutrition for a food and portion."""

    name: str
    measurement: str
    quantity: float
    unit: str
    grams: float
    estimated_calories: int
    nutrients: NutrientProfile
    nutrition_per_100g: NutrientProfile
    provenance: Provenance
    quality_score: int | None = None
    note: str | None = None
    equivalent_measurement: str | None = None
    variation_note: str | None = None
