"""Keyword-based nutrient estimates for foods no structured source covers."""

import re
from dataclasses import dataclass

from nutrition_resolver.domain.nutrition import NutrientProfile


@dataclass(frozen=True)
class EstimationRule:
    """Baseline per-100g profile for names containing any of ``keywords``.

    ``requires`` must all be present and ``excludes`` must all be absent.
    With ``whole_word`` set, keywords only match complete words.
    """

    label: str
    keywords: tuple[str, ...]
    profile: NutrientProfile
    requires: tuple[str, ...] = ()
    excludes: tuple[str, ...] = ()
    whole_word: bool = False

    def matches(self, name: str) -> bool:
        if any(word in name for word in self.excludes):
            return False
        if not all(word in name for word in self.requires):
            return False
        if self.whole_word:
            return any(
                re.search(rf"\b{re.escape(word)}\b", name) for word in self.keywords
            )
        return any(word in name for word in self.keywords)


def _per_100g(*values: float) -> NutrientProfile:
    # calories, protein, carbs, fat, fiber, sugar, sodium, iron, calcium,
    # zinc, magnesium, vitamin C, vitamin D, vitamin B12, folate
    return NutrientProfile(*(float(value) for value in values))


DEFAULT_ESTIMATE = _per_100g(150, 5, 20, 5, 2, 8, 50, 1.5, 40, 0.8, 25, 5, 0.1, 0.2, 15)

# First match wins; more specific keywords sit above the broader ones they
# overlap with ("chicken breast" before "chicken", "brown rice" before "rice").
ESTIMATION_RULES: tuple[EstimationRule, ...] = (
    # Fruit
    EstimationRule(
        "fruit, tree",
        ("apple", "orange", "pear"),
        _per_100g(52, 0.3, 14, 0.2, 2.4, 10, 1, 0.12, 6, 0.04, 5, 53, 0, 0, 3),
    ),
    EstimationRule(
        "banana",
        ("banana",),
        _per_100g(89, 1.1, 23, 0.3, 2.6, 12, 1, 0.26, 5, 0.15, 27, 8.7, 0, 0, 20),
    ),
    EstimationRule(
        "berries",
        ("strawberr", "berr"),
        _per_100g(32, 0.7, 8, 0.3, 2, 4.9, 1, 0.41, 16, 0.14, 13, 58.8, 0, 0, 24),
    ),
    EstimationRule(
        "grapes",
        ("grape",),
        _per_100g(69, 0.7, 18, 0.2, 0.9, 16, 2, 0.36, 10, 0.07, 7, 3.2, 0, 0, 2),
    ),
    EstimationRule(
        "fruit",
        ("fruit",),
        _per_100g(60, 1, 15, 0.2, 2, 10, 1, 0.3, 15, 0.1, 10, 30, 0, 0, 10),
    ),
    # Vegetables
    EstimationRule(
        "leafy greens",
        ("lettuce", "spinach"),
        _per_100g(15, 1.4, 3, 0.2, 1.3, 1.2, 28, 2.71, 99, 0.53, 79, 28.1, 0, 0, 194),
    ),
    EstimationRule(
        "broccoli",
        ("broccoli",),
        _per_100g(34, 2.8, 7, 0.4, 2.6, 1.5, 33, 0.73, 47, 0.41, 21, 89.2, 0, 0, 63),
    ),
    EstimationRule(
        "carrot",
        ("carrot",),
        _per_100g(41, 0.9, 10, 0.2, 2.8, 4.7, 69, 0.3, 33, 0.24, 12, 5.9, 0, 0, 19),
    ),
    EstimationRule(
        "tomato",
        ("tomato",),
        _per_100g(18, 0.9, 4, 0.2, 1.2, 2.6, 5, 0.27, 10, 0.17, 11, 13.7, 0, 0, 15),
    ),
    EstimationRule(
        "potato",
        ("potato",),
        _per_100g(77, 2, 17, 0.1, 2.2, 0.8, 6, 0.81, 12, 0.3, 23, 19.7, 0, 0, 15),
        excludes=("fries", "chip"),
    ),
    EstimationRule(
        "vegetables",
        ("vegetable", "salad"),
        _per_100g(25, 2, 5, 0.3, 2, 3, 20, 1.0, 40, 0.4, 15, 15, 0, 0, 30),
    ),
    # Meat
    EstimationRule(
        "chicken breast",
        ("chicken breast",),
        _per_100g(165, 31, 0, 3.6, 0, 0, 74, 1.04, 15, 1.0, 29, 0, 0.1, 0.34, 4),
    ),
    EstimationRule(
        "chicken",
        ("chicken",),
        _per_100g(180, 25, 0, 8, 0, 0, 80, 0.9, 15, 1.3, 25, 0, 0.1, 0.3, 4),
        excludes=("fried",),
    ),
    EstimationRule(
        "ground beef",
        ("beef",),
        _per_100g(250, 26, 0, 15, 0, 0, 75, 2.7, 18, 5.3, 21, 0, 0.1, 2.6, 7),
        requires=("ground",),
    ),
    EstimationRule(
        "beef",
        ("beef",),
        _per_100g(250, 26, 0, 15, 0, 0, 60, 2.6, 18, 4.8, 21, 0, 0.1, 2.6, 6),
    ),
    EstimationRule(
        "pork",
        ("pork",),
        _per_100g(242, 27, 0, 14, 0, 0, 62, 0.9, 19, 2.4, 26, 0, 0.6, 0.7, 5),
    ),
    EstimationRule(
        "meat",
        ("meat",),
        _per_100g(250, 25, 0, 15, 0, 0, 70, 2.5, 15, 4.0, 20, 0, 0.1, 2.0, 5),
    ),
    # Fish
    EstimationRule(
        "salmon",
        ("salmon",),
        _per_100g(208, 22, 0, 12, 0, 0, 59, 0.8, 12, 0.6, 29, 0, 11.0, 3.2, 25),
    ),
    EstimationRule(
        "tuna",
        ("tuna",),
        _per_100g(144, 30, 0, 1, 0, 0, 39, 1.3, 8, 0.6, 27, 0, 3.7, 4.9, 5),
    ),
    EstimationRule(
        "fish",
        ("fish",),
        _per_100g(180, 25, 0, 8, 0, 0, 50, 0.7, 15, 0.5, 25, 0, 5.0, 2.0, 15),
    ),
    # Eggs, as whole words so "eggplant" falls through.
    EstimationRule(
        "egg",
        ("egg", "eggs"),
        _per_100g(
            143, 12.6, 0.7, 9.5, 0, 0.4, 142, 1.75, 56, 1.29, 12, 0, 2.0, 0.89, 47
        ),
        whole_word=True,
    ),
    # Grains
    EstimationRule(
        "brown rice",
        ("rice",),
        _per_100g(123, 2.6, 23, 0.9, 1.8, 0.4, 5, 0.82, 23, 1.2, 43, 0, 0, 0, 7),
        requires=("brown",),
    ),
    EstimationRule(
        "rice",
        ("rice",),
        _per_100g(130, 2.7, 28, 0.3, 0.4, 0.1, 1, 0.8, 28, 1.09, 25, 0, 0, 0, 8),
    ),
    EstimationRule(
        "pasta",
        ("pasta",),
        _per_100g(131, 5, 25, 1.1, 1.8, 0.6, 6, 0.9, 7, 0.5, 18, 0, 0, 0, 18),
    ),
    EstimationRule(
        "whole grain bread",
        ("bread",),
        _per_100g(247, 13, 41, 4.2, 7, 6, 491, 2.5, 107, 1.8, 107, 0, 0, 0, 44),
        requires=("whole",),
    ),
    EstimationRule(
        "bread",
        ("bread",),
        _per_100g(265, 9, 49, 3.2, 2.7, 5, 681, 3.6, 147, 0.7, 22, 0, 0, 0, 43),
    ),
    # Dairy
    EstimationRule(
        "whole milk",
        ("milk",),
        _per_100g(61, 3.2, 4.8, 3.3, 0, 5.1, 40, 0.05, 113, 0.4, 10, 0, 1.3, 0.5, 5),
        requires=("whole",),
    ),
    EstimationRule(
        "milk",
        ("milk",),
        _per_100g(50, 3.4, 5, 2, 0, 5, 44, 0.03, 113, 0.4, 10, 0, 1.3, 0.5, 5),
    ),
    EstimationRule(
        "cheddar",
        ("cheese",),
        _per_100g(403, 25, 1.3, 33, 0, 0.5, 621, 0.7, 721, 3.1, 28, 0, 0.6, 0.8, 18),
        requires=("cheddar",),
    ),
    EstimationRule(
        "cheese",
        ("cheese",),
        _per_100g(300, 20, 5, 25, 0, 3, 500, 0.7, 700, 3.0, 22, 0, 0.6, 1.1, 18),
    ),
    EstimationRule(
        "yogurt",
        ("yogurt",),
        _per_100g(59, 10, 3.6, 0.4, 0, 3.2, 36, 0.1, 110, 0.6, 11, 0.5, 0, 0.5, 7),
    ),
    # Fast food
    EstimationRule(
        "pizza",
        ("pizza",),
        _per_100g(266, 11, 33, 10, 2.3, 3.6, 598, 2.4, 144, 1.4, 20, 0.2, 0.1, 0.3, 8),
    ),
    EstimationRule(
        "fries",
        ("french fries", "fries"),
        _per_100g(365, 4, 63, 17, 3.8, 0.3, 246, 0.8, 15, 0.3, 25, 9.7, 0, 0, 15),
    ),
    EstimationRule(
        "burger",
        ("burger", "hamburger"),
        _per_100g(295, 17, 22, 15, 2, 3, 396, 2.1, 54, 2.9, 20, 0.6, 0.1, 1.3, 8),
    ),
    # Sweets
    EstimationRule(
        "ice cream",
        ("ice cream",),
        _per_100g(207, 3.5, 24, 11, 0.7, 21, 80, 0.09, 128, 0.3, 14, 0.6, 0.1, 0.3, 5),
    ),
    EstimationRule(
        "cake",
        ("cake",),
        _per_100g(352, 5, 56, 14, 1.8, 40, 299, 1.8, 73, 0.5, 22, 0.1, 0.6, 0.1, 8),
    ),
    EstimationRule(
        "cookie",
        ("cookie",),
        _per_100g(502, 5.9, 64, 25, 2.4, 38, 363, 3.0, 73, 0.5, 30, 0, 0.5, 0.1, 15),
    ),
    EstimationRule(
        "donut",
        ("donut", "doughnut"),
        _per_100g(452, 4.9, 51, 25, 1.4, 10, 373, 1.5, 89, 0.4, 13, 0.1, 0.4, 0.1, 47),
    ),
    EstimationRule(
        "chocolate",
        ("chocolate",),
        _per_100g(546, 4.9, 61, 31, 7, 48, 24, 2.3, 65, 0.9, 63, 0, 0, 0.3, 12),
    ),
    # Fats
    EstimationRule(
        "oil",
        ("oil",),
        _per_100g(884, 0, 0, 100, 0, 0, 2, 0.56, 1, 0, 0, 0, 0, 0, 0),
    ),
    EstimationRule(
        "butter",
        ("butter",),
        _per_100g(717, 0.9, 0.1, 81, 0, 0.1, 11, 0.02, 24, 0.09, 2, 0, 1.5, 0.17, 3),
    ),
    EstimationRule(
        "nuts",
        ("almond", "nuts"),
        _per_100g(579, 21, 22, 50, 12, 4.4, 1, 3.7, 269, 3.1, 270, 0, 0, 0, 44),
    ),
    # Drinks
    EstimationRule(
        "soda",
        ("soda", "cola"),
        _per_100g(42, 0, 11, 0, 0, 11, 2, 0.11, 2, 0.04, 1, 0, 0, 0, 0),
    ),
    EstimationRule(
        "orange juice",
        ("juice",),
        _per_100g(45, 0.7, 10, 0.2, 0.2, 8.1, 1, 0.2, 11, 0.1, 11, 50, 0, 0, 30),
        requires=("orange",),
    ),
)


def estimate_per_100g(
    name: str, rules: tuple[EstimationRule, ...] = ESTIMATION_RULES
) -> tuple[str, NutrientProfile]:
    """Return the label and profile of the first rule matching ``name``."""
    normalized = name.lower()
    for rule in rules:
        if rule.matches(normalized):
            return rule.label, rule.profile
    return "default", DEFAULT_ESTIMATE


ZERO_CALORIE_PROFILE = _per_100g(0, 0, 0, 0, 0, 0, 0, 0.1, 5, 0.1, 3, 0, 0, 0, 0)

ZERO_CALORIE_BEVERAGES = (
    "water",
    "sparkling water",
    "carbonated water",
    "seltzer",
    "club soda",
    "mineral water",
    "spring water",
    "tap water",
    "bottled water",
    "san pellegrino",
    "pellegrino",
    "perrier",
    "la croix",
    "lacroix",
    "bubly",
    "schweppes sparkling",
    "canada dry seltzer",
    "tonic water",
    "black coffee",
    "plain tea",
    "green tea",
    "herbal tea",
    "diet soda",
    "diet coke",
    "coke zero",
    "pepsi max",
    "diet pepsi",
    "diet sprite",
    "smartwater",
    "smart water",
)

# Substrings that mark a caloric drink or a food packed in water.
CALORIC_BEVERAGE_MARKERS = (
    "vitamin",
    "flavored water",
    "enhanced",
    "coconut",
    "sports drink",
    "energy drink",
    "in water",
    "water chestnut",
)


def is_zero_calorie_beverage(name: str) -> bool:
    """Return whether ``name`` is a drink with no meaningful calories."""
    normalized = name.lower()
    if any(marker in normalized for marker in CALORIC_BEVERAGE_MARKERS):
        return False
    return any(
        re.search(rf"\b{re.escape(beverage)}\b", normalized)
        for beverage in ZERO_CALORIE_BEVERAGES
    )
