"""Candy and confectionery profiles.

Generic FDC matches for candy names tend to be wrong (a "gummy bear"
search returns vitamin supplements), so common confections carry fixed
per-100g values and a typical piece weight. Sodium is stored in
milligrams.
"""

from nutrition_resolver.domain.nutrition import AliasEntry, NutrientProfile


def _candy(
    key: str,
    display_name: str,
    category: str,
    piece_grams: float,
    *,
    aliases: tuple[str, ...] = (),
    **values: float,
) -> AliasEntry:
    return AliasEntry(
        canonical_key=key,
        display_name=display_name,
        aliases=(display_name.lower(), *aliases),
        category=category,
        portion_weight_grams=piece_grams,
        per_100g=NutrientProfile(**values),
        note=f"From candy database ({category})",
    )


CANDY_FOODS: tuple[AliasEntry, ...] = (
    _candy(
        "hard_candy", "Hard Candy", "hard", 6,
        calories=394, protein=0, fat=0.2, carbs=98, sugar=63, fiber=0,
        calcium=3, iron=0.3, magnesium=3, sodium=38, zinc=0.01,
    ),
    _candy(
        "chocolate_candy", "Chocolate Candy", "chocolate", 10,
        aliases=("chocolate bar", "dark chocolate"),
        calories=535, protein=7.65, fat=29.66, carbs=59.4, sugar=51.5, fiber=3.4,
        calcium=50, iron=2.3, magnesium=63, sodium=24, zinc=1.0,
        vitamin_b12=0.25, folate=8,
    ),
    _candy(
        "gummy_candy", "Gummy Candy", "gummy", 2,
        aliases=("gummy bears", "gummy worms", "gummies"),
        calories=396, protein=0, fat=0, carbs=98.9, sugar=58.97, fiber=0.1,
        calcium=2, iron=0.1, magnesium=1, sodium=20, zinc=0.01,
    ),
    _candy(
        "lollipop", "Lollipop", "lollipop", 6,
        aliases=("sucker",),
        calories=394, protein=0, fat=0.2, carbs=98, sugar=62.9, fiber=0,
        calcium=3, iron=0.3, magnesium=3, sodium=38, zinc=0.01,
    ),
    _candy(
        "caramel_candy", "Caramel Candy", "caramel", 8,
        aliases=("caramels",),
        calories=382, protein=4.6, fat=8.1, carbs=76.2, sugar=65.5, fiber=0.3,
        calcium=118, iron=1.4, magnesium=22, sodium=211, zinc=0.64,
        vitamin_c=0.4, vitamin_d=0.7, vitamin_b12=0.21, folate=4,
    ),
    _candy(
        "jelly_beans", "Jelly Beans", "gummy", 1,
        aliases=("jelly bean",),
        calories=375, protein=0, fat=0.1, carbs=93.8, sugar=78.3, fiber=0,
        calcium=1, iron=0.2, magnesium=1, sodium=16, zinc=0.01,
    ),
    _candy(
        "taffy", "Taffy", "caramel", 5,
        aliases=("salt water taffy",),
        calories=395, protein=1.2, fat=2.0, carbs=92.8, sugar=68.2, fiber=0,
        calcium=14, iron=0.5, magnesium=2, sodium=57, zinc=0.05,
        vitamin_b12=0.02, folate=1,
    ),
    _candy(
        "mint_candy", "Mint Candy", "hard", 2,
        aliases=("breath mints", "peppermint candy"),
        calories=390, protein=0, fat=0.9, carbs=96.8, sugar=96.2, fiber=0,
        calcium=5, iron=0.4, magnesium=4, sodium=12, zinc=0.02, vitamin_c=0.5,
    ),
    _candy(
        "fudge", "Fudge", "chocolate", 25,
        calories=411, protein=2.9, fat=10.5, carbs=81.4, sugar=74.2, fiber=1.2,
        calcium=54, iron=1.8, magnesium=30, sodium=95, zinc=0.58,
        vitamin_c=0.2, vitamin_d=0.4, vitamin_b12=0.15, folate=6,
    ),
    _candy(
        "marshmallow", "Marshmallow", "general", 7,
        calories=318, protein=1.8, fat=0.2, carbs=80.5, sugar=57.6, fiber=0.1,
        calcium=3, iron=0.2, magnesium=2, sodium=80, zinc=0.04, folate=2,
    ),
)

# Any of these words marks a name as candy.
CANDY_TERMS = (
    "candy",
    "candies",
    "chocolate",
    "gummy",
    "gummies",
    "lollipop",
    "sucker",
    "taffy",
    "caramel",
    "fudge",
    "gumdrop",
    "jelly bean",
    "mints",
    "sweets",
    "marshmallow",
    "bonbon",
    "toffee",
    "skittles",
    "snickers",
    "kit kat",
    "m&ms",
    "twix",
    "reeses",
    "starburst",
    "jolly rancher",
)

# Dishes and drinks that mention a candy word but are not candy.
CANDY_EXCLUDES = (
    "cake",
    "cookie",
    "brownie",
    "muffin",
    "ice cream",
    "milk",
    "shake",
    "pudding",
    "pie",
    "cereal",
    "sauce",
    "syrup",
    "latte",
    "mocha",
)

# Keyword fallbacks, tried in order once no name or alias matched.
CANDY_CATEGORY_KEYWORDS: tuple[tuple[tuple[str, ...], str], ...] = (
    (("chocolate", "cocoa", "fudge"), "chocolate_candy"),
    (("gummy", "gummies", "bears", "worms", "jelly bean"), "gummy_candy"),
    (("lollipop", "sucker", "pop"), "lollipop"),
    (("caramel", "taffy", "toffee"), "caramel_candy"),
    (("hard", "mint", "drops"), "hard_candy"),
    (("marshmallow",), "marshmallow"),
)
