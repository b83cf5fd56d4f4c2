"""Unit-to-grams tables.

Both tables are ordered and scanned first match wins, so more specific
entries must come before the entries they overlap with.
"""

from nutrition_resolver.domain.nutrition import IngredientUnits

INGREDIENT_UNITS: tuple[IngredientUnits, ...] = (
    # Multi-form items
    IngredientUnits(
        "egg",
        (
            ("extra large", 56),
            ("whole", 50),
            ("large", 50),
            ("medium", 44),
            ("small", 38),
        ),
    ),
    IngredientUnits("grape", (("grapes", 5), ("grape", 5), ("bunch", 100))),
    IngredientUnits("falafel", (("pieces", 17), ("piece", 17), ("ball", 17))),
    IngredientUnits("pierogi", (("pieces", 28), ("piece", 28), ("dumpling", 28))),
    IngredientUnits("gyoza", (("pieces", 15), ("piece", 15), ("dumpling", 15))),
    IngredientUnits("baklava", (("pieces", 60), ("piece", 60), ("square", 60))),
    IngredientUnits("sushi", (("pieces", 30), ("piece", 30), ("roll", 180))),
    IngredientUnits("taco", (("pieces", 85), ("piece", 85), ("taco", 85))),
    IngredientUnits("samosa", (("pieces", 45), ("piece", 45), ("samosa", 45))),
    IngredientUnits(
        "plantain",
        (
            ("medium", 179),
            ("large", 218),
            ("small", 148),
            ("piece", 179),
            ("slice", 20),
        ),
    ),
    IngredientUnits("patty", (("patty", 142), ("piece", 142), ("jamaican", 142))),
    IngredientUnits("roti", (("piece", 85), ("roti", 85))),
    IngredientUnits("cassava", (("medium", 400), ("cup", 103), ("serving", 150))),
    IngredientUnits("breadfruit", (("medium", 350), ("cup", 220), ("slice", 60))),
    # Cooking ingredients
    IngredientUnits("bread flour", (("cup", 127), ("tbsp", 8), ("tsp", 2.7))),
    IngredientUnits("cake flour", (("cup", 114), ("tbsp", 7), ("tsp", 2.4))),
    IngredientUnits("whole wheat flour", (("cup", 113), ("tbsp", 7), ("tsp", 2.3))),
    IngredientUnits("flour", (("cup", 120), ("tbsp", 9), ("tsp", 3))),
    IngredientUnits(
        "brown sugar", (("cup packed", 213), ("cup", 213), ("tbsp", 15), ("tsp", 5))
    ),
    IngredientUnits("powdered sugar", (("cup", 160), ("tbsp", 10), ("tsp", 3.3))),
    IngredientUnits("sugar", (("cup", 198), ("tbsp", 13), ("tsp", 4))),
    IngredientUnits("honey", (("cup", 320), ("tbsp", 20), ("tsp", 7))),
    IngredientUnits("maple syrup", (("cup", 312), ("tbsp", 20), ("tsp", 7))),
    IngredientUnits("peanut butter", (("cup", 270), ("tbsp", 17), ("tsp", 6))),
    IngredientUnits(
        "butter", (("stick", 113), ("cup", 227), ("tbsp", 14), ("tsp", 5))
    ),
    IngredientUnits("olive oil", (("cup", 216), ("tbsp", 14), ("tsp", 5))),
    IngredientUnits("coconut oil", (("cup", 218), ("tbsp", 14), ("tsp", 5))),
    IngredientUnits("oats", (("cup", 81), ("tbsp", 5), ("tsp", 1.7))),
    IngredientUnits("oatmeal", (("cup", 81), ("tbsp", 5))),
    IngredientUnits("quinoa", (("cup cooked", 185), ("cup dry", 170), ("cup", 185))),
    IngredientUnits(
        "rice",
        (("cup cooked", 158), ("cup dry", 185), ("cup", 158), ("tbsp", 10)),
    ),
    IngredientUnits("milk", (("cup", 244), ("tbsp", 15), ("tsp", 5))),
    IngredientUnits("salt", (("tbsp", 18), ("tsp", 6))),
)

# Word-boundary patterns over the lowercased unit. Fluid ounces precede
# ounces, kilograms and milligrams precede grams, millilitres precede litres.
GENERIC_UNITS: tuple[tuple[str, float], ...] = (
    (r"\bfl\.?\s*oz\b|\bfluid\s+ounces?\b", 29.57),
    (r"\bkgs?\b|\bkilo(?:gram)?s?\b", 1000),
    (r"\bmg\b|\bmilligrams?\b", 0.001),
    (r"\bg\b|\bgr\b|\bgms?\b|\bgrams?\b", 1),
    (r"\boz\b|\bounces?\b", 28.35),
    (r"\blbs?\b|\bpounds?\b", 453.6),
    (r"\bcups?\b|\bc\b", 240),
    (r"\btbsps?\b|\btbs\b|\btablespoons?\b", 15),
    (r"\btsps?\b|\bteaspoons?\b", 5),
    (r"\bml\b|\bmillilit(?:er|re)s?\b", 1),
    (r"\bl\b|\blit(?:er|re)s?\b", 1000),
    (r"\bquarts?\b|\bqt\b", 946),
    (r"\bpints?\b|\bpt\b", 473),
    (r"\bgallons?\b|\bgal\b", 3785),
    (r"\bglass(?:es)?\b", 240),
    (r"\bscoops?\b", 30),
    (r"\bpinch(?:es)?\b|\bdash(?:es)?\b|\bsprinkles?\b", 0.5),
    (r"\bsplash(?:es)?\b", 5),
    (r"\bdollops?\b", 15),
    (r"\bhandfuls?\b", 40),
    (r"\bslices?\b", 25),
    (r"\bbowls?\b", 200),
    (r"\bplates?\b", 300),
    (r"\bwedges?\b", 15),
    (r"\bsprigs?\b", 1),
    (r"\bleaf\b|\bleaves\b", 0.5),
    (r"\bcloves?\b", 3),
    (r"\bsticks?\b", 113),
    (r"\bpats?\b", 5),
)
