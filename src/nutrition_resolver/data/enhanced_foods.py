"""Curated composite, ethnic and restaurant dishes.

FDC represents these poorly (a patty is not the sum of flour and beef),
so each entry carries a fixed per-100g profile and a typical portion.
Sodium is stored in milligrams.
"""

from nutrition_resolver.domain.nutrition import AliasEntry, NutrientProfile

CATEGORY_PROFILES: dict[str, dict[str, float]] = {
    "caribbean_pastry": {
        "calories": 310, "protein": 12.0, "carbs": 28.0, "fat": 17.0,
        "iron": 2.5, "calcium": 45, "zinc": 2.0,
    },
    "caribbean_meat": {
        "calories": 245, "protein": 26.0, "carbs": 4.0, "fat": 13.0,
        "iron": 2.8, "calcium": 20, "zinc": 2.5,
    },
    "middle_eastern": {
        "calories": 280, "protein": 15.0, "carbs": 25.0, "fat": 14.0,
        "iron": 2.8, "calcium": 60, "zinc": 2.2,
    },
    "mexican": {
        "calories": 220, "protein": 13.0, "carbs": 24.0, "fat": 9.0,
        "iron": 2.0, "calcium": 85, "zinc": 1.8,
    },
    "asian": {
        "calories": 200, "protein": 20.0, "carbs": 12.0, "fat": 8.0,
        "iron": 1.5, "calcium": 25, "zinc": 1.5,
    },
    "thai": {
        "calories": 155, "protein": 12.0, "carbs": 15.0, "fat": 6.0,
        "iron": 1.8, "calcium": 35, "zinc": 1.4,
    },
    "chinese": {
        "calories": 220, "protein": 14.0, "carbs": 22.0, "fat": 9.0,
        "iron": 1.6, "calcium": 30, "zinc": 1.5,
    },
    "korean": {
        "calories": 175, "protein": 16.0, "carbs": 15.0, "fat": 6.5,
        "iron": 2.0, "calcium": 40, "zinc": 2.0,
    },
    "vietnamese": {
        "calories": 155, "protein": 10.0, "carbs": 20.0, "fat": 5.0,
        "iron": 1.6, "calcium": 38, "zinc": 1.3,
    },
    "greek": {
        "calories": 205, "protein": 14.5, "carbs": 12.0, "fat": 12.5,
        "iron": 2.3, "calcium": 155, "zinc": 2.4,
    },
    "italian": {
        "calories": 195, "protein": 14.0, "carbs": 20.0, "fat": 8.0,
        "iron": 1.8, "calcium": 150, "zinc": 1.6,
    },
    "indian": {
        "calories": 195, "protein": 15.0, "carbs": 15.0, "fat": 9.0,
        "iron": 2.4, "calcium": 65, "zinc": 1.8,
    },
    "breakfast": {
        "calories": 220, "protein": 9.0, "carbs": 25.0, "fat": 10.0,
        "iron": 1.8, "calcium": 105, "zinc": 1.2,
    },
    "vegetarian": {
        "calories": 160, "protein": 9.0, "carbs": 20.0, "fat": 6.0,
        "iron": 3.0, "calcium": 85, "zinc": 1.8,
    },
    "african": {
        "calories": 165, "protein": 5.0, "carbs": 32.0, "fat": 3.0,
        "iron": 1.8, "calcium": 25, "zinc": 1.1,
    },
}


def category_profile(category: str) -> dict[str, float]:
    """Return baseline nutrients for a dish category, empty if unknown."""
    return dict(CATEGORY_PROFILES.get(category, {}))


def _profile(category: str, **values: float) -> NutrientProfile:
    """Layer explicit values over the category baseline."""
    return NutrientProfile.from_mapping({**category_profile(category), **values})


ENHANCED_FOODS: tuple[AliasEntry, ...] = (
    AliasEntry(
        canonical_key="jamaican_beef_patty",
        display_name="Jamaican Beef Patty",
        aliases=(
            "jamaican beef patty", "beef patty jamaican", "beef patty",
            "jamaican patty", "caribbean beef patty",
        ),
        category="caribbean_pastry",
        portion_weight_grams=142,
        per_100g=_profile(
            "caribbean_pastry",
            calories=320, protein=12.5, carbs=28, fat=18.5, fiber=2.1, sugar=2.5,
            sodium=650, iron=2.8, calcium=45, zinc=2.1, magnesium=18, vitamin_c=1.2,
            vitamin_d=0.1, vitamin_b12=0.8, folate=25,
        ),
        note=(
            "Spiced ground beef in turmeric pastry - composite food with meat "
            "filling and flour pastry"
        ),
    ),
    AliasEntry(
        canonical_key="chicken_patty_jamaican",
        display_name="Jamaican Chicken Patty",
        aliases=(
            "jamaican chicken patty", "chicken patty jamaican", "chicken patty",
            "caribbean chicken patty",
        ),
        category="caribbean_pastry",
        portion_weight_grams=135,
        per_100g=_profile(
            "caribbean_pastry",
            calories=298, protein=14.2, carbs=26.8, fat=16.2, fiber=2, sugar=2.2,
            sodium=580, iron=1.9, calcium=42, zinc=1.8, magnesium=16, vitamin_c=0.8,
            vitamin_d=0.2, vitamin_b12=0.6, folate=23,
        ),
    ),
    AliasEntry(
        canonical_key="curry_goat",
        display_name="Curry Goat",
        aliases=(
            "curry goat", "goat curry", "jamaican curry goat", "caribbean curry goat",
        ),
        category="caribbean_meat",
        portion_weight_grams=200,
        per_100g=_profile(
            "caribbean_meat",
            calories=265, protein=28.5, carbs=3.2, fat=15.8, fiber=0.8, sodium=450,
            iron=4.2, calcium=22, zinc=3.8, magnesium=24, vitamin_c=2.5, vitamin_d=0.3,
            vitamin_b12=1.2, folate=8,
        ),
    ),
    AliasEntry(
        canonical_key="jerk_chicken",
        display_name="Jerk Chicken",
        aliases=("jerk chicken", "jamaican jerk chicken", "caribbean jerk chicken"),
        category="caribbean_meat",
        portion_weight_grams=180,
        per_100g=_profile(
            "caribbean_meat",
            calories=242, protein=26.8, carbs=4.5, fat=12.8, fiber=0.5, sugar=3.2,
            sodium=580, iron=1.8, calcium=18, zinc=2.1, magnesium=28, vitamin_c=8.5,
            vitamin_d=0.2, vitamin_b12=0.4, folate=12,
        ),
    ),
    AliasEntry(
        canonical_key="falafel",
        display_name="Falafel",
        aliases=("falafel", "falafels", "chickpea fritters"),
        category="middle_eastern",
        portion_weight_grams=17,
        per_100g=_profile(
            "middle_eastern",
            calories=333, protein=13.3, carbs=31.8, fat=17.8, fiber=4.9, sugar=2.3,
            sodium=580, iron=3.4, calcium=54, zinc=1.5, magnesium=82, vitamin_c=1.2,
            vitamin_d=0, vitamin_b12=0, folate=96,
        ),
    ),
    AliasEntry(
        canonical_key="shawarma",
        display_name="Shawarma",
        aliases=("shawarma", "shawerma", "chicken shawarma", "lamb shawarma"),
        category="middle_eastern",
        portion_weight_grams=250,
        per_100g=_profile(
            "middle_eastern",
            calories=285, protein=22.8, carbs=18.5, fat=14.2, fiber=2.1, sugar=2.8,
            sodium=680, iron=2.5, calcium=85, zinc=2.8, magnesium=32, vitamin_c=5.2,
            vitamin_d=0.1, vitamin_b12=0.8, folate=42,
        ),
    ),
    AliasEntry(
        canonical_key="chicken_teriyaki",
        display_name="Chicken Teriyaki",
        aliases=("chicken teriyaki", "teriyaki chicken", "japanese chicken teriyaki"),
        category="asian",
        portion_weight_grams=200,
        per_100g=_profile(
            "asian",
            calories=195, protein=23.2, carbs=8.5, fat=7.8, fiber=0.2, sugar=7.2,
            sodium=850, iron=1.2, calcium=15, zinc=1.8, magnesium=25, vitamin_c=0.5,
            vitamin_d=0.1, vitamin_b12=0.3, folate=8,
        ),
    ),
    AliasEntry(
        canonical_key="chicken_burrito",
        display_name="Chicken Burrito",
        aliases=("chicken burrito", "burrito chicken", "burrito", "mexican burrito"),
        category="mexican",
        portion_weight_grams=250,
        per_100g=_profile(
            "mexican",
            calories=215, protein=12.8, carbs=22.5, fat=8.8, fiber=3.2, sugar=2.1,
            sodium=520, iron=2.1, calcium=95, zinc=1.9, magnesium=28, vitamin_c=3.8,
            vitamin_d=0.1, vitamin_b12=0.4, folate=35,
        ),
    ),
    AliasEntry(
        canonical_key="chicken_sandwich",
        display_name="Chicken Sandwich",
        aliases=("chicken sandwich", "fried chicken sandwich", "chicken burger"),
        category="american_fast_food",
        portion_weight_grams=195,
        per_100g=_profile(
            "american_fast_food",
            calories=265, protein=16.8, carbs=22.5, fat=12.5, fiber=2.8, sugar=3.2,
            sodium=650, iron=2.2, calcium=58, zinc=1.8, magnesium=22, vitamin_c=1.2,
            vitamin_d=0.1, vitamin_b12=0.4, folate=28,
        ),
    ),
    AliasEntry(
        canonical_key="fish_and_chips",
        display_name="Fish and Chips",
        aliases=(
            "fish and chips", "fish & chips", "battered fish chips", "fried fish chips",
        ),
        category="british",
        portion_weight_grams=320,
        per_100g=_profile(
            "british",
            calories=232, protein=15.8, carbs=18.2, fat=11.5, fiber=1.8, sugar=0.8,
            sodium=420, iron=1.5, calcium=28, zinc=1.2, magnesium=35, vitamin_c=8.5,
            vitamin_d=2.8, vitamin_b12=1.8, folate=18,
        ),
    ),
    AliasEntry(
        canonical_key="chicken_tikka_masala",
        display_name="Chicken Tikka Masala",
        aliases=("chicken tikka masala", "tikka masala", "indian chicken curry"),
        category="indian",
        portion_weight_grams=200,
        per_100g=_profile(
            "indian",
            calories=185, protein=18.5, carbs=6.8, fat=9.5, fiber=1.2, sugar=4.2,
            sodium=580, iron=2.8, calcium=65, zinc=2.2, magnesium=25, vitamin_c=8.5,
            vitamin_d=0.1, vitamin_b12=0.5, folate=15,
        ),
    ),
    AliasEntry(
        canonical_key="butter_chicken",
        display_name="Butter Chicken",
        aliases=("butter chicken", "murgh makhani", "indian butter chicken"),
        category="indian",
        portion_weight_grams=200,
        per_100g=_profile(
            "indian",
            calories=195, protein=19.2, carbs=7.5, fat=11.8, fiber=1, sugar=5.8,
            sodium=620, iron=2.2, calcium=58, zinc=2, magnesium=22, vitamin_c=6.2,
            vitamin_d=0.1, vitamin_b12=0.4, folate=12,
        ),
    ),
    AliasEntry(
        canonical_key="biryani",
        display_name="Chicken Biryani",
        aliases=("biryani", "chicken biryani", "indian biryani", "basmati biryani"),
        category="indian",
        portion_weight_grams=250,
        per_100g=_profile(
            "indian",
            calories=205, protein=11.5, carbs=28.5, fat=6.8, fiber=1.8, sugar=2.1,
            sodium=480, iron=1.8, calcium=35, zinc=1.5, magnesium=28, vitamin_c=2.5,
            vitamin_d=0.1, vitamin_b12=0.3, folate=18,
        ),
    ),
    AliasEntry(
        canonical_key="samosa",
        display_name="Samosa",
        aliases=("samosa", "samosas", "indian samosa", "vegetable samosa"),
        category="indian",
        portion_weight_grams=45,
        per_100g=_profile(
            "indian",
            calories=308, protein=6.8, carbs=32.5, fat=17.2, fiber=3.2, sugar=2.8,
            sodium=550, iron=2.8, calcium=45, zinc=1.2, magnesium=35, vitamin_c=8.5,
            vitamin_d=0, vitamin_b12=0, folate=45,
        ),
    ),
    AliasEntry(
        canonical_key="pad_thai",
        display_name="Pad Thai",
        aliases=(
            "pad thai", "thai noodles", "thai stir fry noodles", "pad thai noodles",
        ),
        category="thai",
        portion_weight_grams=200,
        per_100g=_profile(
            "thai",
            calories=154, protein=8.1, carbs=14.4, fat=2.1, fiber=1.2, sugar=4.1,
            sodium=380, iron=1.8, calcium=32, zinc=1.2, magnesium=25, vitamin_c=8.5,
            vitamin_d=0.1, vitamin_b12=0.2, folate=28,
        ),
        note="Traditional Thai stir-fried rice noodles with tamarind sauce",
    ),
    AliasEntry(
        canonical_key="green_curry",
        display_name="Thai Green Curry",
        aliases=(
            "green curry", "thai green curry", "gaeng keow wan", "green curry chicken",
        ),
        category="thai",
        portion_weight_grams=200,
        per_100g=_profile(
            "thai",
            calories=165, protein=14.8, carbs=8.5, fat=9.2, fiber=2.1, sugar=4.8,
            sodium=680, iron=2.5, calcium=45, zinc=1.8, magnesium=32, vitamin_c=15.2,
            vitamin_d=0.1, vitamin_b12=0.3, folate=22,
        ),
    ),
    AliasEntry(
        canonical_key="tom_yum",
        display_name="Tom Yum Soup",
        aliases=("tom yum", "tom yum soup", "thai soup", "tom yum goong"),
        category="thai",
        portion_weight_grams=300,
        per_100g=_profile(
            "thai",
            calories=85, protein=8.5, carbs=6.2, fat=3.8, fiber=1.2, sugar=3.5,
            sodium=850, iron=1.2, calcium=28, zinc=1.1, magnesium=18, vitamin_c=12.5,
            vitamin_d=0.2, vitamin_b12=0.8, folate=15,
        ),
    ),
    AliasEntry(
        canonical_key="fried_rice",
        display_name="Fried Rice",
        aliases=(
            "fried rice", "chinese fried rice", "chicken fried rice", "beef fried rice",
            "vegetable fried rice",
        ),
        category="chinese",
        portion_weight_grams=200,
        per_100g=_profile(
            "chinese",
            calories=175, protein=5.8, carbs=28.5, fat=4.2, fiber=1.8, sugar=2.1,
            sodium=450, iron=1.5, calcium=25, zinc=1.1, magnesium=22, vitamin_c=8.5,
            vitamin_d=0.1, vitamin_b12=0.1, folate=18,
        ),
    ),
    AliasEntry(
        canonical_key="general_tso_chicken",
        display_name="General Tso's Chicken",
        aliases=(
            "general tso chicken", "general tso's chicken", "chinese fried chicken",
        ),
        category="chinese",
        portion_weight_grams=180,
        per_100g=_profile(
            "chinese",
            calories=295, protein=18.5, carbs=22.8, fat=16.2, fiber=1.5, sugar=18.5,
            sodium=780, iron=1.8, calcium=25, zinc=1.9, magnesium=22, vitamin_c=2.5,
            vitamin_d=0.1, vitamin_b12=0.3, folate=12,
        ),
    ),
    AliasEntry(
        canonical_key="orange_chicken",
        display_name="Orange Chicken",
        aliases=("orange chicken", "chinese orange chicken", "sweet orange chicken"),
        category="chinese",
        portion_weight_grams=170,
        per_100g=_profile(
            "chinese",
            calories=285, protein=17.2, carbs=24.5, fat=14.8, fiber=1.2, sugar=20.5,
            sodium=680, iron=1.5, calcium=22, zinc=1.7, magnesium=18, vitamin_c=8.5,
            vitamin_d=0.1, vitamin_b12=0.3, folate=10,
        ),
    ),
    AliasEntry(
        canonical_key="lo_mein",
        display_name="Lo Mein",
        aliases=("lo mein", "chinese lo mein", "chicken lo mein", "beef lo mein"),
        category="chinese",
        portion_weight_grams=200,
        per_100g=_profile(
            "chinese",
            calories=185, protein=9.5, carbs=28.5, fat=4.8, fiber=2.2, sugar=3.8,
            sodium=580, iron=1.8, calcium=32, zinc=1.2, magnesium=25, vitamin_c=8.5,
            vitamin_d=0.1, vitamin_b12=0.2, folate=28,
        ),
    ),
    AliasEntry(
        canonical_key="egg_roll",
        display_name="Egg Roll",
        aliases=("egg roll", "egg rolls", "chinese egg roll", "spring roll"),
        category="chinese",
        portion_weight_grams=85,
        per_100g=_profile(
            "chinese",
            calories=245, protein=8.2, carbs=24.5, fat=13.8, fiber=2.8, sugar=2.5,
            sodium=650, iron=1.8, calcium=42, zinc=1.2, magnesium=18, vitamin_c=12.5,
            vitamin_d=0.1, vitamin_b12=0.1, folate=25,
        ),
    ),
    AliasEntry(
        canonical_key="gyro",
        display_name="Gyro",
        aliases=("gyro", "greek gyro", "lamb gyro", "chicken gyro"),
        category="greek",
        portion_weight_grams=280,
        per_100g=_profile(
            "greek",
            calories=215, protein=16.8, carbs=15.2, fat=11.5, fiber=1.8, sugar=2.5,
            sodium=580, iron=2.5, calcium=125, zinc=2.8, magnesium=28, vitamin_c=5.2,
            vitamin_d=0.1, vitamin_b12=1.2, folate=25,
        ),
    ),
    AliasEntry(
        canonical_key="moussaka",
        display_name="Moussaka",
        aliases=("moussaka", "greek moussaka", "eggplant moussaka"),
        category="greek",
        portion_weight_grams=200,
        per_100g=_profile(
            "greek",
            calories=195, protein=12.5, carbs=8.5, fat=13.8, fiber=2.8, sugar=5.2,
            sodium=480, iron=2.2, calcium=185, zinc=2.1, magnesium=32, vitamin_c=8.5,
            vitamin_d=0.2, vitamin_b12=0.8, folate=28,
        ),
    ),
    AliasEntry(
        canonical_key="lasagna",
        display_name="Lasagna",
        aliases=("lasagna", "lasagne", "meat lasagna", "cheese lasagna"),
        category="italian",
        portion_weight_grams=220,
        per_100g=_profile(
            "italian",
            calories=185, protein=12.8, carbs=18.5, fat=8.2, fiber=2.1, sugar=4.8,
            sodium=580, iron=2.1, calcium=185, zinc=1.8, magnesium=22, vitamin_c=5.2,
            vitamin_d=0.1, vitamin_b12=0.8, folate=25,
        ),
    ),
    AliasEntry(
        canonical_key="chicken_parmigiana",
        display_name="Chicken Parmigiana",
        aliases=("chicken parmigiana", "chicken parmesan", "chicken parm"),
        category="italian",
        portion_weight_grams=200,
        per_100g=_profile(
            "italian",
            calories=235, protein=22.5, carbs=12.8, fat=12.2, fiber=1.8, sugar=4.2,
            sodium=680, iron=1.8, calcium=185, zinc=2.1, magnesium=25, vitamin_c=8.5,
            vitamin_d=0.1, vitamin_b12=0.8, folate=18,
        ),
    ),
    AliasEntry(
        canonical_key="risotto",
        display_name="Risotto",
        aliases=("risotto", "mushroom risotto", "seafood risotto"),
        category="italian",
        portion_weight_grams=180,
        per_100g=_profile(
            "italian",
            calories=165, protein=5.8, carbs=28.5, fat=3.8, fiber=1.2, sugar=2.1,
            sodium=450, iron=1.2, calcium=85, zinc=1.1, magnesium=22, vitamin_c=2.5,
            vitamin_d=0.1, vitamin_b12=0.2, folate=18,
        ),
    ),
    AliasEntry(
        canonical_key="bulgogi",
        display_name="Bulgogi",
        aliases=("bulgogi", "korean bbq", "korean beef", "marinated beef"),
        category="korean",
        portion_weight_grams=150,
        per_100g=_profile(
            "korean",
            calories=195, protein=22.8, carbs=8.5, fat=8.2, fiber=0.5, sugar=6.8,
            sodium=780, iron=2.8, calcium=18, zinc=3.2, magnesium=22, vitamin_c=2.5,
            vitamin_d=0.1, vitamin_b12=1.2, folate=8,
        ),
    ),
    AliasEntry(
        canonical_key="bibimbap",
        display_name="Bibimbap",
        aliases=("bibimbap", "korean mixed rice", "korean bowl"),
        category="korean",
        portion_weight_grams=300,
        per_100g=_profile(
            "korean",
            calories=155, protein=8.5, carbs=22.5, fat=4.8, fiber=3.2, sugar=4.2,
            sodium=580, iron=2.1, calcium=65, zinc=1.5, magnesium=28, vitamin_c=18.5,
            vitamin_d=0.2, vitamin_b12=0.3, folate=85,
        ),
    ),
    AliasEntry(
        canonical_key="pho",
        display_name="Pho",
        aliases=("pho", "vietnamese pho", "pho bo", "beef pho"),
        category="vietnamese",
        portion_weight_grams=400,
        per_100g=_profile(
            "vietnamese",
            calories=85, protein=6.8, carbs=12.5, fat=1.5, fiber=0.8, sugar=2.1,
            sodium=680, iron=1.2, calcium=18, zinc=1.1, magnesium=15, vitamin_c=8.5,
            vitamin_d=0.1, vitamin_b12=0.3, folate=15,
        ),
    ),
    AliasEntry(
        canonical_key="banh_mi",
        display_name="Banh Mi",
        aliases=("banh mi", "vietnamese sandwich", "pork banh mi"),
        category="vietnamese",
        portion_weight_grams=220,
        per_100g=_profile(
            "vietnamese",
            calories=225, protein=12.8, carbs=28.5, fat=8.2, fiber=2.8, sugar=3.5,
            sodium=680, iron=2.1, calcium=58, zinc=1.8, magnesium=22, vitamin_c=15.2,
            vitamin_d=0.1, vitamin_b12=0.4, folate=28,
        ),
    ),
    AliasEntry(
        canonical_key="ikea_swedish_meatballs_with_mash",
        display_name="IKEA Swedish Meatballs with Mash",
        aliases=(
            "ikea swedish meatballs with mash", "swedish meatballs with mash",
            "ikea meatballs with mashed potatoes", "ikea meatballs mash",
            "swedish meatballs mashed potatoes",
        ),
        category="swedish",
        portion_weight_grams=300,
        per_100g=_profile(
            "swedish",
            calories=180, protein=12.5, carbs=15.2, fat=8.5, fiber=1.2, sugar=2.8,
            sodium=650, iron=1.8, calcium=45, zinc=1.6, magnesium=22, vitamin_c=8.5,
            vitamin_d=0.1, vitamin_b12=0.5, folate=18,
        ),
        note=(
            "Swedish meatballs served with mashed potatoes - composite dish with "
            "meat and potato carbohydrates"
        ),
    ),
    AliasEntry(
        canonical_key="pancakes",
        display_name="Pancakes",
        aliases=("pancakes", "pancake", "buttermilk pancakes", "stack of pancakes"),
        category="breakfast",
        portion_weight_grams=150,
        per_100g=_profile(
            "breakfast",
            calories=225, protein=6.2, carbs=28.5, fat=9.8, fiber=1.2, sugar=6.8,
            sodium=580, iron=1.8, calcium=125, zinc=0.8, magnesium=18, vitamin_c=0.5,
            vitamin_d=0.2, vitamin_b12=0.3, folate=28,
        ),
    ),
    AliasEntry(
        canonical_key="french_toast",
        display_name="French Toast",
        aliases=("french toast", "french toast sticks", "cinnamon french toast"),
        category="breakfast",
        portion_weight_grams=120,
        per_100g=_profile(
            "breakfast",
            calories=255, protein=8.5, carbs=32.5, fat=11.2, fiber=1.8, sugar=8.5,
            sodium=480, iron=2.1, calcium=85, zinc=1.1, magnesium=18, vitamin_c=0.5,
            vitamin_d=0.8, vitamin_b12=0.8, folate=35,
        ),
    ),
    AliasEntry(
        canonical_key="omelet",
        display_name="Omelet",
        aliases=("omelet", "omelette", "cheese omelet", "veggie omelet"),
        category="breakfast",
        portion_weight_grams=150,
        per_100g=_profile(
            "breakfast",
            calories=185, protein=12.8, carbs=2.1, fat=14.2, fiber=0.5, sugar=1.8,
            sodium=480, iron=1.8, calcium=125, zinc=1.5, magnesium=12, vitamin_c=2.5,
            vitamin_d=1.2, vitamin_b12=1.8, folate=45,
        ),
    ),
    AliasEntry(
        canonical_key="breakfast_burrito",
        display_name="Breakfast Burrito",
        aliases=("breakfast burrito", "morning burrito", "egg burrito"),
        category="breakfast",
        portion_weight_grams=200,
        per_100g=_profile(
            "breakfast",
            calories=195, protein=11.5, carbs=18.5, fat=9.8, fiber=2.8, sugar=2.1,
            sodium=580, iron=2.1, calcium=85, zinc=1.5, magnesium=22, vitamin_c=5.2,
            vitamin_d=0.8, vitamin_b12=0.8, folate=35,
        ),
    ),
    AliasEntry(
        canonical_key="buddha_bowl",
        display_name="Buddha Bowl",
        aliases=("buddha bowl", "grain bowl", "veggie bowl", "quinoa bowl"),
        category="vegetarian",
        portion_weight_grams=300,
        per_100g=_profile(
            "vegetarian",
            calories=135, protein=5.8, carbs=22.5, fat=3.8, fiber=5.2, sugar=4.8,
            sodium=250, iron=2.8, calcium=85, zinc=1.5, magnesium=85, vitamin_c=25.5,
            vitamin_d=0, vitamin_b12=0, folate=125,
        ),
    ),
    AliasEntry(
        canonical_key="veggie_burger",
        display_name="Veggie Burger",
        aliases=(
            "veggie burger", "vegetarian burger", "plant burger", "black bean burger",
        ),
        category="vegetarian",
        portion_weight_grams=120,
        per_100g=_profile(
            "vegetarian",
            calories=185, protein=12.5, carbs=18.5, fat=8.2, fiber=6.8, sugar=2.8,
            sodium=680, iron=3.2, calcium=85, zinc=2.1, magnesium=65, vitamin_c=5.2,
            vitamin_d=0, vitamin_b12=0.8, folate=85,
        ),
    ),
    AliasEntry(
        canonical_key="jollof_rice",
        display_name="Jollof Rice",
        aliases=("jollof rice", "west african rice", "nigerian jollof"),
        category="african",
        portion_weight_grams=200,
        per_100g=_profile(
            "african",
            calories=165, protein=4.8, carbs=32.5, fat=2.8, fiber=1.8, sugar=3.2,
            sodium=450, iron=1.8, calcium=25, zinc=1.1, magnesium=28, vitamin_c=18.5,
            vitamin_d=0, vitamin_b12=0, folate=18,
        ),
    ),
    AliasEntry(
        canonical_key="beef_broccoli_stir_fry",
        display_name="Beef and Broccoli Stir Fry",
        aliases=(
            "beef and broccoli", "beef broccoli stir fry", "beef with broccoli",
            "chinese beef and broccoli", "stir fried beef and broccoli",
        ),
        category="chinese",
        portion_weight_grams=300,
        per_100g=_profile(
            "chinese",
            calories=155, protein=18.5, carbs=8.2, fat=6.8, fiber=2.8, sugar=3.1,
            sodium=650, iron=2.5, calcium=42, zinc=2.8, magnesium=25, vitamin_c=65,
            vitamin_d=0.1, vitamin_b12=1.2, folate=28,
        ),
        note=(
            "Beef strips with broccoli in savory sauce - balanced protein and "
            "vegetables"
        ),
    ),
    AliasEntry(
        canonical_key="chicken_alfredo_pasta",
        display_name="Chicken Alfredo Pasta",
        aliases=(
            "chicken alfredo", "fettuccine alfredo with chicken",
            "chicken pasta alfredo", "alfredo chicken", "creamy chicken pasta",
        ),
        category="italian",
        portion_weight_grams=280,
        per_100g=_profile(
            "italian",
            calories=285, protein=18.2, carbs=22.5, fat=15.8, fiber=1.5, sugar=2.8,
            sodium=680, iron=1.2, calcium=185, zinc=1.8, magnesium=22, vitamin_c=1.2,
            vitamin_d=0.8, vitamin_b12=0.6, folate=25,
        ),
        note=(
            "Pasta with grilled chicken in rich cream sauce - high protein, carbs, "
            "and dairy fats"
        ),
    ),
    AliasEntry(
        canonical_key="tuna_sandwich",
        display_name="Tuna Sandwich",
        aliases=("tuna sandwich", "tuna salad sandwich", "tuna sub", "tuna on bread"),
        category="american",
        portion_weight_grams=180,
        per_100g=_profile(
            "american",
            calories=225, protein=18.5, carbs=22.8, fat=8.2, fiber=2.8, sugar=3.1,
            sodium=580, iron=1.8, calcium=85, zinc=1.2, magnesium=22, vitamin_c=2.5,
            vitamin_d=1.8, vitamin_b12=2.8, folate=45,
        ),
        note="Tuna salad on bread - complete protein with complex carbohydrates",
    ),
    AliasEntry(
        canonical_key="chicken_quesadilla",
        display_name="Chicken Quesadilla",
        aliases=(
            "chicken quesadilla", "quesadilla with chicken",
            "grilled chicken quesadilla",
        ),
        category="mexican",
        portion_weight_grams=200,
        per_100g=_profile(
            "mexican",
            calories=268, protein=19.8, carbs=18.5, fat=13.5, fiber=2.2, sugar=1.8,
            sodium=620, iron=1.5, calcium=285, zinc=2.2, magnesium=18, vitamin_c=1.5,
            vitamin_d=0.3, vitamin_b12=0.8, folate=22,
        ),
        note=(
            "Grilled chicken and cheese in flour tortilla - balanced protein, "
            "carbs, and dairy fats"
        ),
    ),
    AliasEntry(
        canonical_key="beef_tacos",
        display_name="Beef Tacos",
        aliases=(
            "beef tacos", "ground beef tacos", "hard shell tacos", "soft tacos beef",
        ),
        category="mexican",
        portion_weight_grams=85,
        per_100g=_profile(
            "mexican",
            calories=245, protein=15.8, carbs=18.2, fat=12.5, fiber=2.8, sugar=2.1,
            sodium=480, iron=2.2, calcium=125, zinc=2.8, magnesium=25, vitamin_c=8.5,
            vitamin_d=0.1, vitamin_b12=1.1, folate=28,
        ),
        note="Ground beef in corn/flour shell with toppings - complete balanced meal",
    ),
    AliasEntry(
        canonical_key="protein_quinoa_bowl",
        display_name="Protein Quinoa Bowl",
        aliases=(
            "quinoa bowl", "protein bowl", "quinoa power bowl", "chicken quinoa bowl",
        ),
        category="healthy",
        portion_weight_grams=350,
        per_100g=_profile(
            "healthy",
            calories=185, protein=16.5, carbs=22.8, fat=5.8, fiber=4.2, sugar=3.5,
            sodium=250, iron=2.8, calcium=45, zinc=1.8, magnesium=85, vitamin_c=25,
            vitamin_d=0.2, vitamin_b12=0.6, folate=45,
        ),
        note="Complete protein quinoa with vegetables - all essential amino acids",
    ),
    AliasEntry(
        canonical_key="caesar_salad_chicken",
        display_name="Caesar Salad with Chicken",
        aliases=(
            "chicken caesar salad", "caesar salad with chicken",
            "grilled chicken caesar",
        ),
        category="american",
        portion_weight_grams=250,
        per_100g=_profile(
            "american",
            calories=195, protein=18.5, carbs=6.8, fat=12.5, fiber=2.2, sugar=2.8,
            sodium=680, iron=1.5, calcium=185, zinc=1.8, magnesium=18, vitamin_c=15,
            vitamin_d=0.2, vitamin_b12=0.8, folate=35,
        ),
        note=(
            "Grilled chicken on romaine with creamy dressing - high protein, "
            "moderate fats"
        ),
    ),
    AliasEntry(
        canonical_key="fried_fish_vegetables",
        display_name="Fried Fish with Vegetables",
        aliases=(
            "fried fish with vegetables", "fish and vegetables",
            "fried fish and veggies", "battered fish with vegetables",
            "fish vegetable combo",
        ),
        category="seafood",
        portion_weight_grams=280,
        per_100g=_profile(
            "seafood",
            calories=185, protein=17.2, carbs=9.8, fat=9.5, fiber=3.2, sugar=4.8,
            sodium=380, iron=1.8, calcium=45, zinc=1.4, magnesium=42, vitamin_c=35,
            vitamin_d=3.2, vitamin_b12=2.1, folate=28,
        ),
        note=(
            "Battered fish with mixed vegetables - high protein from fish, vitamins "
            "from vegetables"
        ),
    ),
    AliasEntry(
        canonical_key="salmon_garlic_butter_vegetables",
        display_name="Salmon in Garlic Butter Sauce with Vegetables",
        aliases=(
            "salmon in garlic butter sauce with vegetables",
            "salmon garlic butter vegetables", "garlic butter salmon with vegetables",
            "salmon with garlic butter and vegetables", "butter salmon vegetables",
            "garlic salmon vegetables",
        ),
        category="seafood",
        portion_weight_grams=320,
        per_100g=_profile(
            "seafood",
            calories=215, protein=22.8, carbs=8.5, fat=11.2, fiber=2.8, sugar=4.2,
            sodium=450, iron=1.2, calcium=38, zinc=1.8, magnesium=35, vitamin_c=28,
            vitamin_d=8.5, vitamin_b12=3.8, folate=32,
        ),
        note=(
            "Premium salmon with garlic butter and vegetables - rich in omega-3s "
            "and vitamin D"
        ),
    ),
    AliasEntry(
        canonical_key="roast_snapper_vegetables",
        display_name="Roast Snapper with Vegetables",
        aliases=(
            "roast snapper with vegetables", "roasted snapper vegetables",
            "snapper with vegetables", "baked snapper vegetables",
            "grilled snapper with vegetables", "snapper and vegetables",
        ),
        category="seafood",
        portion_weight_grams=300,
        per_100g=_profile(
            "seafood",
            calories=165, protein=20.5, carbs=7.8, fat=5.2, fiber=3.5, sugar=4.8,
            sodium=280, iron=1.5, calcium=45, zinc=1.6, magnesium=38, vitamin_c=25,
            vitamin_d=2.8, vitamin_b12=2.5, folate=35,
        ),
        note=(
            "Lean white fish with roasted vegetables - high protein, low fat, "
            "vitamin-rich"
        ),
    ),
    AliasEntry(
        canonical_key="grilled_fish_mediterranean",
        display_name="Grilled Fish Mediterranean Style",
        aliases=(
            "grilled fish mediterranean", "mediterranean fish",
            "fish with tomatoes and olives", "mediterranean grilled fish",
            "fish mediterranean vegetables",
        ),
        category="seafood",
        portion_weight_grams=280,
        per_100g=_profile(
            "seafood",
            calories=195, protein=19.5, carbs=8.8, fat=8.5, fiber=2.8, sugar=5.2,
            sodium=350, iron=1.8, calcium=55, zinc=1.4, magnesium=42, vitamin_c=18,
            vitamin_d=3.5, vitamin_b12=2.8, folate=25,
        ),
        note=(
            "Mediterranean-style grilled fish with tomatoes and olive oil - "
            "heart-healthy"
        ),
    ),
    AliasEntry(
        canonical_key="fish_curry_vegetables",
        display_name="Fish Curry with Vegetables",
        aliases=(
            "fish curry with vegetables", "curry fish vegetables",
            "fish curry and vegetables", "vegetable fish curry", "fish vegetable curry",
        ),
        category="seafood",
        portion_weight_grams=350,
        per_100g=_profile(
            "seafood",
            calories=145, protein=16.8, carbs=9.2, fat=5.8, fiber=2.5, sugar=4.5,
            sodium=480, iron=2.2, calcium=65, zinc=1.6, magnesium=35, vitamin_c=22,
            vitamin_d=2.8, vitamin_b12=2.2, folate=28,
        ),
        note=(
            "Spiced fish curry with mixed vegetables - anti-inflammatory spices "
            "with lean protein"
        ),
    ),
    AliasEntry(
        canonical_key="utz_potato_chips",
        display_name="Utz Potato Chips",
        aliases=(
            "utz potato chips", "utz chips", "utz regular chips", "utz original chips",
        ),
        category="snacks",
        portion_weight_grams=28,
        per_100g=_profile(
            "snacks",
            calories=536, protein=7, carbs=53, fat=32, fiber=4.8, sugar=0.5,
            sodium=1070, iron=1.7, calcium=34, zinc=0.9, magnesium=37, vitamin_c=16,
            vitamin_d=0, vitamin_b12=0, folate=47,
        ),
        note="Classic salted potato chips - high carbs and fats from potatoes and oil",
    ),
    AliasEntry(
        canonical_key="doritos_nacho_cheese",
        display_name="Doritos Nacho Cheese",
        aliases=(
            "doritos nacho cheese", "doritos", "nacho cheese doritos", "doritos chips",
        ),
        category="snacks",
        portion_weight_grams=28,
        per_100g=_profile(
            "snacks",
            calories=500, protein=7.5, carbs=58, fat=26, fiber=3.6, sugar=1.8,
            sodium=1340, iron=1.3, calcium=89, zinc=0.7, magnesium=54, vitamin_c=0,
            vitamin_d=0, vitamin_b12=0.1, folate=36,
        ),
        note=(
            "Corn tortilla chips with nacho cheese seasoning - high sodium and "
            "artificial flavors"
        ),
    ),
    AliasEntry(
        canonical_key="cheetos_crunchy",
        display_name="Cheetos Crunchy",
        aliases=("cheetos crunchy", "cheetos", "crunchy cheetos", "cheese puffs"),
        category="snacks",
        portion_weight_grams=28,
        per_100g=_profile(
            "snacks",
            calories=571, protein=8.9, carbs=57, fat=35.7, fiber=3.6, sugar=3.6,
            sodium=1250, iron=1.8, calcium=71, zinc=1.1, magnesium=36, vitamin_c=0,
            vitamin_d=0, vitamin_b12=0.1, folate=25,
        ),
        note=(
            "Extruded corn snack with cheese coating - very high fat and sodium "
            "content"
        ),
    ),
    AliasEntry(
        canonical_key="pretzels_salted",
        display_name="Salted Pretzels",
        aliases=("pretzels", "salted pretzels", "pretzel sticks", "twisted pretzels"),
        category="snacks",
        portion_weight_grams=30,
        per_100g=_profile(
            "snacks",
            calories=380, protein=10.4, carbs=79.2, fat=3.1, fiber=2.9, sugar=1.7,
            sodium=1630, iron=3.6, calcium=26, zinc=0.9, magnesium=22, vitamin_c=0,
            vitamin_d=0, vitamin_b12=0, folate=88,
        ),
        note="Baked wheat snack with salt coating - lower fat but very high sodium",
    ),
)
