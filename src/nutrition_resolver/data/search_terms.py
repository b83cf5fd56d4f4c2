"""Common dish names mapped to phrases FDC indexes well."""

ALTERNATE_SEARCH_TERMS: dict[str, tuple[str, ...]] = {
    # Pizza
    "cheese pizza": (
        "pizza, cheese",
        "pizza",
        "cheese pizza",
        "pizza, regular crust, cheese",
    ),
    "pepperoni pizza": ("pizza, pepperoni", "pizza", "pepperoni pizza"),
    "pizza slice": ("pizza, cheese", "pizza"),
    # Proteins
    "chicken breast": ("chicken, breast, meat only", "chicken breast", "chicken"),
    "chicken thigh": ("chicken, thigh, meat only", "chicken thigh", "chicken"),
    "ground beef": ("beef, ground, 85% lean meat", "beef, ground", "ground beef"),
    "ground turkey": ("turkey, ground", "ground turkey"),
    "salmon": ("salmon, atlantic, farmed", "salmon, cooked", "salmon"),
    "tuna": ("tuna, light, canned in water", "tuna"),
    # Vegetables
    "broccoli": ("broccoli, raw", "broccoli, cooked", "broccoli"),
    "spinach": ("spinach, raw", "spinach, cooked", "spinach"),
    "carrots": ("carrots, raw", "carrots, cooked", "carrots"),
    "tomatoes": ("tomatoes, raw", "tomatoes, red, ripe"),
    # Starches and grains
    "rice": ("rice, white, long-grain, cooked", "rice, cooked", "rice"),
    "brown rice": ("rice, brown, long-grain, cooked", "rice, brown, cooked"),
    "pasta": ("pasta, cooked", "spaghetti, cooked", "pasta"),
    "bread": ("bread, white", "bread, whole-wheat", "bread"),
    "french fries": (
        "potatoes, french fried",
        "fast foods, potato, french fried",
        "french fries",
    ),
    # Desserts and sweets
    "ice cream": ("ice creams, vanilla", "ice cream, vanilla", "ice cream"),
    "chocolate cake": ("cake, chocolate, prepared from recipe", "cake, chocolate"),
    "apple pie": ("pie, apple, commercially prepared", "pie, apple"),
    "cheesecake": ("cheesecake commercially prepared", "cheesecake"),
    "chocolate": ("chocolate, dark", "candies, chocolate"),
    # Dairy
    "milk": ("milk, reduced fat, fluid, 2% milkfat", "milk, whole", "milk"),
    "cheese": ("cheese, cheddar", "cheese, mozzarella", "cheese"),
    "yogurt": ("yogurt, plain, low fat", "yogurt, greek, plain"),
    "egg": ("egg, whole, raw, fresh", "egg, whole, cooked, hard-boiled"),
    # Condiments and sauces
    "tomato sauce": ("sauce, tomato, canned", "tomato sauce", "marinara sauce"),
    "ketchup": ("catsup", "ketchup"),
    "mayonnaise": ("mayonnaise, regular", "mayonnaise"),
    # Beverages
    "orange juice": ("orange juice, raw", "orange juice"),
    "apple juice": ("apple juice, canned or bottled", "apple juice"),
    "coffee": ("coffee, brewed from grounds", "coffee"),
    # Snacks
    "potato chips": ("snacks, potato chips, plain", "potato chips"),
    "nuts": ("nuts, mixed", "almonds", "peanuts"),
    "crackers": ("crackers, saltines", "crackers"),
    # Fruits
    "apple": ("apples, raw, with skin", "apple"),
    "banana": ("bananas, raw", "banana"),
    "orange": ("oranges, raw, all commercial varieties", "orange"),
    "strawberry": ("strawberries, raw", "strawberries"),
    "grapes": ("grapes, red or green", "grapes"),
}

# Words never searched on their own when splitting compound names.
SEARCH_STOP_WORDS = frozenset(
    {"with", "and", "the", "in", "on", "sauce", "dressing"}
)
