"""Curated dish lookup by key, alias and pattern."""

import re
from dataclasses import dataclass, field

from nutrition_resolver.data.enhanced_foods import ENHANCED_FOODS
from nutrition_resolver.domain.nutrition import AliasEntry

# Most specific first; the seafood and snack composites must be tested
# before the broader protein and vegetable patterns below them.
ALIAS_PATTERNS: tuple[tuple[re.Pattern[str], str], ...] = tuple(
    (re.compile(pattern), key)
    for pattern, key in (
        (r"pad\s*thai", "pad_thai"),
        (r"green\s*curry", "green_curry"),
        (r"tom\s*yum", "tom_yum"),
        (r"fried\s*rice", "fried_rice"),
        (r"general\s*tso", "general_tso_chicken"),
        (r"orange\s*chicken", "orange_chicken"),
        (r"lo\s*mein", "lo_mein"),
        (r"egg\s*roll", "egg_roll"),
        (r"\bgyros?\b", "gyro"),
        (r"moussaka", "moussaka"),
        (r"pancake", "pancakes"),
        (r"french\s*toast", "french_toast"),
        (r"omelet|omelette", "omelet"),
        (r"(jamaican|caribbean).*beef.*patty", "jamaican_beef_patty"),
        (r"jerk\s*chicken", "jerk_chicken"),
        (r"butter\s*chicken", "butter_chicken"),
        (r"biryani", "biryani"),
        (r"samosa", "samosa"),
        (r"bulgogi", "bulgogi"),
        (r"bibimbap", "bibimbap"),
        (r"\bpho\b", "pho"),
        (r"banh\s*mi", "banh_mi"),
        (r"lasagna|lasagne", "lasagna"),
        (r"chicken\s*parm", "chicken_parmigiana"),
        (r"risotto", "risotto"),
        (r"jollof\s*rice", "jollof_rice"),
        (
            r"salmon.*garlic.*butter.*vegetable|salmon.*butter.*vegetable",
            "salmon_garlic_butter_vegetables",
        ),
        (r"roast.*snapper.*vegetable|snapper.*vegetable", "roast_snapper_vegetables"),
        (
            r"grilled.*fish.*mediterranean|mediterranean.*grilled.*fish",
            "grilled_fish_mediterranean",
        ),
        (r"fish.*curry.*vegetable|curry.*fish.*vegetable", "fish_curry_vegetables"),
        (
            r"fried.*fish.*(vegetable|veggies)|fish.*(vegetable|veggies)",
            "fried_fish_vegetables",
        ),
        (r"utz.*potato.*chip|utz.*chip", "utz_potato_chips"),
        (r"doritos.*nacho|nacho.*doritos", "doritos_nacho_cheese"),
        (r"cheetos.*crunchy|crunchy.*cheetos", "cheetos_crunchy"),
        (r"salted.*pretzel|pretzel.*salted", "pretzels_salted"),
        (r"beef.*broccoli|broccoli.*beef", "beef_broccoli_stir_fry"),
        (r"chicken.*alfredo|alfredo.*chicken", "chicken_alfredo_pasta"),
        (r"tuna.*sandwich|sandwich.*tuna", "tuna_sandwich"),
        (r"chicken.*quesadilla|quesadilla.*chicken", "chicken_quesadilla"),
        (r"beef.*taco|taco.*beef", "beef_tacos"),
        (r"quinoa.*bowl|protein.*bowl", "protein_quinoa_bowl"),
        (r"caesar.*salad.*chicken|chicken.*caesar", "caesar_salad_chicken"),
    )
)

# Names FDC covers comprehensively.
FDC_PREFERRED = (
    "pizza",
    "sushi",
    "yogurt",
    "pasta sauce",
    "apple juice",
    "orange juice",
    "milk",
    "cheese",
    "bread",
    "white rice",
    "brown rice",
)

# Composite dishes where FDC only has a shallow entry.
ENHANCED_PREFERRED = (
    "pad thai",
    "fried rice",
    "chinese fried rice",
    "chicken fried rice",
    "general tso",
    "orange chicken",
    "lo mein",
    "gyro",
    "butter chicken",
    "biryani",
    "green curry",
    "pho",
    "banh mi",
    "bulgogi",
    "bibimbap",
)


def should_use_fdc_data(name: str) -> bool:
    """Return whether FDC data should be tried before the curated table."""
    normalized = name.lower().strip()
    if any(contains_phrase(normalized, food) for food in ENHANCED_PREFERRED):
        return False
    return any(contains_phrase(normalized, food) for food in FDC_PREFERRED)


@dataclass
class AliasMatcher:
    """Find the curated entry for a normalized food name."""

    entries: tuple[AliasEntry, ...] = ENHANCED_FOODS
    patterns: tuple[tuple[re.Pattern[str], str], ...] = ALIAS_PATTERNS
    _by_key: dict[str, AliasEntry] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._by_key = {entry.canonical_key: entry for entry in self.entries}

    def match(self, name: str) -> AliasEntry | None:
        """Return the first entry matched by key, alias, word subset or pattern."""
        normalized = name.lower().strip()
        if not normalized:
            return None

        for entry in self.entries:
            if contains_phrase(normalized, entry.canonical_key.replace("_", " ")):
                return entry

        for entry in self.entries:
            if any(
                normalized == alias or contains_phrase(normalized, alias)
                for alias in entry.aliases
            ):
                return entry

        words = normalized.split()
        for entry in self.entries:
            if any(_all_words_present(alias, words) for alias in entry.aliases):
                return entry

        for pattern, key in self.patterns:
            if pattern.search(normalized):
                entry = self._by_key.get(key)
                if entry is not None:
                    return entry
        return None

    def get(self, canonical_key: str) -> AliasEntry | None:
        """Return the entry for a canonical key."""
        return self._by_key.get(canonical_key)


def contains_phrase(text: str, phrase: str) -> bool:
    """Return whether ``phrase`` appears in ``text`` as whole words.

    The last word may carry a plural "s" or "es".
    """
    return re.search(rf"\b{re.escape(phrase)}(?:e?s)?\b", text) is not None


def _all_words_present(alias: str, words: list[str]) -> bool:
    return all(
        any(word in (part, f"{part}s", f"{part}es") for word in words)
        for part in alias.split()
    )
