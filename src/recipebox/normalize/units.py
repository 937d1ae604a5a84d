"""Unit spelling normalization for shopping-list merging."""

# =============================================================================
# Unit Vocabulary
# =============================================================================

# Singular form -> accepted plural spellings
UNIT_PLURALS: dict[str, tuple[str, ...]] = {
    # Volume
    "cup": ("cups",),
    "tablespoon": ("tablespoons",),
    "tbsp": ("tbsps",),
    "teaspoon": ("teaspoons",),
    "tsp": ("tsps",),
    "pint": ("pints",),
    "quart": ("quarts",),
    "gallon": ("gallons",),
    "liter": ("liters",),
    "litre": ("litres",),
    "milliliter": ("milliliters",),
    "millilitre": ("millilitres",),
    "ml": (),
    "l": (),
    # Weight
    "gram": ("grams",),
    "kilogram": ("kilograms",),
    "ounce": ("ounces",),
    "pound": ("pounds",),
    "lb": ("lbs",),
    "oz": (),
    "g": (),
    "kg": ("kgs",),
    # Count
    "piece": ("pieces",),
    "slice": ("slices",),
    "clove": ("cloves",),
    "head": ("heads",),
    "bunch": ("bunches",),
    "sprig": ("sprigs",),
    "can": ("cans",),
    "jar": ("jars",),
    "package": ("packages",),
    "pack": ("packs",),
    "bottle": ("bottles",),
    "bag": ("bags",),
    "box": ("boxes",),
    "stick": ("sticks",),
    "fillet": ("fillets",),
    "pinch": ("pinches",),
    "dash": ("dashes",),
    "handful": ("handfuls",),
    "drop": ("drops",),
}

SINGULAR_UNITS: dict[str, str] = {
    plural: singular for singular, plurals in UNIT_PLURALS.items() for plural in plurals
}


def normalize_unit(unit: str) -> str:
    """
    Normalize a unit spelling so plural and singular forms compare equal.

    Lowercases, drops a trailing period and maps known plurals to their
    singular ("Cups" -> "cup", "tbsps." -> "tbsp"). Unknown words are only
    lowercased; no conversion between different units is attempted.
    """
    cleaned = unit.strip().lower().rstrip(".")
    return SINGULAR_UNITS.get(cleaned, cleaned)


def is_unit(word: str) -> bool:
    """Whether a word is a known measuring or counting unit in any spelling."""
    return normalize_unit(word) in UNIT_PLURALS
