"""Shopping-department categories for ingredients."""

from typing import Literal

from recipebox.normalize.units import is_unit

Category = Literal["Produce", "Dairy", "Meat & Seafood", "Pantry", "Frozen", "Other"]

OTHER: Category = "Other"

# =============================================================================
# Keyword Tables
# =============================================================================

# Checked in this order; the first category with a matching keyword wins.
CATEGORY_KEYWORDS: dict[Category, tuple[str, ...]] = {
    "Produce": (
        "onion",
        "garlic",
        "tomato",
        "lettuce",
        "carrot",
        "celery",
        "cucumber",
        "spinach",
        "herbs",
        "basil",
        "parsley",
        "cilantro",
        "thyme",
        "rosemary",
        "lemon",
        "lime",
        "apple",
        "banana",
        "berry",
        "fruit",
        "vegetable",
        "potato",
    ),
    "Dairy": ("milk", "cheese", "butter", "cream", "yogurt", "egg", "eggs", "dairy"),
    "Meat & Seafood": (
        "chicken",
        "beef",
        "pork",
        "fish",
        "salmon",
        "shrimp",
        "turkey",
        "lamb",
        "meat",
        "seafood",
        "bacon",
        "sausage",
    ),
    "Pantry": (
        "flour",
        "sugar",
        "salt",
        "pepper",
        "oil",
        "vinegar",
        "sauce",
        "spice",
        "baking",
        "vanilla",
        "rice",
        "pasta",
        "bread",
        "cereal",
        "canned",
        "jar",
    ),
    "Frozen": ("frozen", "ice"),
}

CATEGORY_ORDER: tuple[Category, ...] = (*CATEGORY_KEYWORDS, OTHER)


def categorize(name: str) -> Category:
    """
    Assign an ingredient name to a shopping department.

    Matching is by lowercase substring, so "fresh tomatoes" is Produce and
    "chicken breast" is Meat & Seafood. Names matching nothing are Other.
    """
    lowered = name.lower()

    for category, keywords in CATEGORY_KEYWORDS.items():
        if any(keyword in lowered for keyword in keywords):
            return category

    return OTHER


def categorize_ingredient(unit: str, name: str) -> Category:
    """
    Categorize a parsed ingredient line.

    A recognised unit ("2 slices ham") is ignored and only the name is
    matched. Any other word in the unit slot belongs to the name
    ("1 chicken breast") and is matched along with it.
    """
    if not unit or is_unit(unit):
        return categorize(name)
    return categorize(f"{unit} {name}")


def category_rank(category: str) -> int:
    """Position of a category in department order; unknown labels sort last."""
    try:
        return CATEGORY_ORDER.index(category)  # type: ignore[arg-type]
    except ValueError:
        return len(CATEGORY_ORDER)
