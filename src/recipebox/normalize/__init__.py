"""Parse, format and categorize ingredient text."""

from recipebox.normalize.categories import (
    CATEGORY_ORDER,
    Category,
    categorize,
    categorize_ingredient,
    category_rank,
)
from recipebox.normalize.formatting import (
    format_amount,
    format_ingredient,
    format_scale_factor,
)
from recipebox.normalize.parsing import (
    ParsedIngredient,
    normalize_ingredient_key,
    parse_amount_token,
    parse_ingredient,
)
from recipebox.normalize.units import is_unit, normalize_unit

__all__ = [
    "CATEGORY_ORDER",
    "Category",
    "ParsedIngredient",
    "categorize",
    "categorize_ingredient",
    "category_rank",
    "format_amount",
    "format_ingredient",
    "format_scale_factor",
    "is_unit",
    "normalize_ingredient_key",
    "normalize_unit",
    "parse_amount_token",
    "parse_ingredient",
]
