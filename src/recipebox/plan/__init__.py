"""Shopping-list aggregation for recipes and meal plans."""

from recipebox.plan.aggregate import (
    AggregatedItem,
    AggregationEntry,
    aggregate,
    entries_from_lines,
    sort_by_category,
)
from recipebox.plan.shopping_list import (
    CustomItem,
    PlannedMeal,
    RecipeSource,
    ShoppingItem,
    ShoppingList,
    ShoppingListGenerator,
)

__all__ = [
    "AggregatedItem",
    "AggregationEntry",
    "CustomItem",
    "PlannedMeal",
    "RecipeSource",
    "ShoppingItem",
    "ShoppingList",
    "ShoppingListGenerator",
    "aggregate",
    "entries_from_lines",
    "sort_by_category",
]
