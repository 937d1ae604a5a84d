"""API routers for the recipebox service."""

from recipebox.routers.ingredients import router as ingredients_router
from recipebox.routers.meal_plans import router as meal_plans_router
from recipebox.routers.recipes import router as recipes_router
from recipebox.routers.shopping_lists import router as shopping_lists_router

__all__ = [
    "ingredients_router",
    "meal_plans_router",
    "recipes_router",
    "shopping_lists_router",
]
