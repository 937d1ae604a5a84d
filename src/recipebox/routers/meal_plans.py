"""API routes for meal-plan shopping lists."""

from datetime import date
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel, Field

from recipebox.config import Settings, get_settings
from recipebox.logging_config import LoggingContext
from recipebox.plan.shopping_list import PlannedMeal, RecipeSource
from recipebox.routers.shopping_lists import build_generator
from recipebox.schemas import ShoppingListResponse

router = APIRouter(prefix="/api/v1/meal-plans", tags=["meal-plans"])


class MealRecipe(BaseModel):
    """Recipe served at a meal."""

    title: str
    ingredients: list[str]
    servings: int | None = Field(None, ge=1)


class MealSchema(BaseModel):
    """One meal slot in the plan."""

    date: date
    meal_type: str = Field(description="breakfast, lunch, dinner or snack")
    servings: int | None = Field(None, ge=1)
    recipe: MealRecipe | None = None


class MealPlanShoppingListRequest(BaseModel):
    """Meals to shop for."""

    meal_plan_id: str | None = None
    name: str = "Meal plan shopping list"
    meals: list[MealSchema]
    normalize_units: bool | None = None
    sort_by_category: bool | None = None


@router.post("/shopping-list", response_model=ShoppingListResponse)
async def meal_plan_shopping_list(
    request: MealPlanShoppingListRequest,
    settings: Annotated[Settings, Depends(get_settings)],
) -> ShoppingListResponse:
    """Aggregate every meal's scaled ingredients into a shopping list."""
    if not request.meals:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Meal plan has no meals",
        )

    generator = build_generator(settings, request.normalize_units, request.sort_by_category)

    meals = [
        PlannedMeal(
            date=meal.date,
            meal_type=meal.meal_type,
            servings=meal.servings,
            recipe=(
                RecipeSource(
                    title=meal.recipe.title,
                    ingredients=meal.recipe.ingredients,
                    servings=meal.recipe.servings,
                )
                if meal.recipe
                else None
            ),
        )
        for meal in request.meals
    ]

    with LoggingContext(meal_plan_id=request.meal_plan_id):
        shopping_list = generator.from_meal_plan(request.name, meals)

    return ShoppingListResponse.from_shopping_list(shopping_list)
