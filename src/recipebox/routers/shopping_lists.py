"""API routes for generating shopping lists from recipes."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel, Field

from recipebox.config import Settings, get_settings
from recipebox.logging_config import get_logger
from recipebox.plan.shopping_list import CustomItem, RecipeSource, ShoppingListGenerator
from recipebox.schemas import ShoppingListResponse

logger = get_logger(__name__)

router = APIRouter(prefix="/api/v1/shopping-lists", tags=["shopping-lists"])


class RecipeIngredients(BaseModel):
    """A recipe's ingredient lines and optional servings adjustment."""

    title: str
    ingredients: list[str]
    servings: int | None = Field(None, ge=1)
    target_servings: int | None = Field(None, ge=1)


class CustomItemSchema(BaseModel):
    """A hand-added entry kept verbatim on the list."""

    name: str = Field(min_length=1)
    quantity: str | None = None
    category: str | None = None


class ShoppingListCreateRequest(BaseModel):
    """Request to build a shopping list."""

    name: str = Field(min_length=1)
    recipes: list[RecipeIngredients] = Field(default_factory=list)
    custom_items: list[CustomItemSchema] = Field(default_factory=list)
    normalize_units: bool | None = Field(
        None, description="Merge plural and singular unit spellings; defaults to the setting"
    )
    sort_by_category: bool | None = None


def build_generator(
    settings: Settings,
    normalize_units: bool | None = None,
    sort_by_category: bool | None = None,
) -> ShoppingListGenerator:
    """Generator configured from request flags, falling back to settings."""
    if normalize_units is None:
        normalize_units = settings.normalize_plural_units
    if sort_by_category is None:
        sort_by_category = settings.sort_shopping_list_by_category
    return ShoppingListGenerator(normalize_units=normalize_units, sort_by_category=sort_by_category)


@router.post(
    "/generate",
    response_model=ShoppingListResponse,
    status_code=status.HTTP_201_CREATED,
)
async def generate_shopping_list(
    request: ShoppingListCreateRequest,
    settings: Annotated[Settings, Depends(get_settings)],
) -> ShoppingListResponse:
    """Aggregate recipe ingredients and custom items into one list."""
    if not request.recipes and not request.custom_items:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Provide at least one recipe or custom item",
        )

    generator = build_generator(settings, request.normalize_units, request.sort_by_category)
    shopping_list = generator.from_recipes(
        request.name,
        recipes=[
            RecipeSource(
                title=recipe.title,
                ingredients=recipe.ingredients,
                servings=recipe.servings,
                target_servings=recipe.target_servings,
            )
            for recipe in request.recipes
        ],
        custom_items=[
            CustomItem(name=item.name, quantity=item.quantity, category=item.category)
            for item in request.custom_items
        ],
    )

    return ShoppingListResponse.from_shopping_list(shopping_list)
