"""API routes for scaling recipes to a different number of servings."""

from typing import Annotated

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from recipebox.config import Settings, get_settings
from recipebox.logging_config import LoggingContext, get_logger
from recipebox.normalize.formatting import format_scale_factor
from recipebox.scale.scaler import scale_recipe
from recipebox.schemas import ScaledIngredientResponse

logger = get_logger(__name__)

router = APIRouter(prefix="/api/v1/recipes", tags=["recipes"])


class ScaleRecipeRequest(BaseModel):
    """Recipe to scale and the servings wanted."""

    recipe_id: str | None = None
    ingredients: list[str]
    instructions: list[str] = Field(default_factory=list)
    original_servings: int = Field(ge=1)
    target_servings: int = Field(ge=1)
    prep_time: int | None = Field(None, ge=0, description="Minutes")
    cook_time: int | None = Field(None, ge=0, description="Minutes")


class ScaleRecipeResponse(BaseModel):
    """Recipe rewritten for the target servings."""

    recipe_id: str | None = None
    original_servings: int
    target_servings: int
    scale_factor: float
    scale_label: str
    batch_label: str
    ingredients: list[ScaledIngredientResponse]
    instructions: list[str]
    prep_time: int
    cook_time: int
    tips: list[str]


@router.post("/scale", response_model=ScaleRecipeResponse)
async def scale(
    request: ScaleRecipeRequest,
    settings: Annotated[Settings, Depends(get_settings)],
) -> ScaleRecipeResponse:
    """Scale ingredients, step times and cooking times to target servings."""
    with LoggingContext(recipe_id=request.recipe_id):
        scaled = scale_recipe(
            request.ingredients,
            original_servings=request.original_servings,
            target_servings=request.target_servings,
            instructions=request.instructions,
            prep_time=request.prep_time,
            cook_time=request.cook_time,
            min_factor=settings.min_scale_factor,
            max_factor=settings.max_scale_factor,
        )
        logger.info(
            f"Scaled recipe from {request.original_servings} to "
            f"{request.target_servings} servings ({format_scale_factor(scaled.scale_factor)})"
        )

    return ScaleRecipeResponse(
        recipe_id=request.recipe_id,
        original_servings=scaled.original_servings,
        target_servings=scaled.target_servings,
        scale_factor=scaled.scale_factor,
        scale_label=format_scale_factor(scaled.scale_factor),
        batch_label=scaled.label,
        ingredients=[ScaledIngredientResponse.model_validate(item) for item in scaled.ingredients],
        instructions=scaled.instructions,
        prep_time=scaled.prep_time,
        cook_time=scaled.cook_time,
        tips=scaled.tips,
    )
