"""Recipe scaling: quantities, cooking times and batch advice."""

from recipebox.scale.scaler import (
    MAX_SCALE_FACTOR,
    MIN_SCALE_FACTOR,
    ScaledIngredient,
    ScaledRecipe,
    clamp_scale_factor,
    compute_scale_factor,
    scale_ingredient,
    scale_ingredients,
    scale_recipe,
)
from recipebox.scale.timing import (
    describe_scale,
    scale_cooking_time,
    scale_instructions,
    scaling_tips,
    time_scale_multiplier,
)

__all__ = [
    "MAX_SCALE_FACTOR",
    "MIN_SCALE_FACTOR",
    "ScaledIngredient",
    "ScaledRecipe",
    "clamp_scale_factor",
    "compute_scale_factor",
    "describe_scale",
    "scale_cooking_time",
    "scale_ingredient",
    "scale_ingredients",
    "scale_instructions",
    "scale_recipe",
    "scaling_tips",
    "time_scale_multiplier",
]
