"""Scale ingredient quantities by a servings ratio."""

from dataclasses import dataclass, field

from recipebox.logging_config import get_logger
from recipebox.normalize.formatting import format_ingredient
from recipebox.normalize.parsing import ParsedIngredient, parse_ingredient
from recipebox.scale.timing import (
    describe_scale,
    scale_cooking_time,
    scale_instructions,
    scaling_tips,
)

logger = get_logger(__name__)

MIN_SCALE_FACTOR = 0.1
MAX_SCALE_FACTOR = 10.0


@dataclass
class ScaledIngredient:
    """A parsed ingredient with its quantity multiplied by a scale factor."""

    original: str
    amount: float | None
    unit: str
    name: str
    scale_factor: float
    scaled: str

    @property
    def changed(self) -> bool:
        """Whether the rendered line differs from the original."""
        return self.scaled != self.original


@dataclass
class ScaledRecipe:
    """A recipe rewritten for a different number of servings."""

    original_servings: int
    target_servings: int
    scale_factor: float
    ingredients: list[ScaledIngredient] = field(default_factory=list)
    instructions: list[str] = field(default_factory=list)
    prep_time: int = 0
    cook_time: int = 0
    label: str = ""
    tips: list[str] = field(default_factory=list)


def compute_scale_factor(original_servings: float | None, target_servings: float | None) -> float:
    """
    Ratio of target to original servings.

    A missing or zero value counts as one serving.
    """
    return (target_servings or 1) / (original_servings or 1)


def clamp_scale_factor(
    factor: float,
    minimum: float = MIN_SCALE_FACTOR,
    maximum: float = MAX_SCALE_FACTOR,
) -> float:
    """Clamp a scale factor into [minimum, maximum]."""
    return max(minimum, min(maximum, factor))


def scale_ingredient(parsed: ParsedIngredient, factor: float) -> ScaledIngredient:
    """
    Multiply a parsed ingredient's amount by factor and re-render it.

    Ingredients without an amount keep their original text; the factor is
    recorded but has no numeric effect. Factors are not validated.
    """
    if parsed.amount is None:
        return ScaledIngredient(
            original=parsed.original,
            amount=None,
            unit=parsed.unit,
            name=parsed.name,
            scale_factor=factor,
            scaled=parsed.original or parsed.name,
        )

    scaled_amount = parsed.amount * factor

    return ScaledIngredient(
        original=parsed.original,
        amount=scaled_amount,
        unit=parsed.unit,
        name=parsed.name,
        scale_factor=factor,
        scaled=format_ingredient(scaled_amount, parsed.unit, parsed.name),
    )


def scale_ingredients(lines: list[str], factor: float) -> list[ScaledIngredient]:
    """Parse and scale each line of a recipe's ingredient list."""
    return [scale_ingredient(parse_ingredient(line), factor) for line in lines]


def scale_recipe(
    ingredients: list[str],
    original_servings: int,
    target_servings: int,
    instructions: list[str] | None = None,
    prep_time: int | None = None,
    cook_time: int | None = None,
    min_factor: float = MIN_SCALE_FACTOR,
    max_factor: float = MAX_SCALE_FACTOR,
) -> ScaledRecipe:
    """
    Scale a whole recipe to a target number of servings.

    Args:
        ingredients: Raw ingredient lines.
        original_servings: Servings the recipe was written for.
        target_servings: Servings wanted.
        instructions: Step texts whose time references get adjusted.
        prep_time: Preparation time in minutes.
        cook_time: Cooking time in minutes.
        min_factor: Lower clamp for the servings ratio.
        max_factor: Upper clamp for the servings ratio.

    Returns:
        ScaledRecipe with scaled ingredients, steps, times and batch advice.
    """
    raw_factor = compute_scale_factor(original_servings, target_servings)
    factor = clamp_scale_factor(raw_factor, min_factor, max_factor)
    if factor != raw_factor:
        logger.info(f"Clamped scale factor {raw_factor:.3f} to {factor:.3f}")

    scaled = ScaledRecipe(
        original_servings=original_servings,
        target_servings=target_servings,
        scale_factor=factor,
        ingredients=scale_ingredients(ingredients, factor),
        instructions=scale_instructions(instructions or [], factor),
        prep_time=scale_cooking_time(prep_time, factor),
        cook_time=scale_cooking_time(cook_time, factor),
        label=describe_scale(factor),
        tips=scaling_tips(factor),
    )

    logger.debug(
        f"Scaled {len(ingredients)} ingredients from {original_servings} "
        f"to {target_servings} servings (x{factor:.2f})"
    )
    return scaled
