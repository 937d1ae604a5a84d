"""Cooking-time adjustments and advice for scaled recipes.

Cooking time does not grow linearly with quantity: a double batch needs
roughly 30% longer, not twice as long. The multiplier below is dampened
accordingly and very short times are left alone.
"""

import math
import re

# Times at or below these values are never scaled
SHORT_COOKING_TIME = 5
SHORT_STEP_TIME = 2

TIME_REFERENCE_PATTERN = re.compile(r"(\d+)\s*(minutes?|mins?|hours?|hrs?)", re.IGNORECASE)

UNIVERSAL_TIPS = (
    "Taste and adjust seasonings after scaling",
    "Spices and seasonings may need fine-tuning when scaling",
)


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def time_scale_multiplier(factor: float) -> float:
    """Dampened time multiplier for a quantity scale factor."""
    if factor <= 0.5:
        return 0.8
    if factor <= 1:
        return 0.9 + (factor - 0.5) * 0.2
    if factor <= 2:
        return 1 + (factor - 1) * 0.3
    return 1.3 + (factor - 2) * 0.1


def scale_cooking_time(minutes: int | None, factor: float) -> int:
    """
    Scale a preparation or cooking time in whole minutes.

    Missing times come back as 0 and times of five minutes or less are
    returned unchanged.
    """
    if not minutes:
        return 0
    if minutes <= SHORT_COOKING_TIME:
        return minutes
    return _round_half_up(minutes * time_scale_multiplier(factor))


def scale_instructions(instructions: list[str], factor: float) -> list[str]:
    """Rewrite time references such as "10 minutes" or "1 hour" in step text."""
    multiplier = time_scale_multiplier(factor)

    def _replace(match: re.Match) -> str:
        original = int(match.group(1))
        unit = match.group(2)
        scaled = original if original <= SHORT_STEP_TIME else _round_half_up(original * multiplier)
        return f"{scaled} {unit}"

    return [TIME_REFERENCE_PATTERN.sub(_replace, step) for step in instructions]


def describe_scale(factor: float) -> str:
    """Batch-size label for a scale factor."""
    if factor < 0.5:
        return "Very small batch"
    if factor < 1:
        return "Smaller batch"
    if factor == 1:
        return "Original recipe"
    if factor <= 2:
        return "Larger batch"
    return "Very large batch"


def scaling_tips(factor: float) -> list[str]:
    """Practical advice for cooking a scaled batch."""
    tips: list[str] = []

    if factor < 0.5:
        tips.append("Very small batches may cook faster - watch carefully")
        tips.append("Consider using smaller cookware for better heat distribution")
    elif factor < 1:
        tips.append("Smaller batches may cook slightly faster - reduce cooking time by 10-20%")
        tips.append("Use appropriately sized cookware to avoid overcrowding or underfilling")
    elif factor > 2:
        tips.append("Large batches take longer to cook through - increase cooking time by 20-30%")
        tips.append("You may need larger cookware or cook in multiple batches")
        tips.append("Stir more frequently to ensure even cooking")
    elif factor > 1:
        tips.append("Larger batches may need slightly more cooking time")
        tips.append("Ensure your cookware is large enough to accommodate the scaled recipe")

    tips.extend(UNIVERSAL_TIPS)
    return tips
