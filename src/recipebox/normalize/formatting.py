"""Render quantities the way cooks read them."""

import math

FRACTION_TOLERANCE = 0.01

# Common cooking fractions, checked in this order
COMMON_FRACTIONS: tuple[tuple[float, str], ...] = (
    (0.125, "1/8"),
    (0.25, "1/4"),
    (0.33, "1/3"),
    (0.5, "1/2"),
    (0.67, "2/3"),
    (0.75, "3/4"),
)


def format_amount(amount: float) -> str:
    """
    Format a decimal quantity as a human-friendly string.

    Examples:
        2.0 -> "2"
        0.5 -> "1/2"
        1.5 -> "1 1/2"
        0.2 -> "0.2"
    """
    if not math.isfinite(amount):
        return str(amount)

    if amount == int(amount):
        return str(int(amount))

    whole = math.floor(amount)
    fractional = amount - whole

    for decimal, fraction in COMMON_FRACTIONS:
        if abs(fractional - decimal) < FRACTION_TOLERANCE:
            return f"{whole} {fraction}" if whole > 0 else fraction

    text = f"{amount:.2f}".rstrip("0").rstrip(".")
    # -0.001 renders as "-0"
    return "0" if text == "-0" else text


def format_ingredient(amount: float, unit: str, name: str) -> str:
    """Render an amount, optional unit and name as one ingredient line."""
    unit_part = f" {unit}" if unit else ""
    return f"{format_amount(amount)}{unit_part} {name}".strip()


def format_scale_factor(factor: float) -> str:
    """Short label for a scale factor, e.g. "1x" or "1.5x"."""
    if factor == 1:
        return "1x"
    return f"{factor:.1f}x"
