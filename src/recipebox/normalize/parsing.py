"""Parse free-form ingredient lines into quantity, unit and name."""

import math
import re
from dataclasses import dataclass

from recipebox.logging_config import get_logger

logger = get_logger(__name__)


# Leading quantity: mixed number ("1 1/2"), simple fraction ("1/2") or plain number ("2", "2.5")
QUANTITY_PATTERN = re.compile(r"^\s*(\d+\s+\d+/\d+|\d+/\d+|\d+\.?\d*)")


@dataclass
class ParsedIngredient:
    """An ingredient line split into its quantity, unit and name."""

    amount: float | None
    unit: str
    name: str
    original: str = ""

    @property
    def has_amount(self) -> bool:
        return self.amount is not None


def parse_amount_token(token: str) -> float | None:
    """
    Convert a matched quantity token to a number.

    Handles formats like:
    - "2" / "2.5"
    - "1/2"
    - "1 1/2" (one and a half)

    Returns None for fractions with a zero denominator and for numbers too
    large to evaluate as a finite float.
    """
    token = token.strip()

    if "/" not in token:
        value = float(token)
        return value if math.isfinite(value) else None

    whole = 0
    fraction = token
    parts = token.split()

    try:
        if len(parts) == 2:
            whole = int(parts[0])
            fraction = parts[1]

        numerator, denominator = (int(part) for part in fraction.split("/"))
        if denominator == 0:
            return None

        return whole + numerator / denominator
    except (ValueError, OverflowError):
        return None


def parse_ingredient(line: str) -> ParsedIngredient:
    """
    Parse an ingredient line such as "1 1/2 cups all-purpose flour".

    Lines without a leading quantity ("salt to taste") come back with no amount,
    an empty unit and the line itself as the name. When exactly one word
    follows the quantity ("3 eggs") that word is the name and the unit is empty.

    Args:
        line: Raw ingredient text.

    Returns:
        ParsedIngredient for the line. Never raises.
    """
    match = QUANTITY_PATTERN.match(line)
    amount = parse_amount_token(match.group(1)) if match else None

    if amount is None:
        if match:
            logger.debug(f"Ignoring unusable quantity in {line!r}")
        return ParsedIngredient(amount=None, unit="", name=line.lstrip(), original=line)

    words = line[match.end() :].split()

    if len(words) >= 2:
        unit = words[0]
        name = " ".join(words[1:])
    else:
        unit = ""
        name = " ".join(words)

    return ParsedIngredient(amount=amount, unit=unit, name=name, original=line)


def normalize_ingredient_key(name: str) -> str:
    """Identity key used to merge repeated ingredients."""
    return name.strip().lower()
