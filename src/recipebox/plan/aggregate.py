"""Consolidate repeated ingredients across recipes and meals."""

from collections.abc import Iterable
from dataclasses import dataclass, field

from recipebox.logging_config import get_logger
from recipebox.normalize.categories import Category, categorize_ingredient, category_rank
from recipebox.normalize.formatting import format_ingredient
from recipebox.normalize.parsing import normalize_ingredient_key, parse_ingredient
from recipebox.normalize.units import normalize_unit
from recipebox.scale.scaler import scale_ingredient

logger = get_logger(__name__)


@dataclass
class AggregationEntry:
    """One ingredient line to aggregate, with its scale factor and provenance."""

    line: str
    scale_factor: float = 1.0
    source_label: str = ""


@dataclass
class AggregatedItem:
    """Total quantity of one (name, unit) pair across all contributing lines."""

    name: str
    unit: str
    category: Category
    total_quantity: float = 0.0
    quantified: bool = False
    source_labels: list[str] = field(default_factory=list)

    def display_text(self) -> str:
        """Human-readable line, e.g. "3 cups flour" or "salt to taste"."""
        if not self.quantified:
            return self.name
        return format_ingredient(self.total_quantity, self.unit, self.name)


def entries_from_lines(
    lines: Iterable[str],
    scale_factor: float = 1.0,
    source_label: str = "",
) -> list[AggregationEntry]:
    """Wrap raw lines that share one scale factor and label."""
    return [AggregationEntry(line, scale_factor, source_label) for line in lines]


def sort_by_category(items: list[AggregatedItem]) -> list[AggregatedItem]:
    """Order items by department, then by name."""
    return sorted(items, key=lambda item: (category_rank(item.category), item.name))


def aggregate(
    entries: Iterable[AggregationEntry],
    *,
    normalize_units: bool = False,
    sort_by_category_name: bool = False,
) -> list[AggregatedItem]:
    """
    Merge ingredient lines into one item per (name, unit) pair.

    Names are compared lowercased and trimmed. Units are compared verbatim
    unless normalize_units is set, in which case plural and singular
    spellings ("cups"/"cup") merge. Different units are never summed.

    Args:
        entries: Lines with their scale factor and source label.
        normalize_units: Merge plural and singular unit spellings.
        sort_by_category_name: Sort by department then name instead of
            keeping first-seen order.

    Returns:
        Aggregated items, in order of first occurrence by default.
    """
    groups: dict[tuple[str, str], AggregatedItem] = {}
    line_count = 0

    for entry in entries:
        if not entry.line.strip():
            continue
        line_count += 1

        scaled = scale_ingredient(parse_ingredient(entry.line), entry.scale_factor)
        key = normalize_ingredient_key(scaled.name)
        unit = normalize_unit(scaled.unit) if normalize_units else scaled.unit

        item = groups.get((key, unit))
        if item is None:
            category = categorize_ingredient(scaled.unit, scaled.name)
            item = AggregatedItem(name=key, unit=unit, category=category)
            groups[(key, unit)] = item

        if scaled.amount is not None:
            item.total_quantity += scaled.amount
            item.quantified = True

        if entry.source_label:
            item.source_labels.append(entry.source_label)

    items = list(groups.values())
    logger.debug(f"Aggregated {line_count} lines into {len(items)} items")

    if sort_by_category_name:
        return sort_by_category(items)
    return items
