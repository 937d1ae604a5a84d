"""Shopping list generation from recipes and meal plans."""

from dataclasses import dataclass, field
from datetime import date

from recipebox.logging_config import get_logger
from recipebox.normalize.categories import OTHER, category_rank
from recipebox.normalize.formatting import format_amount
from recipebox.plan.aggregate import (
    AggregatedItem,
    AggregationEntry,
    aggregate,
    entries_from_lines,
)
from recipebox.scale.scaler import compute_scale_factor

logger = get_logger(__name__)

CHECKED_MARK = "✓"
UNCHECKED_MARK = "◯"


@dataclass
class RecipeSource:
    """Ingredient lines of one recipe, with the servings it was written for."""

    title: str
    ingredients: list[str]
    servings: int | None = None
    target_servings: int | None = None

    @property
    def scale_factor(self) -> float:
        if self.target_servings is None:
            return 1.0
        return compute_scale_factor(self.servings, self.target_servings)


@dataclass
class PlannedMeal:
    """A meal slot in a plan; servings is how many people it feeds."""

    date: date
    meal_type: str
    recipe: RecipeSource | None = None
    servings: int | None = None

    @property
    def label(self) -> str:
        return f"{self.date.isoformat()} {self.meal_type}"


@dataclass
class CustomItem:
    """A hand-added shopping-list entry that is not parsed or merged."""

    name: str
    quantity: str | None = None
    category: str | None = None


@dataclass
class ShoppingItem:
    """A single item in the shopping list."""

    name: str
    category: str
    quantity: str | None = None
    unit: str = ""
    total_quantity: float | None = None
    sources: list[str] = field(default_factory=list)
    checked: bool = False

    @classmethod
    def from_aggregated(cls, item: AggregatedItem) -> "ShoppingItem":
        """Build a list entry from an aggregated ingredient."""
        if not item.quantified:
            return cls(name=item.name, category=item.category, sources=list(item.source_labels))
        return cls(
            name=item.name,
            category=item.category,
            quantity=format_amount(item.total_quantity),
            unit=item.unit,
            total_quantity=item.total_quantity,
            sources=list(item.source_labels),
        )

    @classmethod
    def from_custom(cls, item: CustomItem) -> "ShoppingItem":
        return cls(name=item.name, category=item.category or OTHER, quantity=item.quantity)

    def display_text(self) -> str:
        """Quantity, unit and name as one line."""
        parts = [self.quantity or "", self.unit, self.name]
        return " ".join(part for part in parts if part)


@dataclass
class ShoppingList:
    """Complete shopping list with a per-department view."""

    title: str
    items: list[ShoppingItem] = field(default_factory=list)
    items_by_category: dict[str, list[ShoppingItem]] = field(default_factory=dict)

    def add_item(self, item: ShoppingItem) -> None:
        """Add an item and update the grouped view."""
        self.items.append(item)

        category = item.category or OTHER
        if category not in self.items_by_category:
            self.items_by_category[category] = []
        self.items_by_category[category].append(item)

    @property
    def checked_count(self) -> int:
        return sum(1 for item in self.items if item.checked)

    def grouped(self) -> list[tuple[str, list[ShoppingItem]]]:
        """Department groups in store-walk order."""
        return sorted(self.items_by_category.items(), key=lambda group: category_rank(group[0]))

    def to_text(self) -> str:
        """Plain-text export, one block per department."""
        lines = [self.title, "=" * len(self.title), ""]

        for category, items in self.grouped():
            lines.append(f"{category}:")
            for item in items:
                mark = CHECKED_MARK if item.checked else UNCHECKED_MARK
                lines.append(f"  {mark} {item.display_text()}")
            lines.append("")

        return "\n".join(lines)


class ShoppingListGenerator:
    """
    Generates shopping lists with:
    - Quantity scaling per recipe or per meal
    - Aggregation of repeated ingredients by name and unit
    - Department categorization
    """

    def __init__(self, normalize_units: bool = False, sort_by_category: bool = False):
        self.normalize_units = normalize_units
        self.sort_by_category = sort_by_category

    def from_recipes(
        self,
        title: str,
        recipes: list[RecipeSource],
        custom_items: list[CustomItem] | None = None,
    ) -> ShoppingList:
        """
        Build a shopping list from whole recipes.

        Args:
            title: Name of the list.
            recipes: Recipes whose ingredients go on the list.
            custom_items: Extra entries added verbatim after the recipe items.

        Returns:
            ShoppingList with aggregated recipe items followed by custom items.
        """
        logger.info(f"Generating shopping list {title!r} from {len(recipes)} recipes")

        entries: list[AggregationEntry] = []
        for recipe in recipes:
            entries.extend(
                entries_from_lines(recipe.ingredients, recipe.scale_factor, recipe.title)
            )

        shopping_list = self._build(title, entries)
        for custom in custom_items or []:
            shopping_list.add_item(ShoppingItem.from_custom(custom))

        return shopping_list

    def from_meal_plan(self, title: str, meals: list[PlannedMeal]) -> ShoppingList:
        """
        Build a shopping list for every meal in a plan.

        Each meal's recipe is scaled by meal servings over recipe servings and
        its lines are labelled with the meal's date and type.
        """
        logger.info(f"Generating shopping list {title!r} from {len(meals)} meals")

        entries: list[AggregationEntry] = []
        skipped = 0
        for meal in meals:
            if meal.recipe is None or not meal.recipe.ingredients:
                skipped += 1
                continue
            factor = compute_scale_factor(meal.recipe.servings, meal.servings)
            entries.extend(entries_from_lines(meal.recipe.ingredients, factor, meal.label))

        if skipped:
            logger.info(f"Skipped {skipped} meals without recipe ingredients")

        return self._build(title, entries)

    def aggregate(self, entries: list[AggregationEntry]) -> list[AggregatedItem]:
        return aggregate(
            entries,
            normalize_units=self.normalize_units,
            sort_by_category_name=self.sort_by_category,
        )

    def _build(self, title: str, entries: list[AggregationEntry]) -> ShoppingList:
        shopping_list = ShoppingList(title=title)
        for item in self.aggregate(entries):
            shopping_list.add_item(ShoppingItem.from_aggregated(item))

        logger.info(
            f"Generated shopping list: {len(shopping_list.items)} items "
            f"in {len(shopping_list.items_by_category)} departments"
        )
        return shopping_list
