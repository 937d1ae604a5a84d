"""Response schemas shared by the API routers."""

from dataclasses import asdict

from pydantic import BaseModel, ConfigDict, Field

from recipebox.plan.shopping_list import ShoppingItem, ShoppingList


class ParsedIngredientResponse(BaseModel):
    """An ingredient line split into quantity, unit and name."""

    original: str
    amount: float | None = None
    unit: str = ""
    name: str
    category: str


class ScaledIngredientResponse(BaseModel):
    """An ingredient line rewritten for a scale factor."""

    original: str
    scaled: str
    amount: float | None = None
    unit: str = ""
    name: str
    scale_factor: float
    changed: bool = False

    model_config = ConfigDict(from_attributes=True)


class ShoppingItemResponse(BaseModel):
    """Single item in a shopping list."""

    name: str
    category: str
    quantity: str | None = None
    unit: str = ""
    total_quantity: float | None = None
    sources: list[str] = Field(default_factory=list)
    checked: bool = False
    text: str = ""


class ShoppingListResponse(BaseModel):
    """Aggregated shopping list with grouped and plain-text views."""

    title: str
    items: list[ShoppingItemResponse]
    items_by_category: dict[str, list[ShoppingItemResponse]]
    total_items: int
    text: str

    @classmethod
    def from_shopping_list(cls, shopping_list: ShoppingList) -> "ShoppingListResponse":
        def _item(item: ShoppingItem) -> ShoppingItemResponse:
            return ShoppingItemResponse(**asdict(item), text=item.display_text())

        return cls(
            title=shopping_list.title,
            items=[_item(item) for item in shopping_list.items],
            items_by_category={
                category: [_item(item) for item in items]
                for category, items in shopping_list.grouped()
            },
            total_items=len(shopping_list.items),
            text=shopping_list.to_text(),
        )
