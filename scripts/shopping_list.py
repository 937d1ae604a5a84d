"""Print a consolidated shopping list for recipes stored in a JSON file.

The file holds a list of recipes:

    [
        {"title": "Pancakes", "servings": 4, "ingredients": ["2 cups flour", "2 eggs"]},
        {"title": "Crepes", "ingredients": ["1 cup flour", "1 1/2 cups milk"]}
    ]

Run with: uv run python scripts/shopping_list.py recipes.json
Scale every recipe: uv run python scripts/shopping_list.py recipes.json --servings 6
"""

import argparse
import json
import sys
from pathlib import Path

from recipebox.config import settings
from recipebox.logging_config import configure_logging
from recipebox.plan.shopping_list import RecipeSource, ShoppingListGenerator


def load_recipes(path: Path, target_servings: int | None) -> list[RecipeSource]:
    """Read recipes from a JSON file."""
    with path.open(encoding="utf-8") as f:
        data = json.load(f)

    return [
        RecipeSource(
            title=recipe.get("title", path.stem),
            ingredients=recipe.get("ingredients", []),
            servings=recipe.get("servings"),
            target_servings=target_servings,
        )
        for recipe in data
    ]


def main() -> int:
    parser = argparse.ArgumentParser(description="Build a shopping list from recipes")
    parser.add_argument("path", type=Path, help="JSON file with a list of recipes")
    parser.add_argument(
        "--servings", type=int, default=None, help="Scale every recipe to this many servings"
    )
    parser.add_argument("--title", default="Shopping List", help="Title of the printed list")
    parser.add_argument(
        "--merge-plurals",
        action="store_true",
        default=settings.normalize_plural_units,
        help="Merge plural and singular units (cups/cup)",
    )
    parser.add_argument("--json", action="store_true", help="Print items as JSON instead of text")
    args = parser.parse_args()

    configure_logging("WARNING")

    if not args.path.exists():
        print(f"File not found: {args.path}", file=sys.stderr)
        return 1

    recipes = load_recipes(args.path, args.servings)
    generator = ShoppingListGenerator(normalize_units=args.merge_plurals, sort_by_category=True)
    shopping_list = generator.from_recipes(args.title, recipes)

    if args.json:
        items = [
            {
                "name": item.name,
                "quantity": item.quantity,
                "unit": item.unit,
                "category": item.category,
                "sources": item.sources,
            }
            for item in shopping_list.items
        ]
        print(json.dumps(items, indent=2, ensure_ascii=False))
    else:
        print(shopping_list.to_text())

    return 0


if __name__ == "__main__":
    sys.exit(main())
