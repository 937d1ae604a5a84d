"""Pytest configuration and shared fixtures."""

from datetime import date

import pytest
from fastapi.testclient import TestClient

from recipebox.config import Settings, get_settings
from recipebox.main import app
from recipebox.plan.shopping_list import PlannedMeal, RecipeSource

# =============================================================================
# Pytest Configuration
# =============================================================================


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "slow: marks tests as slow running")


# =============================================================================
# Recipe Fixtures
# =============================================================================


@pytest.fixture
def pancake_ingredients():
    """Ingredient lines for a four-serving pancake recipe."""
    return [
        "2 cups flour",
        "1 cup milk",
        "2 eggs",
        "1/2 tsp salt",
        "butter for the pan",
    ]


@pytest.fixture
def pancake_recipe(pancake_ingredients):
    return RecipeSource(title="Pancakes", ingredients=pancake_ingredients, servings=4)


@pytest.fixture
def crepe_recipe():
    return RecipeSource(
        title="Crepes",
        ingredients=["1 cup flour", "1 1/2 cup milk", "1 pinch salt"],
        servings=2,
    )


@pytest.fixture
def chicken_recipe():
    return RecipeSource(
        title="Garlic Chicken",
        ingredients=["1 lb chicken", "4 cloves garlic", "2 tbsp olive oil", "salt to taste"],
        servings=2,
    )


@pytest.fixture
def meal_plan(chicken_recipe, pancake_recipe):
    """Four planned meals, one without a recipe."""
    return [
        PlannedMeal(date=date(2024, 3, 4), meal_type="dinner", recipe=chicken_recipe, servings=4),
        PlannedMeal(
            date=date(2024, 3, 5), meal_type="breakfast", recipe=pancake_recipe, servings=2
        ),
        PlannedMeal(date=date(2024, 3, 5), meal_type="lunch", recipe=None, servings=2),
        PlannedMeal(date=date(2024, 3, 6), meal_type="dinner", recipe=chicken_recipe, servings=2),
    ]


# =============================================================================
# API Fixtures
# =============================================================================


@pytest.fixture
def client():
    """Test client for the API."""
    return TestClient(app)


@pytest.fixture
def override_settings():
    """Replace service settings for the duration of a test."""

    def _override(**values) -> Settings:
        custom = Settings(**values)
        app.dependency_overrides[get_settings] = lambda: custom
        return custom

    yield _override
    app.dependency_overrides.pop(get_settings, None)
