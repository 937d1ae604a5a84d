"""Tests for the HTTP API routers."""

# =============================================================================
# Ingredient Endpoints
# =============================================================================


class TestIngredientEndpoints:
    """Tests for /api/v1/ingredients."""

    def test_parse(self, client):
        response = client.post(
            "/api/v1/ingredients/parse",
            json={"lines": ["1 1/2 cups milk", "salt to taste", "3 eggs"]},
        )
        assert response.status_code == 200

        data = response.json()
        assert data["total"] == 3
        milk, salt, eggs = data["ingredients"]
        assert milk == {
            "original": "1 1/2 cups milk",
            "amount": 1.5,
            "unit": "cups",
            "name": "milk",
            "category": "Dairy",
        }
        assert salt["amount"] is None
        assert salt["name"] == "salt to taste"
        assert salt["category"] == "Pantry"
        assert eggs["unit"] == ""
        assert eggs["name"] == "eggs"

    def test_parse_and_shopping_list_agree_on_category(self, client):
        lines = ["2 slices ham", "1 chicken breast", "4 cloves garlic"]

        parsed = client.post("/api/v1/ingredients/parse", json={"lines": lines}).json()
        generated = client.post(
            "/api/v1/shopping-lists/generate",
            json={"name": "Check", "recipes": [{"title": "Lunch", "ingredients": lines}]},
        ).json()

        parsed_categories = [item["category"] for item in parsed["ingredients"]]
        assert parsed_categories == ["Other", "Meat & Seafood", "Produce"]
        assert [item["category"] for item in generated["items"]] == parsed_categories

    def test_parse_requires_lines(self, client):
        response = client.post("/api/v1/ingredients/parse", json={})
        assert response.status_code == 422

    def test_categorize(self, client):
        response = client.post(
            "/api/v1/ingredients/categorize",
            json={"names": ["fresh tomato", "chicken breast", "dish soap"]},
        )
        assert response.status_code == 200
        assert [c["category"] for c in response.json()["categories"]] == [
            "Produce",
            "Meat & Seafood",
            "Other",
        ]


# =============================================================================
# Recipe Scaling Endpoints
# =============================================================================


class TestRecipeScaling:
    """Tests for /api/v1/recipes/scale."""

    def test_scale(self, client, pancake_ingredients):
        response = client.post(
            "/api/v1/recipes/scale",
            json={
                "recipe_id": "pancakes",
                "ingredients": pancake_ingredients,
                "instructions": ["Cook each side for 3 minutes", "Rest for 10 minutes"],
                "original_servings": 4,
                "target_servings": 8,
                "prep_time": 10,
                "cook_time": 20,
            },
        )
        assert response.status_code == 200

        data = response.json()
        assert data["recipe_id"] == "pancakes"
        assert data["scale_factor"] == 2.0
        assert data["scale_label"] == "2.0x"
        assert data["batch_label"] == "Larger batch"
        assert [item["scaled"] for item in data["ingredients"]] == [
            "4 cups flour",
            "2 cup milk",
            "4 eggs",
            "1 tsp salt",
            "butter for the pan",
        ]
        assert data["ingredients"][4]["changed"] is False
        assert data["instructions"] == [
            "Cook each side for 4 minutes",
            "Rest for 13 minutes",
        ]
        assert data["prep_time"] == 13
        assert data["cook_time"] == 26

    def test_scale_clamps_to_settings(self, client, override_settings):
        override_settings(max_scale_factor=2.0)
        response = client.post(
            "/api/v1/recipes/scale",
            json={"ingredients": ["1 cup rice"], "original_servings": 1, "target_servings": 6},
        )
        assert response.status_code == 200
        assert response.json()["scale_factor"] == 2.0
        assert response.json()["ingredients"][0]["scaled"] == "2 cup rice"

    def test_invalid_servings(self, client):
        response = client.post(
            "/api/v1/recipes/scale",
            json={"ingredients": ["1 cup rice"], "original_servings": 0, "target_servings": 2},
        )
        assert response.status_code == 422


# =============================================================================
# Shopping List Endpoints
# =============================================================================


class TestShoppingListEndpoints:
    """Tests for /api/v1/shopping-lists."""

    def test_generate(self, client):
        response = client.post(
            "/api/v1/shopping-lists/generate",
            json={
                "name": "Brunch",
                "recipes": [
                    {"title": "Pancakes", "ingredients": ["2 cups flour", "1 cup milk"]},
                    {"title": "Crepes", "ingredients": ["1 cup flour", "1 cup milk"]},
                ],
                "custom_items": [{"name": "coffee beans"}],
            },
        )
        assert response.status_code == 201

        data = response.json()
        assert data["title"] == "Brunch"
        assert data["total_items"] == 4
        names = [(item["name"], item["unit"]) for item in data["items"]]
        assert names == [("flour", "cups"), ("milk", "cup"), ("flour", "cup"), ("coffee beans", "")]

        milk = data["items"][1]
        assert milk["quantity"] == "2"
        assert milk["sources"] == ["Pancakes", "Crepes"]
        assert milk["text"] == "2 cup milk"

        assert list(data["items_by_category"]) == ["Dairy", "Pantry", "Other"]
        assert data["text"].startswith("Brunch\n======\n")

    def test_generate_with_normalized_units(self, client):
        response = client.post(
            "/api/v1/shopping-lists/generate",
            json={
                "name": "Baking",
                "recipes": [{"title": "Bread", "ingredients": ["2 cups flour", "1 cup flour"]}],
                "normalize_units": True,
            },
        )
        assert response.status_code == 201
        items = response.json()["items"]
        assert len(items) == 1
        assert items[0]["quantity"] == "3"
        assert items[0]["unit"] == "cup"

    def test_generate_normalizes_from_settings(self, client, override_settings):
        override_settings(normalize_plural_units=True)
        response = client.post(
            "/api/v1/shopping-lists/generate",
            json={
                "name": "Baking",
                "recipes": [{"title": "Bread", "ingredients": ["2 cups flour", "1 cup flour"]}],
            },
        )
        assert len(response.json()["items"]) == 1

    def test_generate_scales_to_target_servings(self, client):
        response = client.post(
            "/api/v1/shopping-lists/generate",
            json={
                "name": "Party",
                "recipes": [
                    {
                        "title": "Cake",
                        "ingredients": ["1 cup sugar"],
                        "servings": 4,
                        "target_servings": 6,
                    }
                ],
            },
        )
        assert response.json()["items"][0]["quantity"] == "1 1/2"

    def test_generate_empty_request(self, client):
        response = client.post("/api/v1/shopping-lists/generate", json={"name": "Nothing"})
        assert response.status_code == 400


# =============================================================================
# Meal Plan Endpoints
# =============================================================================


class TestMealPlanShoppingList:
    """Tests for /api/v1/meal-plans/shopping-list."""

    def test_meal_plan_shopping_list(self, client):
        recipe = {"title": "Chili", "ingredients": ["1 lb beef", "1 onion"], "servings": 2}
        response = client.post(
            "/api/v1/meal-plans/shopping-list",
            json={
                "meal_plan_id": "plan-1",
                "meals": [
                    {"date": "2024-03-04", "meal_type": "dinner", "servings": 4, "recipe": recipe},
                    {"date": "2024-03-05", "meal_type": "lunch", "servings": 1, "recipe": recipe},
                    {"date": "2024-03-06", "meal_type": "lunch"},
                ],
            },
        )
        assert response.status_code == 200

        items = response.json()["items"]
        beef = items[0]
        assert beef["name"] == "beef"
        assert beef["quantity"] == "2 1/2"
        assert beef["category"] == "Meat & Seafood"
        assert beef["sources"] == ["2024-03-04 dinner", "2024-03-05 lunch"]

    def test_meal_plan_sorted(self, client):
        recipe = {"title": "Chili", "ingredients": ["1 lb beef", "1 onion"]}
        response = client.post(
            "/api/v1/meal-plans/shopping-list",
            json={
                "meals": [{"date": "2024-03-04", "meal_type": "dinner", "recipe": recipe}],
                "sort_by_category": True,
            },
        )
        assert [item["name"] for item in response.json()["items"]] == ["onion", "beef"]

    def test_meal_plan_without_meals(self, client):
        response = client.post("/api/v1/meal-plans/shopping-list", json={"meals": []})
        assert response.status_code == 400

    def test_invalid_date(self, client):
        response = client.post(
            "/api/v1/meal-plans/shopping-list",
            json={"meals": [{"date": "not-a-date", "meal_type": "dinner"}]},
        )
        assert response.status_code == 422
