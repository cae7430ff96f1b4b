import json
import tempfile
import unittest
from pathlib import Path

from fastapi.testclient import TestClient

from grocer.api.api_run import app
from grocer.api.dependencies import get_plan_repository, get_recipe_repository
from grocer.infra.Plan_Repository import MealPlanRepository
from grocer.infra.Recipe_Repository import RecipeRepository

RECIPES = [
    {"id": "stir-fry", "name": "Vegetable Stir Fry", "base_servings": 2, "ingredients": [
        {"name": "Bell pepper", "quantity": 1, "unit": ""},
        {"name": "Rice", "quantity": 150, "unit": "g"},
    ]},
    {"id": "bolognese", "name": "Spaghetti Bolognese", "base_servings": 4, "ingredients": [
        {"name": "Spaghetti", "quantity": 400, "unit": "g"},
        {"name": "Minced beef", "quantity": 500, "unit": "g"},
    ]},
]


class TestGroceryListAPI(unittest.TestCase):

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        base = Path(self._tmp.name)
        (base / 'recipes.json').write_text(json.dumps(RECIPES), encoding='utf-8')
        recipes_path = base / 'recipes.json'
        plans_path = base / 'meal_plans.json'
        app.dependency_overrides[get_recipe_repository] = lambda: RecipeRepository(recipes_path)
        app.dependency_overrides[get_plan_repository] = lambda: MealPlanRepository(plans_path)
        self.client = TestClient(app)

    def tearDown(self):
        app.dependency_overrides.clear()
        self._tmp.cleanup()

    def _plan(self, date, recipe_id, servings, meal_type="dinner", household="home"):
        resp = self.client.post('/api/meal-plan/entries', json={
            "household": household, "date": date, "meal_type": meal_type,
            "recipe_id": recipe_id, "servings": servings,
        })
        self.assertEqual(resp.status_code, 201, resp.text)
        return resp.json()

    def test_grocery_list_for_week(self):
        self._plan("2025-10-06", "stir-fry", 4, meal_type="lunch")
        self._plan("2025-10-08", "stir-fry", 2)
        self._plan("2025-10-10", "bolognese", 2)
        self._plan("2025-10-14", "bolognese", 8)  # following week

        resp = self.client.get('/api/grocery-list', params={"household": "home", "week": "2025-10-09"})
        self.assertEqual(resp.status_code, 200)
        data = resp.json()
        self.assertEqual(data["household"], "home")
        self.assertEqual((data["start"], data["end"]), ("2025-10-06", "2025-10-12"))
        self.assertEqual([i["name"] for i in data["items"]], ["bell pepper", "minced beef", "rice", "spaghetti"])
        rice = next(i for i in data["items"] if i["name"] == "rice")
        self.assertEqual(rice["total_quantity"], 450.0)
        self.assertEqual([c["quantity"] for c in rice["contributions"]], [300.0, 150.0])
        self.assertEqual(data["count"], 4)
        self.assertEqual(data["warnings"], [])
        self.assertIn("Rice - 450 g (Used in: Vegetable Stir Fry)", data["lines"])

    def test_explicit_range_and_validation(self):
        self._plan("2025-10-06", "bolognese", 4)
        resp = self.client.get('/api/grocery-list',
                               params={"household": "home", "start": "2025-10-06", "end": "2025-10-06"})
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["count"], 2)

        resp = self.client.get('/api/grocery-list',
                               params={"household": "home", "start": "2025-10-07", "end": "2025-10-06"})
        self.assertEqual(resp.status_code, 400)
        resp = self.client.get('/api/grocery-list', params={"household": "home", "start": "2025-10-07"})
        self.assertEqual(resp.status_code, 400)
        resp = self.client.get('/api/grocery-list')
        self.assertEqual(resp.status_code, 422)

    def test_unknown_recipe_cannot_be_planned(self):
        resp = self.client.post('/api/meal-plan/entries', json={
            "household": "home", "date": "2025-10-06", "meal_type": "dinner",
            "recipe_id": "nope", "servings": 2,
        })
        self.assertEqual(resp.status_code, 404)

    def test_invalid_entry_rejected(self):
        resp = self.client.post('/api/meal-plan/entries', json={
            "household": "home", "date": "2025-10-06", "meal_type": "brunch",
            "recipe_id": "bolognese", "servings": 0,
        })
        self.assertEqual(resp.status_code, 422)

    def test_update_and_delete_entry(self):
        created = self._plan("2025-10-06", "bolognese", 4)
        url = f"/api/meal-plan/entries/home/{created['id']}"
        resp = self.client.patch(url, json={"servings": 0})
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["servings"], 0)
        # Zero servings means nothing to buy
        data = self.client.get('/api/grocery-list', params={"household": "home", "week": "2025-10-06"}).json()
        self.assertEqual(data["items"], [])
        self.assertEqual(self.client.delete(url).status_code, 204)
        self.assertEqual(self.client.delete(url).status_code, 404)
        self.assertEqual(self.client.patch(url, json={"servings": 2}).status_code, 404)

    def test_recipes_endpoints(self):
        resp = self.client.get('/api/recipes')
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["count"], 2)
        new_recipe = {
            "name": "Omelette",
            "base_servings": 1,
            "ingredients": [{"name": "Eggs", "quantity": 3}, {"name": " Cheese ", "quantity": 30, "unit": "g"}],
        }
        resp = self.client.post('/api/recipes', json=new_recipe)
        self.assertEqual(resp.status_code, 201, resp.text)
        body = resp.json()
        self.assertTrue(body["id"])
        self.assertEqual(body["ingredients"][1]["name"], "Cheese")
        self.assertEqual(self.client.post('/api/recipes', json=new_recipe).status_code, 400)
        self.assertEqual(self.client.post('/api/recipes', json=dict(new_recipe, ingredients=[])).status_code, 422)

    def test_list_entries_for_week(self):
        self._plan("2025-10-08", "bolognese", 4)
        self._plan("2025-10-06", "stir-fry", 2, meal_type="lunch")
        self._plan("2025-10-13", "stir-fry", 2)
        self._plan("2025-10-07", "stir-fry", 2, household="neighbours")
        resp = self.client.get('/api/meal-plan/entries', params={"household": "home", "week": "2025-10-10"})
        self.assertEqual(resp.status_code, 200)
        data = resp.json()
        self.assertEqual((data["start"], data["end"]), ("2025-10-06", "2025-10-12"))
        self.assertEqual(data["count"], 2)
        self.assertEqual([(e["date"], e["recipe_id"]) for e in data["entries"]],
                         [("2025-10-06", "stir-fry"), ("2025-10-08", "bolognese")])

        resp = self.client.get('/api/meal-plan/entries',
                               params={"household": "home", "start": "2025-10-13", "end": "2025-10-13"})
        self.assertEqual([e["date"] for e in resp.json()["entries"]], ["2025-10-13"])
        resp = self.client.get('/api/meal-plan/entries',
                               params={"household": "home", "start": "2025-10-13", "end": "2025-10-06"})
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(self.client.get('/api/meal-plan/entries').status_code, 422)

    def test_get_recipe_by_id(self):
        resp = self.client.get('/api/recipes/bolognese')
        self.assertEqual(resp.status_code, 200)
        body = resp.json()
        self.assertEqual(body["name"], "Spaghetti Bolognese")
        self.assertEqual(body["base_servings"], 4)
        self.assertEqual([i["name"] for i in body["ingredients"]], ["Spaghetti", "Minced beef"])
        self.assertEqual(self.client.get('/api/recipes/unknown').status_code, 404)

    def test_pdf_export(self):
        self._plan("2025-10-06", "bolognese", 4)
        resp = self.client.get('/api/grocery-list/pdf', params={"household": "home", "week": "2025-10-06"})
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.headers["content-type"], "application/pdf")
        self.assertTrue(resp.content.startswith(b"%PDF"))
