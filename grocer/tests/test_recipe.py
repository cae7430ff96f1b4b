import unittest

from grocer.domain.IngredientLine import IngredientLine
from grocer.domain.Recipe import Recipe


class TestRecipe(unittest.TestCase):

    def setUp(self):
        self.recipe_pancakes = Recipe(
            recipe_id="pancakes",
            name="Pancakes",
            base_servings=4,
            ingredients=[
                IngredientLine("Flour", 200, "g"),
                IngredientLine("Milk", 300, "ml"),
                IngredientLine("Eggs", 2),
            ],
            tags=["breakfast", "vegetarian"],
        )

    def test_scale_factor(self):
        self.assertEqual(self.recipe_pancakes.scale_factor(6), 1.5)
        self.assertEqual(self.recipe_pancakes.scale_factor(2), 0.5)

    def test_scale_factor_without_usable_servings(self):
        for servings in (None, 0, -3, "four"):
            recipe = Recipe("r", "R", servings)
            self.assertFalse(recipe.can_scale())
            self.assertEqual(recipe.scale_factor(6), 1.0)

    def test_from_dict_accepts_servings_alias(self):
        recipe = Recipe.from_dict({
            "id": "soup",
            "name": "Tomato Soup",
            "servings": "2",
            "ingredients": [{"name": "Tomato", "quantity": "4", "unit": "pcs"}, {"name": "Salt"}],
        })
        self.assertEqual(recipe.recipe_id, "soup")
        self.assertEqual(recipe.base_servings, 2)
        self.assertEqual(recipe.ingredients[0].quantity, 4.0)
        self.assertEqual(recipe.ingredients[1].unit, "")
        self.assertEqual(recipe.ingredients[1].quantity, 0.0)

    def test_from_dict_bad_servings_is_absent(self):
        recipe = Recipe.from_dict({"id": "x", "name": "X", "base_servings": "lots", "ingredients": []})
        self.assertIsNone(recipe.base_servings)

    def test_to_dict_round_trip(self):
        data = self.recipe_pancakes.to_dict()
        again = Recipe.from_dict(data)
        self.assertEqual(again.to_dict(), data)


class TestIngredientLine(unittest.TestCase):

    def test_key_normalizes_case_and_whitespace(self):
        self.assertEqual(IngredientLine("  Olive Oil ", 2, " TBSP").key, ("olive oil", "tbsp"))
        self.assertEqual(IngredientLine("Eggs", 2, None).key, ("eggs", ""))

    def test_unit_none_becomes_empty(self):
        self.assertEqual(IngredientLine("Eggs", 2, None).unit, "")
