import unittest
from planner.domain.Ingredient import Ingredient
from planner.domain.Recipe import Recipe


class TestRecipe(unittest.TestCase):

    def setUp(self):
        self.pancakes = Recipe(
            id="r1",
            name="Pancakes",
            ingredients=[
                Ingredient("flour", 200, "g"),
                Ingredient("milk", 300, "ml"),
            ],
            steps=["Mix ingredients", "Cook on skillet"],
            category="Breakfast",
            dietary_tags=["Vegetarian", "Vegetarian", "Dairy-Free"],
        )

    def test_dietary_tags_collapse_duplicates_in_order(self):
        self.assertEqual(self.pancakes.dietary_tags, ["Vegetarian", "Dairy-Free"])

    def test_has_tags_is_all_of(self):
        self.assertTrue(self.pancakes.has_tags([]))
        self.assertTrue(self.pancakes.has_tags(["Dairy-Free", "Vegetarian"]))
        self.assertFalse(self.pancakes.has_tags(["Vegetarian", "Vegan"]))

    def test_dict_round_trip(self):
        data = self.pancakes.to_dict()
        self.assertEqual(data["dietaryTags"], ["Vegetarian", "Dairy-Free"])
        self.assertNotIn("imageUrl", data)
        self.assertEqual(Recipe.from_dict(data), self.pancakes)

    def test_image_url_kept(self):
        recipe = Recipe.from_dict({**self.pancakes.to_dict(), "imageUrl": "http://img/p.png"})
        self.assertEqual(recipe.image_url, "http://img/p.png")
        self.assertEqual(recipe.to_dict()["imageUrl"], "http://img/p.png")

    def test_with_id_copies(self):
        copy = self.pancakes.with_id("r2")
        self.assertEqual(copy.id, "r2")
        self.assertEqual(self.pancakes.id, "r1")
        copy.ingredients.append(Ingredient("egg", 1, "pcs"))
        self.assertEqual(len(self.pancakes.ingredients), 2)

    def test_from_dict_rejects_malformed(self):
        with self.assertRaises(ValueError):
            Recipe.from_dict("Pancakes")
        with self.assertRaises(ValueError):
            Recipe.from_dict({"name": "Pancakes", "ingredients": "flour"})
