import json
import tempfile
import unittest
from pathlib import Path

from planner.domain.Ingredient import Ingredient
from planner.domain.MealPlan import MealPlan
from planner.domain.Recipe import Recipe
from planner.infra.Plan_Repository import PlanRepository
from planner.infra.Recipe_Repository import RecipeRepository
from planner.infra.Store import JsonFileStore


def make_recipe(name="Omelette", category="Breakfast"):
    return Recipe(name=name, ingredients=[Ingredient("eggs", 3, "pcs")], steps=["Beat", "Cook"],
                  category=category, dietary_tags=["Vegetarian"])


class TestRecipeRepository(unittest.TestCase):

    def setUp(self):
        tmp = tempfile.TemporaryDirectory()
        self.addCleanup(tmp.cleanup)
        self.data_dir = Path(tmp.name)
        self.store = JsonFileStore(self.data_dir)
        self.repo = RecipeRepository(self.store)

    def test_starts_empty_without_stored_data(self):
        self.assertEqual(self.repo.all(), [])

    def test_add_assigns_unique_stable_ids(self):
        first = self.repo.add(make_recipe("Omelette"))
        second = self.repo.add(make_recipe("Omelette"))
        self.assertTrue(first.id)
        self.assertNotEqual(first.id, second.id)
        self.assertEqual([r.id for r in self.repo.all()], [first.id, second.id])
        # ids survive a reload from the store
        reloaded = RecipeRepository(self.store)
        self.assertEqual([r.id for r in reloaded.all()], [first.id, second.id])

    def test_repository_never_rejects_duplicates(self):
        self.repo.add(make_recipe())
        self.repo.add(make_recipe())
        self.assertEqual(len(self.repo.all()), 2)

    def test_edit_replaces_by_id(self):
        stored = self.repo.add(make_recipe())
        edited = Recipe(id=stored.id, name="Cheese Omelette", ingredients=stored.ingredients,
                        steps=stored.steps, category="Breakfast")
        self.repo.edit(edited)
        self.assertEqual(self.repo.resolve(stored.id).name, "Cheese Omelette")
        self.assertEqual(RecipeRepository(self.store).resolve(stored.id).name, "Cheese Omelette")

    def test_edit_and_delete_of_unknown_id_are_no_ops(self):
        stored = self.repo.add(make_recipe())
        self.repo.edit(make_recipe("Ghost").with_id("missing"))
        self.repo.delete("missing")
        self.assertEqual(self.repo.all(), [stored])

    def test_delete(self):
        a = self.repo.add(make_recipe("A"))
        b = self.repo.add(make_recipe("B"))
        self.repo.delete(a.id)
        self.assertEqual(self.repo.all(), [b])
        self.assertIsNone(self.repo.resolve(a.id))

    def test_all_is_a_snapshot(self):
        self.repo.add(make_recipe())
        snapshot = self.repo.all()
        snapshot.clear()
        self.assertEqual(len(self.repo.all()), 1)

    def test_corrupt_store_reads_as_empty(self):
        (self.data_dir / "recipes.json").write_text("{not json", encoding="utf-8")
        self.assertEqual(RecipeRepository(self.store).all(), [])

    def test_undecodable_store_reads_as_empty(self):
        (self.data_dir / "recipes.json").write_bytes(b'[{"name": "\xff\xfe"}]')
        with self.assertLogs("planner.infra.Store", level="ERROR"):
            self.assertEqual(RecipeRepository(self.store).all(), [])

    def test_unreadable_store_slot_reads_as_empty(self):
        (self.data_dir / "recipes.json").mkdir()
        with self.assertLogs("planner.infra.Store", level="ERROR"):
            self.assertEqual(RecipeRepository(self.store).all(), [])

    def test_replace_all_generates_missing_ids(self):
        self.repo.add(make_recipe("Old"))
        self.repo.replace_all([make_recipe("New"), make_recipe("Kept").with_id("k1")])
        names = [r.name for r in self.repo.all()]
        self.assertEqual(names, ["New", "Kept"])
        self.assertTrue(self.repo.all()[0].id)
        self.assertEqual(self.repo.all()[1].id, "k1")

    def test_replace_all_regenerates_repeated_ids(self):
        self.repo.replace_all([make_recipe("First").with_id("same"), make_recipe("Second").with_id("same")])
        ids = [r.id for r in self.repo.all()]
        self.assertEqual(ids[0], "same")
        self.assertTrue(ids[1])
        self.assertNotEqual(ids[1], "same")
        self.assertEqual(self.repo.resolve(ids[1]).name, "Second")
        # the regenerated id is what gets persisted
        self.assertEqual([r.id for r in RecipeRepository(self.store).all()], ids)

    def test_failed_write_is_logged_not_raised(self):
        stored = self.repo.add(make_recipe())
        blocker = self.data_dir / "blocked"
        blocker.write_text("", encoding="utf-8")
        self.repo.store = JsonFileStore(blocker / "sub")
        with self.assertLogs("planner.infra.Recipe_Repository", level="ERROR"):
            self.repo.delete(stored.id)
        self.assertEqual(self.repo.all(), [])


class TestPlanRepository(unittest.TestCase):

    def setUp(self):
        tmp = tempfile.TemporaryDirectory()
        self.addCleanup(tmp.cleanup)
        self.data_dir = Path(tmp.name)
        self.store = JsonFileStore(self.data_dir)

    def test_first_use_creates_and_persists_a_fresh_plan(self):
        plan = PlanRepository(self.store).get_plan()
        self.assertTrue((self.data_dir / "mealPlan.json").exists())
        self.assertEqual(PlanRepository(self.store).get_plan(), plan)

    def test_assign_writes_through(self):
        repo = PlanRepository(self.store)
        repo.assign("Monday", "breakfast", "r1")
        with open(self.data_dir / "mealPlan.json", encoding="utf-8") as f:
            stored = json.load(f)
        self.assertEqual(stored["meals"]["Monday"]["breakfast"], "r1")
        self.assertEqual(PlanRepository(self.store).get_plan().get("Monday", "breakfast"), "r1")

    def test_deleting_a_recipe_keeps_the_slot_reference(self):
        recipes = RecipeRepository(self.store)
        plans = PlanRepository(self.store)
        recipe = recipes.add(make_recipe())
        plans.assign("Monday", "breakfast", recipe.id)
        recipes.delete(recipe.id)
        self.assertEqual(plans.get_plan().get("Monday", "breakfast"), recipe.id)
        self.assertIsNone(recipes.resolve(recipe.id))

    def test_replace(self):
        repo = PlanRepository(self.store)
        repo.get_plan()
        other = MealPlan.new().assign("Sunday", "dinner", "r2")
        repo.replace(other)
        self.assertEqual(PlanRepository(self.store).get_plan(), other)
