import unittest
from datetime import date
from planner.domain.MealPlan import MealPlan
from planner.utilities.constants import DAYS_OF_WEEK, MEAL_TYPES


class TestMealPlan(unittest.TestCase):

    def setUp(self):
        self.plan = MealPlan.new(date(2026, 10, 12))

    def test_new_plan_has_every_day_and_empty_slots(self):
        self.assertEqual(list(self.plan.meals), list(DAYS_OF_WEEK))
        for day in DAYS_OF_WEEK:
            for meal in MEAL_TYPES:
                self.assertIsNone(self.plan.get(day, meal))
        self.assertTrue(self.plan.id)
        self.assertNotEqual(MealPlan.new().id, self.plan.id)

    def test_assign_sets_exactly_one_slot(self):
        updated = self.plan.assign("Tuesday", "dinner", "r1")
        self.assertEqual(updated.get("Tuesday", "dinner"), "r1")
        assigned = [(d, m) for d, m, rid in updated.slots() if rid]
        self.assertEqual(assigned, [("Tuesday", "dinner")])
        # source plan untouched
        self.assertIsNone(self.plan.get("Tuesday", "dinner"))
        self.assertEqual(updated.id, self.plan.id)

    def test_assign_empty_clears(self):
        updated = self.plan.assign("Monday", "lunch", "r1").assign("Monday", "lunch", "")
        self.assertIsNone(updated.get("Monday", "lunch"))
        updated = self.plan.assign("Monday", "lunch", "r1").assign("Monday", "lunch", None)
        self.assertIsNone(updated.get("Monday", "lunch"))

    def test_assign_rejects_unknown_day_or_meal(self):
        with self.assertRaises(ValueError):
            self.plan.assign("Funday", "lunch", "r1")
        with self.assertRaises(ValueError):
            self.plan.assign("Monday", "snack", "r1")

    def test_slots_order(self):
        order = [(d, m) for d, m, _ in self.plan.slots()]
        self.assertEqual(order[0], ("Monday", "breakfast"))
        self.assertEqual(order[2], ("Monday", "dinner"))
        self.assertEqual(order[-1], ("Sunday", "dinner"))
        self.assertEqual(len(order), 21)

    def test_from_dict_fills_missing_days_and_reads_timestamps(self):
        plan = MealPlan.from_dict({
            "id": "p1",
            "weekStartDate": "2026-10-12T08:30:00.000Z",
            "meals": {"Wednesday": {"lunch": "r9", "dinner": ""}},
        })
        self.assertEqual(plan.week_start_date, date(2026, 10, 12))
        self.assertEqual(plan.get("Wednesday", "lunch"), "r9")
        self.assertIsNone(plan.get("Wednesday", "dinner"))
        self.assertEqual(set(plan.meals), set(DAYS_OF_WEEK))

    def test_dict_round_trip(self):
        plan = self.plan.assign("Friday", "breakfast", "r3")
        data = plan.to_dict()
        self.assertEqual(data["weekStartDate"], "2026-10-12")
        self.assertIsNone(data["meals"]["Monday"]["dinner"])
        self.assertEqual(MealPlan.from_dict(data), plan)

    def test_from_dict_rejects_bad_shapes(self):
        with self.assertRaises(ValueError):
            MealPlan.from_dict({"id": "p1", "meals": []})
        with self.assertRaises(ValueError):
            MealPlan.from_dict({"id": "p1", "weekStartDate": "next week"})

    def test_from_dict_reads_null_day_as_empty(self):
        plan = MealPlan.from_dict({"id": "p1", "weekStartDate": "2026-10-12",
                                   "meals": {"Monday": None, "Tuesday": {"lunch": "r2"}}})
        self.assertEqual(plan.meals["Monday"], {"breakfast": None, "lunch": None, "dinner": None})
        self.assertEqual(plan.get("Tuesday", "lunch"), "r2")
