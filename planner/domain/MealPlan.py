"""MealPlan domain entity: one week of breakfast/lunch/dinner slots holding recipe ids."""
import copy
from datetime import date, datetime
from typing import Dict, Optional
from uuid import uuid4

from planner.utilities.constants import DAYS_OF_WEEK, MEAL_TYPES, DATE_FORMAT

Slots = Dict[str, Optional[str]]


def _empty_day() -> Slots:
    return {meal: None for meal in MEAL_TYPES}


def _parse_week_start(value) -> date:
    if value is None or value == "":
        return date.today()
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str) and value:
        # Accept both plain dates and full ISO timestamps
        return datetime.strptime(value[:10], DATE_FORMAT).date()
    raise ValueError(f"Invalid weekStartDate: {value!r}")


class MealPlan:
    def __init__(self, id: str, week_start_date: date, meals: Optional[Dict[str, Slots]] = None):
        self.id = id
        self.week_start_date = week_start_date
        self.meals: Dict[str, Slots] = {day: _empty_day() for day in DAYS_OF_WEEK}
        for day, slots in (meals or {}).items():
            self.meals.setdefault(day, _empty_day()).update(slots)

    @classmethod
    def new(cls, week_start_date: Optional[date] = None) -> "MealPlan":
        """Fresh plan: new id, all 7 days present, every slot empty."""
        return cls(str(uuid4()), week_start_date or date.today())

    def __eq__(self, other) -> bool:
        if not isinstance(other, MealPlan):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self) -> str:
        assigned = sum(1 for _, _, rid in self.slots() if rid)
        return f"MealPlan({self.id!r}, week of {self.week_start_date.isoformat()}, {assigned} slots assigned)"

    def get(self, day: str, meal_type: str) -> Optional[str]:
        return self.meals.get(day, {}).get(meal_type)

    def slots(self):
        """Yield (day, meal_type, recipe_id) in Monday..Sunday x breakfast, lunch, dinner order."""
        for day in DAYS_OF_WEEK:
            for meal_type in MEAL_TYPES:
                yield day, meal_type, self.get(day, meal_type)

    def assign(self, day: str, meal_type: str, recipe_id: Optional[str]) -> "MealPlan":
        """Return a copy of the plan with exactly one slot set, or cleared when recipe_id is empty."""
        if day not in DAYS_OF_WEEK or meal_type not in MEAL_TYPES:
            raise ValueError(f"Invalid day or meal: {day!r}/{meal_type!r}")
        updated = MealPlan(self.id, self.week_start_date, copy.deepcopy(self.meals))
        updated.meals.setdefault(day, _empty_day())[meal_type] = recipe_id or None
        return updated

    @staticmethod
    def from_dict(data):
        '''Builds a MealPlan from its JSON form. Missing days and slots read as empty.'''
        if not isinstance(data, dict):
            raise ValueError(f"Meal plan must be an object, got {type(data).__name__}")
        meals_raw = data.get("meals")
        if meals_raw is None:
            meals_raw = {}
        if not isinstance(meals_raw, dict):
            raise ValueError("Meal plan 'meals' must be an object")
        meals: Dict[str, Slots] = {}
        for day, slots in meals_raw.items():
            if slots is None:
                slots = {}
            if not isinstance(slots, dict):
                raise ValueError(f"Meal plan day {day!r} must be an object")
            meals[day] = {meal: (str(slots[meal]) if slots.get(meal) else None)
                          for meal in MEAL_TYPES}
        plan_id = data.get("id") or str(uuid4())
        return MealPlan(str(plan_id), _parse_week_start(data.get("weekStartDate")), meals)

    def to_dict(self):
        return {
            "id": self.id,
            "weekStartDate": self.week_start_date.strftime(DATE_FORMAT),
            "meals": {day: dict(slots) for day, slots in self.meals.items()},
        }
