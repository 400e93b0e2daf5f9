import logging
from typing import Optional

from planner.domain.MealPlan import MealPlan
from planner.infra.Store import JsonFileStore
from planner.utilities.constants import MEAL_PLAN_KEY

logger = logging.getLogger(__name__)


class PlanRepository:
    """Owns the current week's MealPlan; created on first use and written through on change."""

    def __init__(self, store: JsonFileStore):
        self.store = store
        self._plan: Optional[MealPlan] = None

    def _load(self) -> MealPlan:
        data = self.store.get(MEAL_PLAN_KEY)
        if data is not None:
            try:
                return MealPlan.from_dict(data)
            except ValueError as e:
                logger.error(f"Stored meal plan is unreadable, starting a fresh week: {e}")
        plan = MealPlan.new()
        logger.info(f"Created new meal plan {plan.id} for week of {plan.week_start_date.isoformat()}")
        self._save(plan)
        return plan

    def _save(self, plan: MealPlan) -> None:
        try:
            self.store.set(MEAL_PLAN_KEY, plan.to_dict())
        except (OSError, TypeError) as e:
            logger.error(f"Failed to save meal plan: {e}")

    def get_plan(self) -> MealPlan:
        if self._plan is None:
            self._plan = self._load()
        return self._plan

    def assign(self, day: str, meal_type: str, recipe_id: Optional[str]) -> MealPlan:
        """Set (or clear, for an empty id) one slot of the current plan and persist it."""
        self._plan = self.get_plan().assign(day, meal_type, recipe_id)
        self._save(self._plan)
        return self._plan

    def replace(self, plan: MealPlan) -> None:
        self._plan = plan
        self._save(plan)
