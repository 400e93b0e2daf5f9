"""Shopping list builder.

Provides build_shopping_list(plan, recipes): ingredient quantities merged across
every recipe assigned in the weekly plan.
"""
from typing import Dict, Iterable, List, Any
from planner.domain.MealPlan import MealPlan
from planner.domain.Recipe import Recipe


def build_shopping_list(plan: MealPlan, recipes: Iterable[Recipe]) -> Dict[str, Dict[str, Any]]:
    """Aggregate ingredients for a weekly plan.

    Slots are visited Monday..Sunday, breakfast/lunch/dinner. Each assigned
    recipe id is resolved against ``recipes``; unknown or empty ids are skipped.

    Merge rule, keyed by ingredient name:
      - first occurrence creates {quantity, unit};
      - same unit adds to the quantity;
      - a different unit goes to a separate "<name> (<unit>)" entry holding
        that ingredient's own quantity (a later occurrence overwrites it).

    Returns:
        Dict of key -> {"quantity", "unit"} in order of first insertion.
    """
    index = {r.id: r for r in recipes}
    required: Dict[str, Dict[str, Any]] = {}

    for _day, _meal, recipe_id in plan.slots():
        recipe = index.get(recipe_id) if recipe_id else None
        if recipe is None:
            continue
        for ing in recipe.ingredients:
            entry = required.get(ing.name)
            if entry is None:
                required[ing.name] = {"quantity": ing.quantity, "unit": ing.unit}
            elif entry["unit"] == ing.unit:
                entry["quantity"] += ing.quantity
            else:
                required[f"{ing.name} ({ing.unit})"] = {"quantity": ing.quantity, "unit": ing.unit}

    return required


def shopping_list_items(shopping_list: Dict[str, Dict[str, Any]]) -> List[Dict[str, Any]]:
    """Flatten the aggregate into display rows: { name, quantity, unit }."""
    return [{"name": name, "quantity": data["quantity"], "unit": data["unit"]}
            for name, data in shopping_list.items()]

__all__ = ['build_shopping_list', 'shopping_list_items']
