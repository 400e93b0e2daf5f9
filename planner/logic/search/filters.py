"""Recipe search and filtering."""
from typing import Iterable, List, Optional

from planner.domain.Recipe import Recipe
from planner.utilities.constants import ALL_CATEGORIES


def _matches_text(recipe: Recipe, term: str) -> bool:
    if not term:
        return True
    if term in recipe.name.lower():
        return True
    return any(term in ing.name.lower() for ing in recipe.ingredients)


def filter_recipes(recipes: Iterable[Recipe], search_term: str = "", category: str = ALL_CATEGORIES,
                   required_tags: Optional[Iterable[str]] = None) -> List[Recipe]:
    """Return the recipes matching all three predicates, in input order.

    - search_term: case-insensitive substring of the name or of any ingredient name
    - category: exact category, or "All"
    - required_tags: every tag must be on the recipe (AND)
    """
    term = (search_term or "").lower()
    tags = list(required_tags or [])
    return [
        r for r in recipes
        if _matches_text(r, term)
        and (category == ALL_CATEGORIES or r.category == category)
        and r.has_tags(tags)
    ]


def recipes_for_meal_type(recipes: Iterable[Recipe], meal_type: str) -> List[Recipe]:
    """Planner selector choices: recipes whose category names the meal type.

    Snack and Dessert recipes never match a breakfast/lunch/dinner slot.
    """
    return [r for r in recipes if r.category.lower() == meal_type]

__all__ = ['filter_recipes', 'recipes_for_meal_type']
