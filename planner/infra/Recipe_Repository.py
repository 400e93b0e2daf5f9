import logging
from typing import List, Optional
from uuid import uuid4

from planner.domain.Recipe import Recipe
from planner.infra.Store import JsonFileStore
from planner.utilities.constants import RECIPES_KEY

logger = logging.getLogger(__name__)


def reading_from_recipes(store: JsonFileStore) -> List[Recipe]:
    """Read recipes from the store slot; a missing or malformed slot reads as an empty collection."""
    data = store.get(RECIPES_KEY)
    if data is None:
        logger.info("No stored recipes found. Starting with an empty collection.")
        return []
    if not isinstance(data, list):
        logger.error(f"Stored recipes must be a list, got {type(data).__name__}. Ignoring.")
        return []
    recipes = []
    for entry in data:
        try:
            recipes.append(Recipe.from_dict(entry))
        except ValueError as e:
            logger.error(f"Skipping unreadable stored recipe: {e}")
    return recipes


class RecipeRepository:
    """In-memory recipe collection with write-through persistence to the injected store."""

    def __init__(self, store: JsonFileStore):
        self.store = store
        self._recipes: List[Recipe] = reading_from_recipes(store)

    def _save(self) -> None:
        try:
            self.store.set(RECIPES_KEY, [r.to_dict() for r in self._recipes])
        except (OSError, TypeError) as e:
            logger.error(f"Failed to save recipes: {e}")

    def add(self, draft: Recipe) -> Recipe:
        '''Stores a copy of draft under a freshly generated id and returns it.'''
        recipe = draft.with_id(str(uuid4()))
        self._recipes.append(recipe)
        self._save()
        return recipe

    def edit(self, recipe: Recipe) -> None:
        for i, existing in enumerate(self._recipes):
            if existing.id == recipe.id:
                self._recipes[i] = recipe
                self._save()
                return
        logger.debug(f"Edit ignored, no recipe with id {recipe.id}")

    def delete(self, recipe_id: str) -> None:
        remaining = [r for r in self._recipes if r.id != recipe_id]
        if len(remaining) == len(self._recipes):
            logger.debug(f"Delete ignored, no recipe with id {recipe_id}")
            return
        self._recipes = remaining
        self._save()

    def all(self) -> List[Recipe]:
        return list(self._recipes)

    def resolve(self, recipe_id: Optional[str]) -> Optional[Recipe]:
        if not recipe_id:
            return None
        for recipe in self._recipes:
            if recipe.id == recipe_id:
                return recipe
        return None

    def replace_all(self, recipes: List[Recipe]) -> None:
        """Swap in a new collection. Missing or repeated ids get a fresh uuid."""
        seen = set()
        replaced = []
        for recipe in recipes:
            if not recipe.id or recipe.id in seen:
                recipe = recipe.with_id(str(uuid4()))
            seen.add(recipe.id)
            replaced.append(recipe)
        self._recipes = replaced
        self._save()
