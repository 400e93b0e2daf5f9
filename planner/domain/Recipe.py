"""Recipe domain entity: name, ingredients, steps, category, dietary tags, image."""
from planner.domain.Ingredient import Ingredient
from typing import List, Optional, Iterable


def _unique_tags(tags: Optional[Iterable[str]]) -> List[str]:
    """Collapse duplicate tags, keeping first-seen order for display."""
    seen: List[str] = []
    for tag in tags or []:
        if tag not in seen:
            seen.append(tag)
    return seen


class Recipe:
    def __init__(self, id: str = "", name: str = "", ingredients: Optional[List[Ingredient]] = None,
                 steps: Optional[List[str]] = None, category: str = "Dinner",
                 dietary_tags: Optional[List[str]] = None, image_url: Optional[str] = None):
        self.id = id
        self.name = name
        self.ingredients = ingredients[:] if ingredients else []
        self.steps = steps[:] if steps else []
        self.category = category
        self.dietary_tags = _unique_tags(dietary_tags)
        self.image_url = image_url or None

    def __str__(self) -> str:
        return f"{self.name} - {self.category} - Tags: {', '.join(self.dietary_tags)}"

    __repr__ = __str__

    def __eq__(self, other) -> bool:
        if not isinstance(other, Recipe):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def has_tags(self, required: Iterable[str]) -> bool:
        return all(tag in self.dietary_tags for tag in required)

    def with_id(self, recipe_id: str) -> "Recipe":
        return Recipe(recipe_id, self.name, self.ingredients, self.steps,
                      self.category, self.dietary_tags, self.image_url)

    @staticmethod
    def from_dict(data):
        if not isinstance(data, dict):
            raise ValueError(f"Recipe must be an object, got {type(data).__name__}")
        ingredients = data.get('ingredients', [])
        steps = data.get('steps', [])
        tags = data.get('dietaryTags', [])
        if not isinstance(ingredients, list) or not isinstance(steps, list) or not isinstance(tags, list):
            raise ValueError(f"Malformed recipe: {data.get('name', '')!r}")
        return Recipe(
            id=str(data.get('id', '') or ''),
            name=str(data.get('name', '') or ''),
            ingredients=[Ingredient.from_dict(ing) for ing in ingredients],
            steps=[str(step) for step in steps],
            category=str(data.get('category', 'Dinner') or 'Dinner'),
            dietary_tags=[str(tag) for tag in tags],
            image_url=data.get('imageUrl') or None,
        )

    def to_dict(self):
        d = {
            "id": self.id,
            "name": self.name,
            "ingredients": [ing.to_dict() for ing in self.ingredients],
            "steps": self.steps,
            "category": self.category,
            "dietaryTags": self.dietary_tags,
        }
        if self.image_url:
            d["imageUrl"] = self.image_url
        return d
