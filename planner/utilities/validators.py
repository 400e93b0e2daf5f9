"""
Input validation schemas using Pydantic for better data integrity.
"""
import math

from pydantic import BaseModel, Field, StrictFloat, StrictInt, field_validator
from typing import List, Literal, Optional, Union

from planner.domain.Ingredient import Ingredient
from planner.domain.Recipe import Recipe

CategoryName = Literal["Breakfast", "Lunch", "Dinner", "Snack", "Dessert"]
DietaryTagName = Literal["Vegetarian", "Vegan", "Gluten-Free", "Dairy-Free", "Keto", "Paleo"]
DayName = Literal["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"]
MealTypeName = Literal["breakfast", "lunch", "dinner"]


class IngredientInput(BaseModel):
    """Schema for ingredient input validation."""
    name: str = Field(..., min_length=1, max_length=100)
    quantity: Union[StrictInt, StrictFloat]
    unit: str = Field("", max_length=20)

    @field_validator('name', 'unit')
    @classmethod
    def strip_whitespace(cls, v):
        """Remove leading/trailing whitespace."""
        return v.strip() if isinstance(v, str) else v

    @field_validator('name')
    @classmethod
    def validate_name(cls, v):
        if not v:
            raise ValueError('All ingredients must have a name and valid quantity')
        return v

    @field_validator('quantity')
    @classmethod
    def validate_quantity(cls, v):
        if not math.isfinite(v) or v <= 0:
            raise ValueError('All ingredients must have a name and valid quantity')
        return v

    def to_domain(self) -> Ingredient:
        return Ingredient(self.name, self.quantity, self.unit)


class RecipeInput(BaseModel):
    """Schema for recipe input validation."""
    name: str = Field(..., min_length=1, max_length=200)
    ingredients: List[IngredientInput]
    steps: List[str] = Field(default_factory=list)
    category: CategoryName = "Dinner"
    dietaryTags: List[DietaryTagName] = Field(default_factory=list)
    imageUrl: Optional[str] = None

    @field_validator('name')
    @classmethod
    def validate_name(cls, v):
        """Validate recipe name."""
        if not v.strip():
            raise ValueError('Recipe name is required')
        return v.strip()

    @field_validator('ingredients')
    @classmethod
    def validate_ingredients(cls, v):
        """Ensure recipe has at least one ingredient."""
        if not v:
            raise ValueError('Recipe must have at least one ingredient')
        return v

    @field_validator('steps')
    @classmethod
    def validate_steps(cls, v):
        """Every step must have content."""
        if any(not step or not step.strip() for step in v):
            raise ValueError('All steps must have content')
        return [step.strip() for step in v]

    @field_validator('imageUrl')
    @classmethod
    def blank_image_is_none(cls, v):
        return v.strip() or None if isinstance(v, str) else v

    def to_domain(self, recipe_id: str = "") -> Recipe:
        return Recipe(
            id=recipe_id,
            name=self.name,
            ingredients=[ing.to_domain() for ing in self.ingredients],
            steps=self.steps,
            category=self.category,
            dietary_tags=list(self.dietaryTags),
            image_url=self.imageUrl,
        )


class SlotUpdateInput(BaseModel):
    """Schema for meal plan slot assignment."""
    day: DayName
    meal: MealTypeName
    recipe_id: Optional[str] = None


def first_error_message(exc) -> str:
    """Human-readable message for the first error of a pydantic ValidationError."""
    errors = exc.errors()
    if not errors:
        return str(exc)
    msg = errors[0].get('msg', '')
    # pydantic prefixes messages raised from validators
    return msg.removeprefix('Value error, ')
