from typing import Final

CATEGORIES: Final[tuple[str, ...]] = ("Breakfast", "Lunch", "Dinner", "Snack", "Dessert")
ALL_CATEGORIES: Final[str] = "All"
DIETARY_TAGS: Final[tuple[str, ...]] = ("Vegetarian", "Vegan", "Gluten-Free", "Dairy-Free", "Keto", "Paleo")
DAYS_OF_WEEK: Final[tuple[str, ...]] = (
    "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"
)
MEAL_TYPES: Final[tuple[str, ...]] = ("breakfast", "lunch", "dinner")

# Store slots
RECIPES_KEY: Final[str] = "recipes"
MEAL_PLAN_KEY: Final[str] = "mealPlan"

EXPORT_FILENAME: Final[str] = "recipe-planner-export.json"
IMPORT_ERROR_MESSAGE: Final[str] = "Error importing file. Please make sure it's a valid JSON file."
DATE_FORMAT: Final[str] = "%Y-%m-%d"
