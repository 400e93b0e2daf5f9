from fastapi import FastAPI, Request, Query, Depends
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from pathlib import Path
from typing import List, Optional
import logging

from planner.api.dependencies import get_plan_repository, get_recipe_repository
from planner.api.routes import data, plan, recipes
from planner.infra.Plan_Repository import PlanRepository
from planner.infra.Recipe_Repository import RecipeRepository
from planner.infra.Store import JsonFileStore
from planner.infra.paths import DATA_DIR, TEMPLATES_DIR
from planner.logic.search.filters import filter_recipes, recipes_for_meal_type
from planner.logic.shopping.list_builder import build_shopping_list
from planner.utilities.constants import (
    ALL_CATEGORIES, CATEGORIES, DAYS_OF_WEEK, DIETARY_TAGS, MEAL_TYPES
)

# Logging
logger = logging.getLogger("planner_app")

# Templates
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))


def create_app(store: Optional[JsonFileStore] = None) -> FastAPI:
    """Build the application around one store; the repositories live on app.state."""
    store = store or JsonFileStore(DATA_DIR)
    application = FastAPI(title="Recipe Planner API")
    application.state.store = store
    application.state.recipes = RecipeRepository(store)
    application.state.plans = PlanRepository(store)
    logger.info(f"Recipe planner using data directory {Path(store.data_dir).resolve()}")

    application.include_router(recipes.router)
    application.include_router(plan.router)
    application.include_router(data.router)
    application.add_api_route("/", main_page, methods=["GET"], response_class=HTMLResponse)
    return application


# -------------------- UI PAGE --------------------
def main_page(request: Request,
              search: str = Query(default=""),
              category: str = Query(default=ALL_CATEGORIES),
              tags: Optional[List[str]] = Query(default=None),
              shopping: int = Query(default=0),
              error: str = Query(default=""),
              edit: str = Query(default=""),
              repo: RecipeRepository = Depends(get_recipe_repository),
              plans: PlanRepository = Depends(get_plan_repository)):
    all_recipes = repo.all()
    week = plans.get_plan()
    selected_tags = tags or []

    # Slot values that no longer resolve are shown as empty selections
    grid = {
        day: {meal: (week.get(day, meal) if repo.resolve(week.get(day, meal)) else "") for meal in MEAL_TYPES}
        for day in DAYS_OF_WEEK
    }
    shopping_list = build_shopping_list(week, all_recipes) if shopping else None

    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "recipes": filter_recipes(all_recipes, search, category, selected_tags),
            "search": search,
            "categories": CATEGORIES,
            "selected_category": category,
            "dietary_tags": DIETARY_TAGS,
            "selected_tags": selected_tags,
            "days": DAYS_OF_WEEK,
            "meal_types": MEAL_TYPES,
            "choices": {meal: recipes_for_meal_type(all_recipes, meal) for meal in MEAL_TYPES},
            "grid": grid,
            "plan": week,
            "shopping_list": shopping_list,
            "error": error,
            "editing": edit,
        }
    )


app = create_app()
