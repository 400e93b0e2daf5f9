"""Request-scoped access to the repositories created once per application in create_app()."""
from fastapi import Request

from planner.infra.Plan_Repository import PlanRepository
from planner.infra.Recipe_Repository import RecipeRepository


def get_recipe_repository(request: Request) -> RecipeRepository:
    return request.app.state.recipes


def get_plan_repository(request: Request) -> PlanRepository:
    return request.app.state.plans
