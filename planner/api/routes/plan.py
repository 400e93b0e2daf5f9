from fastapi import APIRouter, Body, Depends, Form, HTTPException, Response
from fastapi.responses import RedirectResponse
from pydantic import ValidationError

from planner.api.dependencies import get_plan_repository, get_recipe_repository
from planner.infra.Plan_Repository import PlanRepository
from planner.infra.Recipe_Repository import RecipeRepository
from planner.infra.pdf_utils import generate_pdf_for_week
from planner.logic.search.filters import recipes_for_meal_type
from planner.logic.shopping.list_builder import build_shopping_list, shopping_list_items
from planner.utilities.constants import MEAL_TYPES
from planner.utilities.validators import SlotUpdateInput, first_error_message

router = APIRouter()


@router.get("/api/plan")
def get_plan(plans: PlanRepository = Depends(get_plan_repository)):
    return plans.get_plan().to_dict()


@router.post("/api/plan/slot")
def update_slot(payload: dict = Body(...), plans: PlanRepository = Depends(get_plan_repository)):
    """Assign a recipe id to one slot, or clear it when recipe_id is null/empty."""
    try:
        update = SlotUpdateInput.model_validate(payload)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=f"Invalid day or meal: {first_error_message(e)}")
    plan = plans.assign(update.day, update.meal, update.recipe_id)
    return plan.to_dict()


@router.post("/update_meal")
def update_meal(day: str = Form(...), meal: str = Form(...), recipe: str = Form(""),
                plans: PlanRepository = Depends(get_plan_repository)):
    try:
        plans.assign(day, meal, recipe or None)
    except ValueError:
        raise HTTPException(status_code=400, detail="Invalid day or meal")
    return RedirectResponse(url="/", status_code=303)


@router.get("/api/plan/choices/{meal_type}")
def plan_choices(meal_type: str, repo: RecipeRepository = Depends(get_recipe_repository)):
    if meal_type not in MEAL_TYPES:
        raise HTTPException(status_code=404, detail="Unknown meal type")
    return [{"id": r.id, "name": r.name} for r in recipes_for_meal_type(repo.all(), meal_type)]


@router.get("/api/shopping-list")
def api_shopping_list(plans: PlanRepository = Depends(get_plan_repository),
                      repo: RecipeRepository = Depends(get_recipe_repository)):
    items = shopping_list_items(build_shopping_list(plans.get_plan(), repo.all()))
    return {"items": items, "count": len(items)}


@router.get("/export_pdf")
def export_pdf(plans: PlanRepository = Depends(get_plan_repository),
               repo: RecipeRepository = Depends(get_recipe_repository)):
    plan = plans.get_plan()
    pdf_bytes = generate_pdf_for_week(plan, repo, build_shopping_list(plan, repo.all()))

    return Response(
        content=pdf_bytes,
        media_type="application/pdf",
        headers={
            "Content-Disposition": f"attachment; filename=meal_plan_{plan.week_start_date.isoformat()}.pdf"
        },
    )
