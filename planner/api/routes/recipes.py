from itertools import zip_longest
from typing import List, Optional
from urllib.parse import urlencode
import logging

from fastapi import APIRouter, Body, Depends, Form, HTTPException, Query
from fastapi.responses import JSONResponse, RedirectResponse
from pydantic import ValidationError

from planner.api.dependencies import get_recipe_repository
from planner.domain.Recipe import Recipe
from planner.infra.Recipe_Repository import RecipeRepository
from planner.logic.recipes.duplicates import is_duplicate
from planner.logic.search.filters import filter_recipes
from planner.utilities.constants import ALL_CATEGORIES
from planner.utilities.validators import RecipeInput, first_error_message

router = APIRouter()
logger = logging.getLogger(__name__)

DUPLICATE_MESSAGE = "A recipe with this name and ingredients already exists"


def _error(message: str) -> JSONResponse:
    return JSONResponse(status_code=400, content={"error": message})


def _validate(payload, recipe_id: str = ""):
    """(recipe, None) when the payload is valid, else (None, first error message)."""
    try:
        return RecipeInput.model_validate(payload).to_domain(recipe_id), None
    except ValidationError as e:
        return None, first_error_message(e)


def _add(repo: RecipeRepository, payload):
    draft, error = _validate(payload)
    if error:
        return None, error
    if is_duplicate(repo.all(), draft):
        return None, DUPLICATE_MESSAGE
    recipe: Recipe = repo.add(draft)
    logger.info(f"Added recipe {recipe.name!r} ({recipe.id})")
    return recipe, None


def _to_page(error: str = "", edit: str = "") -> RedirectResponse:
    params = {k: v for k, v in (("error", error), ("edit", edit)) if v}
    url = f"/?{urlencode(params)}" if params else "/"
    return RedirectResponse(url=url, status_code=303)


def _number(text: str):
    text = text.strip()
    try:
        return int(text)
    except ValueError:
        pass
    try:
        return float(text)
    except ValueError:
        # unparseable quantities fail the positive-number check
        return 0


def _form_payload(name, category, tags, ingredient_name, ingredient_quantity, ingredient_unit, steps, image_url):
    ingredients = [
        {"name": n or "", "quantity": _number(q or ""), "unit": u or ""}
        for n, q, u in zip_longest(ingredient_name, ingredient_quantity, ingredient_unit)
        if (n or "").strip() or (q or "").strip() or (u or "").strip()
    ]
    return {
        "name": name,
        "category": category,
        "dietaryTags": tags,
        "ingredients": ingredients,
        "steps": [s.strip() for s in steps.split("\n") if s.strip()],
        "imageUrl": image_url,
    }


@router.get("/api/recipes")
def list_recipes(search: str = Query(default=""),
                 category: str = Query(default=ALL_CATEGORIES),
                 tags: Optional[List[str]] = Query(default=None),
                 repo: RecipeRepository = Depends(get_recipe_repository)):
    """Recipes matching the search term, category and every requested dietary tag."""
    matches = filter_recipes(repo.all(), search, category, tags or [])
    return {"count": len(matches), "recipes": [r.to_dict() for r in matches]}


@router.get("/api/recipes/{recipe_id}")
def get_recipe(recipe_id: str, repo: RecipeRepository = Depends(get_recipe_repository)):
    recipe = repo.resolve(recipe_id)
    if recipe is None:
        raise HTTPException(status_code=404, detail="Recipe not found")
    return recipe.to_dict()


@router.post("/api/recipes")
def add_recipe(payload: dict = Body(...), repo: RecipeRepository = Depends(get_recipe_repository)):
    recipe, error = _add(repo, payload)
    if error:
        return _error(error)
    return {"status": "success", "recipe": recipe.to_dict()}


@router.put("/api/recipes/{recipe_id}")
def edit_recipe(recipe_id: str, payload: dict = Body(...), repo: RecipeRepository = Depends(get_recipe_repository)):
    # Edits are validated but not re-checked against the duplicate rule
    recipe, error = _validate(payload, recipe_id)
    if error:
        return _error(error)
    repo.edit(recipe)
    return {"success": True}


@router.delete("/api/recipes/{recipe_id}")
def delete_recipe(recipe_id: str, repo: RecipeRepository = Depends(get_recipe_repository)):
    repo.delete(recipe_id)
    return {"success": True}


# -------------------- PAGE FORMS --------------------
@router.post("/recipes/add")
def add_recipe_form(name: str = Form(""),
                    category: str = Form("Dinner"),
                    tags: List[str] = Form(default=[]),
                    ingredient_name: List[str] = Form(default=[]),
                    ingredient_quantity: List[str] = Form(default=[]),
                    ingredient_unit: List[str] = Form(default=[]),
                    steps: str = Form(""),
                    image_url: str = Form(""),
                    repo: RecipeRepository = Depends(get_recipe_repository)):
    payload = _form_payload(name, category, tags, ingredient_name, ingredient_quantity, ingredient_unit,
                            steps, image_url)
    _, error = _add(repo, payload)
    return _to_page(error=error or "")


@router.post("/recipes/{recipe_id}/edit")
def edit_recipe_form(recipe_id: str,
                     name: str = Form(""),
                     category: str = Form("Dinner"),
                     tags: List[str] = Form(default=[]),
                     ingredient_name: List[str] = Form(default=[]),
                     ingredient_quantity: List[str] = Form(default=[]),
                     ingredient_unit: List[str] = Form(default=[]),
                     steps: str = Form(""),
                     image_url: str = Form(""),
                     repo: RecipeRepository = Depends(get_recipe_repository)):
    payload = _form_payload(name, category, tags, ingredient_name, ingredient_quantity, ingredient_unit,
                            steps, image_url)
    recipe, error = _validate(payload, recipe_id)
    if error:
        # reopen the edit form so the message shows next to it
        return _to_page(error=error, edit=recipe_id)
    repo.edit(recipe)
    return _to_page()


@router.post("/recipes/{recipe_id}/delete")
def delete_recipe_form(recipe_id: str, repo: RecipeRepository = Depends(get_recipe_repository)):
    repo.delete(recipe_id)
    return _to_page()
