from fastapi import APIRouter, Depends, File, Request, Response, UploadFile
from fastapi.responses import JSONResponse, RedirectResponse

from planner.api.dependencies import get_plan_repository, get_recipe_repository
from planner.infra.Plan_Repository import PlanRepository
from planner.infra.Recipe_Repository import RecipeRepository
from planner.utilities.constants import EXPORT_FILENAME
from planner.utilities.export_import import DataExporter, DataImporter, DataImportError

router = APIRouter()


def _import(content, repo: RecipeRepository, plans: PlanRepository):
    try:
        replaced = DataImporter(repo, plans).import_json(content)
    except DataImportError as e:
        return JSONResponse(status_code=400, content={"error": str(e)})
    return {"status": "success", "replaced": replaced}


@router.get("/export")
def export_data(repo: RecipeRepository = Depends(get_recipe_repository),
                plans: PlanRepository = Depends(get_plan_repository)):
    return Response(
        content=DataExporter(repo, plans).export_json(),
        media_type="application/json",
        headers={"Content-Disposition": f"attachment; filename={EXPORT_FILENAME}"},
    )


@router.post("/import")
async def import_file(file: UploadFile = File(...),
                      repo: RecipeRepository = Depends(get_recipe_repository),
                      plans: PlanRepository = Depends(get_plan_repository)):
    """Replace recipes and/or the meal plan from an uploaded export file, then back to the page."""
    result = _import(await file.read(), repo, plans)
    if isinstance(result, JSONResponse):
        return result
    return RedirectResponse(url="/", status_code=303)


@router.post("/api/import")
async def import_document(request: Request,
                          repo: RecipeRepository = Depends(get_recipe_repository),
                          plans: PlanRepository = Depends(get_plan_repository)):
    """Same as /import, with the document sent as the raw request body."""
    return _import(await request.body(), repo, plans)
