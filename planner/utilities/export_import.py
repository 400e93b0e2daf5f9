"""
Export and Import of the whole dataset (recipes + meal plan) as one JSON document.
"""
import json
from pathlib import Path
from typing import Any, Dict, List, Optional
import logging

from planner.domain.MealPlan import MealPlan
from planner.domain.Recipe import Recipe
from planner.infra.Plan_Repository import PlanRepository
from planner.infra.Recipe_Repository import RecipeRepository
from planner.utilities.constants import EXPORT_FILENAME, IMPORT_ERROR_MESSAGE

logger = logging.getLogger(__name__)


class DataImportError(ValueError):
    """Raised when an import document is not valid JSON or has an unexpected shape."""


class DataExporter:
    """Serialize the repository and the meal plan."""

    def __init__(self, recipes: RecipeRepository, plans: PlanRepository):
        self.recipes = recipes
        self.plans = plans

    def export_data(self) -> Dict[str, Any]:
        return {
            "recipes": [r.to_dict() for r in self.recipes.all()],
            "mealPlan": self.plans.get_plan().to_dict(),
        }

    def export_json(self) -> str:
        data = self.export_data()
        logger.info(f"Exported {len(data['recipes'])} recipes and meal plan {data['mealPlan']['id']}")
        return json.dumps(data, indent=2, ensure_ascii=False)

    def export_to_file(self, output_path: Optional[Path] = None) -> Path:
        output_path = Path(output_path or EXPORT_FILENAME)
        with open(output_path, 'w', encoding='utf-8') as f:
            f.write(self.export_json())
        return output_path


class DataImporter:
    """Replace the repository and/or the meal plan from an exported document."""

    def __init__(self, recipes: RecipeRepository, plans: PlanRepository):
        self.recipes = recipes
        self.plans = plans

    @staticmethod
    def parse(text) -> Dict[str, Any]:
        try:
            data = json.loads(text)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise DataImportError(IMPORT_ERROR_MESSAGE) from e
        if not isinstance(data, dict):
            raise DataImportError(IMPORT_ERROR_MESSAGE)
        return data

    def import_data(self, data: Dict[str, Any]) -> Dict[str, bool]:
        """
        Replace state from a decoded document.

        An array under "recipes" replaces every recipe; an object under "mealPlan"
        replaces the plan. Missing keys leave that part untouched. Everything is
        read before anything is replaced, so a bad entry changes nothing.
        """
        new_recipes: Optional[List[Recipe]] = None
        new_plan: Optional[MealPlan] = None
        try:
            if isinstance(data.get("recipes"), list):
                new_recipes = [Recipe.from_dict(entry) for entry in data["recipes"]]
            if isinstance(data.get("mealPlan"), dict):
                new_plan = MealPlan.from_dict(data["mealPlan"])
        except ValueError as e:
            logger.error(f"Import failed: {e}")
            raise DataImportError(IMPORT_ERROR_MESSAGE) from e

        if new_recipes is not None:
            self.recipes.replace_all(new_recipes)
            logger.info(f"Imported {len(new_recipes)} recipes (replace mode)")
        if new_plan is not None:
            self.plans.replace(new_plan)
            logger.info(f"Imported meal plan {new_plan.id}")
        return {"recipes": new_recipes is not None, "mealPlan": new_plan is not None}

    def import_json(self, text) -> Dict[str, bool]:
        return self.import_data(self.parse(text))

    def import_from_file(self, input_path: Path) -> Dict[str, bool]:
        with open(input_path, 'r', encoding='utf-8') as f:
            return self.import_json(f.read())


# CLI interface
if __name__ == "__main__":
    import argparse
    from planner.infra.paths import DATA_DIR
    from planner.infra.Store import JsonFileStore

    parser = argparse.ArgumentParser(description='Export/Import Recipe Planner data')
    parser.add_argument('action', choices=['export', 'import'], help='Action to perform')
    parser.add_argument('--file', help='Input/output file path')

    args = parser.parse_args()
    store = JsonFileStore(DATA_DIR)
    recipes, plans = RecipeRepository(store), PlanRepository(store)

    if args.action == 'export':
        result = DataExporter(recipes, plans).export_to_file(Path(args.file) if args.file else None)
        print(f"✓ Exported to: {result}")

    elif args.action == 'import':
        if not args.file:
            print("Error: --file is required for import")
            raise SystemExit(1)
        try:
            replaced = DataImporter(recipes, plans).import_from_file(Path(args.file))
        except (DataImportError, OSError) as e:
            print(f"✗ Import failed: {e}")
            raise SystemExit(1)
        parts = [k for k, v in replaced.items() if v] or ["nothing"]
        print(f"✓ Imported {', '.join(parts)} from: {args.file}")
