import io
from typing import Dict, Any
from reportlab.lib.pagesizes import A4, landscape
from reportlab.platypus import SimpleDocTemplate, Table, TableStyle, Paragraph, Spacer
from reportlab.lib import colors
from reportlab.lib.styles import getSampleStyleSheet

from planner.domain.MealPlan import MealPlan
from planner.infra.Recipe_Repository import RecipeRepository
from planner.utilities.constants import DAYS_OF_WEEK, MEAL_TYPES

HEADER_STYLE = [
    ("BACKGROUND", (0, 0), (-1, 0), colors.HexColor("#4F46E5")),
    ("TEXTCOLOR", (0, 0), (-1, 0), colors.whitesmoke),
    ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
    ("FONTSIZE", (0, 0), (-1, 0), 12),
    ("BOTTOMPADDING", (0, 0), (-1, 0), 10),
    ("GRID", (0, 0), (-1, -1), 0.5, colors.grey),
]


def generate_pdf_for_week(plan: MealPlan, recipes: RecipeRepository, shopping_list: Dict[str, Dict[str, Any]]):
    """PDF with the Day / Breakfast / Lunch / Dinner grid followed by the shopping list."""
    buf = io.BytesIO()
    doc = SimpleDocTemplate(
        buf, pagesize=landscape(A4),
        rightMargin=20, leftMargin=20, topMargin=20, bottomMargin=20
    )

    styles = getSampleStyleSheet()
    elements = [
        Paragraph(f"Meal Plan – Week of {plan.week_start_date.isoformat()}", styles["Title"]),
        Spacer(1, 16),
    ]

    data = [["Day", "Breakfast", "Lunch", "Dinner"]]
    for day in DAYS_OF_WEEK:
        row = [day]
        for meal in MEAL_TYPES:
            recipe = recipes.resolve(plan.get(day, meal))
            row.append(recipe.name if recipe else "-")
        data.append(row)

    table = Table(data, repeatRows=1)
    table.setStyle(TableStyle(HEADER_STYLE + [("ALIGN", (0, 0), (-1, -1), "CENTER")]))
    elements.append(table)

    if shopping_list:
        elements += [Spacer(1, 24), Paragraph("Shopping List", styles["Heading2"]), Spacer(1, 8)]
        rows = [["Item", "Quantity", "Unit"]]
        rows += [[name, f"{item['quantity']:g}", item['unit']] for name, item in shopping_list.items()]
        items_table = Table(rows, repeatRows=1)
        items_table.setStyle(TableStyle(HEADER_STYLE + [("ALIGN", (1, 0), (1, -1), "RIGHT")]))
        elements.append(items_table)

    doc.build(elements)
    return buf.getvalue()
