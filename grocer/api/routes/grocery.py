import logging
from datetime import date as _date
from typing import Optional

from fastapi import APIRouter, Depends, Query, Response

from grocer.api.dependencies import get_plan_repository, get_recipe_repository, resolve_date_range
from grocer.infra.pdf_utils import generate_pdf_for_grocery_list
from grocer.infra.Plan_Repository import MealPlanRepository
from grocer.infra.Recipe_Repository import RecipeRepository
from grocer.logic.grocery.formatting import checklist_lines
from grocer.logic.grocery.service import build_grocery_list
from grocer.utilities.dates import format_date

router = APIRouter(prefix="/api/grocery-list", tags=["grocery"])
logger = logging.getLogger(__name__)


@router.get("")
@router.get("/")
def api_grocery_list(household: str = Query(..., min_length=1),
                     week: Optional[_date] = Query(default=None),
                     start: Optional[_date] = Query(default=None),
                     end: Optional[_date] = Query(default=None),
                     plans: MealPlanRepository = Depends(get_plan_repository),
                     recipes: RecipeRepository = Depends(get_recipe_repository)):
    range_start, range_end = resolve_date_range(week, start, end)
    result = build_grocery_list(household, range_start, range_end, plans, recipes)
    data = result.to_dict()
    data["household"] = household
    data["lines"] = checklist_lines(result.items)
    return data


@router.get("/pdf")
def api_grocery_list_pdf(household: str = Query(..., min_length=1),
                         week: Optional[_date] = Query(default=None),
                         start: Optional[_date] = Query(default=None),
                         end: Optional[_date] = Query(default=None),
                         plans: MealPlanRepository = Depends(get_plan_repository),
                         recipes: RecipeRepository = Depends(get_recipe_repository)):
    range_start, range_end = resolve_date_range(week, start, end)
    result = build_grocery_list(household, range_start, range_end, plans, recipes)
    pdf_bytes = generate_pdf_for_grocery_list(result)
    filename = f"grocery-list-{format_date(range_start)}.pdf"
    return Response(content=pdf_bytes, media_type="application/pdf",
                    headers={"Content-Disposition": f'inline; filename="{filename}"'})
