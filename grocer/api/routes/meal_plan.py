from datetime import date as _date
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Response

from grocer.api.dependencies import get_plan_repository, get_recipe_repository, resolve_date_range
from grocer.domain.errors import EntryNotFoundError
from grocer.domain.MealPlanEntry import MealPlanEntry
from grocer.infra.Plan_Repository import MealPlanRepository
from grocer.infra.Recipe_Repository import RecipeRepository
from grocer.utilities.dates import format_date
from grocer.utilities.validators import MealPlanEntryInput, ServingsUpdateInput

router = APIRouter(prefix="/api/meal-plan", tags=["meal-plan"])


@router.get("/entries")
def list_entries(household: str = Query(..., min_length=1),
                 week: Optional[_date] = Query(default=None),
                 start: Optional[_date] = Query(default=None),
                 end: Optional[_date] = Query(default=None),
                 plans: MealPlanRepository = Depends(get_plan_repository)):
    """Planned meals of a household for a week (default: current) or an explicit start/end window."""
    range_start, range_end = resolve_date_range(week, start, end)
    entries = [e.to_dict() for e in plans.entries_between(household, range_start, range_end)]
    return {
        "household": household,
        "start": format_date(range_start),
        "end": format_date(range_end),
        "entries": entries,
        "count": len(entries),
    }


@router.post("/entries", status_code=201)
def add_entry(payload: MealPlanEntryInput,
              plans: MealPlanRepository = Depends(get_plan_repository),
              recipes: RecipeRepository = Depends(get_recipe_repository)):
    if recipes.get(payload.recipe_id) is None:
        raise HTTPException(status_code=404, detail=f"Recipe '{payload.recipe_id}' not found")
    entry = MealPlanEntry(
        entry_date=payload.date,
        meal_type=payload.meal_type,
        recipe_reference=payload.recipe_id,
        planned_servings=payload.servings,
        household_id=payload.household,
        notes=payload.notes,
    )
    return plans.add_entry(entry).to_dict()


@router.patch("/entries/{household}/{entry_id}")
def update_entry_servings(household: str, entry_id: str, payload: ServingsUpdateInput,
                          plans: MealPlanRepository = Depends(get_plan_repository)):
    try:
        return plans.update_servings(household, entry_id, payload.servings).to_dict()
    except EntryNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.delete("/entries/{household}/{entry_id}", status_code=204)
def delete_entry(household: str, entry_id: str,
                 plans: MealPlanRepository = Depends(get_plan_repository)):
    if not plans.remove_entry(household, entry_id):
        raise HTTPException(status_code=404, detail="Meal plan entry not found")
    return Response(status_code=204)
