"""Shared API helpers: repository providers (tests override them via app.dependency_overrides)
and date-window resolution for week/start/end query parameters."""
from datetime import date as _date
from typing import Optional, Tuple

from fastapi import HTTPException

from grocer.infra.Plan_Repository import MealPlanRepository
from grocer.infra.Recipe_Repository import RecipeRepository
from grocer.utilities.dates import week_range


def get_recipe_repository() -> RecipeRepository:
    return RecipeRepository()


def get_plan_repository() -> MealPlanRepository:
    return MealPlanRepository()


def resolve_date_range(week: Optional[_date], start: Optional[_date], end: Optional[_date]) -> Tuple[_date, _date]:
    """Explicit start/end win; otherwise the Monday-Sunday week of `week` (default: today)."""
    if start is not None or end is not None:
        if start is None or end is None:
            raise HTTPException(status_code=400, detail="Both start and end are required")
        if start > end:
            raise HTTPException(status_code=400, detail="start must not be after end")
        return start, end
    return week_range(week or _date.today())
