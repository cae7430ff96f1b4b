"""Grocery list service: fetch a household's planned meals and aggregate them.

The aggregation itself is pure (see aggregator); this module wires it to the
meal-plan provider and the recipe catalog.
"""
import logging
from datetime import date

from grocer.domain.GroceryList import GroceryList
from grocer.infra.Plan_Repository import MealPlanRepository
from grocer.infra.Recipe_Repository import RecipeRepository
from grocer.logic.grocery.aggregator import aggregate
from grocer.utilities.dates import format_date, week_range

logger = logging.getLogger(__name__)


def build_grocery_list(household_id: str, start: date, end: date,
                       plan_repository: MealPlanRepository,
                       recipe_repository: RecipeRepository) -> GroceryList:
    """Aggregated grocery list for `household_id` between start and end (inclusive)."""
    if start > end:
        raise ValueError(f"Start date {format_date(start)} is after end date {format_date(end)}")

    entries = plan_repository.entries_between(household_id, start, end)
    result = aggregate(entries, recipe_repository.get)
    result.start, result.end = start, end

    for w in result.warnings:
        logger.warning("Household %s, %s..%s: %s", household_id, format_date(start), format_date(end), w)
    logger.info("Grocery list for household %s (%s..%s): %d entries -> %d items",
                household_id, format_date(start), format_date(end), len(entries), len(result.items))
    return result


def build_week_grocery_list(household_id: str, day: date,
                            plan_repository: MealPlanRepository,
                            recipe_repository: RecipeRepository) -> GroceryList:
    """Grocery list for the Monday-to-Sunday week containing `day`."""
    start, end = week_range(day)
    return build_grocery_list(household_id, start, end, plan_repository, recipe_repository)


__all__ = ['build_grocery_list', 'build_week_grocery_list']
