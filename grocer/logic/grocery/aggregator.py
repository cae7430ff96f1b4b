"""Grocery list aggregation.

Rolls planned meals up into one consolidated list:
scale each ingredient line to the planned servings, round it, merge lines by
normalized (name, unit) and order the result by name then unit.

Units are never converted: "g" and "kg" stay separate items.
"""
from collections.abc import Mapping
from decimal import Decimal, ROUND_HALF_UP
from typing import Callable, Dict, Iterable, List, Optional, Tuple, Union

from grocer.domain.errors import RecipeNotFoundError
from grocer.domain.GroceryItem import AggregatedItem, Contribution
from grocer.domain.GroceryList import AggregationWarning, GroceryList
from grocer.domain.IngredientLine import normalize_text
from grocer.domain.MealPlanEntry import MealPlanEntry
from grocer.domain.Recipe import Recipe
from grocer.utilities.constants import (
    MEAL_TYPES,
    QUANTITY_DECIMALS,
    WARNING_INVALID_RECIPE_SERVINGS,
    WARNING_NEGATIVE_CONTRIBUTION,
    WARNING_UNRESOLVED_RECIPE,
)

RecipeLookup = Union[Callable[[str], Optional[Recipe]], Mapping]

_QUANT = Decimal(1).scaleb(-QUANTITY_DECIMALS)


def _decimal(value) -> Decimal:
    return value if isinstance(value, Decimal) else Decimal(str(value))


def round_quantity(value) -> float:
    """Round half up to QUANTITY_DECIMALS places (2.25 -> 2.3, -2.25 -> -2.3)."""
    return float(_decimal(value).quantize(_QUANT, rounding=ROUND_HALF_UP))


def scale_quantity(quantity, planned_servings, recipe: Recipe) -> float:
    """quantity * planned / base, computed in Decimal so halves round up exactly (0.7 * 3/2 -> 1.1)."""
    amount = _decimal(quantity or 0)
    if recipe.can_scale():
        amount = amount * _decimal(planned_servings) / _decimal(recipe.base_servings)
    return round_quantity(amount)


def _entry_sort_key(entry: MealPlanEntry):
    meal_type = normalize_text(entry.meal_type)
    meal_rank = MEAL_TYPES.index(meal_type) if meal_type in MEAL_TYPES else len(MEAL_TYPES)
    return entry.date, meal_rank, meal_type, str(entry.recipe_reference), entry.planned_servings or 0


def _resolve(recipe_lookup: RecipeLookup, reference) -> Optional[Recipe]:
    if isinstance(recipe_lookup, Mapping):
        return recipe_lookup.get(reference)
    try:
        return recipe_lookup(reference)
    except RecipeNotFoundError:
        return None


def aggregate(entries: Iterable[MealPlanEntry], recipe_lookup: RecipeLookup) -> GroceryList:
    """Aggregate meal-plan entries into a grocery list.

    Args:
        entries: Planned meals, already filtered to the wanted date range.
        recipe_lookup: Callable returning a Recipe (None or RecipeNotFoundError
            when unknown) or a mapping of reference -> Recipe.

    Returns:
        GroceryList with items sorted by (name, unit) and the warnings
        collected on the way. Any other error raised by the lookup propagates.
    """
    warnings: List[AggregationWarning] = []
    items: Dict[Tuple[str, str], AggregatedItem] = {}

    # Zero, negative or missing servings mean "no meal actually planned"
    planned = [e for e in entries if e.planned_servings and e.planned_servings > 0]

    for entry in sorted(planned, key=_entry_sort_key):
        recipe = _resolve(recipe_lookup, entry.recipe_reference)
        if recipe is None:
            warnings.append(AggregationWarning(
                WARNING_UNRESOLVED_RECIPE,
                f"Recipe '{entry.recipe_reference}' not found; entry skipped",
                recipe_reference=entry.recipe_reference,
                entry_date=entry.date,
                meal_type=entry.meal_type,
            ))
            continue

        if not recipe.can_scale():
            warnings.append(AggregationWarning(
                WARNING_INVALID_RECIPE_SERVINGS,
                f"Recipe '{recipe.name}' has no usable base servings ({recipe.base_servings!r}); "
                f"quantities used as written",
                recipe_reference=entry.recipe_reference,
                entry_date=entry.date,
                meal_type=entry.meal_type,
            ))

        # Contributions are per planning occurrence: one per (entry, item)
        entry_contributions: Dict[Tuple[str, str], Contribution] = {}
        for line in recipe.ingredients:
            key = line.key
            scaled = scale_quantity(line.quantity, entry.planned_servings, recipe)
            if scaled < 0:
                warnings.append(AggregationWarning(
                    WARNING_NEGATIVE_CONTRIBUTION,
                    f"Negative quantity {scaled} for '{line.name}' in '{recipe.name}' clamped to 0",
                    recipe_reference=entry.recipe_reference,
                    entry_date=entry.date,
                    meal_type=entry.meal_type,
                    ingredient=line.name,
                ))
                scaled = 0.0

            item = items.get(key)
            if item is None:
                item = items[key] = AggregatedItem(key[0], key[1], display_name=line.name.strip())

            contribution = entry_contributions.get(key)
            if contribution is None:
                contribution = entry_contributions[key] = Contribution(
                    recipe.name, scaled, meal_type=entry.meal_type, entry_date=entry.date)
                item.add(contribution)
            else:
                contribution.quantity = round(contribution.quantity + scaled, 6)
                item.total_quantity = round(item.total_quantity + scaled, 6)

    ordered = sorted(items.values(), key=lambda i: (i.name, i.unit))
    return GroceryList(ordered, warnings)


__all__ = ['aggregate', 'round_quantity', 'scale_quantity', 'RecipeLookup']
