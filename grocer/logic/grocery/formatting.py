"""Checklist rendering helpers for aggregated grocery items."""
from grocer.domain.GroceryItem import AggregatedItem
from grocer.utilities.constants import DISPLAY_DECIMALS


def format_quantity(quantity: float) -> str:
    """300.0 -> '300', 1.25 -> '1.25', 0.333 -> '0.33'."""
    value = round(float(quantity or 0), DISPLAY_DECIMALS)
    if value.is_integer():
        return str(int(value))
    return f"{value:.{DISPLAY_DECIMALS}f}".rstrip('0').rstrip('.')


def format_amount(item: AggregatedItem) -> str:
    qty = format_quantity(item.total_quantity)
    return f"{qty} {item.unit}" if item.unit else qty


def checklist_line(item: AggregatedItem) -> str:
    used_in = ", ".join(item.recipe_names())
    line = f"{item.display_name} - {format_amount(item)}"
    if used_in:
        line += f" (Used in: {used_in})"
    return line


def checklist_lines(items):
    return [checklist_line(item) for item in items]


__all__ = ['format_quantity', 'format_amount', 'checklist_line', 'checklist_lines']
