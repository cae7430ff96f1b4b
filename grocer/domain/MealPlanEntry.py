"""MealPlanEntry domain entity: one scheduled occurrence of cooking a recipe."""
from datetime import date
from typing import Optional

from grocer.utilities.dates import parse_date, format_date


class MealPlanEntry:
    def __init__(self, entry_date: date, meal_type: str, recipe_reference: str, planned_servings: int,
                 entry_id: str = "", household_id: str = "", notes: str = ""):
        self.date = entry_date
        self.meal_type = meal_type
        self.recipe_reference = recipe_reference
        self.planned_servings = planned_servings
        self.entry_id = entry_id
        self.household_id = household_id
        self.notes = notes

    def __str__(self) -> str:
        return f"{format_date(self.date)} {self.meal_type}: {self.recipe_reference} x{self.planned_servings}"

    __repr__ = __str__

    @staticmethod
    def from_dict(data, household_id: Optional[str] = None):
        d = dict(data)
        try:
            servings = int(d.get("servings", d.get("planned_servings", 0)) or 0)
        except (TypeError, ValueError):
            servings = 0
        return MealPlanEntry(
            entry_date=parse_date(d.get("date")),
            meal_type=str(d.get("meal_type") or ""),
            recipe_reference=str(d.get("recipe_id") or d.get("recipe_reference") or ""),
            planned_servings=servings,
            entry_id=str(d.get("id") or ""),
            household_id=household_id if household_id is not None else str(d.get("household_id") or ""),
            notes=str(d.get("notes") or ""),
        )

    def to_dict(self):
        return {
            "id": self.entry_id,
            "household_id": self.household_id,
            "date": format_date(self.date),
            "meal_type": self.meal_type,
            "recipe_id": self.recipe_reference,
            "servings": self.planned_servings,
            "notes": self.notes,
        }
