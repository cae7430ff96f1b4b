"""Aggregated grocery item: total quantity for one (name, unit) identity plus its contributions."""
from datetime import date
from typing import List, Optional

from grocer.utilities.dates import format_date


class Contribution:
    def __init__(self, recipe_name: str, quantity: float, meal_type: str = "", entry_date: Optional[date] = None):
        self.recipe_name = recipe_name
        self.quantity = quantity
        self.meal_type = meal_type
        self.date = entry_date

    def __str__(self) -> str:
        return f"{self.recipe_name}: {self.quantity}"

    __repr__ = __str__

    def to_dict(self):
        return {
            "recipe_name": self.recipe_name,
            "quantity": self.quantity,
            "meal_type": self.meal_type,
            "date": format_date(self.date) if self.date else None,
        }


class AggregatedItem:
    def __init__(self, name: str, unit: str, display_name: str = ""):
        self.name = name
        self.unit = unit
        self.display_name = display_name or name
        self.total_quantity = 0.0
        self.contributions: List[Contribution] = []

    @property
    def key(self):
        return self.name, self.unit

    def add(self, contribution: Contribution):
        self.contributions.append(contribution)
        self.total_quantity = round(self.total_quantity + contribution.quantity, 6)

    def recipe_names(self) -> List[str]:
        '''Distinct contributing recipe names in first-seen order.'''
        seen = []
        for c in self.contributions:
            if c.recipe_name not in seen:
                seen.append(c.recipe_name)
        return seen

    def __str__(self) -> str:
        unit = f" {self.unit}" if self.unit else ""
        return f"{self.display_name} - {self.total_quantity}{unit} ({len(self.contributions)} contributions)"

    __repr__ = __str__

    def to_dict(self):
        return {
            "name": self.name,
            "display_name": self.display_name,
            "unit": self.unit,
            "total_quantity": self.total_quantity,
            "contributions": [c.to_dict() for c in self.contributions],
        }
