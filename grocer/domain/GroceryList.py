"""GroceryList aggregate: ordered aggregated items plus the non-fatal warnings raised while building them."""
from datetime import date
from typing import List, Optional

from grocer.domain.GroceryItem import AggregatedItem
from grocer.utilities.dates import format_date


class AggregationWarning:
    def __init__(self, kind: str, message: str, recipe_reference: str = "", entry_date: Optional[date] = None,
                 meal_type: str = "", ingredient: str = ""):
        self.kind = kind
        self.message = message
        self.recipe_reference = recipe_reference
        self.date = entry_date
        self.meal_type = meal_type
        self.ingredient = ingredient

    def __str__(self) -> str:
        return f"[{self.kind}] {self.message}"

    __repr__ = __str__

    def to_dict(self):
        data = {
            "kind": self.kind,
            "message": self.message,
            "recipe_reference": self.recipe_reference,
            "date": format_date(self.date) if self.date else None,
            "meal_type": self.meal_type,
        }
        if self.ingredient:
            data["ingredient"] = self.ingredient
        return data


class GroceryList:
    def __init__(self, items: Optional[List[AggregatedItem]] = None,
                 warnings: Optional[List[AggregationWarning]] = None,
                 start: Optional[date] = None, end: Optional[date] = None):
        self.items = items[:] if items else []
        self.warnings = warnings[:] if warnings else []
        self.start = start
        self.end = end

    def __iter__(self):
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def warnings_of(self, kind: str) -> List[AggregationWarning]:
        return [w for w in self.warnings if w.kind == kind]

    def __str__(self) -> str:
        items_str = ",\n\t".join(str(item) for item in self.items)
        return f"Grocery List ({len(self.items)} items, {len(self.warnings)} warnings):\n\t{items_str}"

    __repr__ = __str__

    def to_dict(self):
        return {
            "start": format_date(self.start) if self.start else None,
            "end": format_date(self.end) if self.end else None,
            "items": [item.to_dict() for item in self.items],
            "count": len(self.items),
            "warnings": [w.to_dict() for w in self.warnings],
        }
