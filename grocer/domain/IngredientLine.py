"""IngredientLine domain entity: one ingredient requirement within a recipe."""
from typing import Optional, Tuple


def normalize_text(value: Optional[str]) -> str:
    return (value or '').strip().lower()


class IngredientLine:
    def __init__(self, name: str = "", quantity: float = 0, unit: Optional[str] = "", notes: str = ""):
        self.name = name
        self.quantity = quantity
        # Empty unit means a unitless count ("2 eggs")
        self.unit = unit or ""
        self.notes = notes

    @property
    def key(self) -> Tuple[str, str]:
        """Merge identity: case-insensitive, whitespace-trimmed (name, unit)."""
        return normalize_text(self.name), normalize_text(self.unit)

    def __str__(self) -> str:
        unit = f" {self.unit}" if self.unit else ""
        return f"{self.name} - {self.quantity}{unit}"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        '''Creates an IngredientLine from a dictionary. Ignores unknown keys.'''
        d = dict(data) if isinstance(data, dict) else {}
        try:
            quantity = float(d.get("quantity") or 0)
        except (TypeError, ValueError):
            quantity = 0.0
        return IngredientLine(
            name=str(d.get("name") or ""),
            quantity=quantity,
            unit=d.get("unit") or "",
            notes=str(d.get("notes") or ""),
        )

    def to_dict(self):
        data = {
            "name": self.name,
            "quantity": self.quantity,
            "unit": self.unit,
        }
        if self.notes:
            data["notes"] = self.notes
        return data
