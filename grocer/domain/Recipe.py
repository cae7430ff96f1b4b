"""Recipe domain entity: name, base servings, ingredient lines, catalog metadata."""
from typing import List, Optional

from grocer.domain.IngredientLine import IngredientLine


class Recipe:
    def __init__(self, recipe_id: str = "", name: str = "", base_servings: Optional[float] = None,
                 ingredients: Optional[List[IngredientLine]] = None, tags: Optional[List[str]] = None,
                 meal_category: str = ""):
        self.recipe_id = recipe_id
        self.name = name
        self.base_servings = base_servings
        self.ingredients = ingredients[:] if ingredients else []
        self.tags = tags[:] if tags else []
        self.meal_category = meal_category

    def __str__(self) -> str:
        servings = self.base_servings if self.base_servings is not None else "?"
        return f"{self.name} ({self.recipe_id}) - {servings} servings - {len(self.ingredients)} ingredients"

    __repr__ = __str__

    def can_scale(self) -> bool:
        """True when base_servings is usable as a scaling denominator."""
        servings = self.base_servings
        if isinstance(servings, bool) or not isinstance(servings, (int, float)):
            return False
        return servings > 0

    def scale_factor(self, planned_servings: float) -> float:
        '''Ratio from the recipe's base servings to the planned servings; 1 when unscalable.'''
        if not self.can_scale():
            return 1.0
        return planned_servings / self.base_servings

    @staticmethod
    def from_dict(data):
        d = dict(data)
        servings = d.get("base_servings", d.get("servings"))
        try:
            servings = float(servings) if servings is not None else None
        except (TypeError, ValueError):
            servings = None
        if servings is not None and servings.is_integer():
            servings = int(servings)
        return Recipe(
            recipe_id=str(d.get("id") or d.get("recipe_id") or ""),
            name=str(d.get("name") or ""),
            base_servings=servings,
            ingredients=[IngredientLine.from_dict(ing) for ing in d.get("ingredients", [])],
            tags=list(d.get("tags") or []),
            meal_category=str(d.get("meal_category") or ""),
        )

    def to_dict(self):
        return {
            "id": self.recipe_id,
            "name": self.name,
            "base_servings": self.base_servings,
            "ingredients": [ing.to_dict() for ing in self.ingredients],
            "tags": self.tags,
            "meal_category": self.meal_category,
        }
