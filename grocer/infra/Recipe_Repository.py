"""Recipe catalog backed by a JSON file (list of recipe objects)."""
import logging
from pathlib import Path
from typing import Dict, List, Optional
from uuid import uuid4

from grocer.domain.Recipe import Recipe
from grocer.infra.paths import RECIPES_FILE
from grocer.infra.storage import atomic_write_json, read_json

logger = logging.getLogger(__name__)


class RecipeRepository:
    def __init__(self, path: Optional[Path] = None):
        self.path = Path(path) if path else RECIPES_FILE
        self._recipes: Dict[str, Recipe] = {}
        self.reload()

    def reload(self):
        data = read_json(self.path, [])
        if not isinstance(data, list):
            logger.error(f"Recipes file {self.path} does not contain a list. Ignoring it.")
            data = []
        self._recipes = {}
        for entry in data:
            if not isinstance(entry, dict):
                continue
            recipe = Recipe.from_dict(entry)
            if not recipe.recipe_id:
                logger.warning(f"Skipping recipe without id: {recipe.name!r}")
                continue
            self._recipes[recipe.recipe_id] = recipe
        return self

    def get(self, reference) -> Optional[Recipe]:
        """Return the recipe for `reference`, or None when the catalog has no such recipe."""
        return self._recipes.get(str(reference))

    def all(self) -> List[Recipe]:
        return sorted(self._recipes.values(), key=lambda r: r.name.lower())

    def add(self, recipe: Recipe) -> Recipe:
        if not recipe.recipe_id:
            recipe.recipe_id = uuid4().hex[:12]
        if recipe.recipe_id in self._recipes:
            raise ValueError(f"Recipe id '{recipe.recipe_id}' already exists")
        if any(r.name.strip().lower() == recipe.name.strip().lower() for r in self._recipes.values()):
            raise ValueError(f"Recipe with name '{recipe.name}' already exists")
        self._recipes[recipe.recipe_id] = recipe
        self.save()
        return recipe

    def save(self) -> None:
        atomic_write_json(self.path, [r.to_dict() for r in self._recipes.values()])

    def __len__(self) -> int:
        return len(self._recipes)
