from pathlib import Path

from grocer.utilities.config import DATA_DIR

# Centralized paths for data files (single source of truth)
RECIPES_FILE: Path = DATA_DIR / 'recipes.json'
MEAL_PLAN_FILE: Path = DATA_DIR / 'meal_plans.json'

__all__ = ['DATA_DIR', 'RECIPES_FILE', 'MEAL_PLAN_FILE']
