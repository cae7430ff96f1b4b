"""Household meal plans backed by a JSON file: {household_id: [entry, ...]}."""
import logging
from datetime import date
from pathlib import Path
from typing import Dict, List, Optional
from uuid import uuid4

from grocer.domain.errors import EntryNotFoundError
from grocer.domain.MealPlanEntry import MealPlanEntry
from grocer.infra.paths import MEAL_PLAN_FILE
from grocer.infra.storage import atomic_write_json, read_json

logger = logging.getLogger(__name__)


class MealPlanRepository:
    def __init__(self, path: Optional[Path] = None):
        self.path = Path(path) if path else MEAL_PLAN_FILE

    def _load(self) -> Dict[str, List[dict]]:
        store = read_json(self.path, {})
        if not isinstance(store, dict):
            logger.error(f"Meal plan file {self.path} does not contain an object. Ignoring it.")
            return {}
        return store

    def _save(self, store: Dict[str, List[dict]]) -> None:
        atomic_write_json(self.path, store)

    def entries(self, household_id: str) -> List[MealPlanEntry]:
        result = []
        for raw in self._load().get(household_id, []):
            try:
                result.append(MealPlanEntry.from_dict(raw, household_id=household_id))
            except ValueError as e:
                logger.warning(f"Skipping malformed meal plan entry for {household_id}: {e}")
        return result

    def entries_between(self, household_id: str, start: date, end: date) -> List[MealPlanEntry]:
        """Entries of `household_id` whose date is within [start, end], ordered by date."""
        selected = [e for e in self.entries(household_id) if start <= e.date <= end]
        selected.sort(key=lambda e: e.date)
        return selected

    def add_entry(self, entry: MealPlanEntry) -> MealPlanEntry:
        if not entry.household_id:
            raise ValueError("Meal plan entry needs a household")
        if not entry.entry_id:
            entry.entry_id = uuid4().hex[:12]
        store = self._load()
        store.setdefault(entry.household_id, []).append(entry.to_dict())
        self._save(store)
        return entry

    def remove_entry(self, household_id: str, entry_id: str) -> bool:
        store = self._load()
        entries = store.get(household_id, [])
        kept = [e for e in entries if str(e.get("id")) != entry_id]
        if len(kept) == len(entries):
            return False
        store[household_id] = kept
        self._save(store)
        return True

    def update_servings(self, household_id: str, entry_id: str, servings: int) -> MealPlanEntry:
        store = self._load()
        for raw in store.get(household_id, []):
            if str(raw.get("id")) == entry_id:
                raw["servings"] = servings
                self._save(store)
                return MealPlanEntry.from_dict(raw, household_id=household_id)
        raise EntryNotFoundError(household_id, entry_id)
