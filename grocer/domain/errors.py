"""Domain exceptions."""


class RecipeNotFoundError(LookupError):
    """Raised by a recipe lookup to signal an unknown recipe reference."""

    def __init__(self, reference):
        super().__init__(f"Recipe '{reference}' not found")
        self.reference = reference


class EntryNotFoundError(LookupError):
    def __init__(self, household_id, entry_id):
        super().__init__(f"Meal plan entry '{entry_id}' not found for household '{household_id}'")
        self.household_id = household_id
        self.entry_id = entry_id
