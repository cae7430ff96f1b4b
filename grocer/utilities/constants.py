from typing import Final

DATE_FORMAT: Final[str] = "%Y-%m-%d"
DISPLAY_DATE_FORMAT: Final[str] = "%b %d"

# Ordering used to make aggregation independent of input order
MEAL_TYPES: Final[tuple[str, ...]] = ("breakfast", "lunch", "dinner", "snack")

# Scaled quantities are rounded per ingredient line before merging
QUANTITY_DECIMALS: Final[int] = 1
# Display rounding (checklist / PDF)
DISPLAY_DECIMALS: Final[int] = 2

# Allowed drift between an item total and the sum of its contributions
SUM_TOLERANCE: Final[float] = 0.05

WARNING_UNRESOLVED_RECIPE: Final[str] = "unresolved_recipe"
WARNING_INVALID_RECIPE_SERVINGS: Final[str] = "invalid_recipe_servings"
WARNING_NEGATIVE_CONTRIBUTION: Final[str] = "negative_contribution"
