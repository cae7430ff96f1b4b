"""
Input validation schemas using Pydantic for the grocer API.
"""
import datetime as dt
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from grocer.utilities.constants import MEAL_TYPES


class IngredientLineInput(BaseModel):
    """Schema for one recipe ingredient line."""
    name: str = Field(..., min_length=1, max_length=100)
    quantity: float = Field(..., ge=0, le=100000)
    unit: str = Field(default="", max_length=20)
    notes: str = Field(default="", max_length=200)

    @field_validator('name', 'unit', 'notes')
    @classmethod
    def strip_whitespace(cls, v):
        """Remove leading/trailing whitespace."""
        if isinstance(v, str):
            return v.strip()
        return v

    @field_validator('name')
    @classmethod
    def validate_name(cls, v):
        if not v:
            raise ValueError('Ingredient name cannot be empty')
        return v


class RecipeInput(BaseModel):
    """Schema for recipe input validation."""
    id: Optional[str] = Field(default=None, max_length=64)
    name: str = Field(..., min_length=3, max_length=100)
    base_servings: Optional[int] = Field(default=None, ge=1, le=50)
    ingredients: List[IngredientLineInput]
    tags: List[str] = Field(default_factory=list)
    meal_category: str = ""

    @field_validator('name')
    @classmethod
    def validate_name(cls, v):
        """Validate recipe name."""
        if not v.strip():
            raise ValueError('Recipe name cannot be empty')
        return v.strip()

    @field_validator('ingredients')
    @classmethod
    def validate_ingredients(cls, v):
        """Ensure recipe has at least one ingredient."""
        if not v:
            raise ValueError('Recipe must have at least one ingredient')
        return v

    @field_validator('tags')
    @classmethod
    def validate_tags(cls, v):
        return [tag.strip() for tag in v if tag and tag.strip()]


class MealPlanEntryInput(BaseModel):
    """Schema for assigning a recipe to a calendar slot."""
    household: str = Field(..., min_length=1, max_length=64)
    date: dt.date
    meal_type: str = Field(..., pattern=r'^(' + '|'.join(MEAL_TYPES) + r')$')
    recipe_id: str = Field(..., min_length=1)
    servings: int = Field(..., ge=1, le=100)
    notes: str = Field(default="", max_length=500)


class ServingsUpdateInput(BaseModel):
    servings: int = Field(..., ge=0, le=100)
