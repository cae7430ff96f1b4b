from fastapi import APIRouter, Depends, HTTPException

from grocer.api.dependencies import get_recipe_repository
from grocer.domain.Recipe import Recipe
from grocer.infra.Recipe_Repository import RecipeRepository
from grocer.utilities.validators import RecipeInput

router = APIRouter(prefix="/api/recipes", tags=["recipes"])


@router.get("")
@router.get("/")
def list_recipes(recipes: RecipeRepository = Depends(get_recipe_repository)):
    items = [r.to_dict() for r in recipes.all()]
    return {"count": len(items), "recipes": items}


@router.get("/{recipe_id}")
def get_recipe(recipe_id: str, recipes: RecipeRepository = Depends(get_recipe_repository)):
    recipe = recipes.get(recipe_id)
    if recipe is None:
        raise HTTPException(status_code=404, detail=f"Recipe '{recipe_id}' not found")
    return recipe.to_dict()


@router.post("", status_code=201)
@router.post("/", status_code=201)
def add_recipe(payload: RecipeInput, recipes: RecipeRepository = Depends(get_recipe_repository)):
    recipe = Recipe.from_dict(payload.model_dump())
    try:
        recipes.add(recipe)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return recipe.to_dict()
