"""Recipe API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends

from namcol.api.dependencies import get_recipe_store
from namcol.schemas.recipe import RecipeResponse
from namcol.services.recipe_store import RecipeStore

router = APIRouter(tags=["recipes"])


@router.get("/recipes", response_model=list[RecipeResponse])
async def list_recipes(recipe_store: Annotated[RecipeStore, Depends(get_recipe_store)]):
    """List all recipes."""
    return [recipe.to_dict() for recipe in recipe_store.list_recipes()]
