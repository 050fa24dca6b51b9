"""Recipe progress and profile endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from namcol.api.dependencies import get_progress_service
from namcol.schemas.progress import (
    CompleteProgressResponse,
    IngredientProgressResponse,
    IngredientUpdate,
    IngredientUpdateResponse,
    ProfileResponse,
    ProgressDetailResponse,
    ProgressHeaderResponse,
    StartProgressResponse,
)
from namcol.services.progress_service import ProgressService

router = APIRouter(tags=["progress"])

ProgressServiceDep = Annotated[ProgressService, Depends(get_progress_service)]


@router.get("/profile/{user_id}", response_model=ProfileResponse)
async def get_profile(user_id: int, service: ProgressServiceDep):
    """Get a user's completed and unfinished recipes."""
    profile = service.get_user_profile(user_id)
    return {
        "completed_recipes": [recipe.to_dict() for recipe in profile["completed_recipes"]],
        "unfinished_recipes": [recipe.to_dict() for recipe in profile["unfinished_recipes"]],
    }


@router.post(
    "/progress/{user_id}/{recipe_id}/start",
    response_model=StartProgressResponse,
    status_code=status.HTTP_201_CREATED,
)
async def start_progress(user_id: int, recipe_id: str, service: ProgressServiceDep):
    """Start or resume progress on a recipe."""
    result = service.start_progress(user_id, recipe_id)
    return {"message": "Progress started", **result}


@router.put("/progress/{user_id}/{recipe_id}/ingredient", response_model=IngredientUpdateResponse)
async def update_ingredient(
    user_id: int,
    recipe_id: str,
    update: IngredientUpdate,
    service: ProgressServiceDep,
):
    """Mark an ingredient as done or not done."""
    row = service.update_ingredient(user_id, recipe_id, update.ingredient_name, update.is_done)
    return {
        "message": "Ingredient updated",
        "ingredient": IngredientProgressResponse.model_validate(row),
    }


@router.get("/progress/{user_id}/{recipe_id}", response_model=ProgressDetailResponse)
async def get_progress(user_id: int, recipe_id: str, service: ProgressServiceDep):
    """Get the recipe merged with the user's ingredient progress."""
    return service.get_progress(user_id, recipe_id)


@router.put("/progress/{user_id}/{recipe_id}/complete", response_model=CompleteProgressResponse)
async def complete_progress(user_id: int, recipe_id: str, service: ProgressServiceDep):
    """Mark a recipe as completed."""
    header = service.complete_progress(user_id, recipe_id)
    return {
        "message": "Recipe marked as completed",
        "progress": ProgressHeaderResponse.model_validate(header),
    }
