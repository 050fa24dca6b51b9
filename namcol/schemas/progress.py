"""Recipe progress schemas."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from namcol.models.enums import ProgressStatus
from namcol.schemas.recipe import RecipeResponse


class IngredientUpdate(BaseModel):
    """Toggle request for one ingredient."""

    ingredient_name: str = Field(..., min_length=1, max_length=255)
    is_done: bool


class IngredientProgressResponse(BaseModel):
    """Stored completion row."""

    model_config = ConfigDict(from_attributes=True)

    ingredient_name: str
    is_done: bool


class IngredientState(BaseModel):
    """Recipe ingredient annotated with completion state."""

    name: str
    quantity: Any = None
    is_done: bool


class ProgressHeaderResponse(BaseModel):
    """Progress header for one (user, recipe) pair."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    recipe_id: str
    status: ProgressStatus
    completed_at: datetime | None


class StartProgressResponse(BaseModel):
    message: str
    progress_id: int = Field(..., serialization_alias="progressId")
    ingredients: list[IngredientState]


class IngredientUpdateResponse(BaseModel):
    message: str
    ingredient: IngredientProgressResponse


class CompleteProgressResponse(BaseModel):
    message: str
    progress: ProgressHeaderResponse


class ProgressDetailResponse(BaseModel):
    """Recipe display fields merged with the user's progress."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., alias="_id")
    title: str | None = None
    description: str | None = None
    image_url: str | None = None
    steps: list[Any] = []
    status: ProgressStatus
    completed_at: datetime | None = None
    ingredients: list[IngredientState]


class ProfileResponse(BaseModel):
    """Completed and unfinished recipes for a user."""

    completed_recipes: list[RecipeResponse] = Field(..., serialization_alias="completedRecipes")
    unfinished_recipes: list[RecipeResponse] = Field(
        ..., serialization_alias="unfinishedRecipes"
    )
