"""Recipe schemas."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class RecipeIngredientResponse(BaseModel):
    """Ingredient within a recipe."""

    name: str
    quantity: Any = None


class RecipeResponse(BaseModel):
    """Full recipe document. The id is serialized as ``_id``."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., alias="_id")
    title: str | None = None
    description: str | None = None
    image_url: str | None = None
    steps: list[Any] = []
    ingredients: list[RecipeIngredientResponse] = []
