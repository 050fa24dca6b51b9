"""SQLAlchemy models and the recipe document."""

from namcol.models.password_reset_token import PasswordResetToken
from namcol.models.progress import IngredientProgress, RecipeProgress
from namcol.models.recipe import Recipe, RecipeIngredient
from namcol.models.user import User

__all__ = [
    "User",
    "PasswordResetToken",
    "RecipeProgress",
    "IngredientProgress",
    "Recipe",
    "RecipeIngredient",
]
