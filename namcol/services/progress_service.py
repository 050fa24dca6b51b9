"""Progress reconciliation between relational progress rows and recipe content."""

import logging
from datetime import UTC, datetime

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from namcol.errors import (
    IngredientNotFoundError,
    NoProgressError,
    RecipeNotFoundError,
    UserNotFoundError,
)
from namcol.models.enums import ProgressStatus
from namcol.models.progress import IngredientProgress, RecipeProgress
from namcol.models.recipe import Recipe
from namcol.models.user import User
from namcol.services.recipe_store import RecipeStore

logger = logging.getLogger(__name__)


def merge_ingredients(recipe: Recipe, rows: list[IngredientProgress]) -> list[dict]:
    """Annotate the recipe's current ingredient list with completion state.

    Ingredients without a progress row (added to the recipe after progress
    started) default to not done. Rows for ingredients no longer in the recipe
    are ignored.
    """
    done_by_name = {row.ingredient_name: row.is_done for row in rows}
    return [
        {
            "name": ingredient.name,
            "quantity": ingredient.quantity,
            "is_done": done_by_name.get(ingredient.name, False),
        }
        for ingredient in recipe.ingredients
    ]


class ProgressService:
    """Service for per-user recipe progress."""

    def __init__(self, db: Session, recipe_store: RecipeStore):
        self.db = db
        self.recipe_store = recipe_store

    def _get_header(self, user_id: int, recipe_id: str) -> RecipeProgress | None:
        return (
            self.db.query(RecipeProgress)
            .filter(RecipeProgress.user_id == user_id, RecipeProgress.recipe_id == recipe_id)
            .first()
        )

    def _require_header(self, user_id: int, recipe_id: str) -> RecipeProgress:
        header = self._get_header(user_id, recipe_id)
        if not header:
            raise NoProgressError()
        return header

    def _get_or_create_header(self, user_id: int, recipe_id: str) -> tuple[RecipeProgress, bool]:
        """Return the (user, recipe) header, creating it if absent.

        A concurrent start that wins the insert race trips the unique
        constraint; in that case the winner's row is reused.
        """
        header = self._get_header(user_id, recipe_id)
        if header:
            return header, False

        header = RecipeProgress(
            user_id=user_id,
            recipe_id=recipe_id,
            status=ProgressStatus.IN_PROGRESS.value,
        )
        self.db.add(header)
        try:
            self.db.flush()
        except IntegrityError:
            self.db.rollback()
            logger.warning(f"Concurrent progress start for user {user_id}, recipe {recipe_id}")
            return self._require_header(user_id, recipe_id), False
        return header, True

    def _ingredient_names(self, header: RecipeProgress) -> set[str]:
        return {row.ingredient_name for row in header.ingredients}

    def start_progress(self, user_id: int, recipe_id: str, *, _retry: bool = True) -> dict:
        """Start (or resume) progress on a recipe.

        Missing ingredient rows are inserted as not done; existing rows keep
        their state so repeated starts never lose progress. If a concurrent
        start inserts the same rows first, the reconcile runs once more
        against the committed state.
        """
        if not self.db.query(User.id).filter(User.id == user_id).first():
            raise UserNotFoundError()

        header, created = self._get_or_create_header(user_id, recipe_id)

        recipe = self.recipe_store.get_recipe(recipe_id)
        if not recipe:
            if created:
                self.db.rollback()
            raise RecipeNotFoundError()

        existing = self._ingredient_names(header)
        for name in recipe.ingredient_names:
            if name in existing:
                continue
            header.ingredients.append(IngredientProgress(ingredient_name=name, is_done=False))
            existing.add(name)

        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            if not _retry:
                raise
            logger.warning(f"Concurrent ingredient insert for user {user_id}, recipe {recipe_id}")
            return self.start_progress(user_id, recipe_id, _retry=False)
        self.db.refresh(header)

        return {
            "progress_id": header.id,
            "ingredients": merge_ingredients(recipe, header.ingredients),
        }

    def update_ingredient(
        self, user_id: int, recipe_id: str, ingredient_name: str, is_done: bool
    ) -> IngredientProgress:
        header = self._require_header(user_id, recipe_id)

        row = (
            self.db.query(IngredientProgress)
            .filter(
                IngredientProgress.progress_id == header.id,
                IngredientProgress.ingredient_name == ingredient_name,
            )
            .first()
        )
        if not row:
            raise IngredientNotFoundError(ingredient_name)

        row.is_done = is_done
        self.db.commit()
        self.db.refresh(row)
        return row

    def get_progress(self, user_id: int, recipe_id: str) -> dict:
        """Merged view of recipe content and the user's ingredient progress."""
        header = self._require_header(user_id, recipe_id)

        recipe = self.recipe_store.get_recipe(recipe_id)
        if not recipe:
            raise RecipeNotFoundError()

        return {
            "_id": str(recipe.id),
            "title": recipe.title,
            "description": recipe.description,
            "image_url": recipe.image_url,
            "steps": list(recipe.steps),
            "status": header.status,
            "completed_at": header.completed_at,
            "ingredients": merge_ingredients(recipe, header.ingredients),
        }

    def complete_progress(self, user_id: int, recipe_id: str) -> RecipeProgress:
        """Mark a recipe as completed. Ingredient state is not checked."""
        header = self._require_header(user_id, recipe_id)
        header.status = ProgressStatus.COMPLETED.value
        header.completed_at = datetime.now(UTC)
        self.db.commit()
        self.db.refresh(header)
        return header

    def get_user_profile(self, user_id: int) -> dict:
        """Completed and unfinished recipes for a user, as full documents."""
        headers = self.db.query(RecipeProgress).filter(RecipeProgress.user_id == user_id).all()
        if not headers:
            return {"completed_recipes": [], "unfinished_recipes": []}

        completed_ids = []
        unfinished_ids = []
        for header in headers:
            if ProgressStatus(header.status).is_completed:
                completed_ids.append(header.recipe_id)
            else:
                unfinished_ids.append(header.recipe_id)

        return {
            "completed_recipes": self.recipe_store.get_recipes(completed_ids),
            "unfinished_recipes": self.recipe_store.get_recipes(unfinished_ids),
        }
