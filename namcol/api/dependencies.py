"""FastAPI dependencies for services and stores."""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.orm import Session

from namcol.database import get_db
from namcol.services.auth import AuthService, PasswordResetNotifier
from namcol.services.progress_service import ProgressService
from namcol.services.recipe_store import RecipeStore
from namcol.tasks.notifications import queue_password_reset_email


def get_password_reset_notifier() -> PasswordResetNotifier:
    """Get the gateway that delivers password reset emails."""
    return queue_password_reset_email


def get_recipe_store() -> RecipeStore:
    """Get recipe store instance."""
    return RecipeStore()


def get_auth_service(
    db: Annotated[Session, Depends(get_db)],
    notifier: Annotated[PasswordResetNotifier, Depends(get_password_reset_notifier)],
) -> AuthService:
    """Get auth service with dependencies."""
    return AuthService(db, notifier=notifier)


def get_progress_service(
    db: Annotated[Session, Depends(get_db)],
    recipe_store: Annotated[RecipeStore, Depends(get_recipe_store)],
) -> ProgressService:
    """Get progress service with dependencies."""
    return ProgressService(db, recipe_store)
