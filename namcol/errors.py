"""Domain errors raised by the service layer.

Each error carries the HTTP status it maps to; the API layer turns them into
``{"detail": message}`` responses.
"""

from fastapi import status


class NamColError(Exception):
    """Base class for expected, client-visible failures."""

    status_code: int = status.HTTP_400_BAD_REQUEST
    default_message: str = "Request failed"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ConflictError(NamColError):
    status_code = status.HTTP_409_CONFLICT
    default_message = "Email already registered"


class NotFoundError(NamColError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"


class UserNotFoundError(NotFoundError):
    default_message = "User not found"


class NoProgressError(NotFoundError):
    default_message = "No progress found for this recipe"


class RecipeNotFoundError(NotFoundError):
    default_message = "Recipe not found"


class IngredientNotFoundError(NotFoundError):
    def __init__(self, ingredient_name: str):
        super().__init__(f"Ingredient not found: {ingredient_name}")
        self.ingredient_name = ingredient_name


class UnauthorizedError(NamColError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Incorrect password"


class InvalidOrExpiredTokenError(NamColError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid or expired reset token"
