"""Enums for model fields."""

from enum import Enum


class ProgressStatus(str, Enum):
    """Lifecycle of a user's progress on one recipe."""

    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"

    @property
    def is_completed(self) -> bool:
        return self == ProgressStatus.COMPLETED
