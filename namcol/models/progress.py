"""RecipeProgress and IngredientProgress models for tracking cooking progress."""

from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    ForeignKey,
    Integer,
    String,
    UniqueConstraint,
)
from sqlalchemy.orm import relationship

from namcol.database import Base
from namcol.models.enums import ProgressStatus
from namcol.models.mixins import TimestampMixin


class RecipeProgress(Base, TimestampMixin):
    """Progress header for one (user, recipe) pair.

    ``recipe_id`` references a document in the recipes collection; there is no
    foreign key across the two stores.
    """

    __tablename__ = "recipe_progress"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    recipe_id = Column(String(24), nullable=False, index=True)
    status = Column(String(20), nullable=False, default=ProgressStatus.IN_PROGRESS.value)
    completed_at = Column(DateTime(timezone=True), nullable=True)

    # Relationships
    user = relationship("User", back_populates="progress")
    ingredients = relationship(
        "IngredientProgress",
        back_populates="progress",
        cascade="all, delete-orphan",
        order_by="IngredientProgress.id",
    )

    __table_args__ = (UniqueConstraint("user_id", "recipe_id", name="uq_progress_user_recipe"),)


class IngredientProgress(Base, TimestampMixin):
    """Completion state of one ingredient within a progress header."""

    __tablename__ = "ingredient_progress"

    id = Column(Integer, primary_key=True, index=True)
    progress_id = Column(
        Integer, ForeignKey("recipe_progress.id", ondelete="CASCADE"), nullable=False, index=True
    )
    ingredient_name = Column(String(255), nullable=False)
    is_done = Column(Boolean, nullable=False, default=False)

    # Relationships
    progress = relationship("RecipeProgress", back_populates="ingredients")

    __table_args__ = (
        UniqueConstraint("progress_id", "ingredient_name", name="uq_ingredient_progress_name"),
    )
