"""User model."""

from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship

from namcol.database import Base
from namcol.models.mixins import TimestampMixin


class User(Base, TimestampMixin):
    """User model for authentication and progress ownership."""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    country = Column(String(100), nullable=True)

    # Relationships
    reset_tokens = relationship(
        "PasswordResetToken", back_populates="user", cascade="all, delete-orphan"
    )
    progress = relationship("RecipeProgress", back_populates="user", cascade="all, delete-orphan")
