"""Authentication service for password hashing and the reset-token lifecycle."""

import logging
import secrets
from collections.abc import Callable
from datetime import UTC, datetime, timedelta

from passlib.context import CryptContext
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from namcol.config import get_settings
from namcol.errors import (
    ConflictError,
    InvalidOrExpiredTokenError,
    UnauthorizedError,
    UserNotFoundError,
)
from namcol.models.password_reset_token import PasswordResetToken
from namcol.models.user import User

logger = logging.getLogger(__name__)
settings = get_settings()

# Password hashing context
pwd_context = CryptContext(
    schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=settings.bcrypt_rounds
)

# 32 random bytes, hex encoded
RESET_TOKEN_BYTES = 32

PasswordResetNotifier = Callable[[str, str], None]


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash."""
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    """Hash a password."""
    return pwd_context.hash(password)


def generate_reset_token() -> str:
    """Generate an unguessable password reset token."""
    return secrets.token_hex(RESET_TOKEN_BYTES)


class AuthService:
    """Service for user credentials and password resets."""

    def __init__(self, db: Session, notifier: PasswordResetNotifier | None = None):
        self.db = db
        self.notifier = notifier

    def get_user(self, user_id: int) -> User:
        user = self.db.query(User).filter(User.id == user_id).first()
        if not user:
            raise UserNotFoundError()
        return user

    def get_user_by_email(self, email: str) -> User | None:
        """Get a user by email."""
        return self.db.query(User).filter(User.email == email).first()

    def list_users(self) -> list[User]:
        return self.db.query(User).order_by(User.id).all()

    def register(self, name: str, email: str, password: str, country: str | None) -> User:
        """Create a new user.

        The existence check is advisory; the unique index on ``users.email``
        is what actually prevents duplicates under concurrent registrations.
        """
        if self.get_user_by_email(email):
            raise ConflictError()

        user = User(
            name=name,
            email=email,
            password_hash=get_password_hash(password),
            country=country,
        )
        self.db.add(user)
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            raise ConflictError() from None
        self.db.refresh(user)
        logger.info(f"Registered user {user.id}")
        return user

    def login(self, email: str, password: str) -> User:
        """Check credentials. No session or token is issued."""
        user = self.get_user_by_email(email)
        if not user:
            raise UserNotFoundError()
        if not verify_password(password, user.password_hash):
            raise UnauthorizedError()
        return user

    def change_password(self, user_id: int, new_password: str) -> User:
        user = self.get_user(user_id)
        user.password_hash = get_password_hash(new_password)
        self.db.commit()
        return user

    def delete_user(self, user_id: int) -> None:
        """Hard delete a user along with their reset tokens and progress."""
        user = self.get_user(user_id)
        self.db.delete(user)
        self.db.commit()
        logger.info(f"Deleted user {user_id}")

    def request_password_reset(self, email: str) -> PasswordResetToken:
        """Issue a reset token and hand it to the notifier.

        The token is committed before the notifier runs. A notifier failure
        is logged and leaves the token valid.
        """
        user = self.get_user_by_email(email)
        if not user:
            raise UserNotFoundError()

        # Only the most recent token stays redeemable
        self.db.query(PasswordResetToken).filter(PasswordResetToken.user_id == user.id).delete()

        reset_token = PasswordResetToken(
            token=generate_reset_token(),
            user_id=user.id,
            expires_at=datetime.now(UTC) + timedelta(minutes=settings.reset_token_expire_minutes),
        )
        self.db.add(reset_token)
        self.db.commit()
        self.db.refresh(reset_token)
        logger.info(f"Issued password reset token for user {user.id}")

        if self.notifier is not None:
            try:
                self.notifier(user.email, reset_token.token)
            except Exception:
                logger.exception(f"Failed to dispatch password reset email for user {user.id}")

        return reset_token

    def get_valid_reset_token(self, token: str) -> PasswordResetToken | None:
        """Return the token row if it exists and has not expired."""
        return (
            self.db.query(PasswordResetToken)
            .filter(
                PasswordResetToken.token == token,
                PasswordResetToken.expires_at > datetime.now(UTC),
            )
            .first()
        )

    def reset_password(self, token: str, new_password: str) -> User:
        """Redeem a reset token: set the new password and delete the token."""
        reset_token = self.get_valid_reset_token(token)
        if not reset_token:
            raise InvalidOrExpiredTokenError()

        user = reset_token.user
        user.password_hash = get_password_hash(new_password)
        self.db.delete(reset_token)
        self.db.commit()
        logger.info(f"Password reset for user {user.id}")
        return user

    def purge_expired_reset_tokens(self) -> int:
        """Delete every expired reset token. Returns the number removed."""
        deleted = (
            self.db.query(PasswordResetToken)
            .filter(PasswordResetToken.expires_at <= datetime.now(UTC))
            .delete()
        )
        self.db.commit()
        return deleted
