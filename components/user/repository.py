"""Repository for user operations."""

import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError

from components.core.database import DatabaseManager
from components.core.errors import ErrorCode, is_unique_violation
from components.core.schemas import Result
from components.core.security import get_password_hash, verify_password
from components.user.models import User
from components.user import schemas

logger = logging.getLogger(__name__)


class UserRepository:
    """Repository for user operations."""

    def __init__(self, db_manager: DatabaseManager):
        """Initialize repository with database manager."""
        self.db = db_manager

    def register(self, username: str, password: str) -> Result[None]:
        """
        Create a new user with a hashed password.

        Duplicate usernames are caught by the unique constraint on insert,
        so two concurrent registrations cannot both succeed.
        """
        db_user = User(
            username=username,
            password=get_password_hash(password),
        )
        with self.db.get_db() as session:
            session.add(db_user)
            try:
                session.commit()
            except IntegrityError as exc:
                if not is_unique_violation(exc):
                    raise
                session.rollback()
                logger.info("Registration rejected, username %r is taken", username)
                return Result(error=ErrorCode.DUPLICATE_USERNAME)
        logger.info("Registered user %r with id %s", username, db_user.id)
        return Result()

    def validate(self, username: str, password: str) -> bool:
        """Check a username/password pair. Unknown users are just invalid."""
        return self.authenticate(username, password) is not None

    def lookup_user_id(self, username: str) -> Result[int]:
        """Get user ID by username."""
        with self.db.get_db() as session:
            user_id = session.execute(
                select(User.id).where(User.username == username)
            ).scalar_one_or_none()
        if user_id is None:
            return Result(error=ErrorCode.NOT_FOUND)
        return Result(value=user_id)

    def authenticate(self, username: str, password: str) -> Optional[schemas.User]:
        """
        Get the user for a valid username/password pair in one session.

        Returns None for an unknown username and for a wrong password alike.
        """
        with self.db.get_db() as session:
            db_user = session.execute(
                select(User).where(User.username == username)
            ).scalar_one_or_none()
        if db_user is None or not verify_password(password, db_user.password):
            return None
        return schemas.User.model_validate(db_user)
