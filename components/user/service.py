"""Login and registration flow."""

import logging
from typing import Optional

from pydantic import BaseModel, ConfigDict

from components.core.schemas import Result
from components.user import schemas
from components.user.repository import UserRepository

logger = logging.getLogger(__name__)


class UserSession(BaseModel):
    """Authenticated user, obtained once at login and passed explicitly."""
    model_config = ConfigDict(frozen=True)

    user_id: int
    username: str


class AuthService:
    """Turns validated forms into credential store calls."""

    def __init__(self, users: UserRepository):
        self.users = users

    def register(self, form: schemas.UserCreate) -> Result[None]:
        return self.users.register(form.username, form.password)

    def login(self, form: schemas.UserLogin) -> Optional[UserSession]:
        """Return a session for valid credentials, None otherwise."""
        user = self.users.authenticate(form.username, form.password)
        if user is None:
            logger.info("Failed login for %r", form.username)
            return None
        logger.info("User %r logged in", user.username)
        return UserSession(user_id=user.id, username=user.username)
