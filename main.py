"""Main entry point: prepare the database and the services a front end drives."""

import logging
from typing import NamedTuple, Optional

from components.core import config
from components.core.database import DatabaseManager
from components.core.init_db import init_db
from components.student.repository import StudentRepository
from components.user.repository import UserRepository
from components.user.service import AuthService

logger = logging.getLogger(__name__)


class Application(NamedTuple):
    """Everything an interactive front end needs after startup."""
    db_manager: DatabaseManager
    users: UserRepository
    students: StudentRepository
    auth: AuthService


def configure_logging(level: Optional[str] = None) -> None:
    """Configure root logging from settings."""
    settings = config.get_settings()
    logging.basicConfig(
        level=(level or settings.LOG_LEVEL).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def bootstrap(db_manager: Optional[DatabaseManager] = None) -> Application:
    """Initialize tables and build the stores on top of one database."""
    db_manager = db_manager or DatabaseManager()
    init_db(db_manager)
    users = UserRepository(db_manager)
    students = StudentRepository(db_manager)
    return Application(
        db_manager=db_manager,
        users=users,
        students=students,
        auth=AuthService(users),
    )


if __name__ == "__main__":
    configure_logging()
    app = bootstrap()
    logger.info("Student records database initialized")
    app.db_manager.dispose()
