"""Database initialization."""

import logging

from sqlalchemy.exc import SQLAlchemyError

from components.core.database import Base, DatabaseManager
from components.core.errors import StorageError
# Import all models to ensure they're registered
import components.user.models
import components.student.models

logger = logging.getLogger(__name__)


def init_db(db_manager: DatabaseManager) -> None:
    """Create tables that are missing. Safe to call on every start."""
    try:
        Base.metadata.create_all(bind=db_manager.engine)
    except SQLAlchemyError as exc:
        logger.error("Failed to initialize database: %s", exc)
        raise StorageError("Failed to initialize database") from exc
    logger.info("Database tables ready at %s", db_manager.engine.url)
