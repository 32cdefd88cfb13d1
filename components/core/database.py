"""Core classes for DB connections"""

import logging
from contextlib import contextmanager
from typing import Callable, ContextManager, Iterator, Optional, cast

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from components.core import config
from components.core.errors import StorageError

logger = logging.getLogger(__name__)

Base = declarative_base()
SessionMaker = Callable[[], ContextManager[Session]]


def _configure_sqlite_connection(dbapi_connection, connection_record) -> None:
    # SQLite ships with foreign key checks off for every new connection
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()
    # Built-in lower() only folds ASCII; searches fold with Python on both sides
    dbapi_connection.create_function(
        "py_lower", 1, lambda value: value.lower() if value is not None else None,
        deterministic=True,
    )


class DatabaseManager:
    def __init__(self, engine: Optional[Engine] = None) -> None:
        """Initialize DatabaseManager with optional engine for testing."""
        self.engine = engine or self._create_engine()
        if self.engine.dialect.name == "sqlite":
            event.listen(self.engine, "connect", _configure_sqlite_connection)
        self._session_factory = None

    @classmethod
    def from_url(cls, url: str, echo: bool = False, **engine_kwargs) -> "DatabaseManager":
        """Build a manager for an explicit database URL."""
        return cls(create_engine(url, echo=echo, **engine_kwargs))

    def _create_engine(self) -> Engine:
        """Create engine for the embedded database file."""
        settings = config.get_settings()
        return create_engine(
            settings.db_url,
            echo=settings.DB_ECHO,  # Set to True for SQL query logging
        )

    def get_session(self) -> SessionMaker:
        """Returns SessionMaker for database sessions."""
        if not self.engine:
            raise ValueError("Database engine wasn't initialized")

        if self._session_factory is None:
            self._session_factory = sessionmaker(
                self.engine,
                class_=Session,
                expire_on_commit=False,
                autocommit=False,
                autoflush=False,
            )
        return cast(SessionMaker, self._session_factory)

    @contextmanager
    def get_db(self) -> Iterator[Session]:
        """
        Get database session context manager.

        The session lives for a single operation. Anything SQLAlchemy raises
        inside the block is rolled back and re-raised as StorageError; the
        session is closed on every exit path.
        """
        session_factory = self.get_session()
        session = session_factory()
        try:
            yield session
        except (SQLAlchemyError, OverflowError) as exc:
            # sqlite3 raises OverflowError when binding an integer wider than 64 bits
            session.rollback()
            logger.error("Storage operation failed: %s", exc)
            raise StorageError(str(exc)) from exc
        finally:
            session.close()

    def dispose(self) -> None:
        """Release pooled connections."""
        self.engine.dispose()
