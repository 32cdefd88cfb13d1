import pytest

from components.core.database import DatabaseManager
from components.core.init_db import init_db
from components.student.repository import StudentRepository
from components.user.repository import UserRepository


@pytest.fixture
def db_manager(tmp_path):
    """
    A fresh, initialized SQLite database file for EACH test function.
    """
    manager = DatabaseManager.from_url(f"sqlite:///{tmp_path / 'courses.db'}")
    init_db(manager)
    yield manager
    manager.dispose()


@pytest.fixture
def user_repo(db_manager):
    return UserRepository(db_manager)


@pytest.fixture
def student_repo(db_manager):
    return StudentRepository(db_manager)


@pytest.fixture
def owners(user_repo):
    """Two registered users; returns their ids as (owner_a, owner_b)."""
    user_repo.register("alice", "secret1")
    user_repo.register("bob", "secret2")
    return user_repo.lookup_user_id("alice").value, user_repo.lookup_user_id("bob").value
