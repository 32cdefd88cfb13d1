from sqlalchemy import select

from components.core.errors import ErrorCode
from components.user.models import User


def test_register_then_validate(user_repo):
    result = user_repo.register("alice", "secret1")

    assert result.ok
    assert user_repo.validate("alice", "secret1") is True
    assert user_repo.validate("alice", "wrong") is False


def test_register_duplicate_username(user_repo):
    user_repo.register("alice", "secret1")

    result = user_repo.register("alice", "another")

    assert not result.ok
    assert result.error == ErrorCode.DUPLICATE_USERNAME
    # The original password still works, nothing was overwritten
    assert user_repo.validate("alice", "secret1") is True
    assert user_repo.validate("alice", "another") is False


def test_validate_unknown_user_is_false(user_repo):
    assert user_repo.validate("nobody", "secret1") is False


def test_password_is_stored_hashed(user_repo, db_manager):
    user_repo.register("alice", "secret1")

    with db_manager.get_db() as session:
        stored = session.execute(
            select(User.password).where(User.username == "alice")
        ).scalar_one()

    assert "secret1" not in stored
    assert ":" in stored


def test_same_password_different_hashes(user_repo, db_manager):
    user_repo.register("alice", "secret1")
    user_repo.register("bob", "secret1")

    with db_manager.get_db() as session:
        hashes = session.execute(select(User.password)).scalars().all()

    assert len(set(hashes)) == 2


def test_lookup_user_id(user_repo):
    user_repo.register("alice", "secret1")
    user_repo.register("bob", "secret2")

    alice = user_repo.lookup_user_id("alice")
    bob = user_repo.lookup_user_id("bob")

    assert alice.ok and bob.ok
    assert alice.value != bob.value


def test_lookup_unknown_user(user_repo):
    result = user_repo.lookup_user_id("nobody")

    assert result.error == ErrorCode.NOT_FOUND
    assert result.value is None


def test_authenticate(user_repo):
    user_repo.register("alice", "secret1")

    user = user_repo.authenticate("alice", "secret1")

    assert user is not None
    assert user.username == "alice"
    assert user.id == user_repo.lookup_user_id("alice").value
    assert user_repo.authenticate("alice", "wrong") is None
    assert user_repo.authenticate("nobody", "secret1") is None
