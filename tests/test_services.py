import pytest

from components.core.errors import ErrorCode
from components.student.schemas import SearchQuery, StudentCreate, StudentUpdate
from components.student.service import StudentService
from components.user.schemas import UserCreate, UserLogin
from components.user.service import AuthService, UserSession


@pytest.fixture
def auth(user_repo):
    return AuthService(user_repo)


def register(auth, username, password):
    return auth.register(
        UserCreate(username=username, password=password, confirm_password=password)
    )


def test_register_and_login(auth, user_repo):
    assert register(auth, "alice", "secret1").ok

    session = auth.login(UserLogin(username="alice", password="secret1"))

    assert session == UserSession(
        user_id=user_repo.lookup_user_id("alice").value, username="alice"
    )


def test_login_with_wrong_password(auth):
    register(auth, "alice", "secret1")

    assert auth.login(UserLogin(username="alice", password="wrong")) is None
    assert auth.login(UserLogin(username="nobody", password="secret1")) is None


def test_register_twice(auth):
    register(auth, "alice", "secret1")

    assert register(auth, "alice", "other1").error == ErrorCode.DUPLICATE_USERNAME


def test_session_is_immutable(auth):
    register(auth, "alice", "secret1")
    session = auth.login(UserLogin(username="alice", password="secret1"))

    with pytest.raises(Exception):
        session.user_id = 42


def test_student_service_scopes_to_session(auth, student_repo):
    register(auth, "alice", "secret1")
    register(auth, "bob", "secret2")
    alice = StudentService(student_repo, auth.login(UserLogin(username="alice", password="secret1")))
    bob = StudentService(student_repo, auth.login(UserLogin(username="bob", password="secret2")))

    assert alice.add(StudentCreate(student_id=1001, name="Jon", surname="Doe")).ok
    assert bob.add(StudentCreate(student_id=1001, name="Ann", surname="Lee")).ok

    assert alice.update(StudentUpdate(student_id=1001, name="Jon", surname="Smith")) == 1
    assert [s.surname for s in alice.list_all()] == ["Smith"]
    assert [s.surname for s in bob.list_all()] == ["Lee"]

    assert bob.delete(1001) == 1
    assert bob.list_all() == []
    assert len(alice.list_all()) == 1


def test_student_service_search(auth, student_repo):
    register(auth, "alice", "secret1")
    service = StudentService(student_repo, auth.login(UserLogin(username="alice", password="secret1")))
    service.add(StudentCreate(student_id=2, name="Jane", surname="Smith"))
    service.add(StudentCreate(student_id=1, name="Jon", surname="Doe"))

    assert [s.student_id for s in service.search(SearchQuery(text="SMI"))] == [2]
    # Blank text shows everything
    assert [s.student_id for s in service.search(SearchQuery(text="  "))] == [1, 2]
