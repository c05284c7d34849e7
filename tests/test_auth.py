from __future__ import annotations

import pytest

from scholarhub.errors import (
    AlreadyExistsError,
    AuthenticationRequiredError,
    FormValidationError,
    InvalidCredentialsError,
    PermissionDeniedError,
)
from scholarhub.models.schemas import User
from scholarhub.services.auth import (
    ANONYMOUS,
    AuthGate,
    Session,
    SessionRegistry,
    deserialize_user,
    require_role,
    serialize_user,
)


def test_login_with_seeded_student() -> None:
    session = AuthGate().login("student@example.com", "password")

    assert session.is_authenticated
    assert session.user.role == "student"
    assert session.user.email == "student@example.com"


def test_login_with_wrong_password_fails() -> None:
    with pytest.raises(InvalidCredentialsError):
        AuthGate().login("student@example.com", "wrong")


def test_login_with_unknown_email_fails() -> None:
    with pytest.raises(InvalidCredentialsError):
        AuthGate().login("nobody@example.com", "password")


def test_signup_with_seeded_email_fails() -> None:
    with pytest.raises(AlreadyExistsError):
        AuthGate().signup("student@example.com", "x")


def test_signup_creates_student_that_can_log_in() -> None:
    gate = AuthGate()

    created = gate.signup("new@example.com", "s3cret")
    again = gate.login("new@example.com", "s3cret")

    assert created.user.role == "student"
    assert created.user.id.startswith("user-")
    assert again.user == created.user


def test_signup_ids_are_unique() -> None:
    gate = AuthGate()

    first = gate.signup("a@example.com", "pw")
    second = gate.signup("b@example.com", "pw")

    assert first.user.id != second.user.id


def test_google_login_is_deterministic() -> None:
    gate = AuthGate()

    assert gate.login_with_google().user == gate.login_with_google().user
    assert gate.login_with_google().user.email == "student@example.com"


def test_logout_is_idempotent() -> None:
    gate = AuthGate()
    session = gate.login("admin@example.com", "password")

    after = gate.logout(session)

    assert not after.is_authenticated
    assert gate.logout(after) == ANONYMOUS


def test_require_role_gates_admin_operations() -> None:
    gate = AuthGate()
    admin = gate.login("admin@example.com", "password")
    student = gate.login("student@example.com", "password")

    assert require_role(admin, "admin").role == "admin"
    with pytest.raises(PermissionDeniedError):
        require_role(student, "admin")
    with pytest.raises(AuthenticationRequiredError):
        require_role(Session(), "admin")


def test_session_registry_tokens() -> None:
    registry = SessionRegistry()
    user = User(id="1", email="student@example.com", role="student")

    opened = registry.open(Session(user=user))

    assert opened.token
    assert registry.get(opened.token).user == user
    assert registry.get("unknown") == ANONYMOUS
    assert registry.get(None) == ANONYMOUS

    registry.close(opened.token)
    registry.close(opened.token)
    assert registry.get(opened.token) == ANONYMOUS


def test_new_session_for_same_user_closes_the_previous_token() -> None:
    registry = SessionRegistry()
    user = User(id="1", email="student@example.com", role="student")

    first = registry.open(Session(user=user))
    second = registry.open(Session(user=user))

    assert registry.get(first.token) == ANONYMOUS
    assert registry.get(second.token).user == user
    assert len(registry) == 1

    registry.close(first.token)
    assert registry.get(second.token).user == user
    registry.close(second.token)
    assert len(registry) == 0


def test_registry_size_is_bounded_by_users() -> None:
    registry = SessionRegistry()
    users = [User(id=str(n), email=f"user{n}@example.com") for n in range(3)]

    for _ in range(50):
        for user in users:
            registry.open(Session(user=user))

    assert len(registry) == len(users)


def test_registry_refuses_anonymous_sessions() -> None:
    with pytest.raises(AuthenticationRequiredError):
        SessionRegistry().open(ANONYMOUS)


def test_user_serialization_round_trip() -> None:
    user = User(id="2", email="admin@example.com", role="admin")

    data = serialize_user(user)

    assert isinstance(data, bytes)
    assert deserialize_user(data) == user


@pytest.mark.parametrize(
    "data",
    [b"not json", b"[]", b'{"id": "1", "email": "x@example.com", "role": "owner"}', b"\xff\xfe"],
)
def test_deserialize_rejects_malformed_input(data: bytes) -> None:
    with pytest.raises(FormValidationError):
        deserialize_user(data)
