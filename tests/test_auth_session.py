"""Tests for the auth session."""

import json

import pytest

from vibrovolt.adapters.storage import InMemoryUserStore
from vibrovolt.application.services import AuthSession, check_credentials
from vibrovolt.application.services.auth_session import (
    DEMO_EMAIL,
    DEMO_PASSWORD,
    DEMO_USER,
    USER_KEY,
)
from vibrovolt.domain.errors import InvalidCredentialsError


def test_check_credentials_accepts_demo_account() -> None:
    """Given the demo credentials, when checking, then the demo user is returned."""
    user = check_credentials(DEMO_EMAIL, DEMO_PASSWORD)

    assert user == DEMO_USER
    assert user.name == "Demo User"


@pytest.mark.parametrize(
    ("email", "password"),
    [("demo@vibrovolt.com", "wrong1"), ("other@example.com", "demo123")],
)
def test_check_credentials_rejects_other_pairs(email: str, password: str) -> None:
    """Given unknown credentials, when checking, then InvalidCredentialsError is raised."""
    with pytest.raises(InvalidCredentialsError, match="Invalid credentials"):
        check_credentials(email, password)


def test_login_persists_user() -> None:
    """Given a new session, when logging in, then the user is stored as JSON."""
    store = InMemoryUserStore()
    session = AuthSession(store)

    session.login(DEMO_EMAIL, DEMO_PASSWORD)

    assert session.is_authenticated
    stored = json.loads(store.get_item(USER_KEY) or "")
    assert stored["email"] == DEMO_EMAIL


def test_failed_login_keeps_session_signed_out() -> None:
    """Given wrong credentials, when logging in, then nothing is stored."""
    store = InMemoryUserStore()
    session = AuthSession(store)

    with pytest.raises(InvalidCredentialsError):
        session.login(DEMO_EMAIL, "nope123")

    assert not session.is_authenticated
    assert store.get_item(USER_KEY) is None


def test_load_restores_previous_user() -> None:
    """Given a stored user, when a new session loads, then it is signed in."""
    store = InMemoryUserStore()
    AuthSession(store).login(DEMO_EMAIL, DEMO_PASSWORD)

    restored = AuthSession(store)
    user = restored.load()

    assert user == DEMO_USER
    assert restored.user == DEMO_USER


def test_load_ignores_corrupt_stored_user() -> None:
    """Given an unparseable stored user, when loading, then the session stays signed out."""
    store = InMemoryUserStore()
    store.set_item(USER_KEY, "{not json")
    session = AuthSession(store)

    assert session.load() is None
    assert not session.is_authenticated


def test_load_ignores_stored_user_with_missing_fields() -> None:
    """Given a stored user missing fields, when loading, then the session stays signed out."""
    store = InMemoryUserStore()
    store.set_item(USER_KEY, json.dumps({"id": "1"}))

    assert AuthSession(store).load() is None


def test_logout_clears_store() -> None:
    """Given a signed-in session, when logging out, then the stored user is removed."""
    store = InMemoryUserStore()
    session = AuthSession(store)
    session.login(DEMO_EMAIL, DEMO_PASSWORD)

    session.logout()

    assert session.user is None
    assert store.get_item(USER_KEY) is None


def test_update_user_merges_and_persists() -> None:
    """Given a signed-in session, when updating the name, then other fields are kept and stored."""
    store = InMemoryUserStore()
    session = AuthSession(store)
    session.login(DEMO_EMAIL, DEMO_PASSWORD)

    updated = session.update_user(name="Asha Rao")

    assert updated is not None
    assert updated.name == "Asha Rao"
    assert updated.email == DEMO_EMAIL
    assert json.loads(store.get_item(USER_KEY) or "")["name"] == "Asha Rao"


def test_update_user_when_signed_out_does_nothing() -> None:
    """Given no signed-in user, when updating, then None is returned and nothing is stored."""
    store = InMemoryUserStore()
    session = AuthSession(store)

    assert session.update_user(name="Someone") is None
    assert store.get_item(USER_KEY) is None


def test_update_user_rejects_unknown_fields() -> None:
    """Given an unknown field, when updating, then ValueError is raised."""
    session = AuthSession(InMemoryUserStore())
    session.login(DEMO_EMAIL, DEMO_PASSWORD)

    with pytest.raises(ValueError, match="Unknown user fields"):
        session.update_user(id="2")
