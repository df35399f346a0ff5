"""Auth session: the signed-in user and its persistence."""

import json
import logging
from dataclasses import asdict, replace

from vibrovolt.domain.errors import InvalidCredentialsError
from vibrovolt.domain.models.user import User
from vibrovolt.domain.ports.user_store import UserStore

logger = logging.getLogger(__name__)

USER_KEY = "user"

DEMO_EMAIL = "demo@vibrovolt.com"
DEMO_PASSWORD = "demo123"
DEMO_USER = User(id="1", name="Demo User", email=DEMO_EMAIL, phone="+91 98765 43210")


def check_credentials(email: str, password: str) -> User:
    """Return the user for a known credential pair.

    Raises:
        InvalidCredentialsError: For any pair other than the demo account.
    """
    if email == DEMO_EMAIL and password == DEMO_PASSWORD:
        return DEMO_USER
    raise InvalidCredentialsError("Invalid credentials")


class AuthSession:
    """Holds the current user and mirrors it into a user store."""

    def __init__(self, user_store: UserStore) -> None:
        self._user_store = user_store
        self._user: User | None = None

    @property
    def user(self) -> User | None:
        return self._user

    @property
    def is_authenticated(self) -> bool:
        return self._user is not None

    def load(self) -> User | None:
        """Restore the user saved by a previous run, if any."""
        raw = self._user_store.get_item(USER_KEY)
        if raw is None:
            return None
        try:
            self._user = User(**json.loads(raw))
        except (ValueError, TypeError) as e:
            logger.error(f"Failed to load user: {e}")
            self._user = None
        return self._user

    def _persist(self) -> None:
        if self._user is None:
            self._user_store.remove_item(USER_KEY)
        else:
            self._user_store.set_item(USER_KEY, json.dumps(asdict(self._user)))

    def login(self, email: str, password: str) -> User:
        """Sign in and persist the user.

        Raises:
            InvalidCredentialsError: If the credentials are not recognised.
        """
        self._user = check_credentials(email, password)
        self._persist()
        logger.info(f"User {self._user.id} signed in")
        return self._user

    def logout(self) -> None:
        self._user = None
        self._persist()

    def update_user(self, **changes: str) -> User | None:
        """Merge profile changes into the current user. Does nothing when signed out."""
        if self._user is None:
            return None
        unknown = set(changes) - {"name", "email", "phone"}
        if unknown:
            raise ValueError(f"Unknown user fields: {sorted(unknown)}")
        self._user = replace(self._user, **changes)
        self._persist()
        return self._user
