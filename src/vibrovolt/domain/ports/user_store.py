"""User store port."""

from typing import Protocol


class UserStore(Protocol):
    """Port for the key-value storage that keeps the signed-in user between runs."""

    def get_item(self, key: str) -> str | None:
        """Return the stored value for ``key`` or None."""
        ...

    def set_item(self, key: str, value: str) -> None:
        """Store ``value`` under ``key``."""
        ...

    def remove_item(self, key: str) -> None:
        """Remove ``key`` if present."""
        ...
