"""User domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class User:
    """The signed-in app user."""

    id: str
    name: str
    email: str
    phone: str
