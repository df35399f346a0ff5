"""Local persistence adapters."""

from vibrovolt.adapters.storage.user_store import InMemoryUserStore, JsonFileUserStore

__all__ = ["InMemoryUserStore", "JsonFileUserStore"]
