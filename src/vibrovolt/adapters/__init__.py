"""Adapters layer - external system integrations."""

from vibrovolt.adapters.config import AppConfig
from vibrovolt.adapters.sample_data import (
    PlaceholderTelemetry,
    SamplePaymentGateway,
    SampleStationRepository,
)
from vibrovolt.adapters.storage import InMemoryUserStore, JsonFileUserStore

__all__ = [
    "AppConfig",
    "InMemoryUserStore",
    "JsonFileUserStore",
    "PlaceholderTelemetry",
    "SamplePaymentGateway",
    "SampleStationRepository",
]
