"""Ports (interfaces) for the ports-and-adapters architecture."""

from vibrovolt.domain.ports.payment_gateway import PaymentGateway
from vibrovolt.domain.ports.station_repository import StationRepository
from vibrovolt.domain.ports.user_store import UserStore

__all__ = [
    "PaymentGateway",
    "StationRepository",
    "UserStore",
]
