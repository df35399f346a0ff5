"""Application services (use cases)."""

from vibrovolt.application.services.auth_session import AuthSession, check_credentials
from vibrovolt.application.services.charging_tracker import ChargingTracker
from vibrovolt.application.services.station_discovery_service import (
    DiscoveryResult,
    StationDiscoveryService,
    filter_stations,
)
from vibrovolt.application.services.wallet_ledger import WalletLedger

__all__ = [
    "AuthSession",
    "ChargingTracker",
    "DiscoveryResult",
    "StationDiscoveryService",
    "WalletLedger",
    "check_credentials",
    "filter_stations",
]
