"""Per-session application context holding the state owners."""

from dataclasses import dataclass

from vibrovolt.application.services.auth_session import AuthSession
from vibrovolt.application.services.charging_tracker import ChargingTracker
from vibrovolt.application.services.station_discovery_service import StationDiscoveryService
from vibrovolt.application.services.wallet_ledger import WalletLedger
from vibrovolt.domain.ports.station_repository import StationRepository


@dataclass
class AppContext:
    """State owners of one application session, created once and passed to consumers."""

    station_repository: StationRepository
    discovery: StationDiscoveryService
    wallet: WalletLedger
    auth: AuthSession
    charging: ChargingTracker
