"""Composition root: builds the application context from configuration."""

import logging
import random
import sys

from vibrovolt.adapters.config import AppConfig, PartnerConfigurationLoader
from vibrovolt.adapters.sample_data import (
    PlaceholderTelemetry,
    SamplePaymentGateway,
    SampleStationRepository,
)
from vibrovolt.adapters.sample_data.charging import CHARGING_HISTORY, UPCOMING_BOOKINGS
from vibrovolt.adapters.sample_data.wallet import CARDS, TRANSACTIONS
from vibrovolt.adapters.storage import InMemoryUserStore
from vibrovolt.application.context import AppContext
from vibrovolt.application.services import (
    AuthSession,
    ChargingTracker,
    StationDiscoveryService,
    WalletLedger,
)
from vibrovolt.domain.ports import PaymentGateway, StationRepository, UserStore


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging for the entry points."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def build_telemetry(config: AppConfig) -> PlaceholderTelemetry:
    """Create the placeholder generator, seeded when the config asks for it."""
    return PlaceholderTelemetry(
        rng=random.Random(config.random_seed),
        booking_failure_rate=config.booking_failure_rate,
        payment_failure_rate=config.payment_failure_rate,
    )


def build_context(
    config: AppConfig,
    *,
    station_repository: StationRepository | None = None,
    payment_gateway: PaymentGateway | None = None,
    user_store: UserStore | None = None,
    telemetry: PlaceholderTelemetry | None = None,
) -> AppContext:
    """Create the state owners of one app session.

    Collaborators default to the sample implementations, so the context works
    without a backend.
    """
    telemetry = telemetry or build_telemetry(config)
    station_repository = station_repository or SampleStationRepository()
    payment_gateway = payment_gateway or SamplePaymentGateway(telemetry)
    user_store = user_store or InMemoryUserStore()

    seed = PartnerConfigurationLoader.load(config)
    wallet = WalletLedger(
        payment_gateway,
        balance=seed.balance,
        carbon_credits=seed.carbon_credits,
        transactions=TRANSACTIONS,
        cards=CARDS,
        partners=seed.partners,
    )
    auth = AuthSession(user_store)
    auth.load()

    return AppContext(
        station_repository=station_repository,
        discovery=StationDiscoveryService(station_repository),
        wallet=wallet,
        auth=auth,
        charging=ChargingTracker(UPCOMING_BOOKINGS, CHARGING_HISTORY),
    )
