"""Placeholder generators standing in for real station and charger telemetry.

Every random value the mock backend returns comes from here, so a real device feed
can replace this class without touching the procedures that use it.
"""

import logging
import random
import time
from datetime import UTC, datetime
from typing import Any

from vibrovolt.domain.errors import PaymentFailedError, SlotUnavailableError

logger = logging.getLogger(__name__)

STATION_CONNECTORS = 6
EMERGENCY_CONTACT_NUMBER = "+91 98765 43210"


class PlaceholderTelemetry:
    """Random data source for the mock backend."""

    def __init__(
        self,
        rng: random.Random | None = None,
        booking_failure_rate: float = 0.2,
        payment_failure_rate: float = 0.1,
    ) -> None:
        """Initialize the generator.

        Args:
            rng: Random number generator; pass a seeded one for reproducible output.
            booking_failure_rate: Probability that a booked slot is reported as taken.
            payment_failure_rate: Probability that a payment is declined.
        """
        self._rng = rng or random.Random()
        self.booking_failure_rate = booking_failure_rate
        self.payment_failure_rate = payment_failure_rate

    @staticmethod
    def new_id() -> str:
        """Millisecond timestamp used as identifier for created records."""
        return str(time.time_ns() // 1_000_000)

    @staticmethod
    def now_iso() -> str:
        return datetime.now(UTC).isoformat()

    def station_status(self, station_id: str) -> dict[str, Any]:
        return {
            "stationId": station_id,
            "available": self._rng.randint(1, STATION_CONNECTORS),
            "total": STATION_CONNECTORS,
            "realTimeUpdates": {
                "lastUpdated": self.now_iso(),
                "occupancy": self._rng.randrange(100),
                "avgWaitTime": self._rng.randrange(30),
            },
        }

    def charging_session(self, session_id: str) -> dict[str, Any]:
        return {
            "sessionId": session_id,
            "status": "charging",
            "battery": self._rng.randrange(40) + 45,
            "power": self._rng.randrange(50) + 100,
            "duration": f"{self._rng.randrange(60)}:{self._rng.randrange(60):02d}",
            "energyDelivered": self._rng.randrange(30) + 10,
            "cost": self._rng.randrange(500) + 200,
            "estimatedTimeToFull": self._rng.randrange(45) + 15,
        }

    def emergency_eta_minutes(self) -> int:
        return self._rng.randrange(30) + 15

    def check_slot_available(self, station_id: str, time_slot: str) -> None:
        """Raise SlotUnavailableError for the configured share of booking attempts."""
        if self._rng.random() < self.booking_failure_rate:
            logger.info(f"Slot {time_slot} at station {station_id} reported unavailable")
            raise SlotUnavailableError("Selected time slot is no longer available")

    def check_payment(self, amount: int, payment_method: str) -> None:
        """Raise PaymentFailedError for the configured share of payments."""
        if self._rng.random() < self.payment_failure_rate:
            logger.info(f"Payment of {amount} via {payment_method} declined")
            raise PaymentFailedError("Payment failed. Please try again.")
