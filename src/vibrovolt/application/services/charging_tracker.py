"""Charging tracker: the active session, upcoming bookings and past sessions."""

import logging
import uuid
from collections.abc import Callable, Iterable
from datetime import datetime

from vibrovolt.domain.models.charging import ActiveSession, Booking, ChargingHistoryEntry

logger = logging.getLogger(__name__)

# Values a freshly started session shows until telemetry arrives.
INITIAL_BATTERY_PERCENT = 45
INITIAL_POWER_KW = 120


class ChargingTracker:
    """Tracks at most one active charging session."""

    def __init__(
        self,
        upcoming_bookings: Iterable[Booking] = (),
        history: Iterable[ChargingHistoryEntry] = (),
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._active_session: ActiveSession | None = None
        self._upcoming_bookings = list(upcoming_bookings)
        self._history = list(history)
        self._clock = clock

    @property
    def active_session(self) -> ActiveSession | None:
        return self._active_session

    @property
    def upcoming_bookings(self) -> list[Booking]:
        return list(self._upcoming_bookings)

    @property
    def history(self) -> list[ChargingHistoryEntry]:
        return list(self._history)

    def start_session(self, station_name: str) -> ActiveSession:
        """Start a session at a station, replacing any session already running."""
        if self._active_session is not None:
            logger.info(f"Replacing active session at {self._active_session.station}")
        self._active_session = ActiveSession(
            id=uuid.uuid4().hex,
            station=station_name,
            battery=INITIAL_BATTERY_PERCENT,
            power=INITIAL_POWER_KW,
            duration="00:00",
            start_time=self._clock(),
        )
        logger.info(f"Started charging session at {station_name}")
        return self._active_session

    def stop_session(self) -> None:
        self._active_session = None
