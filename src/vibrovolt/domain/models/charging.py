"""Charging session domain models."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class ActiveSession:
    """A charging session in progress."""

    id: str
    station: str
    battery: int  # percent
    power: int  # kW
    duration: str
    start_time: datetime


@dataclass(frozen=True)
class Booking:
    """An upcoming slot booking."""

    id: str
    station: str
    location: str
    date: str
    time: str


@dataclass(frozen=True)
class ChargingHistoryEntry:
    """A completed charging session."""

    id: str
    station: str
    date: str
    energy: float  # kWh
    amount: int
