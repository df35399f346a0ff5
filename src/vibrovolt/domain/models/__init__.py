"""Domain models for VibroVolt."""

from vibrovolt.domain.models.charging import ActiveSession, Booking, ChargingHistoryEntry
from vibrovolt.domain.models.error_details import ErrorDetails
from vibrovolt.domain.models.filter_state import FilterState, StationCategory, parse_vehicle
from vibrovolt.domain.models.redemption_result import RedemptionError, RedemptionResult
from vibrovolt.domain.models.station import Station, VehicleCategory
from vibrovolt.domain.models.user import User
from vibrovolt.domain.models.wallet import (
    Card,
    Partner,
    PartnerCategory,
    PaymentConfirmation,
    Transaction,
    TransactionKind,
)

__all__ = [
    "ActiveSession",
    "Booking",
    "Card",
    "ChargingHistoryEntry",
    "ErrorDetails",
    "FilterState",
    "Partner",
    "PartnerCategory",
    "PaymentConfirmation",
    "RedemptionError",
    "RedemptionResult",
    "Station",
    "StationCategory",
    "Transaction",
    "TransactionKind",
    "User",
    "VehicleCategory",
    "parse_vehicle",
]
