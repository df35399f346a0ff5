"""Domain layer - core business logic and models."""

from vibrovolt.domain.models import (
    FilterState,
    Partner,
    RedemptionResult,
    Station,
    Transaction,
)
from vibrovolt.domain.ports import (
    PaymentGateway,
    StationRepository,
    UserStore,
)

__all__ = [
    "FilterState",
    "Partner",
    "PaymentGateway",
    "RedemptionResult",
    "Station",
    "StationRepository",
    "Transaction",
    "UserStore",
]
