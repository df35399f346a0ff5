"""Redemption result domain model."""

from dataclasses import dataclass
from enum import Enum

from vibrovolt.domain.models.wallet import Transaction


class RedemptionError(str, Enum):
    """Reasons a carbon-credit redemption is rejected."""

    PARTNER_NOT_FOUND = "PartnerNotFound"
    BELOW_MINIMUM = "BelowMinimum"
    INSUFFICIENT_CREDITS = "InsufficientCredits"


@dataclass(frozen=True)
class RedemptionResult:
    """Outcome of a redemption request.

    Exactly one of ``transaction`` (on success) or ``error`` (on rejection) is set.
    """

    ok: bool
    error: RedemptionError | None = None
    message: str | None = None
    transaction: Transaction | None = None

    @classmethod
    def success(cls, transaction: Transaction) -> "RedemptionResult":
        """Build a successful result for the recorded transaction."""
        return cls(ok=True, transaction=transaction)

    @classmethod
    def failure(cls, error: RedemptionError, message: str) -> "RedemptionResult":
        """Build a rejected result."""
        return cls(ok=False, error=error, message=message)
