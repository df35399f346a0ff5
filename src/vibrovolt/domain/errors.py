"""Exception hierarchy raised at the seams between the core and its collaborators."""


class VibrovoltError(Exception):
    """Base exception for all vibrovolt errors."""


class StationFetchError(VibrovoltError):
    """The station list could not be fetched."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        self.status_code = status_code
        super().__init__(message)


class PaymentFailedError(VibrovoltError):
    """The payment gateway declined or failed a top-up."""


class InvalidCredentialsError(VibrovoltError):
    """Login was attempted with an unknown email/password pair."""


class SlotUnavailableError(VibrovoltError):
    """The requested booking slot is no longer available."""
