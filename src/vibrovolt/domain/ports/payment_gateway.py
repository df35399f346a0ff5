"""Payment gateway port."""

from typing import Protocol

from vibrovolt.domain.models.wallet import PaymentConfirmation


class PaymentGateway(Protocol):
    """Port for charging a payment method to top up the wallet."""

    async def add_funds(self, amount: int, payment_method: str) -> PaymentConfirmation:
        """Charge ``amount`` to ``payment_method``.

        Raises:
            PaymentFailedError: If the payment was not confirmed.
        """
        ...
