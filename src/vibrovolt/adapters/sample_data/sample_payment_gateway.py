"""Payment gateway that approves or declines top-ups at random."""

from vibrovolt.adapters.sample_data.telemetry import PlaceholderTelemetry
from vibrovolt.adapters.sample_data.wallet import DEFAULT_BALANCE
from vibrovolt.domain.models.wallet import PaymentConfirmation
from vibrovolt.domain.ports.payment_gateway import PaymentGateway


class SamplePaymentGateway(PaymentGateway):
    """Mock gateway; reports the new balance relative to the seed balance like the mock backend."""

    def __init__(self, telemetry: PlaceholderTelemetry) -> None:
        self._telemetry = telemetry

    async def add_funds(self, amount: int, payment_method: str) -> PaymentConfirmation:
        self._telemetry.check_payment(amount, payment_method)
        return PaymentConfirmation(
            transaction_id=self._telemetry.new_id(),
            amount=amount,
            payment_method=payment_method,
            new_balance=DEFAULT_BALANCE + amount,
        )
