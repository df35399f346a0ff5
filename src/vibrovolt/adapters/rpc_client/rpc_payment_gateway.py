"""Payment gateway adapter backed by the ``wallet.addFunds`` procedure."""

from pydantic import ValidationError

from vibrovolt.adapters.rpc_client.http_client import RpcCallError, RpcHttpClient
from vibrovolt.adapters.rpc_schemas import AddFundsOut
from vibrovolt.domain.errors import PaymentFailedError
from vibrovolt.domain.models.wallet import PaymentConfirmation
from vibrovolt.domain.ports.payment_gateway import PaymentGateway


class RpcPaymentGateway(PaymentGateway):
    """Confirms top-ups against a running RPC backend."""

    def __init__(self, client: RpcHttpClient) -> None:
        self._client = client

    async def add_funds(self, amount: int, payment_method: str) -> PaymentConfirmation:
        try:
            data = await self._client.mutate(
                "wallet.addFunds", {"amount": amount, "paymentMethod": payment_method}
            )
            confirmed = AddFundsOut.model_validate(data)
        except RpcCallError as e:
            raise PaymentFailedError(str(e)) from e
        except ValidationError as e:
            raise PaymentFailedError(f"Unexpected wallet.addFunds response: {e}") from e

        if not confirmed.success:
            raise PaymentFailedError("Payment was not confirmed")
        return PaymentConfirmation(
            transaction_id=confirmed.transaction_id,
            amount=confirmed.amount,
            payment_method=confirmed.payment_method,
            new_balance=confirmed.new_balance,
        )
