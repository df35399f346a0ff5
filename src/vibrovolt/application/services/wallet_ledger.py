"""Wallet ledger: currency balance, carbon credits and the transaction list."""

import logging
import uuid
from collections.abc import Callable, Iterable
from datetime import datetime
from typing import Any

from vibrovolt.domain.errors import PaymentFailedError
from vibrovolt.domain.models.redemption_result import RedemptionError, RedemptionResult
from vibrovolt.domain.models.wallet import (
    Card,
    Partner,
    PaymentConfirmation,
    Transaction,
    TransactionKind,
)
from vibrovolt.domain.ports.payment_gateway import PaymentGateway

logger = logging.getLogger(__name__)

TOP_UP_TITLE = "Added to Wallet"


def format_date_label(moment: datetime) -> str:
    """Format a date the way transaction lists display it, e.g. "Dec 16, 2024"."""
    return f"{moment.strftime('%b')} {moment.day}, {moment.year}"


def serialize_transaction(transaction: Transaction) -> dict[str, Any]:
    """Wire form of a transaction."""
    return {
        "id": transaction.id,
        "title": transaction.title,
        "date": transaction.date,
        "amount": transaction.amount,
        "type": transaction.kind.value,
    }


class WalletLedger:
    """Owns the wallet state of one app session.

    The currency balance and the carbon-credit balance are tracked as independent
    values. Every mutation made through the ledger records exactly one transaction,
    prepended so the list stays newest-first. Transactions are never edited or removed.
    """

    def __init__(
        self,
        payment_gateway: PaymentGateway,
        *,
        balance: int = 0,
        carbon_credits: int = 0,
        transactions: Iterable[Transaction] = (),
        cards: Iterable[Card] = (),
        partners: Iterable[Partner] = (),
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        """Initialize the ledger with its seed state.

        Args:
            payment_gateway: Gateway used to confirm top-ups.
            balance: Initial currency balance.
            carbon_credits: Initial carbon-credit balance, must not be negative.
            transactions: Initial transactions, newest first.
            cards: Registered payment cards.
            partners: Merchants accepting carbon-credit redemption.
            clock: Source of the current time for transaction date labels.
        """
        if carbon_credits < 0:
            raise ValueError("carbon_credits must not be negative")
        self._payment_gateway = payment_gateway
        self._balance = balance
        self._carbon_credits = carbon_credits
        self._transactions: list[Transaction] = list(transactions)
        self._cards: list[Card] = list(cards)
        self._partners: dict[str, Partner] = {p.id: p for p in partners}
        self._clock = clock

    @property
    def balance(self) -> int:
        return self._balance

    @property
    def carbon_credits(self) -> int:
        return self._carbon_credits

    @property
    def transactions(self) -> list[Transaction]:
        """Transactions, newest first. Returns a copy."""
        return list(self._transactions)

    @property
    def cards(self) -> list[Card]:
        return list(self._cards)

    @property
    def partners(self) -> list[Partner]:
        return list(self._partners.values())

    def find_partner(self, partner_id: str) -> Partner | None:
        """Look up a partner by id."""
        return self._partners.get(partner_id)

    def _record(self, title: str, amount: int, kind: TransactionKind, tx_id: str | None = None) -> Transaction:
        transaction = Transaction(
            id=tx_id or uuid.uuid4().hex,
            title=title,
            date=format_date_label(self._clock()),
            amount=amount,
            kind=kind,
        )
        self._transactions.insert(0, transaction)
        return transaction

    def redeem_credits(self, partner_id: str, credits: int) -> RedemptionResult:
        """Redeem carbon credits at a partner.

        All checks run before any state changes, so a rejected request leaves the
        credit balance and the transaction list untouched.

        Raises:
            ValueError: If ``credits`` is not a positive integer.
        """
        if credits <= 0:
            raise ValueError("credits must be a positive integer")

        logger.info(f"Redeeming {credits} credits at partner '{partner_id}'")
        partner = self.find_partner(partner_id)
        if partner is None:
            return RedemptionResult.failure(RedemptionError.PARTNER_NOT_FOUND, "Partner not found")
        if credits < partner.min_credits:
            return RedemptionResult.failure(
                RedemptionError.BELOW_MINIMUM,
                f"Minimum {partner.min_credits} credits required",
            )
        if credits > self._carbon_credits:
            return RedemptionResult.failure(
                RedemptionError.INSUFFICIENT_CREDITS, "Insufficient credits"
            )

        self._carbon_credits -= credits
        transaction = self._record(
            f"Carbon Credit Redemption – {partner.name}", credits, TransactionKind.DEBIT
        )
        logger.info(
            f"Redeemed {credits} credits at {partner.name}, {self._carbon_credits} credits left"
        )
        return RedemptionResult.success(transaction)

    async def add_funds(self, amount: int, payment_method: str) -> PaymentConfirmation:
        """Top up the wallet through the payment gateway.

        The balance and the matching credit transaction are only recorded once the
        gateway confirms the payment.

        Raises:
            ValueError: If ``amount`` is not positive.
            PaymentFailedError: If the gateway did not confirm the payment.
        """
        if amount <= 0:
            raise ValueError("amount must be positive")

        try:
            confirmation = await self._payment_gateway.add_funds(amount, payment_method)
        except PaymentFailedError as e:
            logger.warning(f"Top-up of {amount} via {payment_method} failed: {e}")
            raise

        self._balance += amount
        self._record(TOP_UP_TITLE, amount, TransactionKind.CREDIT, tx_id=confirmation.transaction_id)
        if confirmation.new_balance != self._balance:
            logger.debug(
                f"Gateway reported balance {confirmation.new_balance}, ledger balance is {self._balance}"
            )
        logger.info(f"Added {amount} to wallet via {payment_method}, balance {self._balance}")
        return confirmation

    def snapshot(self) -> dict[str, Any]:
        """Serializable view of the wallet state."""
        return {
            "balance": self._balance,
            "carbonCredits": self._carbon_credits,
            "cards": [
                {"id": c.id, "last4": c.last4, "type": c.type, "isDefault": c.is_default}
                for c in self._cards
            ],
            "transactions": [serialize_transaction(t) for t in self._transactions],
        }
