"""Wallet domain models."""

from dataclasses import dataclass
from enum import Enum


class TransactionKind(str, Enum):
    """Direction of a wallet transaction."""

    CREDIT = "credit"
    DEBIT = "debit"


class PartnerCategory(str, Enum):
    """Merchant category of a redemption partner."""

    FOOD = "Food"
    MOVIES = "Movies"
    CAFE = "Cafe"
    OTHER = "Other"


@dataclass(frozen=True)
class Transaction:
    """A single wallet ledger entry. Entries are never mutated."""

    id: str
    title: str
    date: str  # display label, e.g. "Dec 16, 2024"
    amount: int
    kind: TransactionKind


@dataclass(frozen=True)
class Card:
    """A registered payment card."""

    id: str
    last4: str
    type: str
    is_default: bool = False


@dataclass(frozen=True)
class Partner:
    """A merchant accepting carbon-credit redemption."""

    id: str
    name: str
    category: PartnerCategory
    min_credits: int


@dataclass(frozen=True)
class PaymentConfirmation:
    """Confirmation returned by the payment gateway for a top-up."""

    transaction_id: str
    amount: int
    payment_method: str
    new_balance: int
