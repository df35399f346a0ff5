"""Seed wallet state for a new app session."""

from vibrovolt.domain.models.wallet import Card, Partner, PartnerCategory, Transaction, TransactionKind

DEFAULT_BALANCE = 2450
DEFAULT_CARBON_CREDITS = 760
# Loyalty points reported by wallet.get; not otherwise used.
LOYALTY_POINTS = 1250

CARDS: tuple[Card, ...] = (
    Card(id="1", last4="4242", type="Visa", is_default=True),
    Card(id="2", last4="5555", type="Mastercard", is_default=False),
)

TRANSACTIONS: tuple[Transaction, ...] = (
    Transaction(id="1", title="Added to Wallet", date="Dec 16, 2024", amount=1000, kind=TransactionKind.CREDIT),
    Transaction(id="2", title="Charging Session", date="Dec 15, 2024", amount=678, kind=TransactionKind.DEBIT),
    Transaction(id="3", title="Referral Bonus", date="Dec 14, 2024", amount=200, kind=TransactionKind.CREDIT),
    Transaction(id="4", title="Charging Session", date="Dec 14, 2024", amount=492, kind=TransactionKind.DEBIT),
)

PARTNERS: tuple[Partner, ...] = (
    Partner(id="vibro-cafe", name="Vibro Cafe", category=PartnerCategory.CAFE, min_credits=100),
    Partner(id="swiggy", name="Swiggy", category=PartnerCategory.FOOD, min_credits=150),
    Partner(id="zomato", name="Zomato", category=PartnerCategory.FOOD, min_credits=150),
    Partner(id="bookmyshow", name="BookMyShow", category=PartnerCategory.MOVIES, min_credits=200),
    Partner(id="district", name="District", category=PartnerCategory.OTHER, min_credits=120),
)
