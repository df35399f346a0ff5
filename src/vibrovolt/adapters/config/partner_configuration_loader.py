"""Partner and wallet seed configuration loader."""

import logging
from dataclasses import dataclass

from vibrovolt.adapters.config.app_config import AppConfig
from vibrovolt.adapters.sample_data.wallet import DEFAULT_BALANCE, DEFAULT_CARBON_CREDITS, PARTNERS
from vibrovolt.domain.models.wallet import Partner, PartnerCategory

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WalletSeed:
    """Initial wallet values for a new app session."""

    balance: int
    carbon_credits: int
    partners: list[Partner]


class PartnerConfigurationLoader:
    """Loads redemption partners and wallet seed values from app config."""

    @staticmethod
    def load_partners(config: AppConfig) -> list[Partner]:
        """Load partners from the TOML file, falling back to the built-in list."""
        partners_data = config.get_partners_config()
        if not partners_data:
            return list(PARTNERS)

        partners: list[Partner] = []
        seen_ids: set[str] = set()
        for partner_data in partners_data:
            partner_id = partner_data.get("id")
            if not partner_id:
                continue
            if partner_id in seen_ids:
                raise ValueError(f"Duplicate partner id in configuration: {partner_id}")
            seen_ids.add(partner_id)

            try:
                category = PartnerCategory(partner_data.get("category", "Other"))
            except ValueError:
                logger.warning(
                    f"Unknown category for partner '{partner_id}', using {PartnerCategory.OTHER.value}"
                )
                category = PartnerCategory.OTHER

            min_credits = int(partner_data.get("min_credits", 0))
            if min_credits < 0:
                raise ValueError(f"Partner '{partner_id}' has negative min_credits")

            partners.append(
                Partner(
                    id=str(partner_id),
                    name=str(partner_data.get("name", partner_id)),
                    category=category,
                    min_credits=min_credits,
                )
            )
        return partners

    @staticmethod
    def load(config: AppConfig) -> WalletSeed:
        """Load the full wallet seed."""
        wallet = config.get_wallet_config()
        carbon_credits = int(wallet.get("carbon_credits", DEFAULT_CARBON_CREDITS))
        if carbon_credits < 0:
            raise ValueError("wallet.carbon_credits must not be negative")
        return WalletSeed(
            balance=int(wallet.get("balance", DEFAULT_BALANCE)),
            carbon_credits=carbon_credits,
            partners=PartnerConfigurationLoader.load_partners(config),
        )
