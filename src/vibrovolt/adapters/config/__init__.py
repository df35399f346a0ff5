"""Configuration adapters."""

from vibrovolt.adapters.config.app_config import AppConfig
from vibrovolt.adapters.config.partner_configuration_loader import (
    PartnerConfigurationLoader,
    WalletSeed,
)

__all__ = ["AppConfig", "PartnerConfigurationLoader", "WalletSeed"]
