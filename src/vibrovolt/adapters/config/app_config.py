"""12-factor configuration adapter using environment variables and TOML config."""

import logging
import tomllib
from pathlib import Path
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Server configuration
    host: str = Field(default="0.0.0.0", description="Host to bind the RPC server to")
    port: int = Field(default=8000, description="Port to bind the RPC server to")
    log_level: str = Field(default="INFO", description="Root log level name")

    # Placeholder data generation
    random_seed: int | None = Field(
        default=None,
        description="Seed for the placeholder data generators (unset for non-deterministic output)",
    )
    booking_failure_rate: float = Field(
        default=0.2, description="Probability that a slot booking reports the slot as taken"
    )
    payment_failure_rate: float = Field(
        default=0.1, description="Probability that a wallet top-up is declined"
    )

    # Rate limiting configuration
    rate_limit_per_minute: int = Field(
        default=100,
        description="Maximum number of mutation calls allowed per IP address and procedure per minute",
    )

    # Client configuration
    backend_url: str = Field(
        default="http://127.0.0.1:8000",
        description="Base URL of the RPC backend used by the CLI in remote mode",
    )
    rpc_timeout_seconds: int = Field(default=10, description="Timeout for RPC requests in seconds")

    # Local persistence of the signed-in user
    user_store_path: str = Field(
        default=".vibrovolt/user.json",
        description="Path of the JSON file that keeps the signed-in user",
    )

    # Optional TOML file with partners and wallet seed values
    config_file: str | None = Field(
        default=None,
        description="Path to TOML configuration file with [wallet] and [[partners]] sections",
    )

    @field_validator("booking_failure_rate", "payment_failure_rate")
    @classmethod
    def validate_rate(cls, v: float) -> float:
        """Validate a probability lies within [0, 1]."""
        if not 0.0 <= v <= 1.0:
            raise ValueError("failure rates must be between 0 and 1")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a standard logging level name."""
        level = v.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"log_level must be a logging level name, got '{v}'")
        return level

    def _load_toml_data(self) -> dict[str, Any]:
        """Load and parse the TOML file; an unset config_file yields no data."""
        if not self.config_file:
            return {}

        config_path = Path(self.config_file)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path, "rb") as f:
            return tomllib.load(f)

    def get_partners_config(self) -> list[dict[str, Any]]:
        """Return the [[partners]] entries from the TOML file, or an empty list."""
        partners = self._load_toml_data().get("partners", [])
        if not isinstance(partners, list):
            raise ValueError("TOML config 'partners' must be a list")
        return [p for p in partners if isinstance(p, dict)]

    def get_wallet_config(self) -> dict[str, Any]:
        """Return the [wallet] table from the TOML file, or an empty dict."""
        wallet = self._load_toml_data().get("wallet", {})
        if not isinstance(wallet, dict):
            raise ValueError("TOML config 'wallet' must be a table")
        return wallet
