"""Main entry point for the VibroVolt mock RPC backend."""

import asyncio
import logging
import sys

from pydantic import ValidationError

from vibrovolt.adapters.config import AppConfig
from vibrovolt.adapters.web import RpcBackend, create_app, serve
from vibrovolt.bootstrap import build_context, build_telemetry, configure_logging

logger = logging.getLogger(__name__)


async def main() -> None:
    """Main application entry point."""
    try:
        config = AppConfig()
    except ValidationError as e:
        configure_logging()
        logger.error(f"Invalid configuration: {e}")
        sys.exit(1)

    configure_logging(config.log_level)

    try:
        telemetry = build_telemetry(config)
        context = build_context(config, telemetry=telemetry)
    except (ValueError, FileNotFoundError) as e:
        logger.error(f"Invalid wallet configuration: {e}")
        sys.exit(1)

    logger.info(
        f"Loaded {len(context.wallet.partners)} partner(s), "
        f"wallet balance {context.wallet.balance}, {context.wallet.carbon_credits} carbon credits"
    )

    backend = RpcBackend(context, telemetry)
    app = create_app(backend, rate_limit_per_minute=config.rate_limit_per_minute)
    try:
        await serve(app, config)
    except KeyboardInterrupt:
        logger.info("Shutting down...")


def run() -> None:
    """Synchronous entry point for the server command."""
    asyncio.run(main())


if __name__ == "__main__":
    run()
