"""Main entry point for the VVO API bridge."""

import asyncio
import logging
import sys

import aiohttp

from vvo_bridge.adapters.config import AppConfig
from vvo_bridge.adapters.vvo_api import VvoHttpClient
from vvo_bridge.adapters.web import StarletteWebAdapter
from vvo_bridge.application import Normalizer
from vvo_bridge.application.mappers import EndpointMappers

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    """Configure root logging for the process."""
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


async def main() -> None:
    """Main application entry point."""
    config = AppConfig()
    configure_logging(config.log_level)

    normalizer = Normalizer(config.timezone)

    # One aiohttp session for the lifetime of the process; requests share its connection pool
    async with aiohttp.ClientSession() as session:
        client = VvoHttpClient(
            session,
            base_url=config.vvo_base_url,
            timeout_seconds=config.upstream_timeout_seconds,
        )
        mappers = EndpointMappers.create(client, normalizer)
        web_adapter = StarletteWebAdapter(config, mappers, normalizer)

        logger.info(f"Forwarding requests to {config.vvo_base_url}")
        logger.info("Ready for Home Assistant integration")
        try:
            await web_adapter.start()
        except KeyboardInterrupt:
            logger.info("Shutting down...")
            await web_adapter.stop()


def run() -> None:
    """Console script entry point."""
    asyncio.run(main())


if __name__ == "__main__":
    run()
