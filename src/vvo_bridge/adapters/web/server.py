"""Uvicorn-based web adapter serving the bridge."""

import logging
from typing import TYPE_CHECKING, Any

import uvicorn

from .app import create_app

if TYPE_CHECKING:
    from vvo_bridge.adapters.config import AppConfig
    from vvo_bridge.application.mappers import EndpointMappers
    from vvo_bridge.application.normalizer import Normalizer

logger = logging.getLogger(__name__)


class StarletteWebAdapter:
    """Serves the bridge endpoints over HTTP."""

    def __init__(
        self, config: "AppConfig", mappers: "EndpointMappers", normalizer: "Normalizer"
    ) -> None:
        """Initialize the web adapter.

        Args:
            config: Application configuration.
            mappers: Endpoint mappers to expose.
            normalizer: Normalizer used for the health timestamp.
        """
        self.config = config
        self.app = create_app(config, mappers, normalizer)
        self._server: Any | None = None

    async def start(self) -> None:
        """Start the web server and serve until it is stopped."""
        server_config = uvicorn.Config(
            self.app,
            host=self.config.host,
            port=self.config.port,
            log_level=self.config.log_level.lower(),
        )
        self._server = uvicorn.Server(server_config)
        logger.info(f"VVO API Bridge listening on port {self.config.port}")
        await self._server.serve()

    async def stop(self) -> None:
        """Stop the web server."""
        if self._server:
            self._server.should_exit = True
