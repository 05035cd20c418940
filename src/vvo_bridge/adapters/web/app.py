"""Starlette application factory."""

from typing import TYPE_CHECKING

from starlette.applications import Starlette
from starlette.middleware import Middleware
from starlette.middleware.cors import CORSMiddleware

from .error_envelope import ErrorEnvelopeMiddleware, not_found_handler
from .routes import build_routes

if TYPE_CHECKING:
    from vvo_bridge.adapters.config import AppConfig
    from vvo_bridge.application.mappers import EndpointMappers
    from vvo_bridge.application.normalizer import Normalizer


def create_app(
    config: "AppConfig", mappers: "EndpointMappers", normalizer: "Normalizer"
) -> Starlette:
    """Create the ASGI application serving the bridge endpoints."""
    return Starlette(
        routes=build_routes(mappers, normalizer),
        middleware=[
            Middleware(
                CORSMiddleware,
                allow_origins=config.cors_allow_origins,
                allow_methods=["GET"],
                allow_headers=["*"],
            ),
            Middleware(ErrorEnvelopeMiddleware),
        ],
        exception_handlers={
            404: not_found_handler,
            405: not_found_handler,
        },
    )
