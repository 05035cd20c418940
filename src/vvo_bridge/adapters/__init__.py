"""Adapters layer - external system integrations."""

from vvo_bridge.adapters.config import AppConfig
from vvo_bridge.adapters.vvo_api import VvoHttpClient

__all__ = [
    "AppConfig",
    "VvoHttpClient",
]
