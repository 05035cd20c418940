"""Configuration adapters."""

from vvo_bridge.adapters.config.app_config import AppConfig

__all__ = ["AppConfig"]
