"""Web adapter for the HTTP surface."""

from .app import create_app
from .server import StarletteWebAdapter

__all__ = ["StarletteWebAdapter", "create_app"]
