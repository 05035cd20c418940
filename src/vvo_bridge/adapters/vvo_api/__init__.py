"""VVO API adapters for Verkehrsverbund Oberelbe (Dresden)."""

from vvo_bridge.adapters.vvo_api.http_client import VvoHttpClient

__all__ = ["VvoHttpClient"]
