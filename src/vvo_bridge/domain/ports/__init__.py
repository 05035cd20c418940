"""Ports (interfaces) for the ports-and-adapters architecture."""

from vvo_bridge.domain.ports.transit_api_client import TransitApiClient

__all__ = ["TransitApiClient"]
