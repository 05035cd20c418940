"""Domain layer - models, errors and ports."""

from vvo_bridge.domain.errors import BridgeError, UpstreamError, ValidationError
from vvo_bridge.domain.models import (
    Coordinates,
    Departure,
    Line,
    Station,
    Stop,
    Trip,
)
from vvo_bridge.domain.ports import TransitApiClient

__all__ = [
    "BridgeError",
    "Coordinates",
    "Departure",
    "Line",
    "Station",
    "Stop",
    "TransitApiClient",
    "Trip",
    "UpstreamError",
    "ValidationError",
]
