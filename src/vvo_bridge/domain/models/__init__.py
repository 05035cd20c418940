"""Domain models for the VVO bridge."""

from vvo_bridge.domain.models.coordinates import Coordinates
from vvo_bridge.domain.models.departure import Departure
from vvo_bridge.domain.models.error_details import ErrorDetails
from vvo_bridge.domain.models.line import Line
from vvo_bridge.domain.models.results import (
    DepartureBoard,
    LineStops,
    StationLines,
    StationSearchResult,
    TripSearchResult,
)
from vvo_bridge.domain.models.station import Station
from vvo_bridge.domain.models.stop import Stop
from vvo_bridge.domain.models.trip import Leg, Trip, TripEndpoint

__all__ = [
    "Coordinates",
    "Departure",
    "DepartureBoard",
    "ErrorDetails",
    "Leg",
    "Line",
    "LineStops",
    "Station",
    "StationLines",
    "StationSearchResult",
    "Stop",
    "Trip",
    "TripEndpoint",
    "TripSearchResult",
]
