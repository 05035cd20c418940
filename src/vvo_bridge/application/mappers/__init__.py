"""Endpoint mappers, one per caller-facing capability."""

from dataclasses import dataclass
from typing import TYPE_CHECKING

from vvo_bridge.application.mappers.base import EndpointMapper
from vvo_bridge.application.mappers.departures import DepartureMapper
from vvo_bridge.application.mappers.lines import LineMapper
from vvo_bridge.application.mappers.station_search import StationSearchMapper
from vvo_bridge.application.mappers.stops import StopMapper
from vvo_bridge.application.mappers.trips import TripMapper

if TYPE_CHECKING:
    from vvo_bridge.application.normalizer import Normalizer
    from vvo_bridge.domain.ports import TransitApiClient


@dataclass(frozen=True)
class EndpointMappers:
    """The full set of mappers served by the web adapter."""

    stations: StationSearchMapper
    departures: DepartureMapper
    trips: TripMapper
    lines: LineMapper
    stops: StopMapper

    @classmethod
    def create(cls, client: "TransitApiClient", normalizer: "Normalizer") -> "EndpointMappers":
        """Build every mapper around one client and normalizer."""
        return cls(
            stations=StationSearchMapper(client, normalizer),
            departures=DepartureMapper(client, normalizer),
            trips=TripMapper(client, normalizer),
            lines=LineMapper(client, normalizer),
            stops=StopMapper(client, normalizer),
        )


__all__ = [
    "DepartureMapper",
    "EndpointMapper",
    "EndpointMappers",
    "LineMapper",
    "StationSearchMapper",
    "StopMapper",
    "TripMapper",
]
