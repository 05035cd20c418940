"""Response payload models, one per endpoint."""

from dataclasses import asdict, dataclass, field
from typing import Any

from vvo_bridge.domain.models.departure import Departure
from vvo_bridge.domain.models.line import Line
from vvo_bridge.domain.models.station import Station
from vvo_bridge.domain.models.stop import Stop
from vvo_bridge.domain.models.trip import Trip


@dataclass(frozen=True)
class _Payload:
    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serializable dict."""
        return asdict(self)


@dataclass(frozen=True)
class StationSearchResult(_Payload):
    """Result of a station search."""

    query: str
    count: int
    stations: list[Station] = field(default_factory=list)


@dataclass(frozen=True)
class DepartureBoard(_Payload):
    """Upcoming departures of a single station."""

    station_id: str
    station_name: str | None
    timestamp: str | None
    count: int
    departures: list[Departure] = field(default_factory=list)


@dataclass(frozen=True)
class TripSearchResult(_Payload):
    """Connection suggestions between two points."""

    from_: str
    to: str
    timestamp: str | None
    count: int
    trips: list[Trip] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serializable dict, exposing ``from_`` as ``from``."""
        data = asdict(self)
        return {"from": data.pop("from_"), **data}


@dataclass(frozen=True)
class StationLines(_Payload):
    """Lines serving a station."""

    station_id: str
    count: int
    lines: list[Line] = field(default_factory=list)


@dataclass(frozen=True)
class LineStops(_Payload):
    """Stops along a line."""

    line_id: str
    count: int
    stops: list[Stop] = field(default_factory=list)
