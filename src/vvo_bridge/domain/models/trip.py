"""Trip domain models."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class TripEndpoint:
    """Departure or arrival summary of a trip."""

    time: str | None
    time_full: str | None
    station: str | None


@dataclass(frozen=True)
class Leg:
    """One partial route of a trip, e.g. a single tram ride."""

    line: str | None
    direction: str | None
    departure_time: str | None
    departure_time_full: str | None
    arrival_time: str | None
    arrival_time_full: str | None
    duration: int | None


@dataclass(frozen=True)
class Trip:
    """A connection suggestion between two points."""

    duration: int | None
    changes: int | None
    departure: TripEndpoint
    arrival: TripEndpoint
    parts: list[Leg] = field(default_factory=list)
