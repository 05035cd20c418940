"""Station domain model."""

from dataclasses import dataclass

from vvo_bridge.domain.models.coordinates import Coordinates


@dataclass(frozen=True)
class Station:
    """Represents a public transport station found by a point search."""

    id: str | None
    name: str | None
    city: str | None
    coords: Coordinates
    type: str | None
