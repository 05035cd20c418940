"""Stop domain model."""

from dataclasses import dataclass

from vvo_bridge.domain.models.coordinates import Coordinates


@dataclass(frozen=True)
class Stop:
    """A stop along a line."""

    id: str | None
    name: str | None
    city: str | None
    coords: Coordinates
