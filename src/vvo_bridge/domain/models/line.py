"""Line domain model."""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Line:
    """A transit line serving a station."""

    id: str | None
    name: str | None
    type: str | None
    type_name: str | None
    directions: list[Any] = field(default_factory=list)
