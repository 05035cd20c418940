"""Departure domain model."""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Departure:
    """Represents a single departure from a station."""

    line: str | None
    direction: str | None
    platform: str | None
    scheduled_time: str | None
    scheduled_time_full: str | None
    real_time: str | None
    real_time_full: str | None
    delay: int = 0
    state: str | None = None
    route_changes: list[Any] = field(default_factory=list)
    low_floor: bool = False
