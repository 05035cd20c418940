"""Coordinates domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Coordinates:
    """Geographic position in decimal degrees. Fields are None when unknown."""

    lat: float | None
    lng: float | None
