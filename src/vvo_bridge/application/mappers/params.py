"""Typed query parameters for each endpoint, with their defaults."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator


class MapperParams(BaseModel):
    """Base for endpoint parameters parsed from query strings and path segments."""

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    @model_validator(mode="before")
    @classmethod
    def drop_empty_values(cls, data: Any) -> Any:
        """Treat empty query values as if they were not given at all."""
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value != ""}
        return data


class StationSearchParams(MapperParams):
    """Parameters for ``GET /stations``."""

    query: str = Field(min_length=1)
    limit: int = Field(default=10, ge=1)


class DepartureParams(MapperParams):
    """Parameters for ``GET /departures/{stationId}``."""

    station_id: str = Field(alias="stationId", min_length=1)
    limit: int = Field(default=20, ge=1)
    time_offset: int = Field(default=0, description="Offset from now in minutes")


class TripParams(MapperParams):
    """Parameters for ``GET /trip``."""

    from_: str = Field(alias="from", min_length=1)
    to: str = Field(min_length=1)
    time: datetime | None = None
    is_arrival: bool = False
    max_changes: int = Field(default=9, ge=0)


class LineParams(MapperParams):
    """Parameters for ``GET /lines/{stationId}``."""

    station_id: str = Field(alias="stationId", min_length=1)


class StopParams(MapperParams):
    """Parameters for ``GET /stops/{lineId}``."""

    line_id: str = Field(alias="lineId", min_length=1)
