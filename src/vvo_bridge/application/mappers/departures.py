"""Departure monitor mapper."""

from datetime import timedelta
from typing import Any

from vvo_bridge.application.mappers.base import EndpointMapper
from vvo_bridge.application.mappers.params import DepartureParams
from vvo_bridge.application.navigation import as_list, dig
from vvo_bridge.domain.models import Departure, DepartureBoard

DEPARTURE_MONITOR_ENDPOINT = "/dm"


class DepartureMapper(EndpointMapper[DepartureParams, DepartureBoard]):
    """Fetches upcoming departures of a station, optionally shifted into the future."""

    params_model = DepartureParams
    error_label = "Fehler beim Abrufen der Abfahrten"
    missing_message = 'Parameter "stationId" ist erforderlich'

    async def map(self, params: DepartureParams) -> DepartureBoard:
        when = self._normalizer.now() + timedelta(minutes=params.time_offset)
        data = await self._client.call(
            DEPARTURE_MONITOR_ENDPOINT,
            {
                "stopid": params.station_id,
                "limit": params.limit,
                "time": self._normalizer.format_upstream_time(when),
                "isarrival": False,
            },
        )
        departures = [self._to_departure(dep) for dep in as_list(dig(data, "Departures"))]
        return DepartureBoard(
            station_id=params.station_id,
            station_name=dig(data, "Name"),
            timestamp=self._normalizer.now_full(),
            count=len(departures),
            departures=departures,
        )

    def _to_departure(self, dep: Any) -> Departure:
        scheduled = dig(dep, "ScheduledTime")
        real = dig(dep, "RealTime")
        return Departure(
            line=dig(dep, "LineName"),
            direction=dig(dep, "Direction"),
            platform=dig(dep, "Platform", "Name"),
            scheduled_time=self._normalizer.format_short_time(scheduled),
            scheduled_time_full=self._normalizer.format_full_datetime(scheduled),
            real_time=self._normalizer.format_short_time(real),
            real_time_full=self._normalizer.format_full_datetime(real),
            delay=dig(dep, "Delay") or 0,
            state=dig(dep, "State"),
            route_changes=as_list(dig(dep, "RouteChanges")),
            # Vehicles with a DIVA class number are low-floor
            low_floor=bool(dig(dep, "Diva", "number")),
        )
