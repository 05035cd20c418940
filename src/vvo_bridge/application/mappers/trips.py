"""Trip search mapper."""

from typing import Any

from vvo_bridge.application.mappers.base import EndpointMapper
from vvo_bridge.application.mappers.params import TripParams
from vvo_bridge.application.navigation import as_list, dig
from vvo_bridge.domain.models import Leg, Trip, TripEndpoint, TripSearchResult

TRIP_ENDPOINT = "/tr/trips"


class TripMapper(EndpointMapper[TripParams, TripSearchResult]):
    """Plans connections between two points.

    The departure summary of a trip is taken from the first stop of its first
    leg, the arrival summary from the last stop of its last leg. Missing legs
    or stops leave the summary fields empty.
    """

    params_model = TripParams
    error_label = "Fehler beim Abrufen der Verbindungen"
    missing_message = 'Parameter "from" und "to" sind erforderlich'

    async def map(self, params: TripParams) -> TripSearchResult:
        trip_time = params.time or self._normalizer.now()
        if trip_time.tzinfo is None:
            trip_time = trip_time.replace(tzinfo=self._normalizer.timezone)

        data = await self._client.call(
            TRIP_ENDPOINT,
            {
                "from": params.from_,
                "to": params.to,
                "time": self._normalizer.format_upstream_time(trip_time),
                "isarrival": params.is_arrival,
                "maxchanges": params.max_changes,
                "shorttermchanges": True,
                "walkingspeed": "normal",
            },
        )
        trips = [self._to_trip(route) for route in as_list(dig(data, "Routes"))]
        return TripSearchResult(
            from_=params.from_,
            to=params.to,
            timestamp=self._normalizer.now_full(),
            count=len(trips),
            trips=trips,
        )

    def _to_trip(self, route: Any) -> Trip:
        first_stop = dig(route, "PartialRoutes", 0, "RegularStops", 0)
        last_stop = dig(route, "PartialRoutes", -1, "RegularStops", -1)
        return Trip(
            duration=dig(route, "Duration"),
            changes=dig(route, "Changes"),
            departure=self._to_endpoint(
                dig(first_stop, "DepartureTime"), dig(first_stop, "Name")
            ),
            arrival=self._to_endpoint(dig(last_stop, "ArrivalTime"), dig(last_stop, "Name")),
            parts=[self._to_leg(part) for part in as_list(dig(route, "PartialRoutes"))],
        )

    def _to_endpoint(self, time: Any, station: Any) -> TripEndpoint:
        return TripEndpoint(
            time=self._normalizer.format_short_time(time),
            time_full=self._normalizer.format_full_datetime(time),
            station=station,
        )

    def _to_leg(self, part: Any) -> Leg:
        departure_time = dig(part, "RegularStops", 0, "DepartureTime")
        arrival_time = dig(part, "RegularStops", -1, "ArrivalTime")
        return Leg(
            line=dig(part, "Mot", "Name"),
            direction=dig(part, "Direction"),
            departure_time=self._normalizer.format_short_time(departure_time),
            departure_time_full=self._normalizer.format_full_datetime(departure_time),
            arrival_time=self._normalizer.format_short_time(arrival_time),
            arrival_time_full=self._normalizer.format_full_datetime(arrival_time),
            duration=dig(part, "Duration"),
        )
