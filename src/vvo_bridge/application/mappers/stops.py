"""Stops-for-line mapper."""

from typing import Any

from vvo_bridge.application.mappers.base import EndpointMapper
from vvo_bridge.application.mappers.params import StopParams
from vvo_bridge.application.navigation import as_list, dig
from vvo_bridge.domain.models import LineStops, Stop

STOPS_ENDPOINT = "/stt/stops"


class StopMapper(EndpointMapper[StopParams, LineStops]):
    """Lists the stops along a line."""

    params_model = StopParams
    error_label = "Fehler beim Abrufen der Haltestellen"
    missing_message = 'Parameter "lineId" ist erforderlich'

    async def map(self, params: StopParams) -> LineStops:
        data = await self._client.call(STOPS_ENDPOINT, {"lineid": params.line_id})
        stops = [self._to_stop(stop) for stop in as_list(dig(data, "Stops"))]
        return LineStops(line_id=params.line_id, count=len(stops), stops=stops)

    def _to_stop(self, stop: Any) -> Stop:
        return Stop(
            id=dig(stop, "Id"),
            name=dig(stop, "Name"),
            city=dig(stop, "City"),
            coords=self._normalizer.scale_coordinate(dig(stop, "Coord")),
        )
