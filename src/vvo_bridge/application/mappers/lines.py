"""Lines-for-station mapper."""

from typing import Any

from vvo_bridge.application.mappers.base import EndpointMapper
from vvo_bridge.application.mappers.params import LineParams
from vvo_bridge.application.navigation import as_list, dig
from vvo_bridge.domain.models import Line, StationLines

LINES_ENDPOINT = "/stt/lines"


class LineMapper(EndpointMapper[LineParams, StationLines]):
    """Lists the lines serving a station."""

    params_model = LineParams
    error_label = "Fehler beim Abrufen der Linien"
    missing_message = 'Parameter "stationId" ist erforderlich'

    async def map(self, params: LineParams) -> StationLines:
        data = await self._client.call(LINES_ENDPOINT, {"stopid": params.station_id})
        lines = [_to_line(line) for line in as_list(dig(data, "Lines"))]
        return StationLines(station_id=params.station_id, count=len(lines), lines=lines)


def _to_line(line: Any) -> Line:
    return Line(
        id=dig(line, "Id"),
        name=dig(line, "Name"),
        type=dig(line, "Mot", "Type"),
        type_name=dig(line, "Mot", "Name"),
        directions=as_list(dig(line, "Directions")),
    )
