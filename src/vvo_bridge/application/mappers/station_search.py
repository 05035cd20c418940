"""Station search mapper (VVO point finder)."""

from typing import Any

from vvo_bridge.application.mappers.base import EndpointMapper
from vvo_bridge.application.mappers.params import StationSearchParams
from vvo_bridge.application.navigation import as_list, dig
from vvo_bridge.domain.models import Station, StationSearchResult

POINT_FINDER_ENDPOINT = "/tr/pointfinder"


class StationSearchMapper(EndpointMapper[StationSearchParams, StationSearchResult]):
    """Searches stations by free text."""

    params_model = StationSearchParams
    error_label = "Fehler beim Abrufen der Haltestellen"
    missing_message = "Query parameter ist erforderlich"

    async def map(self, params: StationSearchParams) -> StationSearchResult:
        data = await self._client.call(
            POINT_FINDER_ENDPOINT,
            {
                "query": params.query,
                "limit": params.limit,
                "assignedstops": True,
                "type_sf": True,
            },
        )
        stations = [self._to_station(point) for point in as_list(dig(data, "Points"))]
        return StationSearchResult(query=params.query, count=len(stations), stations=stations)

    def _to_station(self, point: Any) -> Station:
        return Station(
            id=dig(point, "id"),
            name=dig(point, "name"),
            city=dig(point, "city"),
            coords=self._normalizer.scale_coordinate(dig(point, "coords")),
            type=dig(point, "type"),
        )
