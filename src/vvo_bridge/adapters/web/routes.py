"""Route table of the bridge."""

from typing import TYPE_CHECKING, Any

from starlette.requests import Request
from starlette.responses import JSONResponse
from starlette.routing import Route

from vvo_bridge import __version__

from .error_envelope import endpoint_response

if TYPE_CHECKING:
    from vvo_bridge.application.mappers import EndpointMapper, EndpointMappers
    from vvo_bridge.application.normalizer import Normalizer

SERVICE_INFO: dict[str, Any] = {
    "name": "VVO API Bridge für Home Assistant",
    "version": __version__,
    "endpoints": {
        "/stations": "Haltestellen suchen",
        "/departures/:stationId": "Abfahrten einer Haltestelle",
        "/trip": "Verbindungen suchen",
        "/lines": "Linien einer Haltestelle",
        "/stops/:lineId": "Haltestellen einer Linie",
    },
    "vvo_data": {
        "stations": "Haltestellendaten (Name, ID, Koordinaten)",
        "departures": "Abfahrtszeiten mit Linie, Richtung, Verspätung",
        "trips": "Verbindungsvorschläge zwischen zwei Punkten",
        "lines": "Verfügbare Linien mit Typ (Bus, Bahn, etc.)",
        "real_time": "Echtzeitdaten für Verspätungen",
    },
}


def _mapper_endpoint(mapper: "EndpointMapper[Any, Any]") -> Any:
    """Create a handler feeding query and path parameters into ``mapper``."""

    async def handler(request: Request) -> JSONResponse:
        raw = {**request.query_params, **request.path_params}
        return await endpoint_response(mapper, raw)

    return handler


def build_routes(mappers: "EndpointMappers", normalizer: "Normalizer") -> list[Route]:
    """Build one route per mapper plus the info and health routes."""

    async def service_info(_request: Request) -> JSONResponse:
        return JSONResponse(SERVICE_INFO)

    async def health(_request: Request) -> JSONResponse:
        """Health check endpoint for load balancers and monitoring."""
        return JSONResponse({"status": "OK", "timestamp": normalizer.now_full()})

    return [
        Route("/", service_info, methods=["GET"]),
        Route("/stations", _mapper_endpoint(mappers.stations), methods=["GET"]),
        Route("/departures/{stationId}", _mapper_endpoint(mappers.departures), methods=["GET"]),
        Route("/trip", _mapper_endpoint(mappers.trips), methods=["GET"]),
        Route("/lines/{stationId}", _mapper_endpoint(mappers.lines), methods=["GET"]),
        Route("/stops/{lineId}", _mapper_endpoint(mappers.stops), methods=["GET"]),
        Route("/health", health, methods=["GET"]),
    ]
