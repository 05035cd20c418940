"""Uniform JSON error envelope and the boundary that produces it."""

import logging
from typing import TYPE_CHECKING, Any

from starlette.exceptions import HTTPException
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

from vvo_bridge.domain.errors import UpstreamError, ValidationError
from vvo_bridge.domain.models import ErrorDetails

if TYPE_CHECKING:
    from collections.abc import Mapping

    from vvo_bridge.application.mappers import EndpointMapper

logger = logging.getLogger(__name__)

NOT_FOUND_LABEL = "Endpoint nicht gefunden"
INTERNAL_ERROR_LABEL = "Interner Serverfehler"

AVAILABLE_ENDPOINTS = [
    "GET /",
    "GET /stations?query=<suchbegriff>",
    "GET /departures/:stationId",
    "GET /trip?from=<start>&to=<ziel>",
    "GET /lines/:stationId",
    "GET /stops/:lineId",
]


def error_response(error: str, message: str | None = None, status_code: int = 500) -> JSONResponse:
    """Render the error envelope."""
    details = ErrorDetails(error=error, message=message)
    return JSONResponse(details.to_dict(), status_code=status_code)


def validation_error_response(error: ValidationError) -> JSONResponse:
    """Render a 400 envelope for missing or invalid parameters."""
    message = (
        f"Fehlender oder ungültiger Parameter: {error.parameter}"
        if error.parameter
        else error.message
    )
    return error_response(error.message, message, status_code=400)


def not_found_response() -> JSONResponse:
    """Render the 404 envelope listing the available routes."""
    details = ErrorDetails(error=NOT_FOUND_LABEL, available_endpoints=AVAILABLE_ENDPOINTS)
    return JSONResponse(details.to_dict(), status_code=404)


async def endpoint_response(
    mapper: "EndpointMapper[Any, Any]", raw: "Mapping[str, Any]"
) -> JSONResponse:
    """Run a mapper and turn its outcome into exactly one response shape.

    Successful results are serialized as-is. Validation failures become a 400
    envelope; every other failure becomes a 500 envelope carrying the
    mapper's localized label.
    """
    try:
        result = await mapper.handle(raw)
    except ValidationError as e:
        logger.info(f"Rejected request for {type(mapper).__name__}: {e.message}")
        return validation_error_response(e)
    except UpstreamError as e:
        logger.error(f"{type(mapper).__name__} upstream call failed: {e.message}")
        return error_response(mapper.error_label, e.message)
    except Exception as e:
        logger.exception(f"{type(mapper).__name__} failed while mapping the response")
        return error_response(mapper.error_label, str(e) or type(e).__name__)
    return JSONResponse(result.to_dict())


async def not_found_handler(_request: Request, _exc: HTTPException) -> JSONResponse:
    """Exception handler for unmatched paths and unsupported methods."""
    return not_found_response()


async def internal_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Fallback for failures that escape a route."""
    logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc}", exc_info=exc)
    return error_response(INTERNAL_ERROR_LABEL, str(exc) or type(exc).__name__)


class ErrorEnvelopeMiddleware(BaseHTTPMiddleware):
    """Turns failures escaping a route into the 500 envelope.

    Installed inside CORSMiddleware so these responses carry CORS headers too.
    """

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        try:
            return await call_next(request)
        except Exception as exc:
            return await internal_error_handler(request, exc)
