"""HTTP client for VVO API requests.

Uses the public VVO web API (https://webapi.vvo-online.de).
"""

import asyncio
import logging
import time
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

import aiohttp

from vvo_bridge.adapters.api_request_logger import log_vvo_request, log_vvo_response
from vvo_bridge.adapters.vvo_api.constants import (
    DEFAULT_HEADERS,
    ERROR_BODY_LOG_LIMIT,
    VVO_BASE_URL,
)
from vvo_bridge.domain.errors import UpstreamError
from vvo_bridge.domain.ports import TransitApiClient

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientResponse, ClientSession


def _stringify(value: Any) -> str:
    """Render a query value the way the VVO API expects it."""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def build_query_params(params: Mapping[str, Any] | None) -> dict[str, str]:
    """Drop None values and stringify the rest."""
    if not params:
        return {}
    return {key: _stringify(value) for key, value in params.items() if value is not None}


class VvoHttpClient(TransitApiClient):
    """HTTP client for the VVO web API.

    Every call is a single GET; failures are reported immediately as
    UpstreamError without retrying.
    """

    def __init__(
        self,
        session: "ClientSession",
        base_url: str = VVO_BASE_URL,
        timeout_seconds: float | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            session: Shared aiohttp session.
            base_url: VVO API base URL without trailing slash.
            timeout_seconds: Total timeout per request, or None for no timeout.
        """
        self._session = session
        self._base_url = base_url.rstrip("/")
        self._timeout = aiohttp.ClientTimeout(total=timeout_seconds)

    def build_url(self, endpoint: str) -> str:
        """Join the base URL and an endpoint path."""
        if not endpoint.startswith("/"):
            endpoint = f"/{endpoint}"
        return f"{self._base_url}{endpoint}"

    async def _log_error_response(self, response: "ClientResponse", url: str) -> None:
        """Log error response details.

        The body is decoded leniently; VVO error pages are not always UTF-8.
        """
        try:
            raw_body = await response.read()
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.warning(f"Could not read error body from {url}: {e}")
            raw_body = b""
        error_text = raw_body[:ERROR_BODY_LOG_LIMIT].decode("utf-8", errors="replace")
        error_body = error_text if error_text else "(empty response body)"
        content_type = response.headers.get("Content-Type", "unknown")
        logger.error(
            f"VVO API returned status {response.status} for {url}: "
            f"{error_body} (Content-Type: {content_type})"
        )

    async def _handle_response(self, response: "ClientResponse", url: str) -> Any:
        """Decode a successful response or raise UpstreamError."""
        if not 200 <= response.status < 300:
            await self._log_error_response(response, url)
            raise UpstreamError(f"VVO API Error: {response.status}", status_code=response.status)

        try:
            return await response.json(content_type=None)
        except ValueError as e:
            logger.error(f"VVO API returned invalid JSON for {url}: {e}")
            raise UpstreamError(f"VVO API returned invalid JSON: {e}") from e

    async def call(self, endpoint: str, params: Mapping[str, Any] | None = None) -> Any:
        """Issue a GET request against the VVO API.

        Args:
            endpoint: Endpoint path, e.g. ``/dm``.
            params: Query parameters; None values are skipped.

        Returns:
            The decoded JSON body.

        Raises:
            UpstreamError: On a non-2xx status, a transport failure or a timeout.
        """
        url = self.build_url(endpoint)
        query = build_query_params(params)
        log_vvo_request(endpoint, url, query)
        started = time.monotonic()
        status: int | None = None

        try:
            async with self._session.get(
                url, params=query, headers=DEFAULT_HEADERS, timeout=self._timeout
            ) as response:
                status = response.status
                return await self._handle_response(response, url)
        except UpstreamError:
            raise
        except asyncio.TimeoutError as e:
            logger.warning(f"VVO API call timed out for {url}")
            raise UpstreamError(f"VVO API request timed out: {url}") from e
        except aiohttp.ClientError as e:
            logger.warning(f"VVO API call failed for {url}: {e}")
            raise UpstreamError(str(e) or type(e).__name__) from e
        finally:
            log_vvo_response(endpoint, status, time.monotonic() - started)
