"""Opt-in tracing of outgoing VVO API calls.

Enabled with ``VVO_LOG_REQUESTS=true``. Each call is logged twice: once with
the final URL as aiohttp sends it, and once with the upstream status and the
round-trip time.
"""

import logging
import os
from collections.abc import Mapping

from yarl import URL

logger = logging.getLogger(__name__)

REQUEST_LOG_ENV = "VVO_LOG_REQUESTS"
_ENABLED_VALUES = {"1", "true", "yes", "on"}


def should_log_requests() -> bool:
    """Check whether VVO request tracing is switched on."""
    return os.getenv(REQUEST_LOG_ENV, "").strip().lower() in _ENABLED_VALUES


def request_url(url: str, query: Mapping[str, str] | None = None) -> URL:
    """Return ``url`` with ``query`` encoded the same way aiohttp encodes it."""
    target = URL(url)
    return target.update_query(dict(query)) if query else target


def log_vvo_request(endpoint: str, url: str, query: Mapping[str, str] | None = None) -> None:
    """Log an outgoing VVO call with its encoded query string."""
    if not should_log_requests():
        return
    logger.info(f"VVO {endpoint} -> GET {request_url(url, query)}")


def log_vvo_response(endpoint: str, status: int | None, elapsed_seconds: float) -> None:
    """Log the outcome of a VVO call.

    ``status`` is None when no response arrived (timeout or transport failure).
    """
    if not should_log_requests():
        return
    outcome = status if status is not None else "no response"
    logger.info(f"VVO {endpoint} <- {outcome} in {elapsed_seconds * 1000:.0f} ms")
