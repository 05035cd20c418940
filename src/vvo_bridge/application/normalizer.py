"""Time and coordinate normalization for upstream VVO data."""

from collections.abc import Sequence
from datetime import UTC, datetime
from typing import Any
from zoneinfo import ZoneInfo

from vvo_bridge.domain.models import Coordinates

# VVO encodes coordinates as integers scaled by this factor
COORDINATE_SCALE = 1_000_000

SHORT_TIME_FORMAT = "%H:%M"
FULL_DATETIME_FORMAT = "%d.%m.%Y, %H:%M"


class Normalizer:
    """Renders upstream timestamps and coordinates in the caller-facing format.

    All times are rendered in a single fixed time zone, independent of the
    server or client locale.
    """

    def __init__(self, timezone: str = "Europe/Berlin") -> None:
        """Initialize the normalizer.

        Args:
            timezone: IANA name of the zone all displayed times are rendered in.
        """
        self.timezone = ZoneInfo(timezone)

    @staticmethod
    def parse_timestamp(raw: Any) -> datetime | None:
        """Parse an upstream timestamp into an aware datetime.

        Accepts ISO 8601 strings (naive strings are taken as UTC) and epoch
        milliseconds. Returns None when the value cannot be parsed.
        """
        if isinstance(raw, bool):
            return None
        if isinstance(raw, int | float):
            try:
                return datetime.fromtimestamp(raw / 1000, UTC)
            except (OverflowError, OSError, ValueError):
                return None
        if not isinstance(raw, str):
            return None
        try:
            parsed = datetime.fromisoformat(raw.strip().replace("Z", "+00:00"))
        except ValueError:
            return None
        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=UTC)
        return parsed

    def _format(self, raw: Any, pattern: str) -> Any:
        if raw is None or raw == "":
            return None
        parsed = self.parse_timestamp(raw)
        if parsed is None:
            # Unparseable values are passed through untouched
            return raw
        return parsed.astimezone(self.timezone).strftime(pattern)

    def format_short_time(self, raw: Any) -> str | None:
        """Format a timestamp as ``HH:MM`` (24-hour) in the fixed time zone."""
        return self._format(raw, SHORT_TIME_FORMAT)

    def format_full_datetime(self, raw: Any) -> str | None:
        """Format a timestamp as ``DD.MM.YYYY, HH:MM`` in the fixed time zone."""
        return self._format(raw, FULL_DATETIME_FORMAT)

    @staticmethod
    def scale_coordinate(raw_pair: Sequence[Any] | None) -> Coordinates:
        """Convert a VVO ``[lng * 1e6, lat * 1e6]`` pair to decimal degrees.

        A missing or malformed pair yields Coordinates with both fields None.
        """
        return Coordinates(
            lat=_scaled(raw_pair, 1),
            lng=_scaled(raw_pair, 0),
        )

    @staticmethod
    def format_upstream_time(moment: datetime) -> str:
        """Format a datetime the way VVO expects request times (UTC, ms, ``Z``)."""
        if moment.tzinfo is None:
            moment = moment.replace(tzinfo=UTC)
        utc = moment.astimezone(UTC)
        return utc.strftime("%Y-%m-%dT%H:%M:%S.") + f"{utc.microsecond // 1000:03d}Z"

    @staticmethod
    def now() -> datetime:
        """Current time as an aware UTC datetime."""
        return datetime.now(UTC)

    def now_full(self) -> str:
        """Current time in the full display format."""
        return self.now().astimezone(self.timezone).strftime(FULL_DATETIME_FORMAT)


def _scaled(raw_pair: Sequence[Any] | None, index: int) -> float | None:
    if not isinstance(raw_pair, list | tuple) or len(raw_pair) <= index:
        return None
    value = raw_pair[index]
    if isinstance(value, bool) or not isinstance(value, int | float):
        return None
    return value / COORDINATE_SCALE
