"""Safe navigation through nested upstream JSON."""

from typing import Any


def dig(data: Any, *path: str | int) -> Any:
    """Follow ``path`` through nested dicts and lists.

    String steps index dicts, integer steps index lists (negative indices
    count from the end). Returns None as soon as a step is missing or the
    current value has the wrong type.

    Example:
        dig(route, "PartialRoutes", -1, "RegularStops", -1, "ArrivalTime")
    """
    current = data
    for step in path:
        if isinstance(step, str):
            if not isinstance(current, dict):
                return None
            current = current.get(step)
        else:
            if not isinstance(current, list):
                return None
            try:
                current = current[step]
            except IndexError:
                return None
        if current is None:
            return None
    return current


def as_list(value: Any) -> list[Any]:
    """Return ``value`` if it is a list, else an empty list."""
    return value if isinstance(value, list) else []
