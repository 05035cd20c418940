"""Tests for safe navigation through upstream JSON."""

from vvo_bridge.application.navigation import as_list, dig

ROUTE = {
    "PartialRoutes": [
        {"RegularStops": [{"Name": "Hauptbahnhof"}, {"Name": "Postplatz"}]},
        {"RegularStops": [{"Name": "Albertplatz"}]},
    ]
}


def test_dig_follows_keys_and_indices() -> None:
    """Given a nested structure, when digging, then returns the addressed value."""
    assert dig(ROUTE, "PartialRoutes", 0, "RegularStops", 0, "Name") == "Hauptbahnhof"


def test_dig_supports_negative_indices() -> None:
    """Given negative indices, when digging, then counts from the end."""
    assert dig(ROUTE, "PartialRoutes", -1, "RegularStops", -1, "Name") == "Albertplatz"


def test_dig_returns_none_for_missing_key() -> None:
    """Given a missing key, when digging, then returns None."""
    assert dig(ROUTE, "Routes", 0, "Name") is None


def test_dig_returns_none_for_empty_list() -> None:
    """Given an empty list, when indexing it, then returns None instead of raising."""
    assert dig({"PartialRoutes": []}, "PartialRoutes", -1, "RegularStops") is None


def test_dig_returns_none_for_wrong_type() -> None:
    """Given a value of unexpected type, when digging through it, then returns None."""
    assert dig({"PartialRoutes": "oops"}, "PartialRoutes", 0) is None
    assert dig(None, "Name") is None


def test_dig_keeps_falsy_leaf_values() -> None:
    """Given a falsy but present leaf, when digging, then returns it."""
    assert dig({"Delay": 0}, "Delay") == 0


def test_as_list_only_accepts_lists() -> None:
    """Given non-list values, when normalizing, then returns an empty list."""
    assert as_list([1, 2]) == [1, 2]
    assert as_list(None) == []
    assert as_list({"a": 1}) == []
