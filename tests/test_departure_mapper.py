"""Behavior-focused tests for the departure monitor mapper."""

import re
from datetime import UTC, datetime, timedelta
from unittest.mock import patch

import pytest

from vvo_bridge.application import Normalizer
from vvo_bridge.application.mappers import DepartureMapper
from vvo_bridge.domain.errors import ValidationError

FULL_PATTERN = re.compile(r"^\d{2}\.\d{2}\.\d{4}, \d{2}:\d{2}$")

FIXED_NOW = datetime(2024, 3, 15, 14, 0, tzinfo=UTC)


@pytest.fixture
def departure_response() -> dict:
    """A departure monitor response with one complete departure."""
    return {
        "Name": "Postplatz",
        "Departures": [
            {
                "LineName": "11",
                "Direction": "Bühlau",
                "Platform": {"Name": "3", "Type": "Platform"},
                "ScheduledTime": "2024-03-15T14:30:00Z",
                "RealTime": "2024-03-15T14:32:00Z",
                "Delay": 2,
                "State": "Delayed",
                "RouteChanges": ["511188"],
                "Diva": {"Number": "11011", "number": "11011"},
            }
        ],
    }


@pytest.mark.asyncio
async def test_when_departures_returned_then_maps_all_fields(
    fake_client, normalizer: Normalizer, departure_response: dict
) -> None:
    """Given a departure, when mapping, then every field is renamed and times are localized."""
    fake_client.responses["/dm"] = departure_response

    board = await DepartureMapper(fake_client, normalizer).handle({"stationId": "33000037"})

    assert board.station_id == "33000037"
    assert board.station_name == "Postplatz"
    assert board.count == 1
    assert FULL_PATTERN.match(board.timestamp)
    departure = board.departures[0]
    assert departure.line == "11"
    assert departure.direction == "Bühlau"
    assert departure.platform == "3"
    assert departure.scheduled_time == "15:30"
    assert departure.scheduled_time_full == "15.03.2024, 15:30"
    assert departure.real_time == "15:32"
    assert departure.real_time_full == "15.03.2024, 15:32"
    assert departure.delay == 2
    assert departure.state == "Delayed"
    assert departure.route_changes == ["511188"]
    assert departure.low_floor is True


@pytest.mark.asyncio
async def test_when_optional_fields_absent_then_defaults_apply(
    fake_client, normalizer: Normalizer
) -> None:
    """Given a departure without Delay, RouteChanges, Platform, RealTime or Diva, then defaults apply."""
    fake_client.responses["/dm"] = {
        "Name": "Postplatz",
        "Departures": [{"LineName": "4", "ScheduledTime": "2024-03-15T14:30:00Z"}],
    }

    board = await DepartureMapper(fake_client, normalizer).handle({"stationId": "33000037"})

    departure = board.departures[0]
    assert departure.delay == 0
    assert departure.route_changes == []
    assert departure.platform is None
    assert departure.real_time is None
    assert departure.real_time_full is None
    assert departure.low_floor is False


@pytest.mark.asyncio
async def test_when_departures_absent_then_returns_empty_board(
    fake_client, normalizer: Normalizer
) -> None:
    """Given no Departures array, when mapping, then departures is empty and count is 0."""
    fake_client.responses["/dm"] = {"Name": "Postplatz"}

    board = await DepartureMapper(fake_client, normalizer).handle({"stationId": "33000037"})

    assert board.departures == []
    assert board.count == 0


@pytest.mark.asyncio
async def test_when_querying_then_sends_defaults_and_current_time(
    fake_client, normalizer: Normalizer
) -> None:
    """Given no options, when querying, then limit 20 and the current time are sent."""
    with patch.object(Normalizer, "now", return_value=FIXED_NOW):
        await DepartureMapper(fake_client, normalizer).handle({"stationId": "33000037"})

    endpoint, params = fake_client.calls[0]
    assert endpoint == "/dm"
    assert params == {
        "stopid": "33000037",
        "limit": 20,
        "time": "2024-03-15T14:00:00.000Z",
        "isarrival": False,
    }


@pytest.mark.asyncio
async def test_when_time_offset_given_then_shifts_query_time(
    fake_client, normalizer: Normalizer
) -> None:
    """Given time_offset in minutes, when querying, then the upstream time is shifted."""
    with patch.object(Normalizer, "now", return_value=FIXED_NOW):
        await DepartureMapper(fake_client, normalizer).handle(
            {"stationId": "33000037", "time_offset": "15", "limit": "5"}
        )

    expected = Normalizer.format_upstream_time(FIXED_NOW + timedelta(minutes=15))
    assert fake_client.last_params["time"] == expected
    assert fake_client.last_params["limit"] == 5


@pytest.mark.asyncio
async def test_when_time_offset_invalid_then_raises_validation_error(
    fake_client, normalizer: Normalizer
) -> None:
    """Given a non-numeric time_offset, when querying, then ValidationError names it."""
    with pytest.raises(ValidationError) as exc_info:
        await DepartureMapper(fake_client, normalizer).handle(
            {"stationId": "33000037", "time_offset": "bald"}
        )

    assert exc_info.value.parameter == "time_offset"


@pytest.mark.asyncio
async def test_when_timestamps_unparseable_then_passed_through(
    fake_client, normalizer: Normalizer
) -> None:
    """Given unparseable upstream times, when mapping, then they appear verbatim."""
    raw_time = "/Date(1710513000000+0100)/"
    fake_client.responses["/dm"] = {"Departures": [{"ScheduledTime": raw_time}]}

    board = await DepartureMapper(fake_client, normalizer).handle({"stationId": "1"})

    assert board.departures[0].scheduled_time == raw_time
    assert board.departures[0].scheduled_time_full == raw_time
    assert board.station_name is None
