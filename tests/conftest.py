"""Shared fixtures for the VVO bridge tests."""

from collections.abc import Mapping
from typing import Any

import pytest

from vvo_bridge.application import Normalizer


class FakeTransitClient:
    """In-memory stand-in for the VVO API client.

    Responses are keyed by endpoint path. An exception instance as response is
    raised instead of returned.
    """

    def __init__(self, responses: dict[str, Any] | None = None) -> None:
        """Initialize with canned responses per endpoint."""
        self.responses = responses or {}
        self.calls: list[tuple[str, dict[str, Any]]] = []

    async def call(self, endpoint: str, params: Mapping[str, Any] | None = None) -> Any:
        """Record the call and return the canned response."""
        self.calls.append((endpoint, dict(params or {})))
        response = self.responses.get(endpoint, {})
        if isinstance(response, Exception):
            raise response
        return response

    @property
    def last_params(self) -> dict[str, Any]:
        """Parameters of the most recent call."""
        return self.calls[-1][1]


@pytest.fixture
def normalizer() -> Normalizer:
    """Normalizer rendering in Europe/Berlin."""
    return Normalizer("Europe/Berlin")


@pytest.fixture
def fake_client() -> FakeTransitClient:
    """Fake client without canned responses."""
    return FakeTransitClient()
