"""Transit API client port."""

from collections.abc import Mapping
from typing import Any, Protocol


class TransitApiClient(Protocol):
    """Port for calling the upstream transit provider."""

    async def call(self, endpoint: str, params: Mapping[str, Any] | None = None) -> Any:
        """Issue a GET request to ``endpoint`` and return the decoded JSON body.

        Raises:
            UpstreamError: On a non-2xx status or a transport failure.
        """
        ...
