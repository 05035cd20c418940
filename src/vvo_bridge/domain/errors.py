"""Domain error kinds surfaced to callers."""


class BridgeError(Exception):
    """Base class for failures that are rendered as an error envelope."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(BridgeError):
    """The caller supplied missing or invalid input (HTTP 400)."""

    def __init__(self, message: str, parameter: str | None = None) -> None:
        super().__init__(message)
        self.parameter = parameter


class UpstreamError(BridgeError):
    """The upstream provider call failed (HTTP 500).

    Carries the upstream status code for non-2xx responses. Transport failures
    have no status code and chain the underlying exception as ``__cause__``.
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
