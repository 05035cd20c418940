"""Common validate -> delegate -> map flow shared by all endpoint mappers."""

import logging
from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, ClassVar, Generic, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from vvo_bridge.domain.errors import ValidationError

if TYPE_CHECKING:
    from vvo_bridge.application.normalizer import Normalizer
    from vvo_bridge.domain.ports import TransitApiClient

logger = logging.getLogger(__name__)

ParamsT = TypeVar("ParamsT", bound=BaseModel)
ResultT = TypeVar("ResultT")

# pydantic error types that mean "the caller did not provide this parameter"
_MISSING_ERROR_TYPES = {"missing", "string_too_short"}

INVALID_REQUEST_LABEL = "Ungültige Anfrage"


class EndpointMapper(ABC, Generic[ParamsT, ResultT]):
    """Translates one caller-facing endpoint into an upstream call.

    Subclasses declare their parameter model, the localized error label used
    when the call fails, and the message for missing required parameters.
    """

    params_model: ClassVar[type[BaseModel]]
    error_label: ClassVar[str]
    missing_message: ClassVar[str]

    def __init__(self, client: "TransitApiClient", normalizer: "Normalizer") -> None:
        """Initialize with the upstream client and the normalizer."""
        self._client = client
        self._normalizer = normalizer

    def validate(self, raw: Mapping[str, Any]) -> ParamsT:
        """Parse raw query/path values into the typed parameter model.

        Raises:
            ValidationError: If a required parameter is missing or a value
                cannot be converted.
        """
        try:
            params: ParamsT = self.params_model.model_validate(dict(raw))  # type: ignore[assignment]
        except PydanticValidationError as e:
            raise self._to_validation_error(e) from e
        return params

    def _to_validation_error(self, error: PydanticValidationError) -> ValidationError:
        details = error.errors()
        missing = [d for d in details if d["type"] in _MISSING_ERROR_TYPES]
        if missing:
            return ValidationError(self.missing_message, parameter=_parameter_name(missing[0]))
        parameter = _parameter_name(details[0])
        return ValidationError(INVALID_REQUEST_LABEL, parameter=parameter)

    async def handle(self, raw: Mapping[str, Any]) -> ResultT:
        """Validate ``raw``, call upstream and map the response."""
        params = self.validate(raw)
        logger.debug(f"{type(self).__name__} handling {params!r}")
        return await self.map(params)

    @abstractmethod
    async def map(self, params: ParamsT) -> ResultT:
        """Call upstream with validated parameters and build the result."""
        ...


def _parameter_name(detail: Mapping[str, Any]) -> str | None:
    loc = detail.get("loc") or ()
    return str(loc[0]) if loc else None
