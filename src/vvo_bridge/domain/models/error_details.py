"""Error envelope domain model."""

from pydantic import BaseModel, ConfigDict


class ErrorDetails(BaseModel):
    """Uniform error body returned for every failed request."""

    model_config = ConfigDict(frozen=True)

    error: str
    message: str | None = None
    available_endpoints: list[str] | None = None

    def to_dict(self) -> dict[str, object]:
        """Convert to a JSON body, leaving out unset fields."""
        return self.model_dump(exclude_none=True)
