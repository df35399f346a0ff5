"""Error details domain model."""

from pydantic import BaseModel, ConfigDict


class ErrorDetails(BaseModel):
    """Details about a failed procedure call, as reported to RPC clients."""

    model_config = ConfigDict(frozen=True)

    code: str
    message: str
    status_code: int | None = None
    details: list[dict] | None = None
