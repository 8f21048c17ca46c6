"""Summary of a failed API call."""

from pydantic import BaseModel, ConfigDict


class ErrorDetails(BaseModel):
    """What went wrong with a call: the error kind, a reason and the HTTP status if any."""

    model_config = ConfigDict(frozen=True)

    kind: str
    reason: str
    status_code: int | None = None
