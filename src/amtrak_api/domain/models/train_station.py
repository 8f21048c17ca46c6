"""Train station (a stop along a train's route) domain model."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from amtrak_api.domain.models.timestamps import parse_timestamp
from amtrak_api.domain.models.train_status import TrainStatus


class TrainStation(BaseModel):
    """A single stop of a train, with scheduled and actual/estimated times."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str
    code: str
    # Declared before the timestamps so naive times can be read in this zone
    tz: str | None = None
    bus: bool = False
    scheduled_arrival: datetime | None = Field(default=None, alias="schArr")
    scheduled_departure: datetime | None = Field(default=None, alias="schDep")
    arrival: datetime | None = Field(default=None, alias="arr")
    departure: datetime | None = Field(default=None, alias="dep")
    arrival_comment: str = Field(default="", alias="arrCmnt")
    departure_comment: str = Field(default="", alias="depCmnt")
    platform: str = ""
    status: TrainStatus = TrainStatus.UNKNOWN

    @field_validator(
        "scheduled_arrival", "scheduled_departure", "arrival", "departure", mode="before"
    )
    @classmethod
    def normalize_timestamp(cls, value: Any, info: ValidationInfo) -> datetime | None:
        """Accept every timestamp encoding the API uses, in the stop's time zone."""
        return parse_timestamp(value, info.data.get("tz"))

    @field_validator("arrival_comment", "departure_comment", "platform", mode="before")
    @classmethod
    def normalize_text(cls, value: Any) -> Any:
        """Treat null text fields as empty."""
        if value is None:
            return ""
        if isinstance(value, int | float) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator("bus", mode="before")
    @classmethod
    def normalize_bus(cls, value: Any) -> Any:
        """Treat a null bus flag as False."""
        return False if value is None else value

    @field_validator("status", mode="before")
    @classmethod
    def normalize_status(cls, value: Any) -> TrainStatus:
        """Map unrecognized status strings to UNKNOWN instead of failing."""
        return TrainStatus.from_upstream(value)
