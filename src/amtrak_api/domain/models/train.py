"""Train domain model."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from amtrak_api.domain.models.timestamps import parse_timestamp
from amtrak_api.domain.models.train_station import TrainStation
from amtrak_api.domain.models.train_status import TrainStatus


class Alert(BaseModel):
    """A service alert attached to a train."""

    model_config = ConfigDict(frozen=True)

    message: str


class Train(BaseModel):
    """A train currently tracked by the Amtrak network.

    ``stations`` keeps the upstream stop order, from origin to destination.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    route_name: str = Field(alias="routeName")
    train_num: str = Field(alias="trainNum")
    train_num_raw: str = Field(default="", alias="trainNumRaw")
    train_id: str = Field(alias="trainID")
    lat: float | None = None
    lon: float | None = None
    train_timely: str = Field(default="", alias="trainTimely")
    icon_color: str = Field(default="", alias="iconColor")
    text_color: str = Field(default="", alias="textColor")
    stations: tuple[TrainStation, ...]
    heading: str = ""
    event_code: str = Field(default="", alias="eventCode")
    event_tz: str | None = Field(default=None, alias="eventTZ")
    event_name: str | None = Field(default=None, alias="eventName")
    origin_code: str = Field(default="", alias="origCode")
    origin_tz: str | None = Field(default=None, alias="originTZ")
    origin_name: str = Field(default="", alias="origName")
    destination_code: str = Field(alias="destCode")
    destination_tz: str | None = Field(default=None, alias="destTZ")
    destination_name: str = Field(alias="destName")
    train_state: str = Field(default="", alias="trainState")
    velocity: float | None = None
    status_message: str = Field(default="", alias="statusMsg")
    created_at: datetime | None = Field(default=None, alias="createdAt")
    updated_at: datetime | None = Field(default=None, alias="updatedAt")
    last_value: datetime | None = Field(default=None, alias="lastValTS")
    object_id: int | None = Field(default=None, alias="objectID")
    provider: str = ""
    provider_short: str = Field(default="", alias="providerShort")
    only_of_train_num: bool = Field(default=False, alias="onlyOfTrainNum")
    alerts: tuple[Alert, ...] = ()

    @field_validator("train_num", "train_num_raw", mode="before")
    @classmethod
    def normalize_train_number(cls, value: Any) -> Any:
        """Train numbers arrive both as JSON numbers and as strings."""
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator(
        "train_timely",
        "icon_color",
        "text_color",
        "heading",
        "event_code",
        "origin_name",
        "origin_code",
        "train_state",
        "status_message",
        "provider",
        "provider_short",
        mode="before",
    )
    @classmethod
    def normalize_text(cls, value: Any) -> Any:
        """Treat null text fields as empty."""
        return "" if value is None else value

    @field_validator("alerts", mode="before")
    @classmethod
    def normalize_alerts(cls, value: Any) -> Any:
        """Treat a null alert list as empty."""
        return () if value is None else value

    @field_validator("created_at", "updated_at", "last_value", mode="before")
    @classmethod
    def normalize_timestamp(cls, value: Any) -> datetime | None:
        """Accept every timestamp encoding the API uses."""
        return parse_timestamp(value)

    def enroute_station(self) -> TrainStation | None:
        """Return the stop the train is currently heading to, if any."""
        for station in self.stations:
            if station.status == TrainStatus.ENROUTE:
                return station
        return None

    def find_station(self, code: str) -> TrainStation | None:
        """Return the stop with the given station code, if the train serves it."""
        wanted = code.upper()
        for station in self.stations:
            if station.code.upper() == wanted:
                return station
        return None
