"""Station domain model."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Station(BaseModel):
    """Represents a station in the Amtrak network."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str
    code: str
    tz: str | None = None
    lat: float | None = None
    lon: float | None = None
    has_address: bool = Field(default=False, alias="hasAddress")
    address1: str = ""
    address2: str = ""
    city: str = ""
    state: str = ""
    zip: str = ""
    trains: tuple[str, ...] = ()

    @field_validator("address1", "address2", "city", "state", "zip", mode="before")
    @classmethod
    def normalize_text(cls, value: Any) -> Any:
        """Treat null address parts as empty; zip codes sometimes arrive as numbers."""
        if value is None:
            return ""
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator("trains", mode="before")
    @classmethod
    def normalize_trains(cls, value: Any) -> Any:
        """Treat a null train list as empty."""
        return () if value is None else value

    @field_validator("has_address", mode="before")
    @classmethod
    def normalize_has_address(cls, value: Any) -> Any:
        """Treat a null flag as False."""
        return False if value is None else value
