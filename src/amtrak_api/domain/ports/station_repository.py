"""Station repository port."""

from typing import Protocol

from amtrak_api.domain.models.responses import StationResponse


class StationRepository(Protocol):
    """Port for retrieving station information."""

    async def get_stations(self, debugging: bool = False) -> StationResponse:
        """Return every station in the network, keyed by station code."""
        ...

    async def get_station(self, station_code: str, debugging: bool = False) -> StationResponse:
        """Return the station with the given code (empty if unknown)."""
        ...
