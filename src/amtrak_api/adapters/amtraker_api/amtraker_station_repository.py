"""Amtraker station repository adapter."""

from amtrak_api.adapters.amtraker_api.constants import STATIONS_PATH
from amtrak_api.adapters.amtraker_api.http_client import AmtrakerHttpClient
from amtrak_api.adapters.amtraker_api.response_parser import ResponseParser
from amtrak_api.domain.models.responses import StationResponse
from amtrak_api.domain.ports.station_repository import StationRepository


class AmtrakerStationRepository(StationRepository):
    """Adapter for the /stations endpoints of the Amtraker API."""

    def __init__(self, http_client: AmtrakerHttpClient) -> None:
        self._http_client = http_client

    async def get_stations(self, debugging: bool = False) -> StationResponse:
        """Return every station in the network, keyed by station code."""
        body = await self._http_client.get(STATIONS_PATH)
        return ResponseParser.parse_stations(body, debugging=debugging)

    async def get_station(self, station_code: str, debugging: bool = False) -> StationResponse:
        """Return the station with the given code; the API answers ``[]`` for unknown codes."""
        body = await self._http_client.get(STATIONS_PATH, station_code)
        return ResponseParser.parse_stations(body, debugging=debugging)
