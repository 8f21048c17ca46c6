"""Amtrak API client.

The client exposes the endpoints of the Amtraker API as coroutines that
return immutable domain snapshots.

Example:
    async with Client() as client:
        for train_num, trains in (await client.trains()).items():
            for train in trains:
                print(train_num, train.route_name, train.destination_name)
"""

import logging
from types import TracebackType
from typing import TYPE_CHECKING

import aiohttp

from amtrak_api.adapters.amtraker_api import (
    AmtrakerHttpClient,
    AmtrakerStationRepository,
    AmtrakerTrainRepository,
)
from amtrak_api.adapters.config import ClientConfig
from amtrak_api.domain.models.responses import StationResponse, TrainResponse
from amtrak_api.domain.ports import StationRepository, TrainRepository

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientSession


class Client:
    """A client for the Amtraker API.

    This does not represent an active connection. Unless a session is passed
    in, or the client is used as an async context manager, a connection is
    established for each call and closed afterwards.
    """

    def __init__(
        self,
        base_url: str | None = None,
        session: "ClientSession | None" = None,
        config: ClientConfig | None = None,
    ) -> None:
        """Create a client.

        Args:
            base_url: Overrides the configured base URL (useful against a local test server).
            session: Optional aiohttp session shared across calls; the caller keeps ownership.
            config: Client configuration; read from the environment when omitted.
        """
        self._config = config or ClientConfig()
        self._owned_session: "ClientSession | None" = None
        self._http_client = AmtrakerHttpClient(
            session=session,
            base_url=base_url or self._config.base_url,
            timeout_seconds=self._config.timeout_seconds,
            log_requests=self._config.log_requests,
        )
        self._train_repository: TrainRepository = AmtrakerTrainRepository(self._http_client)
        self._station_repository: StationRepository = AmtrakerStationRepository(
            self._http_client
        )

    @classmethod
    def with_base_url(cls, base_url: str) -> "Client":
        """Create a client against a different endpoint than the public API."""
        return cls(base_url=base_url)

    @property
    def base_url(self) -> str:
        """Base URL the client sends requests to."""
        return self._http_client.base_url

    @property
    def debugging(self) -> bool:
        """Whether the plain operations use the debugging deserialization mode."""
        return self._config.debugging

    async def __aenter__(self) -> "Client":
        if self._http_client.session is None:
            self._owned_session = aiohttp.ClientSession()
            self._http_client.session = self._owned_session
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the session opened by ``async with``; sessions passed in are left alone."""
        if self._owned_session is not None:
            await self._owned_session.close()
            self._http_client.session = None
            self._owned_session = None

    async def trains(self) -> TrainResponse:
        """Return all trains being tracked, keyed by train number (``/trains``).

        Raises:
            RequestFailedError: If the request failed.
            DeserializeFailedError: If the response did not have the expected shape.
            ApiErrorResponseError: If the API reported an error.
        """
        return await self._train_repository.get_trains(debugging=self.debugging)

    async def trains_with_debugging(self) -> TrainResponse:
        """Same as :meth:`trains`, but deserialization errors carry the failing
        field path and the offending response body (``DebuggingDeserializeFailedError``).
        """
        return await self._train_repository.get_trains(debugging=True)

    async def train(self, train_identifier: str) -> TrainResponse:
        """Return the specified train(s) (``/trains/{train_identifier}``).

        Args:
            train_identifier: Either the train id (e.g. "612-5") or the train number
                (e.g. "612") of the train to query.

        Returns:
            Matching trains keyed by train number; empty when the train is not in
            the network.
        """
        return await self._train_repository.get_train(
            str(train_identifier), debugging=self.debugging
        )

    async def train_with_debugging(self, train_identifier: str) -> TrainResponse:
        """Same as :meth:`train`, using the debugging deserialization mode."""
        return await self._train_repository.get_train(str(train_identifier), debugging=True)

    async def stations(self) -> StationResponse:
        """Return all stations in the network, keyed by station code (``/stations``)."""
        return await self._station_repository.get_stations(debugging=self.debugging)

    async def stations_with_debugging(self) -> StationResponse:
        """Same as :meth:`stations`, using the debugging deserialization mode."""
        return await self._station_repository.get_stations(debugging=True)

    async def station(self, station_code: str) -> StationResponse:
        """Return the specified station (``/stations/{station_code}``).

        Args:
            station_code: Station code, e.g. "PHL".

        Returns:
            The station keyed by its code; empty when the code is unknown.
        """
        return await self._station_repository.get_station(
            station_code, debugging=self.debugging
        )

    async def station_with_debugging(self, station_code: str) -> StationResponse:
        """Same as :meth:`station`, using the debugging deserialization mode."""
        return await self._station_repository.get_station(station_code, debugging=True)
