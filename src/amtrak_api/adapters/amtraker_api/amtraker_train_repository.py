"""Amtraker train repository adapter."""

import logging

from amtrak_api.adapters.amtraker_api.constants import TRAINS_PATH
from amtrak_api.adapters.amtraker_api.http_client import AmtrakerHttpClient
from amtrak_api.adapters.amtraker_api.response_parser import ResponseParser
from amtrak_api.domain.models.responses import TrainResponse
from amtrak_api.domain.ports.train_repository import TrainRepository

logger = logging.getLogger(__name__)


class AmtrakerTrainRepository(TrainRepository):
    """Adapter for the /trains endpoints of the Amtraker API."""

    def __init__(self, http_client: AmtrakerHttpClient) -> None:
        """Initialize with the HTTP client used for every request.

        Args:
            http_client: Client for the Amtraker API.
        """
        self._http_client = http_client

    async def get_trains(self, debugging: bool = False) -> TrainResponse:
        """Return every train currently tracked, keyed by train number.

        Args:
            debugging: Report the failing field path and raw body on parse errors.

        Returns:
            Trains keyed by train number.
        """
        body = await self._http_client.get(TRAINS_PATH)
        trains = ResponseParser.parse_trains(body, debugging=debugging)
        logger.debug(f"Fetched {sum(len(t) for t in trains.values())} train(s)")
        return trains

    async def get_train(self, train_identifier: str, debugging: bool = False) -> TrainResponse:
        """Return the train(s) matching a train id or train number.

        Args:
            train_identifier: Train id (e.g. "612-5") or train number (e.g. "612").
            debugging: Report the failing field path and raw body on parse errors.

        Returns:
            Matching trains keyed by train number; empty if none is running.
        """
        body = await self._http_client.get(TRAINS_PATH, train_identifier)
        return ResponseParser.parse_trains(body, debugging=debugging)
