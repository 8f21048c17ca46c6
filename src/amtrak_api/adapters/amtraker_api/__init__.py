"""Amtraker API adapters."""

from amtrak_api.adapters.amtraker_api.amtraker_station_repository import (
    AmtrakerStationRepository,
)
from amtrak_api.adapters.amtraker_api.amtraker_train_repository import AmtrakerTrainRepository
from amtrak_api.adapters.amtraker_api.http_client import AmtrakerHttpClient
from amtrak_api.adapters.amtraker_api.response_parser import ResponseParser

__all__ = [
    "AmtrakerHttpClient",
    "AmtrakerStationRepository",
    "AmtrakerTrainRepository",
    "ResponseParser",
]
