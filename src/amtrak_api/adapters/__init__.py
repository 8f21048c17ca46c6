"""Adapters layer - external system integrations."""

from amtrak_api.adapters.amtraker_api import (
    AmtrakerHttpClient,
    AmtrakerStationRepository,
    AmtrakerTrainRepository,
)
from amtrak_api.adapters.config import ClientConfig

__all__ = [
    "AmtrakerHttpClient",
    "AmtrakerStationRepository",
    "AmtrakerTrainRepository",
    "ClientConfig",
]
