"""Ports (interfaces) for the ports-and-adapters architecture."""

from amtrak_api.domain.ports.station_repository import StationRepository
from amtrak_api.domain.ports.train_repository import TrainRepository

__all__ = [
    "StationRepository",
    "TrainRepository",
]
