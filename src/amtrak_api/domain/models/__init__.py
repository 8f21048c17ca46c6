"""Domain models for the Amtrak API."""

from amtrak_api.domain.models.error_details import ErrorDetails
from amtrak_api.domain.models.responses import StationResponse, TrainResponse
from amtrak_api.domain.models.station import Station
from amtrak_api.domain.models.train import Alert, Train
from amtrak_api.domain.models.train_station import TrainStation
from amtrak_api.domain.models.train_status import TrainStatus

__all__ = [
    "Alert",
    "ErrorDetails",
    "Station",
    "StationResponse",
    "Train",
    "TrainResponse",
    "TrainStation",
    "TrainStatus",
]
