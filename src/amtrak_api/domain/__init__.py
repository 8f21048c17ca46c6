"""Domain layer - models, errors and ports."""

from amtrak_api.domain.errors import (
    AmtrakApiError,
    ApiErrorResponseError,
    DebuggingDeserializeFailedError,
    DeserializeFailedError,
    RequestFailedError,
)
from amtrak_api.domain.models import (
    Alert,
    ErrorDetails,
    Station,
    StationResponse,
    Train,
    TrainResponse,
    TrainStation,
    TrainStatus,
)
from amtrak_api.domain.ports import StationRepository, TrainRepository

__all__ = [
    "Alert",
    "AmtrakApiError",
    "ApiErrorResponseError",
    "DebuggingDeserializeFailedError",
    "DeserializeFailedError",
    "ErrorDetails",
    "RequestFailedError",
    "Station",
    "StationRepository",
    "StationResponse",
    "Train",
    "TrainRepository",
    "TrainResponse",
    "TrainStation",
    "TrainStatus",
]
