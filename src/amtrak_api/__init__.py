"""Typed async client for the Amtraker train and station status API."""

from amtrak_api.adapters.config import ClientConfig
from amtrak_api.client import Client
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

__version__ = "0.2.0"

__all__ = [
    "Alert",
    "AmtrakApiError",
    "ApiErrorResponseError",
    "ClientConfig",
    "Client",
    "DebuggingDeserializeFailedError",
    "DeserializeFailedError",
    "ErrorDetails",
    "RequestFailedError",
    "Station",
    "StationResponse",
    "Train",
    "TrainResponse",
    "TrainStation",
    "TrainStatus",
    "__version__",
]
