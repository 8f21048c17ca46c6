"""Response shapes returned by the client operations."""

from amtrak_api.domain.models.station import Station
from amtrak_api.domain.models.train import Train

# Keyed by train number; several trains can share a number (e.g. on different days)
TrainResponse = dict[str, list[Train]]

# Keyed by station code
StationResponse = dict[str, Station]
