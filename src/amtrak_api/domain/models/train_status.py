"""Train status domain model."""

from enum import Enum


class TrainStatus(str, Enum):
    """Status of a train relative to one of its stops."""

    ENROUTE = "Enroute"  # Left the previous stop, not yet arrived here
    STATION = "Station"  # Currently at the stop
    DEPARTED = "Departed"  # Has left the stop
    UNKNOWN = "Unknown"  # Not reported, or a value we do not recognize

    @classmethod
    def from_upstream(cls, value: object) -> "TrainStatus":
        """Map a raw status value onto a known status, defaulting to UNKNOWN."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            wanted = value.strip().lower()
            for status in cls:
                if status.value.lower() == wanted:
                    return status
        return cls.UNKNOWN
