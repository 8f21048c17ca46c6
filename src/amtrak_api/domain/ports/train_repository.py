"""Train repository port."""

from typing import Protocol

from amtrak_api.domain.models.responses import TrainResponse


class TrainRepository(Protocol):
    """Port for retrieving train status."""

    async def get_trains(self, debugging: bool = False) -> TrainResponse:
        """Return every train currently tracked, keyed by train number."""
        ...

    async def get_train(self, train_identifier: str, debugging: bool = False) -> TrainResponse:
        """Return the train(s) matching a train id (e.g. "612-5") or train number."""
        ...
