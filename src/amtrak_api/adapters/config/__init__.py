"""Configuration adapters."""

from amtrak_api.adapters.config.client_config import ClientConfig

__all__ = ["ClientConfig"]
