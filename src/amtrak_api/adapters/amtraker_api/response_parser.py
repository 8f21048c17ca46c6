"""Parser for Amtraker API responses.

Reconciles the response shapes the API actually produces into the domain
types. The per-field quirks (timestamps, statuses, null text) are handled by
the models themselves; this module deals with the payload as a whole:

- map responses that come back as ``[]`` instead of ``{}`` when empty
- error payloads of the form ``{"error": "..."}``
- turning every decoding or validation failure into a ``DeserializeFailedError``
"""

import json
import logging
from typing import Any

from pydantic import TypeAdapter, ValidationError

from amtrak_api.adapters.amtraker_api.constants import LOGGED_BODY_LIMIT
from amtrak_api.adapters.api_request_logger import describe_payload
from amtrak_api.domain.errors import (
    ApiErrorResponseError,
    DebuggingDeserializeFailedError,
    DeserializeFailedError,
)
from amtrak_api.domain.models.responses import StationResponse, TrainResponse

logger = logging.getLogger(__name__)

_TRAIN_RESPONSE_ADAPTER: TypeAdapter[TrainResponse] = TypeAdapter(TrainResponse)
_STATION_RESPONSE_ADAPTER: TypeAdapter[StationResponse] = TypeAdapter(StationResponse)


def _error_path(error: ValidationError) -> str:
    """Dotted location of the first validation failure, e.g. ``612.0.stations.3.schArr``."""
    errors = error.errors()
    if not errors:
        return ""
    return ".".join(str(part) for part in errors[0]["loc"])


def _error_reason(error: ValidationError) -> str:
    errors = error.errors()
    if not errors:
        return str(error)
    first = errors[0]
    extra = f" (+{len(errors) - 1} more)" if len(errors) > 1 else ""
    return f"{first['msg']}{extra}"


class ResponseParser:
    """Parses raw Amtraker response bodies into domain responses."""

    @staticmethod
    def parse_trains(body: bytes | str, debugging: bool = False) -> TrainResponse:
        """Parse a /trains or /trains/{id} response body.

        Args:
            body: Raw response body.
            debugging: Report the failing field path and the raw body on errors.

        Returns:
            Trains keyed by train number.

        Raises:
            DeserializeFailedError: If the body is not valid JSON or has the wrong shape.
            ApiErrorResponseError: If the API answered with an error payload.
        """
        return ResponseParser._parse(body, _TRAIN_RESPONSE_ADAPTER, "trains", debugging)

    @staticmethod
    def parse_stations(body: bytes | str, debugging: bool = False) -> StationResponse:
        """Parse a /stations or /stations/{code} response body.

        Args:
            body: Raw response body.
            debugging: Report the failing field path and the raw body on errors.

        Returns:
            Stations keyed by station code.

        Raises:
            DeserializeFailedError: If the body is not valid JSON or has the wrong shape.
            ApiErrorResponseError: If the API answered with an error payload.
        """
        return ResponseParser._parse(body, _STATION_RESPONSE_ADAPTER, "stations", debugging)

    @staticmethod
    def _parse(
        body: bytes | str, adapter: TypeAdapter[Any], what: str, debugging: bool
    ) -> Any:
        if isinstance(body, bytes):
            try:
                text = body.decode("utf-8")
            except UnicodeDecodeError as e:
                replaced = body.decode("utf-8", errors="replace")
                raise ResponseParser._failure(
                    f"invalid UTF-8: {e}", "", replaced, what, debugging
                ) from e
        else:
            text = body

        try:
            payload = json.loads(text)
        except (ValueError, RecursionError) as e:
            raise ResponseParser._failure(f"invalid JSON: {e}", "", text, what, debugging) from e

        ResponseParser._raise_for_error_payload(payload)
        payload = ResponseParser._normalize_map(payload, text, what, debugging)

        try:
            return adapter.validate_python(payload)
        except ValidationError as e:
            raise ResponseParser._failure(
                _error_reason(e), _error_path(e), text, what, debugging
            ) from e
        except RecursionError as e:
            raise ResponseParser._failure(
                f"payload nested too deeply: {e}", "", text, what, debugging
            ) from e

    @staticmethod
    def _raise_for_error_payload(payload: Any) -> None:
        """Raise if the payload is an upstream error report rather than data."""
        if not isinstance(payload, dict):
            return
        message = payload.get("error")
        if isinstance(message, str):
            logger.warning(f"Amtraker API reported an error: {message}")
            raise ApiErrorResponseError(message)

    @staticmethod
    def _normalize_map(payload: Any, text: str, what: str, debugging: bool) -> dict[str, Any]:
        """Map responses collapse to an empty array when there is nothing to report."""
        if isinstance(payload, dict):
            return payload
        if isinstance(payload, list) and not payload:
            return {}
        raise ResponseParser._failure(
            f"expected a JSON object, got {describe_payload(payload)}", "", text, what, debugging
        )

    @staticmethod
    def _failure(
        reason: str, path: str, text: str, what: str, debugging: bool
    ) -> DeserializeFailedError:
        location = f" at '{path}'" if path else ""
        if not debugging:
            logger.warning(f"Error parsing {what} response{location}: {reason}")
            return DeserializeFailedError(f"{reason}{location}")

        logger.warning(
            f"Error parsing {what} response{location}: {reason}; "
            f"body: {text[:LOGGED_BODY_LIMIT]}"
        )
        return DebuggingDeserializeFailedError(reason, path, text)
