"""Normalization of the timestamp encodings found in Amtraker responses.

The API is not consistent about how it serializes times. Depending on the
train and stop we have seen:

- RFC 3339 with a numeric offset: ``2024-05-01T10:15:00-04:00``
- a ``Z`` suffix, optionally with fractional seconds: ``2024-05-01T14:15:00.123Z``
- naive local timestamps: ``2024-05-01T10:15:00`` or ``2024-05-01 10:15:00``
- epoch milliseconds as a JSON number
- ``null`` or an empty string when no time is known

Everything is normalized to a timezone-aware ``datetime`` or ``None``.
"""

import re
from datetime import UTC, datetime, tzinfo
from typing import Any
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

# Calendar date and wall time, optional seconds, fraction and numeric offset
_TIMESTAMP_PATTERN = re.compile(
    r"\d{4}-\d{2}-\d{2}[Tt ]\d{2}:\d{2}(:\d{2}(\.\d+)?)?([+-]\d{2}:?\d{2})?"
)


def resolve_zone(tz_name: str | None) -> tzinfo:
    """Resolve an IANA zone name, falling back to UTC when unknown."""
    if not tz_name:
        return UTC
    try:
        return ZoneInfo(tz_name)
    except (ZoneInfoNotFoundError, ValueError):
        return UTC


def _ensure_aware(value: datetime, tz_name: str | None) -> datetime:
    if value.tzinfo is not None:
        return value
    return value.replace(tzinfo=resolve_zone(tz_name))


def parse_timestamp(value: Any, tz_name: str | None = None) -> datetime | None:
    """Parse any of the upstream timestamp encodings.

    Args:
        value: Raw JSON value from the response.
        tz_name: IANA zone used to interpret naive timestamps (e.g. the stop's ``tz``).

    Returns:
        Timezone-aware datetime, or None when the value carries no time.

    Raises:
        ValueError: If the value is present but in no recognized format.
    """
    if value is None:
        return None

    if isinstance(value, datetime):
        return _ensure_aware(value, tz_name)

    # bool is a subclass of int and never a valid timestamp
    if isinstance(value, bool):
        raise ValueError(f"unsupported timestamp value: {value!r}")

    if isinstance(value, int | float):
        try:
            return datetime.fromtimestamp(value / 1000, tz=UTC)
        except (OverflowError, OSError, ValueError) as e:
            raise ValueError(f"epoch timestamp out of range: {value!r}") from e

    if not isinstance(value, str):
        raise ValueError(f"unsupported timestamp type: {type(value).__name__}")

    text = value.strip()
    if not text:
        return None

    if text[-1] in ("Z", "z"):
        text = f"{text[:-1]}+00:00"

    if not _TIMESTAMP_PATTERN.fullmatch(text):
        raise ValueError(f"unrecognized timestamp format: {value!r}")

    try:
        parsed = datetime.fromisoformat(text)
    except ValueError as e:
        raise ValueError(f"unrecognized timestamp format: {value!r}") from e

    return _ensure_aware(parsed, tz_name)
