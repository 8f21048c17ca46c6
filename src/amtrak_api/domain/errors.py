"""Errors raised by the Amtrak API client.

Every failure surfaces as a subclass of :class:`AmtrakApiError`, so callers can
catch the whole family at once or tell apart:

- :class:`RequestFailedError` - the request never produced a usable response
  (connection problems, timeouts, non-2xx status codes)
- :class:`DeserializeFailedError` - a response arrived but its body did not
  match the expected shape
- :class:`ApiErrorResponseError` - the API answered with its own error payload
"""

from amtrak_api.domain.models.error_details import ErrorDetails


class AmtrakApiError(Exception):
    """Base class for all client errors."""

    kind = "error"

    def __init__(self, message: str, reason: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.reason = reason
        self.status_code = status_code

    @property
    def details(self) -> ErrorDetails:
        """Return the error as an immutable details record."""
        return ErrorDetails(kind=self.kind, reason=self.reason, status_code=self.status_code)


class RequestFailedError(AmtrakApiError):
    """The request could not be sent or did not succeed at the HTTP level."""

    kind = "request_failed"

    def __init__(self, reason: str, status_code: int | None = None) -> None:
        super().__init__(f"Unable to send the request: {reason}", reason, status_code)


class DeserializeFailedError(AmtrakApiError):
    """The response body could not be deserialized into the domain types."""

    kind = "deserialize_failed"

    def __init__(self, reason: str) -> None:
        super().__init__(f"Unable to deserialize the received value: {reason}", reason)


class DebuggingDeserializeFailedError(DeserializeFailedError):
    """Deserialization failure carrying the failing field path and the raw body.

    Raised by the ``*_with_debugging`` operations to make upstream shape changes
    easy to diagnose.
    """

    def __init__(self, reason: str, path: str, response: str) -> None:
        AmtrakApiError.__init__(
            self,
            f"Unable to deserialize the received value: {path or '<root>'}: {reason}: {response}",
            reason,
        )
        self.path = path
        self.response = response


class ApiErrorResponseError(AmtrakApiError):
    """The API returned an error payload instead of data."""

    kind = "api_error_response"

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(f"API returned an error response: {message}", message, status_code)
        self.message = message
