"""HTTP client for Amtraker API requests.

Uses the public Amtraker v3 API.
"""

import asyncio
import logging
from typing import TYPE_CHECKING
from urllib.parse import quote

import aiohttp

from amtrak_api.adapters.amtraker_api.constants import (
    BASE_API_URL,
    DEFAULT_HEADERS,
    DEFAULT_TIMEOUT_SECONDS,
    LOGGED_BODY_LIMIT,
)
from amtrak_api.adapters.api_request_logger import log_api_request, log_api_response
from amtrak_api.domain.errors import RequestFailedError

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientResponse, ClientSession


class AmtrakerHttpClient:
    """HTTP client for the Amtraker API.

    Does not hold a connection open: when no session is attached, a short-lived
    session is created for each request and closed afterwards.
    """

    def __init__(
        self,
        session: "ClientSession | None" = None,
        base_url: str = BASE_API_URL,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
        log_requests: bool = False,
    ) -> None:
        """Initialize with an optional aiohttp session.

        Args:
            session: Optional aiohttp ClientSession shared across requests.
            base_url: Base URL every endpoint path is appended to.
            timeout_seconds: Total timeout for a single request.
            log_requests: Log every request regardless of the environment switch.
        """
        self.session = session
        self._base_url = base_url.rstrip("/")
        self._timeout = aiohttp.ClientTimeout(total=timeout_seconds)
        self._log_requests = log_requests

    @property
    def base_url(self) -> str:
        """Base URL every endpoint path is appended to."""
        return self._base_url

    def build_url(self, *segments: str) -> str:
        """Join path segments onto the base URL, quoting each one.

        Args:
            segments: Path segments, e.g. ("trains", "612-5").

        Returns:
            Absolute URL.
        """
        path = "/".join(quote(segment, safe="") for segment in segments)
        return f"{self._base_url}/{path}"

    @staticmethod
    def _log_error_response(response: "ClientResponse", body: bytes, url: str) -> None:
        """Log error response details."""
        error_text = body[:LOGGED_BODY_LIMIT].decode("utf-8", errors="replace")
        error_body = error_text or "(empty response body)"
        content_type = response.headers.get("Content-Type", "unknown")
        server = response.headers.get("Server", "unknown")
        logger.error(
            f"Amtraker API returned status {response.status} for {url}: "
            f"{error_body} (Content-Type: {content_type}, Server: {server})"
        )

    async def _fetch(self, session: "ClientSession", url: str) -> bytes:
        async with session.get(url, headers=DEFAULT_HEADERS, timeout=self._timeout) as response:
            body = await response.read()
            log_api_response(url, response.status, body, enabled=self._log_requests)

            if not 200 <= response.status < 300:
                self._log_error_response(response, body, url)
                raise RequestFailedError(
                    f"HTTP status {response.status} for {url}", status_code=response.status
                )

            return body

    async def get(self, *segments: str) -> bytes:
        """Send a GET request and return the raw response body.

        Args:
            segments: Path segments below the base URL.

        Returns:
            Response body bytes.

        Raises:
            RequestFailedError: On connection errors, timeouts or non-2xx status codes.
        """
        url = self.build_url(*segments)
        log_api_request("GET", url, headers=DEFAULT_HEADERS, enabled=self._log_requests)

        try:
            if self.session is not None:
                return await self._fetch(self.session, url)
            async with aiohttp.ClientSession() as session:
                return await self._fetch(session, url)
        except asyncio.TimeoutError as e:
            logger.warning(f"Request to {url} timed out")
            raise RequestFailedError(f"request to {url} timed out") from e
        except aiohttp.ClientError as e:
            logger.warning(f"Error requesting {url}: {e}")
            raise RequestFailedError(str(e) or type(e).__name__) from e
