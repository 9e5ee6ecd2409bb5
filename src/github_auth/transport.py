"""HTTP transport layer for talking to the GitHub API."""

import logging
from dataclasses import dataclass
from typing import Any, Protocol

import httpx

from .exceptions import TransportError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Response:
    status: int
    body: str


class Transport(Protocol):
    """Anything that can issue a GET and hand back a status and raw body.

    Implementations raise TransportError when the remote cannot be reached.
    """

    def get(self, url: str, headers: dict[str, str] | None = None) -> Response: ...


class HttpxTransport:
    """Synchronous httpx-backed transport. Makes a single attempt per request."""

    def __init__(self, timeout: float = 10.0, client: httpx.Client | None = None) -> None:
        self._timeout = timeout
        self._owns_client = client is None
        self._client = client or httpx.Client(timeout=httpx.Timeout(timeout))

    def __enter__(self) -> "HttpxTransport":
        return self

    def __exit__(self, exc_type: type | None, exc_val: Any, exc_tb: Any) -> None:
        self.close()

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def get(self, url: str, headers: dict[str, str] | None = None) -> Response:
        logger.debug("GET %s", url)
        try:
            resp = self._client.get(url, headers=headers)
        except httpx.TimeoutException as e:
            raise TransportError(f"Request to {url} timed out after {self._timeout}s: {e}") from e
        except httpx.RequestError as e:
            raise TransportError(f"Request to {url} failed: {e}") from e
        return Response(status=resp.status_code, body=resp.text)
