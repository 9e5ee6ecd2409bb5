"""KeysClient: fetch a GitHub user's public SSH keys."""

import logging
import threading
from typing import Any
from urllib.parse import quote_plus

from pydantic import ValidationError

from .config import ClientConfig
from .exceptions import (
    GitHubUnavailableError,
    GitHubUnexpectedResponseError,
    GitHubUserDoesNotExistError,
    TransportError,
    UsernameRequiredError,
)
from .key import Key
from .transport import HttpxTransport, Transport
from .types import KeyRecordList

logger = logging.getLogger(__name__)


class KeysClient:
    """Fetches the public keys of one GitHub user.

    The request is made on the first call to :meth:`keys` and the result is
    kept for the lifetime of the instance. A failed fetch is not kept; the
    next call tries again. Concurrent first calls share a single request.
    Use as a context manager (or call :meth:`close`) to release the default
    transport.
    """

    def __init__(self, username: str | None = None, *, config: ClientConfig | None = None,
                 transport: Transport | None = None) -> None:
        if not username:
            raise UsernameRequiredError("A GitHub username is required")
        self._username = quote_plus(username)
        self._config = config or ClientConfig()
        self._owns_transport = transport is None
        self._transport = transport or HttpxTransport(timeout=self._config.timeout)
        self._keys: list[Key] | None = None
        self._lock = threading.Lock()

    def __enter__(self) -> "KeysClient":
        return self

    def __exit__(self, exc_type: type | None, exc_val: Any, exc_tb: Any) -> None:
        self.close()

    def close(self) -> None:
        """Release the default transport. An injected transport is left to its owner."""
        if self._owns_transport:
            self._transport.close()

    @property
    def username(self) -> str:
        """The URL-escaped username."""
        return self._username

    @property
    def url(self) -> str:
        # "." and ".." would otherwise be collapsed as dot segments
        segment = self._username.replace(".", "%2E") if set(self._username) == {"."} else self._username
        return f"{self._config.api_base.rstrip('/')}/users/{segment}/keys"

    def keys(self) -> list[Key]:
        if self._keys is None:
            with self._lock:
                if self._keys is None:
                    self._keys = self._fetch()
        return list(self._keys)

    def _fetch(self) -> list[Key]:
        headers = {"User-Agent": self._config.user_agent}
        logger.debug("Fetching keys for %s", self._username)
        try:
            resp = self._transport.get(self.url, headers=headers)
        except TransportError as e:
            raise GitHubUnavailableError(f"GitHub is unavailable: {e}") from e

        if resp.status == 404:
            raise GitHubUserDoesNotExistError(f"GitHub user {self._username} does not exist")
        if resp.status != 200:
            logger.warning("Unexpected status %d fetching keys for %s", resp.status, self._username)
            raise GitHubUnexpectedResponseError(f"Unexpected response from GitHub: {resp.status}", resp.status)

        try:
            records = KeyRecordList.validate_json(resp.body)
        except ValidationError as e:
            raise GitHubUnexpectedResponseError(f"Malformed keys response for {self._username}: {e}", resp.status) from e

        keys = [Key(self._username, r.key, self._config.profile_base) for r in records]
        logger.debug("Fetched %d keys for %s", len(keys), self._username)
        return keys
