"""Fetch a GitHub user's public SSH keys."""

from ._constants import VERSION
from .config import ClientConfig, load_config_from_env
from .exceptions import (
    GitHubAuthError,
    GitHubUnavailableError,
    GitHubUnexpectedResponseError,
    GitHubUserDoesNotExistError,
    TransportError,
    UsernameRequiredError,
)
from .key import Key
from .keys_client import KeysClient
from .transport import HttpxTransport, Response, Transport
from .types import ErrorKind, KeyRecord

__all__ = [
    "VERSION",
    "KeysClient", "Key", "KeyRecord",
    "ClientConfig", "load_config_from_env",
    "Transport", "HttpxTransport", "Response",
    "ErrorKind", "GitHubAuthError", "UsernameRequiredError", "GitHubUserDoesNotExistError",
    "GitHubUnavailableError", "GitHubUnexpectedResponseError", "TransportError",
]

__version__ = VERSION
