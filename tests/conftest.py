"""Pytest fixtures for github_auth tests."""
import json

import pytest

from github_auth.config import ClientConfig
from github_auth.exceptions import TransportError
from github_auth.transport import Response


class FakeTransport:
    """Records every GET and answers with a canned response or error."""

    def __init__(self, response: Response | None = None, error: Exception | None = None) -> None:
        self.response = response or Response(status=200, body="[]")
        self.error = error
        self.calls: list[tuple[str, dict[str, str] | None]] = []

    def get(self, url: str, headers: dict[str, str] | None = None) -> Response:
        self.calls.append((url, headers))
        if self.error is not None:
            raise self.error
        return self.response


def json_response(body: object, status: int = 200) -> Response:
    return Response(status=status, body=json.dumps(body))


@pytest.fixture
def client_config() -> ClientConfig:
    return ClientConfig(product="github_auth", version="9.9.9")


@pytest.fixture
def transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture
def keys_body() -> list[dict]:
    return [{"id": 123, "key": "abc123"}, {"id": 456, "key": "def456"}]


@pytest.fixture
def unavailable_transport() -> FakeTransport:
    return FakeTransport(error=TransportError("Oops!"))
