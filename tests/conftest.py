"""Pytest configuration and fixtures for grid-console tests."""

from typing import Any, Dict, List, Optional

import httpx
import pytest

from grid_console.config.settings import ConsoleSettings
from grid_console.rest.dispatcher import AuthenticationDispatcher


ENDPOINT = "http://grid.example:11222/rest/v2"


class MockTokenProvider:
    """Mock implementation of TokenIdentityProvider for testing."""

    def __init__(self, initialized: bool = False, token: Optional[str] = None):
        self.initialized = initialized
        self.token = token

    def is_initialized(self) -> bool:
        return self.initialized

    def get_token(self) -> Optional[str]:
        return self.token


class MockAuthenticatedClient:
    """Mock challenge/response client recording every fetch."""

    def __init__(self, response: Optional[httpx.Response] = None, error: Optional[Exception] = None):
        self.response = response or httpx.Response(200, text="")
        self.error = error
        self.calls: List[Dict[str, Any]] = []

    async def fetch(self, url: str, options: Dict[str, Any]) -> httpx.Response:
        self.calls.append({"url": url, "options": options})
        if self.error is not None:
            raise self.error
        return self.response


class MockAuthentication:
    """Mock implementation of AuthenticationCapability for testing."""

    def __init__(self, not_secured: bool = False, client: Optional[MockAuthenticatedClient] = None):
        self.not_secured = not_secured
        self.client = client or MockAuthenticatedClient()

    def is_not_secured(self) -> bool:
        return self.not_secured

    def get_authenticated_client(self) -> MockAuthenticatedClient:
        return self.client


class RecordingHandler:
    """httpx.MockTransport handler answering from a route table and recording requests."""

    def __init__(self, routes: Optional[Dict[str, httpx.Response]] = None, default: Optional[httpx.Response] = None):
        self.routes = routes or {}
        self.default = default or httpx.Response(200, text="")
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        key = f"{request.method} {request.url.raw_path.decode()}"
        return self.routes.get(key, self.default)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


def make_dispatcher(
    handler: RecordingHandler,
    token_provider: Optional[MockTokenProvider] = None,
    authentication: Optional[MockAuthentication] = None
) -> AuthenticationDispatcher:
    """Dispatcher whose direct transport answers through ``handler``."""
    return AuthenticationDispatcher(
        token_provider or MockTokenProvider(initialized=True, token="token-abc"),
        authentication or MockAuthentication(),
        http_client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
    )


@pytest.fixture
def token_provider():
    """Initialized token provider."""
    return MockTokenProvider(initialized=True, token="token-abc")


@pytest.fixture
def uninitialized_provider():
    """Token provider without a token."""
    return MockTokenProvider(initialized=False)


@pytest.fixture
def secured_authentication():
    """Authentication capability of a secured server."""
    return MockAuthentication(not_secured=False)


@pytest.fixture
def handler():
    """Recording handler answering 200 with an empty body."""
    return RecordingHandler()


@pytest.fixture
def settings():
    """Console settings independent from the environment."""
    return ConsoleSettings(
        _env_file=None,
        server_url="http://grid.example:11222",
        security_enabled=True,
        digest_username="admin",
        digest_password="secret",
    )
