"""
Pytest configuration and shared fixtures for client tests.

This file provides:
- A factory for clients wired to an httpx.MockTransport handler
- A fake Pantry server that stores baskets in memory and deep-merges updates
- Marker registration
"""

import json
from typing import Any, AsyncGenerator, Callable
from urllib.parse import unquote

import httpx
import pytest
import pytest_asyncio

from pantry_client import PantryClient

PANTRY_ID = "test-pantry-id"
BASE_URL = "https://getpantry.cloud/apiv1"
BASKET_TTL = 2592000

Handler = Callable[[httpx.Request], httpx.Response]


def deep_merge(target: dict, source: dict) -> dict:
    """Merge source into target the way Pantry does: nested objects merge, arrays extend."""
    for key, value in source.items():
        current = target.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            deep_merge(current, value)
        elif isinstance(current, list) and isinstance(value, list):
            target[key] = current + value
        else:
            target[key] = value
    return target


class FakePantryServer:
    """In-memory stand-in for the Pantry API, used as a MockTransport handler."""

    def __init__(self, pantry_id: str = PANTRY_ID):
        self.pantry_id = pantry_id
        self.name = "Test Pantry"
        self.description = "Pantry used in tests"
        self.baskets: dict[str, Any] = {}
        self.requests: list[httpx.Request] = []

    def details(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "errors": [],
            "notifications": True,
            "percentFull": len(self.baskets),
            "baskets": [{"name": name, "ttl": BASKET_TTL} for name in self.baskets],
        }

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)

        path = request.url.raw_path.decode("ascii")
        prefix = f"/apiv1/pantry/{self.pantry_id}"
        if not path.startswith(prefix):
            return self._text(400, "Could not get pantry: pantry not found")

        rest = path[len(prefix):]
        if rest == "":
            return self._pantry(request)
        if rest.startswith("/basket/"):
            return self._basket(request, unquote(rest[len("/basket/"):]))
        return self._text(404, "Not Found")

    def _pantry(self, request: httpx.Request) -> httpx.Response:
        if request.method == "PUT":
            update = json.loads(request.content)
            self.name = update.get("name", self.name)
            self.description = update.get("description", self.description)
        return httpx.Response(200, json=self.details())

    def _basket(self, request: httpx.Request, name: str) -> httpx.Response:
        if request.method == "POST":
            self.baskets[name] = json.loads(request.content)
            return self._text(200, f"Your Pantry was updated with basket: {name}!")

        verbs = {"GET": "get", "PUT": "update", "DELETE": "delete"}
        if name not in self.baskets:
            return self._text(400, f"Could not {verbs[request.method]} basket: {name} does not exist")

        if request.method == "PUT":
            deep_merge(self.baskets[name], json.loads(request.content))
            return httpx.Response(200, json=self.baskets[name])
        if request.method == "DELETE":
            del self.baskets[name]
            return self._text(200, f"{name} was removed from your Pantry!")
        return httpx.Response(200, json=self.baskets[name])

    @staticmethod
    def _text(status_code: int, text: str) -> httpx.Response:
        return httpx.Response(status_code, text=text, headers={"content-type": "text/html; charset=utf-8"})


# =============================================================================
# Client Fixtures
# =============================================================================

@pytest_asyncio.fixture
async def make_client() -> AsyncGenerator[Callable[..., PantryClient], None]:
    """
    Factory for a PantryClient whose transport is the given handler.

    Extra keyword arguments are passed to PantryClient (e.g. strict=True).
    The underlying httpx clients are closed after the test.
    """
    http_clients: list[httpx.AsyncClient] = []

    def _make(handler: Handler, **kwargs) -> PantryClient:
        http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        http_clients.append(http_client)
        return PantryClient(PANTRY_ID, http_client.request, **kwargs)

    yield _make

    for http_client in http_clients:
        await http_client.aclose()


@pytest.fixture
def recorded() -> list[httpx.Request]:
    """Requests seen by handlers built with respond_with."""
    return []


@pytest.fixture
def respond_with(recorded) -> Callable[..., Handler]:
    """Build a handler that records each request and returns a fixed response."""
    def _respond(status_code: int = 200, **response_kwargs) -> Handler:
        def handler(request: httpx.Request) -> httpx.Response:
            recorded.append(request)
            return httpx.Response(status_code, **response_kwargs)
        return handler
    return _respond


# =============================================================================
# Fake Server Fixtures
# =============================================================================

@pytest.fixture
def fake_pantry() -> FakePantryServer:
    return FakePantryServer()


@pytest.fixture
def pantry(fake_pantry, make_client) -> PantryClient:
    """Client talking to the in-memory fake Pantry server."""
    return make_client(fake_pantry)


# =============================================================================
# Pytest Configuration
# =============================================================================

def pytest_configure(config):
    """Pytest configuration hook."""
    config.addinivalue_line(
        "markers", "unit: mark test as a unit test"
    )
    config.addinivalue_line(
        "markers", "integration: mark test as an integration test against the fake server"
    )
