"""Pytest configuration and fixtures."""

import asyncio
from typing import AsyncGenerator, Dict, List, Optional, Tuple

import httpx
import pytest

from shortify_client.config import Config
from shortify_client.lib.backend import BackendClient
from shortify_client.lib.common.logging_config import setup_logging
from shortify_client.web_app import create_app

BACKEND_URL = "http://backend.test"


class FakeBackend:
    """Programmable stand-in for the Shortify backend, served through httpx.MockTransport."""

    def __init__(self):
        self.routes: Dict[Tuple[str, str], dict] = {}
        self.requests: List[httpx.Request] = []

    def add(
        self,
        method: str,
        path: str,
        status_code: int = 200,
        json=None,
        content: Optional[bytes] = None,
        error: Optional[Exception] = None,
        gate: Optional[asyncio.Event] = None,
    ):
        """Answer ``method path`` with the given response (or raise ``error``).

        When ``gate`` is given the response is held back until it is set.
        """
        self.routes[(method, path)] = {
            "status_code": status_code,
            "json": json,
            "content": content,
            "error": error,
            "gate": gate,
        }

    def count(self, method: str, path: str) -> int:
        return sum(
            1 for r in self.requests
            if r.method == method and r.url.path == path
        )

    async def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes.get((request.method, request.url.path))
        if route is None:
            return httpx.Response(404, json={"message": "No such route"})
        if route["gate"] is not None:
            await route["gate"].wait()
        if route["error"] is not None:
            raise route["error"]
        if route["content"] is not None:
            return httpx.Response(route["status_code"], content=route["content"])
        if route["json"] is None:
            return httpx.Response(route["status_code"])
        return httpx.Response(route["status_code"], json=route["json"])


@pytest.fixture
def logger():
    """Create test logger."""
    return setup_logging(level="DEBUG")


@pytest.fixture
def fake_backend():
    return FakeBackend()


@pytest.fixture
async def backend(fake_backend, logger) -> AsyncGenerator[BackendClient, None]:
    """Backend client talking to the fake backend."""
    client = BackendClient(
        base_url=BACKEND_URL,
        transport=httpx.MockTransport(fake_backend.handler),
        logger=logger,
    )

    yield client

    await client.close()


@pytest.fixture
def config():
    return Config(api_base_url=BACKEND_URL, max_sessions=10)


@pytest.fixture
def app(backend, config, logger):
    """Create test FastAPI app."""
    return create_app(backend=backend, config=config, logger=logger)


@pytest.fixture
async def client(app):
    """Create test client for the web front."""
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as ac:
        yield ac


@pytest.fixture
def sample_urls():
    """Sample URLs for testing."""
    return [
        "https://example.com/very/long/path",
        "https://github.com/user/repo",
        "https://stackoverflow.com/questions/123456",
    ]
