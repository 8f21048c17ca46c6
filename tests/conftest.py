"""Shared fixtures: sample Amtraker payloads and a local HTTP server."""

import json
from collections.abc import AsyncIterator, Awaitable, Callable
from typing import Any

import pytest
import pytest_asyncio
from aiohttp import web
from aiohttp.test_utils import TestServer

from tests.payloads import Routes, ServeFactory, make_station, make_train


@pytest.fixture
def train_payload() -> dict[str, Any]:
    """A /trains response with one Keystone train."""
    return {"612": [make_train()]}


@pytest.fixture
def train_body(train_payload: dict[str, Any]) -> str:
    return json.dumps(train_payload)


@pytest.fixture
def station_payload() -> dict[str, Any]:
    """A /stations response with one station."""
    return {"ABE": make_station()}


@pytest_asyncio.fixture
async def serve_json() -> AsyncIterator[ServeFactory]:
    """Start local servers answering fixed bodies; yields a factory returning the base URL."""
    servers: list[TestServer] = []

    def _handler(status: int, body: str) -> Callable[[web.Request], Awaitable[web.Response]]:
        async def handle(_request: web.Request) -> web.Response:
            return web.Response(status=status, text=body, content_type="application/json")

        return handle

    async def _serve(routes: Routes) -> str:
        app = web.Application()
        for path, (status, body) in routes.items():
            app.router.add_get(path, _handler(status, body))
        server = TestServer(app)
        await server.start_server()
        servers.append(server)
        return str(server.make_url("/")).rstrip("/")

    yield _serve

    for server in servers:
        await server.close()
