"""Shared fixtures."""

from collections.abc import AsyncIterator

import pytest_asyncio
from aiohttp import web
from aiohttp.test_utils import TestServer
from stub_server import StubWmataServer


@pytest_asyncio.fixture
async def wmata_stub() -> AsyncIterator[StubWmataServer]:
    """Start a stub WMATA server on a free local port for the duration of one test."""
    stub = StubWmataServer()
    app = web.Application()
    app.router.add_route("GET", "/{tail:.*}", stub.handle)
    server = TestServer(app)
    await server.start_server()
    stub.base_url = f"http://{server.host}:{server.port}"
    try:
        yield stub
    finally:
        await server.close()
