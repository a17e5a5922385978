"""Pytest fixtures for tests."""

import asyncio
from unittest.mock import AsyncMock, Mock

import pytest
import pytest_asyncio
from aiohttp import web
from aiohttp.test_utils import TestServer

from keylight_tui.core.models import LIGHTS_PATH, DeviceAddress, LightState
from keylight_tui.core.service import KeyLightService


class FakeKeyLight:
    """In-process stand-in for the light's HTTP API."""

    def __init__(self):
        self.light = {"on": 0, "brightness": 20, "temperature": 300}
        self.get_status = 200
        self.put_status = 200
        self.raw_body = None
        self.delay = 0.0
        self.requests = []
        self.address = None

    def _body(self, status):
        if isinstance(self.raw_body, bytes):
            return web.Response(body=self.raw_body, status=status, content_type="application/json")
        if self.raw_body is not None:
            return web.Response(text=self.raw_body, status=status)
        return web.json_response({"numberOfLights": 1, "lights": [self.light]}, status=status)

    async def handle_get(self, request):
        self.requests.append(("GET", None, request.headers.get("Content-Type")))
        await asyncio.sleep(self.delay)
        return self._body(self.get_status)

    async def handle_put(self, request):
        body = await request.json()
        self.requests.append(("PUT", body, request.headers.get("Content-Type")))
        await asyncio.sleep(self.delay)
        if 200 <= self.put_status < 300:
            self.light = dict(body["lights"][0])
        return self._body(self.put_status)

    @property
    def puts(self):
        return [body for method, body, _ in self.requests if method == "PUT"]


@pytest_asyncio.fixture
async def fake_light():
    """Start a fake Key Light on a random local port."""
    device = FakeKeyLight()
    app = web.Application()
    app.router.add_get(LIGHTS_PATH, device.handle_get)
    app.router.add_put(LIGHTS_PATH, device.handle_put)

    server = TestServer(app)
    await server.start_server()
    device.address = DeviceAddress(server.host, server.port)
    yield device
    await server.close()


@pytest.fixture
def address():
    return DeviceAddress("192.0.2.10")


@pytest.fixture
def light():
    return LightState(on=True, brightness=50, temperature=200)


@pytest.fixture
def mock_service(light):
    """KeyLightService whose push echoes back a fixed state."""
    service = Mock(spec=KeyLightService)
    service.fetch_light_state = AsyncMock(return_value=light.snapshot())
    service.set_light_state = AsyncMock(return_value=light.snapshot())
    return service
