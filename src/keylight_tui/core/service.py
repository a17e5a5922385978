from __future__ import annotations

import asyncio
import json
import logging

import aiohttp

from .errors import DecodeError, DeviceConnectionError, ProtocolError
from .models import DeviceAddress, LightState

logger = logging.getLogger(__name__)

DEFAULT_FETCH_TIMEOUT_S = 5.0
DEFAULT_PUSH_TIMEOUT_S = 1.0


class KeyLightService:
    """HTTP service for reading and writing the state of a Key Light.

    Every failure is raised as a KeyLightError subclass; nothing is retried.
    """

    def __init__(
        self,
        fetch_timeout_seconds: float = DEFAULT_FETCH_TIMEOUT_S,
        push_timeout_seconds: float = DEFAULT_PUSH_TIMEOUT_S,
    ) -> None:
        self._fetch_timeout = fetch_timeout_seconds
        self._push_timeout = push_timeout_seconds

    async def fetch_light_state(self, address: DeviceAddress) -> LightState:
        """Fetch the current device state."""
        url = address.lights_url
        try:
            timeout = aiohttp.ClientTimeout(total=self._fetch_timeout)
            async with aiohttp.ClientSession(timeout=timeout) as session:
                async with session.get(url) as response:
                    if response.status != 200:
                        raise ProtocolError(response.status, "GET", url)
                    payload = await self._read_json(response)
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise DeviceConnectionError(str(address), repr(e)) from e

        light = LightState.from_payload(payload)
        logger.debug(f"Fetched state from {address}: {payload}")
        return light

    async def set_light_state(self, address: DeviceAddress, desired: LightState) -> LightState:
        """Send a state update to the device and return the state it acknowledged."""
        url = address.lights_url
        data = desired.to_payload()
        try:
            timeout = aiohttp.ClientTimeout(total=self._push_timeout)
            async with aiohttp.ClientSession(timeout=timeout) as session:
                async with session.put(url, json=data) as response:
                    if not 200 <= response.status < 300:
                        raise ProtocolError(response.status, "PUT", url)
                    payload = await self._read_json(response)
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise DeviceConnectionError(str(address), repr(e)) from e

        logger.debug(f"Pushed {data} to {address}")
        return LightState.from_payload(payload)

    @staticmethod
    async def _read_json(response: aiohttp.ClientResponse):
        # The light does not always label its body as JSON
        try:
            text = await response.text()
            return json.loads(text)
        except ValueError as e:
            raise DecodeError(f"invalid JSON: {e}") from e
