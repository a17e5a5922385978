"""Control loop: applies input events to the light state and syncs the device."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Protocol

from .errors import KeyLightError
from .models import DeviceAddress, LightState
from .service import KeyLightService

logger = logging.getLogger(__name__)

COARSE_STEP = 10
FINE_STEP = 1


class LoopState(Enum):
    RUNNING = "running"
    STOPPED = "stopped"


class Action(Enum):
    QUIT = "quit"
    DECREASE_BRIGHTNESS = "decrease_brightness"
    INCREASE_BRIGHTNESS = "increase_brightness"
    WARMER_TEMPERATURE = "warmer_temperature"
    COLDER_TEMPERATURE = "colder_temperature"
    TOGGLE = "toggle"


@dataclass(frozen=True)
class InputEvent:
    """A key press abstracted from its physical binding."""
    action: Action
    step: int = COARSE_STEP

    @classmethod
    def fine(cls, action: Action) -> InputEvent:
        return cls(action, FINE_STEP)


class Renderer(Protocol):
    def render_state(self, snapshot: LightState) -> None:
        ...


class ControlLoop:
    """
    The single owner of the session's LightState.

    Each mutating event is pushed to the device before handle() returns,
    as the full current state. The device's echo is discarded: the local,
    already clamped value stays authoritative. A failed push is not caught
    here; the loop stops and the KeyLightError propagates to the caller.
    """

    def __init__(
        self,
        address: DeviceAddress,
        light: LightState,
        service: KeyLightService,
        renderer: Optional[Renderer] = None,
    ) -> None:
        self.address = address
        self._light = light
        self._service = service
        self._renderer = renderer
        self.state = LoopState.RUNNING
        self.push_count = 0

    @property
    def running(self) -> bool:
        return self.state is LoopState.RUNNING

    @property
    def light(self) -> LightState:
        """Read-only view of the current state."""
        return self._light.snapshot()

    def attach_renderer(self, renderer: Renderer) -> None:
        self._renderer = renderer
        self.redraw()

    def redraw(self) -> None:
        if self._renderer is not None:
            self._renderer.render_state(self._light.snapshot())

    def quit(self) -> None:
        self.state = LoopState.STOPPED

    async def handle(self, event: Optional[InputEvent]) -> bool:
        """
        Apply one input event.

        Args:
            event: The event to apply; None stands for an unbound key

        Returns:
            True if the light state changed and was pushed
        """
        if event is None or not self.running:
            return False

        action = event.action
        if action is Action.QUIT:
            self.quit()
            return False

        if action is Action.DECREASE_BRIGHTNESS:
            self._light.adjust_brightness(-event.step)
        elif action is Action.INCREASE_BRIGHTNESS:
            self._light.adjust_brightness(event.step)
        elif action is Action.WARMER_TEMPERATURE:
            self._light.adjust_temperature(-event.step)
        elif action is Action.COLDER_TEMPERATURE:
            self._light.adjust_temperature(event.step)
        elif action is Action.TOGGLE:
            self._light.set_power(not self._light.on)
        else:
            return False

        await self._push()
        self.redraw()
        return True

    async def _push(self) -> None:
        try:
            await self._service.set_light_state(self.address, self._light.snapshot())
        except KeyLightError as e:
            logger.error(f"Push to {self.address} failed: {e.technical_message}")
            self.quit()
            raise
        self.push_count += 1
