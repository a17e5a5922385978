from __future__ import annotations

import logging
from typing import Optional

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Footer

from keylight_tui.core.control import Action, ControlLoop, InputEvent, COARSE_STEP, FINE_STEP
from keylight_tui.core.errors import KeyLightError
from keylight_tui.core.models import LightState
from keylight_tui.ui.styles.dark_theme import get_style
from keylight_tui.ui.widgets.keylight_widget import KeyLightPanel

logger = logging.getLogger(__name__)


def _bind(key: str, action: Action, step: int, description: str, show: bool = True) -> Binding:
    return Binding(key, f"dispatch('{action.value}', {step})", description, show=show, priority=True)


class KeyLightApp(App):
    """Terminal window for controlling a single Key Light.

    Key presses are applied one at a time; a device push is awaited inside
    the key handler, so input waits until the light has answered.
    """

    CSS = get_style()
    TITLE = "Elgato Key Light"

    BINDINGS = [
        _bind("left", Action.DECREASE_BRIGHTNESS, COARSE_STEP, "Dimmer"),
        _bind("right", Action.INCREASE_BRIGHTNESS, COARSE_STEP, "Brighter"),
        # Labels describe the displayed Kelvin: a lower device value is a colder light
        _bind("up", Action.WARMER_TEMPERATURE, COARSE_STEP, "Colder"),
        _bind("down", Action.COLDER_TEMPERATURE, COARSE_STEP, "Warmer"),
        _bind("shift+left", Action.DECREASE_BRIGHTNESS, FINE_STEP, "Dimmer (fine)", show=False),
        _bind("shift+right", Action.INCREASE_BRIGHTNESS, FINE_STEP, "Brighter (fine)", show=False),
        _bind("shift+up", Action.WARMER_TEMPERATURE, FINE_STEP, "Colder (fine)", show=False),
        _bind("shift+down", Action.COLDER_TEMPERATURE, FINE_STEP, "Warmer (fine)", show=False),
        _bind("space", Action.TOGGLE, 0, "Toggle off/on"),
        _bind("enter", Action.TOGGLE, 0, "Toggle off/on", show=False),
        _bind("q", Action.QUIT, 0, "Quit"),
        _bind("escape", Action.QUIT, 0, "Quit", show=False),
        _bind("ctrl+c", Action.QUIT, 0, "Quit", show=False),
    ]

    def __init__(self, controller: ControlLoop) -> None:
        super().__init__()
        self.controller = controller
        self.fatal_error: Optional[KeyLightError] = None

    def compose(self) -> ComposeResult:
        yield KeyLightPanel(self.controller.address)
        yield Footer()

    def on_mount(self) -> None:
        self.controller.attach_renderer(self)

    # ----- Renderer -----
    def render_state(self, snapshot: LightState) -> None:
        self.query_one(KeyLightPanel).update_state(snapshot)

    # ----- Input -----
    async def action_dispatch(self, action: str, step: int) -> None:
        await self.handle_input(InputEvent(Action(action), step))

    async def handle_input(self, event: Optional[InputEvent]) -> None:
        if not self.controller.running:
            return
        try:
            await self.controller.handle(event)
        except KeyLightError as e:
            self.fatal_error = e
            self.exit(return_code=1)
            return

        if not self.controller.running:
            logger.info("Quit requested")
            self.exit(return_code=0)
