from __future__ import annotations

from typing import Optional

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Vertical
from textual.widget import Widget
from textual.widgets import Label

from keylight_tui.core.models import DeviceAddress, LightState
from keylight_tui.ui.styles.dark_theme import BRIGHTNESS_ON, GAUGE_TRACK, INACTIVE
from keylight_tui.utils.color_utils import rgb_to_hex, slider_color_for_temp


class Gauge(Widget):
    """Horizontal bar filled to a ratio, with a centered label."""

    def __init__(self, id: Optional[str] = None) -> None:
        super().__init__(id=id)
        self.ratio = 0.0
        self.label = ""
        self.color = INACTIVE

    def set_value(self, ratio: float, label: str, color: str) -> None:
        self.ratio = max(0.0, min(1.0, ratio))
        self.label = label
        self.color = color
        self.refresh()

    def render(self) -> Text:
        width = max(self.size.width, 1)
        height = max(self.size.height, 1)
        filled = round(width * self.ratio)
        bar = "█" * filled + " " * (width - filled)

        start = max((width - len(self.label)) // 2, 0)
        label_row = (bar[:start] + self.label + bar[start + len(self.label):])[:width]

        text = Text()
        for row in range(height):
            line = label_row if row == height // 2 else bar
            text.append(line, style=f"italic {self.color} on {GAUGE_TRACK}")
            if row < height - 1:
                text.append("\n")
        return text


class KeyLightPanel(Vertical):
    """Brightness and temperature gauges for one Key Light."""

    def __init__(self, address: DeviceAddress) -> None:
        super().__init__()
        self.address = address
        self.border_title = " Elgato Key Light "
        self.border_subtitle = str(address)

    def compose(self) -> ComposeResult:
        yield Label("☀ Brightness", classes="gauge-caption", id="brightness-caption")
        yield Gauge(id="brightness")
        yield Label("🌡 Temperature", classes="gauge-caption", id="temperature-caption")
        yield Gauge(id="temperature")

    def update_state(self, light: LightState) -> None:
        """Redraw both gauges from a state snapshot."""
        if light.on:
            brightness_color = BRIGHTNESS_ON
            temperature_color = rgb_to_hex(slider_color_for_temp(light.temperature))
        else:
            brightness_color = temperature_color = INACTIVE

        power = "on" if light.on else "off"
        self.query_one("#brightness-caption", Label).update(f"☀ Brightness ({power})")
        self.query_one("#brightness", Gauge).set_value(
            light.brightness / 100, f"{light.brightness}%", brightness_color
        )
        self.query_one("#temperature", Gauge).set_value(
            light.temperature_ratio, f"{light.kelvin} K", temperature_color
        )
