from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Dict

from keylight_tui.utils.color_utils import (
    TEMPERATURE_MAX,
    TEMPERATURE_MIN,
    clamp,
    elgato_to_kelvin,
    temperature_ratio,
)

from .errors import DecodeError, EmptyDeviceListError

DEFAULT_PORT = 9123
LIGHTS_PATH = "/elgato/lights"

BRIGHTNESS_MIN = 0
BRIGHTNESS_MAX = 100


@dataclass(frozen=True)
class DeviceAddress:
    """Network location of the single controlled Key Light."""
    host: str
    port: int = DEFAULT_PORT

    @property
    def lights_url(self) -> str:
        return f"http://{self.host}:{self.port}{LIGHTS_PATH}"

    def __str__(self) -> str:
        return f"{self.host}:{self.port}"


@dataclass
class LightState:
    """Power, brightness and temperature of a Key Light.

    Brightness and temperature are clamped on construction and after every
    mutation, so a LightState is always inside the device ranges.
    """
    on: bool = False
    brightness: int = 50
    temperature: int = 200  # 143-344 (Elgato units, 7000K-2900K)

    def __post_init__(self) -> None:
        self.on = bool(self.on)
        self.brightness = clamp(int(self.brightness), BRIGHTNESS_MIN, BRIGHTNESS_MAX)
        self.temperature = clamp(int(self.temperature), TEMPERATURE_MIN, TEMPERATURE_MAX)

    # --- mutation ---
    def set_power(self, on: bool) -> None:
        self.on = bool(on)

    def adjust_brightness(self, delta: int) -> None:
        self.brightness = clamp(self.brightness + delta, BRIGHTNESS_MIN, BRIGHTNESS_MAX)

    def adjust_temperature(self, delta: int) -> None:
        self.temperature = clamp(self.temperature + delta, TEMPERATURE_MIN, TEMPERATURE_MAX)

    # --- derived ---
    @property
    def kelvin(self) -> int:
        return elgato_to_kelvin(self.temperature)

    @property
    def temperature_ratio(self) -> float:
        return temperature_ratio(self.temperature)

    def snapshot(self) -> LightState:
        """Independent copy for read-only consumers such as the renderer."""
        return replace(self)

    # --- wire format ---
    def to_api(self) -> Dict[str, int]:
        return {
            "on": 1 if self.on else 0,
            "brightness": self.brightness,
            "temperature": self.temperature,
        }

    def to_payload(self) -> Dict[str, Any]:
        """Build the request body that sets the device to this state."""
        return {"numberOfLights": 1, "lights": [self.to_api()]}

    @classmethod
    def from_api(cls, data: Any) -> LightState:
        """Decode one entry of the ``lights`` array."""
        if not isinstance(data, dict):
            raise DecodeError(f"expected a light object, got {type(data).__name__}")
        try:
            on = data["on"]
            brightness = data["brightness"]
            temperature = data["temperature"]
        except KeyError as e:
            raise DecodeError(f"light object is missing field {e}") from e

        if isinstance(on, bool) or not isinstance(on, int) or on not in (0, 1):
            raise DecodeError(f"'on' must be 0 or 1, got {on!r}")
        for name, value in (("brightness", brightness), ("temperature", temperature)):
            if isinstance(value, bool) or not isinstance(value, int):
                raise DecodeError(f"'{name}' must be an integer, got {value!r}")

        return cls(on=on == 1, brightness=brightness, temperature=temperature)

    @classmethod
    def from_payload(cls, payload: Any) -> LightState:
        """Decode a ``{numberOfLights, lights}`` body and return its first light."""
        if not isinstance(payload, dict):
            raise DecodeError(f"expected a JSON object, got {type(payload).__name__}")
        lights = payload.get("lights")
        if not isinstance(lights, list):
            raise DecodeError("response has no 'lights' array")
        if not lights:
            raise EmptyDeviceListError()
        # A Key Light always reports exactly one light
        return cls.from_api(lights[0])
