from .control import Action, ControlLoop, InputEvent, LoopState
from .errors import (
    ConfigurationError,
    DecodeError,
    DeviceConnectionError,
    EmptyDeviceListError,
    KeyLightError,
    ProtocolError,
)
from .models import DeviceAddress, LightState
from .service import KeyLightService

__all__ = [
    "Action",
    "ConfigurationError",
    "ControlLoop",
    "DecodeError",
    "DeviceAddress",
    "DeviceConnectionError",
    "EmptyDeviceListError",
    "InputEvent",
    "KeyLightError",
    "KeyLightService",
    "LightState",
    "LoopState",
    "ProtocolError",
]
