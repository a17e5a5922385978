from __future__ import annotations

import math

TEMPERATURE_MIN = 143
TEMPERATURE_MAX = 344
TEMPERATURE_SPAN = TEMPERATURE_MAX - TEMPERATURE_MIN


def clamp(value: int, lower: int, upper: int) -> int:
    return max(lower, min(upper, value))


def temperature_ratio(value: int) -> float:
    """Position of an Elgato temperature value (143-344) in its range, 0.0-1.0."""
    return (clamp(value, TEMPERATURE_MIN, TEMPERATURE_MAX) - TEMPERATURE_MIN) / TEMPERATURE_SPAN


def elgato_to_kelvin(value: int) -> int:
    """Convert Elgato temperature value (143-344) to Kelvin (7000K-2900K)."""
    return math.floor(4100 * (1 - temperature_ratio(value)) + 2900)


def slider_color_for_temp(value: int) -> tuple[int, int, int]:
    """Interpolate color between #88aaff and #ff9944 for the temperature gauge."""
    left = (136, 170, 255)  # #88aaff
    right = (255, 153, 68)  # #ff9944
    t = temperature_ratio(value)
    r = int(left[0] + (right[0] - left[0]) * t)
    g = int(left[1] + (right[1] - left[1]) * t)
    b = int(left[2] + (right[2] - left[2]) * t)
    return r, g, b


def rgb_to_hex(rgb: tuple[int, int, int]) -> str:
    r, g, b = rgb
    return f"#{r:02x}{g:02x}{b:02x}"
