"""Unit conversion applied at render time."""

import math


def round_half_away(value: float) -> int:
    """Round to the nearest integer, ties away from zero (2.5 -> 3, -2.5 -> -3)."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def convert_temperature(celsius: float, to_fahrenheit: bool) -> int:
    """Convert a stored Celsius value to the display unit, rounding once."""
    if not to_fahrenheit:
        return round_half_away(celsius)
    return round_half_away(celsius * 9 / 5 + 32)


def temperature_unit_label(to_fahrenheit: bool) -> str:
    return "°F" if to_fahrenheit else "°C"


def format_temperature(celsius: float, to_fahrenheit: bool) -> str:
    return f"{convert_temperature(celsius, to_fahrenheit)}°"


def format_speed(mps: float) -> str:
    return f"{round_half_away(mps)} m/s"


def format_visibility(meters: int) -> str:
    return f"{meters / 1000:.1f} km"
