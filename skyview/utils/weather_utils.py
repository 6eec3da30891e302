"""
Weather utility functions for formatting and calculations.

This module provides reusable weather-related calculations and formatting
functions that can be used across the application.
"""

import math
from datetime import datetime, timedelta, timezone
from typing import Optional, Union

from skyview import config

Number = Union[int, float]


def round_half_up(value: Number) -> int:
    """
    Round to the nearest integer with halves going up (2.5 -> 3, -2.5 -> -2).

    :param value: Number to round
    :return: Rounded integer
    """
    return int(math.floor(value + 0.5))


def format_wind_direction(degrees: Optional[Number]) -> str:
    """
    Convert wind direction in degrees to cardinal direction.

    :param degrees: Wind direction in degrees (0-360)
    :return: Cardinal direction string (N, NE, E, SE, S, SW, W, NW), or N/A
    """
    if not isinstance(degrees, (int, float)) or isinstance(degrees, bool):
        return "N/A"
    directions = ["N", "NE", "E", "SE", "S", "SW", "W", "NW"]
    return directions[round_half_up(degrees / 45) % 8]


def get_weather_icon_url(icon: Optional[str]) -> str:
    """
    Build the hosted image URL for a condition icon id.

    :param icon: Icon id such as ``10d``
    :return: Image URL, or an empty string for an empty id
    """
    if not icon:
        return ""
    return config.ICON_URL_TEMPLATE.format(icon=icon)


def get_weather_background(condition: Optional[str]) -> tuple[str, str]:
    """
    Pick a background gradient for a condition group (``weather[0].main``).

    :param condition: Condition group, e.g. Clear, Rain, Mist
    :return: Tuple of (start colour, end colour)
    """
    key = (condition or "").lower()
    if key == "drizzle":
        key = "rain"
    elif key in config.ATMOSPHERIC_CONDITIONS:
        key = "atmosphere"
    return config.BACKGROUND_GRADIENTS.get(key, config.BACKGROUND_GRADIENTS["default"])


def format_local_time(timestamp: Number, tz_offset_seconds: Number = 0) -> str:
    """
    Format an epoch timestamp as wall-clock time at the queried location.

    :param timestamp: Epoch seconds (e.g. sunrise)
    :param tz_offset_seconds: Location's UTC offset in seconds
    :return: Time string such as ``06:42 AM``
    """
    tz = timezone(timedelta(seconds=int(tz_offset_seconds or 0)))
    return datetime.fromtimestamp(timestamp, tz=tz).strftime("%I:%M %p")


def format_visibility_km(meters: Optional[Number]) -> str:
    """
    Format visibility in meters as kilometres.

    :param meters: Visibility in meters
    :return: Formatted string, or N/A when missing
    """
    if meters is None:
        return "N/A"
    return f"{meters / 1000:g} km"


def format_temperature(value: Optional[Number], label: str) -> str:
    """
    Format a temperature rounded half up with its unit label.

    :param value: Temperature, or None when missing
    :param label: Unit label such as °C
    :return: Formatted string such as ``8°C``, or N/A
    """
    if value is None:
        return "N/A"
    return f"{round_half_up(value)}{label}"


def format_measurement(value: Optional[Number], suffix: str = "") -> str:
    """
    Format a raw reading with its unit suffix.

    :param value: Reading, or None when missing from the payload
    :param suffix: Unit suffix such as ``%`` or `` hPa``
    :return: Formatted string, or N/A when missing
    """
    if value is None:
        return "N/A"
    return f"{value}{suffix}"
