# config.py
"""
Configurations for the Skyview weather dashboard.

Holds the OpenWeatherMap endpoints, location defaults and forecast
aggregation parameters shared across the application. Secrets and
deployment settings are read lazily with :func:`get_setting` so a missing
API key only surfaces when a request is made.
"""

import os
from typing import Any

import streamlit as st

OPENWEATHER_ENDPOINT = "https://api.openweathermap.org/data/2.5"
ICON_URL_TEMPLATE = "https://openweathermap.org/img/wn/{icon}@2x.png"

DEFAULT_CITY = "London"
DEFAULT_UNIT = "metric"
REQUEST_TIMEOUT = 10

# Forecast aggregation
FORECAST_MAX_DAYS = 5
REPRESENTATIVE_HOUR_START = 11
REPRESENTATIVE_HOUR_END = 13
DATE_LABEL_FORMAT = "%a, %b"

# IP geolocation services, tried in order. "url" looks up the caller of the
# request, "ip_url" a given address (the viewer, when running behind Streamlit).
GEOLOCATION_PROVIDERS = [
    {
        "name": "ipinfo.io",
        "url": "https://ipinfo.io/json",
        "ip_url": "https://ipinfo.io/{ip}/json",
    },
    {
        "name": "ip-api.com",
        "url": "http://ip-api.com/json/?fields=status,lat,lon,city",
        "ip_url": "http://ip-api.com/json/{ip}?fields=status,lat,lon,city",
    },
]

BACKGROUND_GRADIENTS = {
    "clear": ("#93c5fd", "#fde047"),
    "clouds": ("#9ca3af", "#60a5fa"),
    "rain": ("#4b5563", "#1d4ed8"),
    "thunderstorm": ("#1f2937", "#6b21a8"),
    "snow": ("#bfdbfe", "#60a5fa"),
    "atmosphere": ("#6b7280", "#374151"),
    "default": ("#3b82f6", "#9333ea"),
}

ATMOSPHERIC_CONDITIONS = {
    "mist",
    "smoke",
    "haze",
    "dust",
    "fog",
    "sand",
    "ash",
    "squall",
    "tornado",
}


def get_setting(name: str, default: Any = None) -> Any:
    """
    Look up a setting from Streamlit secrets, then the environment.

    :param name: Setting key, e.g. ``OPENWEATHER_API_KEY``.
    :param default: Value returned when the key is configured nowhere.
    :return: The configured value or ``default``.
    """
    try:
        if name in st.secrets:
            return st.secrets[name]
    except Exception:
        # No secrets.toml present; fall through to the environment
        pass
    return os.environ.get(name, default)


def get_api_key() -> str:
    """Return the OpenWeatherMap API key, or an empty string when unset."""
    return str(get_setting("OPENWEATHER_API_KEY", "") or "")
