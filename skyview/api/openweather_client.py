"""
openweather_client.py: Lightweight interface to the OpenWeatherMap API using
direct requests.

Functions:
- build_location_params(location)
- get_current_weather(location, unit)
- get_forecast(location, unit)

Every failure is translated into a ``WeatherError`` subclass so callers only
deal with one error taxonomy.

Requires:
- Setting OPENWEATHER_API_KEY (Streamlit secrets or environment)
"""

from pprint import pprint
from typing import Dict, Optional

import requests

from skyview import config
from skyview.core.errors import (
    InvalidCredentials,
    LocationNotFound,
    NetworkError,
    ServerError,
    UnknownError,
    WeatherError,
)
from skyview.models.weather import (
    CityLocation,
    CoordinateLocation,
    LocationDescriptor,
    UnitSystem,
)
from skyview.utils.log_util import app_logger

logger = app_logger(__name__)

_session: Optional[requests.Session] = None


def get_session() -> requests.Session:
    """Return the shared requests session, creating it on first use."""
    global _session
    if _session is None:
        _session = requests.Session()
    return _session


def build_location_params(location: LocationDescriptor) -> Dict[str, object]:
    """
    Translate a location descriptor into query parameters.

    :param location: CityLocation or CoordinateLocation.
    :return: ``{"q": name}`` or ``{"lat": .., "lon": ..}``.
    """
    if isinstance(location, CityLocation):
        return {"q": location.city_name}
    if isinstance(location, CoordinateLocation):
        return {"lat": location.latitude, "lon": location.longitude}
    raise TypeError(f"Unsupported location descriptor: {location!r}")


def classify_http_status(status: int) -> WeatherError:
    """Map an HTTP error status to the dashboard error taxonomy."""
    if status == 404:
        return LocationNotFound()
    if status == 401:
        return InvalidCredentials()
    return ServerError(status)


def _get(path: str, location: LocationDescriptor, unit: UnitSystem) -> dict:
    url = f"{config.OPENWEATHER_ENDPOINT}/{path}"
    params = build_location_params(location)
    params["units"] = unit.value
    logger.info(f"Fetching {path}: {params}")
    params["appid"] = config.get_api_key()
    timeout = float(config.get_setting("REQUEST_TIMEOUT", config.REQUEST_TIMEOUT))

    try:
        resp = get_session().get(url, params=params, timeout=timeout)
        resp.raise_for_status()
        return resp.json()
    except requests.HTTPError as e:
        status = e.response.status_code if e.response is not None else 0
        logger.error(f"{path} request failed: {status} {e}")
        raise classify_http_status(status) from e
    except (requests.ConnectionError, requests.Timeout) as e:
        logger.error(f"No response for {path}: {e}")
        raise NetworkError() from e
    except Exception as e:
        logger.exception(f"Unexpected error while fetching {path}: {e}")
        raise UnknownError() from e


def get_current_weather(location: LocationDescriptor, unit: UnitSystem) -> dict:
    """
    Fetch current conditions for a location.

    :param location: Location to query.
    :param unit: Unit system for temperatures and speeds.
    :return: Raw JSON payload of the ``/weather`` endpoint.
    :raises WeatherError: On any HTTP, network or decoding failure.
    """
    return _get("weather", location, unit)


def get_forecast(location: LocationDescriptor, unit: UnitSystem) -> dict:
    """
    Fetch the 3-hour interval forecast for a location.

    :param location: Location to query.
    :param unit: Unit system for temperatures.
    :return: Raw JSON payload of the ``/forecast`` endpoint.
    :raises WeatherError: On any HTTP, network or decoding failure.
    """
    return _get("forecast", location, unit)


def main():
    location = CityLocation(config.DEFAULT_CITY)
    try:
        current = get_current_weather(location, UnitSystem.METRIC)
    except WeatherError as e:
        print(f"❌ {e.user_message}")
        return

    print(f"✅ Current conditions for {current.get('name')}:")
    pprint(current)


if __name__ == "__main__":
    main()
