"""
Location resolution for the dashboard.

Decides which location to fetch from a city search, the geolocation button
or startup. Geolocation failure is handled differently per call site:
startup falls back to the default city without telling the user, while the
geolocation button reports ``GeolocationUnavailable``.
"""

from skyview import config
from skyview.api.geolocation import Geolocator
from skyview.core.errors import EmptyInput, GeolocationError, GeolocationUnavailable
from skyview.models.weather import CityLocation, CoordinateLocation, LocationDescriptor
from skyview.utils.log_util import app_logger

logger = app_logger(__name__)

GEOLOCATION_NOT_SUPPORTED = "Geolocation is not supported on this deployment."


def _locate(geolocator: Geolocator) -> CoordinateLocation:
    coords = geolocator.locate()
    return CoordinateLocation(coords.latitude, coords.longitude)


def resolve_on_startup(geolocator: Geolocator) -> LocationDescriptor:
    """
    Resolve the initial location, falling back to the default city.

    :param geolocator: Geolocation capability.
    :return: Coordinates on success, otherwise ``CityLocation(DEFAULT_CITY)``.
    """
    if not geolocator.is_available():
        logger.warning(f"Geolocation unavailable, using {config.DEFAULT_CITY}")
        return CityLocation(config.DEFAULT_CITY)

    try:
        return _locate(geolocator)
    except GeolocationError as e:
        logger.warning(f"Geolocation error: {e}; using {config.DEFAULT_CITY}")
        return CityLocation(config.DEFAULT_CITY)


def resolve_from_search(raw_input: str) -> CityLocation:
    """
    Resolve a search box submission.

    :param raw_input: Text as typed by the user.
    :return: CityLocation for the trimmed input.
    :raises EmptyInput: When the input is empty or only whitespace.
    """
    city = (raw_input or "").strip()
    if not city:
        raise EmptyInput()
    return CityLocation(city)


def resolve_from_geolocation_button(geolocator: Geolocator) -> CoordinateLocation:
    """
    Resolve an explicit "use my location" request. Never falls back.

    :raises GeolocationUnavailable: When the capability is absent or fails.
    """
    if not geolocator.is_available():
        raise GeolocationUnavailable(GEOLOCATION_NOT_SUPPORTED)

    try:
        return _locate(geolocator)
    except GeolocationError as e:
        logger.error(f"Geolocation error: {e}")
        raise GeolocationUnavailable() from e
