"""
Geolocation capabilities used by the location resolver.

A capability reports whether it can be used at all (``is_available``) and,
when asked, either yields coordinates or raises ``GeolocationError``. The
resolver decides what a failure means at each call site.
"""

from typing import Optional

import requests

from skyview import config
from skyview.core.errors import GeolocationError
from skyview.models.weather import Coordinates
from skyview.utils.log_util import app_logger

logger = app_logger(__name__)


class Geolocator:
    """Interface for a source of the viewer's position."""

    def is_available(self) -> bool:
        raise NotImplementedError

    def locate(self) -> Coordinates:
        raise NotImplementedError


def _valid(lat: float, lon: float) -> bool:
    return -90 <= lat <= 90 and -180 <= lon <= 180


class IpGeolocator(Geolocator):
    """
    Approximate the viewer's position from their public IP address.

    Providers from ``config.GEOLOCATION_PROVIDERS`` are tried in order; the
    first one to return valid coordinates wins. With ``ip_address`` the
    providers look up that address; without it they look up whoever sends
    the request, which is only the viewer when running on their machine.
    """

    def __init__(
        self,
        providers=None,
        timeout: float = 5,
        enabled: bool = True,
        ip_address: Optional[str] = None,
    ):
        self.providers = providers or config.GEOLOCATION_PROVIDERS
        self.timeout = timeout
        self.enabled = enabled
        self.ip_address = ip_address

    def provider_url(self, provider: dict) -> str:
        if self.ip_address and provider.get("ip_url"):
            return provider["ip_url"].format(ip=self.ip_address)
        return provider["url"]

    def is_available(self) -> bool:
        return self.enabled and bool(self.providers)

    def locate(self) -> Coordinates:
        for provider in self.providers:
            try:
                resp = requests.get(self.provider_url(provider), timeout=self.timeout)
                if resp.status_code != 200:
                    logger.warning(
                        f"Geolocation via {provider['name']} failed: {resp.status_code}"
                    )
                    continue
                coords = self._parse(resp.json())
            except (requests.RequestException, ValueError) as e:
                logger.warning(f"Geolocation via {provider['name']} failed: {e}")
                continue

            if coords is not None:
                logger.info(f"Located via {provider['name']}: {coords}")
                return coords

        raise GeolocationError("No geolocation provider returned a position")

    @staticmethod
    def _parse(data: dict) -> Optional[Coordinates]:
        # ipinfo.io: {"loc": "51.50,-0.12"}; ip-api.com: {"lat": .., "lon": ..}
        if data.get("status") == "fail":
            return None
        loc = data.get("loc")
        if loc and "," in loc:
            lat_str, lon_str = loc.split(",", 1)
            lat, lon = float(lat_str), float(lon_str)
        elif data.get("lat") is not None and data.get("lon") is not None:
            lat, lon = float(data["lat"]), float(data["lon"])
        else:
            return None
        return Coordinates(lat, lon) if _valid(lat, lon) else None


class StaticGeolocator(Geolocator):
    """Fixed position from configuration; unavailable when none is set."""

    def __init__(self, latitude: Optional[float], longitude: Optional[float]):
        self.latitude = latitude
        self.longitude = longitude

    def is_available(self) -> bool:
        return self.latitude is not None and self.longitude is not None

    def locate(self) -> Coordinates:
        if not self.is_available():
            raise GeolocationError("No static position configured")
        lat, lon = float(self.latitude), float(self.longitude)
        if not _valid(lat, lon):
            raise GeolocationError(f"Configured position out of range: {lat}, {lon}")
        return Coordinates(lat, lon)


def get_geolocator(ip_address: Optional[str] = None) -> Geolocator:
    """
    Pick the geolocation capability from settings.

    ``DEFAULT_LATITUDE``/``DEFAULT_LONGITUDE`` select a static position;
    otherwise IP lookup is used unless ``GEOLOCATION_ENABLED`` is false.

    :param ip_address: Viewer address to look up; None looks up this process.
    """
    lat = config.get_setting("DEFAULT_LATITUDE")
    lon = config.get_setting("DEFAULT_LONGITUDE")
    if lat is not None and lon is not None:
        return StaticGeolocator(lat, lon)

    enabled = str(config.get_setting("GEOLOCATION_ENABLED", "true")).lower()
    return IpGeolocator(
        enabled=enabled not in ("0", "false", "no"), ip_address=ip_address
    )
