"""
Weather data models and type definitions.

This module provides the data structures shared by the location resolver,
the fetch pipeline and the Streamlit panels, including the single mutable
``DashboardState`` that the dashboard owns.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Union

from skyview.core.errors import WeatherError


@dataclass(frozen=True)
class CityLocation:
    """Location identified by a place name."""

    city_name: str


@dataclass(frozen=True)
class CoordinateLocation:
    """Location identified by a latitude/longitude pair."""

    latitude: float
    longitude: float


LocationDescriptor = Union[CityLocation, CoordinateLocation]


@dataclass(frozen=True)
class Coordinates:
    """Position reported by a geolocation capability."""

    latitude: float
    longitude: float


class UnitSystem(Enum):
    """Unit system; the value is the API ``units`` parameter."""

    METRIC = "metric"
    IMPERIAL = "imperial"

    def toggled(self) -> "UnitSystem":
        return UnitSystem.IMPERIAL if self is UnitSystem.METRIC else UnitSystem.METRIC

    @property
    def temperature_label(self) -> str:
        return "°C" if self is UnitSystem.METRIC else "°F"

    @property
    def speed_label(self) -> str:
        return "m/s" if self is UnitSystem.METRIC else "mph"


@dataclass(frozen=True)
class CurrentConditions:
    """Current weather conditions for one location."""

    name: str
    country: str
    temperature: Optional[float]
    feels_like: Optional[float]
    humidity: Optional[float]
    pressure: Optional[float]
    visibility: Optional[float]
    wind_speed: Optional[float]
    wind_deg: Optional[float]
    condition: str
    description: str
    icon: str
    sunrise: Optional[int]
    sunset: Optional[int]
    timezone_offset: int = 0

    @classmethod
    def from_api(cls, payload: dict) -> "CurrentConditions":
        """
        Build current conditions from a raw ``/weather`` response.

        :param payload: Decoded JSON body of the current-conditions endpoint.
        :return: CurrentConditions with missing fields set to None or "".
        """
        main = payload.get("main") or {}
        sys_info = payload.get("sys") or {}
        wind = payload.get("wind") or {}
        weather = (payload.get("weather") or [{}])[0]

        return cls(
            name=payload.get("name") or "",
            country=sys_info.get("country") or "",
            temperature=main.get("temp"),
            feels_like=main.get("feels_like"),
            humidity=main.get("humidity"),
            pressure=main.get("pressure"),
            visibility=payload.get("visibility"),
            wind_speed=wind.get("speed"),
            wind_deg=wind.get("deg"),
            condition=weather.get("main") or "",
            description=weather.get("description") or "",
            icon=weather.get("icon") or "",
            sunrise=sys_info.get("sunrise"),
            sunset=sys_info.get("sunset"),
            timezone_offset=payload.get("timezone") or 0,
        )


@dataclass(frozen=True)
class ForecastEntry:
    """One aggregated forecast day."""

    dt: int
    date_label: str
    temp: int
    temp_max: int
    temp_min: int
    icon: str
    description: str


class FetchStatus(Enum):
    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    FAILED = "failed"


@dataclass
class DashboardState:
    """
    Mutable dashboard state, written only by the pipeline.

    ``current`` and ``forecast`` are set and cleared together; while loading
    or after a failure both read as None.
    """

    unit: UnitSystem = UnitSystem.METRIC
    status: FetchStatus = FetchStatus.IDLE
    error: Optional[WeatherError] = None
    current: Optional[CurrentConditions] = None
    forecast: Optional[List[ForecastEntry]] = None
    last_location: Optional[LocationDescriptor] = None
    fetch_seq: int = field(default=0)

    def begin_fetch(self) -> int:
        """Enter LOADING, clear data and return the token for this fetch."""
        self.fetch_seq += 1
        self.status = FetchStatus.LOADING
        self.error = None
        self.current = None
        self.forecast = None
        return self.fetch_seq

    def is_current(self, token: int) -> bool:
        return token == self.fetch_seq

    def publish_success(
        self, token: int, current: CurrentConditions, forecast: List[ForecastEntry]
    ) -> bool:
        """Publish a completed fetch; returns False when the token is stale."""
        if not self.is_current(token):
            return False
        self.status = FetchStatus.SUCCESS
        self.error = None
        self.current = current
        self.forecast = forecast
        return True

    def publish_failure(self, error: WeatherError, token: Optional[int] = None) -> bool:
        """
        Publish a failure and clear both data fields.

        Resolver errors that never started a fetch pass no token.
        """
        if token is not None and not self.is_current(token):
            return False
        self.status = FetchStatus.FAILED
        self.error = error
        self.current = None
        self.forecast = None
        return True

    def remember_location(self, location: LocationDescriptor) -> None:
        self.last_location = location

    def set_unit(self, unit: UnitSystem) -> None:
        self.unit = unit
