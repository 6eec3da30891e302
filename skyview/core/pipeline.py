"""
pipeline.py: Fetch-and-aggregate orchestration for the dashboard.

``fetch_and_aggregate`` runs one fetch cycle against a ``DashboardState``:

1. enter LOADING and clear data,
2. fetch current conditions,
3. fetch the forecast for the same location and unit,
4. aggregate the forecast into daily entries,
5. publish success, or publish the failure with both data fields cleared.

The two requests run sequentially; the forecast is only requested once
current conditions succeed. Each cycle takes a sequence token from the
state and a result whose token is no longer current is discarded.

``Dashboard`` wires the location resolver events to the pipeline.
"""

from typing import Callable, Optional

from skyview import config
from skyview.api import openweather_client
from skyview.api.geolocation import Geolocator
from skyview.core import location as resolver
from skyview.core.errors import UnknownError, WeatherError
from skyview.core.forecast import aggregate_daily_forecast
from skyview.models.weather import (
    CityLocation,
    CoordinateLocation,
    CurrentConditions,
    DashboardState,
    LocationDescriptor,
    UnitSystem,
)
from skyview.utils.log_util import app_logger

logger = app_logger(__name__)


def fetch_and_aggregate(
    location: LocationDescriptor,
    unit: UnitSystem,
    state: DashboardState,
    client=openweather_client,
    tz: Optional[str] = None,
) -> DashboardState:
    """
    Fetch current conditions and forecast, then publish them to ``state``.

    :param location: Location to fetch.
    :param unit: Unit system for the requests.
    :param state: Dashboard state to update.
    :param client: Module or object with get_current_weather/get_forecast.
    :param tz: Zone for forecast day boundaries; None uses viewer local time.
    :return: The updated state.
    """
    token = state.begin_fetch()
    state.remember_location(location)
    logger.info(f"Fetch #{token}: {location} ({unit.value})")

    try:
        payload = client.get_current_weather(location, unit)
        current = CurrentConditions.from_api(payload)

        # Later re-fetches go by the resolved place name
        if isinstance(location, CoordinateLocation) and current.name:
            state.remember_location(CityLocation(current.name))

        forecast_payload = client.get_forecast(location, unit)
        forecast = aggregate_daily_forecast(forecast_payload.get("list") or [], tz=tz)
    except WeatherError as e:
        if state.publish_failure(e, token):
            logger.error(f"Fetch #{token} failed: {e.user_message}")
        else:
            logger.info(f"Fetch #{token} failed after a newer fetch started; ignored")
        return state
    except Exception as e:
        logger.exception(f"Fetch #{token} failed unexpectedly: {e}")
        state.publish_failure(UnknownError(), token)
        return state

    if state.publish_success(token, current, forecast):
        logger.info(f"Fetch #{token} done: {current.name}, {len(forecast)} day(s)")
    else:
        logger.info(f"Fetch #{token} superseded by #{state.fetch_seq}; discarded")
    return state


class Dashboard:
    """
    Event handlers that drive the pipeline from user and startup events.

    Every handler that resolves a location calls ``on_location_resolved``;
    toggling the unit re-fetches the last resolved location.
    """

    def __init__(
        self,
        state: Optional[DashboardState] = None,
        client=openweather_client,
        tz: Optional[str] = None,
        fetch: Callable[..., DashboardState] = fetch_and_aggregate,
    ):
        self.state = state or DashboardState(unit=UnitSystem(config.DEFAULT_UNIT))
        self.client = client
        self.tz = tz
        self._fetch = fetch

    def on_location_resolved(self, location: LocationDescriptor) -> DashboardState:
        return self._fetch(
            location, self.state.unit, self.state, client=self.client, tz=self.tz
        )

    def start(self, geolocator: Geolocator) -> DashboardState:
        """Initial load: geolocate, or fall back to the default city."""
        return self.on_location_resolved(resolver.resolve_on_startup(geolocator))

    def on_search_submitted(self, raw_input: str) -> DashboardState:
        try:
            location = resolver.resolve_from_search(raw_input)
        except WeatherError as e:
            self.state.publish_failure(e)
            return self.state
        return self.on_location_resolved(location)

    def on_geolocation_requested(self, geolocator: Geolocator) -> DashboardState:
        try:
            location = resolver.resolve_from_geolocation_button(geolocator)
        except WeatherError as e:
            self.state.publish_failure(e)
            return self.state
        return self.on_location_resolved(location)

    def on_unit_toggled(self) -> DashboardState:
        """Switch units and re-fetch the last location, if there is one."""
        self.state.set_unit(self.state.unit.toggled())
        if self.state.last_location is None:
            logger.debug("Unit changed before any location resolved; nothing to fetch")
            return self.state
        return self.on_location_resolved(self.state.last_location)
