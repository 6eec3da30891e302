"""
Unit tests for weather models and dashboard state transitions.
"""

from skyview.core.errors import LocationNotFound
from skyview.models.weather import (
    CurrentConditions,
    DashboardState,
    FetchStatus,
    ForecastEntry,
    UnitSystem,
)

ENTRY = ForecastEntry(
    dt=1, date_label="Mon, Jan 15", temp=5, temp_max=6, temp_min=1, icon="01d", description="clear"
)


class TestUnitSystem:
    def test_toggle(self):
        assert UnitSystem.METRIC.toggled() is UnitSystem.IMPERIAL
        assert UnitSystem.IMPERIAL.toggled() is UnitSystem.METRIC

    def test_labels(self):
        assert UnitSystem.METRIC.temperature_label == "°C"
        assert UnitSystem.IMPERIAL.speed_label == "mph"
        assert UnitSystem("imperial") is UnitSystem.IMPERIAL


class TestCurrentConditions:
    def test_partial_payload(self):
        current = CurrentConditions.from_api({"name": "Oslo", "main": {"temp": -4.0}})

        assert current.name == "Oslo"
        assert current.temperature == -4.0
        assert current.country == ""
        assert current.humidity is None
        assert current.icon == ""
        assert current.timezone_offset == 0

    def test_full_payload(self):
        current = CurrentConditions.from_api(
            {
                "name": "Tokyo",
                "sys": {"country": "JP", "sunrise": 10, "sunset": 20},
                "timezone": 32400,
                "visibility": 9000,
                "wind": {"speed": 3.1, "deg": 90},
                "weather": [{"main": "Rain", "description": "light rain", "icon": "10d"}],
            }
        )

        assert current.country == "JP"
        assert current.timezone_offset == 32400
        assert current.condition == "Rain"
        assert current.wind_deg == 90


class TestDashboardState:
    def test_begin_fetch_clears_data(self):
        state = DashboardState()
        token = state.begin_fetch()
        state.publish_success(token, CurrentConditions.from_api({"name": "A"}), [ENTRY])

        state.begin_fetch()

        assert state.status is FetchStatus.LOADING
        assert state.current is None and state.forecast is None

    def test_stale_token_rejected(self):
        state = DashboardState()
        old = state.begin_fetch()
        new = state.begin_fetch()

        assert not state.publish_success(old, CurrentConditions.from_api({}), [ENTRY])
        assert not state.publish_failure(LocationNotFound(), old)
        assert state.status is FetchStatus.LOADING
        assert state.publish_success(new, CurrentConditions.from_api({}), [ENTRY])
        assert state.status is FetchStatus.SUCCESS

    def test_failure_without_token(self):
        state = DashboardState()
        token = state.begin_fetch()
        state.publish_success(token, CurrentConditions.from_api({}), [ENTRY])

        state.publish_failure(LocationNotFound())

        assert state.status is FetchStatus.FAILED
        assert state.current is None and state.forecast is None
