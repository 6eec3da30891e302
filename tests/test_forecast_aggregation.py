"""
Unit tests for daily forecast aggregation.

Covers day grouping, min/max over all entries, representative selection in
the midday window, dropped days, truncation and rounding.
"""

from datetime import datetime, timedelta, timezone

import pandas as pd
import pytest

from skyview.core.forecast import (
    aggregate_daily_forecast,
    forecast_to_dataframe,
    localize_timestamps,
)


def _utc(year, month, day, hour):
    return int(datetime(year, month, day, hour, tzinfo=timezone.utc).timestamp())


def _item(ts, temp, icon="01d", description="clear sky"):
    return {
        "dt": ts,
        "main": {"temp": temp},
        "weather": [{"icon": icon, "description": description}],
    }


def _three_hourly(start, days, temp_for_hour=lambda h: 10.0):
    """Build 3-hour entries from ``start`` (UTC) for ``days`` days."""
    items = []
    for i in range(days * 8):
        ts = start + timedelta(hours=3 * i)
        items.append(_item(int(ts.timestamp()), temp_for_hour(ts.hour)))
    return items


class TestRepresentativeSelection:
    """Test choice of the per-day representative entry."""

    def test_monday_scenario(self):
        """Entries at 9, 12, 15 with temps 10, 15, 12."""
        items = [
            _item(_utc(2024, 1, 15, 9), 10, icon="02d", description="few clouds"),
            _item(_utc(2024, 1, 15, 12), 15, icon="01d", description="clear sky"),
            _item(_utc(2024, 1, 15, 15), 12, icon="03d", description="scattered clouds"),
        ]
        result = aggregate_daily_forecast(items, tz="UTC")

        assert len(result) == 1
        day = result[0]
        assert day.temp == 15
        assert day.temp_max == 15
        assert day.temp_min == 10
        assert day.icon == "01d"
        assert day.description == "clear sky"
        assert day.dt == _utc(2024, 1, 15, 12)
        assert day.date_label == "Mon, Jan 15"

    def test_day_without_midday_entry_is_dropped(self):
        items = [
            _item(_utc(2024, 1, 15, 6), 4),
            _item(_utc(2024, 1, 15, 20), 8),
            _item(_utc(2024, 1, 16, 12), 9),
        ]
        result = aggregate_daily_forecast(items, tz="UTC")

        assert [d.date_label for d in result] == ["Tue, Jan 16"]

    def test_first_entry_in_window_wins(self):
        items = [
            _item(_utc(2024, 1, 15, 11), 5, icon="10d"),
            _item(_utc(2024, 1, 15, 13), 7, icon="01d"),
        ]
        result = aggregate_daily_forecast(items, tz="UTC")

        assert result[0].icon == "10d"
        assert result[0].temp == 5

    @pytest.mark.parametrize("hour", [11, 12, 13])
    def test_window_bounds_are_inclusive(self, hour):
        result = aggregate_daily_forecast([_item(_utc(2024, 1, 15, hour), 1)], tz="UTC")
        assert len(result) == 1

    @pytest.mark.parametrize("hour", [10, 14])
    def test_hours_outside_window(self, hour):
        result = aggregate_daily_forecast([_item(_utc(2024, 1, 15, hour), 1)], tz="UTC")
        assert result == []


class TestDailyBounds:
    """Test min/max computed over every entry of a day."""

    def test_bounds_use_all_entries(self):
        items = [
            _item(_utc(2024, 1, 15, 0), -3.4),
            _item(_utc(2024, 1, 15, 12), 5.5),
            _item(_utc(2024, 1, 15, 21), 7.6),
        ]
        day = aggregate_daily_forecast(items, tz="UTC")[0]

        assert day.temp == 6
        assert day.temp_max == 8
        assert day.temp_min == -3

    def test_half_values_round_up(self):
        items = [
            _item(_utc(2024, 1, 15, 3), -2.5),
            _item(_utc(2024, 1, 15, 12), 2.5),
        ]
        day = aggregate_daily_forecast(items, tz="UTC")[0]

        assert day.temp == 3
        assert day.temp_max == 3
        assert day.temp_min == -2

    def test_other_days_do_not_leak_into_bounds(self):
        items = [
            _item(_utc(2024, 1, 14, 21), 40),
            _item(_utc(2024, 1, 15, 12), 10),
            _item(_utc(2024, 1, 16, 0), -20),
        ]
        day = aggregate_daily_forecast(items, tz="UTC")[0]

        assert (day.temp_min, day.temp_max) == (10, 10)


class TestOrderingAndTruncation:
    """Test ordering and the five-day limit."""

    def test_at_most_five_days_in_order(self):
        items = _three_hourly(datetime(2024, 1, 15, tzinfo=timezone.utc), days=7)
        result = aggregate_daily_forecast(items, tz="UTC")

        assert len(result) == 5
        dts = [d.dt for d in result]
        assert dts == sorted(dts)
        assert result[0].date_label == "Mon, Jan 15"
        assert result[-1].date_label == "Fri, Jan 19"

    def test_max_days_parameter(self):
        items = _three_hourly(datetime(2024, 1, 15, tzinfo=timezone.utc), days=4)
        assert len(aggregate_daily_forecast(items, tz="UTC", max_days=2)) == 2

    def test_unsorted_input_is_ordered(self):
        items = [
            _item(_utc(2024, 1, 16, 12), 2),
            _item(_utc(2024, 1, 15, 12), 1),
        ]
        result = aggregate_daily_forecast(items, tz="UTC")
        assert [d.temp for d in result] == [1, 2]

    def test_empty_list(self):
        assert aggregate_daily_forecast([], tz="UTC") == []


class TestTimeZones:
    """Test calendar-day boundaries."""

    def test_zone_changes_grouping(self):
        # 16:00 UTC is 11:00 in New York; 03:00 UTC next day is 22:00 the same NY day
        items = [
            _item(_utc(2024, 1, 15, 16), 10),
            _item(_utc(2024, 1, 16, 3), 2),
        ]

        ny = aggregate_daily_forecast(items, tz="America/New_York")
        assert len(ny) == 1
        assert ny[0].date_label == "Mon, Jan 15"
        assert (ny[0].temp_min, ny[0].temp_max) == (2, 10)

        assert aggregate_daily_forecast(items, tz="UTC") == []

    def test_default_uses_local_time(self):
        local_noon = datetime(2024, 3, 4, 12, 0)
        local_morning = datetime(2024, 3, 4, 6, 0)
        items = [
            _item(int(local_morning.timestamp()), 3),
            _item(int(local_noon.timestamp()), 9),
        ]
        result = aggregate_daily_forecast(items)

        assert len(result) == 1
        assert result[0].date_label == "Mon, Mar 4"
        assert result[0].temp_min == 3

    def test_localize_with_zone(self):
        dts = pd.Series([_utc(2024, 7, 1, 12)])
        local = localize_timestamps(dts, "Europe/Paris")
        assert local.iloc[0] == pd.Timestamp("2024-07-01 14:00")


class TestForecastFrame:
    """Test flattening of raw forecast items."""

    def test_incomplete_items_skipped(self):
        items = [
            {"dt": _utc(2024, 1, 15, 12), "main": {}},
            {"main": {"temp": 4}},
            {"dt": _utc(2024, 1, 15, 15), "main": {"temp": 4}},
        ]
        df = forecast_to_dataframe(items)

        assert len(df) == 1
        assert df.iloc[0]["icon"] == ""
        assert df.iloc[0]["description"] == ""

    def test_empty_frame_has_columns(self):
        df = forecast_to_dataframe([])
        assert list(df.columns) == ["dt", "temp", "icon", "description"]
