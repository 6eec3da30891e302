#!/usr/bin/env python3
"""
forecast_report.py: Print current conditions and the daily forecast for a
location without starting the Streamlit app.

Usage:
    python -m skyview.cli.forecast_report --city "Paris" [--units imperial]
    python -m skyview.cli.forecast_report --lat 48.85 --lon 2.35
    python -m skyview.cli.forecast_report --geolocate
"""

import argparse
import sys

from skyview import config
from skyview.api.geolocation import get_geolocator
from skyview.core.pipeline import Dashboard
from skyview.models.weather import (
    CoordinateLocation,
    DashboardState,
    FetchStatus,
    UnitSystem,
)
from skyview.utils.log_util import app_logger
from skyview.utils.weather_utils import (
    format_measurement,
    format_temperature,
    format_wind_direction,
)

logger = app_logger(__name__)


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Print a weather report")
    where = parser.add_mutually_exclusive_group()
    where.add_argument("--city", help="City name to search")
    where.add_argument(
        "--geolocate", action="store_true", help="Use geolocation, failing if unavailable"
    )
    parser.add_argument("--lat", type=float, help="Latitude (with --lon)")
    parser.add_argument("--lon", type=float, help="Longitude (with --lat)")
    parser.add_argument(
        "--units",
        choices=[u.value for u in UnitSystem],
        default=config.DEFAULT_UNIT,
        help="Unit system (default: %(default)s)",
    )
    parser.add_argument(
        "--tz", default=None, help="Zone for forecast day boundaries (default: local)"
    )
    args = parser.parse_args(argv)
    if (args.lat is None) != (args.lon is None):
        parser.error("--lat and --lon must be given together")
    if args.lat is not None and (args.city or args.geolocate):
        parser.error("--lat/--lon cannot be combined with --city or --geolocate")
    return args


def format_report(state: DashboardState) -> str:
    """Render a successful state as plain text."""
    unit = state.unit
    cur = state.current
    lines = [
        f"{cur.name or 'Unknown'}, {cur.country or '--'}",
        f"  {format_temperature(cur.temperature, unit.temperature_label)} "
        f"{cur.description} (feels like "
        f"{format_temperature(cur.feels_like, unit.temperature_label)})",
        f"  Humidity {format_measurement(cur.humidity, '%')}  "
        f"Wind {format_measurement(cur.wind_speed, ' ' + unit.speed_label)} "
        f"{format_wind_direction(cur.wind_deg)}",
        "",
        "5-Day Forecast",
    ]
    for day in state.forecast or []:
        lines.append(
            f"  {day.date_label:<12} {day.temp:>4}{unit.temperature_label}  "
            f"{day.temp_max:>4} / {day.temp_min:<4} {day.description}"
        )
    return "\n".join(lines)


def main(argv=None) -> int:
    args = parse_args(argv)
    dashboard = Dashboard(state=DashboardState(unit=UnitSystem(args.units)), tz=args.tz)

    if args.city is not None:
        state = dashboard.on_search_submitted(args.city)
    elif args.geolocate:
        state = dashboard.on_geolocation_requested(get_geolocator())
    elif args.lat is not None:
        state = dashboard.on_location_resolved(CoordinateLocation(args.lat, args.lon))
    else:
        state = dashboard.start(get_geolocator())

    if state.status is not FetchStatus.SUCCESS:
        print(f"❌ {state.error.user_message if state.error else 'No data'}")
        return 1

    print(format_report(state))
    return 0


if __name__ == "__main__":
    sys.exit(main())
