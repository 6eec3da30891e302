"""
Current conditions panel.

Renders location, icon, temperature and the parameter tiles for the most
recent successful fetch.
"""

import streamlit as st

from skyview.core.styles import get_style_manager
from skyview.models.weather import CurrentConditions, UnitSystem
from skyview.utils.weather_utils import (
    format_local_time,
    format_measurement,
    format_temperature,
    format_visibility_km,
    format_wind_direction,
    get_weather_icon_url,
)


def get_parameter_tiles(current: CurrentConditions, unit: UnitSystem) -> list[tuple[str, str]]:
    """
    Build (label, value) pairs for the parameter grid.

    :param current: Current conditions
    :param unit: Unit system of the fetch
    :return: List of (label, formatted value)
    """
    return [
        ("Humidity", format_measurement(current.humidity, "%")),
        ("Wind Speed", format_measurement(current.wind_speed, f" {unit.speed_label}")),
        ("Wind Direction", format_wind_direction(current.wind_deg)),
        ("Feels Like", format_temperature(current.feels_like, unit.temperature_label)),
        ("Pressure", format_measurement(current.pressure, " hPa")),
        ("Visibility", format_visibility_km(current.visibility)),
        (
            "Sunrise",
            format_local_time(current.sunrise, current.timezone_offset)
            if current.sunrise
            else "N/A",
        ),
        (
            "Sunset",
            format_local_time(current.sunset, current.timezone_offset)
            if current.sunset
            else "N/A",
        ),
    ]


def render(current: CurrentConditions, unit: UnitSystem) -> None:
    style_manager = get_style_manager()

    st.subheader(f"{current.name or 'Unknown'}, {current.country or '--'}")

    icon_col, temp_col = st.columns([1, 2])
    with icon_col:
        icon_url = get_weather_icon_url(current.icon or "01d")
        st.image(icon_url, caption=current.description or "Weather", width=110)
    with temp_col:
        st.markdown(f"# {format_temperature(current.temperature, unit.temperature_label)}")
        st.caption((current.description or "N/A").capitalize())

    tiles = get_parameter_tiles(current, unit)
    for row_start in range(0, len(tiles), 4):
        cols = st.columns(4)
        for col, (label, value) in zip(cols, tiles[row_start : row_start + 4]):
            with col:
                st.markdown(
                    style_manager.build_metric_tile(label, value), unsafe_allow_html=True
                )
