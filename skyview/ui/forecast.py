"""
forecast.py rendering for the 5-day forecast cards and temperature trend
"""

import html
from typing import List

import streamlit as st

from skyview.core.chart_config import create_temperature_trend_chart
from skyview.models.weather import ForecastEntry, UnitSystem
from skyview.utils.weather_utils import get_weather_icon_url


def render(forecast: List[ForecastEntry], unit: UnitSystem) -> None:
    label = unit.temperature_label

    st.subheader("5-Day Forecast")
    if not forecast:
        st.caption("No forecast available.")
        return

    cols = st.columns(len(forecast))
    for col, day in zip(cols, forecast):
        alt = html.escape(day.description, quote=True)
        with col:
            st.markdown(
                f'<div class="forecast-card">'
                f"<b>{html.escape(day.date_label)}</b><br>"
                f'<img src="{get_weather_icon_url(day.icon)}" alt="{alt}"><br>'
                f"{day.temp_max}{label} / {day.temp_min}{label}"
                f"</div>",
                unsafe_allow_html=True,
            )

    st.subheader("Temperature Trend")
    fig = create_temperature_trend_chart(forecast, unit_label=label)
    st.plotly_chart(fig, width="stretch", key="forecast_trend")
