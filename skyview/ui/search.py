"""
search.py rendering for the location and unit controls
"""

import streamlit as st

from skyview.api.geolocation import get_geolocator
from skyview.core.pipeline import Dashboard
from skyview.models.weather import UnitSystem
from skyview.ui.components import get_viewer_ip
from skyview.utils.log_util import app_logger

logger = app_logger(__name__)


def render(dashboard: Dashboard) -> None:
    """Render the search form, geolocation button and unit toggle."""
    col_search, col_geo, col_unit = st.columns([4, 1, 1], vertical_alignment="bottom")

    with col_search:
        with st.form("city_search", clear_on_submit=True, border=False):
            city = st.text_input(
                "City", placeholder="Search for a city...", label_visibility="collapsed"
            )
            submitted = st.form_submit_button("Search")
        if submitted:
            logger.debug(f"Search submitted: {city!r}")
            with st.spinner("Fetching weather data..."):
                dashboard.on_search_submitted(city)

    with col_geo:
        if st.button("📍 My location", width="stretch"):
            with st.spinner("Locating..."):
                dashboard.on_geolocation_requested(get_geolocator(get_viewer_ip()))

    with col_unit:
        st.toggle(
            "°F",
            value=dashboard.state.unit is UnitSystem.IMPERIAL,
            key="unit_toggle",
            on_change=dashboard.on_unit_toggled,
        )
