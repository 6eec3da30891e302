"""
Main streamlit.io application
"""

import streamlit as st

from skyview import config
from skyview.api.geolocation import get_geolocator
from skyview.core.pipeline import Dashboard
from skyview.core.styles import get_style_manager
from skyview.ui import components, current, forecast, search
from skyview.utils.log_util import app_logger

logger = app_logger(__name__)

st.set_page_config(
    page_title="Weather Dashboard",
    layout="wide",
    initial_sidebar_state="collapsed",
)


# Setup and initial load ########################

if "dashboard" not in st.session_state:
    dashboard = Dashboard(tz=config.get_setting("FORECAST_TIMEZONE"))
    st.session_state["dashboard"] = dashboard
    with st.spinner("Fetching weather data..."):
        dashboard.start(get_geolocator(components.get_viewer_ip()))
    logger.debug("Dashboard initialized")
else:
    dashboard = st.session_state["dashboard"]


# Present the dashboard ########################

st.title("Weather Dashboard")
search.render(dashboard)

# Read after the controls, which may have re-fetched
state = dashboard.state
condition = state.current.condition if state.current else None
get_style_manager().inject_styles(condition)

if components.render_status(state):
    left, right = st.columns([1, 1])
    with left:
        current.render(state.current, state.unit)
    with right:
        forecast.render(state.forecast or [], state.unit)
