"""
Reusable UI components for the Skyview dashboard.

Status banners shared by the main page and the panels, and lookup of the
viewer's address for IP geolocation.
"""

import ipaddress
from typing import Optional

import streamlit as st

from skyview.models.weather import DashboardState, FetchStatus


def render_status(state: DashboardState) -> bool:
    """
    Render the loading or error banner for the current fetch status.

    :param state: Dashboard state
    :return: True when weather data is available to render
    """
    if state.status is FetchStatus.LOADING:
        st.info("Fetching weather data...")
        return False

    if state.status is FetchStatus.FAILED and state.error is not None:
        st.markdown(
            f'<div class="status-banner">{state.error.user_message}</div>',
            unsafe_allow_html=True,
        )
        return False

    return state.current is not None


def get_viewer_ip() -> Optional[str]:
    """
    Public address of the browser viewing the app.

    Prefers the first ``X-Forwarded-For`` hop (set by reverse proxies), then
    the websocket peer. Private and loopback addresses give None, so a local
    run looks up the machine's own public address.

    :return: Global IP address string, or None
    """
    forwarded = st.context.headers.get("X-Forwarded-For") or ""
    candidates = [forwarded.split(",")[0].strip(), st.context.ip_address or ""]
    for candidate in candidates:
        try:
            if candidate and ipaddress.ip_address(candidate).is_global:
                return candidate
        except ValueError:
            continue
    return None
