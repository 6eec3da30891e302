"""
Centralized style management for dashboard components.

Generates the page background gradient for the current condition and the
CSS used by the metric tiles and forecast cards.
"""

import html
from dataclasses import dataclass
from typing import Optional

import streamlit as st

from skyview.utils.log_util import app_logger
from skyview.utils.weather_utils import get_weather_background

logger = app_logger(__name__)


@dataclass
class StyleConfig:
    """Configuration dataclass for style parameters."""

    text_color: str = "#ffffff"
    tile_bg: str = "rgba(255, 255, 255, 0.18)"
    tile_border: str = "rgba(255, 255, 255, 0.3)"
    error_bg: str = "rgba(153, 27, 27, 0.4)"
    error_text: str = "#fecaca"
    tile_radius: str = "12px"
    mobile_breakpoint: str = "768px"


class StyleManager:
    """
    Style management with singleton pattern.

    Usage:
        style_manager = get_style_manager()
        style_manager.inject_styles(condition="Rain")

    CSS Classes:
        - .metric-tile: Current-conditions parameter tile
        - .forecast-card: One day of the 5-day forecast
        - .status-banner: Loading and error messages
    """

    _instance: Optional["StyleManager"] = None

    def __new__(cls) -> "StyleManager":
        """Implement singleton pattern."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self) -> None:
        if not hasattr(self, "_config"):
            self._config = StyleConfig()

    @property
    def config(self) -> StyleConfig:
        return self._config

    def inject_styles(self, condition: Optional[str] = None) -> None:
        """Inject CSS with the background for ``condition`` (weather[0].main)."""
        st.markdown(f"<style>{self.generate_css(condition)}</style>", unsafe_allow_html=True)
        logger.debug(f"CSS styles injected for condition={condition}")

    def generate_css(self, condition: Optional[str] = None) -> str:
        start, end = get_weather_background(condition)
        cfg = self.config
        return f"""
        .stApp {{
            background: linear-gradient(135deg, {start}, {end});
            transition: background 1s ease-in-out;
        }}

        .metric-tile, .forecast-card {{
            background: {cfg.tile_bg};
            border: 1px solid {cfg.tile_border};
            border-radius: {cfg.tile_radius};
            color: {cfg.text_color};
            padding: 0.75rem;
            margin-bottom: 0.5rem;
            text-align: center;
        }}

        .metric-tile .label {{
            font-weight: 600;
            display: block;
        }}

        .forecast-card img {{
            width: 64px;
            height: 64px;
        }}

        .status-banner {{
            background: {cfg.error_bg};
            color: {cfg.error_text};
            border-radius: 8px;
            padding: 1rem;
            text-align: center;
        }}

        @media (max-width: {cfg.mobile_breakpoint}) {{
            .metric-tile, .forecast-card {{
                padding: 0.5rem;
                font-size: 0.85rem;
            }}
        }}
        """

    def build_metric_tile(self, label: str, value: str) -> str:
        """Metric tile HTML; label and value are escaped."""
        return (
            f'<div class="metric-tile"><span class="label">{html.escape(label)}</span>'
            f"{html.escape(value)}</div>"
        )


def get_style_manager() -> StyleManager:
    """Get the singleton StyleManager instance."""
    return StyleManager()
