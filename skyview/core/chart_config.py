"""
chart_config.py

Plotly configuration helpers for the forecast charts.

Provides standardized layout, axis and colour settings plus the
temperature trend figure shown beside the 5-day forecast cards.
"""

from typing import Dict, List, Optional

import plotly.graph_objects as go

from skyview.models.weather import ForecastEntry


def get_default_margins(compact: bool = False) -> Dict[str, int]:
    """
    Get standard margin configurations for charts.

    :param compact: If True, returns reduced margins for narrow columns
    :return: Dictionary with margin settings
    """
    if compact:
        return dict(l=30, r=10, t=30, b=30)
    else:
        return dict(l=50, r=20, t=40, b=40)


def get_standard_colors() -> Dict[str, str]:
    """
    Get standard color palette used across charts.

    :return: Dictionary with color definitions
    """
    return {
        "temp_max": "#8884d8",
        "temp_min": "#82ca9d",
        "temp_fill": "rgba(136, 132, 216, 0.15)",
        "grid": "lightgray",
    }


def apply_forecast_layout(
    fig: go.Figure,
    height: int = 260,
    title: Optional[str] = None,
    compact: bool = True,
    unit_label: str = "",
) -> go.Figure:
    """
    Apply the standard forecast chart layout.

    :param fig: Plotly figure to configure
    :param height: Chart height in pixels
    :param title: Chart title (optional)
    :param compact: Use compact margins if True
    :param unit_label: Temperature unit appended to the y-axis ticks
    :return: Configured figure
    """
    layout_config = {
        "height": height,
        "margin": get_default_margins(compact),
        "showlegend": True,
        "hovermode": "x unified",
        "template": "plotly_white",
        "legend": dict(orientation="h", yanchor="bottom", y=1.02, x=0),
    }
    if title:
        layout_config["title"] = title

    fig.update_layout(**layout_config)
    fig.update_xaxes(showgrid=False, type="category")
    fig.update_yaxes(
        showgrid=True, gridcolor=get_standard_colors()["grid"], ticksuffix=unit_label
    )
    return fig


def create_temperature_trend_chart(
    forecast: List[ForecastEntry], unit_label: str = ""
) -> go.Figure:
    """
    Line chart of daily max/min temperature.

    :param forecast: Aggregated forecast entries
    :param unit_label: Temperature unit label, e.g. °C
    :return: Plotly figure with "Max Temp" and "Min Temp" traces
    """
    colors = get_standard_colors()
    days = [entry.date_label.split(",")[0] for entry in forecast]

    fig = go.Figure()
    fig.add_trace(
        go.Scatter(
            x=days,
            y=[entry.temp_max for entry in forecast],
            name="Max Temp",
            mode="lines+markers",
            line=dict(color=colors["temp_max"], shape="spline"),
            hovertemplate=f"%{{y}}{unit_label}",
        )
    )
    fig.add_trace(
        go.Scatter(
            x=days,
            y=[entry.temp_min for entry in forecast],
            name="Min Temp",
            mode="lines+markers",
            line=dict(color=colors["temp_min"], shape="spline"),
            fill="tonexty",
            fillcolor=colors["temp_fill"],
            hovertemplate=f"%{{y}}{unit_label}",
        )
    )
    return apply_forecast_layout(fig, unit_label=unit_label)
