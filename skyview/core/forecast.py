"""
forecast.py: Daily aggregation of the 3-hour interval forecast.

The ``/forecast`` endpoint returns roughly forty 3-hour entries. This module
collapses them into one entry per calendar day:

- min/max temperature over every entry of the day,
- icon, description and temperature from the day's representative entry,
  the first one whose local hour falls in the midday window,
- days without a midday entry are dropped,
- at most ``FORECAST_MAX_DAYS`` days, earliest first.

Calendar days use the viewer's local time zone unless a zone name is given.
"""

from datetime import datetime
from typing import Iterable, List, Optional

import pandas as pd

from skyview import config
from skyview.models.weather import ForecastEntry
from skyview.utils.log_util import app_logger
from skyview.utils.weather_utils import round_half_up

logger = app_logger(__name__)

FORECAST_COLUMNS = ["dt", "temp", "icon", "description"]


def forecast_to_dataframe(items: Iterable[dict]) -> pd.DataFrame:
    """
    Flatten raw forecast list items into a DataFrame.

    :param items: ``list`` entries of the forecast payload.
    :return: DataFrame with dt, temp, icon and description columns.
    """
    rows = []
    for item in items:
        temp = (item.get("main") or {}).get("temp")
        if item.get("dt") is None or temp is None:
            logger.debug(f"Skipping incomplete forecast item: {item}")
            continue
        weather = (item.get("weather") or [{}])[0]
        rows.append(
            {
                "dt": int(item["dt"]),
                "temp": float(temp),
                "icon": weather.get("icon") or "",
                "description": weather.get("description") or "",
            }
        )
    return pd.DataFrame(rows, columns=FORECAST_COLUMNS)


def localize_timestamps(dts: pd.Series, tz: Optional[str] = None) -> pd.Series:
    """
    Convert epoch seconds into naive local wall-clock datetimes.

    :param dts: Series of epoch seconds.
    :param tz: IANA zone name; None uses the viewer's local time zone.
    :return: Series of naive datetimes aligned with ``dts``.
    """
    if tz:
        utc = pd.to_datetime(dts, unit="s", utc=True)
        return utc.dt.tz_convert(tz).dt.tz_localize(None)
    return pd.Series(
        pd.to_datetime([datetime.fromtimestamp(ts) for ts in dts]), index=dts.index
    )


def format_date_label(ts: pd.Timestamp) -> str:
    """Short date label, e.g. ``Mon, Jan 15``."""
    return f"{ts.strftime(config.DATE_LABEL_FORMAT)} {ts.day}"


def aggregate_daily_forecast(
    items: Iterable[dict],
    tz: Optional[str] = None,
    max_days: int = config.FORECAST_MAX_DAYS,
) -> List[ForecastEntry]:
    """
    Collapse 3-hour forecast entries into one ForecastEntry per day.

    :param items: Chronological ``list`` entries of the forecast payload.
    :param tz: Zone used for day boundaries; None means viewer local time.
    :param max_days: Maximum number of days returned.
    :return: Up to ``max_days`` entries ordered by date.
    """
    df = forecast_to_dataframe(items)
    if df.empty:
        return []

    df = df.sort_values("dt", kind="stable").reset_index(drop=True)
    df["local"] = localize_timestamps(df["dt"], tz)
    df["day"] = df["local"].dt.date
    df["hour"] = df["local"].dt.hour

    bounds = df.groupby("day", sort=False)["temp"].agg(["min", "max"])

    in_window = df["hour"].between(
        config.REPRESENTATIVE_HOUR_START, config.REPRESENTATIVE_HOUR_END
    )
    representatives = df[in_window].drop_duplicates("day", keep="first")

    dropped = df["day"].nunique() - len(representatives)
    if dropped:
        logger.debug(f"{dropped} day(s) without a midday entry dropped")

    entries = []
    for row in representatives.head(max_days).itertuples(index=False):
        day_bounds = bounds.loc[row.day]
        entries.append(
            ForecastEntry(
                dt=int(row.dt),
                date_label=format_date_label(row.local),
                temp=round_half_up(row.temp),
                temp_max=round_half_up(day_bounds["max"]),
                temp_min=round_half_up(day_bounds["min"]),
                icon=row.icon,
                description=row.description,
            )
        )
    return entries
