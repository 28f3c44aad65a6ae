"""Date helpers shared across calculations and dashboard layers."""

from __future__ import annotations

from datetime import date, datetime

import pandas as pd


def to_timestamp(value: pd.Timestamp | datetime | date | str) -> pd.Timestamp:
    """Convert an input value to a timezone-naive pandas Timestamp."""
    ts = pd.Timestamp(value)
    if ts.tz is not None:
        ts = ts.tz_convert(None)
    return ts


def to_date(value: pd.Timestamp | datetime | date | str) -> date:
    """Convert an input value to a plain calendar date."""
    return to_timestamp(value).date()


def accrual_dates(start_date: date, days: int) -> list[date]:
    """Return the ``days`` calendar dates after start_date, start excluded.

    Empty when days is zero or negative.
    """
    if days <= 0:
        return []
    start = to_timestamp(start_date) + pd.Timedelta(days=1)
    return [ts.date() for ts in pd.date_range(start=start, periods=days, freq='D')]
