"""Day-count utilities."""

from __future__ import annotations

from datetime import date, datetime

import pandas as pd


def _to_date(value: pd.Timestamp | datetime | date | str) -> date:
    return pd.Timestamp(value).date()


def days_actual(start_date: pd.Timestamp | datetime | date | str, end_date: pd.Timestamp | datetime | date | str) -> int:
    """Signed number of calendar days from start to end.

    Negative when end precedes start; callers decide what that means.
    """
    start = _to_date(start_date)
    end = _to_date(end_date)
    return (end - start).days


def days_actual_vectorized(start_dates: pd.Series, end_dates: pd.Series) -> pd.Series:
    """Vectorized signed calendar day count for aligned start/end date series."""
    start = pd.to_datetime(start_dates)
    end = pd.to_datetime(end_dates)
    return (end - start).dt.days.astype(int)
