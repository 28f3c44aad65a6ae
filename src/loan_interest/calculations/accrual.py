"""Simple-interest accrual engine."""

from __future__ import annotations

from datetime import date, datetime

import pandas as pd

from loan_interest.calculations.day_count import days_actual
from loan_interest.config import DAYS_IN_YEAR
from loan_interest.models.loan import DailyAccrual, Loan, LoanParams
from loan_interest.utils.date_utils import accrual_dates, to_date
from loan_interest.utils.logging import get_logger

LOGGER = get_logger(__name__)

ACCRUAL_COLUMNS = [
    'date',
    'days_elapsed',
    'interest_with_margin',
    'interest_without_margin',
    'margin_interest',
    'cumulative_with_margin',
    'cumulative_without_margin',
]


def daily_rate(annual_rate: float) -> float:
    """Convert a fractional annual rate to a per-day rate."""
    return float(annual_rate) / DAYS_IN_YEAR


def compute_daily_accruals(
    start_date: date,
    days: int,
    principal: float,
    base_rate: float,
    margin: float,
) -> dict[date, DailyAccrual]:
    """One accrual per elapsed day, keyed by date, start date excluded.

    Returns an empty mapping when days <= 0.
    """
    with_margin = float(principal) * daily_rate(base_rate + margin)
    without_margin = float(principal) * daily_rate(base_rate)
    accruals: dict[date, DailyAccrual] = {}
    for elapsed, current_date in enumerate(accrual_dates(start_date, days), start=1):
        accruals[current_date] = DailyAccrual(
            interest_with_margin=with_margin,
            interest_without_margin=without_margin,
            days_elapsed=elapsed,
        )
    return accruals


def compute_total_interest(principal: float, base_rate: float, margin: float, days: int) -> float:
    """Total simple interest over ``days``, computed directly rather than summed.

    A negative day count yields a negative total.
    """
    return float(principal) * daily_rate(base_rate + margin) * days


def build_accrual_result(params: LoanParams | Loan) -> tuple[float, dict[date, DailyAccrual]]:
    """Return fresh ``(total_interest, daily_accruals)`` for the given terms."""
    days = days_actual(params.start_date, params.end_date)
    if days < 0:
        LOGGER.debug('End date %s precedes start date %s; no daily accruals.', params.end_date, params.start_date)
    accruals = compute_daily_accruals(params.start_date, days, params.principal, params.base_rate, params.margin)
    total = compute_total_interest(params.principal, params.base_rate, params.margin, days)
    return total, accruals


def compute(loan: Loan) -> Loan:
    """Recompute the loan's derived fields from its terms, replacing prior values."""
    total, accruals = build_accrual_result(loan)
    loan.total_interest = total
    loan.daily_accruals = accruals
    LOGGER.debug('Computed %s daily accruals, total interest %.10f.', len(accruals), total)
    return loan


def accruals_frame(loan: Loan) -> pd.DataFrame:
    """Tabulate the loan's daily accruals in date order with running totals."""
    if not loan.daily_accruals:
        return pd.DataFrame(columns=ACCRUAL_COLUMNS)
    rows = [
        {
            'date': pd.Timestamp(day),
            'days_elapsed': accrual.days_elapsed,
            'interest_with_margin': accrual.interest_with_margin,
            'interest_without_margin': accrual.interest_without_margin,
        }
        for day, accrual in sorted(loan.daily_accruals.items())
    ]
    out = pd.DataFrame(rows)
    out['margin_interest'] = out['interest_with_margin'] - out['interest_without_margin']
    out['cumulative_with_margin'] = out['interest_with_margin'].cumsum()
    out['cumulative_without_margin'] = out['interest_without_margin'].cumsum()
    return out[ACCRUAL_COLUMNS]


def accrued_interest_to_date(loan: Loan, as_of_date: pd.Timestamp | datetime | date | str) -> float:
    """Interest with margin accrued on days up to and including as_of_date."""
    as_of = to_date(as_of_date)
    return float(
        sum(accrual.interest_with_margin for day, accrual in loan.daily_accruals.items() if day <= as_of)
    )
