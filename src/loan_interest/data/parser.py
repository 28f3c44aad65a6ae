"""Raw text input parsing and validation for loan terms."""

from __future__ import annotations

import math
from collections.abc import Mapping
from datetime import date

import pandas as pd

from loan_interest.config import DATE_FORMAT, HIGH_RATE_WARNING_THRESHOLD, PERCENT_SCALE
from loan_interest.exceptions import LoanInputError
from loan_interest.models.loan import Loan, LoanParams
from loan_interest.utils.logging import get_logger

LOGGER = get_logger(__name__)

FORM_FIELDS = [
    'start_date',
    'end_date',
    'principal',
    'currency',
    'base_rate_percent',
    'margin_percent',
]


def _clean(value: object) -> str:
    return '' if value is None else str(value).strip()


def parse_date(value: object, field: str) -> date:
    """Parse a YYYY-MM-DD string into a date."""
    text = _clean(value)
    if not text:
        raise LoanInputError(field, value, 'a date in YYYY-MM-DD format is required.')
    try:
        ts = pd.to_datetime(text, format=DATE_FORMAT)
    except (ValueError, TypeError) as exc:
        raise LoanInputError(field, value, f'expected YYYY-MM-DD ({exc}).') from exc
    if pd.isna(ts):
        raise LoanInputError(field, value, 'a date in YYYY-MM-DD format is required.')
    return ts.date()


def parse_number(value: object, field: str) -> float:
    """Parse a finite float. NaN and infinities are rejected."""
    text = _clean(value)
    number = pd.to_numeric(text, errors='coerce') if text else float('nan')
    if pd.isna(number):
        raise LoanInputError(field, value, 'a number is required.')
    number = float(number)
    if not math.isfinite(number):
        raise LoanInputError(field, value, 'the number must be finite.')
    return number


def parse_percent(value: object, field: str) -> float:
    """Parse a percentage and return it as a fraction (5 -> 0.05)."""
    return parse_number(value, field) / PERCENT_SCALE


def parse_loan_id(value: object) -> int:
    """Parse a loan id typed by the user."""
    text = _clean(value)
    try:
        return int(text)
    except ValueError as exc:
        raise LoanInputError('loan_id', value, 'an integer loan id is required.') from exc


def parse_loan_params(
    start_date: object,
    end_date: object,
    principal: object,
    currency: object,
    base_rate_percent: object,
    margin_percent: object,
) -> LoanParams:
    """Build LoanParams from raw text fields.

    Raises:
        LoanInputError: on the first field that cannot be parsed, or when the
            range is reversed or the principal negative.
    """
    start = parse_date(start_date, 'start_date')
    end = parse_date(end_date, 'end_date')
    if end < start:
        raise LoanInputError('end_date', end_date, f'end date must not be before start date {start.isoformat()}.')
    amount = parse_number(principal, 'principal')
    if amount < 0:
        raise LoanInputError('principal', principal, 'the loan amount must not be negative.')
    return LoanParams(
        start_date=start,
        end_date=end,
        principal=amount,
        currency=_clean(currency),
        base_rate=parse_percent(base_rate_percent, 'base_rate_percent'),
        margin=parse_percent(margin_percent, 'margin_percent'),
    )


def validate_loan_params(params: LoanParams) -> list[str]:
    """Return non-fatal warnings for terms that parse but look suspicious."""
    warnings: list[str] = []
    if params.principal == 0:
        warnings.append('Loan amount is zero; no interest will accrue.')
    if params.start_date == params.end_date:
        warnings.append('Start and end dates are equal; no days will accrue.')
    if not params.currency:
        warnings.append('Loan currency is empty.')
    if abs(params.base_rate) > HIGH_RATE_WARNING_THRESHOLD:
        warnings.append('Base interest rate magnitude is above 100%.')
    if abs(params.margin) > HIGH_RATE_WARNING_THRESHOLD:
        warnings.append('Margin magnitude is above 100%.')
    return warnings


def parse_loan_form(values: Mapping[str, object]) -> tuple[LoanParams, list[str]]:
    """Parse a mapping keyed by FORM_FIELDS and collect warnings."""
    missing = [name for name in FORM_FIELDS if name not in values]
    if missing:
        raise LoanInputError('form', sorted(values), f'missing fields {missing}.')
    params = parse_loan_params(**{name: values[name] for name in FORM_FIELDS})
    warnings = validate_loan_params(params)
    for warning in warnings:
        LOGGER.warning(warning)
    return params, warnings


def _format_number(value: float) -> str:
    return f'{value:.10g}'


def form_values(source: Loan | LoanParams) -> dict[str, str]:
    """Render stored terms back into form text, rates as percentages."""
    return {
        'start_date': source.start_date.strftime(DATE_FORMAT),
        'end_date': source.end_date.strftime(DATE_FORMAT),
        'principal': _format_number(source.principal),
        'currency': source.currency,
        'base_rate_percent': _format_number(source.base_rate * PERCENT_SCALE),
        'margin_percent': _format_number(source.margin * PERCENT_SCALE),
    }
