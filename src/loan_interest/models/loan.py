"""Loan domain model."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date

from loan_interest.config import (
    DEFAULT_BASE_RATE,
    DEFAULT_CURRENCY,
    DEFAULT_END_DATE,
    DEFAULT_MARGIN,
    DEFAULT_PRINCIPAL,
    DEFAULT_START_DATE,
)


@dataclass(frozen=True)
class LoanParams:
    """Caller-supplied loan terms. Rates are fractional (0.05 == 5%)."""

    start_date: date
    end_date: date
    principal: float
    currency: str
    base_rate: float
    margin: float

    @classmethod
    def default(cls) -> LoanParams:
        return cls(
            start_date=DEFAULT_START_DATE,
            end_date=DEFAULT_END_DATE,
            principal=DEFAULT_PRINCIPAL,
            currency=DEFAULT_CURRENCY,
            base_rate=DEFAULT_BASE_RATE,
            margin=DEFAULT_MARGIN,
        )


@dataclass(frozen=True)
class DailyAccrual:
    """Interest accrued on a single calendar day."""

    interest_with_margin: float
    interest_without_margin: float
    days_elapsed: int


@dataclass
class Loan:
    """A loan contract with its derived accrual figures.

    ``total_interest`` and ``daily_accruals`` are owned by the accrual engine and
    are replaced wholesale whenever the terms change.
    """

    start_date: date
    end_date: date
    principal: float
    currency: str
    base_rate: float
    margin: float
    total_interest: float = 0.0
    daily_accruals: dict[date, DailyAccrual] = field(default_factory=dict)

    @classmethod
    def from_params(cls, params: LoanParams) -> Loan:
        """Build a loan with zeroed derived fields."""
        return cls(
            start_date=params.start_date,
            end_date=params.end_date,
            principal=params.principal,
            currency=params.currency,
            base_rate=params.base_rate,
            margin=params.margin,
        )

    @property
    def params(self) -> LoanParams:
        return LoanParams(
            start_date=self.start_date,
            end_date=self.end_date,
            principal=self.principal,
            currency=self.currency,
            base_rate=self.base_rate,
            margin=self.margin,
        )

    @property
    def total_rate(self) -> float:
        return self.base_rate + self.margin
