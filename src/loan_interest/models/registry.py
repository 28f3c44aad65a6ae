"""In-memory loan registry."""

from __future__ import annotations

import threading
from copy import deepcopy

import pandas as pd

from loan_interest.calculations.accrual import compute
from loan_interest.calculations.day_count import days_actual_vectorized
from loan_interest.exceptions import LoanNotFoundError
from loan_interest.models.loan import Loan, LoanParams
from loan_interest.utils.logging import get_logger

LOGGER = get_logger(__name__)

SUMMARY_COLUMNS = [
    'loan_id',
    'start_date',
    'end_date',
    'days',
    'principal',
    'currency',
    'base_rate',
    'margin',
    'total_rate',
    'total_interest',
]


class LoanRegistry:
    """Owns every loan for the lifetime of a session.

    Ids start at 1 and are never reused. Stored records are always consistent
    with their terms: a loan is computed before it becomes visible, and reads
    hand out copies so callers cannot alias stored state.
    """

    def __init__(self) -> None:
        self._loans: dict[int, Loan] = {}
        self._next_id = 1
        self._lock = threading.RLock()

    @property
    def next_id(self) -> int:
        return self._next_id

    def __len__(self) -> int:
        return len(self._loans)

    def __contains__(self, loan_id: object) -> bool:
        return loan_id in self._loans

    @staticmethod
    def _build(params: LoanParams) -> Loan:
        return compute(Loan.from_params(params))

    def create(self, params: LoanParams) -> int:
        """Store a freshly computed loan and return its id."""
        with self._lock:
            loan_id = self._next_id
            self._loans[loan_id] = self._build(params)
            self._next_id += 1
        LOGGER.info('Loan added with ID: %s', loan_id)
        return loan_id

    def update(self, loan_id: int, params: LoanParams) -> None:
        """Replace a loan's terms and derived fields in one step.

        Raises:
            LoanNotFoundError: if loan_id is unknown; the registry is left untouched.
        """
        with self._lock:
            if loan_id not in self._loans:
                LOGGER.warning('Update rejected, loan with ID %s not found.', loan_id)
                raise LoanNotFoundError(loan_id)
            self._loans[loan_id] = self._build(params)
        LOGGER.info('Loan with ID %s updated successfully.', loan_id)

    def get(self, loan_id: int) -> Loan | None:
        """Return a copy of the loan, or None when the id is unknown."""
        with self._lock:
            loan = self._loans.get(loan_id)
            return deepcopy(loan) if loan is not None else None

    def require(self, loan_id: int) -> Loan:
        """Like get(), but raise LoanNotFoundError for an unknown id."""
        loan = self.get(loan_id)
        if loan is None:
            raise LoanNotFoundError(loan_id)
        return loan

    def list(self) -> list[tuple[int, Loan]]:
        """Snapshot of (id, loan copy) pairs in ascending id order."""
        with self._lock:
            return [(loan_id, deepcopy(self._loans[loan_id])) for loan_id in sorted(self._loans)]

    def ids(self) -> list[int]:
        with self._lock:
            return sorted(self._loans)

    def summary_frame(self) -> pd.DataFrame:
        """One row per loan, ordered by id."""
        rows = [
            {
                'loan_id': loan_id,
                'start_date': pd.Timestamp(loan.start_date),
                'end_date': pd.Timestamp(loan.end_date),
                'principal': loan.principal,
                'currency': loan.currency,
                'base_rate': loan.base_rate,
                'margin': loan.margin,
                'total_rate': loan.total_rate,
                'total_interest': loan.total_interest,
            }
            for loan_id, loan in self.list()
        ]
        if not rows:
            return pd.DataFrame(columns=SUMMARY_COLUMNS)
        out = pd.DataFrame(rows)
        out['days'] = days_actual_vectorized(out['start_date'], out['end_date'])
        return out[SUMMARY_COLUMNS]
