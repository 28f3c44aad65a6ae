"""Custom exceptions for the loan interest calculator."""

from __future__ import annotations

from typing import Any


class LoanInterestError(Exception):
    """Base exception for all calculator errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f'{self.message} - {self.details}'
        return self.message


class LoanNotFoundError(LoanInterestError, KeyError):
    """Raised when an operation references an unknown loan id."""

    def __init__(self, loan_id: int):
        self.loan_id = loan_id
        super().__init__(f'Loan with ID {loan_id} not found.', {'loan_id': loan_id})

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message.
        return self.message


class LoanInputError(LoanInterestError, ValueError):
    """Raised by the input layer when a raw field cannot be parsed or is out of range."""

    def __init__(self, field: str, value: Any, reason: str):
        self.field = field
        self.value = value
        super().__init__(f'Invalid {field}: {reason}', {'field': field, 'value': value})
