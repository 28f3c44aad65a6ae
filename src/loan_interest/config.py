"""Shared constants for the loan interest calculator."""

from __future__ import annotations

import os
from datetime import date

# Actual/365 fixed: every calendar day accrues 1/365 of the annual rate.
DAYS_IN_YEAR = 365

DATE_FORMAT = '%Y-%m-%d'

# Rates are entered as percentages and stored as fractions.
PERCENT_SCALE = 100.0

DEFAULT_PRINCIPAL = 1000.0
DEFAULT_START_DATE = date(2020, 1, 1)
DEFAULT_END_DATE = date(2020, 1, 5)
DEFAULT_CURRENCY = 'USD'
DEFAULT_BASE_RATE = 0.05
DEFAULT_MARGIN = 0.01

# Fractional rates above this magnitude are accepted but flagged.
HIGH_RATE_WARNING_THRESHOLD = 1.0

LOG_LEVEL = os.environ.get('LOAN_INTEREST_LOG_LEVEL', 'INFO').upper()
