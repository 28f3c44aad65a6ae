"""Summary card renderer for a single loan."""

from __future__ import annotations

import streamlit as st

from loan_interest.calculations.day_count import days_actual
from loan_interest.dashboard.components.formatting import format_rate_percent
from loan_interest.models.loan import Loan


def render_loan_summary_cards(loan_id: int, loan: Loan) -> None:
    """Render top-level KPI cards."""
    st.subheader(f'Loan {loan_id}')
    c1, c2, c3, c4 = st.columns(4)
    c1.metric(f'Loan Amount ({loan.currency})', f'{loan.principal:,.2f}')
    c2.metric('Total Rate', format_rate_percent(loan.total_rate))
    c3.metric('Days', f'{days_actual(loan.start_date, loan.end_date):,d}')
    c4.metric(f'Total Interest ({loan.currency})', f'{loan.total_interest:,.6f}')
    st.caption(
        f'{loan.start_date.isoformat()} to {loan.end_date.isoformat()}, '
        f'base rate {format_rate_percent(loan.base_rate)}, margin {format_rate_percent(loan.margin)}'
    )
