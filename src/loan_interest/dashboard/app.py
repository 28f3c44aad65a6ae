"""Streamlit app entrypoint for the loan interest calculator."""

from __future__ import annotations

from pathlib import Path
import sys

SOURCE_ROOT = Path(__file__).resolve().parents[2]
if str(SOURCE_ROOT) not in sys.path:
    sys.path.insert(0, str(SOURCE_ROOT))

import streamlit as st

from loan_interest.calculations.accrual import accrued_interest_to_date, accruals_frame
from loan_interest.dashboard.components.controls import render_loan_id_input, render_menu
from loan_interest.dashboard.components.formatting import style_numeric_table
from loan_interest.dashboard.components.loan_form import render_loan_form
from loan_interest.dashboard.components.summary_cards import render_loan_summary_cards
from loan_interest.dashboard.plots.interest_daily import render_daily_interest_chart
from loan_interest.data.parser import form_values, parse_loan_form, parse_loan_id
from loan_interest.exceptions import LoanInputError, LoanNotFoundError
from loan_interest.models.loan import Loan, LoanParams
from loan_interest.models.registry import LoanRegistry
from loan_interest.utils.logging import get_logger

LOGGER = get_logger(__name__)

REGISTRY_KEY = 'loan_registry'


def get_registry() -> LoanRegistry:
    """Return this session's registry, creating it on first access."""
    registry = st.session_state.get(REGISTRY_KEY)
    if registry is None:
        registry = LoanRegistry()
        LOGGER.info('Started a new loan registry for this session.')
        st.session_state[REGISTRY_KEY] = registry
    return registry


def _show_warnings(warnings: list[str]) -> None:
    for warning in warnings:
        st.warning(warning)


def _lookup(registry: LoanRegistry, raw_id: str) -> tuple[int, Loan] | None:
    """Resolve typed id text to a stored loan, reporting failures inline."""
    try:
        loan_id = parse_loan_id(raw_id)
        return loan_id, registry.require(loan_id)
    except (LoanInputError, LoanNotFoundError) as exc:
        st.error(f'Error: {exc.message}')
        return None


def _render_add(registry: LoanRegistry) -> None:
    st.header('Add Loan')
    raw = render_loan_form(key='add_loan_form', defaults=form_values(LoanParams.default()), submit_label='Add Loan')
    if raw is None:
        return
    try:
        params, warnings = parse_loan_form(raw)
    except LoanInputError as exc:
        st.error(f'Error: {exc.message}')
        return
    _show_warnings(warnings)
    loan_id = registry.create(params)
    st.success(f'Loan added with ID: {loan_id}')


def _render_update(registry: LoanRegistry) -> None:
    st.header('Update Loan')
    raw_id = render_loan_id_input(registry.ids(), key='update_loan_id', label='Enter the Loan ID to update')
    found = _lookup(registry, raw_id) if raw_id is not None else None
    if found is None:
        return
    loan_id, loan = found
    raw = render_loan_form(key=f'update_loan_form_{loan_id}', defaults=form_values(loan), submit_label='Update Loan')
    if raw is None:
        return
    try:
        params, warnings = parse_loan_form(raw)
        registry.update(loan_id, params)
    except (LoanInputError, LoanNotFoundError) as exc:
        st.error(f'Error: {exc.message}')
        return
    _show_warnings(warnings)
    st.success(f'Loan with ID {loan_id} updated successfully!')


def _render_show(registry: LoanRegistry) -> None:
    st.header('Loan Interest Calculation Results')
    raw_id = render_loan_id_input(registry.ids(), key='show_loan_id', label='Enter the Loan ID')
    found = _lookup(registry, raw_id) if raw_id is not None else None
    if found is None:
        return
    loan_id, loan = found
    render_loan_summary_cards(loan_id, loan)
    as_of = st.date_input('Accrued as of', value=loan.end_date, key=f'show_as_of_{loan_id}')
    st.metric(f'Accrued Interest ({loan.currency})', f'{accrued_interest_to_date(loan, as_of):,.6f}')
    render_daily_interest_chart(accruals_frame(loan), currency=loan.currency)


def _render_all(registry: LoanRegistry) -> None:
    st.header('All Loans')
    summary = registry.summary_frame()
    if summary.empty:
        st.info('No loans recorded yet.')
        return
    table = summary.copy()
    table['start_date'] = table['start_date'].dt.date
    table['end_date'] = table['end_date'].dt.date
    st.dataframe(style_numeric_table(table.set_index('loan_id')), width='stretch')


def main() -> None:
    st.set_page_config(page_title='Loan Interest Calculator', layout='wide')
    st.title('Loan Interest Calculator')

    registry = get_registry()
    selected = render_menu()
    if selected == 'Add Loan':
        _render_add(registry)
    elif selected == 'Update Loan':
        _render_update(registry)
    elif selected == 'Show Loan Information':
        _render_show(registry)
    else:
        _render_all(registry)


if __name__ == '__main__':
    main()
