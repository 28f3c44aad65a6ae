"""Loan terms entry form."""

from __future__ import annotations

import streamlit as st

from loan_interest.data.parser import FORM_FIELDS

FIELD_LABELS = {
    'start_date': 'Start Date (YYYY-MM-DD)',
    'end_date': 'End Date (YYYY-MM-DD)',
    'principal': 'Loan Amount',
    'currency': 'Loan Currency',
    'base_rate_percent': 'Base Interest Rate (%)',
    'margin_percent': 'Margin (%)',
}


def render_loan_form(*, key: str, defaults: dict[str, str], submit_label: str) -> dict[str, str] | None:
    """Render the six loan fields as text inputs.

    Returns the raw strings on submit, otherwise None. Parsing is left to the caller.
    """
    with st.form(key=key):
        st.markdown('**Loan Parameters**')
        c1, c2 = st.columns(2)
        values: dict[str, str] = {}
        for idx, name in enumerate(FORM_FIELDS):
            column = c1 if idx % 2 == 0 else c2
            values[name] = column.text_input(
                FIELD_LABELS[name],
                value=defaults.get(name, ''),
                key=f'{key}_{name}',
            )
        submitted = st.form_submit_button(submit_label)
    if not submitted:
        return None
    return values
