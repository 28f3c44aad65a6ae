"""Shared UI controls and state normalization helpers."""

from __future__ import annotations

from typing import Any

import streamlit as st

MENU_OPTIONS = ['Add Loan', 'Update Loan', 'Show Loan Information', 'Show All Loans']
DEFAULT_MENU_OPTION = 'Add Loan'


def coerce_option(current: Any, options: list[Any], default: Any) -> Any:
    """Return a stable option value that is guaranteed to be in options."""
    if not options:
        return default
    if current in options:
        return current
    if default in options:
        return default
    return options[0]


def render_menu() -> str:
    """Render the sidebar action menu and return the selected action."""
    current = coerce_option(st.session_state.get('main_menu', DEFAULT_MENU_OPTION), MENU_OPTIONS, DEFAULT_MENU_OPTION)
    st.session_state['main_menu'] = current
    with st.sidebar:
        st.subheader('Menu')
        return st.radio(
            'Action',
            options=MENU_OPTIONS,
            index=MENU_OPTIONS.index(current),
            key='main_menu',
        )


def render_loan_id_input(loan_ids: list[int], *, key: str, label: str = 'Loan ID') -> str | None:
    """Render a loan id text input; returns the raw text, or None when nothing is recorded."""
    if not loan_ids:
        st.info('No loans recorded yet. Use `Add Loan` first.')
        return None
    st.caption('Recorded loan IDs: ' + ', '.join(str(loan_id) for loan_id in loan_ids))
    if key not in st.session_state:
        st.session_state[key] = str(loan_ids[-1])
    return st.text_input(label, key=key)
