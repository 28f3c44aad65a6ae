"""Daily accrual chart for a single loan."""

from __future__ import annotations

import pandas as pd
import plotly.graph_objects as go
from plotly.subplots import make_subplots
import streamlit as st

from loan_interest.dashboard.components.formatting import plot_axis_number_format, style_numeric_table

TABLE_COLUMN_LABELS = {
    'date': 'Date',
    'days_elapsed': 'Days Elapsed',
    'interest_with_margin': 'Daily Interest',
    'interest_without_margin': 'Daily Interest (No Margin)',
    'margin_interest': 'Daily Margin Interest',
    'cumulative_with_margin': 'Cumulative Interest',
    'cumulative_without_margin': 'Cumulative Interest (No Margin)',
}


def build_daily_accrual_table(frame: pd.DataFrame) -> pd.DataFrame:
    """Relabel an accruals frame for display, dates as plain dates."""
    table = frame.copy()
    if not table.empty:
        table['date'] = pd.to_datetime(table['date']).dt.date
    return table.rename(columns=TABLE_COLUMN_LABELS)


def build_daily_interest_figure(frame: pd.DataFrame, *, currency: str = '', title: str = 'Daily Interest Accrual') -> go.Figure:
    """Stacked daily bars (base + margin) with cumulative interest on a secondary axis."""
    df = frame.sort_values('date')
    unit = f' ({currency})' if currency else ''
    fig = make_subplots(specs=[[{'secondary_y': True}]])
    fig.add_bar(
        x=df['date'],
        y=df['interest_without_margin'],
        name='Base Rate Interest',
        marker=dict(color='rgba(31, 119, 180, 0.86)'),
        hovertemplate='Date: %{x|%Y-%m-%d}<br>Base: %{y:,.6f}<extra></extra>',
        secondary_y=False,
    )
    fig.add_bar(
        x=df['date'],
        y=df['margin_interest'],
        name='Margin Interest',
        marker=dict(color='rgba(34, 197, 94, 0.86)'),
        hovertemplate='Date: %{x|%Y-%m-%d}<br>Margin: %{y:,.6f}<extra></extra>',
        secondary_y=False,
    )
    fig.add_scatter(
        x=df['date'],
        y=df['cumulative_with_margin'],
        mode='lines+markers',
        name='Cumulative Interest',
        line=dict(color='#a78bfa', width=3, dash='dot'),
        marker=dict(size=6, color='#a78bfa', line=dict(color='#1f2937', width=1)),
        hovertemplate='Date: %{x|%Y-%m-%d}<br>Cumulative: %{y:,.6f}<extra></extra>',
        secondary_y=True,
    )
    fig.update_layout(title=title, barmode='relative', bargap=0.18)
    fig.update_yaxes(title_text=f'Daily Interest{unit}', secondary_y=False, zeroline=True)
    fig.update_yaxes(title_text=f'Cumulative{unit}', secondary_y=True, showgrid=False, zeroline=True)
    fig.update_xaxes(title='Date')
    return plot_axis_number_format(fig, y_axes=['yaxis', 'yaxis2'])


def render_daily_interest_chart(frame: pd.DataFrame, *, currency: str = '') -> None:
    if frame.empty:
        st.info('No daily accruals: the end date does not fall after the start date.')
        return
    st.plotly_chart(build_daily_interest_figure(frame, currency=currency), use_container_width=True)
    st.dataframe(style_numeric_table(build_daily_accrual_table(frame)), width='stretch')
