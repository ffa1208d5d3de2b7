"""
Plotly chart factory functions with consistent styling for the explorer.
"""

from __future__ import annotations

from typing import Optional

import pandas as pd
import plotly.express as px
import plotly.graph_objects as go
import streamlit as st


DEFAULT_TEMPLATE = "plotly_white"
DEFAULT_COLOR_SEQUENCE = [
    "#1f77b4",  # agencies
    "#2ca02c",  # categories
    "#d62728",  # immediate actions
]


def _configure_layout(
    fig: go.Figure,
    title: Optional[str] = None,
    xaxis_title: Optional[str] = None,
) -> go.Figure:
    fig.update_layout(
        template=DEFAULT_TEMPLATE,
        colorway=DEFAULT_COLOR_SEQUENCE,
        title=title,
        margin=dict(l=40, r=20, t=60, b=40),
        showlegend=False,
    )
    if xaxis_title:
        fig.update_xaxes(title=xaxis_title)
    fig.update_yaxes(showgrid=False, title=None)
    return fig


def render_plotly(fig: go.Figure) -> None:
    st.plotly_chart(fig, use_container_width=True, config={"displayModeBar": False})


def horizontal_bar_chart(
    df: pd.DataFrame,
    label: str,
    value: str,
    title: Optional[str] = None,
    xaxis_title: Optional[str] = None,
    color: Optional[str] = None,
) -> go.Figure:
    # Plotly draws the first category at the bottom; reverse so the largest is on top
    ordered = df.iloc[::-1]
    fig = px.bar(
        ordered,
        x=value,
        y=label,
        orientation="h",
        text_auto=True,
        color_discrete_sequence=[color] if color else None,
    )
    fig.update_layout(height=max(300, 28 * len(ordered) + 120))
    return _configure_layout(fig, title, xaxis_title)
