from __future__ import annotations

import pandas as pd
import streamlit as st

from eo_explorer.data.filters import apply_filters
from eo_explorer.ui.components.charts import DEFAULT_COLOR_SEQUENCE, horizontal_bar_chart, render_plotly
from eo_explorer.ui.components.kpi import KpiCard, render_kpi_cards
from eo_explorer.ui.components.tables import render_table
from eo_explorer.ui.pages.context import PageContext
from eo_explorer.ui.pages.helpers import immediate_action_count, list_value_counts

TOP_N = 15


def render(df: pd.DataFrame, context: PageContext) -> None:
    st.subheader("Insights")
    # Charts follow the sidebar filters; pagination does not apply here
    filtered = apply_filters(df, context.filters)
    if filtered.empty:
        st.info("No executive orders match the selected filters.")
        return

    agency_counts = list_value_counts(filtered, "agencies", "agency")
    category_counts = list_value_counts(filtered, "categories", "category")
    render_kpi_cards(
        [
            KpiCard(label="Executive Orders", value=len(filtered)),
            KpiCard(label="Agencies", value=len(agency_counts)),
            KpiCard(label="Categories", value=len(category_counts)),
            KpiCard(
                label="Immediate Actions",
                value=immediate_action_count(context.timelines),
                help_text="Timeline items due immediately, across all orders.",
            ),
        ],
        per_row=4,
    )

    col_agency, col_category = st.columns(2)
    with col_agency:
        render_plotly(
            horizontal_bar_chart(
                agency_counts.head(TOP_N),
                label="agency",
                value="orders",
                title=f"Top {TOP_N} Agencies",
                xaxis_title="Executive orders",
                color=DEFAULT_COLOR_SEQUENCE[0],
            )
        )
    with col_category:
        render_plotly(
            horizontal_bar_chart(
                category_counts.head(TOP_N),
                label="category",
                value="orders",
                title=f"Top {TOP_N} Categories",
                xaxis_title="Executive orders",
                color=DEFAULT_COLOR_SEQUENCE[1],
            )
        )

    st.markdown("#### All Agencies")
    render_table(agency_counts, height=300, export_file_name="agency_counts.csv")
