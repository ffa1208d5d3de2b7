from __future__ import annotations

import pandas as pd
import streamlit as st

from eo_explorer.data.quality import (
    build_quality_overview,
    dangling_timeline_items,
    duplicate_document_numbers,
    missing_values_summary,
)
from eo_explorer.ui.components.kpi import KpiCard, render_kpi_cards
from eo_explorer.ui.components.tables import render_table
from eo_explorer.ui.pages.context import PageContext


def render(df: pd.DataFrame, context: PageContext) -> None:
    st.subheader("Data Quality")
    overview = build_quality_overview(context.records, context.timelines)
    render_kpi_cards(
        [
            KpiCard(label="Executive Orders", value=overview["record_count"]),
            KpiCard(label="Timeline Items", value=overview["timeline_item_count"]),
            KpiCard(label="Duplicate Document #", value=len(overview["duplicate_document_numbers"])),
            KpiCard(label="Dangling Timeline Items", value=overview["dangling_timeline_items"]),
        ],
        per_row=4,
    )

    st.markdown("#### Duplicate Document Numbers")
    duplicates = duplicate_document_numbers(context.records)
    if duplicates:
        st.warning("Lookups use the first matching row: " + ", ".join(duplicates))
    else:
        st.success("Every document number is unique.")

    st.markdown("#### Timeline Items Without a Matching Order")
    dangling = dangling_timeline_items(context.records, context.timelines)
    render_table(
        dangling.reindex(columns=["bridge_key", "agency", "action", "due_date"]),
        export_file_name="dangling_timeline_items.csv",
        empty_message="All timeline items reference a known executive order.",
    )

    st.markdown("#### Missing Values")
    col_records, col_timelines = st.columns(2)
    with col_records:
        st.caption("Executive orders")
        render_table(missing_values_summary(context.records))
    with col_timelines:
        st.caption("Timeline items")
        render_table(missing_values_summary(context.timelines))

    st.markdown("#### Diagnostics Summary")
    diagnostics = context.records.attrs.get("diagnostics", {})
    if diagnostics:
        for key, value in diagnostics.items():
            st.write(f"- **{key.replace('_', ' ').title()}**: {value}")
    else:
        st.info("No diagnostics metadata available.")

    st.markdown("#### Definitions")
    st.write(
        """
        - **Agencies / Categories**: list fields from the export, with brackets and quotes stripped and split on commas.
        - **Bridge key**: `document_number_bridge`, falling back to `document_number` on rows that only carry the latter.
        - **Immediate**: due-date sentinel for actions with no fixed deadline; listed first on agency pages.
        - **Search**: case-insensitive substring match on title, document number and the raw agency/category text.
        """
    )
