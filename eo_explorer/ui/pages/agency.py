from __future__ import annotations

import pandas as pd
import streamlit as st

from eo_explorer.data.joins import find_records_by_agency, find_timeline_items_by_agency
from eo_explorer.ui.components.formatting import display_text, display_title, format_due_date
from eo_explorer.ui.components.tables import render_table
from eo_explorer.ui.layout import back_home_link, navigate
from eo_explorer.ui.pages.context import PageContext


def _orders_table(records: pd.DataFrame) -> pd.DataFrame:
    return pd.DataFrame(
        {
            "Document #": records["document_number"],
            "Title": records["title"].map(display_title),
            "Categories": records["categories"].map(", ".join),
            "Federal Register": records["html_url"],
        }
    )


def _actions_table(items: pd.DataFrame) -> pd.DataFrame:
    # The displayed executive order prefers the row's own document number
    shown = items["document_number"].where(items["document_number"].notna(), items["bridge_key"])
    return pd.DataFrame(
        {
            "Executive Order": shown.map(lambda v: display_text(v, "Unknown")),
            "Action Required": items["action"].map(lambda v: display_text(v, "No action specified")),
            "Due Date": items["due_date"].map(format_due_date),
        }
    )


def render(agency: str, context: PageContext) -> None:
    back_home_link("Back to all Executive Orders")
    st.title(agency)
    st.caption("Executive Orders and required actions for this agency")

    records = find_records_by_agency(context.records, agency)
    st.subheader(f"Executive Orders Involving {agency}")
    if records.empty:
        st.info("No executive orders found for this agency.")
    else:
        render_table(
            _orders_table(records),
            column_config={
                "Federal Register": st.column_config.LinkColumn("Federal Register", display_text="Open"),
            },
            export_file_name="agency_orders.csv",
        )
        doc = st.selectbox(
            "Open an executive order",
            options=records["document_number"].tolist(),
            key="eo_agency_open",
        )
        if st.button("View details", key="eo_agency_view"):
            navigate(id=doc)

    items = find_timeline_items_by_agency(context.timelines, agency)
    st.subheader(f"Required Actions for {agency}")
    if items.empty:
        st.info("No actions found for this agency.")
    else:
        render_table(_actions_table(items), highlight_cols=["Due Date"], export_file_name="agency_actions.csv")
