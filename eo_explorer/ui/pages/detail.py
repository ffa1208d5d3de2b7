from __future__ import annotations

import streamlit as st

from eo_explorer.data.joins import find_record_by_document_number, find_timeline_items_by_document_number
from eo_explorer.ui.components.formatting import display_text, display_title, format_due_date
from eo_explorer.ui.components.tables import render_table
from eo_explorer.ui.layout import back_home_link, navigate
from eo_explorer.ui.pages.context import PageContext


def render(document_number: str, context: PageContext) -> None:
    record = find_record_by_document_number(context.records, document_number)
    if record is None:
        st.header("Executive Order Not Found")
        st.write(f"No executive order found with document number: {document_number}")
        back_home_link()
        return

    st.title(display_title(record.get("title")))

    st.markdown("#### Document Number")
    st.write(record["document_number"])

    st.markdown("#### Categories")
    categories = record.get("categories") or []
    if categories:
        st.markdown(" ".join(f":blue-background[{c}]" for c in categories))
    else:
        st.write("No categories listed")

    st.markdown("#### Agencies")
    agencies = record.get("agencies") or []
    if agencies:
        cols = st.columns(min(len(agencies), 4))
        for idx, agency in enumerate(agencies):
            if cols[idx % len(cols)].button(agency, key=f"eo_detail_agency_{idx}"):
                navigate(agency=agency)
    else:
        st.write("No agencies listed")

    timeline = find_timeline_items_by_document_number(context.timelines, document_number)
    if not timeline.empty:
        st.markdown("#### Implementation Timeline")
        table = timeline.reindex(columns=["agency", "action", "due_date"]).rename(
            columns={"agency": "Agency", "action": "Action", "due_date": "Due Date"}
        )
        table["Agency"] = table["Agency"].map(lambda v: display_text(v, "Unknown"))
        table["Action"] = table["Action"].map(lambda v: display_text(v, "No action specified"))
        table["Due Date"] = table["Due Date"].map(format_due_date)
        render_table(table, highlight_cols=["Due Date"])

    st.markdown("#### Federal Register Link")
    html_url = record.get("html_url")
    if isinstance(html_url, str) and html_url:
        st.link_button("View on Federal Register", html_url)
    else:
        st.write("No link available")

    back_home_link()
