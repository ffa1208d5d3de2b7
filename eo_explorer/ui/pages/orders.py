from __future__ import annotations

import pandas as pd
import streamlit as st

from eo_explorer.data.filters import apply_filters
from eo_explorer.data.pagination import PAGE_SIZE, filter_and_paginate, sort_by_document_number
from eo_explorer.ui.components.formatting import display_title, format_number, format_tags
from eo_explorer.ui.components.pagination import go_to_page, render_pagination
from eo_explorer.ui.components.tables import render_table
from eo_explorer.ui.layout import clear_filters, navigate
from eo_explorer.ui.pages.context import PageContext

CARD_COLUMNS = 3


def _render_card(record: pd.Series, key: str) -> None:
    with st.container(border=True):
        st.markdown(f"**{display_title(record.get('title'))}**")
        st.caption(f"Document #: {record['document_number']}")
        st.markdown("CATEGORIES")
        st.markdown(format_tags(record.get("categories"), empty="_None listed_"))
        if st.button("View details →", key=key):
            navigate(id=record["document_number"])


def _export_frame(filtered: pd.DataFrame) -> pd.DataFrame:
    export = filtered[["document_number", "title", "html_url"]].copy()
    export.insert(2, "agencies", filtered["agencies"].map("; ".join))
    export.insert(3, "categories", filtered["categories"].map("; ".join))
    return export


def render(df: pd.DataFrame, context: PageContext) -> None:
    filters = context.filters
    result = filter_and_paginate(df, filters, PAGE_SIZE)

    st.caption(
        f"Showing {format_number(result.total_filtered)} of {format_number(len(df))} executive orders"
    )
    st.subheader("Filtered Results" if filters.has_active_filters else "Recent Executive Orders")

    if result.is_empty:
        with st.container(border=True):
            st.info("No executive orders match the selected filters.")
            st.button("Clear filters and show all", key="eo_empty_clear", on_click=clear_filters)
        return

    if result.items.empty:
        st.info(f"Page {result.page} is past the last page ({result.total_pages}).")
        st.button("Back to page 1", key="eo_page_reset", on_click=go_to_page, args=(1,))
        return

    rows = [result.items.iloc[i: i + CARD_COLUMNS] for i in range(0, len(result.items), CARD_COLUMNS)]
    # Keys are positional; document numbers are not guaranteed unique
    for row_idx, row in enumerate(rows):
        cols = st.columns(CARD_COLUMNS)
        for col_idx, (col, (_, record)) in enumerate(zip(cols, row.iterrows())):
            with col:
                _render_card(record, key=f"eo_view_{result.page}_{row_idx * CARD_COLUMNS + col_idx}")

    render_pagination(result)
    st.caption(f"Page {result.page} of {result.total_pages}")

    with st.expander("Export filtered orders"):
        export = _export_frame(apply_filters(sort_by_document_number(df), filters))
        render_table(export, export_file_name="executive_orders_filtered.csv")
