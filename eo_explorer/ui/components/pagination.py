from __future__ import annotations

import streamlit as st

from eo_explorer.data.pagination import PageResult, page_window
from eo_explorer.ui.layout import PAGE_STATE_KEY


def go_to_page(page: int) -> None:
    st.session_state[PAGE_STATE_KEY] = page


def render_pagination(result: PageResult) -> None:
    """Previous / numbered / Next controls; hidden when everything fits on one page."""
    if result.total_pages <= 1:
        return

    window = page_window(result.page, result.total_pages)
    cols = st.columns(len(window) + 2)
    cols[0].button(
        "Previous",
        key="eo_page_prev",
        disabled=not result.has_previous,
        on_click=go_to_page,
        args=(result.page - 1,),
    )
    for col, number in zip(cols[1:-1], window):
        if number is None:
            col.markdown("…")
            continue
        col.button(
            str(number),
            key=f"eo_page_{number}",
            type="primary" if number == result.page else "secondary",
            on_click=go_to_page,
            args=(number,),
        )
    cols[-1].button(
        "Next",
        key="eo_page_next",
        disabled=not result.has_next,
        on_click=go_to_page,
        args=(result.page + 1,),
    )
