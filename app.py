import eo_explorer.bootstrap_env  # must be first to set env/secrets
import logging

import streamlit as st

from eo_explorer.config import TABS, configure_logging
from eo_explorer.data.catalog import ExecutiveOrderCatalog, load_catalog
from eo_explorer.data.filters import serialize_filters
from eo_explorer.data.loader import LoadError, clear_cache
from eo_explorer.ui.layout import setup_page, sidebar_filters_ui
from eo_explorer.ui.pages import agency, data_quality, detail, insights, orders
from eo_explorer.ui.pages.context import PageContext

logger = logging.getLogger(__name__)

PAGE_RENDERERS = {
    "orders": orders.render,
    "insights": insights.render,
    "data_quality": data_quality.render,
}


def _load() -> ExecutiveOrderCatalog | None:
    try:
        with st.spinner("Loading executive orders..."):
            return load_catalog()
    except LoadError as exc:
        logger.error("Data load failed: %s", exc)
        st.error("Failed to load executive order data.")
        st.caption(str(exc))
        return None


def main() -> None:
    configure_logging()
    setup_page()

    if st.sidebar.button("🔄 Refresh Data"):
        clear_cache()

    catalog = _load()
    if catalog is None:
        return

    params = st.query_params
    filters = sidebar_filters_ui(catalog.records)
    st.session_state["eo_active_filters"] = serialize_filters(filters)
    context = PageContext(catalog=catalog, filters=filters)

    if params.get("id"):
        detail.render(params["id"], context)
    elif params.get("agency"):
        agency.render(params["agency"], context)
    else:
        st.title("Executive Orders Database")
        st.caption("Browse and explore executive orders by document number, agencies, and categories")

        tab_labels = [tab.label for tab in TABS]
        streamlit_tabs = st.tabs(tab_labels)
        for streamlit_tab, tab_config in zip(streamlit_tabs, TABS):
            renderer = PAGE_RENDERERS.get(tab_config.key)
            if renderer is None:
                continue
            with streamlit_tab:
                renderer(catalog.records, context)

    st.divider()
    st.caption("Executive Orders Data Explorer")


if __name__ == "__main__":
    main()
