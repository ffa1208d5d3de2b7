"""
Reusable helpers for rendering data tables with consistent configuration.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import pandas as pd
import streamlit as st

from eo_explorer.config import IMMEDIATE


def _highlight_immediate(val: Any) -> str:
    return "color: #d62728; font-weight: 600;" if val == IMMEDIATE else ""


def render_table(
    df: pd.DataFrame,
    column_config: Optional[Dict[str, Any]] = None,
    height: Optional[int] = None,
    export_file_name: Optional[str] = None,
    highlight_cols: Optional[List[str]] = None,
    empty_message: str = "No data to display.",
) -> None:
    if df.empty:
        st.info(empty_message)
        return

    dataframe_obj: Any = df
    if highlight_cols:
        highlight_cols = [col for col in highlight_cols if col in df.columns]
        if highlight_cols:
            dataframe_obj = df.style.map(_highlight_immediate, subset=highlight_cols)

    kwargs: Dict[str, Any] = {}
    if height is not None:
        kwargs["height"] = height
    st.dataframe(
        dataframe_obj,
        use_container_width=True,
        hide_index=True,
        column_config={k: v for k, v in (column_config or {}).items() if k in df.columns},
        **kwargs,
    )

    if export_file_name:
        csv_bytes = df.to_csv(index=False).encode("utf-8")
        st.download_button(
            "Download CSV",
            data=csv_bytes,
            file_name=export_file_name,
            mime="text/csv",
            key=f"download_{export_file_name}",
        )
