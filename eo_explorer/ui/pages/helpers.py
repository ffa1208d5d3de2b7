from __future__ import annotations

from typing import Optional

import pandas as pd

from eo_explorer.config import IMMEDIATE


def list_value_counts(df: pd.DataFrame, column: str, label: str, top_n: Optional[int] = None) -> pd.DataFrame:
    """Count records per value of a list column (agencies / categories), largest first."""
    if df.empty or column not in df:
        return pd.DataFrame(columns=[label, "orders"])
    # A record naming the same agency twice counts once for it
    exploded = df[column].map(lambda values: list(dict.fromkeys(values))).explode().dropna()
    if exploded.empty:
        return pd.DataFrame(columns=[label, "orders"])
    counts = exploded.value_counts()
    counts = counts.rename_axis(label).reset_index(name="orders")
    counts = counts.sort_values(["orders", label], ascending=[False, True], kind="mergesort")
    if top_n is not None:
        counts = counts.head(top_n)
    return counts.reset_index(drop=True)


def immediate_action_count(timelines: pd.DataFrame) -> int:
    if timelines.empty or "due_date" not in timelines:
        return 0
    return int(timelines["due_date"].eq(IMMEDIATE).sum())
