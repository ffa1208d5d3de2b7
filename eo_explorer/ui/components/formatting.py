"""
Utility helpers for formatting counts, titles, and due dates for display.
"""

from __future__ import annotations

from typing import Any, Optional

import pandas as pd


def _blank(value: Any) -> bool:
    if value is None:
        return True
    try:
        if pd.isna(value):
            return True
    except (TypeError, ValueError):
        return False
    return not str(value).strip()


def format_number(value: Optional[float], decimals: int = 0) -> str:
    if value is None:
        return "–"
    try:
        return f"{value:,.{decimals}f}"
    except (TypeError, ValueError):
        return "–"


def display_text(value: Any, fallback: str) -> str:
    return fallback if _blank(value) else str(value)


def display_title(value: Any) -> str:
    return display_text(value, "Untitled")


def format_due_date(value: Any) -> str:
    return "No date specified" if _blank(value) else str(value)


def format_tags(values: Any, empty: str = "") -> str:
    if not isinstance(values, list) or not values:
        return empty
    return " ".join(f"`{v}`" for v in values)
