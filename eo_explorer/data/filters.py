"""
Filter utilities that apply the browse-page filters to the executive order records.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Dict, List, Optional

import pandas as pd

TEXT_SEARCH_COLUMNS = ["title", "document_number", "agencies_raw", "categories_raw"]


@dataclass(frozen=True)
class FilterState:
    selected_agency: Optional[str] = None
    selected_category: Optional[str] = None
    search_text: str = ""
    current_page: int = 1

    def __post_init__(self) -> None:
        if self.current_page < 1:
            raise ValueError(f"current_page must be >= 1, got {self.current_page}")

    @property
    def predicates(self) -> tuple:
        return (self.selected_agency or None, self.selected_category or None, self.search_text)

    @property
    def has_active_filters(self) -> bool:
        return bool(self.selected_agency or self.selected_category or self.search_text.strip())

    def cleared(self) -> "FilterState":
        return DEFAULT_FILTERS

    def with_page(self, page: int) -> "FilterState":
        return replace(self, current_page=page)


DEFAULT_FILTERS = FilterState()


def carry_page(previous: Optional[FilterState], current: FilterState) -> FilterState:
    """Reset to page 1 whenever any predicate differs from the previous state."""
    if previous is not None and previous.predicates != current.predicates:
        return current.with_page(1)
    return current


def _text_mask(df: pd.DataFrame, search: str) -> pd.Series:
    mask = pd.Series(False, index=df.index)
    for col in TEXT_SEARCH_COLUMNS:
        if col in df:
            mask |= df[col].astype("string").str.lower().str.contains(search, regex=False, na=False).astype(bool)
    return mask


def _membership_mask(df: pd.DataFrame, column: str, value: str) -> pd.Series:
    if column not in df:
        return pd.Series(False, index=df.index)
    return df[column].map(lambda values: value in values).astype(bool)


def apply_filters(df: pd.DataFrame, filters: FilterState) -> pd.DataFrame:
    """
    Apply the selected agency, category, and search text to the normalized
    records. Active predicates combine with AND; input order is preserved
    and the input frame is left untouched.
    """
    filtered = df.copy()
    if filtered.empty:
        return filtered

    if filters.selected_agency:
        filtered = filtered[_membership_mask(filtered, "agencies", filters.selected_agency)]

    if filters.selected_category:
        filtered = filtered[_membership_mask(filtered, "categories", filters.selected_category)]

    # Substring match runs on the raw list strings, so terms spanning
    # bracket/quote characters behave as they appear in the export.
    # Blank text disables the search; otherwise surrounding spaces count.
    if filters.search_text.strip():
        filtered = filtered[_text_mask(filtered, filters.search_text.lower())]

    filtered.attrs["applied_filters"] = serialize_filters(filters)
    return filtered


def _unique_sorted(df: pd.DataFrame, column: str) -> List[str]:
    if df.empty or column not in df:
        return []
    values = {value for values in df[column] for value in values}
    return sorted(values)


def agency_options(df: pd.DataFrame) -> List[str]:
    return _unique_sorted(df, "agencies")


def category_options(df: pd.DataFrame) -> List[str]:
    return _unique_sorted(df, "categories")


def serialize_filters(filters: FilterState) -> Dict[str, Any]:
    """
    Convert the FilterState dataclass to a JSON-serialisable dictionary to be
    stored in session_state or used for logging/debugging.
    """
    return {
        "selected_agency": filters.selected_agency,
        "selected_category": filters.selected_category,
        "search_text": filters.search_text,
        "current_page": filters.current_page,
    }
