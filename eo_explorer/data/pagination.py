"""
Sorting and fixed-size pagination for the browse page.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Optional

import pandas as pd

from eo_explorer.config import PAGE_SIZE
from eo_explorer.data.filters import FilterState, apply_filters


@dataclass
class PageResult:
    items: pd.DataFrame
    total_filtered: int
    total_pages: int
    page: int

    @property
    def is_empty(self) -> bool:
        return self.total_pages == 0

    @property
    def has_previous(self) -> bool:
        return self.page > 1

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages


def sort_by_document_number(df: pd.DataFrame) -> pd.DataFrame:
    """Newest first: descending string order of document numbers (not numeric)."""
    if df.empty or "document_number" not in df:
        return df
    return df.sort_values("document_number", ascending=False, kind="mergesort", key=lambda s: s.astype(str))


def total_pages(count: int, page_size: int = PAGE_SIZE) -> int:
    if page_size < 1:
        raise ValueError(f"page_size must be >= 1, got {page_size}")
    return math.ceil(count / page_size) if count > 0 else 0


def paginate(df: pd.DataFrame, page: int, page_size: int = PAGE_SIZE) -> pd.DataFrame:
    """Rows (page-1)*size .. page*size-1; past the last page gives an empty frame."""
    if page < 1:
        raise ValueError(f"page must be >= 1, got {page}")
    if page_size < 1:
        raise ValueError(f"page_size must be >= 1, got {page_size}")
    start = (page - 1) * page_size
    return df.iloc[start: start + page_size]


def filter_and_paginate(
    df: pd.DataFrame,
    filters: FilterState,
    page_size: int = PAGE_SIZE,
) -> PageResult:
    filtered = apply_filters(sort_by_document_number(df), filters)
    count = int(len(filtered))
    return PageResult(
        items=paginate(filtered, filters.current_page, page_size),
        total_filtered=count,
        total_pages=total_pages(count, page_size),
        page=filters.current_page,
    )


def page_window(current: int, total: int) -> List[Optional[int]]:
    """
    Page numbers to render: first, last and current±1, with None marking
    an ellipsis wherever numbers are skipped.
    """
    if total <= 0:
        return []
    shown = [n for n in range(1, total + 1) if n in (1, total) or current - 1 <= n <= current + 1]
    window: List[Optional[int]] = []
    for idx, number in enumerate(shown):
        if idx > 0 and number - shown[idx - 1] > 1:
            window.append(None)
        window.append(number)
    return window
