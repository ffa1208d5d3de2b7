"""
Unit tests for eo_explorer/data/pagination.py

Descending document-number sort, page slicing, the empty boundary and the
page-number window used by the pagination controls.
"""
import pandas as pd
import pytest

from eo_explorer.data.filters import FilterState
from eo_explorer.data.pagination import (
    PAGE_SIZE,
    filter_and_paginate,
    page_window,
    paginate,
    sort_by_document_number,
    total_pages,
)


# ── Sorting ───────────────────────────────────────────────────────────────────

def test_sort_example():
    df = pd.DataFrame({"document_number": ["2025-00050", "2024-09999", "2025-00100"]})
    ordered = sort_by_document_number(df)
    assert ordered["document_number"].tolist() == ["2025-00100", "2025-00050", "2024-09999"]


def test_sort_is_lexicographic_not_numeric():
    df = pd.DataFrame({"document_number": ["9", "10", "100"]})
    assert sort_by_document_number(df)["document_number"].tolist() == ["9", "100", "10"]


def test_sort_keeps_input_untouched():
    df = pd.DataFrame({"document_number": ["a", "c", "b"]})
    sort_by_document_number(df)
    assert df["document_number"].tolist() == ["a", "c", "b"]


# ── Paging ────────────────────────────────────────────────────────────────────

def test_page_size_is_twelve():
    assert PAGE_SIZE == 12


@pytest.mark.parametrize(
    "count,size,expected",
    [(0, 12, 0), (1, 12, 1), (12, 12, 1), (13, 12, 2), (25, 12, 3), (5, 1, 5)],
)
def test_total_pages(count, size, expected):
    assert total_pages(count, size) == expected


@pytest.mark.parametrize("size", [1, 2, 5, 12, 40])
@pytest.mark.parametrize("count", [0, 1, 11, 12, 13, 30])
def test_pages_cover_everything_once(make_records, count, size):
    ordered = sort_by_document_number(make_records(count))
    pages = [paginate(ordered, n, size) for n in range(1, total_pages(count, size) + 1)]
    combined = pd.concat(pages) if pages else ordered.iloc[0:0]
    assert combined["document_number"].tolist() == ordered["document_number"].tolist()
    assert all(len(page) == size for page in pages[:-1])


def test_page_slice_bounds(make_records):
    df = make_records(30)
    page = paginate(df, 2, 12)
    assert page["document_number"].tolist() == df["document_number"].tolist()[12:24]
    assert len(paginate(df, 3, 12)) == 6


def test_page_past_the_end_is_empty(make_records):
    assert paginate(make_records(5), 3, 12).empty


def test_empty_collection_any_page_is_empty(make_records):
    empty = make_records(0)
    assert total_pages(len(empty)) == 0
    assert paginate(empty, 1).empty
    assert paginate(empty, 7).empty


@pytest.mark.parametrize("page,size", [(0, 12), (-1, 12), (1, 0)])
def test_invalid_page_arguments(make_records, page, size):
    with pytest.raises(ValueError):
        paginate(make_records(3), page, size)


# ── filter_and_paginate ───────────────────────────────────────────────────────

def test_filter_and_paginate_first_page(make_records):
    result = filter_and_paginate(make_records(30), FilterState())
    assert result.total_filtered == 30
    assert result.total_pages == 3
    assert result.page == 1
    assert result.items["document_number"].tolist()[0] == "2025-00029"
    assert len(result.items) == 12
    assert result.has_next and not result.has_previous


def test_filter_and_paginate_with_filter(make_records):
    # Odd rows are tagged EPA
    result = filter_and_paginate(make_records(30), FilterState(selected_agency="EPA", current_page=2))
    assert result.total_filtered == 15
    assert result.total_pages == 2
    assert len(result.items) == 3
    assert not result.has_next and result.has_previous


def test_filter_and_paginate_empty_result(make_records):
    result = filter_and_paginate(make_records(10), FilterState(search_text="no such order"))
    assert result.total_filtered == 0
    assert result.total_pages == 0
    assert result.is_empty
    assert result.items.empty


# ── page_window ───────────────────────────────────────────────────────────────

@pytest.mark.parametrize(
    "current,total,expected",
    [
        (1, 0, []),
        (1, 1, [1]),
        (1, 3, [1, 2, 3]),
        (1, 5, [1, 2, None, 5]),
        (3, 5, [1, 2, 3, 4, 5]),
        (5, 10, [1, None, 4, 5, 6, None, 10]),
        (10, 10, [1, None, 9, 10]),
    ],
)
def test_page_window(current, total, expected):
    assert page_window(current, total) == expected
