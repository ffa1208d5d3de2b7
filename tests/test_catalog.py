"""
Tests for eo_explorer/data/catalog.py (the JSON-facing query surface)
plus an end-to-end load of the bundled sample CSVs.
"""
import json

import pytest

from eo_explorer.data.catalog import ExecutiveOrderCatalog, frame_to_dicts
from eo_explorer.data.filters import FilterState
from eo_explorer.data.loader import read_csv_source

from conftest import REPO_DATA_DIR


@pytest.fixture
def catalog(raw_records, raw_timelines):
    return ExecutiveOrderCatalog.from_raw(raw_records, raw_timelines)


def test_list_all_records_hides_raw_strings(catalog):
    records = catalog.list_all_records()
    assert len(records) == 5
    assert records[0]["agencies"] == ["EPA", "Department of Labor"]
    assert "agencies_raw" not in records[0]
    assert "categories_raw" not in records[0]


def test_missing_fields_omitted(catalog):
    untitled = catalog.find_record_by_document_number("2025-00075")
    assert "title" not in untitled
    assert "html_url" not in untitled
    assert untitled["categories"] == []


def test_find_record_not_found_is_none(catalog):
    assert catalog.find_record_by_document_number("0000-00000") is None


def test_timeline_items_by_document_number(catalog):
    items = catalog.find_timeline_items_by_document_number("2025-00050")
    assert [i["action"] for i in items] == ["Publish guidance", "Halt permits"]


def test_timeline_items_dangling_key_not_joined(catalog):
    for record in catalog.list_all_records():
        items = catalog.find_timeline_items_by_document_number(record["document_number"])
        assert all(i["bridge_key"] != "9999-99999" for i in items)


def test_records_by_agency(catalog):
    docs = [r["document_number"] for r in catalog.find_records_by_agency("EPA")]
    assert docs == ["2025-00050", "2024-09999"]


def test_timeline_items_by_agency_immediate_first(catalog):
    items = catalog.find_timeline_items_by_agency("EPA")
    assert [i.get("due_date") for i in items] == ["Immediate", "Immediate", "2025-06-01"]


def test_filter_and_paginate_shape(catalog):
    page = catalog.filter_and_paginate(FilterState(selected_category="Environment"))
    assert page["total_filtered"] == 2
    assert page["total_pages"] == 1
    assert page["page"] == 1
    assert [r["document_number"] for r in page["items"]] == ["2025-00050", "2024-09999"]


def test_filter_and_paginate_empty(catalog):
    page = catalog.filter_and_paginate(FilterState(search_text="no such thing"))
    assert page == {"items": [], "total_filtered": 0, "total_pages": 0, "page": 1}


def test_everything_is_json_serialisable(catalog):
    payload = {
        "records": catalog.list_all_records(),
        "timelines": catalog.list_all_timeline_items(),
        "page": catalog.filter_and_paginate(FilterState(current_page=1)),
        "detail": catalog.find_record_by_document_number("2025-00050"),
    }
    assert json.loads(json.dumps(payload))["detail"]["document_number"] == "2025-00050"


def test_frame_to_dicts_empty(catalog):
    assert frame_to_dicts(catalog.records.iloc[0:0]) == []


# ── Bundled sample data ───────────────────────────────────────────────────────

@pytest.fixture
def sample_catalog():
    return ExecutiveOrderCatalog.from_raw(
        read_csv_source(REPO_DATA_DIR / "EO_Agency_Classification.csv"),
        read_csv_source(REPO_DATA_DIR / "EO_Timelines_v2.csv"),
    )


def test_sample_data_loads(sample_catalog):
    assert len(sample_catalog.records) == 15
    assert len(sample_catalog.timelines) == 18


def test_sample_data_bridge_fallback(sample_catalog):
    items = sample_catalog.find_timeline_items_by_document_number("2025-02097")
    assert [i["agency"] for i in items] == ["Department of State", "Environmental Protection Agency"]


def test_sample_data_ragged_row_kept(sample_catalog):
    items = sample_catalog.find_timeline_items_by_document_number("2025-02231")
    assert items == [
        {
            "document_number_bridge": "2025-02231",
            "agency": "Office of Personnel Management",
            "action": "Issue a Federal Hiring Plan",
            "due_date": "2025-05-21",
            "bridge_key": "2025-02231",
        }
    ]


def test_sample_data_first_page_newest_first(sample_catalog):
    page = sample_catalog.filter_and_paginate(FilterState())
    assert page["total_pages"] == 2
    assert len(page["items"]) == 12
    assert page["items"][0]["document_number"] == "2025-03527"
