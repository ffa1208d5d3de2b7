"""
Query surface over the loaded datasets.

Every method returns JSON-serialisable values: lists of plain dicts with
missing fields omitted and the raw bracket-encoded strings left out.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import pandas as pd

from eo_explorer.config import PAGE_SIZE
from eo_explorer.data.filters import FilterState
from eo_explorer.data.joins import CatalogIndex
from eo_explorer.data.loader import load_records_frame, load_timelines_frame
from eo_explorer.data.normalize import normalize_records, normalize_timelines
from eo_explorer.data.pagination import filter_and_paginate
from eo_explorer.data.quality import duplicate_document_numbers

logger = logging.getLogger(__name__)

INTERNAL_COLUMNS = {"agencies_raw", "categories_raw"}


def _is_missing(value: Any) -> bool:
    if isinstance(value, list):
        return False
    return value is None or bool(pd.isna(value))


def row_to_dict(row: pd.Series) -> Dict[str, Any]:
    return {
        str(key): list(value) if isinstance(value, list) else value
        for key, value in row.items()
        if key not in INTERNAL_COLUMNS and not _is_missing(value)
    }


def frame_to_dicts(df: pd.DataFrame) -> List[Dict[str, Any]]:
    return [row_to_dict(row) for _, row in df.iterrows()]


@dataclass
class ExecutiveOrderCatalog:
    records: pd.DataFrame
    timelines: pd.DataFrame
    index: CatalogIndex = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.index = CatalogIndex.build(self.records, self.timelines)
        duplicates = duplicate_document_numbers(self.records)
        if duplicates:
            logger.warning("Duplicate document numbers (first match wins): %s", ", ".join(duplicates))

    @classmethod
    def from_raw(cls, raw_records: pd.DataFrame, raw_timelines: pd.DataFrame) -> "ExecutiveOrderCatalog":
        return cls(records=normalize_records(raw_records), timelines=normalize_timelines(raw_timelines))

    def list_all_records(self) -> List[Dict[str, Any]]:
        return frame_to_dicts(self.records)

    def list_all_timeline_items(self) -> List[Dict[str, Any]]:
        return frame_to_dicts(self.timelines)

    def find_record_by_document_number(self, document_number: str) -> Optional[Dict[str, Any]]:
        row = self.index.record(document_number)
        return None if row is None else row_to_dict(row)

    def find_timeline_items_by_document_number(self, document_number: str) -> List[Dict[str, Any]]:
        return frame_to_dicts(self.index.timeline_items(document_number))

    def find_records_by_agency(self, agency: str) -> List[Dict[str, Any]]:
        return frame_to_dicts(self.index.agency_records(agency))

    def find_timeline_items_by_agency(self, agency: str) -> List[Dict[str, Any]]:
        return frame_to_dicts(self.index.agency_timeline_items(agency))

    def filter_and_paginate(self, filters: FilterState, page_size: int = PAGE_SIZE) -> Dict[str, Any]:
        result = filter_and_paginate(self.records, filters, page_size)
        return {
            "items": frame_to_dicts(result.items),
            "total_filtered": result.total_filtered,
            "total_pages": result.total_pages,
            "page": result.page,
        }


def load_catalog() -> ExecutiveOrderCatalog:
    """Load both sources and normalize them; LoadError propagates to the caller."""
    return ExecutiveOrderCatalog.from_raw(load_records_frame(), load_timelines_frame())
