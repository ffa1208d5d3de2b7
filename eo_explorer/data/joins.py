"""
Cross-referencing between executive orders and timeline items, by document
number (detail view) or by agency name (agency view).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional

import pandas as pd

from eo_explorer.config import IMMEDIATE


def _key(value: Optional[str]) -> str:
    return str(value or "").strip()


def find_record_by_document_number(records: pd.DataFrame, document_number: str) -> Optional[pd.Series]:
    """Return the first record with this document number, or None when not found."""
    if records.empty or "document_number" not in records:
        return None
    matches = records[records["document_number"] == _key(document_number)]
    if matches.empty:
        return None
    return matches.iloc[0]


def find_timeline_items_by_document_number(timelines: pd.DataFrame, document_number: str) -> pd.DataFrame:
    if timelines.empty or "bridge_key" not in timelines:
        return timelines.iloc[0:0]
    return timelines[timelines["bridge_key"] == _key(document_number)]


def find_records_by_agency(records: pd.DataFrame, agency: str) -> pd.DataFrame:
    if records.empty or "agencies" not in records:
        return records.iloc[0:0]
    mask = records["agencies"].map(lambda values: agency in values)
    return records[mask.astype(bool)]


def sort_immediate_first(items: pd.DataFrame) -> pd.DataFrame:
    """Stable partition: "Immediate" due dates first, input order kept within each group."""
    if items.empty or "due_date" not in items:
        return items
    rank = (items["due_date"] != IMMEDIATE).astype(int)
    positions = rank.reset_index(drop=True).sort_values(kind="mergesort").index
    return items.iloc[positions]


def find_timeline_items_by_agency(timelines: pd.DataFrame, agency: str) -> pd.DataFrame:
    if timelines.empty or "agency" not in timelines:
        return timelines.iloc[0:0]
    return sort_immediate_first(timelines[timelines["agency"] == agency])


@dataclass
class CatalogIndex:
    """Hash lookups over loaded frames; results match the linear scans above."""

    records: pd.DataFrame
    timelines: pd.DataFrame
    by_document_number: Dict[str, int] = field(default_factory=dict)
    records_by_agency: Dict[str, List[int]] = field(default_factory=dict)
    timelines_by_bridge: Dict[str, List[int]] = field(default_factory=dict)
    timelines_by_agency: Dict[str, List[int]] = field(default_factory=dict)

    @classmethod
    def build(cls, records: pd.DataFrame, timelines: pd.DataFrame) -> "CatalogIndex":
        index = cls(records=records, timelines=timelines)
        if not records.empty:
            for pos, (doc, agencies) in enumerate(zip(records["document_number"], records["agencies"])):
                index.by_document_number.setdefault(doc, pos)
                for agency in dict.fromkeys(agencies):
                    index.records_by_agency.setdefault(agency, []).append(pos)
        if not timelines.empty:
            for pos, (bridge, agency) in enumerate(zip(timelines["bridge_key"], timelines["agency"])):
                if isinstance(bridge, str):
                    index.timelines_by_bridge.setdefault(bridge, []).append(pos)
                if isinstance(agency, str):
                    index.timelines_by_agency.setdefault(agency, []).append(pos)
        return index

    def record(self, document_number: str) -> Optional[pd.Series]:
        pos = self.by_document_number.get(_key(document_number))
        return None if pos is None else self.records.iloc[pos]

    def timeline_items(self, document_number: str) -> pd.DataFrame:
        return self.timelines.iloc[self.timelines_by_bridge.get(_key(document_number), [])]

    def agency_records(self, agency: str) -> pd.DataFrame:
        return self.records.iloc[self.records_by_agency.get(agency, [])]

    def agency_timeline_items(self, agency: str) -> pd.DataFrame:
        return sort_immediate_first(self.timelines.iloc[self.timelines_by_agency.get(agency, [])])
