"""
Pytest fixtures for the executive orders explorer tests.

Provides small raw/normalized record and timeline frames plus a helper for
writing temporary CSV files.
"""

from pathlib import Path

import pandas as pd
import pytest

from eo_explorer.data.normalize import normalize_records, normalize_timelines

REPO_DATA_DIR = Path(__file__).resolve().parent.parent / "data"


def _raw_records() -> pd.DataFrame:
    return pd.DataFrame(
        [
            {
                "document_number": "2025-00050",
                "title": "Protecting Clean Water",
                "agencies": "['EPA', 'Department of Labor']",
                "categories": "['Environment']",
                "html_url": "https://example.gov/2025-00050",
            },
            {
                "document_number": "2025-00100",
                "title": "Worker Safety Standards",
                "agencies": "['Department of Labor']",
                "categories": "['Labor']",
                "html_url": "https://example.gov/2025-00100",
            },
            {
                "document_number": "2024-09999",
                "title": "Energy Dominance",
                "agencies": "['Department of Energy', 'EPA']",
                "categories": "['Energy', 'Environment']",
                "html_url": "https://example.gov/2024-09999",
            },
            {
                "document_number": "2025-00075",
                "title": None,
                "agencies": "[]",
                "categories": None,
                "html_url": None,
            },
            {
                "document_number": "2025-00010",
                "title": "Reviewing Trade Agreements",
                "agencies": "['Department of Commerce', 'EPA Region 9']",
                "categories": "['Trade']",
                "html_url": "https://example.gov/2025-00010",
            },
        ]
    )


def _raw_timelines() -> pd.DataFrame:
    return pd.DataFrame(
        [
            {"document_number_bridge": "2025-00050", "agency": "EPA", "action": "Publish guidance", "due_date": "2025-06-01"},
            {"document_number_bridge": "2025-00050", "agency": "EPA", "action": "Halt permits", "due_date": "Immediate"},
            {"document_number_bridge": "2025-00100", "agency": "Department of Labor", "action": "Update rules", "due_date": "2025-01-01"},
            {"document_number_bridge": None, "document_number": "2024-09999", "agency": "EPA", "action": "Review waivers", "due_date": "Immediate"},
            {"document_number_bridge": "9999-99999", "agency": "Department of Labor", "action": "Orphaned action", "due_date": None},
        ]
    )


@pytest.fixture
def raw_records() -> pd.DataFrame:
    return _raw_records()


@pytest.fixture
def raw_timelines() -> pd.DataFrame:
    return _raw_timelines()


@pytest.fixture
def records(raw_records) -> pd.DataFrame:
    return normalize_records(raw_records)


@pytest.fixture
def timelines(raw_timelines) -> pd.DataFrame:
    return normalize_timelines(raw_timelines)


@pytest.fixture
def write_csv(tmp_path):
    """Write text to a CSV file under tmp_path and return its path."""

    def _write(text: str, name: str = "source.csv") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write


def _make_records(count: int) -> pd.DataFrame:
    raw = pd.DataFrame(
        {
            "document_number": [f"2025-{i:05d}" for i in range(count)],
            "title": [f"Order {i}" for i in range(count)],
            "agencies": ["['EPA']" if i % 2 else "['Department of Labor']" for i in range(count)],
            "categories": ["['Environment']" if i % 3 else "['Labor']" for i in range(count)],
            "html_url": [None] * count,
        }
    )
    return normalize_records(raw)


@pytest.fixture
def make_records():
    """Factory for normalized records with distinct, zero-padded document numbers."""
    return _make_records
