"""
CSV loading for the executive order and timeline sources.

`read_csv_source` is the pure reader; `load_records_frame` and
`load_timelines_frame` resolve paths from configuration and go through a
Streamlit TTL cache.
"""

from __future__ import annotations

import csv
import logging
from pathlib import Path
from typing import Dict, Iterator, List, Union

import pandas as pd
import streamlit as st

from eo_explorer import config

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


class LoadError(Exception):
    """A data source could not be located or read."""

    def __init__(self, path: PathLike, reason: str) -> None:
        super().__init__(f"Failed to load {path}: {reason}")
        self.path = str(path)
        self.reason = reason


def _iter_rows(reader: Iterator[List[str]], source: Path) -> Iterator[List[str]]:
    """Yield tokenized rows, skipping the ones the csv module rejects."""
    while True:
        try:
            row = next(reader)
        except StopIteration:
            return
        except csv.Error as exc:
            logger.warning("Skipping malformed row in %s: %s", source, exc)
            continue
        if any(cell.strip() for cell in row):
            yield row


def _to_record(header: List[str], row: List[str]) -> Dict[str, str]:
    # Extra trailing fields are dropped; missing ones stay absent.
    record = {}
    for name, value in zip(header, row):
        if not name:
            continue
        value = value.strip()
        if value:
            record[name] = value
    return record


def read_csv_source(path: PathLike) -> pd.DataFrame:
    """Read a header-row CSV into a frame of trimmed string values.

    Raises LoadError when the file is absent or unreadable. Malformed rows
    degrade (truncated, padded with missing values, or skipped) instead of
    failing the whole load.
    """
    source = Path(path)
    if not source.is_file():
        raise LoadError(source, "file not found")

    try:
        with source.open("r", encoding="utf-8-sig", newline="") as handle:
            rows = _iter_rows(csv.reader(handle, skipinitialspace=True), source)
            header_row = next(rows, None)
            if header_row is None:
                logger.info("Source %s is empty", source)
                return pd.DataFrame()
            header = [name.strip() for name in header_row]
            records = [_to_record(header, row) for row in rows]
    except (OSError, UnicodeDecodeError) as exc:
        raise LoadError(source, str(exc)) from exc

    columns = [name for name in dict.fromkeys(header) if name]
    df = pd.DataFrame(records, columns=columns)
    logger.info("Loaded %d rows from %s", len(df), source)
    return df


@st.cache_data(show_spinner=False, ttl=config.cache_ttl())
def _load_csv_cached(path: str, mtime: float) -> pd.DataFrame:
    """Cached by path and modification time; st.cache_data hands out copies."""
    return read_csv_source(path)


def _load(path: Path) -> pd.DataFrame:
    try:
        mtime = path.stat().st_mtime
    except OSError as exc:
        raise LoadError(path, "file not found") from exc
    return _load_csv_cached(str(path), mtime)


def load_records_frame() -> pd.DataFrame:
    """Wrapper that resolves config and calls the cached implementation."""
    return _load(config.records_path())


def load_timelines_frame() -> pd.DataFrame:
    return _load(config.timelines_path())


def clear_cache() -> None:
    _load_csv_cached.clear()  # type: ignore[attr-defined]
