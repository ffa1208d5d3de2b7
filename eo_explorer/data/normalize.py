"""
Normalization helpers that turn the exported CSV columns into queryable
records: bracket/quote-decorated list strings become ordered string lists,
and timeline rows get a single resolved join key.
"""

from __future__ import annotations

import logging
import re
from typing import Any, List

import pandas as pd

logger = logging.getLogger(__name__)

LIST_ARTIFACTS = re.compile(r"[\[\]']")

RECORD_COLUMNS = ["document_number", "title", "agencies", "categories", "html_url"]
TIMELINE_COLUMNS = ["document_number_bridge", "document_number", "agency", "action", "due_date"]


def _is_missing(value: Any) -> bool:
    if value is None:
        return True
    try:
        return bool(pd.isna(value))
    except (TypeError, ValueError):
        return False


def normalize_multi_value(raw: Any) -> List[str]:
    """Split a list-like field such as "['Department of Labor', 'EPA']".

    Brackets and single quotes are removed wherever they appear, then the
    string is split on commas. Missing or blank input gives an empty list.
    """
    if _is_missing(raw):
        return []
    cleaned = LIST_ARTIFACTS.sub("", str(raw))
    return [token.strip() for token in cleaned.split(",") if token.strip()]


def _ensure_columns(df: pd.DataFrame, columns: List[str]) -> pd.DataFrame:
    for col in columns:
        if col not in df.columns:
            df[col] = pd.NA
    return df


def normalize_records(df: pd.DataFrame) -> pd.DataFrame:
    """
    Prepare executive order rows: keep the raw list strings under `*_raw`
    and add normalized `agencies` / `categories` list columns.
    """
    working = _ensure_columns(df.copy(), RECORD_COLUMNS)

    working["document_number"] = working["document_number"].map(
        lambda v: None if _is_missing(v) else str(v).strip() or None
    )
    missing_ids = working["document_number"].isna()
    if missing_ids.any():
        logger.warning("Dropping %d executive order rows without a document number", int(missing_ids.sum()))
        working = working[~missing_ids].copy()

    working = working.rename(columns={"agencies": "agencies_raw", "categories": "categories_raw"})
    working["agencies"] = working["agencies_raw"].map(normalize_multi_value)
    working["categories"] = working["categories_raw"].map(normalize_multi_value)

    working = working.reset_index(drop=True)
    working.attrs["diagnostics"] = {
        "rows": int(len(working)),
        "dropped_without_document_number": int(missing_ids.sum()),
    }
    return working


def resolve_bridge_key(row: pd.Series) -> Any:
    """`document_number_bridge` when present, else `document_number`."""
    for field in ("document_number_bridge", "document_number"):
        value = row.get(field)
        if not _is_missing(value) and str(value).strip():
            return str(value).strip()
    return None


def normalize_timelines(df: pd.DataFrame) -> pd.DataFrame:
    """Add the resolved `bridge_key` join column to timeline rows."""
    working = _ensure_columns(df.copy(), TIMELINE_COLUMNS)
    if working.empty:
        working["bridge_key"] = pd.Series(dtype=object)
        return working

    working["bridge_key"] = working.apply(resolve_bridge_key, axis=1)
    unkeyed = int(working["bridge_key"].isna().sum())
    if unkeyed:
        logger.info("%d timeline rows carry no document number", unkeyed)
    return working.reset_index(drop=True)
