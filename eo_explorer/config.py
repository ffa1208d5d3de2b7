"""
Application-wide configuration constants and helper utilities.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

PAGE_SIZE = 12
IMMEDIATE = "Immediate"

DEFAULT_DATA_DIR = "data"
DEFAULT_RECORDS_FILE = "EO_Agency_Classification.csv"
DEFAULT_TIMELINES_FILE = "EO_Timelines_v2.csv"
DEFAULT_CACHE_TTL = 600
DEFAULT_LOG_LEVEL = "INFO"


@dataclass(frozen=True)
class TabConfig:
    key: str
    label: str


# Ordered tab definitions for the browse view
TABS: List[TabConfig] = [
    TabConfig("orders", "Executive Orders"),
    TabConfig("insights", "Insights"),
    TabConfig("data_quality", "Data Quality"),
]


def get_setting(name: str, default: Optional[str] = None) -> Optional[str]:
    """Try env first, then st.secrets (if available)."""
    val = os.getenv(name)
    if val:
        return val
    try:
        import streamlit as st

        sec = getattr(st, "secrets", None)
        if sec:
            v = sec.get(name)  # type: ignore[index]
            return str(v) if v is not None else default
    except Exception:
        # st.secrets raises when no secrets.toml exists outside Streamlit Cloud
        pass
    return default


def data_dir() -> Path:
    return Path(get_setting("EO_DATA_DIR", DEFAULT_DATA_DIR) or DEFAULT_DATA_DIR)


def records_path() -> Path:
    return data_dir() / (get_setting("EO_RECORDS_FILE", DEFAULT_RECORDS_FILE) or DEFAULT_RECORDS_FILE)


def timelines_path() -> Path:
    return data_dir() / (get_setting("EO_TIMELINES_FILE", DEFAULT_TIMELINES_FILE) or DEFAULT_TIMELINES_FILE)


def cache_ttl() -> int:
    raw = get_setting("EO_CACHE_TTL")
    if raw is None:
        return DEFAULT_CACHE_TTL
    try:
        return max(int(raw), 0)
    except ValueError:
        logging.getLogger(__name__).warning("Ignoring non-integer EO_CACHE_TTL=%r", raw)
        return DEFAULT_CACHE_TTL


def configure_logging(level: Optional[str] = None) -> None:
    """Set up root logging once; level falls back to EO_LOG_LEVEL."""
    level_name = (level or get_setting("EO_LOG_LEVEL", DEFAULT_LOG_LEVEL) or DEFAULT_LOG_LEVEL).upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
