"""
Environment bootstrap for the explorer, imported before anything reads settings.

Secrets configured for the Streamlit deployment are copied into os.environ
(nested tables become PREFIX_CHILD names), then a local .env file fills in
whatever is still unset. Values already in the environment always win.
"""

from __future__ import annotations

import logging
import os
import re
from typing import Any, Dict, Iterator, Tuple

import streamlit as st
from dotenv import load_dotenv

logger = logging.getLogger(__name__)


def _env_name(key: str) -> str:
    return re.sub(r"[^A-Za-z0-9_]", "_", key.upper())


def _walk_secrets(prefix: str, value: Any) -> Iterator[Tuple[str, str]]:
    if isinstance(value, dict):
        for child_key, child_value in value.items():
            yield from _walk_secrets(f"{prefix}_{child_key}", child_value)
    else:
        yield _env_name(prefix), str(value)


def _read_secrets() -> Dict[str, Any]:
    try:
        secrets = getattr(st, "secrets", None)
        if not secrets:
            return {}
        return secrets.to_dict()  # type: ignore[union-attr]
    except Exception:
        # st.secrets raises when no secrets.toml exists (local runs, tests)
        return {}


def _bridge_secrets_to_env() -> int:
    bridged = 0
    for key, value in _read_secrets().items():
        for name, text in _walk_secrets(key, value):
            if name not in os.environ:
                os.environ[name] = text
                bridged += 1
    return bridged


def ensure_env() -> None:
    """Idempotent; safe inside and outside the Streamlit runtime."""
    bridged = _bridge_secrets_to_env()
    if bridged:
        logger.debug("Copied %d secrets into the environment", bridged)
    load_dotenv(override=False)


ensure_env()
