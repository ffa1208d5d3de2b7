from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

import streamlit as st

from eo_explorer.ui.components.formatting import format_number


@dataclass
class KpiCard:
    label: str
    value: Optional[float] = None
    value_display: Optional[str] = None
    decimals: int = 0
    help_text: Optional[str] = None


def _display(card: KpiCard) -> str:
    if card.value_display is not None:
        return card.value_display
    return format_number(card.value, decimals=card.decimals)


def render_kpi_cards(cards: Sequence[KpiCard], per_row: int = 4) -> None:
    """Lay the metrics out in rows of `per_row` Streamlit columns."""
    cards = list(cards)
    if not cards:
        st.info("No metrics available for the current data.")
        return

    per_row = max(per_row, 1)
    for start in range(0, len(cards), per_row):
        row = cards[start: start + per_row]
        for col, card in zip(st.columns(len(row)), row):
            col.metric(label=card.label, value=_display(card), help=card.help_text)
