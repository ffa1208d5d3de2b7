from __future__ import annotations

from dataclasses import dataclass

import pandas as pd

from eo_explorer.data.catalog import ExecutiveOrderCatalog
from eo_explorer.data.filters import FilterState


@dataclass
class PageContext:
    catalog: ExecutiveOrderCatalog
    filters: FilterState

    @property
    def records(self) -> pd.DataFrame:
        return self.catalog.records

    @property
    def timelines(self) -> pd.DataFrame:
        return self.catalog.timelines
