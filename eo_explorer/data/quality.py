import pandas as pd
from typing import Dict, Any, List


def missing_values_summary(df: pd.DataFrame) -> pd.DataFrame:
    if df.empty:
        return pd.DataFrame(columns=["column", "missing_count", "missing_pct"])
    scalar_cols = [c for c in df.columns if c not in ("agencies", "categories")]
    mv = df[scalar_cols].isna().sum().reset_index()
    mv.columns = ["column", "missing_count"]
    mv["missing_pct"] = mv["missing_count"] / len(df) * 100
    return mv.sort_values("missing_pct", ascending=False).reset_index(drop=True)


def duplicate_document_numbers(records: pd.DataFrame) -> List[str]:
    if records.empty or "document_number" not in records:
        return []
    dupes = records.loc[records["document_number"].duplicated(), "document_number"]
    return sorted(dupes.unique().tolist())


def dangling_timeline_items(records: pd.DataFrame, timelines: pd.DataFrame) -> pd.DataFrame:
    """Timeline rows whose bridge key matches no executive order."""
    if timelines.empty or "bridge_key" not in timelines:
        return timelines.iloc[0:0]
    known = set(records["document_number"]) if "document_number" in records else set()
    return timelines[~timelines["bridge_key"].isin(known)]


def build_quality_overview(records: pd.DataFrame, timelines: pd.DataFrame) -> Dict[str, Any]:
    return {
        "record_count": int(len(records)),
        "timeline_item_count": int(len(timelines)),
        "duplicate_document_numbers": duplicate_document_numbers(records),
        "dangling_timeline_items": int(len(dangling_timeline_items(records, timelines))),
        "records_without_agencies": int(records["agencies"].map(len).eq(0).sum()) if "agencies" in records else 0,
    }
