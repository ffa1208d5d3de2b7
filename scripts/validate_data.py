"""Quick validation script for the CSV sources.

Run with `python scripts/validate_data.py` to ensure both files load, every
executive order has a unique document number, and to report timeline items
that reference unknown orders.
"""

from __future__ import annotations

from eo_explorer import config
from eo_explorer.data.loader import LoadError, read_csv_source
from eo_explorer.data.normalize import normalize_records, normalize_timelines
from eo_explorer.data.quality import build_quality_overview


def main() -> None:
    config.configure_logging()
    try:
        raw_records = read_csv_source(config.records_path())
        raw_timelines = read_csv_source(config.timelines_path())
    except LoadError as exc:
        raise SystemExit(str(exc))

    records = normalize_records(raw_records)
    timelines = normalize_timelines(raw_timelines)
    overview = build_quality_overview(records, timelines)

    dropped = records.attrs["diagnostics"]["dropped_without_document_number"]
    if dropped:
        raise SystemExit(f"{dropped} executive order rows have no document number")
    if overview["duplicate_document_numbers"]:
        raise SystemExit(f"Duplicate document numbers: {overview['duplicate_document_numbers']}")

    print("Records:", overview["record_count"])
    print("Timeline items:", overview["timeline_item_count"])
    print("Dangling timeline items:", overview["dangling_timeline_items"])
    print("Validation passed.")


if __name__ == "__main__":
    main()
