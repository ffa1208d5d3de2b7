"""Print the cleaned executive orders or timeline items as JSON.

Run with `python scripts/export_json.py timelines` (or `records`); paths come
from EO_DATA_DIR / EO_RECORDS_FILE / EO_TIMELINES_FILE, falling back to ./data.
"""

from __future__ import annotations

import argparse
import json
import sys

from eo_explorer import config
from eo_explorer.data.catalog import ExecutiveOrderCatalog
from eo_explorer.data.loader import LoadError, read_csv_source


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("dataset", choices=["records", "timelines"])
    parser.add_argument("--indent", type=int, default=2)
    args = parser.parse_args()
    config.configure_logging()

    try:
        catalog = ExecutiveOrderCatalog.from_raw(
            read_csv_source(config.records_path()),
            read_csv_source(config.timelines_path()),
        )
    except LoadError as exc:
        print(json.dumps({"error": str(exc)}), file=sys.stderr)
        raise SystemExit(1)

    if args.dataset == "records":
        payload = catalog.list_all_records()
    else:
        payload = catalog.list_all_timeline_items()
    json.dump(payload, sys.stdout, indent=args.indent)
    sys.stdout.write("\n")


if __name__ == "__main__":
    main()
