from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from typing import List, Optional

from pricing_tracker.config_service import ConfigManager
from pricing_tracker.excel import OpenPyXLFileHandler
from pricing_tracker.exceptions import UploadValidationError, WorkbookReadError
from .workbook import inspect_workbook, settings_from_config


logger = logging.getLogger(__name__)


def _summary_line(result: dict) -> str:
    season = result["detectedSeason"] or "-"
    return (
        f"{result['filename']}: {result['detectedType']} ({result['confidence']}), "
        f"season {season}, {result['recordCount']} rows, sheet '{result['sheetName']}'"
    )


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Detect the type and season of spreadsheet exports")
    ap.add_argument("files", nargs="+", help="Workbooks (.xlsx) to inspect")
    ap.add_argument("--config", default="config.json", help="config.json path (relative paths resolve from the project root)")
    ap.add_argument("--json", action="store_true", help="Print full results as JSON")
    ap.add_argument("--verbose", action="store_true", help="Debug logging")
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    settings = settings_from_config(ConfigManager(args.config))
    results = []
    failed = False

    for path in args.files:
        try:
            handler = OpenPyXLFileHandler.from_file(path)
            inspection = inspect_workbook(
                handler,
                filename=os.path.basename(path),
                file_size=os.path.getsize(path),
                **settings,
            )
        except (UploadValidationError, WorkbookReadError) as e:
            logger.error("Could not inspect %s: %s", path, e.message)
            print(f"{path}: ERROR {e.message}", file=sys.stderr)
            failed = True
            continue
        results.append(inspection.to_dict())

    if args.json:
        print(json.dumps(results, indent=2, default=str))
    else:
        for result in results:
            print(_summary_line(result))

    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
