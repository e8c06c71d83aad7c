from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date, datetime, time
from decimal import Decimal
from typing import Dict, List, Mapping, Optional, Sequence

from pricing_tracker.excel import OpenPyXLFileHandler
from pricing_tracker.exceptions import UploadValidationError
from .classifier import DetectionResult, detect_file_type
from .filename import extract_season_from_filename, format_file_size


logger = logging.getLogger(__name__)

# Sheet names used by the known exports, in order of preference.
DEFAULT_PREFERRED_SHEETS: Sequence[str] = ("Line List", "Sheet1", "LDP Requests")

# Exports whose header row is not the first row.
DEFAULT_HEADER_ROWS: Mapping[str, int] = {"LDP Requests": 11}

DEFAULT_PREVIEW_ROWS = 5


@dataclass(frozen=True)
class WorkbookInspection:
    filename: str
    file_size: str
    sheet_name: str
    detection: DetectionResult
    record_count: int
    detected_season: Optional[str]
    preview_rows: List[Dict[str, object]] = field(default_factory=list)

    def to_dict(self) -> Dict[str, object]:
        detection = self.detection.to_dict()
        return {
            "filename": self.filename,
            "fileSize": self.file_size,
            "sheetName": self.sheet_name,
            "detectedType": detection["type"],
            "confidence": detection["confidence"],
            "matchedColumns": detection["matchedColumns"],
            "allColumns": detection["allColumns"],
            "recordCount": self.record_count,
            "detectedSeason": self.detected_season,
            "previewRows": self.preview_rows,
        }


def pick_sheet_name(sheet_names: Sequence[str], preferred: Sequence[str] = DEFAULT_PREFERRED_SHEETS) -> str:
    """First preferred sheet present in the workbook, else the first sheet."""
    for name in preferred:
        if name in sheet_names:
            return name
    if not sheet_names:
        raise UploadValidationError("Workbook has no sheets")
    return sheet_names[0]


def _jsonable(value):
    if value is None or isinstance(value, (str, bool, int, float)):
        return value
    if isinstance(value, (datetime, date, time)):
        return value.isoformat()
    if isinstance(value, Decimal):
        return float(value)
    # Elapsed-time cells ("[h]:mm") come back as timedelta.
    return str(value)


def inspect_workbook(
    handler: OpenPyXLFileHandler,
    filename: str,
    file_size: int,
    preferred_sheets: Sequence[str] = DEFAULT_PREFERRED_SHEETS,
    header_rows: Mapping[str, int] = DEFAULT_HEADER_ROWS,
    preview_rows: int = DEFAULT_PREVIEW_ROWS,
) -> WorkbookInspection:
    """
    Classify an uploaded workbook and pick up its season from the filename.

    Raises:
        UploadValidationError: If the chosen sheet has no data rows.
    """
    sheet_name = pick_sheet_name(handler.get_sheet_names(), preferred_sheets)
    header_row = int(header_rows.get(sheet_name, 1))

    records = handler.read_records(sheet_name, header_row=header_row)
    if not records:
        raise UploadValidationError("File appears to be empty or has no data rows")

    headers = [h for h in handler.get_headers(handler.get_sheet(sheet_name), header_row) if h is not None]
    detection = detect_file_type(headers)
    season = extract_season_from_filename(filename)

    logger.info(
        "Detected: %s (%s), Season: %s, Records: %d, Sheet: %s",
        detection.type.value, detection.confidence.value, season, len(records), sheet_name,
    )

    preview = [
        {key: _jsonable(value) for key, value in record.items()}
        for record in records[:preview_rows]
    ]
    return WorkbookInspection(
        filename=filename,
        file_size=format_file_size(file_size),
        sheet_name=sheet_name,
        detection=detection,
        record_count=len(records),
        detected_season=season,
        preview_rows=preview,
    )


def settings_from_config(config) -> Dict[str, object]:
    """
    Inspection keyword arguments from the `detection` section of a ConfigManager,
    falling back to the defaults above.
    """
    return {
        "preferred_sheets": tuple(config.get("detection", "preferred_sheets", default=DEFAULT_PREFERRED_SHEETS)),
        "header_rows": dict(config.get("detection", "header_rows", default=DEFAULT_HEADER_ROWS)),
        "preview_rows": int(config.get("detection", "preview_rows", default=DEFAULT_PREVIEW_ROWS)),
    }
