# app/routes/detect_file.py
from __future__ import annotations

import logging

from flask import Blueprint, current_app, jsonify, request

from pricing_tracker.detection.filename import format_file_size
from pricing_tracker.detection.workbook import inspect_workbook, settings_from_config
from pricing_tracker.excel import OpenPyXLFileHandler
from pricing_tracker.exceptions import UploadValidationError, WorkbookReadError

logger = logging.getLogger(__name__)

detect_file_bp = Blueprint("detect_file", __name__, url_prefix="/api")


def _failure(error: str, status: int, filename: str = "", file_size: str = "0"):
    return jsonify({
        "success": False,
        "filename": filename,
        "fileSize": file_size,
        "detectedType": "unknown",
        "confidence": "low",
        "matchedColumns": [],
        "allColumns": [],
        "recordCount": 0,
        "detectedSeason": None,
        "previewRows": [],
        "error": error,
    }), status


@detect_file_bp.post("/detect-file")
def detect_file():
    """
    Classify an uploaded workbook so the operator can confirm the target
    table and season before importing.
    """
    upload = request.files.get("file")
    if upload is None or not upload.filename:
        return _failure("No file provided", 400)

    data = upload.read()
    size = format_file_size(len(data))
    logger.info("Detecting file type for: %s (%d bytes)", upload.filename, len(data))

    try:
        handler = OpenPyXLFileHandler.from_bytes(data)
        inspection = inspect_workbook(
            handler,
            filename=upload.filename,
            file_size=len(data),
            **settings_from_config(current_app.extensions["config_manager"]),
        )
        body = inspection.to_dict()
        body["success"] = True
        return jsonify(body), 200
    except UploadValidationError as exc:
        return _failure(exc.message, 400, upload.filename, size)
    except WorkbookReadError as exc:
        logger.warning("Unreadable upload %s: %s", upload.filename, exc.message)
        return _failure(exc.message, 500, upload.filename, size)
    except Exception as exc:
        logger.exception("File detection failed: %s", exc)
        return _failure(str(exc) or "Failed to analyze file", 500, upload.filename, size)
