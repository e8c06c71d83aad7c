from .classifier import (
    CLASSIFICATION_RULES,
    ClassificationRule,
    Confidence,
    DetectionResult,
    FileType,
    detect_file_type,
)
from .filename import extract_season_from_filename, format_file_size

__all__ = [
    "CLASSIFICATION_RULES",
    "ClassificationRule",
    "Confidence",
    "DetectionResult",
    "FileType",
    "detect_file_type",
    "extract_season_from_filename",
    "format_file_size",
]
