from __future__ import annotations

import re
from typing import Optional, Tuple

# Applied to the upper-cased filename, in this order. Each is word-bounded so
# that e.g. "FA" inside "FABRIC26" does not count.
_FILENAME_PATTERNS: Tuple[re.Pattern, ...] = (
    re.compile(r"\b(?P<half>SPRING|FALL)\s*[0-9]{2}(?P<yy>[0-9]{2})\b", re.ASCII),     # SPRING 2027
    re.compile(r"\b(?P<half>SPRING|FALL)\s*(?P<yy>[0-9]{2})\b", re.ASCII),             # FALL 26
    re.compile(r"\b(?P<half>SP|FA)(?P<yy>[0-9]{2})\b", re.ASCII),                      # SP27
    re.compile(r"\b(?P<yy>[0-9]{2})(?P<half>SP|FA)\b", re.ASCII),                      # 26FA
    re.compile(r"\b(?P<half>S|F)(?P<yy>[0-9]{2})\b", re.ASCII),                        # F26
)

_HALF_CODES = {
    "SPRING": "SP",
    "SP": "SP",
    "S": "SP",
    "FALL": "FA",
    "FA": "FA",
    "F": "FA",
}


def extract_season_from_filename(filename: Optional[str]) -> Optional[str]:
    """
    Pull a season code out of an upload's filename.

    >>> extract_season_from_filename("26FA SALES 1.30.26.xlsx")
    '26FA'
    >>> extract_season_from_filename("SPRING 2027 Line List.xlsx")
    '27SP'
    """
    if not filename:
        return None

    name = filename.upper()
    for pattern in _FILENAME_PATTERNS:
        m = pattern.search(name)
        if m:
            return f"{m.group('yy')}{_HALF_CODES[m.group('half')]}"
    return None


def format_file_size(num_bytes: int) -> str:
    if num_bytes < 1024:
        return f"{num_bytes} B"
    if num_bytes < 1024 * 1024:
        return f"{num_bytes / 1024:.1f} KB"
    return f"{num_bytes / (1024 * 1024):.1f} MB"
