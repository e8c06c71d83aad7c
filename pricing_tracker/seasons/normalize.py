"""
Helpers for the free-form season labels found in spreadsheet exports
("FALL 2026", "SP27", "26F - BULK", "27SP/27FA") and for ordering and
filtering canonical codes in reports.
"""
from __future__ import annotations

import re
from datetime import date
from functools import cmp_to_key
from typing import Dict, Iterable, List, Optional, Tuple

from .calendar import DateLike, SeasonLike, parse_season_code, to_date
from .model import SeasonHalf

_SUFFIX_RE = re.compile(r"[\s-]*(BULK|PROTO|SMS|PRODUCTION)")
_NON_ALNUM_RE = re.compile(r"[^A-Z0-9]")

# Matched in order against the whole cleaned label.
_LABEL_PATTERNS: Tuple[re.Pattern, ...] = (
    re.compile(r"(?P<half>SPRING|FALL)[0-9]{2}(?P<yy>[0-9]{2})"),
    re.compile(r"(?P<half>SPRING|FALL)(?P<yy>[0-9]{2})"),
    re.compile(r"(?P<half>FA|SP|F|S)(?P<yy>[0-9]{2})"),
    re.compile(r"(?P<yy>[0-9]{2})(?P<half>FA|SP|F|S)"),
)

_HALF_BY_TOKEN = {
    "SPRING": SeasonHalf.SPRING,
    "SP": SeasonHalf.SPRING,
    "S": SeasonHalf.SPRING,
    "FALL": SeasonHalf.FALL,
    "FA": SeasonHalf.FALL,
    "F": SeasonHalf.FALL,
}


def normalize_season_code(raw: Optional[str]) -> Optional[str]:
    """
    Normalize a season label from an export to the canonical "<YY><SP|FA>" form.
    Returns None when the label is empty or not recognised.
    """
    if not raw:
        return None

    s = str(raw).upper().strip()
    s = _SUFFIX_RE.sub("", s).strip()

    # Compound seasons ("27SP/27FA"): take the first
    if "/" in s:
        s = s.split("/")[0].strip()

    s = _NON_ALNUM_RE.sub("", s)

    for pattern in _LABEL_PATTERNS:
        m = pattern.fullmatch(s)
        if m:
            return f"{m.group('yy')}{_HALF_BY_TOKEN[m.group('half')].value}"

    return None


def _sort_key(code: str) -> Tuple[int, int]:
    parsed = parse_season_code(code)
    if parsed is None:
        return 0, 0
    return parsed.year, 0 if parsed.half is SeasonHalf.SPRING else 1


def compare_seasons(a: str, b: str) -> int:
    """Negative if `a` comes before `b`. Spring precedes Fall within a year."""
    ka, kb = _sort_key(a), _sort_key(b)
    return (ka > kb) - (ka < kb)


def sort_seasons(codes: Iterable[str]) -> List[str]:
    return sorted(codes, key=cmp_to_key(compare_seasons))


def is_future_season(code: SeasonLike, reference: DateLike = None) -> bool:
    """
    True while the selling window has not opened yet.
    Fall opens Jul 1 of the prior year, Spring opens Jan 1 of the prior year.
    """
    parsed = parse_season_code(code)
    if parsed is None:
        return False

    if parsed.half is SeasonHalf.FALL:
        selling_start = date(parsed.year - 1, 7, 1)
    else:
        selling_start = date(parsed.year - 1, 1, 1)
    return selling_start > to_date(reference)


def is_historical_season(code: SeasonLike, reference: DateLike = None) -> bool:
    return not is_future_season(code, reference)


def is_relevant_season(code: SeasonLike, reference: DateLike = None) -> bool:
    """Seasons from three years back through two years ahead."""
    parsed = parse_season_code(code)
    if parsed is None:
        return False
    current_year = to_date(reference).year
    return current_year - 3 <= parsed.year <= current_year + 2


def generate_season_options(reference: DateLike = None) -> List[Dict[str, str]]:
    """Dropdown options, newest first: two years ahead down to the current year."""
    current_year = to_date(reference).year
    options = []
    for year in range(current_year + 2, current_year - 1, -1):
        yy = f"{year % 100:02d}"
        options.append({"value": f"{yy}FA", "label": f"Fall {year}"})
        options.append({"value": f"{yy}SP", "label": f"Spring {year}"})
    return options
