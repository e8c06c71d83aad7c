"""
Season calendar.

Shipping windows:
  - Spring (SP): Feb 15 -> Aug 14
  - Fall (FA):   Aug 15 -> Feb 14 of the NEXT year

Pre-book windows open on fixed dates in the prior year:
  - Spring: Jun 1
  - Fall:   Dec 1

All comparisons are at day granularity; datetimes are reduced to their date.
"""
from __future__ import annotations

import re
from datetime import date, datetime
from typing import Iterable, List, Optional, Union

from .model import SeasonCode, SeasonHalf, SeasonInfo, SeasonStatus

_SEASON_CODE_RE = re.compile(r"([0-9]{2})(SP|FA)", re.IGNORECASE)

SeasonLike = Union[str, SeasonCode]
DateLike = Union[date, datetime, None]

_STATUS_LABELS = {
    SeasonStatus.CLOSED: "Closed",
    SeasonStatus.SHIPPING: "Shipping",
    SeasonStatus.PRE_BOOK: "Pre-Book",
    SeasonStatus.PLANNING: "Planning",
}


def parse_season_code(code: SeasonLike) -> Optional[SeasonCode]:
    """
    Parse a code like "26SP" into a SeasonCode.
    Returns None for anything that is not exactly two digits + SP/FA.
    """
    if isinstance(code, SeasonCode):
        return code
    if not isinstance(code, str):
        return None
    m = _SEASON_CODE_RE.fullmatch(code)
    if not m:
        return None
    return SeasonCode(year=2000 + int(m.group(1)), half=SeasonHalf(m.group(2).upper()))


def to_date(reference: DateLike) -> date:
    if reference is None:
        return date.today()
    if isinstance(reference, datetime):
        return reference.date()
    return reference


def ship_start(code: SeasonLike) -> Optional[date]:
    parsed = parse_season_code(code)
    if parsed is None:
        return None
    if parsed.half is SeasonHalf.SPRING:
        return date(parsed.year, 2, 15)
    return date(parsed.year, 8, 15)


def ship_end(code: SeasonLike) -> Optional[date]:
    parsed = parse_season_code(code)
    if parsed is None:
        return None
    if parsed.half is SeasonHalf.SPRING:
        return date(parsed.year, 8, 14)
    # Fall keeps shipping into February of the following year
    return date(parsed.year + 1, 2, 14)


def pre_book_start(code: SeasonLike) -> Optional[date]:
    parsed = parse_season_code(code)
    if parsed is None:
        return None
    if parsed.half is SeasonHalf.SPRING:
        return date(parsed.year - 1, 6, 1)
    return date(parsed.year - 1, 12, 1)


def season_status(code: SeasonLike, reference: DateLike = None) -> SeasonStatus:
    """
    Status of a season on the reference date (default: today).
    Unparseable codes are reported as CLOSED.
    """
    start = ship_start(code)
    end = ship_end(code)
    pre_book = pre_book_start(code)
    if start is None or end is None or pre_book is None:
        return SeasonStatus.CLOSED

    day = to_date(reference)
    if day > end:
        return SeasonStatus.CLOSED
    if day >= start:
        return SeasonStatus.SHIPPING
    if day >= pre_book:
        return SeasonStatus.PRE_BOOK
    return SeasonStatus.PLANNING


def current_shipping_season(reference: DateLike = None) -> str:
    """
    Season code whose shipping window contains the reference date.
    Jan 1 - Feb 14 belongs to the previous year's Fall.

    Codes carry two-digit years read as 2000-2099, so only dates from
    Feb 15, 2000 to Dec 31, 2099 produce a code that round-trips.
    """
    day = to_date(reference)
    if date(day.year, 2, 15) <= day <= date(day.year, 8, 14):
        return f"{day.year % 100:02d}{SeasonHalf.SPRING.value}"
    if day.month == 1 or day.month == 2:
        return f"{(day.year - 1) % 100:02d}{SeasonHalf.FALL.value}"
    return f"{day.year % 100:02d}{SeasonHalf.FALL.value}"


def season_info(code: SeasonLike, reference: DateLike = None) -> Optional[SeasonInfo]:
    parsed = parse_season_code(code)
    if parsed is None:
        return None

    canonical = str(parsed)
    return SeasonInfo(
        code=canonical,
        status=season_status(parsed, reference),
        ship_start=ship_start(parsed),
        ship_end=ship_end(parsed),
        pre_book_start=pre_book_start(parsed),
        label=parsed.label,
        short_label=canonical,
    )


def seasons_with_status(codes: Iterable[SeasonLike], reference: DateLike = None) -> List[SeasonInfo]:
    """Infos for every valid code, in input order. Invalid codes are dropped."""
    day = to_date(reference)
    infos = (season_info(code, day) for code in codes)
    return [info for info in infos if info is not None]


def cost_label(status: SeasonStatus) -> str:
    if status in (SeasonStatus.CLOSED, SeasonStatus.SHIPPING):
        return "Actual Cost"
    return "Projected Cost"


def status_label(status: SeasonStatus) -> str:
    return _STATUS_LABELS[status]


def format_date_range(start: date, end: date) -> str:
    """'Feb 15 - Aug 14, 2026'"""
    return f"{start:%b} {start.day} - {end:%b} {end.day}, {end.year}"
