from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Dict


class SeasonHalf(str, Enum):
    SPRING = "SP"
    FALL = "FA"


class SeasonStatus(str, Enum):
    """Lifecycle of a season relative to a reference date."""

    CLOSED = "CLOSED"        # shipping window has ended
    SHIPPING = "SHIPPING"
    PRE_BOOK = "PRE-BOOK"    # taking orders
    PLANNING = "PLANNING"


@dataclass(frozen=True)
class SeasonCode:
    year: int                           # full year, 2000-2099
    half: SeasonHalf

    @property
    def two_digit_year(self) -> int:
        return self.year - 2000

    @property
    def label(self) -> str:
        name = "Spring" if self.half is SeasonHalf.SPRING else "Fall"
        return f"{name} {self.year}"

    def __str__(self) -> str:
        return f"{self.two_digit_year:02d}{self.half.value}"


@dataclass(frozen=True)
class SeasonInfo:
    code: str                           # canonical, e.g. "26FA"
    status: SeasonStatus
    ship_start: date
    ship_end: date
    pre_book_start: date
    label: str                          # "Fall 2026"
    short_label: str

    def to_dict(self) -> Dict[str, str]:
        return {
            "code": self.code,
            "status": self.status.value,
            "shipStart": self.ship_start.isoformat(),
            "shipEnd": self.ship_end.isoformat(),
            "preBookStart": self.pre_book_start.isoformat(),
            "label": self.label,
            "shortLabel": self.short_label,
        }
