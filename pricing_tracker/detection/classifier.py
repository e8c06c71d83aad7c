from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, FrozenSet, Iterable, List, Optional, Tuple

from .signatures import (
    COSTS,
    LINE_LIST,
    LINE_LIST_MARKERS,
    PRICING,
    PRICING_MARKERS,
    SALES,
    ColumnSignature,
)


logger = logging.getLogger(__name__)


class FileType(str, Enum):
    LINE_LIST = "lineList"
    COSTS = "costs"
    SALES = "sales"
    PRICING = "pricing"
    UNKNOWN = "unknown"


class Confidence(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


@dataclass(frozen=True)
class DetectionResult:
    type: FileType
    confidence: Confidence
    matched_columns: Tuple[str, ...]
    all_columns: Tuple[str, ...]
    rule: Optional[str] = None          # name of the rule that fired

    def to_dict(self) -> Dict[str, object]:
        return {
            "type": self.type.value,
            "confidence": self.confidence.value,
            "matchedColumns": list(self.matched_columns),
            "allColumns": list(self.all_columns),
        }


@dataclass(frozen=True)
class ClassificationRule:
    """
    One step of the classification ladder.

    Fires when `signature` has at least `min_matches` hits, at least one of
    `requires_any` is a header (if given) and none of `forbids_any` is.
    """
    name: str
    file_type: FileType
    signature: ColumnSignature
    min_matches: int
    high_at: int
    medium_at: int
    requires_any: FrozenSet[str] = field(default_factory=frozenset)
    forbids_any: FrozenSet[str] = field(default_factory=frozenset)

    def applies(self, matches: int, lowered_headers: FrozenSet[str]) -> bool:
        if matches < self.min_matches:
            return False
        if self.requires_any and not (self.requires_any & lowered_headers):
            return False
        if self.forbids_any & lowered_headers:
            return False
        return True

    def confidence_for(self, matches: int) -> Confidence:
        if matches >= self.high_at:
            return Confidence.HIGH
        if matches >= self.medium_at:
            return Confidence.MEDIUM
        return Confidence.LOW


# Evaluated top to bottom, first hit wins. Signatures overlap ("Customer",
# "Price", "MSRP", "Season", "Style"), so the order is part of the contract.
CLASSIFICATION_RULES: Tuple[ClassificationRule, ...] = (
    ClassificationRule("sales", FileType.SALES, SALES, min_matches=3, high_at=5, medium_at=4),
    ClassificationRule("costs", FileType.COSTS, COSTS, min_matches=2, high_at=4, medium_at=3),
    ClassificationRule(
        "pricing-marked", FileType.PRICING, PRICING, min_matches=3, high_at=5, medium_at=4,
        requires_any=PRICING_MARKERS,
        forbids_any=LINE_LIST_MARKERS,
    ),
    ClassificationRule("line-list", FileType.LINE_LIST, LINE_LIST, min_matches=3, high_at=6, medium_at=4),
    ClassificationRule("pricing-fallback", FileType.PRICING, PRICING, min_matches=2, high_at=4, medium_at=3),
)


def normalize_headers(headers: Iterable[object]) -> List[str]:
    """Trim each header; empty cells become ''."""
    return [str(h).strip() if h is not None else "" for h in headers]


def count_matches(headers: Iterable[str], signature: ColumnSignature) -> int:
    """Number of signature entries present among the headers (case-insensitive)."""
    lowered = {h.lower() for h in headers}
    return sum(1 for column in signature.columns if column.lower() in lowered)


def matched_columns(headers: Iterable[str], signature: ColumnSignature) -> List[str]:
    """Headers, in their original order, that belong to the signature."""
    wanted = signature.lowered
    return [h for h in headers if h.lower() in wanted]


def detect_file_type(
    headers: Iterable[object],
    rules: Tuple[ClassificationRule, ...] = CLASSIFICATION_RULES,
) -> DetectionResult:
    """
    Decide which kind of export a header row belongs to.

    Never raises for string-like headers; when no rule clears its threshold
    the result is UNKNOWN with LOW confidence.
    """
    normalized = normalize_headers(headers)
    lowered = frozenset(h.lower() for h in normalized)

    counts: Dict[str, int] = {}
    for rule in rules:
        sig = rule.signature
        if sig.name not in counts:
            counts[sig.name] = count_matches(normalized, sig)

        matches = counts[sig.name]
        if rule.applies(matches, lowered):
            result = DetectionResult(
                type=rule.file_type,
                confidence=rule.confidence_for(matches),
                matched_columns=tuple(matched_columns(normalized, sig)),
                all_columns=tuple(normalized),
                rule=rule.name,
            )
            logger.debug(
                "Detected %s (%s) via rule '%s' with %d matches",
                result.type.value, result.confidence.value, rule.name, matches,
            )
            return result

    logger.debug("No rule matched headers %s; match counts %s", normalized, counts)
    return DetectionResult(
        type=FileType.UNKNOWN,
        confidence=Confidence.LOW,
        matched_columns=(),
        all_columns=tuple(normalized),
    )
