"""
passcraft.score
Strength scoring: length + character variety + character uniqueness, 0-100.
"""

import re
from enum import Enum
from typing import NamedTuple


class Strength(Enum):
    WEAK = "weak"
    MEDIUM = "medium"
    STRONG = "strong"
    VERY_STRONG = "very-strong"


class StrengthResult(NamedTuple):
    score: int
    category: Strength
    length_points: int
    variety_points: int
    complexity_points: int

    def to_dict(self) -> dict:
        d = self._asdict()
        d["category"] = self.category.value
        return d


LENGTH_THRESHOLDS = (4, 8, 12, 16)

VARIETY_PATTERNS = (
    re.compile(r"[a-z]"),        # lowercase
    re.compile(r"[A-Z]"),        # uppercase
    re.compile(r"[0-9]"),        # digits
    re.compile(r"[^a-zA-Z0-9]"), # symbols / anything else
)


def _length_points(password: str) -> int:
    return 10 * sum(1 for t in LENGTH_THRESHOLDS if len(password) >= t)


def _variety_points(password: str) -> int:
    return 10 * sum(1 for p in VARIETY_PATTERNS if p.search(password))


def _complexity_points(password: str) -> int:
    if not password:
        return 0
    # floor(distinct / length * 20) in integers
    return min(20, len(set(password)) * 20 // len(password))


def category_for(score: int) -> Strength:
    if score >= 80:
        return Strength.VERY_STRONG
    if score >= 60:
        return Strength.STRONG
    if score >= 40:
        return Strength.MEDIUM
    return Strength.WEAK


def score_password(password: str) -> StrengthResult:
    """
    Score a password on a 0-100 scale.

    length      up to 40: +10 at each of 4, 8, 12, 16 characters
    variety     up to 40: +10 per class present (lower, upper, digit, other)
    complexity  up to 20: distinct characters / length * 20, rounded down
    """
    length_pts = _length_points(password)
    variety_pts = _variety_points(password)
    complexity_pts = _complexity_points(password)

    score = max(0, min(100, length_pts + variety_pts + complexity_pts))

    return StrengthResult(
        score=score,
        category=category_for(score),
        length_points=length_pts,
        variety_points=variety_pts,
        complexity_points=complexity_pts,
    )
