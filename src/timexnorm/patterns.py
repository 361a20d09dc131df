# SPDX-License-Identifier: MIT
"""Ordered parse pattern tables.

The parser tries these lists front to back and keeps the first pattern that
consumes its input exactly (``re.fullmatch``). The order is the whole
disambiguation policy:

1. 24-hour before 12-hour
2. with seconds before without
3. with minutes before hour-only
4. zero-padded before unpadded

About the 12-hour entries: the recognizer never emits AM/PM, and every
12-hour pattern here accepts the same 00-23 numerals as its 24-hour twin.
They therefore never win over the 24-hour pattern listed before them and
perform no AM/PM inference. They are kept so the table mirrors the full
HH/hh/H/h format family; ``redundant_with`` names the twin.

Digits are ASCII ``[0-9]`` throughout; other scripts' digits never match.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional, Pattern

from timexnorm.types import Granularity

__all__ = [
    "ParsePattern",
    "TIME_PATTERNS",
    "DATE_PATTERNS",
    "WEEKDAY_PATTERN",
    "date_patterns_for",
]


@dataclass(frozen=True)
class ParsePattern:
    """One named entry of an ordered pattern list."""

    name: str
    regex: Pattern[str]
    clock: Optional[str] = None            # "24h" | "12h" for time patterns
    redundant_with: Optional[str] = None

    def fullmatch(self, text: str) -> Optional[re.Match[str]]:
        return self.regex.fullmatch(text)


def _p(name: str, regex: str, **kwargs: str) -> ParsePattern:
    return ParsePattern(name=name, regex=re.compile(regex), **kwargs)


# ============================================================================
# Time part (after the "T" designator)
# ============================================================================

_HOUR_PADDED = r"(?P<hour>[01][0-9]|2[0-3])"
_HOUR_UNPADDED = r"(?P<hour>[0-9]|1[0-9]|2[0-3])"
_MINUTE = r"(?P<minute>[0-5][0-9])"
_SECOND = r"(?P<second>[0-5][0-9])"

TIME_PATTERNS: tuple[ParsePattern, ...] = (
    # a. padded, with seconds
    _p("HH:mm:ss", rf"{_HOUR_PADDED}:{_MINUTE}:{_SECOND}", clock="24h"),
    _p("hh:mm:ss", rf"{_HOUR_PADDED}:{_MINUTE}:{_SECOND}", clock="12h", redundant_with="HH:mm:ss"),
    # c. unpadded, with seconds
    _p("H:mm:ss", rf"{_HOUR_UNPADDED}:{_MINUTE}:{_SECOND}", clock="24h"),
    _p("h:mm:ss", rf"{_HOUR_UNPADDED}:{_MINUTE}:{_SECOND}", clock="12h", redundant_with="H:mm:ss"),
    # d. without seconds
    _p("HH:mm", rf"{_HOUR_PADDED}:{_MINUTE}", clock="24h"),
    _p("hh:mm", rf"{_HOUR_PADDED}:{_MINUTE}", clock="12h", redundant_with="HH:mm"),
    _p("H:mm", rf"{_HOUR_UNPADDED}:{_MINUTE}", clock="24h"),
    _p("h:mm", rf"{_HOUR_UNPADDED}:{_MINUTE}", clock="12h", redundant_with="H:mm"),
    # e. hour only
    _p("HH", _HOUR_PADDED, clock="24h"),
    _p("H", _HOUR_UNPADDED, clock="24h"),
)


# ============================================================================
# Date part
# ============================================================================

_YEAR = r"(?P<year>(?!0000)[0-9]{4})"
_MONTH = r"(?P<month>0[1-9]|1[0-2])"
_DAY_PADDED = r"(?P<day>0[1-9]|[12][0-9]|3[01])"
_DAY_UNPADDED = r"(?P<day>[1-9]|[12][0-9]|3[01])"

YMD = _p("yyyy-MM-dd", rf"{_YEAR}-{_MONTH}-{_DAY_PADDED}")
YM = _p("yyyy-MM", rf"{_YEAR}-{_MONTH}")
MD = _p("MM-dd", rf"{_MONTH}-{_DAY_PADDED}")
MONTH = _p("MM", _MONTH)
DAY_PADDED = _p("dd", _DAY_PADDED)
DAY_UNPADDED = _p("d", _DAY_UNPADDED)

WEEKDAY_PATTERN = _p("e", r"(?P<weekday>[1-7])")

DATE_PATTERNS: dict[Granularity, tuple[ParsePattern, ...]] = {
    Granularity.FULL_DATE_TIME: (YMD, MD),
    Granularity.DATE_ONLY: (YMD,),
    Granularity.YEAR_MONTH: (YM,),
    Granularity.MONTH_DAY: (MD,),
    Granularity.MONTH_ONLY: (MONTH,),
    Granularity.DAY_OF_MONTH: (DAY_PADDED, DAY_UNPADDED),
    Granularity.WEEKDAY_ONLY: (WEEKDAY_PATTERN,),
    Granularity.TIME_ONLY: (),
}


def date_patterns_for(granularity: Granularity) -> tuple[ParsePattern, ...]:
    """Date-shaped patterns that apply to ``granularity``, in order."""
    return DATE_PATTERNS[granularity]
