# SPDX-License-Identifier: MIT
"""
Temporal type definitions.

This module contains the data structures passed between the normalizer stages:
- WildcardMarker: placeholders found in a recognizer TIMEX token
- Granularity: the precision class of a resolved token
- PresentationKind: which calendar fact the caller wants rendered
- ResolvedToken / ParsedTemporal / NormalizedOutput: per-stage results
"""

from __future__ import annotations

import datetime
from dataclasses import dataclass, replace
from enum import Enum
from typing import FrozenSet, NamedTuple, Optional


# ============================================================================
# Enums
# ============================================================================


class WildcardMarker(Enum):
    """Placeholder markers the recognizer emits for unknown components."""

    UNSPECIFIED_YEAR = "unspecified_year"      # "XXXX-"
    UNSPECIFIED_MONTH = "unspecified_month"    # "XXXX-XX-"
    UNSPECIFIED_DAY = "unspecified_day"        # trailing "-XX"
    WEEK_REFERENCE = "week_reference"          # "XXXX-WXX-"

    def __str__(self) -> str:
        return self.value


class Granularity(Enum):
    """Precision class of a resolved token, decided from its shape."""

    FULL_DATE_TIME = "full_date_time"   # 2018-10-28T14:35
    DATE_ONLY = "date_only"             # 2018-10-28
    YEAR_MONTH = "year_month"           # 2018-10
    MONTH_DAY = "month_day"             # 10-28 (year stripped)
    MONTH_ONLY = "month_only"           # 03
    DAY_OF_MONTH = "day_of_month"       # 15
    WEEKDAY_ONLY = "weekday_only"       # 7, 7T17
    TIME_ONLY = "time_only"             # T14:30

    def __str__(self) -> str:
        return self.value

    @property
    def has_time_part(self) -> bool:
        """Whether tokens of this class may carry a ``T`` time part."""
        return self in (
            Granularity.FULL_DATE_TIME,
            Granularity.WEEKDAY_ONLY,
            Granularity.TIME_ONLY,
        )


class PresentationKind(Enum):
    """Calendar fact requested from a parsed value."""

    WEEKDAY_NAME = "weekday_name"
    MONTH_NAME = "month_name"
    ZERO_PADDED_DAY = "zero_padded_day"
    LOCALIZED_DATE = "localized_date"
    LOCALIZED_DATE_TIME = "localized_date_time"
    LOCALIZED_DATE_WITHOUT_YEAR = "localized_date_without_year"
    LOCALIZED_TIME = "localized_time"

    def __str__(self) -> str:
        return self.value

    @property
    def needs_full_date(self) -> bool:
        """Whether an unknown year should be filled from the clock.

        Only the localized date renderings show a year; every other kind
        works on the stripped token.
        """
        return self in (
            PresentationKind.LOCALIZED_DATE,
            PresentationKind.LOCALIZED_DATE_TIME,
        )


# ============================================================================
# Stage results
# ============================================================================


class ResolvedToken(NamedTuple):
    """Placeholder resolver output: remaining text plus the markers removed."""

    text: str
    markers: FrozenSet[WildcardMarker] = frozenset()


@dataclass(frozen=True)
class ParsedTemporal:
    """Structured, calendar-valid result of parsing one token.

    Fields absent in the source stay ``None``; nothing is defaulted to zero
    except a minute synthesized for an hour-only time part.
    """

    year: Optional[int] = None
    month: Optional[int] = None
    day: Optional[int] = None
    weekday: Optional[int] = None       # ISO, Monday=1
    hour: Optional[int] = None
    minute: Optional[int] = None
    second: Optional[int] = None
    had_explicit_time: bool = False

    @property
    def has_full_date(self) -> bool:
        return None not in (self.year, self.month, self.day)

    def to_date(self) -> datetime.date:
        """Return the calendar date. Requires year, month and day."""
        if not self.has_full_date:
            raise ValueError("year, month and day are required")
        return datetime.date(self.year, self.month, self.day)  # type: ignore[arg-type]

    def to_time(self) -> datetime.time:
        """Return the time of day. Requires an explicit time."""
        if not self.had_explicit_time or self.hour is None:
            raise ValueError("no explicit time")
        return datetime.time(self.hour, self.minute or 0, self.second or 0)

    def with_time(self, other: "ParsedTemporal") -> "ParsedTemporal":
        """Merge the time fields of ``other`` onto this value.

        Recognizers often report the date and the time of one utterance as
        two separate entities; this joins them back together.
        """
        if not other.had_explicit_time:
            return self
        return replace(
            self,
            hour=other.hour,
            minute=other.minute,
            second=other.second,
            had_explicit_time=True,
        )


@dataclass(frozen=True)
class NormalizedOutput:
    """Display string produced for one token."""

    text: str
    granularity: Granularity
    token: str = ""
    kind: Optional[PresentationKind] = None

    def __str__(self) -> str:
        return self.text
