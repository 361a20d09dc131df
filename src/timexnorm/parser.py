# SPDX-License-Identifier: MIT
"""
Ambiguity-aware parsing.

Splits a resolved token into its date part and its ``T`` time part, then
tries the ordered lists from :mod:`timexnorm.patterns` on each. The first
pattern that consumes a part exactly wins; there is no partial matching and
no second attempt with a different input.

One normalization happens before matching: when the granularity carries a
time part and that part has an hour but no ``:``, ``:00`` is appended.
"2018-10-28T14" is therefore parsed as "2018-10-28T14:00".
"""

from __future__ import annotations

import calendar
import datetime
import logging
import re
from typing import Optional, Sequence, Union

from timexnorm.exceptions import AmbiguousOrInvalidFormat
from timexnorm.patterns import TIME_PATTERNS, ParsePattern, date_patterns_for
from timexnorm.types import Granularity, ParsedTemporal, ResolvedToken

logger = logging.getLogger(__name__)

__all__ = ["parse", "add_missing_minutes"]

TIME_DESIGNATOR = "T"

# Any leap year works; only month/day validity is checked against it.
_LEAP_REFERENCE_YEAR = 2000


def add_missing_minutes(time_part: str) -> str:
    """Append ``:00`` to an hour-only time part."""
    if time_part and ":" not in time_part:
        return f"{time_part}:00"
    return time_part


def _match_first(
    patterns: Sequence[ParsePattern],
    text: str,
    attempted: list[str],
    prefix: str = "",
) -> Optional[tuple[ParsePattern, re.Match[str]]]:
    for pattern in patterns:
        attempted.append(prefix + pattern.name)
        m = pattern.fullmatch(text)
        if m is not None:
            return pattern, m
    return None


def _split(text: str, granularity: Granularity) -> tuple[Optional[str], Optional[str]]:
    """Return ``(date_part, time_part)``; either may be ``None``."""
    if granularity is Granularity.TIME_ONLY:
        return None, text[1:] if text.startswith(TIME_DESIGNATOR) else text
    date_part, sep, time_part = text.partition(TIME_DESIGNATOR)
    if not sep:
        return date_part, None
    return date_part, time_part


def parse(
    text: Union[str, ResolvedToken],
    granularity: Granularity,
    *,
    synthesize_minutes: bool = True,
) -> ParsedTemporal:
    """Parse a resolved token of a known granularity.

    Args:
        text: Resolved token text (or a :class:`ResolvedToken`).
        granularity: Class assigned by :func:`timexnorm.classifier.classify`.
        synthesize_minutes: Apply the hour-only ``:00`` rule before matching.

    Raises:
        AmbiguousOrInvalidFormat: No pattern consumed the token, or the
            matched fields are not a real calendar value. The error lists
            every attempted pattern.
    """
    if isinstance(text, ResolvedToken):
        text = text.text

    attempted: list[str] = []
    date_part, time_part = _split(text, granularity)

    def fail(reason: str = "") -> AmbiguousOrInvalidFormat:
        return AmbiguousOrInvalidFormat(
            reason, token=text, granularity=granularity, attempted=attempted,
        )

    if time_part is not None and not granularity.has_time_part:
        raise fail(f"{granularity} does not take a time part")
    if granularity is Granularity.FULL_DATE_TIME and time_part is None:
        raise fail("missing time part")

    fields: dict[str, int] = {}

    if date_part is not None:
        hit = _match_first(date_patterns_for(granularity), date_part, attempted)
        if hit is None:
            raise fail()
        fields.update({k: int(v) for k, v in hit[1].groupdict().items()})

    if time_part is not None:
        if synthesize_minutes:
            time_part = add_missing_minutes(time_part)
        hit = _match_first(TIME_PATTERNS, time_part, attempted, prefix=TIME_DESIGNATOR)
        if hit is None:
            raise fail()
        fields.update({k: int(v) for k, v in hit[1].groupdict().items()})
        logger.debug("time part %r matched %s", time_part, hit[0].name)

    parsed = _build(fields, had_explicit_time=time_part is not None, fail=fail)
    logger.debug("parse(%r, %s) -> %r", text, granularity, parsed)
    return parsed


def _build(fields: dict[str, int], *, had_explicit_time: bool, fail) -> ParsedTemporal:
    year = fields.get("year")
    month = fields.get("month")
    day = fields.get("day")
    weekday = fields.get("weekday")

    if day is not None and month is not None:
        check_year = year if year is not None else _LEAP_REFERENCE_YEAR
        if day > calendar.monthrange(check_year, month)[1]:
            raise fail(f"day {day} does not exist in {check_year if year else '--'}-{month:02d}")
        if year is not None:
            weekday = datetime.date(year, month, day).isoweekday()

    return ParsedTemporal(
        year=year,
        month=month,
        day=day,
        weekday=weekday,
        hour=fields.get("hour"),
        minute=fields.get("minute"),
        second=fields.get("second"),
        had_explicit_time=had_explicit_time,
    )
