# SPDX-License-Identifier: MIT
"""Presentation of parsed temporal values.

Renders one calendar fact from a :class:`ParsedTemporal` using Babel's CLDR
data for the configured locale.

The one rule every kind obeys: a value whose source had no time part never
gets a time-of-day rendered. A date-only token must not come back as
"10/28/18, 00:00".
"""

from __future__ import annotations

import datetime
import logging
from functools import lru_cache
from typing import Callable, Optional

from babel import Locale
from babel.dates import format_date, format_skeleton, format_time, get_datetime_format

from timexnorm.config import NormalizerConfig
from timexnorm.exceptions import OutOfRange
from timexnorm.types import ParsedTemporal, PresentationKind

logger = logging.getLogger(__name__)

__all__ = ["present", "weekday_name", "month_name"]

# Leap year so that a year-less "02-29" can still be formatted.
_YEARLESS_REFERENCE = 2000


@lru_cache(maxsize=32)
def _locale(code: str) -> Locale:
    return Locale.parse(code)


# ── Name tables ───────────────────────────────────────────────

def weekday_name(weekday: Optional[int], locale: str = "en_US") -> str:
    """Wide weekday name for an ISO weekday (Monday=1)."""
    if weekday is None or not 1 <= weekday <= 7:
        raise OutOfRange(field="weekday", value=weekday, kind=PresentationKind.WEEKDAY_NAME)
    # Babel indexes days from Monday=0.
    return _locale(locale).days["format"]["wide"][weekday - 1]


def month_name(month: Optional[int], locale: str = "en_US") -> str:
    """Wide month name for a 1-based month."""
    if month is None or not 1 <= month <= 12:
        raise OutOfRange(field="month", value=month, kind=PresentationKind.MONTH_NAME)
    return _locale(locale).months["format"]["wide"][month]


def _zero_padded_day(parsed: ParsedTemporal, config: NormalizerConfig) -> str:
    day = parsed.day
    if day is None or not 1 <= day <= 31:
        raise OutOfRange(field="day", value=day, kind=PresentationKind.ZERO_PADDED_DAY)
    return f"{day:02d}"


# ── Localized renderings ──────────────────────────────────────

def _date_text(parsed: ParsedTemporal, config: NormalizerConfig) -> Optional[str]:
    """Locale date for a full date or a year-month; ``None`` otherwise."""
    if parsed.has_full_date:
        return format_date(parsed.to_date(), format=config.date_format, locale=config.locale)
    if parsed.year is not None and parsed.month is not None and parsed.day is None:
        value = datetime.datetime(parsed.year, parsed.month, 1)
        return format_skeleton("yM", value, locale=config.locale)
    return None


def _time_text(parsed: ParsedTemporal, config: NormalizerConfig) -> Optional[str]:
    if not parsed.had_explicit_time or parsed.hour is None:
        return None
    return format_time(parsed.to_time(), format=config.time_format, locale=config.locale)


def _missing_date_field(parsed: ParsedTemporal) -> str:
    """Name the gap that keeps ``parsed`` from being a renderable date."""
    if parsed.year is None and parsed.month is None and parsed.day is None:
        # Weekday-only and time-only values have no calendar date at all.
        return "date"
    for name in ("year", "month", "day"):
        if getattr(parsed, name) is None:
            return name
    return "date"


def _localized_date(parsed: ParsedTemporal, config: NormalizerConfig) -> str:
    text = _date_text(parsed, config)
    if text is None:
        raise OutOfRange(
            field=_missing_date_field(parsed), value=None, kind=PresentationKind.LOCALIZED_DATE,
        )
    return text


def _localized_date_without_year(parsed: ParsedTemporal, config: NormalizerConfig) -> str:
    if parsed.month is None:
        raise OutOfRange(field="month", value=None, kind=PresentationKind.LOCALIZED_DATE_WITHOUT_YEAR)
    if parsed.day is None:
        raise OutOfRange(field="day", value=None, kind=PresentationKind.LOCALIZED_DATE_WITHOUT_YEAR)
    value = datetime.datetime(_YEARLESS_REFERENCE, parsed.month, parsed.day)
    return format_skeleton("Md", value, locale=config.locale)


def _localized_date_time(parsed: ParsedTemporal, config: NormalizerConfig) -> str:
    date_text = _date_text(parsed, config)
    if date_text is None and parsed.weekday is not None:
        date_text = weekday_name(parsed.weekday, config.locale)
    time_text = _time_text(parsed, config)

    if date_text is None and time_text is None:
        raise OutOfRange(
            field=_missing_date_field(parsed), value=None, kind=PresentationKind.LOCALIZED_DATE_TIME,
        )
    if time_text is None:
        return date_text  # type: ignore[return-value]
    if date_text is None:
        return time_text
    pattern = str(get_datetime_format("short", locale=config.locale))
    return pattern.replace("'", "").replace("{0}", time_text).replace("{1}", date_text)


def _localized_time(parsed: ParsedTemporal, config: NormalizerConfig) -> str:
    text = _time_text(parsed, config)
    if text is None:
        raise OutOfRange(field="hour", value=parsed.hour, kind=PresentationKind.LOCALIZED_TIME)
    return text


_RENDERERS: dict[PresentationKind, Callable[[ParsedTemporal, NormalizerConfig], str]] = {
    PresentationKind.WEEKDAY_NAME: lambda p, c: weekday_name(p.weekday, c.locale),
    PresentationKind.MONTH_NAME: lambda p, c: month_name(p.month, c.locale),
    PresentationKind.ZERO_PADDED_DAY: _zero_padded_day,
    PresentationKind.LOCALIZED_DATE: _localized_date,
    PresentationKind.LOCALIZED_DATE_WITHOUT_YEAR: _localized_date_without_year,
    PresentationKind.LOCALIZED_DATE_TIME: _localized_date_time,
    PresentationKind.LOCALIZED_TIME: _localized_time,
}


def present(
    parsed: ParsedTemporal,
    want: PresentationKind,
    *,
    config: Optional[NormalizerConfig] = None,
) -> str:
    """Render ``parsed`` as the calendar fact ``want``.

    Raises:
        OutOfRange: The field ``want`` needs is absent or out of bounds.
    """
    config = config or NormalizerConfig()
    text = _RENDERERS[want](parsed, config)
    logger.debug("present(%r, %s) -> %r", parsed, want, text)
    return text
