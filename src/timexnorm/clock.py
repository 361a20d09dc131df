# SPDX-License-Identifier: MIT
"""Current-date collaborators.

The resolver never reads the wall clock directly; it asks an injected clock,
so substitution of an unknown year is reproducible in tests.
"""

from __future__ import annotations

import logging
from datetime import date, datetime, timezone, tzinfo
from typing import Optional, Protocol, Union
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

logger = logging.getLogger(__name__)

__all__ = ["Clock", "SystemClock", "FixedClock", "get_timezone"]


def get_timezone(tz: Optional[Union[str, tzinfo]] = None) -> tzinfo:
    """Get timezone object from string or tzinfo."""
    if tz is None:
        return timezone.utc

    if isinstance(tz, tzinfo):
        return tz

    try:
        return ZoneInfo(tz)
    except (ZoneInfoNotFoundError, ValueError):
        logger.warning("Unknown timezone %r, falling back to UTC", tz)
        return timezone.utc


class Clock(Protocol):
    """Minimal protocol for the current processing date."""

    def today(self) -> date: ...


class SystemClock:
    """Reads today's date from the system clock in a given timezone."""

    def __init__(self, tz: Optional[Union[str, tzinfo]] = None) -> None:
        self.tz = get_timezone(tz)

    def today(self) -> date:
        return datetime.now(self.tz).date()

    def __repr__(self) -> str:
        return f"SystemClock(tz={self.tz!s})"


class FixedClock:
    """Always reports the same date."""

    def __init__(self, value: date) -> None:
        if isinstance(value, datetime):
            value = value.date()
        self.value = value

    def today(self) -> date:
        return self.value

    def __repr__(self) -> str:
        return f"FixedClock({self.value.isoformat()})"
