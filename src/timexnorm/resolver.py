# SPDX-License-Identifier: MIT
"""Placeholder resolution.

Removes the recognizer's wildcard markers from a TIMEX token, or fills an
unknown year (and month) from the injected clock:

- "XXXX-WXX-7"        -> "7"            {WEEK_REFERENCE}
- "XXXX-XX-15"        -> "15"           {UNSPECIFIED_YEAR, UNSPECIFIED_MONTH}
- "XXXX-03-15"        -> "03-15"        {UNSPECIFIED_YEAR}
- "XXXX-03-15T17:30"  -> "2026-03-15T17:30" (strip_only=False)
"""

from __future__ import annotations

import logging
import re
from typing import Optional

from timexnorm.clock import Clock, SystemClock
from timexnorm.types import ResolvedToken, WildcardMarker

logger = logging.getLogger(__name__)

__all__ = ["resolve", "canonicalize"]

WEEK_PREFIX = "XXXX-WXX-"
YEAR_MONTH_PREFIX = "XXXX-XX-"
YEAR_PREFIX = "XXXX-"
DAY_SUFFIX = "-XX"

# "2018-10-28 14:00" -> "2018-10-28T14:00"
_SPACE_SEPARATOR = re.compile(r"^(\S+-[0-9]{1,2}) +([0-9]{1,2}(?::[0-9]{1,2}){0,2})$")


def canonicalize(token: str) -> str:
    """Normalize ISO spelling variants the recognizer may return.

    Strips surrounding whitespace, a trailing ``Z`` designator, and turns a
    single space between date and time into ``T``.
    """
    text = token.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1].rstrip()
    m = _SPACE_SEPARATOR.match(text)
    if m:
        text = f"{m.group(1)}T{m.group(2)}"
    return text


def resolve(
    token: str,
    *,
    strip_only: bool = True,
    clock: Optional[Clock] = None,
) -> ResolvedToken:
    """Resolve wildcard markers in a raw TIMEX token.

    Args:
        token: Raw token as extracted from the recognizer payload.
        strip_only: Remove an unknown year/month instead of filling it from
            ``clock``. Pure extraction paths (month name, day number) strip;
            display paths that show a year substitute.
        clock: Current-date collaborator, read only when substituting.
            Defaults to :class:`SystemClock`.

    Returns:
        ``ResolvedToken(text, markers)``.
    """
    text = canonicalize(token)
    markers: set[WildcardMarker] = set()

    if WEEK_PREFIX in text:
        text = text.replace(WEEK_PREFIX, "", 1)
        markers.add(WildcardMarker.WEEK_REFERENCE)
    elif text.startswith(YEAR_MONTH_PREFIX):
        text = text[len(YEAR_MONTH_PREFIX):]
        markers.update((WildcardMarker.UNSPECIFIED_YEAR, WildcardMarker.UNSPECIFIED_MONTH))
        # "XXXX-XX-XX" carries no calendar fact; leave "XX" for the classifier.
        if not strip_only and not text.startswith("XX"):
            today = (clock or SystemClock()).today()
            text = f"{today.year:04d}-{today.month:02d}-{text}"
    elif text.startswith(YEAR_PREFIX):
        text = text[len(YEAR_PREFIX):]
        markers.add(WildcardMarker.UNSPECIFIED_YEAR)
        if not strip_only:
            today = (clock or SystemClock()).today()
            text = f"{today.year:04d}-{text}"

    # A day wildcard is only dropped from a date-only token ("2019-03-XX").
    # With a time attached ("2019-03-XXT14") it stays and fails classification.
    if text.endswith(DAY_SUFFIX) and WildcardMarker.WEEK_REFERENCE not in markers:
        text = text[: -len(DAY_SUFFIX)]
        markers.add(WildcardMarker.UNSPECIFIED_DAY)

    resolved = ResolvedToken(text=text, markers=frozenset(markers))
    logger.debug("resolve(%r, strip_only=%s) -> %r", token, strip_only, resolved)
    return resolved
