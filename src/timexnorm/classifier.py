# SPDX-License-Identifier: MIT
"""Granularity classification.

Assigns a resolved token to exactly one :class:`Granularity` by its shape and
by the markers the resolver removed. Value ranges are never consulted: "13"
is a day only because the token said ``XXXX-XX-13``.
"""

from __future__ import annotations

import logging
import re
from typing import AbstractSet, Union

from timexnorm.exceptions import UnrecognizedGranularity
from timexnorm.types import Granularity, ResolvedToken, WildcardMarker

logger = logging.getLogger(__name__)

__all__ = ["classify"]

DATE_SEPARATOR = "-"
TIME_DESIGNATOR = "T"
MINUTE_SEPARATOR = ":"

# ASCII digits only.
_DIGITS = re.compile(r"[0-9]+")
_TIME_SHAPE = re.compile(r"T?[0-9][0-9:]*")


def _has_time_separator(text: str) -> bool:
    return TIME_DESIGNATOR in text or MINUTE_SEPARATOR in text


def _date_groups(text: str) -> list[str]:
    """Return the ``-``-separated groups of the date part."""
    date_part = text.split(TIME_DESIGNATOR, 1)[0]
    return date_part.split(DATE_SEPARATOR)


def classify(
    text: Union[str, ResolvedToken],
    markers: AbstractSet[WildcardMarker] = frozenset(),
) -> Granularity:
    """Classify a resolved token.

    Args:
        text: Resolved text, or a :class:`ResolvedToken` (its markers are
            then used and ``markers`` is ignored).
        markers: Wildcard markers the resolver removed from the token.

    Raises:
        UnrecognizedGranularity: The shape matches no class.
    """
    if isinstance(text, ResolvedToken):
        text, markers = text.text, text.markers

    granularity = _classify(text, markers)
    logger.debug("classify(%r, %s) -> %s", text, sorted(map(str, markers)), granularity)
    return granularity


def _classify(text: str, markers: AbstractSet[WildcardMarker]) -> Granularity:
    # Leftover wildcards mean the token broke the one-marker-per-level rule.
    if not text or "X" in text.upper():
        raise UnrecognizedGranularity(token=text)

    has_date_sep = DATE_SEPARATOR in text
    has_time_sep = _has_time_separator(text)
    year_unknown = WildcardMarker.UNSPECIFIED_YEAR in markers
    month_unknown = WildcardMarker.UNSPECIFIED_MONTH in markers

    if has_date_sep:
        groups = _date_groups(text)
        if not all(_DIGITS.fullmatch(g) for g in groups):
            raise UnrecognizedGranularity(token=text)
        if has_time_sep:
            return Granularity.FULL_DATE_TIME
        if len(groups) == 3:
            return Granularity.DATE_ONLY
        if len(groups) == 2:
            if year_unknown and len(groups[0]) != 4:
                return Granularity.MONTH_DAY
            return Granularity.YEAR_MONTH
        raise UnrecognizedGranularity(token=text)

    if _DIGITS.fullmatch(text):
        if year_unknown and not month_unknown and len(text) == 2:
            return Granularity.MONTH_ONLY
        if year_unknown and month_unknown:
            return Granularity.DAY_OF_MONTH

    if WildcardMarker.WEEK_REFERENCE in markers:
        return Granularity.WEEKDAY_ONLY

    if has_time_sep and _TIME_SHAPE.fullmatch(text):
        return Granularity.TIME_ONLY

    raise UnrecognizedGranularity(token=text)
