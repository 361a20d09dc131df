# SPDX-License-Identifier: MIT
"""Recognizer entity payload schema.

The recognizer reports temporal entities under a ``datetime`` key::

    {
        "DayName": [["sunday"]],
        "datetime": [
            {"timex": ["2018-10-28"], "type": "date"},
            {"timex": ["T14"], "type": "time"}
        ],
        "$instance": {...}
    }

Only the ``datetime`` list is validated; other entities pass through
untouched.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from timexnorm.exceptions import EntityPayloadError

logger = logging.getLogger(__name__)

__all__ = ["DatetimeEntity", "RecognizerEntities", "extract_timex_tokens"]


class DatetimeEntity(BaseModel):
    """One recognized datetime entity."""

    model_config = ConfigDict(extra="allow", str_strip_whitespace=True)

    timex: list[str] = Field(..., description="TIMEX resolutions, best first")
    type: Optional[str] = Field(default=None, description="date|time|datetime|daterange|...")

    @field_validator("timex")
    @classmethod
    def _timex_not_empty(cls, v: list[str]) -> list[str]:
        if not v:
            raise ValueError("timex must contain at least one value")
        return v


class RecognizerEntities(BaseModel):
    """The recognizer's ``entities`` object."""

    model_config = ConfigDict(extra="allow")

    datetime: list[DatetimeEntity] = Field(default_factory=list)


def extract_timex_tokens(
    entities: Mapping[str, Any],
    *,
    types: Optional[Iterable[str]] = None,
) -> list[str]:
    """Return every TIMEX string in ``entities``, in payload order.

    Args:
        entities: Parsed recognizer ``entities`` mapping.
        types: Keep only entities whose ``type`` is in this set.

    Raises:
        EntityPayloadError: The ``datetime`` entries are malformed.
    """
    try:
        payload = RecognizerEntities.model_validate(dict(entities))
    except ValidationError as e:
        raise EntityPayloadError(
            f"datetime entities failed validation ({e.error_count()} errors)",
            errors=[err["msg"] for err in e.errors()],
        ) from e

    wanted = set(types) if types is not None else None
    tokens: list[str] = []
    for entity in payload.datetime:
        if wanted is not None and entity.type not in wanted:
            continue
        tokens.extend(entity.timex)
    logger.debug("extracted %d timex token(s)", len(tokens))
    return tokens
