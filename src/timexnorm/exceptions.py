# SPDX-License-Identifier: MIT
"""Typed exceptions for the TIMEX normalizer.

Every failure the pipeline can produce is a recoverable, definitive answer
about one token. Parsing is deterministic, so nothing is retried.

Exception hierarchy::

    TimexError
    ├── UnrecognizedGranularity   - token shape matches no granularity
    ├── AmbiguousOrInvalidFormat  - no parse pattern consumed the token
    ├── OutOfRange                - presentation field absent or out of bounds
    └── EntityPayloadError        - recognizer payload failed validation

Usage::

    from timexnorm.exceptions import TimexError, OutOfRange

    try:
        out = normalizer.normalize(token, PresentationKind.MONTH_NAME)
    except TimexError as e:
        e.log()
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Sequence

logger = logging.getLogger(__name__)

__all__ = [
    "TimexError",
    "UnrecognizedGranularity",
    "AmbiguousOrInvalidFormat",
    "OutOfRange",
    "EntityPayloadError",
    "ErrorContext",
]


# ── Error context ─────────────────────────────────────────────

@dataclass
class ErrorContext:
    """Structured context attached to every normalizer exception."""

    token: str = ""
    resolved: str = ""       # stage input after wildcard resolution
    stage: str = ""          # "classify" | "parse" | "present" | "entities"
    component: str = ""      # e.g. "parser._match_first"
    metadata: Dict[str, Any] = field(default_factory=dict)

    def to_log_dict(self) -> Dict[str, Any]:
        """Flatten to dict for structured logging."""
        d: Dict[str, Any] = {
            "token": self.token,
            "stage": self.stage,
            "component": self.component,
        }
        if self.resolved:
            d["resolved"] = self.resolved
        d.update(self.metadata)
        return d


# ── Base exception ────────────────────────────────────────────

class TimexError(Exception):
    """Base exception for all normalizer errors."""

    def __init__(
        self,
        message: str = "",
        *,
        token: str = "",
        stage: str = "",
        component: str = "",
        context: Optional[ErrorContext] = None,
        **metadata: Any,
    ) -> None:
        self.timex_message = message
        self.context = context or ErrorContext(
            token=token,
            stage=stage,
            component=component,
            metadata=metadata,
        )
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        parts = []
        if self.context.token:
            parts.append(f"[token:{self.context.token}]")
        if self.context.resolved:
            parts.append(f"[resolved:{self.context.resolved}]")
        if self.context.stage:
            parts.append(f"[{self.context.stage}]")
        parts.append(self.timex_message)
        return " ".join(parts)

    def attach_token(self, token: str) -> "TimexError":
        """Record the raw token on an error raised deeper in the pipeline.

        Stages only see resolved text; that text moves to ``context.resolved``.
        """
        if self.context.token and self.context.token != token and not self.context.resolved:
            self.context.resolved = self.context.token
        self.context.token = token
        self.args = (self._format_message(),)
        return self

    def log(self, level: int = logging.WARNING) -> None:
        """Emit a structured log line for this error."""
        logger.log(
            level,
            "%s: %s | context=%s",
            type(self).__name__,
            self.timex_message,
            self.context.to_log_dict(),
            exc_info=(level >= logging.ERROR),
        )


# ── Typed exceptions ─────────────────────────────────────────

class UnrecognizedGranularity(TimexError):
    """Token shape matches none of the declared granularity classes."""

    def __init__(
        self,
        message: str = "Token shape matches no granularity",
        *,
        token: str = "",
        **kwargs: Any,
    ) -> None:
        super().__init__(
            message,
            token=token,
            stage="classify",
            component="classifier.classify",
            **kwargs,
        )


class AmbiguousOrInvalidFormat(TimexError):
    """A granularity was assigned but no pattern consumed the token exactly.

    Attributes
    ----------
    granularity:
        The class the classifier assigned.
    attempted:
        Names of every pattern tried, in order.
    """

    def __init__(
        self,
        message: str = "",
        *,
        token: str = "",
        granularity: Any = None,
        attempted: Sequence[str] = (),
        **kwargs: Any,
    ) -> None:
        attempted = tuple(attempted)
        if not message:
            message = f"No pattern matched (tried: {', '.join(attempted) or 'none'})"
        super().__init__(
            message,
            token=token,
            stage="parse",
            component="parser.parse",
            granularity=str(granularity) if granularity is not None else "",
            attempted=list(attempted),
            **kwargs,
        )
        self.granularity = granularity
        self.attempted = attempted


class OutOfRange(TimexError):
    """A requested presentation field is absent or outside its calendar bound.

    Attributes
    ----------
    field:
        Name of the offending ``ParsedTemporal`` field.
    value:
        Its value (``None`` when absent).
    kind:
        The presentation kind that needed it.
    """

    def __init__(
        self,
        message: str = "",
        *,
        token: str = "",
        field: str = "",
        value: Any = None,
        kind: Any = None,
        **kwargs: Any,
    ) -> None:
        if not message:
            if value is None:
                message = f"{field} is absent"
            else:
                message = f"{field}={value!r} is out of range"
        super().__init__(
            message,
            token=token,
            stage="present",
            component=f"presenter.{kind}" if kind is not None else "presenter",
            field=field,
            value=value,
            kind=str(kind) if kind is not None else "",
            **kwargs,
        )
        self.field = field
        self.value = value
        self.kind = kind


class EntityPayloadError(TimexError):
    """Recognizer entity payload does not have the expected datetime shape."""

    def __init__(
        self,
        message: str = "Invalid recognizer entity payload",
        **kwargs: Any,
    ) -> None:
        super().__init__(
            message,
            stage="entities",
            component="entities.extract_timex_tokens",
            **kwargs,
        )
