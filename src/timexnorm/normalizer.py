# SPDX-License-Identifier: MIT
"""
TIMEX normalization pipeline.

Chains the four stages for one token at a time:

    resolve -> classify -> parse -> present

Usage:
    from timexnorm import TimexNormalizer, PresentationKind

    normalizer = TimexNormalizer()
    normalizer.normalize("XXXX-WXX-7", PresentationKind.WEEKDAY_NAME).text
    # 'Sunday'

The normalizer keeps only its configuration and clock; it is safe to share
between threads.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional

from timexnorm.classifier import classify
from timexnorm.clock import Clock, SystemClock
from timexnorm.config import NormalizerConfig
from timexnorm.exceptions import TimexError
from timexnorm.parser import parse
from timexnorm.presenter import present
from timexnorm.resolver import resolve
from timexnorm.types import Granularity, NormalizedOutput, ParsedTemporal, PresentationKind

logger = logging.getLogger(__name__)

__all__ = [
    "TimexNormalizer",
    "NormalizationResult",
    "normalize",
    "get_normalizer",
]


@dataclass(frozen=True)
class NormalizationResult:
    """Outcome for one token of a batch: an output or the error it raised."""

    token: str
    output: Optional[NormalizedOutput] = None
    error: Optional[TimexError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def text(self) -> str:
        return self.output.text if self.output is not None else ""


class TimexNormalizer:
    """Turns recognizer TIMEX tokens into display strings."""

    def __init__(
        self,
        config: Optional[NormalizerConfig] = None,
        clock: Optional[Clock] = None,
    ) -> None:
        self.config = config or NormalizerConfig()
        self.clock = clock or SystemClock(self.config.timezone)

    def analyze(
        self,
        token: str,
        *,
        strip_only: bool = True,
    ) -> tuple[Granularity, ParsedTemporal]:
        """Run resolve, classify and parse; return the granularity and value."""
        try:
            resolved = resolve(token, strip_only=strip_only, clock=self.clock)
            granularity = classify(resolved)
            return granularity, parse(resolved, granularity)
        except TimexError as e:
            e.attach_token(token)
            raise

    def normalize(self, token: str, kind: PresentationKind) -> NormalizedOutput:
        """Normalize one token into the requested presentation.

        Raises:
            UnrecognizedGranularity, AmbiguousOrInvalidFormat, OutOfRange
        """
        granularity, parsed = self.analyze(token, strip_only=not kind.needs_full_date)
        try:
            text = present(parsed, kind, config=self.config)
        except TimexError as e:
            e.attach_token(token)
            raise
        return NormalizedOutput(text=text, granularity=granularity, token=token, kind=kind)

    def normalize_many(
        self,
        tokens: Iterable[str],
        kind: PresentationKind,
    ) -> List[NormalizationResult]:
        """Normalize each token independently.

        A failing token is reported in its result and logged; it never stops
        the remaining tokens.
        """
        results: List[NormalizationResult] = []
        for token in tokens:
            try:
                output = self.normalize(token, kind)
            except TimexError as e:
                e.log(logging.WARNING)
                results.append(NormalizationResult(token=token, error=e))
            else:
                results.append(NormalizationResult(token=token, output=output))
        return results

    def combine(self, date_token: str, time_token: str, kind: PresentationKind) -> NormalizedOutput:
        """Normalize a date entity and a separate time entity as one value."""
        date_granularity, date_value = self.analyze(
            date_token, strip_only=not kind.needs_full_date,
        )
        _, time_value = self.analyze(time_token)
        merged = date_value.with_time(time_value)
        granularity = (
            Granularity.FULL_DATE_TIME
            if merged.had_explicit_time and date_granularity is Granularity.DATE_ONLY
            else date_granularity
        )
        token = f"{date_token}+{time_token}"
        try:
            text = present(merged, kind, config=self.config)
        except TimexError as e:
            e.attach_token(token)
            raise
        return NormalizedOutput(text=text, granularity=granularity, token=token, kind=kind)


# Global instance (lazy)
_normalizer: Optional[TimexNormalizer] = None


def get_normalizer() -> TimexNormalizer:
    """Get the shared normalizer configured from the environment."""
    global _normalizer
    if _normalizer is None:
        _normalizer = TimexNormalizer(NormalizerConfig.from_env())
    return _normalizer


def normalize(
    token: str,
    kind: PresentationKind,
    *,
    config: Optional[NormalizerConfig] = None,
    clock: Optional[Clock] = None,
) -> NormalizedOutput:
    """Normalize one token.

    Uses the shared environment-configured normalizer unless ``config`` or
    ``clock`` is given.
    """
    if config is None and clock is None:
        return get_normalizer().normalize(token, kind)
    return TimexNormalizer(config=config, clock=clock).normalize(token, kind)
