# SPDX-License-Identifier: MIT
"""
Partial date/time expression normalization.

Turns the TIMEX-like tokens a hosted recognizer returns ("XXXX-WXX-7",
"XXXX-03", "2018-10-28T14") into calendar-correct display strings.

Usage:
    from timexnorm import normalize, PresentationKind

    normalize("XXXX-03", PresentationKind.MONTH_NAME).text
    # 'March'
"""

from timexnorm.types import (
    Granularity,
    NormalizedOutput,
    ParsedTemporal,
    PresentationKind,
    ResolvedToken,
    WildcardMarker,
)

from timexnorm.exceptions import (
    AmbiguousOrInvalidFormat,
    EntityPayloadError,
    OutOfRange,
    TimexError,
    UnrecognizedGranularity,
)

from timexnorm.clock import Clock, FixedClock, SystemClock
from timexnorm.config import NormalizerConfig, load_config_from_yaml

from timexnorm.resolver import resolve
from timexnorm.classifier import classify
from timexnorm.parser import parse
from timexnorm.presenter import present

from timexnorm.normalizer import (
    NormalizationResult,
    TimexNormalizer,
    get_normalizer,
    normalize,
)

from timexnorm.entities import extract_timex_tokens

__all__ = [
    # Types
    "Granularity",
    "NormalizedOutput",
    "ParsedTemporal",
    "PresentationKind",
    "ResolvedToken",
    "WildcardMarker",
    # Errors
    "TimexError",
    "UnrecognizedGranularity",
    "AmbiguousOrInvalidFormat",
    "OutOfRange",
    "EntityPayloadError",
    # Collaborators
    "Clock",
    "FixedClock",
    "SystemClock",
    "NormalizerConfig",
    "load_config_from_yaml",
    # Stages
    "resolve",
    "classify",
    "parse",
    "present",
    # Pipeline
    "TimexNormalizer",
    "NormalizationResult",
    "normalize",
    "get_normalizer",
    "extract_timex_tokens",
]

__version__ = "0.1.0"
