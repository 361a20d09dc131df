# SPDX-License-Identifier: MIT
"""Normalizer configuration.

Config env vars::

    TIMEXNORM_LOCALE=en_US
    TIMEXNORM_DATE_FORMAT=short
    TIMEXNORM_TIME_FORMAT=HH:mm
    TIMEXNORM_TIMEZONE=Europe/Istanbul

``date_format`` is either a CLDR style name (short/medium/long/full) or an
explicit LDML pattern such as ``yyyy-MM-dd``. ``time_format`` is always a
pattern; the default keeps 24-hour clock output since the recognizer never
says AM or PM.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping, Optional, Union

logger = logging.getLogger(__name__)

__all__ = ["NormalizerConfig", "load_config_from_yaml"]


@dataclass(frozen=True)
class NormalizerConfig:
    """Presentation and clock settings."""

    locale: str = "en_US"
    date_format: str = "short"
    time_format: str = "HH:mm"
    timezone: str = "UTC"

    @classmethod
    def from_env(cls) -> "NormalizerConfig":
        """Load config from environment variables."""
        return cls(
            locale=os.getenv("TIMEXNORM_LOCALE", cls.locale).strip() or cls.locale,
            date_format=os.getenv("TIMEXNORM_DATE_FORMAT", cls.date_format).strip() or cls.date_format,
            time_format=os.getenv("TIMEXNORM_TIME_FORMAT", cls.time_format).strip() or cls.time_format,
            timezone=os.getenv("TIMEXNORM_TIMEZONE", cls.timezone).strip() or cls.timezone,
        )

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "NormalizerConfig":
        """Build from a plain dict, ignoring unknown keys."""
        return cls(
            locale=str(data.get("locale", cls.locale)),
            date_format=str(data.get("date_format", cls.date_format)),
            time_format=str(data.get("time_format", cls.time_format)),
            timezone=str(data.get("timezone", cls.timezone)),
        )


def load_config_from_yaml(path: Optional[Union[str, Path]] = None) -> NormalizerConfig:
    """Load config from the ``timexnorm:`` section of a YAML file.

    Falls back to defaults if the file is missing, unreadable or has no
    such section.
    """
    import yaml

    if path is None:
        return NormalizerConfig()

    yaml_path = Path(path)
    try:
        with yaml_path.open(encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as exc:
        logger.warning("Failed to load normalizer config from %s: %s - using defaults", yaml_path, exc)
        return NormalizerConfig()

    section = data.get("timexnorm") if isinstance(data, dict) else None
    if not isinstance(section, dict):
        return NormalizerConfig()
    return NormalizerConfig.from_mapping(section)
