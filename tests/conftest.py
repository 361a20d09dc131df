from __future__ import annotations

import datetime
import os

import pytest

from timexnorm.clock import FixedClock
from timexnorm.config import NormalizerConfig
from timexnorm.normalizer import TimexNormalizer


TODAY = datetime.date(2024, 5, 20)


@pytest.fixture(autouse=True)
def _isolate_timexnorm_env(monkeypatch: pytest.MonkeyPatch):
    """Keep TIMEXNORM_* settings and the shared normalizer out of tests.

    ``timexnorm.normalize()`` caches an environment-configured normalizer;
    reset it so one test's environment never leaks into the next.
    """
    import timexnorm.normalizer as normalizer_mod

    for key in list(os.environ):
        if key.startswith("TIMEXNORM_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.setattr(normalizer_mod, "_normalizer", None)
    yield


@pytest.fixture
def fixed_clock() -> FixedClock:
    """Clock pinned to 2024-05-20 (a Monday)."""
    return FixedClock(TODAY)


@pytest.fixture
def config() -> NormalizerConfig:
    return NormalizerConfig(locale="en_US")


@pytest.fixture
def normalizer(config: NormalizerConfig, fixed_clock: FixedClock) -> TimexNormalizer:
    return TimexNormalizer(config=config, clock=fixed_clock)
