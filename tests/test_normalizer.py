"""End-to-end tests for the normalization pipeline.

Covers the golden tokens the recognizer emits, batch isolation of failures,
year substitution through the injected clock, and date + time merging.
"""

from __future__ import annotations

import datetime
import logging
import os
from unittest import mock

import pytest

from timexnorm import (
    AmbiguousOrInvalidFormat,
    FixedClock,
    Granularity,
    NormalizerConfig,
    OutOfRange,
    PresentationKind,
    TimexNormalizer,
    UnrecognizedGranularity,
    normalize,
)
from timexnorm.normalizer import get_normalizer


K = PresentationKind


# ═══════════════════════════════════════════════════════════════
# Golden tokens
# ═══════════════════════════════════════════════════════════════

class TestGoldenTokens:
    def test_weekday(self, normalizer: TimexNormalizer):
        out = normalizer.normalize("XXXX-WXX-7", K.WEEKDAY_NAME)
        assert out.text == "Sunday"
        assert out.granularity is Granularity.WEEKDAY_ONLY

    def test_month(self, normalizer: TimexNormalizer):
        out = normalizer.normalize("XXXX-03", K.MONTH_NAME)
        assert out.text == "March"
        assert out.granularity is Granularity.MONTH_ONLY

    def test_day(self, normalizer: TimexNormalizer):
        out = normalizer.normalize("XXXX-XX-15", K.ZERO_PADDED_DAY)
        assert out.text == "15"
        assert out.granularity is Granularity.DAY_OF_MONTH

    def test_date_only_as_date_time(self, normalizer: TimexNormalizer):
        out = normalizer.normalize("2018-10-28", K.LOCALIZED_DATE_TIME)
        assert out.text == "10/28/18"
        assert ":" not in out.text
        assert out.granularity is Granularity.DATE_ONLY

    def test_hour_only_time(self, normalizer: TimexNormalizer):
        out = normalizer.normalize("T14", K.LOCALIZED_DATE_TIME)
        assert out.text == "14:00"
        assert out.granularity is Granularity.TIME_ONLY

    def test_full_date_time_hour_only(self, normalizer: TimexNormalizer):
        out = normalizer.normalize("2018-10-28T14", K.LOCALIZED_DATE_TIME)
        assert out.text.startswith("10/28/18")
        assert out.text.endswith("14:00")

    def test_month_day_without_year(self, normalizer: TimexNormalizer):
        out = normalizer.normalize("XXXX-03-15", K.LOCALIZED_DATE_WITHOUT_YEAR)
        assert out.text == "3/15"
        assert out.granularity is Granularity.MONTH_DAY

    def test_weekday_with_hour(self, normalizer: TimexNormalizer):
        assert normalizer.normalize("XXXX-WXX-7T17", K.WEEKDAY_NAME).text == "Sunday"
        assert normalizer.normalize("XXXX-WXX-7T17", K.LOCALIZED_TIME).text == "17:00"

    def test_space_separated_utc(self, normalizer: TimexNormalizer):
        out = normalizer.normalize("2018-10-28 14:00:00Z", K.LOCALIZED_TIME)
        assert out.text == "14:00"

    def test_output_carries_token_and_kind(self, normalizer: TimexNormalizer):
        out = normalizer.normalize("XXXX-03", K.MONTH_NAME)
        assert out.token == "XXXX-03"
        assert out.kind is K.MONTH_NAME
        assert str(out) == "March"


# ═══════════════════════════════════════════════════════════════
# Round trip
# ═══════════════════════════════════════════════════════════════

class TestRoundTrip:
    @pytest.mark.parametrize("year", [2023, 2024])
    def test_every_day_of_year_keeps_calendar_date(self, fixed_clock, year):
        iso = TimexNormalizer(NormalizerConfig(date_format="yyyy-MM-dd"), clock=fixed_clock)
        day = datetime.date(year, 1, 1)
        while day.year == year:
            token = f"{day.isoformat()}T09:30"
            granularity, parsed = iso.analyze(token)
            assert granularity is Granularity.FULL_DATE_TIME
            assert (parsed.year, parsed.month, parsed.day) == (day.year, day.month, day.day)
            assert parsed.weekday == day.isoweekday()
            assert iso.normalize(token, K.LOCALIZED_DATE).text == day.isoformat()
            day += datetime.timedelta(days=1)


# ═══════════════════════════════════════════════════════════════
# Year substitution
# ═══════════════════════════════════════════════════════════════

class TestYearSubstitution:
    def test_unknown_year_filled_from_clock(self, normalizer: TimexNormalizer):
        out = normalizer.normalize("XXXX-03-15T17:30", K.LOCALIZED_DATE_TIME)
        assert out.text.startswith("3/15/24")
        assert out.text.endswith("17:30")

    def test_unknown_year_and_month_filled_from_clock(self, normalizer: TimexNormalizer):
        out = normalizer.normalize("XXXX-XX-15", K.LOCALIZED_DATE)
        assert out.text == "5/15/24"
        assert out.granularity is Granularity.DATE_ONLY

    def test_extraction_paths_do_not_substitute(self, normalizer: TimexNormalizer):
        out = normalizer.normalize("XXXX-03-15", K.MONTH_NAME)
        assert out.text == "March"
        assert out.granularity is Granularity.MONTH_DAY

    def test_clock_is_honoured(self):
        n = TimexNormalizer(clock=FixedClock(datetime.date(2031, 7, 4)))
        assert n.normalize("XXXX-02-03", K.LOCALIZED_DATE).text == "2/3/31"


# ═══════════════════════════════════════════════════════════════
# Errors
# ═══════════════════════════════════════════════════════════════

class TestErrors:
    def test_unrecognized(self, normalizer: TimexNormalizer):
        with pytest.raises(UnrecognizedGranularity) as exc_info:
            normalizer.normalize("PRESENT_REF", K.LOCALIZED_DATE)
        assert exc_info.value.context.token == "PRESENT_REF"

    def test_unrecognized_never_empty_string(self, normalizer: TimexNormalizer):
        with pytest.raises(UnrecognizedGranularity):
            normalizer.normalize("", K.WEEKDAY_NAME)

    def test_invalid_format_reports_raw_token(self, normalizer: TimexNormalizer):
        with pytest.raises(AmbiguousOrInvalidFormat) as exc_info:
            normalizer.normalize("XXXX-02-30", K.LOCALIZED_DATE_WITHOUT_YEAR)
        err = exc_info.value
        assert err.context.token == "XXXX-02-30"
        assert err.context.resolved == "02-30"
        assert "[token:XXXX-02-30]" in str(err)

    def test_out_of_range(self, normalizer: TimexNormalizer):
        with pytest.raises(OutOfRange) as exc_info:
            normalizer.normalize("XXXX-03", K.WEEKDAY_NAME)
        assert exc_info.value.field == "weekday"
        assert exc_info.value.context.token == "XXXX-03"

    @pytest.mark.parametrize("kind", list(K))
    @pytest.mark.parametrize(
        "token",
        [
            "\u0662\u0660\u0661\u0668-10-28",  # Arabic-Indic year
            "\uff12\uff10\uff11\uff18-10-28",  # fullwidth year
            "XXXX-\u0660\u0663",                # Arabic-Indic month
            "T\uff11\uff14",                    # fullwidth hour
        ],
    )
    def test_non_ascii_digits_rejected(self, normalizer: TimexNormalizer, token, kind):
        with pytest.raises(UnrecognizedGranularity):
            normalizer.normalize(token, kind)

    @pytest.mark.parametrize("kind", list(K))
    def test_fully_unspecified_date_rejected_for_every_kind(self, normalizer: TimexNormalizer, kind):
        with pytest.raises(UnrecognizedGranularity) as exc_info:
            normalizer.normalize("XXXX-XX-XX", kind)
        assert exc_info.value.context.token == "XXXX-XX-XX"

    @pytest.mark.parametrize("kind", [K.LOCALIZED_DATE_TIME, K.LOCALIZED_TIME, K.MONTH_NAME])
    def test_day_wildcard_with_time_rejected(self, normalizer: TimexNormalizer, kind):
        with pytest.raises(UnrecognizedGranularity):
            normalizer.normalize("2019-03-XXT14", kind)

    def test_weekday_has_no_calendar_date(self, normalizer: TimexNormalizer):
        with pytest.raises(OutOfRange) as exc_info:
            normalizer.normalize("XXXX-WXX-7", K.LOCALIZED_DATE)
        assert exc_info.value.field == "date"


# ═══════════════════════════════════════════════════════════════
# Batch
# ═══════════════════════════════════════════════════════════════

class TestNormalizeMany:
    def test_failure_does_not_abort_batch(self, normalizer: TimexNormalizer, caplog):
        tokens = ["XXXX-WXX-1", "garbage", "XXXX-WXX-8", "XXXX-WXX-5"]
        with caplog.at_level(logging.WARNING, logger="timexnorm.exceptions"):
            results = normalizer.normalize_many(tokens, K.WEEKDAY_NAME)

        assert [r.token for r in results] == tokens
        assert [r.ok for r in results] == [True, False, False, True]
        assert results[0].text == "Monday"
        assert results[3].text == "Friday"
        assert isinstance(results[1].error, UnrecognizedGranularity)
        assert isinstance(results[2].error, AmbiguousOrInvalidFormat)
        assert results[1].text == ""
        assert "UnrecognizedGranularity" in caplog.text

    def test_accepts_generator(self, normalizer: TimexNormalizer):
        results = normalizer.normalize_many((t for t in ["XXXX-01", "XXXX-12"]), K.MONTH_NAME)
        assert [r.text for r in results] == ["January", "December"]


# ═══════════════════════════════════════════════════════════════
# Date + time entity pair
# ═══════════════════════════════════════════════════════════════

class TestCombine:
    def test_date_and_time(self, normalizer: TimexNormalizer):
        out = normalizer.combine("2018-10-28", "T14:35", K.LOCALIZED_DATE_TIME)
        assert out.granularity is Granularity.FULL_DATE_TIME
        assert out.text.startswith("10/28/18")
        assert out.text.endswith("14:35")

    def test_weekday_and_time(self, normalizer: TimexNormalizer):
        out = normalizer.combine("XXXX-WXX-3", "T9", K.LOCALIZED_DATE_TIME)
        assert out.text.startswith("Wednesday")
        assert out.text.endswith("09:00")


# ═══════════════════════════════════════════════════════════════
# Module-level helper
# ═══════════════════════════════════════════════════════════════

class TestModuleNormalize:
    def test_uses_env_config(self):
        with mock.patch.dict(os.environ, {"TIMEXNORM_LOCALE": "de_DE"}):
            assert normalize("XXXX-03", K.MONTH_NAME).text == "März"

    def test_shared_instance_is_cached(self):
        assert get_normalizer() is get_normalizer()

    def test_explicit_config(self, fixed_clock):
        cfg = NormalizerConfig(locale="de_DE")
        assert normalize("XXXX-WXX-7", K.WEEKDAY_NAME, config=cfg, clock=fixed_clock).text == "Sonntag"
