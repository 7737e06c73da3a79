"""
Unit Tests for the Zone Query Engine

Tests for find_span() and the offset / abbreviation / ISO string wrappers.
"""

import math

import pytest

from zonepack.config import ZoneConfig
from zonepack.core.models import Span, TimeZone
from zonepack.errors import InternalConsistencyError
from zonepack.query.engine import (
    abbreviation_at,
    find_span,
    iso_offset_string,
    offset_millis,
)

HOUR = 3_600_000
LINEAR = ZoneConfig(lookup="linear")


def _fixed(offset: int) -> TimeZone:
    return TimeZone("Fixed", [Span(-math.inf, math.inf, "FIX", offset)])


class TestFindSpan:
    """Tests for find_span function."""

    def test_find_span_when_at_span_start_then_returns_that_span(self, alternating_zone):
        span = alternating_zone.spans[1]
        assert find_span(span.start, alternating_zone) is span

    def test_find_span_when_at_span_until_then_returns_next_span(self, alternating_zone):
        span = alternating_zone.spans[1]
        assert find_span(span.until, alternating_zone) is alternating_zone.spans[2]

    def test_find_span_when_just_before_until_then_returns_that_span(self, alternating_zone):
        assert find_span(2 * HOUR - 0.001, alternating_zone) is alternating_zone.spans[1]

    def test_find_span_when_far_past_or_future_then_returns_outer_spans(self, alternating_zone):
        assert find_span(-1e18, alternating_zone) is alternating_zone.spans[0]
        assert find_span(1e18, alternating_zone) is alternating_zone.spans[-1]

    def test_find_span_when_repeated_then_same_result(self, alternating_zone):
        assert find_span(HOUR, alternating_zone) == find_span(HOUR, alternating_zone)

    def test_find_span_when_bare_sequence_then_same_as_zone(self, alternating_zone):
        spans = list(alternating_zone.spans)
        for t in (-HOUR, 0, HOUR, 2.5 * HOUR, 10 * HOUR):
            assert find_span(t, spans) is find_span(t, alternating_zone)

    @pytest.mark.parametrize("instant", [-HOUR, 0, HOUR - 1, HOUR, 1.5 * HOUR, 2 * HOUR, 3 * HOUR, 9e15])
    def test_find_span_when_linear_then_matches_bisect(self, alternating_zone, instant):
        assert find_span(instant, alternating_zone, config=LINEAR) is find_span(instant, alternating_zone)

    def test_find_span_when_spans_have_gap_then_raises_internal_error(self):
        spans = [
            Span(-math.inf, 0, "A", 0),
            Span(10, math.inf, "B", 0),
        ]
        with pytest.raises(InternalConsistencyError):
            find_span(5, spans)
        with pytest.raises(InternalConsistencyError):
            find_span(5, spans, config=LINEAR)

    def test_find_span_when_no_spans_then_raises_internal_error(self):
        with pytest.raises(InternalConsistencyError):
            find_span(0, [])

    def test_internal_error_when_raised_then_is_assertion_error(self):
        with pytest.raises(AssertionError):
            find_span(0, [])

    def test_find_span_when_nan_then_raises_value_error(self, alternating_zone):
        with pytest.raises(ValueError, match="NaN"):
            find_span(math.nan, alternating_zone)


class TestOffsetAndAbbreviation:
    """Tests for the thin wrappers over find_span."""

    def test_offset_millis_when_queried_then_returns_span_offset(self, alternating_zone):
        assert offset_millis(0, alternating_zone) == -HOUR
        assert offset_millis(HOUR, alternating_zone) == -2 * HOUR

    def test_abbreviation_at_when_queried_then_returns_span_abbreviation(self, alternating_zone):
        assert abbreviation_at(0, alternating_zone) == "STD"
        assert abbreviation_at(1.5 * HOUR, alternating_zone) == "DST"
        assert abbreviation_at(4 * HOUR, alternating_zone) == "DST"


class TestIsoOffsetString:
    """Tests for iso_offset_string function."""

    def test_iso_when_negative_stored_offset_then_plus_sign(self, alternating_zone):
        assert iso_offset_string(0, alternating_zone) == "+01:00"
        assert iso_offset_string(HOUR, alternating_zone) == "+02:00"

    def test_iso_when_positive_stored_offset_then_minus_sign(self):
        assert iso_offset_string(0, _fixed(5 * HOUR)) == "-05:00"

    def test_iso_when_zero_offset_then_plus_zero(self):
        assert iso_offset_string(0, _fixed(0)) == "+00:00"

    def test_iso_when_half_hour_offset_then_minutes_padded(self):
        assert iso_offset_string(0, _fixed(-330 * 60_000)) == "+05:30"
        assert iso_offset_string(0, _fixed(9 * 60_000)) == "-00:09"

    def test_iso_when_offset_has_seconds_then_truncated(self):
        """LMT-style offsets keep whole minutes only."""
        assert iso_offset_string(0, _fixed(-3_632_000)) == "+01:00"

    def test_iso_when_decoded_zone_then_matches_docstring_example(self):
        from zonepack import decode

        assert iso_offset_string(0, decode("Europe/Paris|CET|-1|0|")) == "+01:00"
