"""
Unit Tests for Span Assembly

Tests for transition_times() and assemble_zone().
"""

import math

import pytest

from zonepack.core.models.fields import RawPackedFields
from zonepack.decoding.assembler import (
    assemble_zone,
    offset_millis_from_minutes,
    transition_times,
)
from zonepack.errors import StructuralError

HOUR = 3_600_000


class TestTransitionTimes:
    """Tests for cumulative boundary computation."""

    def test_transition_times_when_diffs_then_running_sum(self):
        assert transition_times([5, 1, 2]) == [5, 6, 8]

    def test_transition_times_when_negative_first_then_absolute_start_before_epoch(self):
        assert transition_times([-10, 4]) == [-10, -6]

    def test_transition_times_when_empty_then_empty(self):
        assert transition_times([]) == []


class TestOffsetConversion:
    """Tests for minutes -> milliseconds rounding."""

    def test_offset_when_whole_minutes_then_exact(self):
        assert offset_millis_from_minutes(-60) == -HOUR
        assert offset_millis_from_minutes(60) == HOUR

    def test_offset_when_fractional_minutes_then_rounded_to_int(self):
        result = offset_millis_from_minutes(-(60 + 32 / 60))
        assert result == -3_632_000
        assert isinstance(result, int)


class TestAssembleZone:
    """Tests for assemble_zone function."""

    def test_assemble_when_transitions_then_spans_follow_indices(self):
        fields = RawPackedFields(
            name="Test",
            abbreviations=("STD", "DST"),
            offsets=(-60.0, -120.0),
            indices=(0, 1, 0),
            diffs=(HOUR, HOUR),
        )
        tz = assemble_zone(fields)

        assert tz.name == "Test"
        assert [s.abbreviation for s in tz.spans] == ["STD", "DST", "STD"]
        assert [s.offset for s in tz.spans] == [-HOUR, -2 * HOUR, -HOUR]
        assert [(s.start, s.until) for s in tz.spans] == [
            (-math.inf, HOUR),
            (HOUR, 2 * HOUR),
            (2 * HOUR, math.inf),
        ]

    def test_assemble_when_no_diffs_then_single_unbounded_span(self):
        fields = RawPackedFields("Fixed", ("FIX",), (0.0,), (0,), ())
        tz = assemble_zone(fields)
        assert len(tz.spans) == 1
        assert tz.spans[0].start == -math.inf
        assert tz.spans[0].until == math.inf

    def test_assemble_when_times_not_increasing_then_raises_error(self):
        fields = RawPackedFields("Bad", ("A", "B"), (0.0, 60.0), (0, 1, 0), (HOUR, 0.0))
        with pytest.raises(StructuralError, match="does not follow") as exc_info:
            assemble_zone(fields)
        assert exc_info.value.field == "diffs"
        assert exc_info.value.position == 1

    def test_assemble_when_offset_shared_then_same_pair_reused(self):
        fields = RawPackedFields("Reuse", ("A", "B"), (0.0, 60.0), (1, 1), (HOUR,))
        tz = assemble_zone(fields)
        assert tz.spans[0].offset == tz.spans[1].offset == HOUR

    def test_assemble_when_offset_overflows_millis_then_raises_error(self):
        fields = RawPackedFields("Huge", ("A", "B"), (0.0, 1e305), (0,), ())
        with pytest.raises(StructuralError, match="out of range") as exc_info:
            assemble_zone(fields)
        assert exc_info.value.field == "offsets"
        assert exc_info.value.position == 1

    def test_assemble_when_running_sum_overflows_then_raises_error(self):
        fields = RawPackedFields("Huge", ("A",), (0.0,), (0, 0, 0), (1e308, 1e308))
        with pytest.raises(StructuralError, match="out of range") as exc_info:
            assemble_zone(fields)
        assert exc_info.value.field == "diffs"
        assert exc_info.value.position == 1
