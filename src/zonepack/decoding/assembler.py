"""
Module: decoding.assembler

Purpose:
    Turn validated packed fields into a TimeZone. Transition times are the
    running sum of the diffs; padding them with -inf and +inf gives one
    more boundary than there are spans, so span i covers
    [boundaries[i], boundaries[i + 1]).

Key Functions:
    - transition_times(): Cumulative sum of diffs
    - assemble_zone(): Build the TimeZone

Dependencies:
    - itertools (std), math (std)
    - zonepack.core.models: Span, TimeZone

Used By:
    - decoding.decoder: final stage of decode()
"""

from __future__ import annotations

import logging
import math
from itertools import accumulate
from typing import Sequence

from ..core.models.fields import RawPackedFields
from ..core.models.span import MILLIS_PER_MINUTE, Span
from ..core.models.zone import TimeZone
from ..errors import StructuralError

logger = logging.getLogger(__name__)


def transition_times(diffs: Sequence[float]) -> list[float]:
    """
    Absolute transition instants from boundary diffs.

    times[0] = diffs[0], times[i] = times[i - 1] + diffs[i].

    Args:
        diffs: Diffs in milliseconds; empty for a zone with no transitions

    Returns:
        Transition instants in milliseconds
    """
    return list(accumulate(diffs))


def offset_millis_from_minutes(minutes: float) -> int:
    """Minutes to milliseconds, rounded half up to the nearest integer."""
    return math.floor(minutes * MILLIS_PER_MINUTE + 0.5)


def assemble_zone(fields: RawPackedFields) -> TimeZone:
    """
    Build a TimeZone from validated fields.

    Args:
        fields: Fields that passed validate_fields()

    Returns:
        TimeZone whose spans run from -inf to +inf

    Raises:
        StructuralError: If an offset or transition time is not a finite
            number of milliseconds, or transition times do not strictly
            increase
    """
    for i, minutes in enumerate(fields.offsets):
        if not math.isfinite(minutes * MILLIS_PER_MINUTE):
            raise StructuralError(
                f"offset {i} of {minutes} minutes is out of range",
                field="offsets",
                position=i,
            )

    times = transition_times(fields.diffs)
    for i, time in enumerate(times):
        if not math.isfinite(time):
            raise StructuralError(
                f"transition {i} is out of range: {time}",
                field="diffs",
                position=i,
            )
    for i in range(1, len(times)):
        if not times[i] > times[i - 1]:
            raise StructuralError(
                f"transition {i} at {times[i]} does not follow {times[i - 1]}",
                field="diffs",
                position=i,
            )

    boundaries = [-math.inf, *times, math.inf]
    offsets = [offset_millis_from_minutes(m) for m in fields.offsets]

    spans = [
        Span(
            start=boundaries[i],
            until=boundaries[i + 1],
            abbreviation=fields.abbreviations[index],
            offset=offsets[index],
        )
        for i, index in enumerate(fields.indices)
    ]

    logger.debug("Assembled %s with %d spans", fields.name, len(spans))
    return TimeZone(name=fields.name, spans=tuple(spans))
