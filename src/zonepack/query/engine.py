"""
Module: query.engine

Purpose:
    Point-in-time lookups on decoded zones: which span, offset and
    abbreviation apply at an instant.

Key Functions:
    - find_span(): The span with start <= instant < until
    - offset_millis(): Offset at an instant
    - abbreviation_at(): Abbreviation at an instant
    - iso_offset_string(): Offset as "+hh:mm" / "-hh:mm"

Dependencies:
    - bisect (std)
    - zonepack.config: lookup strategy

Used By:
    - zonepack (public API)
    - query.local
    - cli
"""

from __future__ import annotations

import math
from bisect import bisect_right
from typing import Optional, Sequence, Union

from ..config import DEFAULT_CONFIG, ZoneConfig
from ..core.models.span import MILLIS_PER_MINUTE, Instant, Span
from ..core.models.zone import TimeZone
from ..errors import InternalConsistencyError

SpanSource = Union[TimeZone, Sequence[Span]]


def _linear(instant: Instant, spans: Sequence[Span]) -> Optional[Span]:
    for span in spans:
        if span.contains(instant):
            return span
    return None


def _bisect(instant: Instant, spans: Sequence[Span], starts: Sequence[Instant]) -> Optional[Span]:
    i = bisect_right(starts, instant) - 1
    if i >= 0 and spans[i].contains(instant):
        return spans[i]
    return None


def find_span(
    instant: Instant,
    spans: SpanSource,
    *,
    config: Optional[ZoneConfig] = None,
) -> Span:
    """
    Find the span covering an instant.

    Args:
        instant: Milliseconds since the epoch
        spans: A TimeZone, or its spans in time order
        config: Chooses bisect (default) or linear search

    Returns:
        The unique span with start <= instant < until

    Raises:
        ValueError: If instant is NaN
        InternalConsistencyError: If no span matches. Decoded zones
            always cover all time, so this means the spans were built
            wrong.
    """
    if isinstance(instant, float) and math.isnan(instant):
        raise ValueError("instant must not be NaN")
    config = config or DEFAULT_CONFIG

    if isinstance(spans, TimeZone):
        sequence: Sequence[Span] = spans.spans
        starts: Sequence[Instant] = spans.span_starts
    else:
        sequence = spans
        starts = [s.start for s in spans] if config.lookup == "bisect" else ()

    if config.lookup == "linear":
        span = _linear(instant, sequence)
    else:
        span = _bisect(instant, sequence, starts)

    if span is None:
        raise InternalConsistencyError(
            f"No span covers instant {instant}; spans are not contiguous from -inf to +inf"
        )
    return span


def offset_millis(instant: Instant, tz: TimeZone, *, config: Optional[ZoneConfig] = None) -> int:
    """Offset (UTC minus local, ms) in effect at an instant."""
    return find_span(instant, tz, config=config).offset


def abbreviation_at(instant: Instant, tz: TimeZone, *, config: Optional[ZoneConfig] = None) -> str:
    """Abbreviation in effect at an instant."""
    return find_span(instant, tz, config=config).abbreviation


def iso_offset_string(instant: Instant, tz: TimeZone, *, config: Optional[ZoneConfig] = None) -> str:
    """
    Offset at an instant as an ISO 8601 style "+hh:mm" string.

    Stored offsets are UTC minus local, so the sign is inverted: a stored
    offset of -60 minutes is written "+01:00". Zero is written "+00:00".
    Seconds are truncated.

    Example:
        >>> from zonepack import decode
        >>> iso_offset_string(0, decode("Europe/Paris|CET|-1|0|"))
        '+01:00'
    """
    total_minutes = offset_millis(instant, tz, config=config) / MILLIS_PER_MINUTE
    whole_minutes = int(abs(total_minutes))
    hours, minutes = divmod(whole_minutes, 60)
    sign = "+" if total_minutes <= 0 else "-"
    return f"{sign}{hours:02d}:{minutes:02d}"
