"""
Local Wall-Clock Resolution

Maps a local wall-clock time (milliseconds on the local clock since the
epoch) to the offset that applies to it. Around transitions a local time
can be skipped (clocks jump forward) or repeated (clocks fall back); the
ZoneConfig flags choose how those are resolved:

- move_invalid_forward (default True): a skipped time uses the earlier
  span's offset, landing after the gap.
- move_ambiguous_forward (default False): a repeated time resolves to
  the later occurrence instead of the earlier one.
"""

from __future__ import annotations

from typing import Optional

from ..config import DEFAULT_CONFIG, ZoneConfig
from ..core.models.span import Instant
from ..core.models.zone import TimeZone


def offset_for_local(
    local_millis: Instant,
    tz: TimeZone,
    *,
    config: Optional[ZoneConfig] = None,
) -> int:
    """
    Offset (UTC minus local, ms) to apply to a local wall-clock time.

    Args:
        local_millis: Local wall-clock time in milliseconds
        tz: Decoded zone
        config: Ambiguous / invalid time policy

    Returns:
        Offset in milliseconds of the span the local time resolves to
    """
    config = config or DEFAULT_CONFIG
    spans = tz.spans
    last = len(spans) - 1

    for i in range(last):
        offset = spans[i].offset
        next_offset = spans[i + 1].offset
        prev_offset = spans[i - 1 if i else i].offset

        if offset < next_offset and config.move_ambiguous_forward:
            offset = next_offset
        elif offset > prev_offset and config.move_invalid_forward:
            offset = prev_offset

        if local_millis < spans[i].until - offset:
            return spans[i].offset

    return spans[last].offset


def utc_from_local(
    local_millis: Instant,
    tz: TimeZone,
    *,
    config: Optional[ZoneConfig] = None,
) -> Instant:
    """UTC instant for a local wall-clock time; see offset_for_local()."""
    return local_millis + offset_for_local(local_millis, tz, config=config)
