"""
Module: span

Purpose:
    Provides the Span dataclass - a half-open interval of time during which
    one UTC offset and abbreviation applied in a zone.

Key Functions:
    - Span.contains(instant): Check if an instant falls in [start, until)
    - Span.is_bounded: Whether both ends are finite
    - Span.to_dict(): Serialize for JSON (infinite ends become None)

Dependencies:
    - dataclasses (std)
    - math (std)

Used By:
    - core.models.zone.TimeZone
    - decoding.assembler
    - query.engine
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Union

# Milliseconds since the Unix epoch. Span ends may be -inf / +inf.
Instant = Union[int, float]

MILLIS_PER_MINUTE = 60_000


@dataclass(frozen=True, slots=True)
class Span:
    """
    Interval [start, until) with a single offset and abbreviation.

    The offset follows the packed format's convention: it is the amount
    to subtract from UTC to get local time, so UTC+01:00 is stored as
    -3600000.

    Attributes:
        start: First instant of the span (inclusive, ms, may be -inf)
        until: First instant after the span (exclusive, ms, may be +inf)
        abbreviation: Zone abbreviation in effect, e.g. "CET"
        offset: Offset in milliseconds (UTC minus local)

    Invariants:
        - start < until
        - abbreviation is non-empty

    Example:
        >>> s = Span(start=0, until=1000, abbreviation="STD", offset=3600000)
        >>> s.contains(0)
        True
        >>> s.contains(1000)  # until is exclusive
        False
    """

    start: Instant
    until: Instant
    abbreviation: str
    offset: int

    def __post_init__(self) -> None:
        """Validate span on construction."""
        if math.isnan(self.start) or math.isnan(self.until):
            raise ValueError(f"Span bounds must not be NaN: {self.start}, {self.until}")
        if not self.start < self.until:
            raise ValueError(f"until must be > start: {self.until} <= {self.start}")
        if not self.abbreviation:
            raise ValueError("abbreviation must be non-empty")

    @property
    def is_bounded(self) -> bool:
        """True if neither end of the span is infinite."""
        return math.isfinite(self.start) and math.isfinite(self.until)

    @property
    def offset_minutes(self) -> float:
        """Offset converted back to minutes."""
        return self.offset / MILLIS_PER_MINUTE

    def contains(self, instant: Instant) -> bool:
        """
        Check if an instant is within this span.

        Args:
            instant: Milliseconds since the epoch

        Returns:
            True if start <= instant < until
        """
        return self.start <= instant < self.until

    def to_dict(self) -> dict[str, Any]:
        """
        Serialize to dictionary for JSON output.

        Returns:
            Dict with start, until, abbreviation and offset. Infinite
            ends are written as None.
        """
        return {
            "start": self.start if math.isfinite(self.start) else None,
            "until": self.until if math.isfinite(self.until) else None,
            "abbreviation": self.abbreviation,
            "offset": self.offset,
        }

    def __repr__(self) -> str:
        """Concise representation for debugging."""
        return f"Span({self.start}, {self.until}, {self.abbreviation!r}, {self.offset})"
