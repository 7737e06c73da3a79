"""
Module: zone

Purpose:
    Provides the TimeZone dataclass - a named, immutable sequence of
    contiguous spans covering all time from -inf to +inf.

Key Functions:
    - TimeZone.with_name(name): Copy with the same spans and a new name
    - TimeZone.transitions: Finite boundary instants
    - TimeZone.span_starts: Sorted span starts, used for bisect lookup
    - zone_name(tz) / with_name(tz, name): Function forms of the above

Dependencies:
    - dataclasses (std)
    - math (std)
    - .span.Span

Used By:
    - decoding.assembler: constructs TimeZone values
    - query: every lookup
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field, replace
from typing import Any

from .span import Instant, Span


@dataclass(frozen=True, slots=True)
class TimeZone:
    """
    A decoded zone: a name and its full span history.

    Attributes:
        name: Zone name, e.g. "Europe/Paris"
        spans: Spans in time order

    Invariants:
        - spans is non-empty
        - spans[0].start == -inf and spans[-1].until == +inf
        - spans[i].until == spans[i + 1].start (contiguous, ordered)

    Example:
        >>> tz = TimeZone("Etc/Test", [Span(-math.inf, math.inf, "TST", 0)])
        >>> tz.with_name("Etc/Alias").spans == tz.spans
        True
    """

    name: str
    spans: tuple[Span, ...]
    _starts: tuple[Instant, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        """Validate span coverage and freeze the span sequence."""
        spans = tuple(self.spans)
        object.__setattr__(self, "spans", spans)

        if not spans:
            raise ValueError(f"TimeZone {self.name!r} must have at least one span")
        if spans[0].start != -math.inf:
            raise ValueError(f"First span must start at -inf: {spans[0].start}")
        if spans[-1].until != math.inf:
            raise ValueError(f"Last span must end at +inf: {spans[-1].until}")
        for i, (current, following) in enumerate(zip(spans, spans[1:])):
            if current.until != following.start:
                raise ValueError(
                    f"Spans {i} and {i + 1} are not contiguous: "
                    f"{current.until} != {following.start}"
                )

        object.__setattr__(self, "_starts", tuple(s.start for s in spans))

    # ─────────────────────────────────────────────────────────────────────────
    # Properties
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def span_starts(self) -> tuple[Instant, ...]:
        """Start instant of every span, ascending."""
        return self._starts

    @property
    def transitions(self) -> tuple[Instant, ...]:
        """Finite instants at which the offset or abbreviation changes."""
        return self._starts[1:]

    # ─────────────────────────────────────────────────────────────────────────
    # Derivation
    # ─────────────────────────────────────────────────────────────────────────

    def with_name(self, name: str) -> TimeZone:
        """
        Return a copy with identical spans and a new name.

        Args:
            name: The new zone name

        Returns:
            New TimeZone; this one is unchanged
        """
        return replace(self, name=name)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for JSON output."""
        return {
            "name": self.name,
            "spans": [s.to_dict() for s in self.spans],
        }

    def __repr__(self) -> str:
        return f"TimeZone({self.name!r}, {len(self.spans)} spans)"


def zone_name(tz: TimeZone) -> str:
    """Name of a decoded zone."""
    return tz.name


def with_name(tz: TimeZone, name: str) -> TimeZone:
    """Non-mutating rename; see TimeZone.with_name."""
    return tz.with_name(name)
