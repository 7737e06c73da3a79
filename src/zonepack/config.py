"""
Module: config

Purpose:
    Configuration dataclass for decoding and querying packed zones.
    Provides immutable settings for the span lookup strategy, the
    local-time resolution policy and error message context.

Key Classes:
    - ZoneConfig: Settings consulted by the decoder and query engine

Dependencies:
    - dataclasses: For frozen dataclass support

Used By:
    - decoding.grammar: error_context for GrammarError messages
    - query.engine: lookup strategy
    - query.local: ambiguous / invalid local time policy
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

LookupStrategy = Literal["bisect", "linear"]


@dataclass(frozen=True)
class ZoneConfig:
    """
    Configuration for decoding and querying.

    Attributes:
        lookup: Span search strategy. "bisect" searches the sorted span
            starts; "linear" scans from the first span. Both return the
            same span.
        move_ambiguous_forward: When a local time falls in a repeated hour
            (offset increases at the transition), resolve it using the
            later span's offset.
        move_invalid_forward: When a local time falls in a skipped hour
            (offset decreases at the transition), resolve it using the
            earlier span's offset, which moves the time forward.
        error_context: Number of input characters quoted in grammar errors.
    """
    lookup: LookupStrategy = "bisect"
    move_ambiguous_forward: bool = False
    move_invalid_forward: bool = True
    error_context: int = 12

    def __post_init__(self) -> None:
        if self.lookup not in ("bisect", "linear"):
            raise ValueError(f"Invalid lookup strategy: {self.lookup!r}")
        if self.error_context < 0:
            raise ValueError(f"error_context must be >= 0: {self.error_context}")


DEFAULT_CONFIG = ZoneConfig()
