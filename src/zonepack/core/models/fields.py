"""
Module: fields

Purpose:
    Provides RawPackedFields - the parser's output for one packed zone
    string, before cross-field validation and span assembly.

Dependencies:
    - dataclasses (std)

Used By:
    - decoding.grammar: produces RawPackedFields
    - decoding.validator: checks field relationships
    - decoding.assembler: builds spans from them
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RawPackedFields:
    """
    The five fields of a packed zone string, decoded but not yet validated.

    Attributes:
        name: Zone name
        abbreviations: Distinct abbreviations used by the zone
        offsets: Offsets in minutes, parallel to abbreviations
        indices: Per-span selector into abbreviations/offsets
        diffs: Boundary deltas in milliseconds (first entry is absolute)
    """
    name: str
    abbreviations: tuple[str, ...]
    offsets: tuple[float, ...]
    indices: tuple[int, ...]
    diffs: tuple[float, ...] = ()
