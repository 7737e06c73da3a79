"""
Decoding Package

Packed zone string -> TimeZone, in three stages:

1. grammar.parse_packed – five fields, base-60 numbers decoded
2. validator.validate_fields – cross-field checks
3. assembler.assemble_zone – cumulative boundaries, spans
"""

from .assembler import assemble_zone, transition_times
from .decoder import decode
from .grammar import parse_packed
from .validator import validate_fields

__all__ = [
    "decode",
    "parse_packed",
    "validate_fields",
    "assemble_zone",
    "transition_times",
]
