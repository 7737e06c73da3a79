"""
Query Package

Lookups on decoded zones by UTC instant (engine) or by local
wall-clock time (local).
"""

from .engine import abbreviation_at, find_span, iso_offset_string, offset_millis
from .local import offset_for_local, utc_from_local

__all__ = [
    "find_span",
    "offset_millis",
    "abbreviation_at",
    "iso_offset_string",
    "offset_for_local",
    "utc_from_local",
]
