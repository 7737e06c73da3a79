"""
Core Models Package

Immutable, validated data models for decoded zones.

All models in this package are frozen dataclasses, so decoded zones can
be shared between threads and used as dict keys without copying.
"""

from .fields import RawPackedFields
from .span import MILLIS_PER_MINUTE, Instant, Span
from .zone import TimeZone, with_name, zone_name

__all__ = [
    "RawPackedFields",
    "Instant",
    "MILLIS_PER_MINUTE",
    "Span",
    "TimeZone",
    "zone_name",
    "with_name",
]
