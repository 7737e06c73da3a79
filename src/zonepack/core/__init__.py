"""
zonepack Core Package

Shared data models and the base-60 numeral decoder. Everything else in
zonepack builds on these.
"""

from .base60 import decode_base60
from .models import RawPackedFields, Span, TimeZone

__all__ = [
    "decode_base60",
    "RawPackedFields",
    "Span",
    "TimeZone",
]
