"""
Module: decoding.decoder

Purpose:
    The decode() entry point: packed text -> fields -> validated fields
    -> TimeZone. Pure and deterministic; a failed decode fails the same
    way every time.

Key Functions:
    - decode(): Decode one packed zone string

Used By:
    - zonepack (public API)
    - bundle.read_bundle
    - cli
"""

from __future__ import annotations

import logging
from typing import Optional

from ..config import ZoneConfig
from ..core.models.zone import TimeZone
from ..errors import DecodeError
from .assembler import assemble_zone
from .grammar import parse_packed
from .validator import validate_fields

logger = logging.getLogger(__name__)


def decode(text: str, *, config: Optional[ZoneConfig] = None) -> TimeZone:
    """
    Decode a packed zone string.

    Args:
        text: Packed zone, "name|abbreviations|offsets|indices|diffs"
        config: Optional settings (error message context)

    Returns:
        Decoded TimeZone

    Raises:
        GrammarError: If a field is malformed
        StructuralError: If fields disagree with each other

    Example:
        >>> tz = decode("Etc/Test|STD DST|-1 -2|0101|1 1 1")
        >>> tz.name, len(tz.spans)
        ('Etc/Test', 4)
    """
    try:
        fields = parse_packed(text, config=config)
        validate_fields(fields)
        zone = assemble_zone(fields)
    except DecodeError as e:
        logger.debug("Failed to decode packed zone: %s", e)
        raise
    return zone
