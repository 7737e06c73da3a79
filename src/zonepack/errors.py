"""
Error Types

Exceptions raised while decoding and querying packed zones.

DecodeError and its subclasses are input errors: the packed text is
malformed and decoding it again will fail the same way. The caller
decides whether to skip or log the zone.

InternalConsistencyError signals a TimeZone whose span invariants were
broken. It derives from AssertionError because it marks a construction
bug rather than bad input.
"""

from __future__ import annotations

from typing import Optional


class DecodeError(Exception):
    """Raised when packed zone text cannot be decoded."""

    def __init__(self, message: str, field: str = "input", position: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.field = field
        self.position = position

    def __str__(self) -> str:
        return f"{self.message} (field={self.field}, position={self.position})"


class GrammarError(DecodeError):
    """A packed field is malformed: bad separator, illegal character or missing element."""
    pass


class StructuralError(DecodeError):
    """Fields parsed but disagree with each other (lengths, index range, transition order)."""
    pass


class InternalConsistencyError(AssertionError):
    """No span matched an instant; the TimeZone's span invariants are broken."""
    pass


class BundleError(Exception):
    """A packed zone bundle is unreadable or fails schema validation."""

    def __init__(self, message: str, path: str = "", errors: list[str] | None = None):
        super().__init__(message)
        self.path = path
        self.errors = errors or []
