"""
Schemas Package

JSON schema for packed zone bundles and its validator.
"""

from .validator import validate_bundle

__all__ = ["validate_bundle"]
