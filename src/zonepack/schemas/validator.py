"""
Schema Validation Utilities

Validates packed zone bundle JSON against bundle.schema.json.

A bundle is the JSON container packed zones are usually shipped in:

    {"version": "2024a", "zones": ["Europe/Paris|...", ...], "links": ["Europe/Paris|Europe/Monaco"]}

Only the container is checked here. Each packed string is checked by
decode() when the bundle is read.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import jsonschema

from ..errors import BundleError

BUNDLE_SCHEMA_NAME = "bundle"

# Load schemas lazily
_SCHEMAS: dict[str, dict] = {}


def _load_schema(name: str) -> dict:
    """Load a schema from the schemas directory."""
    if name not in _SCHEMAS:
        schema_path = Path(__file__).parent / f"{name}.schema.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")
        with open(schema_path, "r", encoding="utf-8") as f:
            _SCHEMAS[name] = json.load(f)
    return _SCHEMAS[name]


def validate_bundle(data: Any) -> None:
    """
    Validate bundle data against the bundle schema.

    Args:
        data: Parsed JSON

    Raises:
        BundleError: If data does not match the schema. ``path`` names the
            offending location, e.g. "zones.3".
    """
    schema = _load_schema(BUNDLE_SCHEMA_NAME)
    validator = jsonschema.Draft202012Validator(schema)
    errors = sorted(validator.iter_errors(data), key=lambda e: list(e.absolute_path))
    if errors:
        first = errors[0]
        raise BundleError(
            f"Schema validation failed: {first.message}",
            path=".".join(str(p) for p in first.absolute_path),
            errors=[e.message for e in errors],
        )
