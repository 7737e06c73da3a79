"""
Field Validation

Cross-checks parsed packed fields before spans are assembled.

The grammar guarantees each field is well formed on its own; these checks
cover the relationships between fields. Any failure makes the whole
decode fail with StructuralError:

1. abbreviations and offsets have equal length
2. every index selects an existing abbreviation/offset pair
3. there is exactly one diff per transition (len(indices) - 1)
"""

from __future__ import annotations

from ..core.models.fields import RawPackedFields
from ..errors import StructuralError


def validate_fields(fields: RawPackedFields) -> None:
    """
    Validate cross-field invariants of parsed packed data.

    Args:
        fields: Output of parse_packed()

    Raises:
        StructuralError: On length mismatch, out-of-range index or a
            diff count that does not match the number of transitions
    """
    if len(fields.abbreviations) != len(fields.offsets):
        raise StructuralError(
            f"{len(fields.abbreviations)} abbreviations but {len(fields.offsets)} offsets",
            field="offsets",
        )

    if not fields.indices:
        raise StructuralError("indices must not be empty", field="indices")

    highest = max(fields.indices)
    if highest >= len(fields.abbreviations):
        raise StructuralError(
            f"index {highest} out of range for {len(fields.abbreviations)} "
            f"abbreviation/offset pairs",
            field="indices",
            position=fields.indices.index(highest),
        )

    expected_diffs = len(fields.indices) - 1
    if len(fields.diffs) != expected_diffs:
        raise StructuralError(
            f"{len(fields.indices)} indices need {expected_diffs} diffs, "
            f"got {len(fields.diffs)}",
            field="diffs",
        )
