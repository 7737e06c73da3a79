"""Top-level package for zonepack.

Decodes the pipe-delimited "packed zone" encoding of timezone transition
history into immutable TimeZone values and answers point-in-time queries.

Provides subpackages:
- zonepack.core – Span / TimeZone models and the base-60 numeral decoder
- zonepack.decoding – grammar parser, field validator, span assembler
- zonepack.query – offset / abbreviation lookups by instant
- zonepack.schemas – JSON schema for packed zone bundles
"""

from .config import DEFAULT_CONFIG, ZoneConfig
from .core.models import Span, TimeZone, with_name, zone_name
from .decoding import decode
from .errors import (
    BundleError,
    DecodeError,
    GrammarError,
    InternalConsistencyError,
    StructuralError,
)
from .query import (
    abbreviation_at,
    find_span,
    iso_offset_string,
    offset_for_local,
    offset_millis,
    utc_from_local,
)


def _get_version() -> str:
    """Get version from pyproject.toml (dev) or importlib.metadata (installed)."""
    from pathlib import Path

    pyproject = Path(__file__).resolve().parent.parent.parent / "pyproject.toml"
    if pyproject.exists():
        try:
            for line in pyproject.read_text(encoding="utf-8").splitlines():
                if line.strip().startswith("version"):
                    # Parse: version = "0.3.1"
                    return line.split("=")[1].strip().strip('"').strip("'")
        except OSError:
            pass

    from importlib.metadata import PackageNotFoundError, version as pkg_version

    try:
        return pkg_version("zonepack")
    except PackageNotFoundError:
        return "0.0.0"


__version__ = _get_version()
__copyright__ = "Copyright 2026 The zonepack Authors"
__all__: list[str] = [
    "__version__",
    "ZoneConfig",
    "DEFAULT_CONFIG",
    "Span",
    "TimeZone",
    "zone_name",
    "with_name",
    "decode",
    "find_span",
    "offset_millis",
    "abbreviation_at",
    "iso_offset_string",
    "offset_for_local",
    "utc_from_local",
    "DecodeError",
    "GrammarError",
    "StructuralError",
    "InternalConsistencyError",
    "BundleError",
]
