"""
Module: bundle

Purpose:
    Read a JSON bundle of packed zones in one pass. Zones that fail to
    decode are skipped and recorded rather than failing the whole bundle;
    links become renamed copies of their target zone.

Key Functions:
    - read_bundle(): Path or parsed JSON -> ZoneBundle

Key Classes:
    - ZoneBundle: Decoded zones plus per-entry decode errors

Dependencies:
    - json (std), pathlib (std)
    - zonepack.schemas.validator: jsonschema validation of the container

Used By:
    - cli: "bundle" subcommand
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

from .config import ZoneConfig
from .core.models.zone import TimeZone
from .decoding.decoder import decode
from .errors import BundleError, DecodeError
from .schemas.validator import validate_bundle

logger = logging.getLogger(__name__)

LINK_SEPARATOR = "|"


@dataclass(frozen=True)
class ZoneBundle:
    """
    Result of reading a packed zone bundle.

    Attributes:
        version: Data version string from the bundle
        zones: Zone name -> decoded zone, links included
        errors: Zone name (or "zones[i]" if the name is unreadable) or
            link -> reason it was skipped
    """
    version: str
    zones: Dict[str, TimeZone] = field(default_factory=dict)
    errors: Dict[str, str] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.zones)


def _load_json(path: Path) -> Any:
    if not path.exists():
        raise BundleError(f"Bundle file not found: {path}", path=str(path))
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise BundleError(f"Invalid JSON in {path}: {e}", path=str(path)) from e


def _entry_label(packed: str, index: int) -> str:
    name = packed.split("|", 1)[0]
    return name or f"zones[{index}]"


def read_bundle(
    source: Union[Path, str, Mapping[str, Any]],
    *,
    config: Optional[ZoneConfig] = None,
) -> ZoneBundle:
    """
    Read and decode a packed zone bundle.

    Args:
        source: Path to a bundle JSON file, or the already-parsed JSON
        config: Passed through to decode()

    Returns:
        ZoneBundle with every zone that decoded

    Raises:
        BundleError: If the file is missing, is not JSON, or fails schema
            validation. Individual zone or link failures do not raise.

    Example:
        >>> bundle = read_bundle({"version": "1", "zones": ["Etc/UTC|UTC|0|0|"]})
        >>> list(bundle.zones)
        ['Etc/UTC']
    """
    data = source if isinstance(source, Mapping) else _load_json(Path(source))
    validate_bundle(data)

    zones: Dict[str, TimeZone] = {}
    errors: Dict[str, str] = {}

    for index, packed in enumerate(data["zones"]):
        try:
            zone = decode(packed, config=config)
        except DecodeError as e:
            label = _entry_label(packed, index)
            logger.warning("Skipping zone %s: %s", label, e)
            errors[label] = str(e)
            continue
        if zone.name in zones:
            logger.warning("Duplicate zone %s; keeping the later definition", zone.name)
        zones[zone.name] = zone

    for link in data.get("links", []):
        target, alias = link.split(LINK_SEPARATOR)
        if target not in zones:
            logger.warning("Skipping link %s: target %s not decoded", alias, target)
            errors[alias] = f"link target {target!r} not found"
            continue
        if alias in zones:
            logger.warning("Link %s replaces a zone of the same name", alias)
        zones[alias] = zones[target].with_name(alias)

    logger.info("Read bundle %s: %d zones, %d skipped", data["version"], len(zones), len(errors))
    return ZoneBundle(version=data["version"], zones=zones, errors=errors)
