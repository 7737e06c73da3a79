"""
Command-line interface for zonepack.

Usage:
    zonepack decode "Etc/Test|STD DST|-1 -2|0101|1 1 1" --at 0
    zonepack bundle zones.json --zone Europe/Paris --at 1700000000000
"""

from __future__ import annotations

import argparse
import json
import logging
import math
import sys
from typing import Optional, Sequence

from . import __version__
from .bundle import read_bundle
from .config import ZoneConfig
from .core.models.zone import TimeZone
from .decoding.decoder import decode
from .errors import BundleError, DecodeError
from .query.engine import find_span, iso_offset_string

logger = logging.getLogger("zonepack")


def _instant(text: str) -> float:
    """argparse type for --at: a finite number of milliseconds."""
    try:
        value = float(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a number: {text!r}") from None
    if not math.isfinite(value):
        raise argparse.ArgumentTypeError(f"instant must be finite: {text!r}")
    return value


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="zonepack",
        description="Decode packed timezone data and query offsets by instant",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument(
        "--lookup", choices=["bisect", "linear"], default="bisect",
        help="Span search strategy (default: bisect)",
    )

    sub = parser.add_subparsers(dest="command", required=True)

    p_decode = sub.add_parser("decode", help="Decode one packed zone string")
    p_decode.add_argument("packed", help="Packed zone, name|abbrs|offsets|indices|diffs")
    p_decode.add_argument("--at", type=_instant, help="Query instant (ms since epoch)")
    p_decode.add_argument("--json", action="store_true", help="Print spans as JSON")

    p_bundle = sub.add_parser("bundle", help="Read a JSON bundle of packed zones")
    p_bundle.add_argument("path", help="Bundle JSON file")
    p_bundle.add_argument("--zone", help="Zone to show or query")
    p_bundle.add_argument("--at", type=_instant, help="Query instant (ms since epoch)")

    return parser


def _print_zone(tz: TimeZone, as_json: bool) -> None:
    if as_json:
        print(json.dumps(tz.to_dict(), indent=2))
        return
    print(f"{tz.name}: {len(tz.spans)} spans")
    for span in tz.spans:
        print(f"  [{span.start}, {span.until})  {span.abbreviation:<6} {span.offset}")


def _print_query(tz: TimeZone, instant: float, config: ZoneConfig) -> None:
    span = find_span(instant, tz, config=config)
    iso = iso_offset_string(instant, tz, config=config)
    print(f"{tz.name} at {instant}: {span.abbreviation} offset={span.offset} ({iso})")
    print(f"  span [{span.start}, {span.until})")


def _run_decode(args: argparse.Namespace, config: ZoneConfig) -> int:
    tz = decode(args.packed, config=config)
    if args.at is not None:
        _print_query(tz, args.at, config)
    else:
        _print_zone(tz, args.json)
    return 0


def _run_bundle(args: argparse.Namespace, config: ZoneConfig) -> int:
    bundle = read_bundle(args.path, config=config)
    if args.zone is None:
        print(f"version {bundle.version}: {len(bundle)} zones, {len(bundle.errors)} skipped")
        for label, reason in sorted(bundle.errors.items()):
            print(f"  skipped {label}: {reason}")
        return 0

    tz = bundle.zones.get(args.zone)
    if tz is None:
        print(f"Zone not found in bundle: {args.zone}", file=sys.stderr)
        return 1
    if args.at is not None:
        _print_query(tz, args.at, config)
    else:
        _print_zone(tz, as_json=False)
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Entry point for the zonepack console script."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s | %(levelname)s | %(message)s",
    )
    config = ZoneConfig(lookup=args.lookup)

    try:
        if args.command == "decode":
            return _run_decode(args, config)
        return _run_bundle(args, config)
    except (DecodeError, BundleError) as e:
        logger.debug("Command %s failed", args.command, exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
