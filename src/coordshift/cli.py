"""
coordshift CLI entrypoint.

Thin wrapper for quick conversions from a shell. All math lives in
`coordshift.core.transform` and `coordshift.core.distance`; this module only parses
arguments, formats numbers and logs at DEBUG level.
"""

from __future__ import annotations

import argparse
import json
import logging
from typing import Any

from coordshift.config.settings import get_settings
from coordshift.core.distance import distance_m
from coordshift.core.logging import configure_logging
from coordshift.core.systems import CoordinateSystem, convert, parse_system
from coordshift.core.transform import out_of_china, wgs84_to_bd09

logger = logging.getLogger(__name__)


def coordinate_system(value: str) -> CoordinateSystem:
    """argparse `type=` hook; a ValueError becomes a usage error (exit 2)."""
    return parse_system(value)


def _fmt(value: float, precision: int | None) -> str:
    if precision is None:
        return repr(float(value))
    return f"{value:.{precision}f}"


def _print_json(payload: dict[str, Any]) -> None:
    settings = get_settings()
    print(json.dumps(payload, ensure_ascii=False, indent=settings.output.json_indent))


def _cmd_convert(args: argparse.Namespace) -> int:
    settings = get_settings()
    src: CoordinateSystem = args.from_system
    dst: CoordinateSystem = args.to_system

    out = convert(args.lng, args.lat, src, dst)
    logger.debug("converted (%r, %r) %s -> %s: %r", args.lng, args.lat, src.value, dst.value, out)

    if args.json:
        _print_json({"system": dst.value, "lng": out.lng, "lat": out.lat})
        return 0

    precision = settings.output.precision
    print(f"{_fmt(out.lng, precision)} {_fmt(out.lat, precision)}")
    return 0


def _cmd_distance(args: argparse.Namespace) -> int:
    settings = get_settings()
    meters = distance_m(args.lon1, args.lat1, args.lon2, args.lat2)
    logger.debug("distance (%r, %r) -> (%r, %r): %r m", args.lon1, args.lat1, args.lon2, args.lat2, meters)

    if args.json:
        _print_json({"distance_m": meters})
        return 0

    print(_fmt(meters, settings.output.precision))
    return 0


def _cmd_region(args: argparse.Namespace) -> int:
    outside = out_of_china(args.lng, args.lat)
    print("outside" if outside else "inside")
    return 0


def _cmd_demo(_: argparse.Namespace) -> int:
    """Print one sample WGS84 -> BD09 conversion and one sample distance."""
    settings = get_settings()
    demo = settings.demo
    precision = settings.output.precision

    lng, lat = demo.point
    bd = wgs84_to_bd09(lng, lat)
    print(f"WGS84 ({_fmt(lng, precision)}, {_fmt(lat, precision)}) -> BD09")
    print(_fmt(bd.lng, precision))
    print(_fmt(bd.lat, precision))

    lon1, lat1 = demo.distance_from
    lon2, lat2 = demo.distance_to
    print(f"distance_m: {_fmt(distance_m(lon1, lat1, lon2, lat2), precision)}")
    return 0


def _add_lnglat(p: argparse.ArgumentParser) -> None:
    p.add_argument("lng", type=float, help="Longitude in decimal degrees")
    p.add_argument("lat", type=float, help="Latitude in decimal degrees")


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the coordshift CLI."""
    parser = argparse.ArgumentParser(prog="coordshift")
    sub = parser.add_subparsers(dest="command", required=True)

    conv = sub.add_parser("convert", help="Convert a point between WGS84, GCJ02 and BD09.")
    conv.add_argument("--from", dest="from_system", required=True, type=coordinate_system, help="Source system")
    conv.add_argument("--to", dest="to_system", required=True, type=coordinate_system, help="Target system")
    _add_lnglat(conv)
    conv.add_argument("--json", action="store_true", help="Output machine-readable JSON")
    conv.set_defaults(func=_cmd_convert)

    dist = sub.add_parser("distance", help="Great-circle distance in meters between two lon/lat points.")
    dist.add_argument("lon1", type=float)
    dist.add_argument("lat1", type=float)
    dist.add_argument("lon2", type=float)
    dist.add_argument("lat2", type=float)
    dist.add_argument("--json", action="store_true", help="Output machine-readable JSON")
    dist.set_defaults(func=_cmd_distance)

    reg = sub.add_parser("region", help="Report whether a point is inside the China offset box.")
    _add_lnglat(reg)
    reg.set_defaults(func=_cmd_region)

    demo = sub.add_parser("demo", help="Print a sample conversion and a sample distance.")
    demo.set_defaults(func=_cmd_demo)
    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint callable used by `python -m coordshift.cli`."""
    configure_logging()
    parser = build_parser()
    args = parser.parse_args(argv)
    func: Any = getattr(args, "func")
    return int(func(args))


if __name__ == "__main__":
    raise SystemExit(main())
