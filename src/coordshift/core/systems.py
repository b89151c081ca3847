"""
Named coordinate systems and a conversion dispatcher.

Callers that store a system name next to each coordinate (e.g. "BD09" from a
Baidu export) can route through `convert()` instead of picking the transform by hand.
The numeric transforms stay total; only unknown system names raise.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Callable

from coordshift.core.geo import Coordinate
from coordshift.core.transform import (
    bd09_to_gcj02,
    bd09_to_wgs84,
    gcj02_to_bd09,
    gcj02_to_wgs84,
    wgs84_to_bd09,
    wgs84_to_gcj02,
)

logger = logging.getLogger(__name__)


class CoordinateSystem(str, Enum):
    WGS84 = "WGS84"
    GCJ02 = "GCJ02"
    BD09 = "BD09"


_ALIASES: dict[str, CoordinateSystem] = {
    "WGS84": CoordinateSystem.WGS84,
    "GPS": CoordinateSystem.WGS84,
    "GCJ02": CoordinateSystem.GCJ02,
    "MARS": CoordinateSystem.GCJ02,
    "AMAP": CoordinateSystem.GCJ02,
    "BD09": CoordinateSystem.BD09,
    "BAIDU": CoordinateSystem.BD09,
}

_ROUTES: dict[tuple[CoordinateSystem, CoordinateSystem], Callable[[float, float], Coordinate]] = {
    (CoordinateSystem.WGS84, CoordinateSystem.GCJ02): wgs84_to_gcj02,
    (CoordinateSystem.GCJ02, CoordinateSystem.WGS84): gcj02_to_wgs84,
    (CoordinateSystem.GCJ02, CoordinateSystem.BD09): gcj02_to_bd09,
    # Direct; going through WGS84 would stack two approximations.
    (CoordinateSystem.BD09, CoordinateSystem.GCJ02): bd09_to_gcj02,
    (CoordinateSystem.WGS84, CoordinateSystem.BD09): wgs84_to_bd09,
    (CoordinateSystem.BD09, CoordinateSystem.WGS84): bd09_to_wgs84,
}


def parse_system(value: str | CoordinateSystem) -> CoordinateSystem:
    """Parse a system name such as "wgs-84", "gcj_02", "BD09" or "baidu".

    Raises:
        ValueError: when the name is not a known system or alias.
    """
    if isinstance(value, CoordinateSystem):
        return value
    key = str(value).strip().upper()
    for ch in ("-", "_", " "):
        key = key.replace(ch, "")
    system = _ALIASES.get(key)
    if system is None:
        raise ValueError(f"Unknown coordinate system '{value}'; expected one of WGS84, GCJ02, BD09.")
    return system


def convert(
    lng: float,
    lat: float,
    from_system: str | CoordinateSystem,
    to_system: str | CoordinateSystem,
) -> Coordinate:
    """Convert (lng, lat) from `from_system` to `to_system`."""
    src = parse_system(from_system)
    dst = parse_system(to_system)
    if src is dst:
        return Coordinate(lng=lng, lat=lat)

    func = _ROUTES[(src, dst)]
    logger.debug("convert %s -> %s via %s: lng=%r lat=%r", src.value, dst.value, func.__name__, lng, lat)
    return func(lng, lat)
