"""
coordshift: WGS84 / GCJ02 / BD09 coordinate conversion and great-circle distance.

The public functions take raw degree values and return `Coordinate(lng, lat)` (or meters,
for `distance_m`). They are pure and safe to call from any thread.
"""

from coordshift.core.distance import distance, distance_m
from coordshift.core.geo import Coordinate
from coordshift.core.systems import CoordinateSystem, convert, parse_system
from coordshift.core.transform import (
    bd09_to_gcj02,
    bd09_to_wgs84,
    gcj02_to_bd09,
    gcj02_to_wgs84,
    out_of_china,
    transform_lat,
    transform_lng,
    wgs84_to_bd09,
    wgs84_to_gcj02,
)

__all__ = [
    "Coordinate",
    "CoordinateSystem",
    "bd09_to_gcj02",
    "bd09_to_wgs84",
    "convert",
    "distance",
    "distance_m",
    "gcj02_to_bd09",
    "gcj02_to_wgs84",
    "out_of_china",
    "parse_system",
    "transform_lat",
    "transform_lng",
    "wgs84_to_bd09",
    "wgs84_to_gcj02",
]
