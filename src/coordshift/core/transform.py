"""
WGS84 / GCJ02 / BD09 coordinate transforms.

Every function here is pure and total: no validation, no logging, no I/O.
Out-of-range inputs (e.g. latitude > 90) flow through the arithmetic and come
back as numbers, which some callers rely on.

Notes:
- The perturbation polynomials and their constants are empirical. Keep every literal
  exactly as written; a changed digit moves output by meters to kilometers.
- `gcj02_to_wgs84` is the usual one-step approximation (reflect the forward offset
  computed at the GCJ02 point), not an analytic inverse.
- BD09 <-> GCJ02 is a fixed shift plus a small polar correction. The two directions
  are not exact inverses; round trips are only accurate to sub-meter level.
"""

from __future__ import annotations

import math

from coordshift.core.geo import A, EE, PI, X_PI, Coordinate

# `math.sin`/`math.cos` raise on infinite arguments; the polar correction has no
# meaningful value there, so such input yields NaN the way IEEE trig would.
_NAN_COORDINATE = Coordinate(lng=math.nan, lat=math.nan)


def _trig_overflows(x: float, y: float) -> bool:
    return math.isinf(x * X_PI) or math.isinf(y * X_PI)


def transform_lat(lng: float, lat: float) -> float:
    """Latitude perturbation for a point already offset by (105E, 35N)."""
    ret = -100.0 + 2.0 * lng + 3.0 * lat + 0.2 * lat * lat + 0.1 * lng * lat + 0.2 * math.sqrt(abs(lng))
    ret += (20.0 * math.sin(6.0 * lng * PI) + 20.0 * math.sin(2.0 * lng * PI)) * 2.0 / 3.0
    ret += (20.0 * math.sin(lat * PI) + 40.0 * math.sin(lat / 3.0 * PI)) * 2.0 / 3.0
    ret += (160.0 * math.sin(lat / 12.0 * PI) + 320 * math.sin(lat * PI / 30.0)) * 2.0 / 3.0
    return ret


def transform_lng(lng: float, lat: float) -> float:
    """Longitude perturbation for a point already offset by (105E, 35N)."""
    ret = 300.0 + lng + 2.0 * lat + 0.1 * lng * lng + 0.1 * lng * lat + 0.1 * math.sqrt(abs(lng))
    ret += (20.0 * math.sin(6.0 * lng * PI) + 20.0 * math.sin(2.0 * lng * PI)) * 2.0 / 3.0
    ret += (20.0 * math.sin(lng * PI) + 40.0 * math.sin(lng / 3.0 * PI)) * 2.0 / 3.0
    ret += (150.0 * math.sin(lng / 12.0 * PI) + 300.0 * math.sin(lng / 30.0 * PI)) * 2.0 / 3.0
    return ret


def out_of_china(lng: float, lat: float) -> bool:
    """Return True when the point lies outside the mainland China bounding box.

    WGS84 <-> GCJ02 offsets are only applied inside this box.
    """
    if lng < 72.004 or lng > 137.8347:
        return True
    if lat < 0.8293 or lat > 55.8271:
        return True
    return False


def _offset(lng: float, lat: float) -> tuple[float, float]:
    """Apply the GCJ02 perturbation at (lng, lat); returns the shifted point."""
    dlat = transform_lat(lng - 105.0, lat - 35.0)
    dlng = transform_lng(lng - 105.0, lat - 35.0)
    radlat = lat / 180.0 * PI
    magic = math.sin(radlat)
    magic = 1 - EE * magic * magic
    sqrtmagic = math.sqrt(magic)
    # Scale degrees-of-arc by the local radii of curvature.
    dlat = (dlat * 180.0) / ((A * (1 - EE)) / (magic * sqrtmagic) * PI)
    dlng = (dlng * 180.0) / (A / sqrtmagic * math.cos(radlat) * PI)
    return lng + dlng, lat + dlat


def wgs84_to_gcj02(lng: float, lat: float) -> Coordinate:
    """WGS84 -> GCJ02. Points outside China are returned unchanged."""
    if out_of_china(lng, lat):
        return Coordinate(lng=lng, lat=lat)
    mglng, mglat = _offset(lng, lat)
    return Coordinate(lng=mglng, lat=mglat)


def gcj02_to_wgs84(lng: float, lat: float) -> Coordinate:
    """GCJ02 -> WGS84 (approximate). Points outside China are returned unchanged."""
    if out_of_china(lng, lat):
        return Coordinate(lng=lng, lat=lat)
    mglng, mglat = _offset(lng, lat)
    return Coordinate(lng=lng * 2 - mglng, lat=lat * 2 - mglat)


def gcj02_to_bd09(lng: float, lat: float) -> Coordinate:
    """GCJ02 -> BD09."""
    if _trig_overflows(lng, lat):
        return _NAN_COORDINATE
    z = math.sqrt(lng * lng + lat * lat) + 0.00002 * math.sin(lat * X_PI)
    theta = math.atan2(lat, lng) + 0.000003 * math.cos(lng * X_PI)
    bd_lng = z * math.cos(theta) + 0.0065
    bd_lat = z * math.sin(theta) + 0.006
    return Coordinate(lng=bd_lng, lat=bd_lat)


def bd09_to_gcj02(lng: float, lat: float) -> Coordinate:
    """BD09 -> GCJ02."""
    x = lng - 0.0065
    y = lat - 0.006
    if _trig_overflows(x, y):
        return _NAN_COORDINATE
    z = math.sqrt(x * x + y * y) - 0.00002 * math.sin(y * X_PI)
    theta = math.atan2(y, x) - 0.000003 * math.cos(x * X_PI)
    return Coordinate(lng=z * math.cos(theta), lat=z * math.sin(theta))


def wgs84_to_bd09(lng: float, lat: float) -> Coordinate:
    """WGS84 -> GCJ02 -> BD09."""
    gcj = wgs84_to_gcj02(lng, lat)
    return gcj02_to_bd09(gcj.lng, gcj.lat)


def bd09_to_wgs84(lng: float, lat: float) -> Coordinate:
    """BD09 -> GCJ02 -> WGS84."""
    gcj = bd09_to_gcj02(lng, lat)
    return gcj02_to_wgs84(gcj.lng, gcj.lat)
