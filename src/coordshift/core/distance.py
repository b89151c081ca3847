from __future__ import annotations

import math

from coordshift.core.geo import EARTH_RADIUS_M, PI, rad

"""
Great-circle distance via the law of cosines.

Both points are placed on a sphere of radius `EARTH_RADIUS_M` in 3D Cartesian space,
the chord length between them is measured, and the central angle is recovered from
the chord. The result is in meters (same unit as the radius).

Existing callers compare against values produced by this exact chord-then-angle path,
so it is kept instead of a direct haversine formula.
"""


def _fold_lat(radlat: float) -> float:
    # Latitude -> polar angle measured from the north pole.
    if radlat < 0:
        radlat = PI / 2 + abs(radlat)  # south
    if radlat > 0:
        radlat = PI / 2 - abs(radlat)  # north
    return radlat


def _fold_lng(radlng: float) -> float:
    if radlng < 0:
        radlng = math.pi * 2 - abs(radlng)  # west
    return radlng


def _to_xyz(lng: float, lat: float) -> tuple[float, float, float]:
    polar = _fold_lat(rad(lat))
    azimuth = _fold_lng(rad(lng))
    x = EARTH_RADIUS_M * math.cos(azimuth) * math.sin(polar)
    y = EARTH_RADIUS_M * math.sin(azimuth) * math.sin(polar)
    z = EARTH_RADIUS_M * math.cos(polar)
    return x, y, z


def distance_m(lon1: float, lat1: float, lon2: float, lat2: float) -> float:
    """Return the great-circle distance in meters between two lon/lat points (degrees).

    Identical points short-circuit to exactly 0 so `acos` never sees an argument
    nudged past 1 by rounding.
    """
    if lon1 == lon2 and lat1 == lat2:
        return 0
    # `math.cos` raises on infinite radians where IEEE trig yields NaN.
    if any(math.isinf(rad(v)) for v in (lon1, lat1, lon2, lat2)):
        return math.nan

    x1, y1, z1 = _to_xyz(lon1, lat1)
    x2, y2, z2 = _to_xyz(lon2, lat2)
    d = math.sqrt((x1 - x2) * (x1 - x2) + (y1 - y2) * (y1 - y2) + (z1 - z2) * (z1 - z2))

    r = EARTH_RADIUS_M
    cos_theta = (r * r + r * r - d * d) / (2 * r * r)
    # Near-antipodal chords can round just past -1; `math.acos` would raise there.
    if not -1.0 <= cos_theta <= 1.0:
        return math.nan
    theta = math.acos(cos_theta)
    return theta * r


distance = distance_m
