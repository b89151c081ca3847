from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator

"""
Coordinate value type and the shared geodetic constants.

All constants are plain literals so every transform module reads the same values.
The ellipsoid parameters (`A`, `EE`) are the Krasovsky 1940 values the GCJ02
offset is defined against; `EARTH_RADIUS_M` is the WGS84 equatorial radius.
"""

PI = 3.1415926535897932384626
X_PI = PI * 3000.0 / 180.0

# Semi-major axis (m).
A = 6378245.0
# Eccentricity squared.
EE = 0.00669342162296594323

EARTH_RADIUS_M = 6378137


@dataclass(frozen=True)
class Coordinate:
    """A longitude/latitude pair in decimal degrees (longitude first)."""

    lng: float
    lat: float

    def __iter__(self) -> Iterator[float]:
        yield self.lng
        yield self.lat

    def as_tuple(self) -> tuple[float, float]:
        return (self.lng, self.lat)


def rad(d: float) -> float:
    """Degrees to radians."""
    return d * math.pi / 180.0
