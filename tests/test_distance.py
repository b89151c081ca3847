import math

import pytest

from coordshift.core.distance import distance, distance_m


def test_same_point_zero_distance():
    assert distance_m(104.070497, 30.588777, 104.070497, 30.588777) == 0
    assert distance_m(-73.9857, -40.7484, -73.9857, -40.7484) == 0


def test_reference_distance_in_meters():
    d = distance_m(104.070497, 30.588777, 104.070785, 30.581813)
    assert d == pytest.approx(775.7200780129707, rel=1e-6)


def test_long_distances():
    # Shanghai -> Beijing, roughly 1070 km.
    assert distance_m(121.4737, 31.2304, 116.4074, 39.9042) == pytest.approx(1068505.8062575192, rel=1e-9)
    # New York -> London exercises the western-longitude fold.
    assert distance_m(-73.9857, 40.7484, -0.1276, 51.5072) == pytest.approx(5572665.4500867771, rel=1e-9)
    # Mixed hemispheres exercise the southern-latitude fold.
    assert distance_m(10.0, -10.0, -20.0, 30.0) == pytest.approx(7655064.6347222906, rel=1e-9)


@pytest.mark.parametrize(
    "a,b",
    [
        ((104.070497, 30.588777), (104.070785, 30.581813)),
        ((121.4737, 31.2304), (116.4074, 39.9042)),
        ((-73.9857, 40.7484), (-0.1276, 51.5072)),
        ((10.0, -10.0), (-20.0, 30.0)),
    ],
)
def test_symmetry(a, b):
    d1 = distance_m(a[0], a[1], b[0], b[1])
    d2 = distance_m(b[0], b[1], a[0], a[1])
    assert d1 == pytest.approx(d2, rel=1e-9)


def test_zero_latitude_is_not_folded():
    # Latitude exactly 0 skips both hemisphere folds and is projected onto the pole,
    # so two points on the equator collapse together.
    assert distance_m(0.0, 0.0, 180.0, 0.0) == 0


def test_alias_and_non_finite_input():
    assert distance is distance_m
    assert math.isnan(distance_m(math.inf, 10.0, 20.0, 10.0))
    assert math.isnan(distance_m(math.nan, 10.0, 20.0, 10.0))
