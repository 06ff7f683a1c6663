import itertools

import pytest

from muslimdaily.models import GeoCoordinate
from muslimdaily.services.geo.qibla import (
    MECCA,
    bearing_to,
    heading_from_orientation,
    qibla_bearing,
    relative_pointer_angle,
    smooth_heading,
)

KUALA_LUMPUR = GeoCoordinate(3.1390, 101.6869)

def test_bearing_to_same_point_is_zero():
    assert bearing_to(KUALA_LUMPUR, KUALA_LUMPUR) == 0.0
    assert bearing_to(MECCA, MECCA) == 0.0
    assert qibla_bearing(MECCA) == 0.0

def test_bearing_is_always_in_range():
    latitudes = [-90, -45.5, -1, 0, 21.4225, 60, 89.9, 90]
    longitudes = [-180, -120.3, -0.1, 0, 39.8262, 101.6869, 179.9, 180]
    points = [GeoCoordinate(lat, lon) for lat, lon in itertools.product(latitudes, longitudes)]
    for observer in points:
        bearing = qibla_bearing(observer)
        assert 0 <= bearing < 360, f"bearing {bearing} out of range for {observer}"

def test_qibla_from_kuala_lumpur():
    # Initial great-circle bearing from Kuala Lumpur toward the Kaaba.
    assert qibla_bearing(KUALA_LUMPUR) == pytest.approx(292.54, abs=0.1)

def test_cardinal_bearings():
    origin = GeoCoordinate(0, 0)
    assert bearing_to(origin, GeoCoordinate(10, 0)) == pytest.approx(0.0)
    assert bearing_to(origin, GeoCoordinate(0, 10)) == pytest.approx(90.0)
    assert bearing_to(origin, GeoCoordinate(-10, 0)) == pytest.approx(180.0)
    assert bearing_to(origin, GeoCoordinate(0, -10)) == pytest.approx(270.0)

def test_relative_pointer_angle():
    assert relative_pointer_angle(292.5, 0) == pytest.approx(292.5)
    assert relative_pointer_angle(292.5, 292.5) == pytest.approx(0.0)
    assert relative_pointer_angle(10, 350) == pytest.approx(20.0)

def test_heading_from_orientation_prefers_webkit_heading():
    assert heading_from_orientation(alpha=10, beta=5, webkit_compass_heading=123.0) == 123.0

def test_heading_from_orientation_uses_alpha_when_trustworthy():
    assert heading_from_orientation(alpha=90, absolute=True) == pytest.approx(270.0)
    assert heading_from_orientation(alpha=0, beta=30) == pytest.approx(0.0)

def test_heading_from_orientation_without_usable_reading():
    assert heading_from_orientation(alpha=None) is None
    # Device held upside down and the reading is not absolute
    assert heading_from_orientation(alpha=45, beta=120) is None
    assert heading_from_orientation(alpha=45) is None

def test_smooth_heading_moves_toward_reading():
    assert smooth_heading(100, 200) == pytest.approx(120.0)

def test_smooth_heading_wraps_around_north():
    # 350 -> 10 is a 20 degree turn clockwise, not 340 degrees back
    assert smooth_heading(350, 10) == pytest.approx(354.0)
    assert smooth_heading(10, 350) == pytest.approx(6.0)

def test_bearing_same_place_written_two_ways_is_zero():
    # The antimeridian can be written as +180 or -180
    assert bearing_to(GeoCoordinate(0, 180), GeoCoordinate(0, -180)) == 0.0
    assert bearing_to(GeoCoordinate(45, -180), GeoCoordinate(45, 180)) == 0.0
    # Every longitude names the same pole
    assert bearing_to(GeoCoordinate(90, 0), GeoCoordinate(90, 50)) == 0.0
    assert bearing_to(GeoCoordinate(-90, 10), GeoCoordinate(-90, -170)) == 0.0

def test_bearing_nearby_points_are_not_coincident():
    assert bearing_to(GeoCoordinate(0, 179.5), GeoCoordinate(0, -179.5)) == pytest.approx(90.0)
    assert bearing_to(GeoCoordinate(89, 0), GeoCoordinate(90, 50)) == pytest.approx(0.0, abs=1e-6)
