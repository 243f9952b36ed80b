"""Tests for GeoPoint value object and calculate_distance."""

import pytest

from kebabish_geo.domain.value_objects.geo_point import GeoPoint, calculate_distance


def test_haversine_same_point():
    """Distance from a point to itself should be 0."""
    p = GeoPoint(latitude=31.5204, longitude=74.3587)
    assert p.haversine_km(p) == 0.0


def test_haversine_lahore_to_islamabad():
    """Lahore to Islamabad is approximately 270 km (straight line)."""
    lahore = GeoPoint(latitude=31.5204, longitude=74.3587)
    islamabad = GeoPoint(latitude=33.6844, longitude=73.0479)
    distance = lahore.haversine_km(islamabad)
    assert 250 < distance < 290


def test_haversine_antipodal_does_not_raise():
    """Opposite sides of the globe give half the circumference."""
    a = GeoPoint(latitude=0.0, longitude=0.0)
    b = GeoPoint(latitude=0.0, longitude=180.0)
    assert a.haversine_km(b) == pytest.approx(20015.09, abs=0.01)


def test_geo_point_is_frozen():
    """GeoPoint should be immutable."""
    p = GeoPoint(latitude=31.0, longitude=74.0)
    try:
        p.latitude = 50.0
        assert False, "Should have raised FrozenInstanceError"
    except AttributeError:
        pass


# ─── calculate_distance ──────────────────────────────────────────────


@pytest.mark.parametrize(
    "lat, lon",
    [(0.0, 0.0), (31.5204, 74.3587), (-33.8688, 151.2093), (90.0, 0.0)],
)
def test_calculate_distance_same_point_is_zero(lat, lon):
    assert calculate_distance(lat, lon, lat, lon) == 0


def test_calculate_distance_is_symmetric():
    there = calculate_distance(31.5204, 74.3587, 24.8607, 67.0011)
    back = calculate_distance(24.8607, 67.0011, 31.5204, 74.3587)
    assert there == back


def test_calculate_distance_one_degree_longitude_on_equator():
    """(0,0) → (0,1) is 111.19 km after rounding."""
    assert calculate_distance(0, 0, 0, 1) == pytest.approx(111.19, abs=0.5)
    assert calculate_distance(0, 0, 0, 1) == 111.19


def test_calculate_distance_rounds_to_two_decimals():
    distance = calculate_distance(31.5204, 74.3587, 33.6844, 73.0479)
    assert distance == round(distance, 2)
    assert distance * 100 == pytest.approx(round(distance * 100))
