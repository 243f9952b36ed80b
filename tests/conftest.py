"""Pytest configuration and shared fixtures."""

import pytest

from kebabish_geo.domain.entities.branch import Branch
from kebabish_geo.domain.value_objects.geo_point import GeoPoint


class FakeClock:
    """Manually advanced clock for cache / rate-limit expiry tests."""

    def __init__(self, start: float = 1_000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def sample_branches():
    return [
        Branch(
            id="b-gulberg", name="Kebabish Gulberg", city="Lahore",
            address="Main Boulevard, Gulberg III",
            location=GeoPoint(latitude=31.5102, longitude=74.3441),
        ),
        Branch(
            id="b-dha", name="Kebabish DHA", city="Lahore",
            address="Y Block, DHA Phase 3",
            location=GeoPoint(latitude=31.4754, longitude=74.3782),
        ),
        Branch(
            id="b-f7", name="Kebabish F-7", city="Islamabad",
            address="Jinnah Super Market",
            location=GeoPoint(latitude=33.7215, longitude=73.0433),
        ),
        Branch(
            id="b-closed", name="Kebabish Mall Road", city="Lahore",
            address="Mall Road",
            location=GeoPoint(latitude=31.5204, longitude=74.3587),
            is_active=False,
        ),
        Branch(id="b-new", name="Kebabish Johar Town", city="Lahore", address=None),
    ]
