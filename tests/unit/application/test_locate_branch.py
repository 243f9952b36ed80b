"""Tests for LocateBranchUseCase with in-memory fakes."""

from __future__ import annotations

import pytest

from kebabish_geo.adapters.persistence.branch_repository import InMemoryBranchRepository
from kebabish_geo.application.ports.geocoder_port import GeocoderPort
from kebabish_geo.application.use_cases.locate_branch import LocateBranchUseCase
from kebabish_geo.domain.value_objects.enums import LocateStatus
from kebabish_geo.domain.value_objects.geocoding_result import GeocodingResult

# ─── In-memory fakes ────────────────────────────────────────────────


class FakeGeocoder(GeocoderPort):
    def __init__(self, result: GeocodingResult | None = None):
        self._result = result
        self.calls: list[str] = []

    async def geocode(self, address):
        self.calls.append(address)
        return self._result


GULBERG_CUSTOMER = GeocodingResult(
    latitude=31.512, longitude=74.345, display_name="Gulberg III, Lahore, Pakistan",
)


# ─── Tests ──────────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_locates_nearest_active_branch(sample_branches):
    uc = LocateBranchUseCase(
        geocoder=FakeGeocoder(GULBERG_CUSTOMER),
        branch_repo=InMemoryBranchRepository(sample_branches),
    )
    location = await uc.execute("Main Boulevard, Gulberg III, Lahore")

    assert location.status == LocateStatus.OK
    assert location.branch.id == "b-gulberg"
    assert location.geocoded == GULBERG_CUSTOMER
    assert location.distance_km < 1
    assert location.error is None


@pytest.mark.asyncio
async def test_invalid_address_skips_geocoder(sample_branches):
    geocoder = FakeGeocoder(GULBERG_CUSTOMER)
    uc = LocateBranchUseCase(geocoder=geocoder, branch_repo=InMemoryBranchRepository(sample_branches))

    location = await uc.execute("  abc ")

    assert location.status == LocateStatus.INVALID_ADDRESS
    assert "too short" in location.error
    assert geocoder.calls == []


@pytest.mark.asyncio
async def test_unresolved_address(sample_branches):
    uc = LocateBranchUseCase(
        geocoder=FakeGeocoder(None),
        branch_repo=InMemoryBranchRepository(sample_branches),
    )
    location = await uc.execute("Nowhere Lane, Atlantis")

    assert location.status == LocateStatus.NOT_FOUND
    assert location.branch is None
    assert location.geocoded is None


@pytest.mark.asyncio
async def test_no_branches_available():
    uc = LocateBranchUseCase(
        geocoder=FakeGeocoder(GULBERG_CUSTOMER),
        branch_repo=InMemoryBranchRepository([]),
    )
    location = await uc.execute("Main Boulevard, Gulberg III, Lahore")

    assert location.status == LocateStatus.NO_BRANCHES
    assert location.geocoded == GULBERG_CUSTOMER
    assert location.branch is None
