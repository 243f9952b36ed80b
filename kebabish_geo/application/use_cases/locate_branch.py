"""LocateBranchUseCase — customer address → geocode → nearest branch."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from kebabish_geo.application.ports.branch_repo import BranchRepository
from kebabish_geo.application.ports.geocoder_port import GeocoderPort
from kebabish_geo.domain.entities.branch import Branch
from kebabish_geo.domain.policies.branch_selection import select_nearest_branch
from kebabish_geo.domain.value_objects.address import validate_address
from kebabish_geo.domain.value_objects.enums import LocateStatus
from kebabish_geo.domain.value_objects.geocoding_result import GeocodingResult

logger = logging.getLogger(__name__)


@dataclass
class BranchLocation:
    """Outcome of locating the branch nearest to an address."""

    status: LocateStatus
    geocoded: GeocodingResult | None = None
    branch: Branch | None = None
    distance_km: float | None = None
    error: str | None = None


class LocateBranchUseCase:
    """Orchestrates address validation, geocoding and branch selection."""

    def __init__(self, geocoder: GeocoderPort, branch_repo: BranchRepository):
        self._geocoder = geocoder
        self._branches = branch_repo

    async def execute(self, address: str) -> BranchLocation:
        """Find the nearest active branch to ``address``.

        Pipeline:
        1. Validate the address (no network call for junk input)
        2. Geocode it
        3. Pick the nearest active branch with a known location
        """
        validation = validate_address(address)
        if not validation.valid:
            return BranchLocation(status=LocateStatus.INVALID_ADDRESS, error=validation.error)

        geocoded = await self._geocoder.geocode(address)
        if geocoded is None:
            return BranchLocation(
                status=LocateStatus.NOT_FOUND,
                error="Address could not be located",
            )

        branches = await self._branches.get_active()
        try:
            selection = select_nearest_branch(geocoded.point, branches)
        except ValueError as e:
            logger.warning("No branch available for '%s': %s", address, e)
            return BranchLocation(status=LocateStatus.NO_BRANCHES, geocoded=geocoded, error=str(e))

        logger.info("%s for '%s'", selection.reason, address)
        return BranchLocation(
            status=LocateStatus.OK,
            geocoded=geocoded,
            branch=selection.branch,
            distance_km=selection.distance_km,
        )
