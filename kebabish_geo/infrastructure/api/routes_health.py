"""Health check endpoint."""

from fastapi import APIRouter, Depends

from kebabish_geo.adapters.geocoder.nominatim_adapter import NominatimAdapter
from kebabish_geo.application.ports.branch_repo import BranchRepository
from kebabish_geo.infrastructure.api.dependencies import get_branch_repo, get_geocoder

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check(
    geocoder: NominatimAdapter = Depends(get_geocoder),
    branch_repo: BranchRepository = Depends(get_branch_repo),
):
    """Report geocoder cache state and branch count."""
    branches = await branch_repo.get_all()
    return {
        "status": "ok",
        "geocoder": {
            "cached_addresses": len(geocoder.cache),
            "rate_limited_addresses": len(geocoder.rate_limiter),
        },
        "branches": len(branches),
        "service": "Kebabish Pizza — branch geocoding",
    }
