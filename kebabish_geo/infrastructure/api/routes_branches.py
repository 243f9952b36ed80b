"""Branch endpoints — list branches, find the nearest one to an address."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from kebabish_geo.application.ports.branch_repo import BranchRepository
from kebabish_geo.application.use_cases.locate_branch import LocateBranchUseCase
from kebabish_geo.domain.entities.branch import Branch
from kebabish_geo.domain.value_objects.enums import LocateStatus
from kebabish_geo.infrastructure.api.dependencies import get_branch_repo, get_locate_branch_uc
from kebabish_geo.infrastructure.api.routes_geocoding import AddressRequest

router = APIRouter(prefix="/branches", tags=["branches"])


@router.get("")
async def list_branches(branch_repo: BranchRepository = Depends(get_branch_repo)):
    """List all branches."""
    branches = await branch_repo.get_all()
    return {
        "total": len(branches),
        "branches": [_serialize_branch(b) for b in branches],
    }


@router.post("/nearest")
async def nearest_branch(
    body: AddressRequest,
    locate_uc: LocateBranchUseCase = Depends(get_locate_branch_uc),
):
    """Geocode a customer address and return the nearest active branch."""
    location = await locate_uc.execute(body.address)

    if location.status == LocateStatus.INVALID_ADDRESS:
        raise HTTPException(status_code=422, detail=location.error)
    if location.status in (LocateStatus.NOT_FOUND, LocateStatus.NO_BRANCHES):
        raise HTTPException(status_code=404, detail=location.error)

    return {
        "status": location.status.value,
        "branch": _serialize_branch(location.branch),
        "distance_km": location.distance_km,
        "customer": {
            "latitude": location.geocoded.latitude,
            "longitude": location.geocoded.longitude,
            "display_name": location.geocoded.display_name,
        },
    }


def _serialize_branch(b: Branch) -> dict:
    return {
        "id": b.id,
        "name": b.name,
        "city": b.city,
        "address": b.address,
        "latitude": b.location.latitude if b.location else None,
        "longitude": b.location.longitude if b.location else None,
        "is_active": b.is_active,
    }
