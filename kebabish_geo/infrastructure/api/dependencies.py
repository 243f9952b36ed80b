"""FastAPI dependency injection — wires adapters into use cases.

The geocoder and branch repository are built once in the app lifespan and
kept on ``app.state``; these providers hand them to the routers.
"""

from __future__ import annotations

from fastapi import Depends, Request

from kebabish_geo.application.ports.branch_repo import BranchRepository
from kebabish_geo.application.ports.geocoder_port import GeocoderPort
from kebabish_geo.application.use_cases.locate_branch import LocateBranchUseCase


def get_geocoder(request: Request) -> GeocoderPort:
    return request.app.state.geocoder


def get_branch_repo(request: Request) -> BranchRepository:
    return request.app.state.branch_repo


def get_locate_branch_uc(
    geocoder: GeocoderPort = Depends(get_geocoder),
    branch_repo: BranchRepository = Depends(get_branch_repo),
) -> LocateBranchUseCase:
    return LocateBranchUseCase(geocoder=geocoder, branch_repo=branch_repo)
