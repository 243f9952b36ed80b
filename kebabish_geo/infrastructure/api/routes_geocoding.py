"""Geocoding endpoints — validate, geocode, distance."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel

from kebabish_geo.application.ports.geocoder_port import GeocoderPort
from kebabish_geo.domain.value_objects.address import validate_address
from kebabish_geo.domain.value_objects.geo_point import calculate_distance
from kebabish_geo.infrastructure.api.dependencies import get_geocoder

router = APIRouter(tags=["geocoding"])


class AddressRequest(BaseModel):
    address: str


@router.post("/geocode/validate")
async def validate(body: AddressRequest):
    """Check an address before geocoding it."""
    validation = validate_address(body.address)
    return {"valid": validation.valid, "error": validation.error}


@router.get("/geocode")
async def geocode(
    address: str = Query(...),
    geocoder: GeocoderPort = Depends(get_geocoder),
):
    """Resolve an address to coordinates."""
    validation = validate_address(address)
    if not validation.valid:
        raise HTTPException(status_code=422, detail=validation.error)

    result = await geocoder.geocode(address)
    if result is None:
        raise HTTPException(status_code=404, detail="Address could not be located")

    return {
        "latitude": result.latitude,
        "longitude": result.longitude,
        "display_name": result.display_name,
    }


@router.get("/distance")
async def distance(
    lat1: float = Query(..., ge=-90, le=90),
    lon1: float = Query(..., ge=-180, le=180),
    lat2: float = Query(..., ge=-90, le=90),
    lon2: float = Query(..., ge=-180, le=180),
):
    """Great-circle distance between two points, in km (2 decimals)."""
    return {"distance_km": calculate_distance(lat1, lon1, lat2, lon2)}
