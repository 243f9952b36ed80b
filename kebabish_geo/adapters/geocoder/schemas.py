"""Pydantic schema for Nominatim ``/search?format=json`` results."""

from pydantic import BaseModel, ConfigDict, Field


class NominatimPlace(BaseModel):
    """One candidate match. Nominatim sends ``lat``/``lon`` as strings."""

    model_config = ConfigDict(extra="ignore")

    lat: float = Field(..., ge=-90, le=90)
    lon: float = Field(..., ge=-180, le=180)
    display_name: str
