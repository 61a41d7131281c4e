"""
Location schemas.

Coordinates are WGS84 degrees, (longitude, latitude) ordered like GeoJSON.
"""

from pydantic import BaseModel, Field
from typing import Optional


class Coordinate(BaseModel):
    """A point on Earth."""
    longitude: float = Field(..., ge=-180, le=180, description="Longitude in degrees")
    latitude: float = Field(..., ge=-90, le=90, description="Latitude in degrees")
    
    model_config = {"frozen": True}


class GeoPoint(BaseModel):
    """Named location produced by geocoding or a map click."""
    name: str = Field(..., min_length=1, max_length=200)
    address: Optional[str] = Field(None, max_length=500)
    coordinate: Coordinate
    
    model_config = {"frozen": True}
