"""Pydantic schemas for route API responses."""
from pydantic import BaseModel
from typing import Optional, List


class CoordinatesSchema(BaseModel):
    """Latitude/longitude pair."""
    latitude: float
    longitude: float


class MarkerSchema(BaseModel):
    """Marker schema."""
    position: CoordinatesSchema
    label: str
    color: str


class BoundsSchema(BaseModel):
    """Camera bounds schema."""
    south_west: CoordinatesSchema
    north_east: CoordinatesSchema


class CameraSchema(BaseModel):
    """Camera fit schema."""
    bounds: BoundsSchema
    padding: int


class PolylineSchema(BaseModel):
    """Route overlay schema."""
    points: List[CoordinatesSchema]
    encoded: str
    stroke_color: str
    stroke_width: float


class RouteResponseSchema(BaseModel):
    """Rendered route for a start/destination pair."""
    start_address: str
    destination_address: str
    start: CoordinatesSchema
    destination: CoordinatesSchema
    polyline: PolylineSchema
    markers: List[MarkerSchema]
    camera: CameraSchema
    static_map_url: Optional[str] = None


class AlertSchema(BaseModel):
    """Single user-facing error message."""
    title: str
    message: str
    kind: str
