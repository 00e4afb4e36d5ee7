"""Domain value objects."""
from mapnav.domain.value_objects.coordinates import Coordinates
from mapnav.domain.value_objects.marker import CameraUpdate, Marker, MarkerColor, PolylineStyle
from mapnav.domain.value_objects.path import CoordinateBounds, Path

__all__ = [
    "CameraUpdate",
    "CoordinateBounds",
    "Coordinates",
    "Marker",
    "MarkerColor",
    "Path",
    "PolylineStyle",
]
