"""Port interfaces for the route screen's collaborators.

The use case only talks to these protocols; the Google clients and the map
surfaces are swapped in without changing application logic.
"""
from typing import Protocol

from mapnav.domain.value_objects.coordinates import Coordinates
from mapnav.domain.value_objects.marker import CameraUpdate, Marker, PolylineStyle
from mapnav.domain.value_objects.path import Path


class Geocoder(Protocol):
    async def geocode(self, address: str) -> Coordinates:
        """Return coordinates for ``address`` or raise a NavigationError."""


class DirectionsProvider(Protocol):
    async def get_route(self, origin: Coordinates, destination: Coordinates) -> Path:
        """Return the decoded route between two points or raise a NavigationError."""


class MapSurface(Protocol):
    """Anything that can draw a route: a map SDK view, a static image, a recorder."""

    def clear(self) -> None:
        """Remove previously drawn overlays."""

    def add_polyline(self, path: Path, style: PolylineStyle) -> None:
        """Draw ``path`` as a line overlay."""

    def add_marker(self, marker: Marker) -> None:
        """Drop a pin."""

    def move_camera(self, update: CameraUpdate) -> None:
        """Frame the camera."""
