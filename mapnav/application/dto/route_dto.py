"""Data Transfer Objects for route responses."""
from dataclasses import dataclass
from typing import List, Optional

from mapnav.domain.value_objects.coordinates import Coordinates
from mapnav.domain.value_objects.marker import CameraUpdate, Marker
from mapnav.domain.value_objects.path import Path


@dataclass
class RouteDTO:
    """Everything drawn for one start/destination pair."""
    start_address: str
    destination_address: str
    start: Coordinates
    destination: Coordinates
    path: Path
    markers: List[Marker]
    camera: CameraUpdate
    static_map_url: Optional[str] = None
