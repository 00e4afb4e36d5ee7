"""Map surface that records overlays instead of drawing them."""
import logging
from typing import Any, Dict, List, Optional, Tuple

from mapnav.domain.value_objects.marker import CameraUpdate, Marker, PolylineStyle
from mapnav.domain.value_objects.path import Path

logger = logging.getLogger(__name__)


class InMemoryMapSurface:
    """Keeps every drawn overlay in memory.

    Used by the HTTP layer to serialise what a map view would show, and by
    tests to assert on rendering.
    """

    def __init__(self):
        self.polylines: List[Tuple[Path, PolylineStyle]] = []
        self.markers: List[Marker] = []
        self.camera: Optional[CameraUpdate] = None

    def clear(self) -> None:
        self.polylines.clear()
        self.markers.clear()
        self.camera = None

    def add_polyline(self, path: Path, style: PolylineStyle) -> None:
        self.polylines.append((path, style))
        logger.debug(f"Polyline added: {len(path)} points")

    def add_marker(self, marker: Marker) -> None:
        self.markers.append(marker)

    def move_camera(self, update: CameraUpdate) -> None:
        self.camera = update

    def snapshot(self) -> Dict[str, Any]:
        """Serialisable view of the current surface state."""
        return {
            "polylines": [
                {
                    "points": path.to_list(),
                    "stroke_color": style.stroke_color.value,
                    "stroke_width": style.stroke_width,
                }
                for path, style in self.polylines
            ],
            "markers": [marker.to_dict() for marker in self.markers],
            "camera": self.camera.to_dict() if self.camera else None,
        }
