"""Map overlay value objects: markers, polyline style and camera updates."""
from dataclasses import dataclass
from enum import Enum

from mapnav.domain.value_objects.coordinates import Coordinates
from mapnav.domain.value_objects.path import CoordinateBounds


class MarkerColor(str, Enum):
    """Marker pin colours (values match Google Static Maps colour names)."""
    GREEN = "green"
    RED = "red"
    BLUE = "blue"


@dataclass(frozen=True)
class Marker:
    """A labelled pin on the map. Rendered, never persisted."""
    position: Coordinates
    label: str
    color: MarkerColor

    def to_dict(self) -> dict:
        return {
            "position": self.position.to_dict(),
            "label": self.label,
            "color": self.color.value,
        }


@dataclass(frozen=True)
class PolylineStyle:
    """Stroke settings for a route overlay."""
    stroke_color: MarkerColor = MarkerColor.BLUE
    stroke_width: float = 5.0


@dataclass(frozen=True)
class CameraUpdate:
    """Fit the camera to ``bounds`` leaving ``padding`` points on every side."""
    bounds: CoordinateBounds
    padding: int = 50

    def to_dict(self) -> dict:
        return {"bounds": self.bounds.to_dict(), "padding": self.padding}
