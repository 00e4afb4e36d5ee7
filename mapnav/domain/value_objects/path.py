"""Path value object - an immutable ordered sequence of coordinates."""
from dataclasses import dataclass
from typing import Iterable, Iterator, Tuple

from mapnav.domain.value_objects.coordinates import Coordinates
from mapnav.utils.polyline import decode_polyline, encode_polyline


@dataclass(frozen=True)
class CoordinateBounds:
    """Axis-aligned box spanning a set of coordinates (used to frame the camera)."""
    south_west: Coordinates
    north_east: Coordinates

    @classmethod
    def around(cls, coordinate: Coordinates) -> "CoordinateBounds":
        return cls(south_west=coordinate, north_east=coordinate)

    def including(self, coordinate: Coordinates) -> "CoordinateBounds":
        """Return bounds grown to contain ``coordinate``."""
        return CoordinateBounds(
            south_west=Coordinates(
                latitude=min(self.south_west.latitude, coordinate.latitude),
                longitude=min(self.south_west.longitude, coordinate.longitude),
            ),
            north_east=Coordinates(
                latitude=max(self.north_east.latitude, coordinate.latitude),
                longitude=max(self.north_east.longitude, coordinate.longitude),
            ),
        )

    def contains(self, coordinate: Coordinates) -> bool:
        return (
            self.south_west.latitude <= coordinate.latitude <= self.north_east.latitude
            and self.south_west.longitude <= coordinate.longitude <= self.north_east.longitude
        )

    def to_dict(self) -> dict:
        return {
            "south_west": self.south_west.to_dict(),
            "north_east": self.north_east.to_dict(),
        }


@dataclass(frozen=True)
class Path:
    """Ordered, immutable route geometry."""
    points: Tuple[Coordinates, ...]

    @classmethod
    def from_points(cls, points: Iterable[Coordinates]) -> "Path":
        return cls(points=tuple(points))

    @classmethod
    def from_encoded(cls, encoded: str) -> "Path":
        """Decode a Google encoded polyline.

        Raises:
            ValueError: if the string is not a valid polyline or a decoded
                point falls outside the valid latitude/longitude ranges
        """
        return cls(points=tuple(
            Coordinates(latitude=lat, longitude=lng)
            for lat, lng in decode_polyline(encoded)
        ))

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[Coordinates]:
        return iter(self.points)

    def __getitem__(self, index: int) -> Coordinates:
        return self.points[index]

    def is_empty(self) -> bool:
        return not self.points

    def bounds(self) -> CoordinateBounds:
        """Smallest bounds containing every point of the path."""
        if not self.points:
            raise ValueError("Cannot compute bounds of an empty path")
        bounds = CoordinateBounds.around(self.points[0])
        for point in self.points[1:]:
            bounds = bounds.including(point)
        return bounds

    def encode(self) -> str:
        return encode_polyline((p.latitude, p.longitude) for p in self.points)

    def to_list(self) -> list:
        return [point.to_dict() for point in self.points]
