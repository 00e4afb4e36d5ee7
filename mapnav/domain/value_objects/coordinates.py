"""Coordinate value object - immutable and validated."""
from dataclasses import dataclass

from mapnav.constants import MAX_LATITUDE, MAX_LONGITUDE, MIN_LATITUDE, MIN_LONGITUDE


@dataclass(frozen=True)
class Coordinates:
    """Immutable coordinate value object."""
    latitude: float
    longitude: float

    def __post_init__(self):
        """Validate coordinates."""
        if not MIN_LATITUDE <= self.latitude <= MAX_LATITUDE:
            raise ValueError(f"Latitude must be between -90 and 90, got {self.latitude}")
        if not MIN_LONGITUDE <= self.longitude <= MAX_LONGITUDE:
            raise ValueError(f"Longitude must be between -180 and 180, got {self.longitude}")

    @classmethod
    def from_location(cls, location: dict) -> "Coordinates":
        """Build from a Google ``{"lat": ..., "lng": ...}`` location object."""
        try:
            latitude, longitude = float(location["lat"]), float(location["lng"])
        except OverflowError as e:
            raise ValueError(f"Coordinate out of float range: {e}") from e
        return cls(latitude=latitude, longitude=longitude)

    def to_query(self) -> str:
        """Format as ``lat,lng`` with 7 fixed decimals (never scientific notation)."""
        return f"{self.latitude:.7f},{self.longitude:.7f}"

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {"latitude": self.latitude, "longitude": self.longitude}
