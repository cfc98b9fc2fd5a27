"""Circular search area used by the nearby-entrance and nearby-stop queries."""

from dataclasses import dataclass


@dataclass(frozen=True)
class RadiusAtLatLong:
    """A radius (in meters) around a latitude/longitude point."""

    radius: int
    latitude: float
    longitude: float

    def to_query(self) -> list[tuple[str, str]]:
        """Query pairs in the order the API documents them."""
        return [
            ("Radius", str(self.radius)),
            ("Lat", str(self.latitude)),
            ("Lon", str(self.longitude)),
        ]
