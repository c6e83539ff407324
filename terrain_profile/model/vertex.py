"""Vertex - A normalized path vertex with cumulative profile distance.

A Vertex is a single geographic coordinate with elevation, plus the running
planar distance from the first vertex of the profile.

Created by GeometryNormalizer (distance placeholder 0), annotated once by
ProfileAggregator (which returns new instances).
"""

from dataclasses import dataclass
from typing import Any

from terrain_profile.core.geo_calculator import GeoCalculator


@dataclass
class Vertex:
    """A profile vertex in 3D space.

    Attributes:
        lon: Longitude in decimal degrees (WGS84)
        lat: Latitude in decimal degrees (WGS84)
        elevation: Elevation in meters (0 when the source coordinate has none)
        distance_m: Cumulative planar distance from the first vertex in meters
        part_index: Index of the source part in a multi-path geometry

    Example:
        vertex = Vertex(lon=24.0482193, lat=42.0931683, elevation=560.0)
    """

    lon: float
    lat: float
    elevation: float = 0.0
    distance_m: float = 0.0
    part_index: int = 0

    @property
    def lon_lat_elevation(self) -> tuple[float, float, float]:
        """Return (lon, lat, elevation) tuple - GeoJSON 3D order."""
        return (self.lon, self.lat, self.elevation)

    def distance_to(self, other: "Vertex") -> float:
        """Calculate haversine distance to another vertex in meters."""
        return GeoCalculator.haversine_distance_m(
            lat1=self.lat,
            lon1=self.lon,
            lat2=other.lat,
            lon2=other.lon,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "lon": self.lon,
            "lat": self.lat,
            "elevation": self.elevation,
            "distance_m": self.distance_m,
            "part_index": self.part_index,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Vertex":
        """Create Vertex from dictionary."""
        return cls(
            lon=data["lon"],
            lat=data["lat"],
            elevation=data.get("elevation", 0.0),
            distance_m=data.get("distance_m", 0.0),
            part_index=data.get("part_index", 0),
        )

    def __repr__(self) -> str:
        return (
            f"Vertex(lon={self.lon:.5f}, lat={self.lat:.5f}, elev={self.elevation:.1f}m, "
            f"dist={self.distance_m:.1f}m)"
        )
