"""Profile - Annotated vertices plus statistics of one elevation profile.

The output handed to rendering and map collaborators:
- vertices: ordered vertices with cumulative distance
- statistics: ProfileStatistics summary

Chart layers read distances_m / elevations_m; map layers read to_geometry().
"""

from dataclasses import dataclass
from itertools import groupby
from typing import Any, Union

import numpy as np
from shapely.geometry import LineString, MultiLineString

from terrain_profile.model.profile_statistics import ProfileStatistics
from terrain_profile.model.vertex import Vertex


@dataclass
class Profile:
    """A computed elevation profile.

    Attributes:
        vertices: Annotated vertices (distance_m filled in, non-decreasing)
        statistics: Aggregate metrics derived from the vertices
    """

    vertices: list[Vertex]
    statistics: ProfileStatistics

    @property
    def distances_m(self) -> np.ndarray:
        """Cumulative distance of every vertex (chart x series)."""
        return np.array([v.distance_m for v in self.vertices], dtype=float)

    @property
    def elevations_m(self) -> np.ndarray:
        """Elevation of every vertex (chart y series)."""
        return np.array([v.elevation for v in self.vertices], dtype=float)

    @property
    def part_count(self) -> int:
        """Number of source parts represented in the profile."""
        return len({v.part_index for v in self.vertices})

    def parts(self) -> list[list[Vertex]]:
        """Vertices grouped by consecutive part index."""
        return [list(group) for _, group in groupby(self.vertices, key=lambda v: v.part_index)]

    def to_geometry(self) -> Union[LineString, MultiLineString]:
        """Get Shapely geometry of the profile path with z = elevation.

        Returns:
            LineString when the profile has a single part, MultiLineString otherwise.

        Raises:
            ValueError: if any part has fewer than two vertices.
        """
        parts = self.parts()
        if any(len(part) < 2 for part in parts):
            raise ValueError("Every part needs at least two vertices to build a line geometry")

        lines = [[v.lon_lat_elevation for v in part] for part in parts]
        if len(lines) == 1:
            return LineString(lines[0])
        return MultiLineString(lines)

    def to_dict(self) -> dict[str, Any]:
        return {
            "vertices": [v.to_dict() for v in self.vertices],
            "statistics": self.statistics.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Profile":
        """Create Profile from dictionary (inverse of to_dict)."""
        return cls(
            vertices=[Vertex.from_dict(v) for v in data["vertices"]],
            statistics=ProfileStatistics(**data["statistics"]),
        )

    def __repr__(self) -> str:
        return f"Profile({len(self.vertices)} vertices, {self.part_count} part(s), {self.statistics!r})"
