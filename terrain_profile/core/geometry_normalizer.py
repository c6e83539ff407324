"""GeometryNormalizer - Converts input geometry into one ordered vertex list.

Multi-path input is flattened by concatenating parts in declaration order.
No gap marker is inserted between parts; each vertex keeps its part_index
so the aggregator can decide whether to count the joining segment.
"""

import logging
from typing import Any

from terrain_profile.constants import ProfileConfig
from terrain_profile.model.geometry_error import MissingGeometryError
from terrain_profile.model.input_geometry import (
    Coordinate,
    CoordinateList,
    InputGeometry,
    MultiPath,
    SinglePath,
    parse_geometry,
)
from terrain_profile.model.vertex import Vertex

logger = logging.getLogger(__name__)


class GeometryNormalizer:
    """Pure transform from input geometry to Vertex list."""

    @staticmethod
    def to_vertex(coordinate: Coordinate, part_index: int = 0) -> Vertex:
        """Map [lon, lat, elevation?] to a Vertex with distance placeholder 0."""
        lon, lat, elevation = coordinate
        return Vertex(
            lon=lon,
            lat=lat,
            elevation=ProfileConfig.DEFAULT_ELEVATION_M if elevation is None else elevation,
            distance_m=0.0,
            part_index=part_index,
        )

    def flatten(self, geometry: InputGeometry) -> list[Vertex]:
        """Flatten a parsed geometry into vertices, preserving order."""
        if isinstance(geometry, MultiPath):
            return [
                self.to_vertex(coordinate=c, part_index=part_index)
                for part_index, part in enumerate(geometry.parts)
                for c in part
            ]
        if isinstance(geometry, (SinglePath, CoordinateList)):
            return [self.to_vertex(coordinate=c) for c in geometry.coordinates]
        raise RuntimeError(f"Unknown geometry variant: {type(geometry).__name__}")

    def normalize(self, geometry: Any) -> list[Vertex]:
        """Validate input and return its vertices.

        Args:
            geometry: LineString / MultiLineString mapping (optionally wrapped in a
                Feature), object with __geo_interface__, or flat coordinate list.

        Returns:
            Ordered vertices, at least one.

        Raises:
            MissingGeometryError: geometry is None or yields no vertices.
            InvalidGeometryError: unsupported shape or malformed coordinates.
        """
        parsed = parse_geometry(raw=geometry)
        vertices = self.flatten(geometry=parsed)
        if not vertices:
            raise MissingGeometryError(f"{type(parsed).__name__} contains no vertices")

        logger.debug(f"Normalized {type(parsed).__name__} into {len(vertices)} vertices")
        return vertices
