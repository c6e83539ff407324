"""ProfileAggregator - Single-pass distance and elevation aggregation.

Walks consecutive vertex pairs once, left to right:
1. Planar segment distance (Haversine, spherical Earth R = 6,378,137 m)
2. Running length, assigned as cumulative distance of the second vertex
3. Elevation delta split into ascend (dh > 0) and descend (dh <= 0)
4. Oblique length sqrt(dh² + d²) summed per segment
5. Running min/max elevation, seeded with ProfileConfig sentinels

Ascend and descend are reported as non-negative magnitudes. NaN values are
not validated and propagate into the statistics they touch.
"""

import logging
from dataclasses import replace
from typing import Optional, Sequence

import numpy as np

from terrain_profile.constants import ProfileConfig
from terrain_profile.core.geo_calculator import GeoCalculator
from terrain_profile.model.geometry_error import MissingGeometryError
from terrain_profile.model.profile_statistics import ProfileStatistics
from terrain_profile.model.vertex import Vertex

logger = logging.getLogger(__name__)


class ProfileAggregator:
    """Annotates vertices with cumulative distance and computes statistics.

    Args:
        include_part_gaps: Count the segment joining consecutive parts of a
            multi-path geometry. When False, that segment adds no distance,
            no ascent/descent and no oblique length.
    """

    def __init__(self, include_part_gaps: Optional[bool] = None) -> None:
        self.include_part_gaps = ProfileConfig.INCLUDE_PART_GAPS if include_part_gaps is None else include_part_gaps

    def _is_counted(self, start: Vertex, end: Vertex) -> bool:
        return self.include_part_gaps or start.part_index == end.part_index

    def aggregate(self, vertices: Sequence[Vertex]) -> tuple[list[Vertex], ProfileStatistics]:
        """Compute annotated vertices and profile statistics.

        The input vertices are not modified; new Vertex instances are returned.

        Args:
            vertices: Normalized vertices, at least one.

        Returns:
            Tuple (annotated vertices, statistics).

        Raises:
            MissingGeometryError: if vertices is empty.
        """
        if not vertices:
            raise MissingGeometryError("Cannot aggregate a profile without vertices")

        first = vertices[0]
        annotated = [replace(first, distance_m=0.0)]

        # Single vertex: loop never runs, extremes come from the vertex itself
        if len(vertices) == 1:
            stats = ProfileStatistics(
                length_m=0.0,
                real_length_m=0.0,
                ascend_m=0.0,
                descend_m=0.0,
                min_elevation_m=first.elevation,
                max_elevation_m=first.elevation,
            )
            return annotated, stats

        length = 0.0
        real_length = 0.0
        ascend = 0.0
        descend = 0.0
        skipped_gaps = 0

        for start, end in zip(vertices, vertices[1:]):
            if not self._is_counted(start=start, end=end):
                skipped_gaps += 1
                annotated.append(replace(end, distance_m=length))
                continue

            segment_m = start.distance_to(other=end)
            length += segment_m
            annotated.append(replace(end, distance_m=length))

            dh = end.elevation - start.elevation
            if dh <= 0:
                descend += dh
            else:
                ascend += dh

            real_length += GeoCalculator.oblique_distance_m(planar_distance_m=segment_m, elevation_delta_m=dh)

        # Every vertex is in some pair, so this equals the per-pair running min/max.
        # np.min/np.max propagate NaN, builtin min/max would drop it
        elevations = np.array([v.elevation for v in vertices], dtype=float)
        min_elevation = float(np.min(np.append(elevations, ProfileConfig.MIN_ELEVATION_SEED_M)))
        max_elevation = float(np.max(np.append(elevations, ProfileConfig.MAX_ELEVATION_SEED_M)))

        stats = ProfileStatistics(
            length_m=length,
            real_length_m=real_length,
            ascend_m=abs(ascend),
            descend_m=abs(descend),
            min_elevation_m=min_elevation,
            max_elevation_m=max_elevation,
        )
        if skipped_gaps:
            logger.debug(f"Skipped {skipped_gaps} part gap segment(s)")
        logger.debug(f"Aggregated {len(annotated)} vertices: {stats!r}")
        return annotated, stats
