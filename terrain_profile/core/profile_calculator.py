"""ProfileCalculator - Runs normalization and aggregation for one geometry.

Example:
    profile = compute_profile({"type": "LineString", "coordinates": [[24.04, 42.09, 560], ...]})
    profile.statistics.ascend_m
"""

import logging
from typing import Any, Optional

from terrain_profile.core.geometry_normalizer import GeometryNormalizer
from terrain_profile.core.profile_aggregator import ProfileAggregator
from terrain_profile.model.profile import Profile

logger = logging.getLogger(__name__)


class ProfileCalculator:
    """One-shot elevation profile calculation.

    Holds no per-geometry state, so one instance can profile many geometries.

    Args:
        include_part_gaps: See ProfileAggregator. Defaults to ProfileConfig.INCLUDE_PART_GAPS.
    """

    def __init__(self, include_part_gaps: Optional[bool] = None) -> None:
        self.normalizer = GeometryNormalizer()
        self.aggregator = ProfileAggregator(include_part_gaps=include_part_gaps)

    def calculate(self, geometry: Any) -> Profile:
        """Compute the elevation profile of a path geometry.

        Raises:
            MissingGeometryError: geometry is None or has no vertices.
            InvalidGeometryError: geometry shape is not supported.
        """
        vertices = self.normalizer.normalize(geometry=geometry)
        annotated, stats = self.aggregator.aggregate(vertices=vertices)
        profile = Profile(vertices=annotated, statistics=stats)

        logger.info(
            f"Profile computed: {len(annotated)} vertices, {profile.part_count} part(s), "
            f"length={stats.length_m:.0f}m, ascend={stats.ascend_m:.0f}m, descend={stats.descend_m:.0f}m"
        )
        return profile


def compute_profile(geometry: Any, include_part_gaps: Optional[bool] = None) -> Profile:
    """Convenience wrapper around ProfileCalculator.calculate()."""
    return ProfileCalculator(include_part_gaps=include_part_gaps).calculate(geometry=geometry)
