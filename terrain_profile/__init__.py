"""Terrain Profile - Elevation profiles of geographic paths.

Computes per-vertex cumulative distance and summary statistics (length,
oblique length, ascend, descend, min/max elevation) for a LineString,
MultiLineString or flat coordinate list.

Modules:
    core: Distance math, geometry normalization, profile aggregation
    model: Data structures (Vertex, ProfileStatistics, Profile, errors)

Example:
    from terrain_profile import compute_profile

    profile = compute_profile(geojson_feature)
    print(profile.statistics.length_m, profile.statistics.ascend_m)
"""

from terrain_profile.core.profile_calculator import ProfileCalculator, compute_profile
from terrain_profile.model import (
    GeometryError,
    InvalidGeometryError,
    MissingGeometryError,
    Profile,
    ProfileStatistics,
    Vertex,
)

__all__ = [
    "compute_profile",
    "ProfileCalculator",
    "Profile",
    "ProfileStatistics",
    "Vertex",
    "GeometryError",
    "MissingGeometryError",
    "InvalidGeometryError",
]
