"""Configuration constants for Terrain Profile.

All tunable parameters are centralized here.

Classes:
    EarthConfig: Spherical Earth model used for distances
    ProfileConfig: Aggregation seeds and multi-part handling
    GeometryConfig: Accepted GeoJSON-like input tags and coordinate sizes
"""


class EarthConfig:
    """Spherical Earth model."""

    # WGS84 equatorial radius used as a sphere (not an ellipsoid)
    RADIUS_M = 6_378_137


class ProfileConfig:
    """Profile aggregation parameters."""

    # Running min/max elevation seeds. Terrain entirely above MIN seed or
    # below MAX seed leaks the seed into the statistics.
    MIN_ELEVATION_SEED_M = 10_000.0
    MAX_ELEVATION_SEED_M = -10_000.0

    # Elevation used when a coordinate has no third component
    DEFAULT_ELEVATION_M = 0.0

    # Count the segment joining the last vertex of one part to the first
    # vertex of the next part of a multi-path geometry
    INCLUDE_PART_GAPS = True


assert ProfileConfig.MAX_ELEVATION_SEED_M < ProfileConfig.MIN_ELEVATION_SEED_M, "Seeds must bracket real terrain"


class GeometryConfig:
    """Accepted input geometry tags (case-sensitive, GeoJSON names)."""

    FEATURE_TYPE = "Feature"
    SINGLE_PATH_TYPE = "LineString"
    MULTI_PATH_TYPE = "MultiLineString"
    SUPPORTED_TYPES = (SINGLE_PATH_TYPE, MULTI_PATH_TYPE)

    # [lon, lat] or [lon, lat, elevation]
    MIN_COORDINATE_SIZE = 2
    MAX_COORDINATE_SIZE = 3
