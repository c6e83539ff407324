"""Geodesic calculations on Earth's surface.

Provides the distance helpers used by profile aggregation:
- Planar distance between two vertices (Haversine formula)
- Oblique segment length combining planar distance and elevation change

All calculations use a spherical Earth with the WGS84 equatorial radius
(R = 6,378,137 m). This is an approximation, not a true ellipsoidal geodesic.
"""

from math import hypot

import numpy as np

from terrain_profile.constants import EarthConfig

# Earth's radius in meters (WGS84 equatorial radius as a sphere)
EARTH_RADIUS_M = EarthConfig.RADIUS_M


class GeoCalculator:
    """Static methods for distance calculations on Earth's surface.

    Coordinates are in decimal degrees (WGS84).
    Distances and elevations are in meters.
    """

    EARTH_RADIUS_M = EARTH_RADIUS_M

    @staticmethod
    def haversine_distance_m(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
        """Calculate great-circle distance between two points using Haversine formula.

        Args:
            lat1: Latitude of first point (decimal degrees)
            lon1: Longitude of first point (decimal degrees)
            lat2: Latitude of second point (decimal degrees)
            lon2: Longitude of second point (decimal degrees)

        Returns:
            Distance in meters. NaN when any coordinate is NaN or infinite.
        """
        # numpy trig returns NaN for non-finite input where math raises
        with np.errstate(invalid="ignore"):
            lat1_rad = np.radians(lat1)
            lat2_rad = np.radians(lat2)
            dlat = lat2_rad - lat1_rad
            dlon = np.radians(lon2 - lon1)
            a = np.sin(dlat / 2) ** 2 + np.cos(lat1_rad) * np.cos(lat2_rad) * np.sin(dlon / 2) ** 2
            # Rounding can push a just past 1 for antipodal points
            a = np.minimum(a, 1.0)
            return float(EARTH_RADIUS_M * 2 * np.arctan2(np.sqrt(a), np.sqrt(1 - a)))

    @staticmethod
    def oblique_distance_m(planar_distance_m: float, elevation_delta_m: float) -> float:
        """Straight-line 3D length of a segment.

        Args:
            planar_distance_m: Horizontal distance of the segment
            elevation_delta_m: Elevation change along the segment

        Returns:
            sqrt(dh² + d²), never shorter than the planar distance.
        """
        return hypot(elevation_delta_m, planar_distance_m)
