"""Core profile algorithms.

- GeoCalculator: Haversine and oblique segment distances
- GeometryNormalizer: Input geometry to ordered vertices
- ProfileAggregator: Cumulative distance and statistics in one pass
- ProfileCalculator: Normalizer + aggregator facade

GeometryNormalizer, ProfileAggregator and ProfileCalculator have a circular
import with model.vertex. Import them directly from their modules:
    from terrain_profile.core.profile_calculator import ProfileCalculator
"""

from terrain_profile.core.geo_calculator import GeoCalculator

__all__ = [
    "GeoCalculator",
]
