"""Data model classes for elevation profiles.

- Vertex: Geometry atom (lon, lat, elevation) with cumulative distance
- ProfileStatistics: Length, oblique length, ascend/descend, min/max elevation
- Profile: Annotated vertices plus statistics, with chart/map exports
- InputGeometry: Tagged union of CoordinateList, SinglePath, MultiPath
- GeometryError: MissingGeometryError and InvalidGeometryError
"""

from terrain_profile.model.geometry_error import (
    GeometryError,
    InvalidGeometryError,
    MissingGeometryError,
)
from terrain_profile.model.input_geometry import (
    CoordinateList,
    InputGeometry,
    MultiPath,
    SinglePath,
    parse_geometry,
)
from terrain_profile.model.profile import Profile
from terrain_profile.model.profile_statistics import ProfileStatistics
from terrain_profile.model.vertex import Vertex

__all__ = [
    "Vertex",
    "ProfileStatistics",
    "Profile",
    "InputGeometry",
    "CoordinateList",
    "SinglePath",
    "MultiPath",
    "parse_geometry",
    "GeometryError",
    "MissingGeometryError",
    "InvalidGeometryError",
]
