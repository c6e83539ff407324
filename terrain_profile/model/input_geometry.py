"""InputGeometry - Tagged union over the accepted path input shapes.

Raw input is validated once by parse_geometry() and converted into exactly
one of:
- CoordinateList: flat list of [lon, lat, elevation?] coordinates
- SinglePath: GeoJSON-like LineString
- MultiPath: GeoJSON-like MultiLineString (ordered parts)

Accepted raw inputs are GeoJSON-like mappings (optionally wrapped in one
Feature), objects exposing __geo_interface__ (e.g. shapely geometries),
and plain sequences / numpy arrays of coordinates.
"""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from numbers import Real
from typing import Any, Optional, Union

import numpy as np

from terrain_profile.constants import GeometryConfig
from terrain_profile.model.geometry_error import InvalidGeometryError, MissingGeometryError

# (lon, lat, elevation or None)
Coordinate = tuple[float, float, Optional[float]]


@dataclass(frozen=True)
class CoordinateList:
    """Flat ordered list of coordinates."""

    coordinates: tuple[Coordinate, ...]


@dataclass(frozen=True)
class SinglePath:
    """A single path (LineString)."""

    coordinates: tuple[Coordinate, ...]


@dataclass(frozen=True)
class MultiPath:
    """Several disjoint paths (MultiLineString), in declaration order."""

    parts: tuple[tuple[Coordinate, ...], ...]


InputGeometry = Union[CoordinateList, SinglePath, MultiPath]


def _is_sequence(value: Any) -> bool:
    return isinstance(value, np.ndarray) or (isinstance(value, Sequence) and not isinstance(value, (str, bytes)))


def _is_number(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def _parse_coordinate(raw: Any) -> Coordinate:
    """Validate one [lon, lat, elevation?] coordinate."""
    if not _is_sequence(raw):
        raise InvalidGeometryError(f"Coordinate must be a [lon, lat, elevation?] sequence, got {raw!r}")

    size = len(raw)
    if not GeometryConfig.MIN_COORDINATE_SIZE <= size <= GeometryConfig.MAX_COORDINATE_SIZE:
        raise InvalidGeometryError(f"Coordinate must have 2 or 3 values, got {size}: {raw!r}")

    lon, lat = raw[0], raw[1]
    elevation = raw[2] if size == 3 else None
    if not (_is_number(lon) and _is_number(lat)):
        raise InvalidGeometryError(f"Coordinate lon/lat must be numbers, got {raw!r}")
    if elevation is not None and not _is_number(elevation):
        raise InvalidGeometryError(f"Coordinate elevation must be a number, got {raw!r}")

    return (float(lon), float(lat), None if elevation is None else float(elevation))


def _parse_coordinates(raw: Any, context: str) -> tuple[Coordinate, ...]:
    if not _is_sequence(raw):
        raise InvalidGeometryError(f"{context} coordinates must be a sequence, got {type(raw).__name__}")
    return tuple(_parse_coordinate(c) for c in raw)


def _parse_mapping(geometry: Mapping) -> InputGeometry:
    geometry_type = geometry.get("type")
    if geometry_type is None:
        raise InvalidGeometryError("Geometry has no 'type' tag")
    if geometry_type not in GeometryConfig.SUPPORTED_TYPES:
        raise InvalidGeometryError(
            f"Geometry is not supported: {geometry_type!r} (expected one of {GeometryConfig.SUPPORTED_TYPES})"
        )
    if "coordinates" not in geometry:
        raise InvalidGeometryError(f"{geometry_type} has no 'coordinates' member")

    coordinates = geometry["coordinates"]
    if geometry_type == GeometryConfig.SINGLE_PATH_TYPE:
        return SinglePath(coordinates=_parse_coordinates(coordinates, context=geometry_type))

    if not _is_sequence(coordinates):
        raise InvalidGeometryError(f"{geometry_type} coordinates must be a sequence of parts")
    return MultiPath(parts=tuple(_parse_coordinates(part, context=f"{geometry_type} part") for part in coordinates))


def parse_geometry(raw: Any) -> InputGeometry:
    """Validate raw input and convert it into the tagged union.

    Args:
        raw: GeoJSON-like mapping or Feature, object with __geo_interface__,
            or a flat sequence of coordinates.

    Returns:
        CoordinateList, SinglePath or MultiPath.

    Raises:
        MissingGeometryError: raw is None, or a Feature carries no geometry.
        InvalidGeometryError: shape tag missing/unsupported or coordinates malformed.
    """
    if raw is None:
        raise MissingGeometryError("Geometry not set")

    if hasattr(raw, "__geo_interface__"):
        raw = raw.__geo_interface__

    if isinstance(raw, Mapping):
        # Unwrap one Feature level only
        if raw.get("type") == GeometryConfig.FEATURE_TYPE:
            raw = raw.get("geometry")
            if raw is None:
                raise MissingGeometryError("Feature has no geometry")
            if hasattr(raw, "__geo_interface__"):
                raw = raw.__geo_interface__
            if not isinstance(raw, Mapping):
                raise InvalidGeometryError(f"Feature geometry must be a mapping, got {type(raw).__name__}")
        return _parse_mapping(raw)

    if _is_sequence(raw):
        return CoordinateList(coordinates=_parse_coordinates(raw, context="Coordinate list"))

    raise InvalidGeometryError(f"Unsupported geometry input: {type(raw).__name__}")
