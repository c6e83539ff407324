"""Shared pytest fixtures for terrain_profile tests.

TRACK COORDINATES:
    The reference track runs due north along lon=24.0482193 starting at
    lat=42.0931683. Pure latitude steps make the Haversine distance exact:
    one step of 0.00045275° ≈ 50.4 m on the R = 6,378,137 m sphere, so five
    steps ≈ 252 m.

    Elevations 560 → 562 → 564 → 562 → 560 → 564 give:
    ascend 8 m, descend 4 m, min 560 m, max 564 m.
"""

import pytest

TRACK_LON = 24.0482193
TRACK_START_LAT = 42.0931683
TRACK_LAT_STEP = 0.00045275
TRACK_ELEVATIONS = [560.0, 562.0, 564.0, 562.0, 560.0, 564.0]


def make_coordinates(elevations: list[float]) -> list[list[float]]:
    """Build [lon, lat, elevation] coordinates stepping north by TRACK_LAT_STEP."""
    return [[TRACK_LON, TRACK_START_LAT + i * TRACK_LAT_STEP, elev] for i, elev in enumerate(elevations)]


@pytest.fixture
def track_coordinates() -> list[list[float]]:
    """Reference track as a flat coordinate list."""
    return make_coordinates(TRACK_ELEVATIONS)


@pytest.fixture
def line_string(track_coordinates: list[list[float]]) -> dict:
    """Reference track as a GeoJSON LineString."""
    return {"type": "LineString", "coordinates": track_coordinates}


@pytest.fixture
def multi_line_string(track_coordinates: list[list[float]]) -> dict:
    """Reference track split into two parts of three vertices each.

    Part gap joins vertex 2 (564 m) and vertex 3 (562 m).
    """
    return {
        "type": "MultiLineString",
        "coordinates": [track_coordinates[:3], track_coordinates[3:]],
    }


@pytest.fixture
def feature(line_string: dict) -> dict:
    """Reference track wrapped in a GeoJSON Feature."""
    return {"type": "Feature", "properties": {"name": "Reference track"}, "geometry": line_string}
