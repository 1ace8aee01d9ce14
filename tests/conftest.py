"""Shared pytest fixtures for trackshaper tests.

Provides reusable tracks for all tests. All fixtures use explicit values
with documented rationale.

COORDINATE SYSTEM:
    Tests use coordinates near the equator (lat~0) and prime meridian (lon~0)
    where great-circle math is simple: along a meridian or the equator,
    1 degree = EARTH_RADIUS_M * π / 180 ≈ 111,195 meters.
    The local projection uses TrackConfig.METRES_PER_DEGREE for both axes.
"""

from math import pi
from typing import Callable

import pytest

from trackshaper.constants import GeoConfig
from trackshaper.model.track_model import reindex
from trackshaper.model.track_point import TrackPoint

# Great-circle meters per degree along the equator or a meridian
DEGREE_M = GeoConfig.EARTH_RADIUS_M * pi / 180

Coords = list[tuple[float, float, float]]


def points_from(coords: Coords) -> list[TrackPoint]:
    """Build a reindexed track from (lat, lon, ele) tuples."""
    return reindex([TrackPoint(lat=lat, lon=lon, ele=ele) for lat, lon, ele in coords])


@pytest.fixture
def make_points() -> Callable[[Coords], list[TrackPoint]]:
    """Factory building a reindexed track from (lat, lon, ele) tuples."""
    return points_from


@pytest.fixture
def straight_north_points() -> list[TrackPoint]:
    """Five points heading due north along lon=0, 0.001° (~111m) apart.

    Elevations 100, 101, 103, 102, 110 give mixed small gradients.
    """
    return points_from(
        [
            (0.000, 0.0, 100.0),
            (0.001, 0.0, 101.0),
            (0.002, 0.0, 103.0),
            (0.003, 0.0, 102.0),
            (0.004, 0.0, 110.0),
        ]
    )


@pytest.fixture
def square_points() -> list[TrackPoint]:
    """Three sides of a 0.001° square: east, north, west.

    Bearings change by 90° at node 1 and just under 90° at node 2.
    Start and end are ~111m apart (an almost-loop).
    """
    return points_from(
        [
            (0.000, 0.000, 0.0),
            (0.000, 0.001, 0.0),
            (0.001, 0.001, 5.0),
            (0.001, 0.000, 5.0),
        ]
    )


@pytest.fixture
def l_shape_points() -> list[TrackPoint]:
    """North for two segments, then a right-angle turn east for two segments.

    The corner is node 2 at (0.002, 0). Roads 1 (north) and 2 (east) share it.
    """
    return points_from(
        [
            (0.000, 0.000, 100.0),
            (0.001, 0.000, 100.0),
            (0.002, 0.000, 100.0),
            (0.002, 0.001, 100.0),
            (0.002, 0.002, 100.0),
        ]
    )


@pytest.fixture
def duplicate_point_points() -> list[TrackPoint]:
    """Four points heading north where node 2 repeats node 1 exactly."""
    return points_from(
        [
            (0.000, 0.0, 0.0),
            (0.001, 0.0, 1.0),
            (0.001, 0.0, 1.0),
            (0.002, 0.0, 2.0),
        ]
    )


@pytest.fixture
def near_loop_points() -> list[TrackPoint]:
    """East, north, west, then south, stopping 50m short of the start."""
    return points_from(
        [
            (0.000, 0.000, 10.0),
            (0.000, 0.001, 10.0),
            (0.001, 0.001, 12.0),
            (0.001, 0.000, 12.0),
            (50.0 / DEGREE_M, 0.000, 10.0),
        ]
    )
