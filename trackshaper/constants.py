"""Configuration constants for trackshaper.

All tunable parameters are centralized here for easy tuning.

Classes:
    GeoConfig: Spherical Earth model
    GeometryConfig: Numerical tolerances for planar geometry
    TrackConfig: Local projection parameters
    AnomalyConfig: Abrupt change thresholds and their UI ranges
    LoopConfig: Loop detection and closing distances
    BendConfig: Bend smoothing parameters
    GradientConfig: Gradient smoothing parameters
    EditConfig: Chamfer and nudge parameters
"""


class GeoConfig:
    """Spherical Earth model."""

    # Mean Earth radius in meters
    EARTH_RADIUS_M = 6_371_000


class GeometryConfig:
    """Numerical tolerances for planar geometry."""

    # Determinant at or below this is treated as parallel/coincident lines.
    # Local coordinates are meters, so products of coordinates are ~1e0..1e8.
    EPSILON = 1e-10


class TrackConfig:
    """Local projection parameters."""

    # Flat projection scale used for both axes (no cos(latitude) correction).
    # Corresponds to a degree of longitude at roughly 45° latitude.
    METRES_PER_DEGREE = 78846.81


class AnomalyConfig:
    """Abrupt change thresholds (slider ranges in UI)."""

    # Gradient change between adjacent segments, in percentage points
    GRADIENT_THRESHOLD_MIN_PCT = 5.0
    GRADIENT_THRESHOLD_MAX_PCT = 20.0
    GRADIENT_THRESHOLD_DEFAULT_PCT = 10.0

    # Included angle between adjacent segment bearings, in degrees
    BEARING_THRESHOLD_MIN_DEG = 30.0
    BEARING_THRESHOLD_MAX_DEG = 120.0
    BEARING_THRESHOLD_DEFAULT_DEG = 90.0


assert (
    AnomalyConfig.GRADIENT_THRESHOLD_MIN_PCT
    <= AnomalyConfig.GRADIENT_THRESHOLD_DEFAULT_PCT
    <= AnomalyConfig.GRADIENT_THRESHOLD_MAX_PCT
), "Default gradient threshold must lie inside its slider range"
assert (
    AnomalyConfig.BEARING_THRESHOLD_MIN_DEG
    <= AnomalyConfig.BEARING_THRESHOLD_DEFAULT_DEG
    <= AnomalyConfig.BEARING_THRESHOLD_MAX_DEG
), "Default bearing threshold must lie inside its slider range"


class LoopConfig:
    """Loop detection and closing distances."""

    # Start/end closer than this (both horizontally and vertically) is a loop
    IS_LOOP_GAP_M = 0.5
    IS_LOOP_ELEVATION_GAP_M = 0.5

    # Start/end closer than this is offered for closing
    ALMOST_LOOP_GAP_M = 1000.0

    # Below this gap, closing replaces the last point instead of appending
    COLLAPSE_GAP_M = 1.0

    # Distance before the start point of the extra approach point
    BACK_OFF_M = 1.0


class BendConfig:
    """Bend smoothing parameters."""

    MIN_SEGMENTS = 2
    DEFAULT_SEGMENTS = 8


class GradientConfig:
    """Gradient smoothing parameters."""

    # Bumpiness: 0 = fully smoothed, 1 = original profile
    MIN_BUMPINESS = 0.0
    MAX_BUMPINESS = 1.0
    DEFAULT_BUMPINESS = 0.0


class EditConfig:
    """Chamfer and nudge parameters."""

    # Vertical split offsets each new point at most this far from the node
    CHAMFER_MAX_OFFSET_M = 4.0

    # Nudge offset in degrees = factor * NUDGE_SCALE / METRES_PER_DEGREE
    NUDGE_SCALE = 10.0
