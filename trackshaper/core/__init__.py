"""Core math and analysis for track editing.

- GeoCalculator: Geodesic calculations (distances, bearings)
- planar_geometry: Lines, intersections, incircles in local meters
- AnomalyDetector: Abrupt changes, zero-length roads, loopiness
- BendSmoother: Incircle arcs for sharp bends
- GradientSmoother: Constant-gradient elevation profiles
"""

from trackshaper.core.geo_calculator import GeoCalculator
from trackshaper.core.planar_geometry import (
    Circle,
    LineEquation,
    Point2D,
    incircle,
    intersect,
    line_from_points,
    tangent_point,
)

# AnomalyDetector, BendSmoother and GradientSmoother depend on trackshaper.model,
# which imports this package. Import them directly from their modules, e.g.
# from trackshaper.core.bend_smoother import BendSmoother

__all__ = [
    # Geo calculator
    "GeoCalculator",
    # Planar geometry
    "Point2D",
    "LineEquation",
    "Circle",
    "line_from_points",
    "intersect",
    "incircle",
    "tangent_point",
]
