"""Planar geometry in local track coordinates (meters).

Provides the 2D building blocks for bend smoothing:
- Implicit line equations a·x + b·y + c = 0 through two points
- Line-line intersection via 2×2 matrix inverse
- Triangle incircle (incentre and inradius)
- Tangent point of a circle on a line

Degenerate input (coincident points, parallel lines, collinear triangles)
yields None rather than NaN/Inf. Determinants are gated by
GeometryConfig.EPSILON.
"""

from dataclasses import dataclass
from math import hypot, sqrt
from typing import Optional

import numpy as np

from trackshaper.constants import GeometryConfig


@dataclass(frozen=True)
class Point2D:
    """A point in the local planar frame.

    Attributes:
        x: Easting in meters relative to the projection centre
        y: Northing in meters relative to the projection centre
    """

    x: float
    y: float


@dataclass(frozen=True)
class LineEquation:
    """Implicit line a·x + b·y + c = 0."""

    a: float
    b: float
    c: float

    @property
    def is_degenerate(self) -> bool:
        """True when the line was built from two coincident points."""
        return self.a == 0.0 and self.b == 0.0


@dataclass(frozen=True)
class Circle:
    """A circle in the local planar frame.

    Attributes:
        centre: Circle centre
        radius: Radius in meters
    """

    centre: Point2D
    radius: float


def distance(p1: Point2D, p2: Point2D) -> float:
    """Euclidean distance between two planar points."""
    return hypot(p2.x - p1.x, p2.y - p1.y)


def lerp(t: float, p1: Point2D, p2: Point2D) -> Point2D:
    """Linear interpolation from p1 (t=0) to p2 (t=1)."""
    return Point2D(x=p1.x + t * (p2.x - p1.x), y=p1.y + t * (p2.y - p1.y))


def line_from_points(p1: Point2D, p2: Point2D) -> LineEquation:
    """Build the implicit line through two points.

    Uses a = y1 - y2, b = x2 - x1, c = x1·y2 - x2·y1. The result is
    degenerate (a = b = 0) when p1 == p2; callers must guard.
    """
    return LineEquation(
        a=p1.y - p2.y,
        b=p2.x - p1.x,
        c=p1.x * p2.y - p2.x * p1.y,
    )


def intersect(l1: LineEquation, l2: LineEquation) -> Optional[Point2D]:
    """Intersect two lines by inverting their coefficient matrix.

    Solves [[a1, b1], [a2, b2]] · [x, y] = [-c1, -c2].

    Returns:
        Intersection point, or None when |det| <= EPSILON (parallel or
        coincident lines).
    """
    det = l1.a * l2.b - l2.a * l1.b
    if abs(det) <= GeometryConfig.EPSILON:
        return None

    matrix = np.array([[l1.a, l1.b], [l2.a, l2.b]], dtype=float)
    x, y = np.linalg.inv(matrix) @ np.array([-l1.c, -l2.c], dtype=float)
    return Point2D(x=float(x), y=float(y))


def incircle(pa: Point2D, pb: Point2D, pc: Point2D) -> Optional[Circle]:
    """Compute the inscribed circle of triangle (pa, pb, pc).

    The incentre is the vertex average weighted by the length of the
    opposite side. The inradius follows from Heron's formula:
    r = sqrt((s-a)(s-b)(s-c)/s), s = semiperimeter.

    Returns:
        Circle, or None if the triangle is degenerate (collinear vertices
        or a zero-length side).
    """
    a = distance(pb, pc)  # opposite pa
    b = distance(pa, pc)  # opposite pb
    c = distance(pa, pb)  # opposite pc
    perimeter = a + b + c
    if min(a, b, c) <= GeometryConfig.EPSILON:
        return None

    s = perimeter / 2
    product = (s - a) * (s - b) * (s - c)
    if product <= GeometryConfig.EPSILON * s:
        return None

    centre = Point2D(
        x=(a * pa.x + b * pb.x + c * pc.x) / perimeter,
        y=(a * pa.y + b * pb.y + c * pc.y) / perimeter,
    )
    return Circle(centre=centre, radius=sqrt(product / s))


def tangent_point(line: LineEquation, circle: Circle) -> Optional[Point2D]:
    """Find where a circle touches a line.

    Builds the perpendicular to `line` through the circle's centre and
    intersects the two. For a genuinely tangent line this is the point of
    contact; for any other line it is the foot of the perpendicular.

    Returns:
        Point on `line`, or None if the line is degenerate.
    """
    if line.is_degenerate:
        return None
    cx, cy = circle.centre.x, circle.centre.y
    perpendicular = LineEquation(a=line.b, b=-line.a, c=line.a * cy - line.b * cx)
    return intersect(line, perpendicular)
