"""Bend smoothing by incircle construction.

Replaces the nodes between two boundary roads with points along a circular
arc tangent to both roads:

1. Corner: the node shared by the two roads, or the intersection of their
   infinite lines when other nodes lie between them. That intersection
   must lie ahead of the entry start and before the exit end.
2. Incircle of the triangle (entry start, exit end, corner).
3. Tangent points of the incircle on the entry and exit lines.
4. Points evenly spaced by angle along the arc facing the corner, with
   elevation interpolated between the two tangent points.

All geometry runs in the track's local planar frame (meters) and is mapped
back to lat/lon through the same ScalingInfo.
"""

import logging
from math import atan2, cos, pi, sin
from typing import Optional

from trackshaper.constants import BendConfig
from trackshaper.core.planar_geometry import Point2D, incircle, intersect, tangent_point
from trackshaper.model.drawing import DrawingRoad
from trackshaper.model.smoothed_bend import SmoothedBend
from trackshaper.model.track_model import DerivedTrack
from trackshaper.model.track_point import TrackPoint

logger = logging.getLogger(__name__)


def _elevation_along(road: DrawingRoad, point: Point2D) -> float:
    """Elevation at the projection of `point` onto the road's direction.

    Points beyond either end extrapolate the road's gradient.
    """
    start, end = road.starts_at, road.ends_at
    dx, dy = end.x - start.x, end.y - start.y
    length_sq = dx * dx + dy * dy
    if length_sq == 0.0:
        return start.z
    t = ((point.x - start.x) * dx + (point.y - start.y) * dy) / length_sq
    return start.z + t * (end.z - start.z)


def _ahead_of(origin: Point2D, target: Point2D, road: DrawingRoad) -> bool:
    """True if target lies strictly forward of origin in the road's direction of travel."""
    dx = road.ends_at.x - road.starts_at.x
    dy = road.ends_at.y - road.starts_at.y
    return (target.x - origin.x) * dx + (target.y - origin.y) * dy > 0.0


class BendSmoother:
    """Computes incircle arcs that round off a bend between two roads.

    Example:
        bend = BendSmoother.bend_incircle(track=track, n1=3, n2=7, segments=8)
        if bend is not None:
            print(f"Radius {bend.radius:.1f}m replacing nodes {bend.start_index}..{bend.end_index}")
    """

    @staticmethod
    def bend_incircle(
        track: DerivedTrack,
        n1: int,
        n2: int,
        segments: int = BendConfig.DEFAULT_SEGMENTS,
    ) -> Optional[SmoothedBend]:
        """Compute the smoothed arc between node n1 and node n2.

        The entry road runs from node n1 to n1+1, the exit road from node
        n2-1 to n2. Nodes n1 and n2 are kept; everything between them is
        replaced by the arc.

        Args:
            track: Derived track
            n1: Node index at the start of the entry road
            n2: Node index at the end of the exit road (n2 >= n1 + 2)
            segments: Number of arc points to generate (>= 2)

        Returns:
            SmoothedBend, or None for bad indices, a degenerate triangle or
            parallel boundary roads.
        """
        if segments < BendConfig.MIN_SEGMENTS:
            logger.debug(f"Bend smoothing needs at least {BendConfig.MIN_SEGMENTS} segments, got {segments}")
            return None
        if n1 < 0 or n2 >= len(track.points) or n2 < n1 + 2:
            logger.debug(f"Bend smoothing range {n1}..{n2} invalid for {len(track.points)} points")
            return None

        entry = track.roads[n1]
        exit_ = track.roads[n2 - 1]
        if entry.is_zero_length or exit_.is_zero_length:
            logger.debug(f"Bend smoothing {n1}..{n2}: boundary road has zero length")
            return None

        entry_line = entry.line
        exit_line = exit_.line

        if entry.ends_at.location == exit_.starts_at.location:
            corner = entry.ends_at.location
        else:
            corner = intersect(entry_line, exit_line)
            if corner is None:
                logger.debug(f"Bend smoothing {n1}..{n2}: boundary roads are parallel")
                return None
            if not _ahead_of(entry.starts_at.location, corner, entry) or not _ahead_of(
                corner, exit_.ends_at.location, exit_
            ):
                logger.debug(f"Bend smoothing {n1}..{n2}: boundary lines meet outside the bend")
                return None

        circle = incircle(entry.starts_at.location, exit_.ends_at.location, corner)
        if circle is None:
            logger.debug(f"Bend smoothing {n1}..{n2}: degenerate triangle")
            return None

        entry_tangent = tangent_point(entry_line, circle)
        exit_tangent = tangent_point(exit_line, circle)
        if entry_tangent is None or exit_tangent is None:
            return None

        entry_ele = _elevation_along(entry, entry_tangent)
        exit_ele = _elevation_along(exit_, exit_tangent)

        centre = circle.centre
        theta_start = atan2(entry_tangent.y - centre.y, entry_tangent.x - centre.x)
        theta_end = atan2(exit_tangent.y - centre.y, exit_tangent.x - centre.x)
        # Shorter arc: the one facing the corner
        sweep = (theta_end - theta_start + pi) % (2 * pi) - pi

        points: list[TrackPoint] = []
        for i in range(segments):
            fraction = i / (segments - 1)
            theta = theta_start + fraction * sweep
            x = centre.x + circle.radius * cos(theta)
            y = centre.y + circle.radius * sin(theta)
            lat, lon = track.scaling.to_geographic(x=x, y=y)
            points.append(TrackPoint(lat=lat, lon=lon, ele=entry_ele + fraction * (exit_ele - entry_ele)))

        return SmoothedBend(
            track_points=points,
            start_index=n1,
            end_index=n2,
            radius=circle.radius,
            centre=(centre.x, centre.y),
        )
