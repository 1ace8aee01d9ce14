"""Track edit operations.

Each operation is a pure function of a point list and a few parameters:

    operation(points, ...) -> EditResult | EditError

Inputs are never mutated. Every EditResult carries a reindexed point list
and a short description suitable as an undo-stack label.

Operations:
- straighten: Line up nodes between two markers
- vertical_split: Replace a node by two nodes on its adjacent roads (chamfer)
- nudge / nudge_preview: Move a node sideways relative to its road
- split_segment: Insert the midpoint of a road
- delete_zero_length: Remove duplicate points
- close_loop: Join the end of the track back to its start
- smooth_bend: Replace nodes between two roads by an incircle arc
- smooth_gradient: Apply a constant gradient between two nodes
"""

import logging
from dataclasses import replace
from math import cos, pi, sin
from typing import Iterable, Optional, Sequence

from trackshaper.constants import BendConfig, EditConfig, GradientConfig, LoopConfig, TrackConfig
from trackshaper.core.anomaly_detector import AnomalyDetector
from trackshaper.core.bend_smoother import BendSmoother
from trackshaper.core.gradient_smoother import GradientSmoother
from trackshaper.edits.validators import (
    validate_fraction,
    validate_node_index,
    validate_node_range,
    validate_point_count,
    validate_road_index,
)
from trackshaper.model.edit_result import DegenerateGeometry, EditError, EditResult, InvalidRange
from trackshaper.model.track_model import DerivedTrack, interpolate, reindex
from trackshaper.model.track_point import TrackPoint

logger = logging.getLogger(__name__)


def _rejected(error: EditError) -> EditError:
    """Log a rejected edit and hand the error back."""
    if isinstance(error, DegenerateGeometry):
        logger.debug(error.message)
    else:
        logger.warning(error.message)
    return error


def _applied(points: Sequence[TrackPoint], description: str) -> EditResult:
    """Reindex the new points and wrap them in an EditResult."""
    new_points = reindex(points)
    logger.info(f"Edit applied: {description} ({len(new_points)} points)")
    return EditResult(points=new_points, description=description)


def _first_error(*errors: Optional[EditError]) -> Optional[EditError]:
    return next((e for e in errors if e is not None), None)


# =============================================================================
# Straighten
# =============================================================================


def straighten(points: Sequence[TrackPoint], n1: int, n2: int) -> EditResult | EditError:
    """Put every node strictly between n1 and n2 on the line n1 -> n2.

    Each node keeps its proportional cumulative distance along the original
    track and its original elevation.

    Args:
        points: Current track
        n1: First marker node (kept)
        n2: Second marker node (kept), n2 >= n1 + 2
    """
    operation = "straighten"
    error = validate_node_range(operation=operation, start=n1, finish=n2, point_count=len(points), min_gap=2)
    if error is not None:
        return _rejected(error)

    track = DerivedTrack.from_points(points)
    start_distance = track.distance_at(n1)
    span = track.distance_at(n2) - start_distance
    if span <= 0.0:
        return _rejected(DegenerateGeometry(operation=operation, reason=f"nodes {n1}..{n2} have no length"))

    anchor_a, anchor_b = track.points[n1], track.points[n2]
    straightened = []
    for point in track.points[n1 + 1 : n2]:
        fraction = (track.distance_at(point.idx) - start_distance) / span
        on_line = interpolate(fraction, anchor_a, anchor_b)
        straightened.append(replace(point, lat=on_line.lat, lon=on_line.lon))

    new_points = track.points[: n1 + 1] + straightened + track.points[n2:]
    return _applied(new_points, f"straighten from {n1} to {n2}.")


# =============================================================================
# Vertical split (chamfer)
# =============================================================================


def vertical_split(points: Sequence[TrackPoint], n: int) -> EditResult | EditError:
    """Replace node n by two nodes, one on each adjacent road.

    Each new node sits min(4m, half the road length) away from node n.
    """
    operation = "split node"
    error = _first_error(
        validate_point_count(operation=operation, point_count=len(points), required=3),
        validate_node_index(operation=operation, index=n, point_count=len(points), interior=True),
    )
    if error is not None:
        return _rejected(error)

    before, node, after = points[n - 1], points[n], points[n + 1]
    length_before = node.distance_to(other=before)
    length_after = node.distance_to(other=after)
    if length_before == 0.0 or length_after == 0.0:
        return _rejected(DegenerateGeometry(operation=operation, reason=f"node {n} touches a zero-length segment"))

    offset_before = min(EditConfig.CHAMFER_MAX_OFFSET_M, length_before / 2)
    offset_after = min(EditConfig.CHAMFER_MAX_OFFSET_M, length_after / 2)
    chamfer = [
        interpolate(offset_before / length_before, node, before),
        interpolate(offset_after / length_after, node, after),
    ]

    new_points = list(points[:n]) + chamfer + list(points[n + 1 :])
    return _applied(new_points, f"vertical split of node {n}.")


# =============================================================================
# Nudge
# =============================================================================


def nudge_preview(points: Sequence[TrackPoint], node_index: int, factor: float) -> TrackPoint | EditError:
    """Compute where nudge() would move a node, without building a new track.

    Used for live feedback while the user drags a slider.

    The node moves perpendicular to the bearing of its road (the road
    starting at the node, or the last road for the final node) by
    factor * 10 / metres_per_degree degrees. Positive factors move left of
    the direction of travel.
    """
    operation = "nudge"
    error = _first_error(
        validate_point_count(operation=operation, point_count=len(points), required=2),
        validate_node_index(operation=operation, index=node_index, point_count=len(points)),
    )
    if error is not None:
        return error

    road_start = node_index if node_index < len(points) - 1 else node_index - 1
    bearing = points[road_start].bearing_to(other=points[road_start + 1])
    offset_deg = factor * EditConfig.NUDGE_SCALE / TrackConfig.METRES_PER_DEGREE
    angle = bearing - pi / 2

    point = points[node_index]
    return replace(
        point,
        lat=point.lat + offset_deg * cos(angle),
        lon=point.lon + offset_deg * sin(angle),
    )


def nudge(points: Sequence[TrackPoint], node_index: int, factor: float) -> EditResult | EditError:
    """Move one node sideways relative to its road. See nudge_preview()."""
    nudged = nudge_preview(points, node_index=node_index, factor=factor)
    if isinstance(nudged, EditError):
        return _rejected(nudged)

    new_points = list(points)
    new_points[node_index] = nudged
    return _applied(new_points, f"nudge node {node_index} by {factor:.1f}.")


# =============================================================================
# Split / delete
# =============================================================================


def split_segment(points: Sequence[TrackPoint], road_index: int) -> EditResult | EditError:
    """Insert the midpoint of road `road_index`."""
    operation = "split segment"
    error = validate_road_index(operation=operation, road_index=road_index, point_count=len(points))
    if error is not None:
        return _rejected(error)

    midpoint = interpolate(0.5, points[road_index], points[road_index + 1])
    new_points = list(points[: road_index + 1]) + [midpoint] + list(points[road_index + 1 :])
    return _applied(new_points, f"split segment {road_index}.")


def delete_zero_length(
    points: Sequence[TrackPoint],
    zero_length_indices: Optional[Iterable[int]] = None,
) -> EditResult | EditError:
    """Remove the start point of every zero-length road.

    Args:
        points: Current track
        zero_length_indices: Road indices to remove. Defaults to every
            zero-length road found by AnomalyDetector.
    """
    operation = "delete zero-length segments"
    indexed = reindex(points)
    if zero_length_indices is None:
        track = DerivedTrack.from_points(indexed)
        flagged = {road.index for road in AnomalyDetector.zero_length_segments(roads=track.roads)}
    else:
        flagged = set(zero_length_indices)
        for index in sorted(flagged):
            error = validate_road_index(operation=operation, road_index=index, point_count=len(indexed))
            if error is not None:
                return _rejected(error)

    new_points = [p for p in indexed if p.idx not in flagged]
    return _applied(new_points, f"delete {len(flagged)} zero-length segments.")


# =============================================================================
# Loop closing
# =============================================================================


def close_loop(points: Sequence[TrackPoint]) -> EditResult | EditError:
    """Join the end of the track back to its start.

    If the gap is under LoopConfig.COLLAPSE_GAP_M the last point is replaced
    by a copy of the first. Otherwise a point 1m before the start (extrapolated
    backwards along the first road) is appended, followed by a copy of the
    start point, so the track arrives at the start aligned with its first road.
    """
    operation = "close the loop"
    error = validate_point_count(operation=operation, point_count=len(points), required=2)
    if error is not None:
        return _rejected(error)

    first, second, last = points[0], points[1], points[-1]
    gap = first.distance_to(other=last)

    if gap < LoopConfig.COLLAPSE_GAP_M:
        new_points = list(points[:-1]) + [first]
        return _applied(new_points, "close the loop.")

    first_length = first.distance_to(other=second)
    if first_length == 0.0:
        return _rejected(DegenerateGeometry(operation=operation, reason="first segment has zero length"))

    back_off = interpolate(-LoopConfig.BACK_OFF_M / first_length, first, second)
    new_points = list(points) + [back_off, first]
    return _applied(new_points, f"close the loop, gap {gap:.1f}m.")


# =============================================================================
# Smoothing
# =============================================================================


def smooth_bend(
    points: Sequence[TrackPoint],
    n1: int,
    n2: int,
    segments: int = BendConfig.DEFAULT_SEGMENTS,
) -> EditResult | EditError:
    """Replace the nodes strictly between n1 and n2 by an incircle arc.

    Args:
        points: Current track
        n1: Start of the entry road (kept)
        n2: End of the exit road (kept), n2 >= n1 + 2
        segments: Number of arc points
    """
    operation = "smooth bend"
    error = validate_node_range(operation=operation, start=n1, finish=n2, point_count=len(points), min_gap=2)
    if error is None and segments < BendConfig.MIN_SEGMENTS:
        error = InvalidRange(
            operation=operation,
            detail=f"segments {segments} below {BendConfig.MIN_SEGMENTS}",
            point_count=len(points),
        )
    if error is not None:
        return _rejected(error)

    track = DerivedTrack.from_points(points)
    bend = BendSmoother.bend_incircle(track=track, n1=n1, n2=n2, segments=segments)
    if bend is None:
        return _rejected(
            DegenerateGeometry(operation=operation, reason=f"no incircle fits between nodes {n1} and {n2}")
        )

    new_points = track.points[: bend.start_index + 1] + bend.track_points + track.points[bend.end_index :]
    return _applied(new_points, f"bend smoothing from {n1} to {n2}, radius {bend.radius:.1f}m.")


def smooth_gradient(
    points: Sequence[TrackPoint],
    start: int,
    finish: int,
    gradient: float,
    bumpiness: float = GradientConfig.DEFAULT_BUMPINESS,
) -> EditResult | EditError:
    """Apply a constant gradient between start and finish.

    Args:
        points: Current track
        start: First node (elevation kept)
        finish: Last node
        gradient: Target gradient in percent
        bumpiness: 0 = fully smoothed, 1 = original profile
    """
    operation = "smooth gradient"
    error = _first_error(
        validate_node_range(operation=operation, start=start, finish=finish, point_count=len(points)),
        validate_fraction(operation=operation, name="bumpiness", value=bumpiness, point_count=len(points)),
    )
    if error is not None:
        return _rejected(error)

    track = DerivedTrack.from_points(points)
    new_points = GradientSmoother.smooth_gradient(
        track=track,
        start=start,
        finish=finish,
        gradient=gradient,
        bumpiness=bumpiness,
    )
    if new_points is None:
        return _rejected(
            InvalidRange(
                operation=operation,
                detail=f"range {start}..{finish} with bumpiness {bumpiness}",
                point_count=len(points),
            )
        )
    return _applied(new_points, f"gradient smoothing from {start} to {finish}, bumpiness {bumpiness:.2f}.")
