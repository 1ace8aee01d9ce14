"""Track model derivation pipeline.

Converts the canonical TrackPoint list into the derived model:

    points -> ScalingInfo -> DrawingNodes -> DrawingRoads -> SummaryData

Every step is a pure function. Nothing is updated incrementally: after any
edit the whole pipeline is rerun (DerivedTrack.from_points). Running it twice
on the same input gives identical output.

Indices: TrackPoint.idx, DrawingNode.idx and DrawingRoad.index are positions
in the current list. They are only trustworthy after reindex() has run on the
output of a structural edit.
"""

from dataclasses import dataclass, replace
from typing import Optional, Sequence

import numpy as np
from shapely.geometry import LineString

from trackshaper.constants import TrackConfig
from trackshaper.model.drawing import DrawingNode, DrawingRoad, ScalingInfo
from trackshaper.model.summary import SummaryData
from trackshaper.model.track_point import TrackPoint


def reindex(points: Sequence[TrackPoint]) -> list[TrackPoint]:
    """Reassign idx 0..n-1 in list order.

    Must run after every insert/delete/reorder before any index-based
    lookup is trusted again.
    """
    return [p if p.idx == i else replace(p, idx=i) for i, p in enumerate(points)]


def interpolate(t: float, p1: TrackPoint, p2: TrackPoint) -> TrackPoint:
    """Linear interpolation of lat/lon/ele from p1 (t=0) to p2 (t=1).

    Values of t outside [0, 1] extrapolate along the same line.
    The result carries idx 0 until the caller reindexes.
    """
    return TrackPoint(
        lat=p1.lat + t * (p2.lat - p1.lat),
        lon=p1.lon + t * (p2.lon - p1.lon),
        ele=p1.ele + t * (p2.ele - p1.ele),
        idx=0,
    )


def derive_projection(points: Sequence[TrackPoint]) -> ScalingInfo:
    """Compute the projection frame (extents and centre) of a track.

    The projection centre is the midpoint of the bounding box. An empty
    track gives an all-zero frame.
    """
    mpd = TrackConfig.METRES_PER_DEGREE
    if not points:
        return ScalingInfo(
            min_lat=0.0,
            max_lat=0.0,
            centre_lat=0.0,
            min_lon=0.0,
            max_lon=0.0,
            centre_lon=0.0,
            min_ele=0.0,
            max_ele=0.0,
            centre_ele=0.0,
            metres_per_degree=mpd,
        )

    coords = np.array([(p.lat, p.lon, p.ele) for p in points], dtype=float)
    mins = coords.min(axis=0)
    maxs = coords.max(axis=0)
    centres = (mins + maxs) / 2

    return ScalingInfo(
        min_lat=float(mins[0]),
        max_lat=float(maxs[0]),
        centre_lat=float(centres[0]),
        min_lon=float(mins[1]),
        max_lon=float(maxs[1]),
        centre_lon=float(centres[1]),
        min_ele=float(mins[2]),
        max_ele=float(maxs[2]),
        centre_ele=float(centres[2]),
        metres_per_degree=mpd,
    )


def project_to_local(scaling: ScalingInfo, point: TrackPoint) -> DrawingNode:
    """Project a point into local meters around the frame centre.

    Flat approximation: the same metres_per_degree is applied to latitude
    and longitude, with no cos(latitude) correction.
    """
    return DrawingNode(
        trackpoint=point,
        x=(point.lon - scaling.centre_lon) * scaling.metres_per_degree,
        y=(point.lat - scaling.centre_lat) * scaling.metres_per_degree,
        z=point.ele,
    )


def derive_nodes(scaling: ScalingInfo, points: Sequence[TrackPoint]) -> list[DrawingNode]:
    """One node per point, same order."""
    return [project_to_local(scaling, p) for p in points]


def derive_roads(nodes: Sequence[DrawingNode]) -> list[DrawingRoad]:
    """Pair consecutive nodes into roads with physical properties.

    Length and bearing are great-circle values; gradient is
    100 * rise / length, defined as 0 for zero-length roads. Cumulative
    distances are a running sum in track order.
    """
    roads: list[DrawingRoad] = []
    running = 0.0
    for index, (start, end) in enumerate(zip(nodes, nodes[1:])):
        length = start.trackpoint.distance_to(other=end.trackpoint)
        gradient = 100.0 * (end.z - start.z) / length if length > 0.0 else 0.0
        roads.append(
            DrawingRoad(
                starts_at=start,
                ends_at=end,
                length=length,
                bearing=start.trackpoint.bearing_to(other=end.trackpoint),
                gradient=gradient,
                start_distance=running,
                end_distance=running + length,
                index=index,
            )
        )
        running += length
    return roads


def derive_summary(roads: Sequence[DrawingRoad]) -> SummaryData:
    """Fold the road sequence left to right into SummaryData.

    Climbing/descending figures only count segments with strictly
    positive/negative gradient. No roads gives an all-zero summary.
    """
    if not roads:
        return SummaryData()

    highest = roads[0].starts_at.z
    lowest = roads[0].starts_at.z
    track_length = 0.0
    climbing_distance = 0.0
    descending_distance = 0.0
    total_climbing = 0.0
    total_descending = 0.0

    for road in roads:
        highest = max(highest, road.ends_at.z)
        lowest = min(lowest, road.ends_at.z)
        track_length += road.length
        rise = road.ends_at.z - road.starts_at.z
        if road.gradient > 0:
            climbing_distance += road.length
            total_climbing += rise
        elif road.gradient < 0:
            descending_distance += road.length
            total_descending -= rise

    return SummaryData(
        highest_metres=highest,
        lowest_metres=lowest,
        track_length=track_length,
        climbing_distance=climbing_distance,
        descending_distance=descending_distance,
        total_climbing=total_climbing,
        total_descending=total_descending,
    )


@dataclass(frozen=True)
class DerivedTrack:
    """Everything derived from one point list.

    Attributes:
        points: Reindexed source points (canonical state)
        scaling: Projection frame
        nodes: One DrawingNode per point
        roads: One DrawingRoad per consecutive pair of nodes
        summary: Aggregate statistics

    Example:
        track = DerivedTrack.from_points(points)
        print(f"{track.summary.track_length:.0f}m, {len(track.roads)} roads")
    """

    points: list[TrackPoint]
    scaling: ScalingInfo
    nodes: list[DrawingNode]
    roads: list[DrawingRoad]
    summary: SummaryData

    @classmethod
    def from_points(cls, points: Sequence[TrackPoint]) -> "DerivedTrack":
        """Run the full derivation pipeline. Empty input gives an empty model."""
        indexed = reindex(points)
        scaling = derive_projection(indexed)
        nodes = derive_nodes(scaling, indexed)
        roads = derive_roads(nodes)
        return cls(
            points=indexed,
            scaling=scaling,
            nodes=nodes,
            roads=roads,
            summary=derive_summary(roads),
        )

    @property
    def first(self) -> Optional[TrackPoint]:
        """First point of the track."""
        return self.points[0] if self.points else None

    @property
    def last(self) -> Optional[TrackPoint]:
        """Last point of the track."""
        return self.points[-1] if self.points else None

    def distance_at(self, node_index: int) -> float:
        """Cumulative distance from track start to a node."""
        if node_index == 0 or not self.roads:
            return 0.0
        return self.roads[node_index - 1].end_distance

    def get_linestring(self) -> Optional[LineString]:
        """Shapely LineString of (lon, lat), or None for fewer than 2 points."""
        if len(self.points) < 2:
            return None
        return LineString([p.lon_lat for p in self.points])
