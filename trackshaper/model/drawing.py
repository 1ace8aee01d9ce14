"""Projected track geometry: projection frame, nodes and roads.

- ScalingInfo: Projection frame derived once per point sequence
- DrawingNode: TrackPoint plus its local (x, y, z) location in meters
- DrawingRoad: Directed segment between two consecutive nodes

All three are immutable and rebuilt in full after every edit.
"""

from dataclasses import dataclass
from math import degrees

from trackshaper.core.planar_geometry import LineEquation, Point2D, line_from_points
from trackshaper.model.track_point import TrackPoint


@dataclass(frozen=True)
class ScalingInfo:
    """Projection frame for converting geographic to local coordinates.

    Attributes:
        min_lat, max_lat, centre_lat: Latitude extents (degrees)
        min_lon, max_lon, centre_lon: Longitude extents (degrees)
        min_ele, max_ele, centre_ele: Elevation extents (meters)
        metres_per_degree: Flat scale applied to both lat and lon
    """

    min_lat: float
    max_lat: float
    centre_lat: float
    min_lon: float
    max_lon: float
    centre_lon: float
    min_ele: float
    max_ele: float
    centre_ele: float
    metres_per_degree: float

    @property
    def largest_dimension_m(self) -> float:
        """Largest extent of the track box in meters (horizontal or vertical)."""
        return max(
            (self.max_lat - self.min_lat) * self.metres_per_degree,
            (self.max_lon - self.min_lon) * self.metres_per_degree,
            self.max_ele - self.min_ele,
        )

    def to_geographic(self, x: float, y: float) -> tuple[float, float]:
        """Inverse projection of local meters to (lat, lon)."""
        return (
            self.centre_lat + y / self.metres_per_degree,
            self.centre_lon + x / self.metres_per_degree,
        )


@dataclass(frozen=True)
class DrawingNode:
    """A TrackPoint with its projected local location.

    Attributes:
        trackpoint: The source point
        x: Easting in meters from the projection centre
        y: Northing in meters from the projection centre
        z: Elevation in meters
    """

    trackpoint: TrackPoint
    x: float
    y: float
    z: float

    @property
    def idx(self) -> int:
        """Track index delegated from trackpoint."""
        return self.trackpoint.idx

    @property
    def location(self) -> Point2D:
        """Planar location (x, y)."""
        return Point2D(x=self.x, y=self.y)


@dataclass(frozen=True)
class DrawingRoad:
    """A directed segment between two consecutive nodes.

    Attributes:
        starts_at: Node at the start of the segment
        ends_at: Node at the end of the segment
        length: Great-circle length in meters (elevation ignored)
        bearing: Initial bearing in radians (0 = north, clockwise)
        gradient: Signed gradient in percent, 0 for zero-length segments
        start_distance: Cumulative distance from track start to starts_at
        end_distance: Cumulative distance from track start to ends_at
        index: Position in the road sequence (equals starts_at.idx)
    """

    starts_at: DrawingNode
    ends_at: DrawingNode
    length: float
    bearing: float
    gradient: float
    start_distance: float
    end_distance: float
    index: int

    @property
    def is_zero_length(self) -> bool:
        """True for degenerate segments between coincident points."""
        return self.length == 0.0

    @property
    def bearing_deg(self) -> float:
        """Bearing in degrees."""
        return degrees(self.bearing)

    @property
    def line(self) -> LineEquation:
        """Implicit planar line through both nodes."""
        return line_from_points(self.starts_at.location, self.ends_at.location)

    def __repr__(self) -> str:
        return (
            f"DrawingRoad(#{self.index}, {self.length:.1f}m, "
            f"{self.bearing_deg:.0f}°, {self.gradient:+.1f}%)"
        )
