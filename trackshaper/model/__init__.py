"""Data model classes for track editing.

The flat TrackPoint list is the only owned state; everything else is derived:
- TrackPoint: Geometry atom (lat, lon, ele, idx)
- ScalingInfo: Projection frame
- DrawingNode: Projected point
- DrawingRoad: Segment with length, bearing, gradient, cumulative distance
- SummaryData: Aggregate statistics
- DerivedTrack: Full derivation of one point list
- AbruptChange, Loopiness, ProblemReport: Anomaly results
- SmoothedBend: Bend smoothing result
- EditResult, EditError: Edit outcomes
"""

from trackshaper.model.anomaly import (
    AbruptChange,
    AlmostLoop,
    IsALoop,
    Loopiness,
    NotALoop,
    ProblemReport,
)
from trackshaper.model.drawing import DrawingNode, DrawingRoad, ScalingInfo
from trackshaper.model.edit_result import (
    DegenerateGeometry,
    EditError,
    EditResult,
    EmptyTrack,
    InvalidRange,
)
from trackshaper.model.smoothed_bend import SmoothedBend
from trackshaper.model.summary import SummaryData
from trackshaper.model.track_model import (
    DerivedTrack,
    derive_nodes,
    derive_projection,
    derive_roads,
    derive_summary,
    interpolate,
    project_to_local,
    reindex,
)
from trackshaper.model.track_point import TrackPoint

__all__ = [
    "TrackPoint",
    "ScalingInfo",
    "DrawingNode",
    "DrawingRoad",
    "SummaryData",
    "DerivedTrack",
    "derive_projection",
    "project_to_local",
    "derive_nodes",
    "derive_roads",
    "derive_summary",
    "interpolate",
    "reindex",
    "AbruptChange",
    "NotALoop",
    "IsALoop",
    "AlmostLoop",
    "Loopiness",
    "ProblemReport",
    "SmoothedBend",
    "EditResult",
    "EditError",
    "InvalidRange",
    "DegenerateGeometry",
    "EmptyTrack",
]
