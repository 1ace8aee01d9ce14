"""trackshaper - Geometry engine for editing GPS tracks.

Converts a raw list of GPS points into a road-segment model, finds anomalies
and computes smoothing edits:
- Projection of points into a local metric frame
- Per-segment length, bearing, gradient and cumulative distance
- Abrupt gradient/bearing changes, zero-length segments, loop detection
- Bend smoothing (incircle arcs), gradient smoothing, nudging, splitting,
  straightening and loop closing as pure point-list transforms

Modules:
    core: Foundation math (geodesy, planar geometry) and analysis algorithms
    model: Data structures (TrackPoint, DrawingNode, DrawingRoad, DerivedTrack)
    edits: Edit operations returning EditResult or EditError

Example:
    from trackshaper.model import DerivedTrack, TrackPoint
    from trackshaper.edits import smooth_gradient

    track = DerivedTrack.from_points(points)
    result = smooth_gradient(track.points, start=3, finish=17, gradient=4.0, bumpiness=0.4)
"""
