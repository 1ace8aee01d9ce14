"""SmoothedBend - Replacement arc produced by bend smoothing."""

from dataclasses import dataclass

from trackshaper.model.track_point import TrackPoint


@dataclass(frozen=True)
class SmoothedBend:
    """A replacement point run plus its provenance.

    Attributes:
        track_points: New points along the incircle arc (idx not yet assigned)
        start_index: Node index of the entry road's start (kept)
        end_index: Node index of the exit road's end (kept)
        radius: Incircle radius in meters
        centre: Incircle centre (x, y) in local meters
    """

    track_points: list[TrackPoint]
    start_index: int
    end_index: int
    radius: float
    centre: tuple[float, float]
