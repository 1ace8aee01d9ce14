"""SummaryData - Aggregate statistics of a track."""

from dataclasses import dataclass


@dataclass(frozen=True)
class SummaryData:
    """Track statistics folded over the road sequence.

    Attributes:
        highest_metres: Highest elevation of any node
        lowest_metres: Lowest elevation of any node
        track_length: Total horizontal length in meters
        climbing_distance: Length of segments with positive gradient
        descending_distance: Length of segments with negative gradient
        total_climbing: Sum of elevation gained on climbing segments
        total_descending: Sum of elevation lost on descending segments (positive)
    """

    highest_metres: float = 0.0
    lowest_metres: float = 0.0
    track_length: float = 0.0
    climbing_distance: float = 0.0
    descending_distance: float = 0.0
    total_climbing: float = 0.0
    total_descending: float = 0.0
