"""Anomaly types reported by the AnomalyDetector.

- AbruptChange: sharp gradient or bearing change at a node
- Loopiness: NotALoop | IsALoop | AlmostLoop(gap_m)
- ProblemReport: all detector results for one track
"""

from dataclasses import dataclass, field

from trackshaper.model.drawing import DrawingNode, DrawingRoad


@dataclass(frozen=True)
class AbruptChange:
    """A candidate anomaly at the node shared by two consecutive roads.

    Attributes:
        node: Shared node (before.ends_at)
        before: Road arriving at the node
        after: Road leaving the node
    """

    node: DrawingNode
    before: DrawingRoad
    after: DrawingRoad


# =============================================================================
# Loopiness
# =============================================================================


@dataclass(frozen=True)
class NotALoop:
    """Start and end are too far apart to be a loop."""


@dataclass(frozen=True)
class IsALoop:
    """Start and end coincide."""


@dataclass(frozen=True)
class AlmostLoop:
    """Start and end are close enough to offer closing the loop.

    Attributes:
        gap_m: Great-circle distance between first and last point
    """

    gap_m: float


Loopiness = NotALoop | IsALoop | AlmostLoop


@dataclass(frozen=True)
class ProblemReport:
    """All anomalies found in one track."""

    abrupt_gradient_changes: list[AbruptChange] = field(default_factory=list)
    abrupt_bearing_changes: list[AbruptChange] = field(default_factory=list)
    zero_length_segments: list[DrawingRoad] = field(default_factory=list)
    loopiness: Loopiness = field(default_factory=NotALoop)

    @property
    def has_problems(self) -> bool:
        """True if any list is non-empty. Loopiness alone is not a problem."""
        return bool(self.abrupt_gradient_changes or self.abrupt_bearing_changes or self.zero_length_segments)
