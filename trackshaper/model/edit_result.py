"""EditResult and EditError - Outcomes of track edit operations.

Every edit returns exactly one of:
- EditResult: new point list plus a short label for an undo stack
- EditError: why the edit was not applied

Design Principles:
- No exceptions for expected failures (bad indices, straight tracks,
  parallel roads are routine while editing)
- Errors know their own human-readable message
- Caller decides how to display the error or whether to offer the action
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from trackshaper.model.track_point import TrackPoint


@dataclass(frozen=True)
class EditResult:
    """A successfully applied edit.

    Attributes:
        points: New, reindexed point list
        description: Human-readable label, e.g. "split segment 4."
    """

    points: list[TrackPoint]
    description: str


@dataclass(frozen=True)
class EditError(ABC):
    """Abstract base class for rejected edits.

    Subclasses store the offending parameters and compute the message.
    Use isinstance() to check the error kind.
    """

    operation: str

    @property
    @abstractmethod
    def message(self) -> str:
        """Human-readable explanation."""

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True)
class InvalidRange(EditError):
    """Index or index pair outside the track, or in the wrong order.

    Attributes:
        detail: Which parameter is wrong and its value
        point_count: Number of points in the track
    """

    detail: str
    point_count: int

    @property
    def message(self) -> str:
        return f"Cannot {self.operation}: {self.detail} (track has {self.point_count} points)"


@dataclass(frozen=True)
class DegenerateGeometry(EditError):
    """Geometry does not allow the edit (collinear, parallel, zero length).

    Attributes:
        reason: What is degenerate
    """

    reason: str

    @property
    def message(self) -> str:
        return f"Cannot {self.operation}: {self.reason}"


@dataclass(frozen=True)
class EmptyTrack(EditError):
    """Too few points for the edit.

    Attributes:
        point_count: Number of points in the track
        required: Minimum number of points needed
    """

    point_count: int
    required: int

    @property
    def message(self) -> str:
        return f"Cannot {self.operation}: need at least {self.required} points, track has {self.point_count}"
