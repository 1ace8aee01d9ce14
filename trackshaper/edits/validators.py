"""Validators - Parameter checks for track edit operations.

Parameters arrive from the UI checked for type only. Validators return
Optional[EditError]:
- None if valid
- An EditError if invalid (caller returns it unchanged)

Nothing is clamped: an out-of-range index would edit the wrong points.
"""

from trackshaper.model.edit_result import EditError, EmptyTrack, InvalidRange


def validate_point_count(
    operation: str,
    point_count: int,
    required: int,
) -> EditError | None:
    """Validate the track has at least `required` points.

    Returns:
        None if valid, EmptyTrack otherwise.
    """
    if point_count < required:
        return EmptyTrack(operation=operation, point_count=point_count, required=required)
    return None


def validate_node_index(
    operation: str,
    index: int,
    point_count: int,
    interior: bool = False,
) -> EditError | None:
    """Validate a node index.

    Args:
        operation: Operation name for the message
        index: Node index to check
        point_count: Number of points in the track
        interior: Require a node with a road on both sides (not first/last)

    Returns:
        None if valid, InvalidRange otherwise.
    """
    low, high = (1, point_count - 2) if interior else (0, point_count - 1)
    if not low <= index <= high:
        kind = "interior node" if interior else "node"
        return InvalidRange(
            operation=operation,
            detail=f"{kind} index {index} outside {low}..{high}",
            point_count=point_count,
        )
    return None


def validate_road_index(
    operation: str,
    road_index: int,
    point_count: int,
) -> EditError | None:
    """Validate a road index (0 <= road_index < point_count - 1).

    Returns:
        None if valid, InvalidRange otherwise.
    """
    if not 0 <= road_index < point_count - 1:
        return InvalidRange(
            operation=operation,
            detail=f"segment index {road_index} outside 0..{point_count - 2}",
            point_count=point_count,
        )
    return None


def validate_node_range(
    operation: str,
    start: int,
    finish: int,
    point_count: int,
    min_gap: int = 1,
) -> EditError | None:
    """Validate an ordered node range with finish >= start + min_gap.

    Returns:
        None if valid, InvalidRange otherwise.
    """
    for index in (start, finish):
        error = validate_node_index(operation=operation, index=index, point_count=point_count)
        if error is not None:
            return error
    if finish < start + min_gap:
        return InvalidRange(
            operation=operation,
            detail=f"range {start}..{finish} needs finish >= start + {min_gap}",
            point_count=point_count,
        )
    return None


def validate_fraction(
    operation: str,
    name: str,
    value: float,
    point_count: int,
) -> EditError | None:
    """Validate a blend factor lies in [0, 1].

    Returns:
        None if valid, InvalidRange otherwise.
    """
    if not 0.0 <= value <= 1.0:
        return InvalidRange(
            operation=operation,
            detail=f"{name} {value} outside 0..1",
            point_count=point_count,
        )
    return None
