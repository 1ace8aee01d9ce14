"""Track edit operations.

Pure functions from a point list to EditResult | EditError. Validation of
UI-supplied parameters lives in trackshaper.edits.validators.
"""

from trackshaper.edits.operations import (
    close_loop,
    delete_zero_length,
    nudge,
    nudge_preview,
    smooth_bend,
    smooth_gradient,
    split_segment,
    straighten,
    vertical_split,
)

__all__ = [
    "straighten",
    "vertical_split",
    "nudge",
    "nudge_preview",
    "split_segment",
    "delete_zero_length",
    "close_loop",
    "smooth_bend",
    "smooth_gradient",
]
