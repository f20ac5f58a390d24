"""Split direction types and helpers."""

from __future__ import annotations

import enum


class Split(str, enum.Enum):
    """Side of a docking region where a new child region is inserted.

    LEFT/RIGHT divide the region horizontally, ABOVE/BELOW vertically.
    """

    LEFT = "left"
    RIGHT = "right"
    ABOVE = "above"
    BELOW = "below"


def is_left_right(split: Split) -> bool:
    """True for left/right (regions placed side by side)."""
    return split in (Split.LEFT, Split.RIGHT)


def is_top_bottom(split: Split) -> bool:
    """True for above/below (regions stacked)."""
    return split in (Split.ABOVE, Split.BELOW)
