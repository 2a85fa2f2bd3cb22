"""Points, paste offsets and the clipping arithmetic used when pasting."""

from dataclasses import dataclass
from typing import Iterable, List, NamedTuple, Optional, Tuple


class Point(NamedTuple):
    """Integer (x, y) position in the coordinate space of the target buffer."""

    x: int
    y: int


@dataclass(frozen=True)
class ClipRegion:
    """
    Result of clipping a paste against the target bounds.

    (src_x, src_y) is the top-left of the part of the source that survives,
    (dst_x, dst_y) is where it lands in the target.
    """

    src_x: int
    src_y: int
    dst_x: int
    dst_y: int
    width: int
    height: int


def _truncating_div(value: int, divisor: int) -> int:
    """Integer division rounding toward zero (-5 / 2 -> -2)."""
    quotient = abs(value) // divisor
    return quotient if value >= 0 else -quotient


def rescale_offsets(offsets: Iterable[Point], reduction_factor: int) -> List[Point]:
    """Map offsets into the coordinate space of a buffer reduced by reduction_factor."""
    return [
        Point(_truncating_div(p.x, reduction_factor), _truncating_div(p.y, reduction_factor))
        for p in offsets
    ]


def clip_paste_region(
    point: Tuple[int, int],
    target_size: Tuple[int, int],
    source_size: Tuple[int, int],
) -> Optional[ClipRegion]:
    """
    Clip a paste of a source_size block at point into a target_size buffer.

    Rules, applied in order:
    - x > target width or y > target height: skip. A point exactly on the
      far edge is not skipped here; it clips down to nothing below.
    - Negative x: crop -x columns off the source's left if anything remains,
      clamp x to 0; otherwise skip. Same for y with rows off the top.
    - Crop right and bottom overflow so the block ends at the target edge.

    Returns None when nothing is left to copy.
    """
    x, y = point
    target_width, target_height = target_size
    width, height = source_size
    src_x = src_y = 0

    if x > target_width or y > target_height:
        return None

    if x < 0:
        if x + width <= 0:
            return None
        src_x = -x
        width += x
        x = 0

    if y < 0:
        if y + height <= 0:
            return None
        src_y = -y
        height += y
        y = 0

    if x + width > target_width:
        width = target_width - x
    if y + height > target_height:
        height = target_height - y

    if width <= 0 or height <= 0:
        return None

    return ClipRegion(src_x=src_x, src_y=src_y, dst_x=x, dst_y=y, width=width, height=height)
