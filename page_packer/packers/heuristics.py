"""Free rectangle choice heuristics for the maximal rectangles packer.

Each heuristic scores placing a rect at the top-left corner of a free
rectangle. Scores are tuples compared lexicographically, lower is better, so
the second element only matters when the first ties. The contact point rule
prefers more contact and therefore stores its score negated.
"""

from enum import Enum
from typing import Callable, Dict, Optional

from ..packer_types import FreeRect, Placement
from ..utils.type_hints import ScoreTuple


class Heuristic(Enum):
    # Positions the rect against the short side of the free rect it fits best
    BEST_SHORT_SIDE_FIT = "BSSF"
    # Positions the rect against the long side of the free rect it fits best
    BEST_LONG_SIDE_FIT = "BLSF"
    # Positions the rect into the smallest free rect it fits into
    BEST_AREA_FIT = "BAF"
    # Tetris placement
    BOTTOM_LEFT_RULE = "BL"
    # Picks the position where the rect touches other rects the most
    CONTACT_POINT_RULE = "CP"


def common_interval_length(i1_start: int, i1_end: int, i2_start: int, i2_end: int) -> int:
    """Calculates the length of the overlap between two 1D intervals.

    Returns:
        The length of the common interval. Returns 0 if there is no overlap.
    """
    if i1_end < i2_start or i2_end < i1_start:
        return 0
    return min(i1_end, i2_end) - max(i1_start, i2_start)


def contact_point_score(packing_bin, x: int, y: int, width: int, height: int) -> int:
    """Calculates the contact point score for a potential placement.

    The score is the sum of lengths of edges that touch the bin boundaries
    or already placed rectangles.

    Args:
        packing_bin: The bin being packed; its size and used rects are read.
        x: The left x-coordinate of the potential placement.
        y: The top y-coordinate of the potential placement.
        width: The width of the rectangle being placed.
        height: The height of the rectangle being placed.

    Returns:
        The contact point score.
    """
    score = 0
    right = x + width
    bottom = y + height

    if x == 0 or right == packing_bin.width:
        score += height
    if y == 0 or bottom == packing_bin.height:
        score += width

    for rect in packing_bin.used_rects:
        # Sharing a vertical edge
        if rect.x == right or rect.right == x:
            score += common_interval_length(rect.y, rect.bottom, y, bottom)
        # Sharing a horizontal edge
        if rect.y == bottom or rect.bottom == y:
            score += common_interval_length(rect.x, rect.right, x, right)
    return score


def _best_short_side_fit(packing_bin, free: FreeRect, width: int, height: int) -> ScoreTuple:
    leftover_horiz = free.width - width
    leftover_vert = free.height - height
    return min(leftover_horiz, leftover_vert), max(leftover_horiz, leftover_vert)


def _best_long_side_fit(packing_bin, free: FreeRect, width: int, height: int) -> ScoreTuple:
    leftover_horiz = free.width - width
    leftover_vert = free.height - height
    return max(leftover_horiz, leftover_vert), min(leftover_horiz, leftover_vert)


def _best_area_fit(packing_bin, free: FreeRect, width: int, height: int) -> ScoreTuple:
    area_fit = free.area - width * height
    return area_fit, min(free.width - width, free.height - height)


def _bottom_left(packing_bin, free: FreeRect, width: int, height: int) -> ScoreTuple:
    return free.y + height, free.x


def _contact_point(packing_bin, free: FreeRect, width: int, height: int) -> ScoreTuple:
    return (-contact_point_score(packing_bin, free.x, free.y, width, height),)


_SCORERS: Dict[Heuristic, Callable[..., ScoreTuple]] = {
    Heuristic.BEST_SHORT_SIDE_FIT: _best_short_side_fit,
    Heuristic.BEST_LONG_SIDE_FIT: _best_long_side_fit,
    Heuristic.BEST_AREA_FIT: _best_area_fit,
    Heuristic.BOTTOM_LEFT_RULE: _bottom_left,
    Heuristic.CONTACT_POINT_RULE: _contact_point,
}


def find_position(heuristic: Heuristic, packing_bin, width: int, height: int,
                  rotated_width: int, rotated_height: int, rotate: bool) -> Optional[Placement]:
    """Finds the best free rectangle for a rect under one heuristic.

    Every free rectangle is tried with the rect upright and, if rotate is
    set, turned by 90 degrees. Only a strictly better score replaces the
    current best, so ties keep the first candidate in free list order.

    Args:
        heuristic: The scoring rule to use.
        packing_bin: The bin being packed; its free and used rects are read.
        width: Width of the rect upright.
        height: Height of the rect upright.
        rotated_width: Width of the rect when rotated.
        rotated_height: Height of the rect when rotated.
        rotate: Whether the rotated orientation may be used.

    Returns:
        The best placement, or None if no free rectangle can hold the rect.
    """
    scorer = _SCORERS[heuristic]
    best = None

    for free in packing_bin.free_rects:
        if free.width >= width and free.height >= height:
            score = scorer(packing_bin, free, width, height)
            if best is None or score < best.score:
                best = Placement(free.x, free.y, width, height, False, score)

        if rotate and free.width >= rotated_width and free.height >= rotated_height:
            score = scorer(packing_bin, free, rotated_width, rotated_height)
            if best is None or score < best.score:
                best = Placement(free.x, free.y, rotated_width, rotated_height, True, score)

    return best
