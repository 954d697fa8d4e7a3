"""Maximal rectangles bin for a single packing trial.

The bin keeps the list of placed rects and the list of free rectangles.
Free rectangles may overlap each other; together they cover exactly the
unoccupied area of the bin, and none of them is contained in another one.
A bin is built for one (page size, heuristic) trial and thrown away after
its result is taken.

Based on the public domain maximal rectangles algorithm by Jukka Jylänki.
"""

import logging
from typing import List, Optional

from ..packer_types import FreeRect, Page, Placement, Rect
from ..settings import Settings
from .heuristics import Heuristic, find_position

logger = logging.getLogger(__name__)


class MaxRectsBin:
    """Packs rects into one page of a fixed size.

    Attributes:
        width: Width of the candidate page.
        height: Height of the candidate page.
        settings: Packing settings; padding and rotation are read.
        used_rects: Rects placed so far, in placement order.
        free_rects: Maximal free rectangles. Order only drives tie-breaking.
    """

    def __init__(self, width: int, height: int, settings: Settings):
        self.width = width
        self.height = height
        self.settings = settings
        self.used_rects: List[Rect] = []
        self.free_rects: List[FreeRect] = [FreeRect(0, 0, width, height)]

    def insert(self, rect: Rect, heuristic: Heuristic) -> Optional[Rect]:
        """Packs a single rect. Order is defined by the caller.

        Args:
            rect: The rect to place. It is not modified.
            heuristic: The rule used to choose the free rectangle.

        Returns:
            The placed copy of the rect, or None if it does not fit.
        """
        placement = self.score_rect(rect, heuristic)
        if placement is None:
            return None
        return self._place_rect(rect, placement)

    def pack_all(self, rects: List[Rect], heuristic: Heuristic) -> Page:
        """Greedily packs as many rects as possible.

        Before each placement every remaining rect is scored against the
        current free list and the best scoring one is placed. This is
        quadratic in the number of rects but packs tighter than insert().

        Args:
            rects: The rects to pack. The list and its rects are not modified.
            heuristic: The rule used to score placements.

        Returns:
            The result page; rects that could not be placed are in
            remaining_rects, in their input order.
        """
        remaining = list(rects)
        while remaining:
            best_index = -1
            best_placement = None

            for i, rect in enumerate(remaining):
                placement = self.score_rect(rect, heuristic)
                if placement is None:
                    continue
                if best_placement is None or placement.score < best_placement.score:
                    best_placement = placement
                    best_index = i

            if best_placement is None:
                break

            self._place_rect(remaining.pop(best_index), best_placement)

        result = self.get_result()
        result.heuristic = heuristic.value
        result.remaining_rects = remaining
        return result

    def get_result(self) -> Page:
        """Builds a page from the rects placed so far.

        The page size is the tight bounding box of the placed rects, while
        the occupancy is relative to the candidate page size so results of
        different trials can be compared.
        """
        width = 0
        height = 0
        for rect in self.used_rects:
            width = max(width, rect.right)
            height = max(height, rect.bottom)
        return Page(
            output_rects=list(self.used_rects),
            width=width,
            height=height,
            bin_width=self.width,
            bin_height=self.height,
            occupancy=self.occupancy(),
        )

    def occupancy(self) -> float:
        """Computes the ratio of used surface area to the bin area."""
        used_surface_area = sum(rect.area for rect in self.used_rects)
        return used_surface_area / (self.width * self.height)

    def score_rect(self, rect: Rect, heuristic: Heuristic) -> Optional[Placement]:
        """Finds where a rect would go, without placing it.

        Rotating a padded rect swaps its padding as well: the rotated width
        is the unpadded height plus the horizontal padding.
        """
        padding_x = self.settings.padding_x
        padding_y = self.settings.padding_y
        rotated_width = rect.height - padding_y + padding_x
        rotated_height = rect.width - padding_x + padding_y
        rotate = rect.can_rotate and self.settings.rotation
        return find_position(
            heuristic, self, rect.width, rect.height, rotated_width, rotated_height, rotate
        )

    def _place_rect(self, rect: Rect, placement: Placement) -> Rect:
        placed = rect.copy()
        placed.x = placement.x
        placed.y = placement.y
        placed.width = placement.width
        placed.height = placement.height
        placed.rotated = placement.rotated

        untouched = []
        splits = []
        for free in self.free_rects:
            if free.intersects(placed):
                splits.extend(_split_free_node(free, placed))
            else:
                untouched.append(free)
        self.free_rects = untouched + splits

        self._prune_free_list()
        self.used_rects.append(placed)

        logger.debug(
            "[_place_rect] %s; free rects: %d", placed, len(self.free_rects)
        )
        return placed

    def _prune_free_list(self) -> None:
        """Removes every free rectangle that is contained in another one.

        Of two identical free rectangles only the later one survives.
        """
        free_rects = self.free_rects
        i = 0
        while i < len(free_rects):
            j = i + 1
            removed_i = False
            while j < len(free_rects):
                if free_rects[j].contains(free_rects[i]):
                    free_rects.pop(i)
                    removed_i = True
                    break
                if free_rects[i].contains(free_rects[j]):
                    free_rects.pop(j)
                else:
                    j += 1
            if not removed_i:
                i += 1


def _split_free_node(free: FreeRect, used: Rect) -> List[FreeRect]:
    """Splits a free rectangle around an overlapping placed rect.

    Returns the parts of the free rectangle above, below, left and right of
    the placed rect. Parts with no extent are dropped.
    """
    nodes = []

    # Above the used node
    if free.y < used.y < free.bottom:
        nodes.append(FreeRect(free.x, free.y, free.width, used.y - free.y))

    # Below the used node
    if used.bottom < free.bottom:
        nodes.append(FreeRect(free.x, used.bottom, free.width, free.bottom - used.bottom))

    # Left of the used node
    if free.x < used.x < free.right:
        nodes.append(FreeRect(free.x, free.y, used.x - free.x, free.height))

    # Right of the used node
    if used.right < free.right:
        nodes.append(FreeRect(used.right, free.y, free.right - used.right, free.height))

    return nodes
