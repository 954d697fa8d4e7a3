"""Packs rects into as few pages as possible.

Typical usage:
    settings = Settings(max_width=512, max_height=512, rotation=True)
    packer = MaxRectsPacker(settings)
    pages = packer.pack([Rect(100, 200, "mat1"), Rect(150, 100, "mat2")])

Each page is found with a nested binary search over page widths and
heights. Every candidate size is packed with all heuristics and the result
with the highest occupancy wins. Rects that do not fit on a page are packed
onto the next one.
"""

import logging
from typing import List, Optional

from .. import globs
from ..packer_types import Page, PackingError, Rect, RectTooLargeError
from ..settings import Settings
from ..utils.sizes import next_power_of_two
from .heuristics import Heuristic
from .max_rects_bin import MaxRectsBin
from .size_search import SizeSearch

logger = logging.getLogger(__name__)


def _get_best(result1: Optional[Page], result2: Optional[Page]) -> Optional[Page]:
    if result1 is None:
        return result2
    if result2 is None:
        return result1
    return result2 if result2.occupancy > result1.occupancy else result1


class MaxRectsPacker:
    """Multi-page packer built on the maximal rectangles bin.

    Attributes:
        settings: Validated, read-only packing settings.
        heuristics: The heuristics tried at every candidate size, in order.
    """

    def __init__(self, settings: Settings = None):
        """Initializes the packer.

        Args:
            settings: Packing settings. Defaults to Settings().

        Raises:
            InvalidSettingsError: If the settings are inconsistent.
        """
        self.settings = (Settings() if settings is None else settings).validate()
        self.heuristics = list(Heuristic)

    def pack(self, rects: List[Rect]) -> List[Page]:
        """Packs rects onto as many pages as needed.

        The rects passed in are not modified; the pages hold padded, placed
        copies with the same payloads.

        Args:
            rects: The rects to pack, with unpadded sizes.

        Returns:
            The pages in the order they were filled.

        Raises:
            PackingError: If a rect has a non-positive size.
            RectTooLargeError: If a rect cannot fit a maximum-size page.
        """
        settings = self.settings
        input_rects = []
        for rect in rects:
            if not (rect.width > 0 and rect.height > 0):
                raise PackingError(
                    "Rect '{}' has non-positive dimensions: ({}x{})".format(
                        rect.payload, rect.width, rect.height
                    )
                )
            padded = rect.copy()
            padded.rotated = False
            padded.x = 0
            padded.y = 0
            padded.width += settings.padding_x
            padded.height += settings.padding_y
            input_rects.append(padded)

        if settings.fast:
            if settings.rotation:
                # Sort by longest side if rotation is enabled.
                input_rects.sort(key=lambda r: max(r.width, r.height), reverse=True)
            else:
                # Sort only by width if rotation is disabled.
                input_rects.sort(key=lambda r: r.width, reverse=True)

        pages = []
        while input_rects:
            result = self.pack_page(input_rects)
            pages.append(result)
            input_rects = result.remaining_rects
            logger.info(
                "[pack] page %d: %d rects, %dx%d, occupancy %.3f, %d remaining",
                len(pages),
                len(result.output_rects),
                result.width,
                result.height,
                result.occupancy,
                len(input_rects),
            )
        return pages

    def pack_page(self, rects: List[Rect]) -> Page:
        """Packs as many rects as possible onto one page of minimal size.

        Args:
            rects: Padded rects still to be packed.

        Returns:
            The page with the best occupancy found. Rects that did not fit
            are in its remaining_rects.

        Raises:
            RectTooLargeError: If a rect cannot fit a maximum-size page.
        """
        settings = self.settings
        min_width, min_height = self._min_page_size(rects)

        fuzziness = globs.FAST_SEARCH_FUZZINESS if settings.fast else globs.SEARCH_FUZZINESS
        width_search = SizeSearch(min_width, settings.max_width, fuzziness, settings.pot)
        height_search = SizeSearch(min_height, settings.max_height, fuzziness, settings.pot)

        logger.debug(
            "[pack_page] %d rects, width %d-%d, height %d-%d",
            len(rects), min_width, settings.max_width, min_height, settings.max_height,
        )

        # Find the minimal page size that fits all rects.
        width = width_search.reset()
        height = height_search.reset()
        trials = 0
        best_result = None
        while True:
            best_width_result = None
            while width is not None:
                result = self.pack_at_size(True, width, height, rects)
                trials += 1
                logger.debug(
                    "[pack_page] trial %dx%d: %s",
                    width, height, "fits" if result is not None else "does not fit",
                )
                best_width_result = _get_best(best_width_result, result)
                width = width_search.next(result is not None)
            best_result = _get_best(best_result, best_width_result)
            height = height_search.next(best_width_result is not None)
            if height is None:
                break
            width = width_search.reset()

        # Rects don't fit on one page. Fill a whole page and return.
        if best_result is None:
            logger.debug("[pack_page] no size fits all rects after %d trials, filling a max size page", trials)
            best_result = self.pack_at_size(
                False, width_search.max_size, height_search.max_size, rects
            )
            if best_result is None:
                raise PackingError("No rect could be placed on an empty page.")

        if settings.pot:
            best_result.width = next_power_of_two(best_result.width)
            best_result.height = next_power_of_two(best_result.height)
        return best_result

    def pack_at_size(self, fully: bool, width: int, height: int, rects: List[Rect]) -> Optional[Page]:
        """Packs rects into a page of a given size with every heuristic.

        Args:
            fully: If True, only results that pack all rects are considered.
                If False, any result that packs at least one rect is.
            width: Candidate page width.
            height: Candidate page height.
            rects: Padded rects to pack.

        Returns:
            The result with the highest occupancy, or None if no heuristic
            produced an acceptable result.
        """
        best_result = None
        for heuristic in self.heuristics:
            max_rects = MaxRectsBin(width, height, self.settings)
            if not self.settings.fast:
                result = max_rects.pack_all(rects, heuristic)
            else:
                remaining = []
                for i, rect in enumerate(rects):
                    if max_rects.insert(rect, heuristic) is None:
                        remaining = list(rects[i:])
                        break
                result = max_rects.get_result()
                result.heuristic = heuristic.value
                result.remaining_rects = remaining

            if fully and result.remaining_rects:
                continue
            if not result.output_rects:
                continue
            best_result = _get_best(best_result, result)
        return best_result

    def _min_page_size(self, rects: List[Rect]):
        """Finds the smallest page size worth searching and checks rect sizes.

        A rect that may rotate only needs its smaller orientation to fit
        on each axis.

        Raises:
            RectTooLargeError: If a rect cannot fit a maximum-size page in
                any allowed orientation.
        """
        settings = self.settings
        min_width = settings.min_width
        min_height = settings.min_height
        for rect in rects:
            rotated_width = rect.height - settings.padding_y + settings.padding_x
            rotated_height = rect.width - settings.padding_x + settings.padding_y
            rotate = rect.can_rotate and settings.rotation

            fits_upright = rect.width <= settings.max_width and rect.height <= settings.max_height
            fits_rotated = rotate and rotated_width <= settings.max_width and rotated_height <= settings.max_height
            if not (fits_upright or fits_rotated):
                self._raise_too_large(rect)

            if rotate:
                min_width = max(min_width, min(rect.width, rotated_width))
                min_height = max(min_height, min(rect.height, rotated_height))
            else:
                min_width = max(min_width, rect.width)
                min_height = max(min_height, rect.height)
        return min_width, min_height

    def _raise_too_large(self, rect: Rect) -> None:
        settings = self.settings
        original_width = rect.width - settings.padding_x
        original_height = rect.height - settings.padding_y
        if rect.width > settings.max_width:
            axis, limit, padding = globs.Axis.WIDTH, settings.max_width, settings.padding_x
        else:
            axis, limit, padding = globs.Axis.HEIGHT, settings.max_height, settings.padding_y
        raise RectTooLargeError(rect, original_width, original_height, axis, limit, padding)
