"""Texture atlas page packer.

Packs rectangles into as few fixed-maximum-size pages as possible using a
maximal rectangles bin, a binary search over page sizes and five placement
heuristics.
"""

from .packer_types import FreeRect, InvalidSettingsError, Page, PackingError, Placement, Rect, RectTooLargeError
from .packers import pack
from .packers.heuristics import Heuristic
from .packers.max_rects_bin import MaxRectsBin
from .packers.max_rects_packer import MaxRectsPacker
from .packers.size_search import SizeSearch
from .settings import Settings

__all__ = [
    "FreeRect",
    "Heuristic",
    "InvalidSettingsError",
    "MaxRectsBin",
    "MaxRectsPacker",
    "Page",
    "PackingError",
    "Placement",
    "Rect",
    "RectTooLargeError",
    "Settings",
    "SizeSearch",
    "pack",
]
