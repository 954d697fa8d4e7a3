from typing import List

from ..packer_types import Page, Rect
from ..settings import Settings
from .max_rects_packer import MaxRectsPacker


def pack(rects: List[Rect], settings: Settings = None) -> List[Page]:
    packer = MaxRectsPacker(settings)
    return packer.pack(rects)
