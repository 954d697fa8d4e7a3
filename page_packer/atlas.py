"""Pillow adapter between packed pages and atlas images.

Nothing here takes part in placement. It turns images into rects for the
packer and composites the pages the packer returns.

Typical usage:
    images = {'mat1': Image.open('mat1.png'), 'mat2': Image.open('mat2.png')}
    settings = Settings(max_width=2048, max_height=2048)
    pages = pack(rects_from_images(images), settings)
    atlas = render_page(pages[0], images, settings)
"""

import logging
from typing import List, Mapping

import numpy as np
from PIL import Image

from .packer_types import Page, PackingError, Rect
from .settings import Settings
from .utils.type_hints import CoverageMask, ImageKey

logger = logging.getLogger(__name__)

ImageType = Image.Image


def rects_from_images(images: Mapping[ImageKey, ImageType], can_rotate: bool = True) -> List[Rect]:
    """Creates one rect per image, in mapping order.

    Args:
        images: Images keyed by anything hashable. The key becomes the payload.
        can_rotate: Whether the packer may rotate these images.

    Returns:
        Unpadded rects sized like the images.
    """
    return [Rect(img.size[0], img.size[1], key, can_rotate) for key, img in images.items()]


def render_page(page: Page, images: Mapping[ImageKey, ImageType], settings: Settings,
                mode: str = "RGBA") -> ImageType:
    """Composites the images of a page onto a new atlas image.

    Each image is pasted at its rect, offset by half the padding. Rotated
    rects get the image turned 90 degrees clockwise.

    Args:
        page: A page returned by the packer.
        images: The images the page's rect payloads refer to.
        settings: The settings the page was packed with.
        mode: Pillow mode of the atlas image.

    Returns:
        An image of page.width x page.height.

    Raises:
        PackingError: If a placed rect has no matching image.
    """
    img = Image.new(mode, (page.width, page.height))
    half_gap_x = int(settings.padding_x / 2)
    half_gap_y = int(settings.padding_y / 2)

    for rect in page.output_rects:
        if rect.payload not in images:
            raise PackingError("No image for packed rect '{}'".format(rect.payload))
        gfx = images[rect.payload]
        if rect.rotated:
            gfx = gfx.transpose(Image.Transpose.ROTATE_270)
        if gfx.mode != mode:
            gfx = gfx.convert(mode)
        img.paste(gfx, (rect.x + half_gap_x, rect.y + half_gap_y))

    logger.debug("[render_page] %d images on a %dx%d atlas", len(page.output_rects), page.width, page.height)
    return img


def coverage_mask(page: Page) -> CoverageMask:
    """Counts how many placed rects cover each pixel of a page.

    Returns:
        A (height, width) uint16 array. Any value above 1 is an overlap.
    """
    mask = np.zeros((page.height, page.width), dtype=np.uint16)
    for rect in page.output_rects:
        mask[rect.y:rect.bottom, rect.x:rect.right] += 1
    return mask
