import numpy as np
import pytest
from PIL import Image

from page_packer import Page, PackingError, Rect, Settings, pack
from page_packer.atlas import coverage_mask, render_page, rects_from_images

RED = (255, 0, 0, 255)
GREEN = (0, 255, 0, 255)


@pytest.fixture
def images():
    return {
        "red": Image.new("RGBA", (10, 10), RED),
        "green": Image.new("RGB", (6, 6), GREEN[:3]),
    }


def test_rects_from_images(images):
    rects = rects_from_images(images, can_rotate=False)
    assert [(r.payload, r.width, r.height, r.can_rotate) for r in rects] == [
        ("red", 10, 10, False),
        ("green", 6, 6, False),
    ]


def test_render_page(images, plain_settings):
    pages = pack(rects_from_images(images), plain_settings)
    page = pages[0]
    atlas = render_page(page, images, plain_settings)
    assert atlas.size == (page.width, page.height)
    assert atlas.mode == "RGBA"
    for rect in page.output_rects:
        color = RED if rect.payload == "red" else GREEN
        assert atlas.getpixel((rect.x, rect.y)) == color
        assert atlas.getpixel((rect.right - 1, rect.bottom - 1)) == color


def test_render_page_offsets_by_half_padding(images):
    settings = Settings(min_width=1, min_height=1, max_width=32, max_height=32, padding_x=4, padding_y=2, pot=False)
    page = pack(rects_from_images(images), settings)[0]
    atlas = render_page(page, images, settings)
    rect = next(r for r in page.output_rects if r.payload == "red")
    assert atlas.getpixel((rect.x + 2, rect.y + 1)) == RED
    assert atlas.getpixel((rect.x + 1, rect.y + 1)) != RED


def test_render_rotated_image():
    src = Image.new("RGBA", (4, 2))
    src.putpixel((0, 0), RED)
    rect = Rect(2, 4, "src")
    rect.rotated = True
    page = Page(output_rects=[rect], width=2, height=4, bin_width=2, bin_height=4, occupancy=1.0)
    settings = Settings(padding_x=0, padding_y=0)

    atlas = render_page(page, {"src": src}, settings)
    # Turned clockwise, the top-left pixel ends up top-right
    assert atlas.getpixel((1, 0)) == RED
    assert atlas.getpixel((0, 0)) != RED


def test_render_page_missing_image(plain_settings):
    page = Page(output_rects=[Rect(2, 2, "nope")], width=2, height=2)
    with pytest.raises(PackingError):
        render_page(page, {}, plain_settings)


def test_coverage_mask_has_no_overlap(mixed_rects):
    settings = Settings(max_width=128, max_height=128, rotation=True)
    for page in pack(mixed_rects, settings):
        mask = coverage_mask(page)
        assert mask.shape == (page.height, page.width)
        assert mask.max() == 1
        assert int(mask.sum()) == sum(rect.area for rect in page.output_rects)
        assert np.count_nonzero(mask) == int(mask.sum())
