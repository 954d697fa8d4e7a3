import pytest

from page_packer import Rect, Settings


def overlaps(a, b):
    return not (a.right <= b.x or b.right <= a.x or a.bottom <= b.y or b.bottom <= a.y)


@pytest.fixture
def plain_settings():
    """Exact sizes: no padding, no power-of-two rounding, tiny minimum pages."""
    return Settings(min_width=1, min_height=1, max_width=16, max_height=16,
                    padding_x=0, padding_y=0, pot=False, fast=False, rotation=False)


@pytest.fixture
def mixed_rects():
    sizes = [(30, 20), (64, 64), (10, 50), (25, 25), (48, 12), (7, 7), (33, 18), (20, 40),
             (16, 16), (60, 8), (12, 30), (40, 40)]
    return [Rect(w, h, "img{}".format(i)) for i, (w, h) in enumerate(sizes)]
