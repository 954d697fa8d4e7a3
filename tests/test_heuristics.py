import pytest

from page_packer import FreeRect, Heuristic, MaxRectsBin, Rect, Settings
from page_packer.packers.heuristics import common_interval_length, contact_point_score, find_position


@pytest.fixture
def two_free_bin():
    settings = Settings(min_width=1, min_height=1, padding_x=0, padding_y=0, pot=False)
    packing_bin = MaxRectsBin(20, 20, settings)
    packing_bin.free_rects = [FreeRect(0, 0, 6, 6), FreeRect(10, 0, 5, 12)]
    return packing_bin


@pytest.mark.parametrize("heuristic, expected", [
    (Heuristic.BEST_SHORT_SIDE_FIT, (10, 0, (0, 8))),
    (Heuristic.BEST_LONG_SIDE_FIT, (0, 0, (2, 1))),
    (Heuristic.BEST_AREA_FIT, (0, 0, (16, 1))),
    (Heuristic.BOTTOM_LEFT_RULE, (0, 0, (4, 0))),
])
def test_heuristic_choice(two_free_bin, heuristic, expected):
    placement = find_position(heuristic, two_free_bin, 5, 4, 4, 5, False)
    assert (placement.x, placement.y, placement.score) == expected
    assert not placement.rotated


def test_contact_point_prefers_most_contact():
    settings = Settings(min_width=1, min_height=1, padding_x=0, padding_y=0, pot=False)
    packing_bin = MaxRectsBin(20, 20, settings)
    used = Rect(10, 4, "used")
    packing_bin.used_rects = [used]
    packing_bin.free_rects = [FreeRect(10, 0, 10, 20), FreeRect(0, 4, 20, 16)]

    assert contact_point_score(packing_bin, 10, 0, 5, 5) == 9
    assert contact_point_score(packing_bin, 0, 4, 5, 5) == 10

    placement = find_position(Heuristic.CONTACT_POINT_RULE, packing_bin, 5, 5, 5, 5, False)
    assert (placement.x, placement.y) == (0, 4)
    assert placement.score == (-10,)


def test_contact_point_counts_page_edges():
    settings = Settings(min_width=1, min_height=1, padding_x=0, padding_y=0, pot=False)
    packing_bin = MaxRectsBin(10, 10, settings)
    # Touches the left, right and top edges
    assert contact_point_score(packing_bin, 0, 0, 10, 3) == 3 + 10


def test_no_candidate_is_none(two_free_bin):
    assert find_position(Heuristic.BEST_AREA_FIT, two_free_bin, 7, 7, 7, 7, True) is None


def test_rotated_orientation_is_used_when_allowed(two_free_bin):
    # 3x12 only fits the 5x12 free rect upright; 12x3 fits nowhere
    placement = find_position(Heuristic.BEST_SHORT_SIDE_FIT, two_free_bin, 12, 3, 3, 12, True)
    assert placement.rotated
    assert (placement.x, placement.y, placement.width, placement.height) == (10, 0, 3, 12)
    assert find_position(Heuristic.BEST_SHORT_SIDE_FIT, two_free_bin, 12, 3, 3, 12, False) is None


def test_ties_keep_first_free_rect():
    settings = Settings(min_width=1, min_height=1, padding_x=0, padding_y=0, pot=False)
    packing_bin = MaxRectsBin(20, 20, settings)
    packing_bin.free_rects = [FreeRect(10, 0, 5, 5), FreeRect(0, 10, 5, 5)]
    placement = find_position(Heuristic.BEST_SHORT_SIDE_FIT, packing_bin, 5, 5, 5, 5, True)
    assert (placement.x, placement.y, placement.rotated) == (10, 0, False)


def test_common_interval_length():
    assert common_interval_length(0, 4, 2, 6) == 2
    assert common_interval_length(0, 2, 3, 5) == 0
    assert common_interval_length(0, 2, 2, 4) == 0
    assert common_interval_length(0, 10, 3, 5) == 2
