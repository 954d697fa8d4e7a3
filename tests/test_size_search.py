from page_packer import SizeSearch
from page_packer.utils.sizes import exponent_of, is_power_of_two, next_power_of_two


def test_reset_returns_midpoint():
    search = SizeSearch(10, 100, 15, False)
    assert search.reset() == 55


def test_fitting_sizes_move_the_search_down():
    search = SizeSearch(10, 100, 15, False)
    search.reset()
    assert search.next(True) == 32
    assert search.next(True) == 20
    # Bracket [10, 19] is narrower than the fuzziness
    assert search.next(True) is None


def test_failing_sizes_move_the_search_up():
    search = SizeSearch(1, 4, 0, False)
    assert search.reset() == 2
    assert search.next(False) == 3
    assert search.next(False) == 4
    assert search.next(False) is None


def test_closed_bracket_is_exhausted():
    search = SizeSearch(8, 8, 15, False)
    assert search.reset() == 8
    assert search.next(True) is None
    assert search.next(False) is None


def test_reset_restarts_search():
    search = SizeSearch(10, 100, 15, False)
    search.reset()
    search.next(True)
    assert search.reset() == 55
    assert (search.low, search.high) == (10, 100)


def test_pot_search_proposes_powers_of_two():
    search = SizeSearch(16, 1024, 15, True)
    assert search.fuzziness == 0
    assert search.reset() == 128
    assert search.next(False) == 512
    assert search.next(True) == 256
    assert search.next(True) is None


def test_pot_search_rounds_bounds_up():
    search = SizeSearch(100, 1000, 15, True)
    assert (search.minimum, search.maximum) == (7, 10)
    assert search.max_size == 1024
    sizes = [search.reset()]
    fits = True
    while sizes[-1] is not None:
        sizes.append(search.next(fits))
        fits = not fits
    assert all(is_power_of_two(size) for size in sizes[:-1])
    assert all(128 <= size <= 1024 for size in sizes[:-1])


def test_power_of_two_helpers():
    assert next_power_of_two(0) == 1
    assert next_power_of_two(1) == 1
    assert next_power_of_two(17) == 32
    assert next_power_of_two(64) == 64
    assert exponent_of(64) == 6
    assert exponent_of(65) == 7
    assert is_power_of_two(1024)
    assert not is_power_of_two(0)
    assert not is_power_of_two(96)
