"""Power-of-two helpers used by the page size search."""


def next_power_of_two(value: int) -> int:
    """Return the smallest power of two that is >= value (1 for values <= 1)."""
    if value <= 1:
        return 1
    return 1 << (value - 1).bit_length()


def is_power_of_two(value: int) -> bool:
    return value > 0 and value & (value - 1) == 0


def exponent_of(value: int) -> int:
    """Base-2 exponent of the next power of two of value."""
    return next_power_of_two(value).bit_length() - 1
