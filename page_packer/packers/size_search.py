"""Binary search over candidate page sizes.

The search does not look for the exact minimum page size. It bisects the
bracket until its width drops below a tolerance ("fuzziness"), trading a
slightly larger page for a logarithmic number of packing trials. In
power-of-two mode the bracket holds exponents and bisection is exact.
"""

from typing import Optional

from ..utils.sizes import exponent_of


def _midpoint(low: int, high: int) -> int:
    # Truncate toward zero so an inverted bracket never leaves [low, high]
    return low + int((high - low) / 2)


class SizeSearch:
    """Proposes page sizes between a minimum and a maximum.

    Attributes:
        minimum: Lower bound of the bracket (an exponent in pot mode).
        maximum: Upper bound of the bracket (an exponent in pot mode).
        fuzziness: Bracket width below which the search is exhausted.
        pot: If True, proposed sizes are powers of two.
        low: Current lower bound.
        high: Current upper bound.
        current: Last proposed value (an exponent in pot mode).
    """

    def __init__(self, minimum: int, maximum: int, fuzziness: int, pot: bool):
        self.pot = pot
        self.fuzziness = 0 if pot else fuzziness
        self.minimum = exponent_of(minimum) if pot else minimum
        self.maximum = exponent_of(maximum) if pot else maximum
        self.low = self.minimum
        self.high = self.maximum
        self.current = self.minimum

    @property
    def max_size(self) -> int:
        """The largest size this search can propose."""
        return self._size(self.maximum)

    def reset(self) -> int:
        """Restarts the search and returns the midpoint size of the full bracket."""
        self.low = self.minimum
        self.high = self.maximum
        self.current = _midpoint(self.low, self.high)
        return self._size(self.current)

    def next(self, fits: bool) -> Optional[int]:
        """Narrows the bracket around the last proposed size.

        Args:
            fits: Whether the last proposed size packed everything. A fitting
                size moves the search down, a failing one moves it up.

        Returns:
            The next size to try, or None once the search is exhausted.
        """
        if self.low >= self.high:
            return None
        if fits:
            self.high = self.current - 1
        else:
            self.low = self.current + 1
        self.current = _midpoint(self.low, self.high)
        if self.low > self.high or self.high - self.low < self.fuzziness:
            return None
        return self._size(self.current)

    def _size(self, value: int) -> int:
        return 1 << value if self.pot else value
