"""Global constants for the page packer.

This module holds the default packing settings and the binary search
tolerances shared by the packers. Defaults follow the classic texture
packer configuration: small minimum pages, 1024x1024 maximum pages and
two pixels of padding on each axis.
"""

DEFAULT_MIN_WIDTH = 16
DEFAULT_MIN_HEIGHT = 16
DEFAULT_MAX_WIDTH = 1024
DEFAULT_MAX_HEIGHT = 1024
DEFAULT_PADDING_X = 2
DEFAULT_PADDING_Y = 2
DEFAULT_POT = True
DEFAULT_FAST = False
DEFAULT_ROTATION = False

# Bracket width at which the size search stops bisecting
SEARCH_FUZZINESS = 15
FAST_SEARCH_FUZZINESS = 25


class Axis:
    """Names used when reporting which page dimension a rect exceeds."""

    WIDTH = "width"
    HEIGHT = "height"
