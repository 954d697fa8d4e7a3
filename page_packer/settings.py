"""Packing settings.

Settings are read once when a packer is built and never change afterwards,
so they are a namedtuple rather than a mutable object. Components receive
the same instance through their constructors.
"""

from collections import namedtuple
from typing import Any, Mapping

from . import globs
from .packer_types import InvalidSettingsError

_FIELDS = (
    "min_width",
    "min_height",
    "max_width",
    "max_height",
    "padding_x",
    "padding_y",
    "pot",
    "fast",
    "rotation",
)

_DEFAULTS = (
    globs.DEFAULT_MIN_WIDTH,
    globs.DEFAULT_MIN_HEIGHT,
    globs.DEFAULT_MAX_WIDTH,
    globs.DEFAULT_MAX_HEIGHT,
    globs.DEFAULT_PADDING_X,
    globs.DEFAULT_PADDING_Y,
    globs.DEFAULT_POT,
    globs.DEFAULT_FAST,
    globs.DEFAULT_ROTATION,
)


class Settings(namedtuple("_Settings", _FIELDS, defaults=_DEFAULTS)):
    """Page size limits and packing options.

    Attributes:
        min_width: Smallest page width the size search may propose.
        min_height: Smallest page height the size search may propose.
        max_width: Largest page width.
        max_height: Largest page height.
        padding_x: Added to the width of every rect before packing.
        padding_y: Added to the height of every rect before packing.
        pot: Restrict page sizes to powers of two.
        fast: Pre-sort rects and place them in order instead of greedy
            re-scoring; also uses a coarser size search.
        rotation: Allow rects to be rotated by 90 degrees.
    """

    __slots__ = ()

    @classmethod
    def from_dict(cls, values: Mapping[str, Any]) -> "Settings":
        """Builds settings from a plain mapping, e.g. a parsed JSON file.

        Missing keys take their defaults.

        Raises:
            InvalidSettingsError: If the mapping has keys that are not settings.
        """
        unknown = sorted(set(values) - set(cls._fields))
        if unknown:
            raise InvalidSettingsError("Unknown settings: {}".format(", ".join(unknown)))
        return cls(**values)

    def validate(self) -> "Settings":
        """Checks the settings for consistency and returns them unchanged.

        Raises:
            InvalidSettingsError: If a minimum exceeds its maximum, a maximum
                is not positive or a padding is negative.
        """
        if self.max_width <= 0 or self.max_height <= 0:
            raise InvalidSettingsError(
                "Page max size must be positive: {}x{}".format(self.max_width, self.max_height)
            )
        if self.min_width > self.max_width:
            raise InvalidSettingsError("Page min width cannot be higher than max width.")
        if self.min_height > self.max_height:
            raise InvalidSettingsError("Page min height cannot be higher than max height.")
        if self.padding_x < 0 or self.padding_y < 0:
            raise InvalidSettingsError(
                "Padding cannot be negative: {}x{}".format(self.padding_x, self.padding_y)
            )
        return self
