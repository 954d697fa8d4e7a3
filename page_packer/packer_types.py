from collections import namedtuple
from typing import List, Optional

from .utils.type_hints import Payload


class PackingError(Exception):
    """Indicates an error occurred during the packing process."""

    pass


class InvalidSettingsError(PackingError):
    """Raised when packing settings are inconsistent (e.g. min > max)."""

    pass


class RectTooLargeError(PackingError):
    """Raised when a rect cannot fit a maximum-size page in any orientation.

    Attributes:
        rect: The offending rect, as passed in by the caller.
        original_width: Width of the rect before padding was applied.
        original_height: Height of the rect before padding was applied.
        axis: The page dimension that is too small ("width" or "height").
        limit: The maximum page size on that axis.
    """

    def __init__(self, rect: "Rect", original_width: int, original_height: int, axis: str, limit: int,
                 padding: int):
        self.rect = rect
        self.original_width = original_width
        self.original_height = original_height
        self.axis = axis
        self.limit = limit
        super().__init__(
            "Image does not fit with max page {} {} and padding {}: {} ({}x{})".format(
                axis, limit, padding, rect.payload, original_width, original_height
            )
        )


# __dict__ based baseclass
class _Base:
    def __repr__(self):
        items = ("{}={}".format(k, repr(v)) for k, v in self.__dict__.items())
        return "{}({})".format(type(self).__name__, ", ".join(items))

    def __eq__(self, other):
        return isinstance(other, self.__class__) and self.__dict__ == other.__dict__


class Rect(_Base):
    """A rectangle to pack, with its placement once packed.

    Attributes:
        payload: Opaque reference carried through to the output.
        width: Width of the rect; includes padding once the packer owns it.
        height: Height of the rect; includes padding once the packer owns it.
        can_rotate: Whether this rect may be turned by 90 degrees.
        rotated: True when the chosen placement is rotated.
        x: The x-coordinate of the left edge once placed.
        y: The y-coordinate of the top edge once placed.
    """

    def __init__(self, width: int, height: int, payload: Payload = None, can_rotate: bool = True):
        self.payload = payload
        self.width = width
        self.height = height
        self.can_rotate = can_rotate
        self.rotated = False
        self.x = 0
        self.y = 0

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height

    @property
    def area(self) -> int:
        return self.width * self.height

    def copy(self) -> "Rect":
        rect = Rect(self.width, self.height, self.payload, self.can_rotate)
        rect.rotated = self.rotated
        rect.x = self.x
        rect.y = self.y
        return rect

    def __str__(self) -> str:
        return "[Rect({}, x:{}, y:{}, w:{}, h:{}{})]".format(
            self.payload, self.x, self.y, self.width, self.height, ", rotated" if self.rotated else ""
        )


class FreeRect(_Base):
    """An empty, axis-aligned region of a bin. Carries no payload."""

    def __init__(self, x: int, y: int, width: int, height: int):
        self.x = x
        self.y = y
        self.width = width
        self.height = height

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height

    @property
    def area(self) -> int:
        return self.width * self.height

    def contains(self, other) -> bool:
        """Checks if this rectangle completely contains another rectangle."""
        return (
            other.x >= self.x
            and other.y >= self.y
            and other.right <= self.right
            and other.bottom <= self.bottom
        )

    def intersects(self, other) -> bool:
        return not (
            other.x >= self.right
            or other.right <= self.x
            or other.y >= self.bottom
            or other.bottom <= self.y
        )


# A scored candidate position. score is compared as a tuple: lower wins.
Placement = namedtuple("Placement", ["x", "y", "width", "height", "rotated", "score"])


class Page(_Base):
    """The outcome of one packing trial or one finished page.

    Attributes:
        output_rects: Placed rects in placement order.
        width: Width of the tight bounding box of the placed rects.
        height: Height of the tight bounding box of the placed rects.
        bin_width: Candidate page width the rects were packed into.
        bin_height: Candidate page height the rects were packed into.
        occupancy: Placed area divided by the candidate page area.
        heuristic: Name of the heuristic that produced this page.
        remaining_rects: Rects that did not fit and carry over to the next page.
    """

    def __init__(self,
                 output_rects: List[Rect] = None,
                 width: int = 0,
                 height: int = 0,
                 bin_width: int = 0,
                 bin_height: int = 0,
                 occupancy: float = 0.0,
                 heuristic: Optional[str] = None,
                 remaining_rects: List[Rect] = None):
        self.output_rects = [] if output_rects is None else output_rects
        self.width = width
        self.height = height
        self.bin_width = bin_width
        self.bin_height = bin_height
        self.occupancy = occupancy
        self.heuristic = heuristic
        self.remaining_rects = [] if remaining_rects is None else remaining_rects
