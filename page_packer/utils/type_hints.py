# Shared type hints

from typing import Any, Hashable, Tuple

from numpy import ndarray

Size = Tuple[int, int]

# Whatever the caller attaches to a rect; the packer never looks inside it
Payload = Any
ImageKey = Hashable

CoverageMask = ndarray

ScoreTuple = Tuple[int, ...]
