from . import sizes
from . import type_hints
