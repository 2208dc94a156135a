"""Types, constants, and utilities shared by the index resolver and stride extractor."""

import operator
import sys

import numpy as np
from numpy.typing import NDArray

END = sys.maxsize
"""Historical "slice to the end" sentinel.

The largest index a sequence can have, so it can never be a position
a caller would naturally pass. ``None`` is the preferred way to say
"no explicit end"; both resolve identically.
"""

Positions = NDArray[np.intp]
"""Ordered source positions selected by a slice."""


def as_index(value, name: str) -> int:
    """Convert ``value`` to a Python int, rejecting non-integers.

    Accepts anything implementing ``__index__`` (ints, numpy integer scalars).
    """
    try:
        return operator.index(value)
    except TypeError:
        msg = f"{name} must be an integer, got {type(value).__name__}"
        raise TypeError(msg) from None


def position_map(start: int, stop: int, step: int) -> Positions:
    """Build the flat array of positions visited by a walk.

    ``stop`` is exclusive, as for ``range``.
    For ``(4, -1, -2)`` returns ``[4, 2, 0]``.
    """
    return np.arange(start, stop, step, dtype=np.intp)
