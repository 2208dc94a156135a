"""seqslice - one slicing convention for text, lists and arrays.

Slices are addressed by possibly negative begin/finish indices and an
optional stride, and always return a new, independent sequence of the
same kind as the input.
"""

from seqslice._indexing import END
from seqslice.adapters import (
    SequenceAdapter,
    adapter_for,
    register_adapter,
    registered_kinds,
)
from seqslice.errors import IndexOutOfRangeError, SliceError, ZeroStrideError
from seqslice.slicing import element, slice_of, strided, subrange
from seqslice.verify import (
    VerificationError,
    check_slice_consistency,
    elements_of,
)

__all__ = [
    "END",
    "IndexOutOfRangeError",
    "SequenceAdapter",
    "SliceError",
    "VerificationError",
    "ZeroStrideError",
    "adapter_for",
    "check_slice_consistency",
    "element",
    "elements_of",
    "register_adapter",
    "registered_kinds",
    "slice_of",
    "strided",
    "subrange",
]
