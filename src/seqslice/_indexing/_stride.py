"""Stride extraction: the ordered source positions of a resolved range."""

from ..errors import ZeroStrideError
from ._commons import Positions, as_index, position_map
from ._resolve import ResolvedRange


def check_stride(stride: int) -> int:
    """Validate a stride, returning it as a Python int.

    Raises:
        ZeroStrideError: If ``stride`` is 0.
        TypeError: If ``stride`` is not an integer.
    """
    stride = as_index(stride, "stride")
    if stride == 0:
        msg = "Slice stride can not be zero."
        raise ZeroStrideError(msg)
    return stride


def stride_count(rng: ResolvedRange, stride: int) -> int:
    """Number of positions ``stride_positions`` returns for ``rng``."""
    if rng.is_empty:
        return 0
    return rng.count(stride)


def stride_positions(rng: ResolvedRange, stride: int) -> Positions:
    """Enumerate the source positions selected by ``stride`` within ``rng``.

    A positive stride walks forward from ``begin`` while below ``finish``.
    A negative stride walks backward from ``finish - 1`` while at or above ``begin``,
    reversing (and decimating, for ``|stride| > 1``) the range in place
    rather than reinterpreting its bounds.

    Example: range ``[0, 5)``
        stride  2 -> ``[0, 2, 4]``
        stride -1 -> ``[4, 3, 2, 1, 0]``
        stride -2 -> ``[4, 2, 0]``

    Example: range ``[1, 5)``
        stride -3 -> ``[4, 1]``

    Every returned position lies inside ``[begin, finish)``,
    so extraction can never index out of bounds.
    """
    stride = check_stride(stride)
    if rng.is_empty or rng.span == 0:
        return position_map(0, 0, 1)
    if stride > 0:
        return position_map(rng.begin, rng.finish, stride)
    return position_map(rng.finish - 1, rng.begin - 1, stride)
