"""Turn raw slicing arguments into the source positions to copy.

Resolution happens in two steps:
``resolve_range`` normalizes the begin/finish markers against the length,
then ``stride_positions`` walks the resolved range with the stride.

The main entry point is `select_positions`,
which the public slicing functions call before handing the positions
to a sequence adapter.
"""

from ._commons import END, Positions, as_index, position_map
from ._resolve import ResolvedRange, resolve_index, resolve_range
from ._stride import check_stride, stride_count, stride_positions

__all__ = [
    "END",
    "Positions",
    "ResolvedRange",
    "as_index",
    "check_stride",
    "position_map",
    "resolve_index",
    "resolve_range",
    "select_positions",
    "stride_count",
    "stride_positions",
]


def select_positions(
    length: int, begin: int, finish: int | None, stride: int = 1
) -> Positions | None:
    """Compute the positions selected by ``(begin, finish, stride)``.

    The stride is validated first, so a zero stride is rejected
    whatever the range resolves to.

    Returns:
        ``None`` when the range resolves as empty (``finish < begin``),
        so callers can short-circuit to an empty sequence of the right kind.
        Otherwise the ordered positions, possibly an empty array.
    """
    stride = check_stride(stride)
    rng = resolve_range(begin, finish, length)
    if rng.is_empty:
        return None
    return stride_positions(rng, stride)
