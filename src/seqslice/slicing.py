"""Uniform slicing of text, growable sequences and fixed-size arrays.

All entry points behave identically for every supported container kind:
indices are resolved by ``seqslice._indexing``
and the result is materialized by the container's ``SequenceAdapter``.

Slices are copies: the result never shares storage with the source.
Each call reads the source's length once and assumes it is not mutated
by another thread until the call returns; preventing that is up to the caller.
"""

from seqslice._indexing import (
    END,
    check_stride,
    resolve_index,
    resolve_range,
    select_positions,
)
from seqslice.adapters import SequenceAdapter, adapter_for
from seqslice.errors import IndexOutOfRangeError

__all__ = ["END", "element", "slice_of", "strided", "subrange"]


def element(seq, index: int, *, adapter: SequenceAdapter | None = None):
    """Get the element at ``index``, counting from the end if negative.

    Example: ``element("HelpA", -1) == "A"``

    Args:
        seq: Any sequence with a registered adapter.
        index: Position from the start if non-negative, from the end if negative.
        adapter: Adapter to use instead of looking one up for ``seq``.

    Raises:
        IndexOutOfRangeError: If ``index`` resolves outside ``[0, len(seq))``.
    """
    if adapter is None:
        adapter = adapter_for(seq)
    length = adapter.length(seq)
    position = resolve_index(index, length)
    if not 0 <= position < length:
        raise IndexOutOfRangeError(index, position, length)
    return adapter.element_at(seq, position)


def subrange(
    seq,
    begin: int,
    finish: int | None = None,
    *,
    adapter: SequenceAdapter | None = None,
):
    """Copy the elements between ``begin`` and ``finish``.

    Same as ``strided(seq, begin, finish, 1)``.

    Example: ``subrange("HelpA", 0, -2) == "Hel"``
    """
    return strided(seq, begin, finish, 1, adapter=adapter)


def strided(
    seq,
    begin: int,
    finish: int | None = None,
    stride: int = 1,
    *,
    adapter: SequenceAdapter | None = None,
):
    """Copy every ``stride``-th element between ``begin`` and ``finish``.

    Out-of-range or negative ``begin``/``finish`` never raise:
    they shrink the result, down to an empty sequence.
    A negative stride walks the same range backward, from ``finish - 1``.

    Example: ``seq = "HelpA"``
        ``strided(seq, 0, END, 2)  == "HlA"``
        ``strided(seq, 0, END, -1) == "ApleH"``
        ``strided(seq, 1, 4, -2)   == "pe"``

    Args:
        seq: Any sequence with a registered adapter.
        begin: First position; negative counts from the end.
        finish: Position to stop before; negative counts from the end.
            ``None`` or ``END`` extends to the end of ``seq``.
        stride: Step between selected positions; must not be 0.
        adapter: Adapter to use instead of looking one up for ``seq``.

    Returns:
        A new sequence of the same kind as ``seq``.

    Raises:
        ZeroStrideError: If ``stride`` is 0.
    """
    stride = check_stride(stride)
    if adapter is None:
        adapter = adapter_for(seq)
    length = adapter.length(seq)

    if stride == 1:
        rng = resolve_range(begin, finish, length)
        if rng.is_empty:
            return adapter.empty_of_same_kind(seq)
        return adapter.copy_range(seq, rng.begin, rng.finish)

    positions = select_positions(length, begin, finish, stride)
    if positions is None:
        return adapter.empty_of_same_kind(seq)
    return adapter.new_from_positions(seq, positions)


def slice_of(seq, *indices: int | None, adapter: SequenceAdapter | None = None):
    """Slice ``seq`` with one, two or three indices.

    - ``slice_of(seq, i)`` is ``element(seq, i)``
    - ``slice_of(seq, b, f)`` is ``subrange(seq, b, f)``
    - ``slice_of(seq, b, f, s)`` is ``strided(seq, b, f, s)``
    """
    match indices:
        case (index,):
            return element(seq, index, adapter=adapter)
        case (begin, finish):
            return subrange(seq, begin, finish, adapter=adapter)
        case (begin, finish, stride):
            return strided(seq, begin, finish, stride, adapter=adapter)
        case _:
            msg = f"slice_of takes 1 to 3 indices, got {len(indices)}"
            raise TypeError(msg)
