"""Index resolution: raw, possibly negative indices to concrete positions."""

from __future__ import annotations

from dataclasses import dataclass

from ._commons import END, as_index


@dataclass(frozen=True)
class ResolvedRange:
    """Half-open position interval ``[begin, finish)`` of a sequence.

    ``begin`` is never negative. ``finish`` is never larger than ``length``
    but may be negative when an excessively negative end was passed,
    in which case the range is empty.

    Attributes:
        begin: First position of the range.
        finish: One past the last position of the range.
        length: Length of the sequence the range was resolved against.
    """

    begin: int
    finish: int
    length: int

    @property
    def is_empty(self) -> bool:
        """Whether the range was resolved as empty (``finish < begin``)."""
        return self.finish < self.begin

    @property
    def span(self) -> int:
        """Number of positions in the range."""
        return max(self.finish - self.begin, 0)

    def count(self, stride: int) -> int:
        """Number of positions a walk with ``stride`` visits in this range.

        ``ceil(span / |stride|)``, the same for both directions.
        """
        step = abs(stride)
        return -(-self.span // step)


def resolve_index(index: int, length: int) -> int:
    """Resolve a single index against a sequence length.

    Negative indices count back from ``length``.
    No clamping is applied: the result may lie outside ``[0, length)``,
    and it is up to the caller to reject it.
    """
    index = as_index(index, "index")
    if index < 0:
        return length + index
    return index


def resolve_range(begin: int, finish: int | None, length: int) -> ResolvedRange:
    """Resolve raw begin/finish markers into a ``ResolvedRange``.

    ``finish`` equal to ``None`` or ``END``, or larger than ``length``,
    extends to ``length``.
    A negative ``finish`` counts back from ``length`` and is *not* floored,
    so an excessively negative one empties the range instead of wrapping.
    A negative ``begin`` counts back from ``length`` and is floored at 0,
    so overshooting the start is tolerated.

    Example: ``length = 5``
        ``(0, -2)``     -> ``[0, 3)``
        ``(-100, None)`` -> ``[0, 5)``
        ``(1, -100)``   -> ``[1, -95)``, empty
        ``(10, END)``   -> ``[10, 5)``, empty
    """
    begin = as_index(begin, "begin")
    if finish is None:
        finish = END
    finish = as_index(finish, "finish")

    if finish == END or finish > length:
        finish = length
    elif finish < 0:
        finish = length + finish

    if begin < 0:
        begin = max(length + begin, 0)

    return ResolvedRange(begin=begin, finish=finish, length=length)
