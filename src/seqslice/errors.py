"""Exceptions raised by seqslice."""


class SliceError(Exception):
    """Base class for errors raised by seqslice."""


class ZeroStrideError(SliceError, ValueError):
    """Raised when a stride of ``0`` is passed to ``strided``.

    A zero stride never terminates, so it is rejected for every sequence kind
    before any position is computed or any result is allocated.
    """


class IndexOutOfRangeError(SliceError, IndexError):
    """Raised when ``element`` resolves to a position outside ``[0, length)``.

    Unlike range endpoints, single positions are never clamped.

    Attributes:
        index: The raw index passed by the caller.
        position: The resolved (possibly negative) position.
        length: Length of the sequence at call time.
    """

    def __init__(self, index: int, position: int, length: int) -> None:
        self.index = index
        self.position = position
        self.length = length
        super().__init__(
            f"Index {index} resolves to position {position}, "
            f"outside a sequence of length {length}."
        )
