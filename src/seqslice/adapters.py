"""Sequence adapters: the container-specific half of slicing.

The index arithmetic in ``seqslice._indexing`` never touches a container.
It only needs a length, and produces positions.
An adapter supplies the rest for one container kind:
reading a single element and building a new, independently owned
container of the same kind from selected positions.

Adapters are looked up by type in a registry,
so new container kinds can take part in slicing via `register_adapter`.
"""

import array
import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable, Sequence

import jax
import jax.numpy as jnp
import numpy as np

logger = logging.getLogger(__name__)


def _position_list(positions: Iterable[int]) -> list[int]:
    """Turn positions (numpy array, range, list) into a list of Python ints."""
    if isinstance(positions, np.ndarray):
        return positions.tolist()
    return [int(p) for p in positions]


class SequenceAdapter(ABC):
    """Capability a container kind provides to take part in slicing.

    ``element_at`` is only ever called with ``0 <= position < length(seq)``.
    Results of ``new_from_positions``, ``empty_of_same_kind`` and ``copy_range``
    must not share storage with ``seq``.
    """

    @abstractmethod
    def length(self, seq) -> int:
        """Number of addressable positions in ``seq``."""

    @abstractmethod
    def element_at(self, seq, position: int):
        """Element of ``seq`` at a non-negative, in-range position."""

    @abstractmethod
    def new_from_positions(self, seq, positions: Iterable[int]):
        """New sequence of the same kind holding ``seq``'s elements at ``positions``, in order."""

    def empty_of_same_kind(self, seq):
        """New zero-length sequence of the same kind as ``seq``."""
        return self.new_from_positions(seq, ())

    def copy_range(self, seq, begin: int, finish: int):
        """Contiguous copy of ``[begin, finish)``.

        Must equal ``new_from_positions(seq, range(begin, finish))``.
        Override when the container can copy a run of elements directly.
        """
        return self.new_from_positions(seq, range(begin, finish))


class BuiltinAdapter(SequenceAdapter):
    """Adapter for built-in sequences constructible from an iterable of elements.

    Covers ``list``, ``tuple``, ``bytes`` and ``bytearray``.
    """

    def __init__(self, kind: type) -> None:
        self.kind = kind

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.kind.__name__})"

    def length(self, seq: Sequence) -> int:
        return len(seq)

    def element_at(self, seq: Sequence, position: int):
        return seq[position]

    def new_from_positions(self, seq: Sequence, positions: Iterable[int]):
        return self.kind(seq[i] for i in _position_list(positions))

    def copy_range(self, seq: Sequence, begin: int, finish: int):
        return self.kind(seq[begin:finish])


class TextAdapter(BuiltinAdapter):
    """Adapter for ``str``. Elements are single-character strings."""

    def __init__(self) -> None:
        super().__init__(str)

    def new_from_positions(self, seq: str, positions: Iterable[int]) -> str:
        return "".join([seq[i] for i in _position_list(positions)])

    def copy_range(self, seq: str, begin: int, finish: int) -> str:
        return seq[begin:finish]


class TypedArrayAdapter(SequenceAdapter):
    """Adapter for ``array.array``. Results keep the source's type code."""

    def length(self, seq: array.array) -> int:
        return len(seq)

    def element_at(self, seq: array.array, position: int):
        return seq[position]

    def new_from_positions(
        self, seq: array.array, positions: Iterable[int]
    ) -> array.array:
        return array.array(seq.typecode, [seq[i] for i in _position_list(positions)])

    def copy_range(self, seq: array.array, begin: int, finish: int) -> array.array:
        return seq[begin:finish]


class NumpyAdapter(SequenceAdapter):
    """Adapter for ``numpy.ndarray``, sliced along axis 0.

    Results keep the source's dtype and trailing shape.
    Elements of 1-D arrays are numpy scalars;
    elements of N-D arrays are the rows along axis 0.
    """

    def length(self, seq: np.ndarray) -> int:
        return len(seq)

    def element_at(self, seq: np.ndarray, position: int):
        return seq[position]

    def new_from_positions(
        self, seq: np.ndarray, positions: Iterable[int]
    ) -> np.ndarray:
        # take() with an index array always returns a copy
        return np.take(seq, np.asarray(_position_list(positions), dtype=np.intp), axis=0)

    def empty_of_same_kind(self, seq: np.ndarray) -> np.ndarray:
        return seq[:0].copy()

    def copy_range(self, seq: np.ndarray, begin: int, finish: int) -> np.ndarray:
        return seq[begin:finish].copy()


class JaxAdapter(SequenceAdapter):
    """Adapter for ``jax.Array``, sliced along axis 0.

    JAX arrays are immutable, so every result is independent of the source.
    """

    def length(self, seq: jax.Array) -> int:
        return len(seq)

    def element_at(self, seq: jax.Array, position: int):
        return seq[position]

    def new_from_positions(self, seq: jax.Array, positions: Iterable[int]) -> jax.Array:
        indices = np.asarray(_position_list(positions), dtype=np.int32)
        return jnp.take(seq, indices, axis=0)

    def empty_of_same_kind(self, seq: jax.Array) -> jax.Array:
        return seq[:0]

    def copy_range(self, seq: jax.Array, begin: int, finish: int) -> jax.Array:
        return seq[begin:finish]


# Registry

_ADAPTERS: dict[type, SequenceAdapter] = {
    str: TextAdapter(),
    bytes: BuiltinAdapter(bytes),
    bytearray: BuiltinAdapter(bytearray),
    list: BuiltinAdapter(list),
    tuple: BuiltinAdapter(tuple),
    array.array: TypedArrayAdapter(),
    np.ndarray: NumpyAdapter(),
    jax.Array: JaxAdapter(),
}


def register_adapter(kind: type, adapter: SequenceAdapter) -> None:
    """Register ``adapter`` for sequences of type ``kind`` and its subclasses.

    Replaces any adapter previously registered for exactly ``kind``.
    """
    if not isinstance(adapter, SequenceAdapter):
        msg = f"adapter must be a SequenceAdapter, got {type(adapter).__name__}"
        raise TypeError(msg)
    if kind in _ADAPTERS:
        logger.debug("Replacing adapter for %s: %r", kind.__name__, _ADAPTERS[kind])
    else:
        logger.debug("Registering adapter for %s", kind.__name__)
    _ADAPTERS[kind] = adapter


def registered_kinds() -> list[type]:
    """Types that currently have a registered adapter, in registration order."""
    return list(_ADAPTERS)


def adapter_for(seq) -> SequenceAdapter:
    """Find the adapter for ``seq``.

    The most specific registered class in ``type(seq).__mro__`` wins.
    Kinds that are only virtual base classes (such as ``jax.Array``)
    are matched with ``isinstance`` afterwards.

    Raises:
        NotImplementedError: If no registered kind matches ``seq``.
    """
    for cls in type(seq).__mro__:
        adapter = _ADAPTERS.get(cls)
        if adapter is not None:
            return adapter

    for kind, adapter in _ADAPTERS.items():
        if isinstance(seq, kind):
            return adapter

    logger.debug("No adapter for %s among %d kinds", type(seq).__name__, len(_ADAPTERS))
    msg = (
        f"No adapter for sequence type '{type(seq).__name__}'. "
        "Register one with seqslice.register_adapter."
    )
    raise NotImplementedError(msg)
