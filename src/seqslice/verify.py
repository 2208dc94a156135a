"""Verification utilities for checking slices against an element-by-element reference."""

import array

import jax
import numpy as np

from seqslice._indexing import check_stride, resolve_range, stride_positions
from seqslice.adapters import SequenceAdapter, adapter_for
from seqslice.slicing import strided

_MUTABLE_KINDS = (list, bytearray, array.array)
"""Kinds whose slices must never be the source object itself."""


class VerificationError(AssertionError):
    """Raised when a slice disagrees with the element-by-element reference.

    The reference copies one element at a time through ``element_at``,
    so a mismatch points at an adapter's ``new_from_positions``,
    ``copy_range`` or ``empty_of_same_kind``.
    """


def elements_of(seq, *, adapter: SequenceAdapter | None = None) -> list:
    """List the elements of any supported sequence as plain Python values.

    Numpy and JAX scalars are converted to Python scalars,
    so sequences of different kinds with equal content compare equal.
    """
    if adapter is None:
        adapter = adapter_for(seq)
    return [_plain(adapter.element_at(seq, i)) for i in range(adapter.length(seq))]


def check_slice_consistency(
    seq,
    begin: int,
    finish: int | None = None,
    stride: int = 1,
    *,
    adapter: SequenceAdapter | None = None,
) -> None:
    """Verify ``strided(seq, begin, finish, stride)`` against a reference walk.

    The reference resolves the range, walks it with plain Python integers
    and reads each selected element through ``element_at``.
    For stride 1 the contiguous fast path is checked against the generic
    ``new_from_positions`` path as well.

    Args:
        seq: Any sequence with a registered adapter.
        begin: First position; negative counts from the end.
        finish: Position to stop before, or ``None``/``END``.
        stride: Step between selected positions.
        adapter: Adapter to use instead of looking one up for ``seq``.

    Raises:
        VerificationError: If a result has the wrong kind or content,
            or shares storage with ``seq``.
        ZeroStrideError: If ``stride`` is 0.
    """
    stride = check_stride(stride)
    if adapter is None:
        adapter = adapter_for(seq)

    result = strided(seq, begin, finish, stride, adapter=adapter)
    expected = _reference_elements(seq, begin, finish, stride, adapter)
    _check_result(seq, result, expected, "strided result", adapter)

    if stride == 1:
        rng = resolve_range(begin, finish, adapter.length(seq))
        if not rng.is_empty:
            walked = adapter.new_from_positions(seq, stride_positions(rng, 1))
            _check_result(seq, walked, expected, "position walk", adapter)


def _reference_elements(seq, begin, finish, stride: int, adapter) -> list:
    """Select elements with a plain loop over the resolved range."""
    rng = resolve_range(begin, finish, adapter.length(seq))
    if rng.is_empty:
        return []

    selected = []
    if stride > 0:
        i = rng.begin
        while i < rng.finish:
            selected.append(_plain(adapter.element_at(seq, i)))
            i += stride
    else:
        i = rng.finish - 1
        while i >= rng.begin:
            selected.append(_plain(adapter.element_at(seq, i)))
            i += stride
    return selected


def _check_result(seq, result, expected: list, name: str, adapter) -> None:
    """Compare one slice result with the reference elements."""
    # a subclass source may yield its base kind, never an unrelated one
    if not isinstance(seq, type(result)):
        raise VerificationError(
            f"{name} has type {type(result).__name__}, "
            f"expected {type(seq).__name__}."
        )

    if isinstance(seq, np.ndarray):
        if result.dtype != seq.dtype or result.shape[1:] != seq.shape[1:]:
            raise VerificationError(
                f"{name} has dtype {result.dtype} and shape {result.shape}, "
                f"incompatible with the source's {seq.dtype} and {seq.shape}."
            )
        if np.shares_memory(result, seq):
            raise VerificationError(f"{name} shares memory with the source.")
    elif result is seq and isinstance(seq, _MUTABLE_KINDS):
        raise VerificationError(f"{name} is the source object itself.")

    actual = elements_of(result, adapter=adapter)
    if actual != expected:
        raise VerificationError(
            f"{name} {actual!r} does not match the element-by-element "
            f"reference {expected!r}."
        )


def _plain(value):
    """Convert numpy and JAX scalars or rows to plain Python values."""
    if isinstance(value, (np.ndarray, np.generic, jax.Array)):
        return np.asarray(value).tolist()
    return value
