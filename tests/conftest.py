"""Pytest configuration and fixtures for seqslice tests."""

import array

import jax.numpy as jnp
import numpy as np
import pytest


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "resolve: begin/finish/index resolution")
    config.addinivalue_line("markers", "stride: stride validation and position walks")
    config.addinivalue_line("markers", "adapters: sequence adapters and the registry")
    config.addinivalue_line(
        "markers", "slicing: public entry points (element, subrange, strided)"
    )
    config.addinivalue_line(
        "markers", "properties: invariants checked across every sequence kind"
    )
    config.addinivalue_line("markers", "verify: slice verification utilities")


# Every supported kind, holding five elements.
# Text kinds hold "HelpA", numeric kinds hold [42, 14, 0, -32, 1].
_KINDS = [
    pytest.param(lambda: "HelpA", id="str"),
    pytest.param(lambda: b"HelpA", id="bytes"),
    pytest.param(lambda: bytearray(b"HelpA"), id="bytearray"),
    pytest.param(lambda: [42, 14, 0, -32, 1], id="list"),
    pytest.param(lambda: (42, 14, 0, -32, 1), id="tuple"),
    pytest.param(lambda: array.array("i", [42, 14, 0, -32, 1]), id="array-i"),
    pytest.param(lambda: array.array("d", [4.2, 1.4, 0.0, -3.2, 0.1]), id="array-d"),
    pytest.param(lambda: np.array([42, 14, 0, -32, 1]), id="ndarray-int"),
    pytest.param(
        lambda: np.array([4.2, 1.4, 0.0, -3.2, 0.1], dtype=np.float32),
        id="ndarray-float32",
    ),
    pytest.param(lambda: np.arange(10).reshape(5, 2), id="ndarray-2d"),
    pytest.param(lambda: jnp.array([42, 14, 0, -32, 1]), id="jax"),
]


@pytest.fixture(params=_KINDS)
def seq(request):
    """A fresh five-element sequence of every supported kind."""
    return request.param()
