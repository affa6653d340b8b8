"""Testing utilities for torchgabor.

Example usage:

    import hypothesis

    from torchgabor.testing import lattice_parameters, windows

    @hypothesis.given(hypothesis.strategies.data())
    def test_shape(data):
        L, a, M, lt = data.draw(lattice_parameters())
        g = data.draw(windows(L))
        ...
"""

from .strategies import (
    lattice_parameters,
    lattice_types,
    window_dtypes,
    windows,
)

__all__ = [
    "lattice_parameters",
    "lattice_types",
    "window_dtypes",
    "windows",
]
