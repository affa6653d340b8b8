"""Hypothesis strategies for lattice testing."""

from ._lattice_parameters import lattice_parameters
from ._lattice_types import lattice_types
from ._windows import window_dtypes, windows

__all__ = [
    "lattice_parameters",
    "lattice_types",
    "window_dtypes",
    "windows",
]
