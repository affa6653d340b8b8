"""Time-frequency lattices for Gabor systems.

This module converts windows on non-separable time-frequency lattices into
equivalent multi-windows on separable (rectangular) lattices.

Functions
---------
nonseparable_window_to_multiwindow
    Convert a window on a non-separable lattice to a multi-window.
lattice_type, is_separable
    Coercion and inspection of the reduced lattice type ``(lt1, lt2)``.
nonseparable_lattice_length
    Smallest admissible signal length for a non-separable lattice.
fir_to_long
    Zero-extension of finite-support windows to full signal length.

Exceptions
----------
LatticeError
    Base class, a subclass of ``ValueError``.
InvalidLengthError, InvalidParameterError, InvalidLatticeTypeError
    Precondition violations.
NonAdmissibleLengthWarning
    Signal length is not a multiple of ``lcm(a, M) * lt2``.
"""

from ._exceptions import (
    InvalidLatticeTypeError,
    InvalidLengthError,
    InvalidParameterError,
    LatticeError,
    NonAdmissibleLengthWarning,
)
from ._fir_to_long import fir_to_long
from ._lattice_length import nonseparable_lattice_length
from ._lattice_type import is_separable, lattice_type
from ._nonseparable_window_to_multiwindow import (
    nonseparable_window_to_multiwindow,
)

__all__ = [
    "InvalidLatticeTypeError",
    "InvalidLengthError",
    "InvalidParameterError",
    "LatticeError",
    "NonAdmissibleLengthWarning",
    "fir_to_long",
    "is_separable",
    "lattice_type",
    "nonseparable_lattice_length",
    "nonseparable_window_to_multiwindow",
]
