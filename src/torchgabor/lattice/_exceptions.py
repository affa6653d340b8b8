"""Exceptions for lattice conversion."""


class LatticeError(ValueError):
    """Base exception for lattice conversion errors."""

    pass


class InvalidLengthError(LatticeError):
    """Raised when a window or signal length is invalid.

    This occurs when:
    - The window is empty
    - A requested length is not a positive integer
    - A requested length is shorter than the window
    """

    pass


class InvalidParameterError(LatticeError):
    """Raised when a lattice parameter is invalid.

    This occurs when:
    - Hop size ``a`` is not a positive integer
    - Channel count ``M`` is not finite or truncates to a non-positive value
    - The window is not a vector
    """

    pass


class InvalidLatticeTypeError(LatticeError):
    """Raised when a lattice type ``(lt1, lt2)`` is invalid.

    This occurs when:
    - The lattice type does not have exactly two elements
    - An element is complex or non-finite
    - ``lt2 < 1``, ``lt1 < 0`` or ``lt1 >= lt2`` after rounding
    """

    pass


class NonAdmissibleLengthWarning(UserWarning):
    """Warning when a signal length is not admissible for a sheared lattice.

    The multi-window is still computed, but the fractional frequency
    offsets are truncated to whole bins.
    """

    pass
