"""Admissible signal lengths for non-separable lattices."""

from __future__ import annotations

import math
import operator
from typing import Sequence

from torch import Tensor

from ._exceptions import InvalidLengthError
from ._lattice_type import lattice_type as _lattice_type
from ._parameters import _channel_count, _hop_size


def nonseparable_lattice_length(
    length: int,
    a: int,
    M: float,
    lattice_type: Tensor | Sequence[float],
) -> int:
    r"""Smallest admissible signal length for a non-separable lattice.

    A length :math:`L` is admissible for hop ``a``, ``M`` channels and
    lattice type :math:`(lt_1, lt_2)` when it is a multiple of

    .. math::
        L_{\min} = \operatorname{lcm}(a, M)\, lt_2 .

    For admissible lengths the frequency hop :math:`b = L / M` is an
    integer, and so is every fractional frequency offset
    :math:`k b / lt_2`, which makes the multi-window equivalence exact.

    Parameters
    ----------
    length : int
        Requested signal length. Must be positive.
    a : int
        Time hop. Must be positive.
    M : float
        Number of channels. Truncated toward zero, must be positive.
    lattice_type : Tensor or sequence of float
        Lattice type ``[lt1, lt2]``, see :func:`lattice_type`.

    Returns
    -------
    int
        The smallest multiple of :math:`L_{\min}` that is at least
        ``length``.

    Raises
    ------
    InvalidLengthError
        If ``length`` is not a positive integer.
    InvalidParameterError
        If ``a`` or ``M`` is invalid.
    InvalidLatticeTypeError
        If the lattice type is invalid.

    Examples
    --------
    >>> nonseparable_lattice_length(8, 2, 4, [1, 3])
    12
    >>> nonseparable_lattice_length(24, 2, 4, [1, 3])
    24
    """
    if isinstance(length, bool):
        raise InvalidLengthError(f"length must be an integer, got {length!r}")

    try:
        length = operator.index(length)
    except TypeError as error:
        raise InvalidLengthError(
            f"length must be an integer, got {length!r}"
        ) from error

    if length <= 0:
        raise InvalidLengthError(f"length must be positive, got {length}")

    a = _hop_size(a)
    M = _channel_count(M)
    _, lt2 = _lattice_type(lattice_type)

    return _admissible_length(length, a, M, lt2)


def _admissible_length(length: int, a: int, M: int, lt2: int) -> int:
    smallest = math.lcm(a, M) * lt2

    return -(-length // smallest) * smallest
