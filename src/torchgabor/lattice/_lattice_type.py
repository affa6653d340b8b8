"""Lattice type coercion and validation."""

from __future__ import annotations

import math
from typing import Any, Sequence

import torch
from torch import Tensor

from ._exceptions import InvalidLatticeTypeError
from ._parameters import _round_half_up


def lattice_type(value: Tensor | Sequence[float]) -> tuple[int, int]:
    r"""Coerce a lattice type ``[lt1, lt2]`` to a pair of integers.

    A non-separable time-frequency lattice with hop ``a`` and ``M``
    channels is described in its reduced form by two integers
    :math:`(lt_1, lt_2)`. The lattice contains the points

    .. math::
        \left(n a,\; \left(m + \frac{(n\, lt_1) \bmod lt_2}{lt_2}\right) b\right),
        \qquad b = L / M,

    so every ``lt2``-th time position repeats the same frequency offset.
    ``lt1 = 0`` is the separable (rectangular) lattice.

    Parameters
    ----------
    value : Tensor or sequence of float
        Two real numbers ``[lt1, lt2]``. Each is rounded half up,
        ``floor(x + 0.5)``, before validation.

    Returns
    -------
    tuple of int
        The validated pair ``(lt1, lt2)``.

    Raises
    ------
    InvalidLatticeTypeError
        If ``value`` does not hold exactly two finite real numbers, or if
        the rounded pair violates ``0 <= lt1 < lt2``.

    Examples
    --------
    >>> lattice_type([1, 2])
    (1, 2)
    >>> lattice_type(torch.tensor([2.4, 3.6]))
    (2, 4)

    Notes
    -----
    The reduced form also requires ``gcd(lt1, lt2) = 1`` when ``lt1 != 0``.
    This is a caller contract and is not checked: a non-reduced pair
    describes the same lattice as its reduction and still produces a
    valid, redundant multi-window.
    """
    try:
        if isinstance(value, Tensor):
            elements = value.detach().cpu().reshape(-1).tolist()
        else:
            elements = torch.as_tensor(value)
            if elements.is_floating_point():
                elements = torch.as_tensor(value, dtype=torch.float64)
            elements = elements.reshape(-1).tolist()
    except (TypeError, ValueError, RuntimeError) as error:
        raise InvalidLatticeTypeError(
            f"lattice type must be a pair of real numbers, got {value!r}"
        ) from error

    if len(elements) != 2:
        raise InvalidLatticeTypeError(
            f"lattice type must have exactly 2 elements, got {len(elements)}"
        )

    lt1, lt2 = (_lattice_type_element(x) for x in elements)

    if lt2 < 1:
        raise InvalidLatticeTypeError(
            f"lt2 must be at least 1, got lattice type ({lt1}, {lt2})"
        )

    if lt1 < 0 or lt1 >= lt2:
        raise InvalidLatticeTypeError(
            f"lattice type must satisfy 0 <= lt1 < lt2, got ({lt1}, {lt2})"
        )

    return lt1, lt2


def _lattice_type_element(x: Any) -> int:
    if isinstance(x, (bool, complex)):
        raise InvalidLatticeTypeError(
            f"lattice type elements must be real numbers, got {x!r}"
        )

    if isinstance(x, int):
        return x

    if not math.isfinite(x):
        raise InvalidLatticeTypeError(
            f"lattice type elements must be finite, got {x}"
        )

    return _round_half_up(x)


def is_separable(value: Tensor | Sequence[float]) -> bool:
    """Return whether a lattice type describes a separable lattice."""
    lt1, _ = lattice_type(value)

    return lt1 == 0
