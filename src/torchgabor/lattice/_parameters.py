"""Coercion of scalar lattice parameters."""

from __future__ import annotations

import math
import operator
from typing import Any

from torch import Tensor

from ._exceptions import InvalidParameterError


def _round_half_up(x: float) -> int:
    return math.floor(x + 0.5)


def _scalar(value: Any, name: str) -> int | float:
    """Unwrap ``value`` into a Python ``int`` or ``float``.

    Integers are returned unchanged so large values keep full precision.
    """
    if isinstance(value, Tensor):
        if value.numel() != 1:
            raise InvalidParameterError(
                f"{name} must be a scalar, got tensor of shape "
                f"{tuple(value.shape)}"
            )
        value = value.item()

    if isinstance(value, (bool, complex)):
        raise InvalidParameterError(
            f"{name} must be a real number, got {value!r}"
        )

    try:
        return operator.index(value)
    except TypeError:
        pass

    try:
        value = float(value)
    except (TypeError, ValueError) as error:
        raise InvalidParameterError(
            f"{name} must be a real number, got {value!r}"
        ) from error

    if not math.isfinite(value):
        raise InvalidParameterError(f"{name} must be finite, got {value}")

    return value


def _hop_size(a: Any) -> int:
    """Validate the time hop ``a`` of the separable lattice."""
    value = _scalar(a, "a")

    if isinstance(value, float):
        if not value.is_integer():
            raise InvalidParameterError(
                f"a must be an integer, got {value}"
            )
        value = int(value)

    if value <= 0:
        raise InvalidParameterError(f"a must be positive, got {value}")

    return value


def _channel_count(M: Any) -> int:
    """Coerce the channel count ``M`` to a positive integer.

    Real values are truncated toward zero.
    """
    value = _scalar(M, "M")

    if isinstance(value, float):
        value = math.trunc(value)

    if value <= 0:
        raise InvalidParameterError(f"M must be positive, got {value}")

    return value
