"""Extension of finite-support windows to full signal length."""

from __future__ import annotations

import operator

import torch
from torch import Tensor

from ._exceptions import InvalidLengthError


def fir_to_long(input: Tensor, length: int, *, dim: int = -1) -> Tensor:
    r"""Zero-extend a finite-support window to a longer circular window.

    Windows with finite support are stored in circular order: sample 0 is
    the centre of the window, the right half follows it and the left half
    wraps around to the end. Extending such a window to ``length`` samples
    therefore keeps the first :math:`\lceil L_g / 2 \rceil` samples at the
    start, moves the remaining :math:`\lfloor L_g / 2 \rfloor` samples to
    the end and fills the middle with zeros.

    Parameters
    ----------
    input : Tensor
        Window of length :math:`L_g` along ``dim``.
    length : int
        Target length. Must be at least :math:`L_g`.
    dim : int, optional
        Dimension holding the window samples. Default: ``-1``.

    Returns
    -------
    Tensor
        New tensor with size ``length`` along ``dim``.

    Raises
    ------
    InvalidLengthError
        If the window is empty, or ``length`` is not an integer or is
        shorter than the window.

    Examples
    --------
    >>> fir_to_long(torch.tensor([1.0, 2.0, 3.0, 4.0, 5.0]), 8)
    tensor([1., 2., 3., 0., 0., 0., 4., 5.])
    """
    n = input.shape[dim]

    if n == 0:
        raise InvalidLengthError("window must not be empty")

    if isinstance(length, bool):
        raise InvalidLengthError(f"length must be an integer, got {length!r}")

    try:
        length = operator.index(length)
    except TypeError as error:
        raise InvalidLengthError(
            f"length must be an integer, got {length!r}"
        ) from error

    if length < n:
        raise InvalidLengthError(
            f"length ({length}) must be at least the window length ({n})"
        )

    if length == n:
        return input.clone()

    x = input.movedim(dim, -1)

    head = (n + 1) // 2

    zeros = x.new_zeros(*x.shape[:-1], length - n)

    output = torch.cat([x[..., :head], zeros, x[..., head:]], dim=-1)

    return output.movedim(-1, dim)
