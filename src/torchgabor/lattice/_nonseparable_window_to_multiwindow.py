"""Conversion of non-separable lattice windows to separable multi-windows."""

from __future__ import annotations

import math
import warnings
from typing import Sequence

import torch
from torch import Tensor

from ._exceptions import (
    InvalidLengthError,
    InvalidParameterError,
    NonAdmissibleLengthWarning,
)
from ._fir_to_long import fir_to_long
from ._lattice_length import _admissible_length
from ._lattice_type import lattice_type as _lattice_type
from ._parameters import _channel_count, _hop_size


def nonseparable_window_to_multiwindow(
    window: Tensor | Sequence[complex],
    a: int,
    M: float,
    lattice_type: Tensor | Sequence[float],
    *,
    length: int | None = None,
) -> Tensor:
    r"""Convert a window on a non-separable lattice to a multi-window.

    A Gabor system with window :math:`g`, hop :math:`a`, :math:`M`
    channels and lattice type :math:`(lt_1, lt_2)` samples the
    time-frequency plane at the points

    .. math::
        \left(n a,\; \left(m + \frac{(n\, lt_1) \bmod lt_2}{lt_2}\right)
        \frac{L}{M}\right).

    Writing :math:`n = q\, lt_2 + w` with :math:`0 \le w < lt_2`, the
    frequency offset depends only on :math:`w`. The same system is
    therefore a sum of :math:`lt_2` Gabor systems on the separable
    lattice with hop :math:`a\, lt_2` and :math:`M` channels, one for each
    sub-window

    .. math::
        g_w[l] = e^{2\pi i\, l\, k_w / L}\; g[(l - w a) \bmod L],
        \qquad
        k_w = \left\lfloor \frac{((w\, lt_1) \bmod lt_2)\, \lfloor L/M \rfloor}
        {lt_2} \right\rfloor .

    Each sub-window is the window delayed by :math:`w a` samples and
    modulated by its fractional frequency offset. Sub-window 0 is the
    window itself.

    Parameters
    ----------
    window : Tensor or sequence of complex
        Window of length :math:`L`, one period of a circular signal. A
        column of shape ``(L, 1)`` is accepted. Real windows are promoted
        to the matching complex dtype.
    a : int
        Time hop of the lattice. Must be a positive integer.
    M : float
        Number of frequency channels. Truncated toward zero to a positive
        integer.
    lattice_type : Tensor or sequence of float
        Lattice type ``[lt1, lt2]``, rounded half up. Must satisfy
        ``0 <= lt1 < lt2`` and should be in reduced form,
        ``gcd(lt1, lt2) = 1``. See :func:`lattice_type`.
    length : int, optional
        Signal length. A window shorter than ``length`` is treated as a
        finite-support window and extended with :func:`fir_to_long`.
        Default: ``None`` (use the window length).

    Returns
    -------
    Tensor
        Complex tensor of shape ``(L, lt2)``. Column ``w`` is sub-window
        :math:`g_w`.

    Raises
    ------
    InvalidLengthError
        If the window is empty or ``length`` is shorter than the window.
    InvalidParameterError
        If the window is not a vector, or ``a`` or ``M`` is not positive.
    InvalidLatticeTypeError
        If the lattice type is invalid.

    Warns
    -----
    NonAdmissibleLengthWarning
        If ``lt1 != 0`` and :math:`L` is not a multiple of
        :math:`\operatorname{lcm}(a, M)\, lt_2`. The frequency offsets
        are then truncated to whole bins and the equivalence is only
        approximate.

    Examples
    --------
    A separable lattice leaves the window unchanged:

    >>> g = torch.tensor([1.0, 2.0, 3.0, 4.0], dtype=torch.complex128)
    >>> nonseparable_window_to_multiwindow(g, 2, 2, [0, 1]).shape
    torch.Size([4, 1])

    Quincunx lattice:

    >>> g = torch.randn(24, dtype=torch.complex128)
    >>> multiwindow = nonseparable_window_to_multiwindow(g, 2, 4, [1, 2])
    >>> multiwindow.shape
    torch.Size([24, 2])
    >>> torch.equal(multiwindow[:, 0], g)
    True

    Notes
    -----
    **Separable lattices:**

    For ``lt1 = 0`` there is no shear and every one of the ``lt2``
    columns is an exact copy of the window.

    **Index arithmetic:**

    Shifts are taken modulo :math:`L` and the phase exponent
    :math:`l\, k_w` is reduced modulo :math:`L` in integer arithmetic
    before it is scaled, so every sample of the result is a sample of the
    periodic window times an :math:`L`-th root of unity. Sub-window 0 is
    copied from the window, so it is exact even for non-finite samples.

    See Also
    --------
    lattice_type : Coercion of the lattice type.
    nonseparable_lattice_length : Smallest admissible signal length.
    fir_to_long : Extension of finite-support windows.
    """
    g = _window(window)
    a = _hop_size(a)
    M = _channel_count(M)
    lt1, lt2 = _lattice_type(lattice_type)

    if length is not None:
        g = fir_to_long(g, length)

    L = g.shape[0]

    if lt1 == 0:
        return g.unsqueeze(-1).repeat(1, lt2)

    admissible = _admissible_length(L, a, M, lt2)

    if admissible != L:
        warnings.warn(
            f"Signal length {L} is not a multiple of lcm(a, M) * lt2 = "
            f"{math.lcm(a, M) * lt2}; the multi-window is only approximately "
            f"equivalent to the non-separable window. Use length={admissible} "
            f"for an exact conversion.",
            NonAdmissibleLengthWarning,
            stacklevel=2,
        )

    b = L // M

    # Sub-window 0 is the window itself
    w = torch.arange(1, lt2, device=g.device)
    l = torch.arange(L, device=g.device).unsqueeze(-1)

    wavenumber = ((w * lt1) % lt2) * b // lt2

    index = (l - w * a) % L

    exponent = (l * wavenumber) % L

    phase = exponent.to(torch.float64) * (2.0 * math.pi / L)

    modulation = torch.polar(torch.ones_like(phase), phase).to(g.dtype)

    return torch.cat([g.unsqueeze(-1), modulation * g[index]], dim=-1)


def _window(window: Tensor | Sequence[complex]) -> Tensor:
    """Validate the window and promote it to a complex vector."""
    if not isinstance(window, Tensor):
        window = torch.as_tensor(window)

    if window.ndim == 2 and window.shape[1] == 1:
        window = window[:, 0]

    if window.ndim != 1:
        raise InvalidParameterError(
            f"window must be a vector of shape (L,) or (L, 1), got shape "
            f"{tuple(window.shape)}"
        )

    if window.shape[0] == 0:
        raise InvalidLengthError("window must not be empty")

    if window.is_complex():
        return window

    if window.is_floating_point():
        dtype = torch.promote_types(window.dtype, torch.complex64)
    else:
        dtype = torch.promote_types(torch.get_default_dtype(), torch.complex64)

    return window.to(dtype)
