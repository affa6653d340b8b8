"""torchgabor: PyTorch operators for Gabor time-frequency lattices."""

from . import lattice

__all__ = [
    "lattice",
]

__version__ = "0.1.0"
