"""Discrete Fourier transforms for power-of-two signal lengths.

Transforms
----------
fourier_transform, inverse_fourier_transform
    Recursive radix-2 discrete Fourier transform and its inverse.
"""

from ._fourier_transform import fourier_transform
from ._inverse_fourier_transform import inverse_fourier_transform
from ._types import NormMode

__all__ = [
    "NormMode",
    "fourier_transform",
    "inverse_fourier_transform",
]
