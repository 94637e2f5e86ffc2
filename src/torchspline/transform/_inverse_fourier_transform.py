"""Radix-2 inverse Fourier transform implementation."""

from typing import Optional

from torch import Tensor

from ._radix_2 import _radix_2_transform
from ._types import NormMode


def inverse_fourier_transform(
    input: Tensor,
    *,
    dim: int = -1,
    norm: Optional[NormMode] = None,
) -> Tensor:
    r"""Compute the inverse discrete Fourier transform of a signal.

    The inverse Fourier transform is defined as:

    .. math::
        x[n] = \frac{1}{N} \sum_{k=0}^{N-1} X[k] \cdot e^{2\pi i k n / N}

    (with default ``'backward'`` normalization).

    Parameters
    ----------
    input : Tensor
        Input tensor of any shape. Typically complex-valued.
    dim : int, optional
        The dimension along which to compute the transform. Its size must
        be a power of two.
        Default: ``-1`` (last dimension).
    norm : str, optional
        Normalization mode. One of:

        - ``'backward'``: No normalization on forward, divide by n on inverse.
        - ``'ortho'``: Normalize by 1/sqrt(n) on both forward and inverse.
        - ``'forward'``: Divide by n on forward, no normalization on inverse.

        Default: ``None`` (equivalent to ``'backward'``). Use
        ``'forward'`` for the plain sum without the 1/N factor.

    Returns
    -------
    Tensor
        The inverse Fourier transform of the input. Always complex-valued.

    Raises
    ------
    ValueError
        If the size along ``dim`` is not a power of two or ``norm`` is
        unknown.

    See Also
    --------
    fourier_transform : The forward Fourier transform.
    torch.fft.ifft : PyTorch's 1D inverse FFT implementation.
    """
    return _radix_2_transform(input, dim, norm, inverse=True)
