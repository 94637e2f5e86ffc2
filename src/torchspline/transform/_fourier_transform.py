"""Radix-2 Fourier transform implementation."""

from typing import Optional

from torch import Tensor

from ._radix_2 import _radix_2_transform
from ._types import NormMode


def fourier_transform(
    input: Tensor,
    *,
    dim: int = -1,
    norm: Optional[NormMode] = None,
) -> Tensor:
    r"""Compute the discrete Fourier transform of a signal.

    The Fourier transform is defined as:

    .. math::
        X[k] = \sum_{n=0}^{N-1} x[n] \cdot e^{-2\pi i k n / N}

    (with default ``'backward'`` normalization).

    Parameters
    ----------
    input : Tensor
        Input tensor of any shape. Real input is promoted to complex.
    dim : int, optional
        The dimension along which to compute the transform. Its size must
        be a power of two.
        Default: ``-1`` (last dimension).
    norm : str, optional
        Normalization mode. One of:

        - ``'backward'``: No normalization on forward, divide by n on inverse.
        - ``'ortho'``: Normalize by 1/sqrt(n) on both forward and inverse.
        - ``'forward'``: Divide by n on forward, no normalization on inverse.

        Default: ``None`` (equivalent to ``'backward'``).

    Returns
    -------
    Tensor
        The Fourier transform of the input. Always complex-valued.

    Raises
    ------
    ValueError
        If the size along ``dim`` is not a power of two or ``norm`` is
        unknown.

    Examples
    --------
    >>> x = torch.tensor([1., 2., 3., 4.])
    >>> X = fourier_transform(x)
    >>> torch.allclose(X, torch.fft.fft(x))
    True

    Notes
    -----
    Recursive Cooley-Tukey: the even- and odd-indexed halves are
    transformed separately and recombined with one butterfly pass, for
    O(N log N) work. Built from differentiable tensor operations.

    See Also
    --------
    inverse_fourier_transform : The inverse Fourier transform.
    torch.fft.fft : PyTorch's 1D FFT implementation.
    """
    return _radix_2_transform(input, dim, norm, inverse=False)
