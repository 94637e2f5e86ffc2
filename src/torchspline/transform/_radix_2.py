import math
from typing import Optional

import torch
from torch import Tensor

from ._types import NormMode

_NORM_MODES = ("backward", "ortho", "forward")


def _butterfly(x: Tensor, sign: float) -> Tensor:
    """Unscaled DFT along the last dim: X[k] = sum_j x[j] exp(sign*2*pi*i*j*k/n)."""
    n = x.shape[-1]
    if n == 1:
        return x

    even = _butterfly(x[..., 0::2], sign)
    odd = _butterfly(x[..., 1::2], sign)

    half = n // 2
    angle = (
        sign
        * 2
        * math.pi
        * torch.arange(half, dtype=even.real.dtype, device=x.device)
        / n
    )
    twiddle = torch.polar(torch.ones_like(angle), angle)
    odd = twiddle * odd

    return torch.cat([even + odd, even - odd], dim=-1)


def _radix_2_transform(
    input: Tensor,
    dim: int,
    norm: Optional[NormMode],
    inverse: bool,
) -> Tensor:
    if norm is None:
        norm = "backward"
    if norm not in _NORM_MODES:
        raise ValueError(
            f"Unknown normalization mode: {norm}. "
            f"Use 'backward', 'ortho', or 'forward'"
        )

    n = input.shape[dim]
    if n < 1 or n & (n - 1) != 0:
        raise ValueError(
            f"Signal length along dim {dim} must be a power of two, got {n}"
        )

    if not input.is_complex():
        if not input.is_floating_point():
            input = input.to(torch.get_default_dtype())
        input = input.to(torch.promote_types(input.dtype, torch.complex64))

    x = input.movedim(dim, -1)
    output = _butterfly(x, 1.0 if inverse else -1.0)

    # "backward" scales the inverse, "forward" the forward transform
    if norm == "ortho":
        output = output / math.sqrt(n)
    elif (norm == "backward") == inverse:
        output = output / n

    return output.movedim(-1, dim)
