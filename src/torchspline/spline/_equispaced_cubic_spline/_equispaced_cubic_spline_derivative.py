from __future__ import annotations

from typing import TYPE_CHECKING, Union

import torch
from torch import Tensor

from ._equispaced_cubic_spline_evaluate import (
    _check_domain,
    _segment_coordinates,
)

if TYPE_CHECKING:
    from ._equispaced_cubic_spline import EquispacedCubicSpline


def equispaced_cubic_spline_derivative(
    spline: EquispacedCubicSpline,
    t: Union[float, Tensor],
    order: int = 1,
) -> Tensor:
    """
    Evaluate a derivative of an equispaced cubic spline at query points.

    Parameters
    ----------
    spline : EquispacedCubicSpline
        Input spline
    t : float or Tensor
        Query points, shape (*query_shape) or scalar
    order : int
        Order of derivative (1, 2, or 3). Default is 1.

    Returns
    -------
    derivative_values : Tensor
        Derivative values, shape (*query_shape, *value_shape)

    Raises
    ------
    ValueError
        If order is not 1, 2, or 3.
    ExtrapolationError
        If any query point is outside the spline domain and
        spline.extrapolate == 'error'

    Notes
    -----
    The derivatives of the Hermite basis with respect to u are

    - H'_00(u) = -6u + 6u^2,   H''_00(u) = -6 + 12u,  H'''_00 = 12
    - H'_10(u) = 1 - 4u + 3u^2, H''_10(u) = -4 + 6u,  H'''_10 = 6
    - H'_01(u) = 6u - 6u^2,    H''_01(u) = 6 - 12u,   H'''_01 = -12
    - H'_11(u) = -2u + 3u^2,   H''_11(u) = -2 + 6u,   H'''_11 = 6

    and each order brings a factor 1/h. The first derivative is
    continuous everywhere, the second at every node, the third is
    constant per segment. Under extrapolate == 'clamp' the spline is
    constant outside [start, end] so every derivative is zero there.
    """
    if order < 1 or order > 3:
        raise ValueError(f"Derivative order must be 1, 2, or 3, got {order}")

    start = spline.start
    end = spline.end
    y_vals = spline.y
    derivatives = spline.dydx
    extrapolate = spline.extrapolate
    n_intervals = y_vals.shape[0] - 1
    h = (end - start) / n_intervals

    if not isinstance(t, Tensor):
        t = torch.as_tensor(t, dtype=y_vals.dtype, device=y_vals.device)

    is_scalar = t.dim() == 0
    if is_scalar:
        t = t.unsqueeze(0)

    query_shape = t.shape
    t_flat = t.flatten()

    if extrapolate == "error":
        _check_domain(t_flat, start, end)

    segment_idx, u = _segment_coordinates(t_flat, start, h, n_intervals)

    y_i = y_vals[segment_idx]
    y_ip1 = y_vals[segment_idx + 1]
    d_i = derivatives[segment_idx]
    d_ip1 = derivatives[segment_idx + 1]

    if y_vals.dim() > 1:
        value_shape = y_vals.shape[1:]
        u = u.view(-1, *([1] * len(value_shape)))
        t_col = t_flat.view(-1, *([1] * len(value_shape)))
    else:
        value_shape = ()
        t_col = t_flat

    if order == 1:
        u2 = u * u
        result = (
            (6 * u2 - 6 * u) * y_i
            + (3 * u2 - 4 * u + 1) * h * d_i
            + (6 * u - 6 * u2) * y_ip1
            + (3 * u2 - 2 * u) * h * d_ip1
        ) / h
    elif order == 2:
        result = (
            (12 * u - 6) * y_i
            + (6 * u - 4) * h * d_i
            + (6 - 12 * u) * y_ip1
            + (6 * u - 2) * h * d_ip1
        ) / (h**2)
    else:  # order == 3
        result = (12 * y_i + 6 * h * d_i - 12 * y_ip1 + 6 * h * d_ip1) / (
            h**3
        )

    if extrapolate == "clamp":
        outside = (t_col < start) | (t_col > end)
        result = torch.where(outside, torch.zeros_like(result), result)

    if value_shape:
        result = result.reshape(*query_shape, *value_shape)
    else:
        result = result.reshape(*query_shape)

    if is_scalar:
        result = result.squeeze(0)

    return result
