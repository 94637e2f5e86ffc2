"""Equispaced cubic spline evaluation using cubic Hermite basis functions."""

from __future__ import annotations

from typing import TYPE_CHECKING, Tuple, Union

import torch
from torch import Tensor

from .._extrapolation_error import ExtrapolationError

if TYPE_CHECKING:
    from ._equispaced_cubic_spline import EquispacedCubicSpline


def _segment_coordinates(
    t_flat: Tensor,
    start: Tensor,
    width: Tensor,
    n_intervals: int,
) -> Tuple[Tensor, Tensor]:
    """Segment index i and local coordinate u = (t - (start + i*h)) / h."""
    segment_idx = torch.floor((t_flat - start) / width).long()
    segment_idx = torch.clamp(segment_idx, 0, n_intervals - 1)

    x_i = start + segment_idx.to(t_flat.dtype) * width
    u = (t_flat - x_i) / width

    return segment_idx, u


def _check_domain(t_flat: Tensor, start: Tensor, end: Tensor) -> None:
    if torch.any(t_flat < start) or torch.any(t_flat > end):
        raise ExtrapolationError(
            f"Query points outside spline domain [{start.item()}, {end.item()}]"
        )


def equispaced_cubic_spline_evaluate(
    spline: EquispacedCubicSpline,
    t: Union[float, Tensor],
) -> Tensor:
    """
    Evaluate an equispaced cubic spline at query points.

    The cubic Hermite basis functions for u in [0, 1] are:
    - H_00(u) = 1 - 3u^2 + 2u^3  -- value at left node
    - H_10(u) = u - 2u^2 + u^3   -- slope at left node
    - H_01(u) = 3u^2 - 2u^3      -- value at right node
    - H_11(u) = -u^2 + u^3       -- slope at right node

    The interpolant on segment i is:
    p(x) = H_00(u)*y_i + H_10(u)*h*d_i + H_01(u)*y_{i+1} + H_11(u)*h*d_{i+1}

    where h is the interval width and u = (x - (start + i*h)) / h.

    Parameters
    ----------
    spline : EquispacedCubicSpline
        Fitted spline from equispaced_cubic_spline_fit
    t : float or Tensor
        Query points, shape (*query_shape) or scalar

    Returns
    -------
    y : Tensor
        Interpolated values, shape (*query_shape, *value_shape)

    Raises
    ------
    ExtrapolationError
        If any query point is outside the spline domain and
        spline.extrapolate == 'error'

    Notes
    -----
    With extrapolate == 'clamp' every query at or left of ``start``
    returns ``y[0]`` and every query at or right of ``end`` returns
    ``y[n]``, bit for bit.
    """
    start = spline.start
    end = spline.end
    y_vals = spline.y
    derivatives = spline.dydx
    extrapolate = spline.extrapolate
    n_intervals = y_vals.shape[0] - 1
    h = (end - start) / n_intervals

    if not isinstance(t, Tensor):
        t = torch.as_tensor(t, dtype=y_vals.dtype, device=y_vals.device)

    # Check if t is scalar (0-d tensor)
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

    # Get value shape for broadcasting
    if y_vals.dim() > 1:
        value_shape = y_vals.shape[1:]
        u = u.view(-1, *([1] * len(value_shape)))
        t_col = t_flat.view(-1, *([1] * len(value_shape)))
    else:
        value_shape = ()
        t_col = t_flat

    u2 = u * u
    u3 = u2 * u

    h_00 = 1 - 3 * u2 + 2 * u3
    h_10 = u - 2 * u2 + u3
    h_01 = 3 * u2 - 2 * u3
    h_11 = -u2 + u3

    y = h_00 * y_i + h_10 * h * d_i + h_01 * y_ip1 + h_11 * h * d_ip1

    if extrapolate == "clamp":
        y = torch.where(
            t_col <= start,
            y_vals[0],
            torch.where(t_col >= end, y_vals[-1], y),
        )

    # Reshape to (*query_shape, *value_shape)
    if value_shape:
        y = y.view(*query_shape, *value_shape)
    else:
        y = y.view(*query_shape)

    if is_scalar:
        y = y.squeeze(0)

    return y
