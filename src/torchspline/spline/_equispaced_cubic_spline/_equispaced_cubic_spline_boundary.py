from __future__ import annotations

from typing import TYPE_CHECKING, Union

import torch
from torch import Tensor

from ._equispaced_cubic_spline_fit import (
    _warn_non_finite,
    equispaced_cubic_spline_slopes,
)

if TYPE_CHECKING:
    from ._equispaced_cubic_spline import EquispacedCubicSpline


def _set_boundary(
    spline: EquispacedCubicSpline,
    start_slope: Union[float, Tensor],
    end_slope: Union[float, Tensor],
) -> EquispacedCubicSpline:
    y_vals = spline.y
    value_shape = y_vals.shape[1:]

    s0 = torch.as_tensor(start_slope, dtype=y_vals.dtype, device=y_vals.device)
    sn = torch.as_tensor(end_slope, dtype=y_vals.dtype, device=y_vals.device)
    boundary_values = torch.stack(
        [
            torch.broadcast_to(s0, value_shape),
            torch.broadcast_to(sn, value_shape),
        ],
        dim=0,
    )

    _warn_non_finite(y_vals, boundary_values)

    dydx = equispaced_cubic_spline_slopes(
        y_vals, spline.width, boundary_values
    )

    from ._equispaced_cubic_spline import EquispacedCubicSpline

    return EquispacedCubicSpline(
        start=spline.start,
        end=spline.end,
        y=y_vals,
        dydx=dydx,
        extrapolate=spline.extrapolate,
        batch_size=[],
    )


def equispaced_cubic_spline_set_boundary(
    spline: EquispacedCubicSpline,
    start_slope: Union[float, Tensor],
    end_slope: Union[float, Tensor],
) -> EquispacedCubicSpline:
    """
    Replace the boundary slopes of an equispaced cubic spline.

    Parameters
    ----------
    spline : EquispacedCubicSpline
        Input spline. It is left unchanged.
    start_slope : float or Tensor
        First derivative at ``spline.start``, broadcastable to the value
        shape.
    end_slope : float or Tensor
        First derivative at ``spline.end``, broadcastable to the value
        shape.

    Returns
    -------
    EquispacedCubicSpline
        A new spline with the same grid and samples whose interior slopes
        are recomputed for the new boundary slopes.
    """
    return _set_boundary(spline, start_slope, end_slope)
