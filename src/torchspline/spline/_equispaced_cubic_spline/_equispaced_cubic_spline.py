"""Cubic spline interpolation on an equally spaced grid."""

from typing import Callable, Optional, Union

import torch
from tensordict.tensorclass import tensorclass
from torch import Tensor

from ._equispaced_cubic_spline_evaluate import equispaced_cubic_spline_evaluate
from ._equispaced_cubic_spline_fit import _fit


@tensorclass
class EquispacedCubicSpline:
    """Piecewise cubic Hermite interpolant on ``n`` equal-width intervals.

    The nodes are ``x_i = start + i * width`` for ``i = 0, ..., n``. On
    the segment ``[x_i, x_{i+1}]`` the interpolant is the cubic Hermite
    polynomial through ``(x_i, y[i])`` and ``(x_{i+1}, y[i+1])`` with
    first derivatives ``dydx[i]`` and ``dydx[i+1]``.

    Attributes
    ----------
    start : Tensor
        Left end of the domain, shape ().
    end : Tensor
        Right end of the domain, shape (). Strictly greater than start.
    y : Tensor
        Sample values at the nodes, shape (n + 1, *value_shape).
    dydx : Tensor
        First derivatives at the nodes, shape (n + 1, *value_shape).
        dydx[0] and dydx[n] are the boundary slopes, the interior
        entries make the second derivative continuous.
    extrapolate : str
        Extrapolation mode: "clamp", "error", "extend".
    """

    start: Tensor
    end: Tensor
    y: Tensor
    dydx: Tensor
    extrapolate: str

    @property
    def n_intervals(self) -> int:
        return self.y.shape[0] - 1

    @property
    def width(self) -> Tensor:
        return (self.end - self.start) / self.n_intervals

    @property
    def knots(self) -> Tensor:
        steps = torch.arange(
            self.n_intervals + 1, dtype=self.y.dtype, device=self.y.device
        )
        return self.start + steps * self.width


def equispaced_cubic_spline(
    a: Union[float, Tensor],
    b: Union[float, Tensor],
    y: Tensor,
    n: Optional[int] = None,
    boundary_values: Optional[Tensor] = None,
    extrapolate: str = "clamp",
) -> Callable[[Tensor], Tensor]:
    """Create an equispaced cubic spline interpolator from samples.

    This is a convenience function that fits the spline and returns a
    callable that evaluates it.

    Parameters
    ----------
    a : float or Tensor
        Left end of the sampled interval.
    b : float or Tensor
        Right end of the sampled interval. Must be greater than ``a``.
    y : Tensor
        Sample values at the ``n + 1`` equally spaced nodes.
    n : int, optional
        Number of intervals. Defaults to ``len(y) - 1``.
    boundary_values : Tensor, optional
        First derivatives at ``a`` and ``b``. Default: both zero.
    extrapolate : str, optional
        How to handle out-of-domain queries. One of:

        - ``"clamp"``: Return the outermost sample value (default).
        - ``"error"``: Raise ExtrapolationError.
        - ``"extend"``: Extrapolate using the boundary polynomial.

    Returns
    -------
    spline : Callable[[Tensor], Tensor]
        Function that evaluates the spline at given points.

    Examples
    --------
    >>> import torch
    >>> y = torch.tensor([0.0, 1.0, 0.0, -1.0, 0.0])
    >>> f = equispaced_cubic_spline(0.0, 4.0, y)
    >>> f(torch.tensor([2.0]))
    tensor([0.])
    """
    fitted = _fit(a, b, y, n, boundary_values, extrapolate)
    return lambda t: equispaced_cubic_spline_evaluate(fitted, t)
