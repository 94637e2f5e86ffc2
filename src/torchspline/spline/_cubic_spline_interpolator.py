"""Stateful cubic spline interpolator with re-settable boundary slopes."""

from typing import Optional, Sequence, Union

from torch import Tensor

from ._equispaced_cubic_spline import (
    EquispacedCubicSpline,
    equispaced_cubic_spline_evaluate,
)
from ._equispaced_cubic_spline._equispaced_cubic_spline_boundary import (
    _set_boundary,
)
from ._equispaced_cubic_spline._equispaced_cubic_spline_fit import _fit
from ._spline_error import SplineError


class CubicSplineInterpolator:
    """Cubic spline through equally spaced samples, clamped outside [a, b].

    ``init`` fits the spline with zero slopes at both ends. The boundary
    slopes can be replaced at any time with ``set_boundary_conditions``,
    which recomputes the interior slopes. Each update builds a complete
    new :class:`EquispacedCubicSpline` before it replaces the current
    one, so ``evaluate`` and ``get_derivatives`` never see a half-updated
    slope sequence.

    Parameters
    ----------
    extrapolate : str, optional
        Extrapolation mode passed to the fit. Default: ``"clamp"``.

    Examples
    --------
    >>> interpolator = CubicSplineInterpolator()
    >>> interpolator.init(0.0, 4.0, 4, [0.0, 1.0, 0.0, -1.0, 0.0])
    >>> interpolator.evaluate(-1.0)
    tensor(0., dtype=torch.float64)
    """

    def __init__(self, extrapolate: str = "clamp"):
        self._extrapolate = extrapolate
        self._spline: Optional[EquispacedCubicSpline] = None

    @property
    def spline(self) -> EquispacedCubicSpline:
        """Current fitted spline."""
        if self._spline is None:
            raise SplineError(
                "CubicSplineInterpolator is not initialized; call init() first"
            )
        return self._spline

    def init(
        self,
        a: Union[float, Tensor],
        b: Union[float, Tensor],
        n: int,
        y: Union[Tensor, Sequence[float]],
    ) -> None:
        """Fit to samples ``y`` at the ``n + 1`` nodes ``a + i * (b - a) / n``.

        Raises KnotError on an invalid grid; the previous state is kept.
        """
        self._spline = _fit(a, b, y, n, None, self._extrapolate)

    def evaluate(self, z: Union[float, Tensor]) -> Tensor:
        return equispaced_cubic_spline_evaluate(self.spline, z)

    __call__ = evaluate

    def get_derivatives(self) -> Tensor:
        """Slopes at all ``n + 1`` nodes, boundary slopes included."""
        return self.spline.dydx

    def set_boundary_conditions(
        self,
        start_slope: Union[float, Tensor],
        end_slope: Union[float, Tensor],
    ) -> None:
        """Set the slopes at ``a`` and ``b`` and recompute the others."""
        self._spline = _set_boundary(self.spline, start_slope, end_slope)
