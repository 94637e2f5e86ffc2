"""Differentiable cubic spline interpolation on equally spaced grids.

Samples ``y[0], ..., y[n]`` at the nodes ``a + i * (b - a) / n`` are
joined by cubic Hermite segments whose node slopes make the curve twice
continuously differentiable. The two boundary slopes are free parameters
(zero by default).

Convenience Functions
---------------------
equispaced_cubic_spline
    Create a spline interpolator from samples (fit + callable).

Equispaced Cubic Splines
------------------------
equispaced_cubic_spline_fit
    Fit a spline to equally spaced samples.
equispaced_cubic_spline_slopes
    Solve for the node slopes given the boundary slopes.
equispaced_cubic_spline_set_boundary
    Refit with new boundary slopes.
equispaced_cubic_spline_evaluate
    Evaluate a spline at query points.
equispaced_cubic_spline_derivative
    Evaluate a derivative of a spline at query points.
equispaced_cubic_spline_integral
    Compute a definite integral of a spline.

Linear Algebra
--------------
solve_tridiagonal
    Thomas algorithm for tridiagonal systems.

Data Types
----------
EquispacedCubicSpline
    Node values and slopes on an equally spaced grid.
InterpolationMethod
    Protocol for interchangeable interpolation strategies.
CubicSplineInterpolator
    Stateful InterpolationMethod backed by EquispacedCubicSpline.

Exceptions
----------
SplineError
    Base exception for spline operations.
ExtrapolationError
    Query point outside spline domain.
KnotError
    Invalid node grid.
"""

# Import base exception first
from ._spline_error import SplineError

# Import exception subclasses
from ._extrapolation_error import ExtrapolationError
from ._knot_error import KnotError

from ._solve_tridiagonal import solve_tridiagonal

# Import spline implementations
from ._equispaced_cubic_spline import (
    EquispacedCubicSpline,
    equispaced_cubic_spline,
    equispaced_cubic_spline_derivative,
    equispaced_cubic_spline_evaluate,
    equispaced_cubic_spline_fit,
    equispaced_cubic_spline_integral,
    equispaced_cubic_spline_set_boundary,
    equispaced_cubic_spline_slopes,
)
from ._interpolation_method import InterpolationMethod
from ._cubic_spline_interpolator import CubicSplineInterpolator

__all__ = [
    "CubicSplineInterpolator",
    "EquispacedCubicSpline",
    "ExtrapolationError",
    "InterpolationMethod",
    "KnotError",
    "SplineError",
    "equispaced_cubic_spline",
    "equispaced_cubic_spline_derivative",
    "equispaced_cubic_spline_evaluate",
    "equispaced_cubic_spline_fit",
    "equispaced_cubic_spline_integral",
    "equispaced_cubic_spline_set_boundary",
    "equispaced_cubic_spline_slopes",
    "solve_tridiagonal",
]
