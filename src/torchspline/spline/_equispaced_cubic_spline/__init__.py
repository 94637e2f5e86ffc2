from ._equispaced_cubic_spline import (
    EquispacedCubicSpline,
    equispaced_cubic_spline,
)
from ._equispaced_cubic_spline_boundary import (
    equispaced_cubic_spline_set_boundary,
)
from ._equispaced_cubic_spline_derivative import (
    equispaced_cubic_spline_derivative,
)
from ._equispaced_cubic_spline_evaluate import equispaced_cubic_spline_evaluate
from ._equispaced_cubic_spline_fit import (
    equispaced_cubic_spline_fit,
    equispaced_cubic_spline_slopes,
)
from ._equispaced_cubic_spline_integral import equispaced_cubic_spline_integral

__all__ = [
    "EquispacedCubicSpline",
    "equispaced_cubic_spline",
    "equispaced_cubic_spline_derivative",
    "equispaced_cubic_spline_evaluate",
    "equispaced_cubic_spline_fit",
    "equispaced_cubic_spline_integral",
    "equispaced_cubic_spline_set_boundary",
    "equispaced_cubic_spline_slopes",
]
