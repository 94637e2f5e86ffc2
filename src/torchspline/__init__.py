"""torchspline: differentiable equispaced cubic splines for PyTorch."""

from . import (
    spline,
    transform,
)

__all__ = [
    "spline",
    "transform",
]

__version__ = "0.1.0"
