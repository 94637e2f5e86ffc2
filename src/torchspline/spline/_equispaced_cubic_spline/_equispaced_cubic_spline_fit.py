from __future__ import annotations

import warnings
from typing import TYPE_CHECKING, Optional, Sequence, Union

import torch
from torch import Tensor

from .._knot_error import KnotError
from .._solve_tridiagonal import solve_tridiagonal

if TYPE_CHECKING:
    from ._equispaced_cubic_spline import EquispacedCubicSpline

_EXTRAPOLATE_MODES = ("clamp", "error", "extend")


def equispaced_cubic_spline_slopes(
    y: Tensor,
    width: Union[float, Tensor],
    boundary_values: Tensor,
) -> Tensor:
    """
    Compute node slopes that make the cubic Hermite interpolant C².

    For every interior node i (1 <= i <= n-1) the slopes satisfy

        s[i-1] + 4*s[i] + s[i+1] = (3/h) * (y[i+1] - y[i-1])

    with s[0] and s[n] fixed by ``boundary_values``. Moving the known
    boundary slopes to the right-hand side leaves a symmetric, strictly
    diagonally dominant (n-1)x(n-1) tridiagonal system.

    Parameters
    ----------
    y : Tensor
        Sample values, shape (n + 1, *value_shape).
    width : float or Tensor
        Interval width h > 0.
    boundary_values : Tensor
        Slopes at the first and last node, shape (2, *value_shape).

    Returns
    -------
    Tensor
        Slopes at all nodes, shape (n + 1, *value_shape). The first and
        last entries equal ``boundary_values``.

    Notes
    -----
    For n = 1 there are no interior nodes and no system is solved. For
    n = 2 both boundary slopes fold into the single row of a 1x1 system.
    """
    n = y.shape[0] - 1
    value_shape = y.shape[1:]

    if n == 1:
        return boundary_values.clone()

    # Flatten value dimensions for computation
    y_flat = y.reshape(n + 1, -1)
    bv = boundary_values.reshape(2, -1)

    rhs = (3 / width) * (y_flat[2:] - y_flat[:-2])  # (n-1, n_values)

    # Fold the known boundary slopes into the first and last rows
    fold = torch.zeros_like(rhs)
    fold[0] = fold[0] + bv[0]
    fold[-1] = fold[-1] + bv[1]
    rhs = rhs - fold

    diag = torch.full((n - 1,), 4.0, dtype=y.dtype, device=y.device)
    off_diag = torch.ones(n - 2, dtype=y.dtype, device=y.device)

    interior = solve_tridiagonal(diag, off_diag, off_diag, rhs.T).T

    slopes = torch.cat([bv[:1], interior, bv[1:]], dim=0)

    return slopes.reshape(n + 1, *value_shape)


def _warn_non_finite(y: Tensor, boundary_values: Tensor) -> None:
    # stacklevel skips this helper and the two library frames above it
    # .item()-style checks are not traceable
    if torch.compiler.is_compiling() or y.is_meta:
        return
    if not bool(torch.isfinite(y).all()):
        warnings.warn(
            "Sample values contain non-finite entries; they propagate "
            "into every slope and most interpolated values.",
            RuntimeWarning,
            stacklevel=4,
        )
    if not bool(torch.isfinite(boundary_values).all()):
        warnings.warn(
            "Boundary slopes contain non-finite entries; they propagate "
            "into every interior slope.",
            RuntimeWarning,
            stacklevel=4,
        )


def _fit(
    a: Union[float, Tensor],
    b: Union[float, Tensor],
    y: Union[Tensor, Sequence[float]],
    n: Optional[int],
    boundary_values: Optional[Tensor],
    extrapolate: str,
) -> EquispacedCubicSpline:
    if extrapolate not in _EXTRAPOLATE_MODES:
        raise ValueError(
            f"Unknown extrapolation mode: {extrapolate}. "
            f"Use one of {', '.join(repr(m) for m in _EXTRAPOLATE_MODES)}"
        )

    if isinstance(y, Tensor):
        if not y.is_floating_point():
            y = y.to(torch.get_default_dtype())
    else:
        # Python floats are double precision
        y = torch.as_tensor(y, dtype=torch.float64)
    if y.dim() == 0:
        raise KnotError("Sample values must have at least one dimension")

    if n is None:
        n = y.shape[0] - 1
    if n < 1:
        raise KnotError(f"Need at least 1 interval, got {n}")
    if y.shape[0] < n + 1:
        raise KnotError(
            f"Need at least {n + 1} sample values for {n} intervals, "
            f"got {y.shape[0]}"
        )

    start = torch.as_tensor(a, dtype=y.dtype, device=y.device)
    end = torch.as_tensor(b, dtype=y.dtype, device=y.device)
    if not bool(end > start):
        raise KnotError(
            f"Interval end must be greater than start, "
            f"got [{start.item()}, {end.item()}]"
        )

    y = y[: n + 1].clone()
    value_shape = y.shape[1:]

    if boundary_values is None:
        bv = torch.zeros(2, *value_shape, dtype=y.dtype, device=y.device)
    else:
        bv = torch.as_tensor(boundary_values, dtype=y.dtype, device=y.device)
        bv = torch.broadcast_to(bv, (2, *value_shape)).clone()

    _warn_non_finite(y, bv)

    width = (end - start) / n
    dydx = equispaced_cubic_spline_slopes(y, width, bv)

    # Lazy import to avoid circular dependency
    from ._equispaced_cubic_spline import EquispacedCubicSpline

    return EquispacedCubicSpline(
        start=start,
        end=end,
        y=y,
        dydx=dydx,
        extrapolate=extrapolate,
        batch_size=[],
    )


def equispaced_cubic_spline_fit(
    a: Union[float, Tensor],
    b: Union[float, Tensor],
    y: Union[Tensor, Sequence[float]],
    n: Optional[int] = None,
    boundary_values: Optional[Tensor] = None,
    extrapolate: str = "clamp",
) -> EquispacedCubicSpline:
    """
    Fit a cubic spline to samples on an equally spaced grid.

    Parameters
    ----------
    a : float or Tensor
        Left end of the sampled interval.
    b : float or Tensor
        Right end of the sampled interval. Must be greater than ``a``.
    y : Tensor or sequence of float
        Values at the nodes ``a + i * (b - a) / n``, shape
        (n_samples, *value_shape). Only the first n + 1 samples are used.
        A plain Python sequence is stored as float64, so the grid keeps
        double precision; a tensor keeps its floating dtype.
    n : int, optional
        Number of intervals. Defaults to ``n_samples - 1``.
    boundary_values : Tensor, optional
        First derivatives at ``a`` and ``b``, shape (2, *value_shape) or
        broadcastable to it. Default: zero slopes at both ends.
    extrapolate : str
        Extrapolation mode: "clamp", "error", "extend".

    Returns
    -------
    EquispacedCubicSpline
        Fitted spline.

    Raises
    ------
    KnotError
        If ``b <= a``, ``n < 1`` or fewer than n + 1 samples are given.
    ValueError
        If the extrapolation mode is unknown.

    Warns
    -----
    RuntimeWarning
        If the samples or boundary slopes are not all finite.
    """
    return _fit(a, b, y, n, boundary_values, extrapolate)
