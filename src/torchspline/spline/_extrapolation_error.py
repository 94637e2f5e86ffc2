from ._spline_error import SplineError


class ExtrapolationError(SplineError):
    """Raised by evaluation, derivative and integral queries that fall
    outside ``[start, end]`` when the spline was fitted with
    ``extrapolate="error"``. The default ``"clamp"`` and the ``"extend"``
    modes never raise it."""

    pass
