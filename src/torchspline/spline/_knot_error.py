from ._spline_error import SplineError


class KnotError(SplineError):
    """Raised for an invalid node grid (empty interval, no intervals, too few samples)."""

    pass
