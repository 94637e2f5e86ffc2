"""Tests for the stateful cubic spline interpolator."""

import math

import pytest
import torch


class TestCubicSplineInterpolator:
    def test_conforms_to_interpolation_method(self):
        from torchspline.spline import (
            CubicSplineInterpolator,
            InterpolationMethod,
        )

        assert isinstance(CubicSplineInterpolator(), InterpolationMethod)

    def test_concrete_scenario(self):
        from torchspline.spline import CubicSplineInterpolator

        interpolator = CubicSplineInterpolator()
        interpolator.init(0.0, 4.0, 4, [0.0, 1.0, 0.0, -1.0, 0.0])

        assert interpolator.evaluate(0.0).item() == 0.0
        assert interpolator.evaluate(4.0).item() == 0.0
        assert interpolator.evaluate(2.0).item() == 0.0
        assert interpolator.evaluate(-1.0).item() == 0.0
        assert interpolator(1.0).item() == 1.0

    def test_get_derivatives_includes_boundaries(self):
        from torchspline.spline import CubicSplineInterpolator

        interpolator = CubicSplineInterpolator()
        interpolator.init(
            0.0,
            4.0,
            4,
            torch.tensor([0.0, 1.0, 0.0, -1.0, 0.0], dtype=torch.float64),
        )

        torch.testing.assert_close(
            interpolator.get_derivatives(),
            torch.tensor(
                [0.0, 3.0 / 7.0, -12.0 / 7.0, 3.0 / 7.0, 0.0],
                dtype=torch.float64,
            ),
        )

    def test_set_boundary_conditions(self):
        from torchspline.spline import CubicSplineInterpolator

        interpolator = CubicSplineInterpolator()
        interpolator.init(
            0.0, 1.0, 2, torch.tensor([0.0, 1.0, 0.0], dtype=torch.float64)
        )

        interpolator.set_boundary_conditions(2.0, 1.0)

        torch.testing.assert_close(
            interpolator.get_derivatives(),
            torch.tensor([2.0, -0.75, 1.0], dtype=torch.float64),
        )

    def test_set_boundary_conditions_is_idempotent(self):
        from torchspline.spline import CubicSplineInterpolator

        interpolator = CubicSplineInterpolator()
        interpolator.init(
            0.0,
            4.0,
            4,
            torch.tensor([0.0, 1.0, 0.0, -1.0, 0.0], dtype=torch.float64),
        )

        interpolator.set_boundary_conditions(1.0, -1.0)
        first = interpolator.get_derivatives().clone()
        interpolator.set_boundary_conditions(1.0, -1.0)

        assert torch.equal(interpolator.get_derivatives(), first)

    def test_set_boundary_conditions_swaps_whole_spline(self):
        """A reader holding the previous spline sees the old slopes only."""
        from torchspline.spline import CubicSplineInterpolator

        interpolator = CubicSplineInterpolator()
        interpolator.init(
            0.0,
            4.0,
            4,
            torch.tensor([0.0, 1.0, 0.0, -1.0, 0.0], dtype=torch.float64),
        )
        previous = interpolator.spline
        previous_slopes = previous.dydx.clone()

        interpolator.set_boundary_conditions(5.0, 5.0)

        assert interpolator.spline is not previous
        assert torch.equal(previous.dydx, previous_slopes)
        assert interpolator.get_derivatives()[0].item() == 5.0

    def test_single_interval(self):
        from torchspline.spline import CubicSplineInterpolator

        interpolator = CubicSplineInterpolator()
        interpolator.init(
            0.0, 2.0, 1, torch.tensor([1.0, 3.0], dtype=torch.float64)
        )
        interpolator.set_boundary_conditions(0.5, -1.5)

        u = 0.25
        h = 2.0
        expected = (
            1.0 * (1 - 3 * u**2 + 2 * u**3)
            + 3.0 * (3 * u**2 - 2 * u**3)
            + h * 0.5 * (u - 2 * u**2 + u**3)
            + h * -1.5 * (-(u**2) + u**3)
        )

        assert interpolator.evaluate(0.5).item() == pytest.approx(
            expected, abs=1e-12
        )

    def test_use_before_init_raises(self):
        from torchspline.spline import CubicSplineInterpolator, SplineError

        interpolator = CubicSplineInterpolator()

        with pytest.raises(SplineError):
            interpolator.evaluate(0.0)
        with pytest.raises(SplineError):
            interpolator.get_derivatives()
        with pytest.raises(SplineError):
            interpolator.set_boundary_conditions(0.0, 0.0)

    def test_failed_init_keeps_previous_state(self):
        from torchspline.spline import CubicSplineInterpolator, KnotError

        interpolator = CubicSplineInterpolator()
        interpolator.init(
            0.0, 2.0, 2, torch.tensor([0.0, 1.0, 0.0], dtype=torch.float64)
        )
        previous = interpolator.spline

        with pytest.raises(KnotError):
            interpolator.init(1.0, 0.0, 2, [0.0, 1.0, 0.0])
        with pytest.raises(KnotError):
            interpolator.init(0.0, 1.0, 0, [0.0, 1.0, 0.0])
        with pytest.raises(KnotError):
            interpolator.init(0.0, 1.0, 5, [0.0, 1.0, 0.0])

        assert interpolator.spline is previous

    def test_extrapolate_option(self):
        from torchspline.spline import (
            CubicSplineInterpolator,
            ExtrapolationError,
        )

        interpolator = CubicSplineInterpolator(extrapolate="error")
        interpolator.init(0.0, 2.0, 2, [0.0, 1.0, 0.0])

        with pytest.raises(ExtrapolationError):
            interpolator.evaluate(3.0)

    def test_large_offset_interval(self):
        """List samples keep a far-from-zero grid in double precision."""
        from torchspline.spline import CubicSplineInterpolator

        interpolator = CubicSplineInterpolator()
        interpolator.init(1e7, 1e7 + 1, 4, [0.0, 1.0, 2.0, 3.0, 4.0])

        assert interpolator.evaluate(1e7 + 0.5).item() == 2.0
        assert interpolator.evaluate(1e7 + 0.25).item() == 1.0

        interpolator.init(1e8, 1e8 + 1, 2, [0.0, 1.0, 0.0])

        assert interpolator.evaluate(1e8 + 0.5).item() == 1.0

    def test_non_finite_warning_points_at_caller(self):
        from torchspline.spline import CubicSplineInterpolator

        interpolator = CubicSplineInterpolator()

        with pytest.warns(RuntimeWarning) as record:
            interpolator.init(0.0, 2.0, 2, [0.0, math.nan, 0.0])
        assert {
            w.filename for w in record if w.category is RuntimeWarning
        } == {__file__}

        interpolator.init(0.0, 2.0, 2, [0.0, 1.0, 0.0])
        with pytest.warns(RuntimeWarning) as record:
            interpolator.set_boundary_conditions(math.nan, 0.0)
        assert {
            w.filename for w in record if w.category is RuntimeWarning
        } == {__file__}
