import math

import numpy as np
import pytest

from numkit import RangeError, SampleSet
from numkit.numerics.splines import (
    akima,
    akima_slopes,
    find_segment,
    spline_cubic,
    spline_quadratic,
)

# --- Segment search ----------------------------------------------------------


def test_find_segment_exact_hits_and_interior() -> None:
    points = SampleSet.from_arrays([0.0, 1.0, 2.5, 4.0, 7.0], [0.0] * 5)
    for i, xi in enumerate(points.x):
        assert find_segment(points, float(xi)) == (i, True)

    assert find_segment(points, 0.5) == (0, False)
    assert find_segment(points, 2.0) == (1, False)
    assert find_segment(points, 3.9) == (2, False)
    assert find_segment(points, 6.999) == (3, False)


@pytest.mark.parametrize("xq", [-0.1, 7.5, float("nan"), float("inf")])
def test_find_segment_out_of_range(xq: float) -> None:
    points = SampleSet.from_arrays([0.0, 1.0, 2.5, 4.0, 7.0], [0.0] * 5)
    with pytest.raises(RangeError):
        find_segment(points, xq)
    # RangeError is a ValueError as well
    with pytest.raises(ValueError):
        find_segment(points, xq)


# --- Local cubic / quadratic -------------------------------------------------


def test_pinned_values_on_collinear_set(line_points: SampleSet) -> None:
    assert round(spline_cubic(line_points, 2.5)) == 5.0
    assert spline_cubic(line_points, 2.5) == 5.0
    assert spline_quadratic(line_points, 2.5) == 4.75


def test_pinned_values_first_segment(line_points: SampleSet) -> None:
    # segment [1, 2], dy = 2, h = 1, dx = 0.25
    assert spline_quadratic(line_points, 1.25) == 2.0 + 0.25 * (1.0 + 0.25 * 1.0)
    assert spline_cubic(line_points, 1.25) == 2.0 + 0.25 * (0.0 + 0.25 * (6.0 - 0.25 * 4.0))


@pytest.mark.parametrize("fn", [spline_cubic, spline_quadratic])
def test_exact_at_sample_abscissae(make_points, fn) -> None:
    points = make_points(np.sin, n=9, seed=21)
    for xi, yi in zip(points.x, points.y, strict=True):
        assert fn(points, float(xi)) == yi


@pytest.mark.parametrize("fn", [spline_cubic, spline_quadratic])
def test_segments_continuous_at_knots(make_points, fn) -> None:
    """Both local forms reach the right endpoint of every segment."""
    points = make_points(np.cos, n=6, seed=8)
    for i in range(points.n - 1):
        x_left = np.nextafter(points.x[i + 1], -np.inf)
        assert fn(points, float(x_left)) == pytest.approx(points.y[i + 1], abs=1e-12)


def test_cubic_has_flat_ends_and_quadratic_does_not(line_points: SampleSet) -> None:
    eps = 1e-6
    slope_cubic = (spline_cubic(line_points, 2.0 + eps) - 4.0) / eps
    slope_quad = (spline_quadratic(line_points, 2.0 + eps) - 4.0) / eps
    assert slope_cubic == pytest.approx(0.0, abs=1e-4)
    assert slope_quad == pytest.approx(1.0, abs=1e-4)  # half the chord slope


@pytest.mark.parametrize("fn", [spline_cubic, spline_quadratic])
def test_out_of_range_query_raises(line_points: SampleSet, fn) -> None:
    with pytest.raises(RangeError):
        fn(line_points, 0.5)
    with pytest.raises(RangeError):
        fn(line_points, 3.5)


def test_two_point_set_is_enough() -> None:
    points = SampleSet.from_arrays([0.0, 2.0], [1.0, 3.0])
    assert spline_quadratic(points, 1.0) == 1.0 + 1.0 * (0.5 + 1.0 * 0.25)
    assert spline_cubic(points, 1.0) == 2.0


# --- Akima -------------------------------------------------------------------


def test_akima_reproduces_linear_data(line_points: SampleSet) -> None:
    assert akima(line_points.x, line_points.y, 2.5) == pytest.approx(5.0, abs=1e-14)
    x = np.linspace(-1.0, 4.0, 11)
    y = 3.0 * x - 2.0
    for xq in np.linspace(-1.0, 4.0, 23):
        assert akima(x, y, float(xq)) == pytest.approx(3.0 * xq - 2.0, abs=1e-12)
    np.testing.assert_allclose(akima_slopes(x, y), 3.0, atol=1e-12)


def test_akima_exact_at_sample_abscissae(make_points) -> None:
    points = make_points(np.sin, n=8, seed=13)
    for xi, yi in zip(points.x, points.y, strict=True):
        assert akima(points.x, points.y, float(xi)) == yi


@pytest.mark.parametrize("seed", [0, 1, 2])
def test_akima_matches_scipy(make_points, seed: int) -> None:
    interpolate_mod = pytest.importorskip("scipy.interpolate")
    points = make_points(lambda x: np.sin(2.0 * x) + 0.1 * x**2, n=10, seed=seed)
    ref = interpolate_mod.Akima1DInterpolator(np.array(points.x), np.array(points.y))

    xq = np.linspace(points.x[0], points.x[-1], 57)
    got = np.array([akima(points.x, points.y, float(v)) for v in xq])
    np.testing.assert_allclose(got, ref(xq), rtol=1e-11, atol=1e-12)
    np.testing.assert_allclose(
        akima_slopes(points.x, points.y), ref(points.x, nu=1), rtol=1e-10, atol=1e-12
    )


def test_akima_suppresses_overshoot_around_step() -> None:
    # flat / step / flat: Akima stays within the data range on the flat parts
    x = np.arange(8, dtype=float)
    y = np.array([0.0, 0.0, 0.0, 0.0, 1.0, 1.0, 1.0, 1.0])
    for xq in np.linspace(0.0, 3.0, 31):
        assert akima(x, y, float(xq)) == pytest.approx(0.0, abs=1e-15)
    for xq in np.linspace(4.0, 7.0, 31):
        assert akima(x, y, float(xq)) == pytest.approx(1.0, abs=1e-15)


def test_akima_three_point_minimum() -> None:
    with pytest.raises(ValueError):
        akima([0.0, 1.0], [0.0, 1.0], 0.5)
    with pytest.raises(ValueError):
        akima([0.0, 1.0, 2.0], [0.0, 1.0], 0.5)
    # n == 3 is fine
    assert math.isfinite(akima([0.0, 1.0, 2.0], [0.0, 1.0, 0.0], 0.5))


def test_akima_out_of_range_raises() -> None:
    with pytest.raises(RangeError):
        akima([0.0, 1.0, 2.0], [0.0, 1.0, 0.0], 2.5)
    with pytest.raises(RangeError):
        akima([0.0, 1.0, 2.0], [0.0, 1.0, 0.0], float("nan"))


def test_akima_does_not_modify_inputs() -> None:
    x = np.array([0.0, 0.5, 1.5, 3.0])
    y = np.array([1.0, -1.0, 2.0, 0.0])
    x0, y0 = x.copy(), y.copy()
    _ = akima(x, y, 1.0)
    _ = akima_slopes(x, y)
    np.testing.assert_array_equal(x, x0)
    np.testing.assert_array_equal(y, y0)
