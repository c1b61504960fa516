import math

import numpy as np
import pytest

from numkit import SampleSet
from numkit.diagnostics import interpolation_table, ode_convergence_table, root_table
from numkit.numerics.interpolation import InterpMethod


def test_ode_convergence_table_orders() -> None:
    df = ode_convergence_table(
        lambda t, y: y, math.exp, 0.0, 1.0, 0.999999, steps=(0.25, 0.125, 0.0625)
    )
    assert list(df.columns) == [
        "h",
        "n_steps",
        "t_end",
        "exact",
        "euler",
        "rk4",
        "euler_abs_error",
        "rk4_abs_error",
        "euler_order",
        "rk4_order",
    ]
    assert len(df) == 3
    np.testing.assert_array_equal(df["t_end"], 1.0)
    np.testing.assert_array_equal(df["n_steps"], [4, 8, 16])
    assert math.isnan(df["euler_order"].iloc[0])

    assert df["euler_order"].iloc[1:].between(0.5, 1.5).all()
    assert df["rk4_order"].iloc[1:].between(3.0, 5.0).all()
    assert (df["rk4_abs_error"] < df["euler_abs_error"]).all()


@pytest.mark.parametrize("steps", [(), (0.1, 0.0), (float("nan"),)])
def test_ode_convergence_table_rejects_bad_steps(steps) -> None:
    with pytest.raises(ValueError):
        ode_convergence_table(lambda t, y: y, math.exp, 0.0, 1.0, 1.0, steps=steps)


def test_interpolation_table_columns_and_errors(make_points) -> None:
    points = make_points(np.sin, n=6, seed=1)
    xs = np.linspace(points.x[0], points.x[-1], 9)
    df = interpolation_table(points, xs, truth=math.sin)

    for m in InterpMethod:
        assert m.value in df.columns
        assert f"{m.value}_abs_error" in df.columns
    assert len(df) == 9
    # endpoints are sample points, every method returns the stored y there
    for m in InterpMethod:
        assert df[m.value].iloc[0] == points.y[0]
        assert df[m.value].iloc[-1] == points.y[-1]


def test_interpolation_table_skips_akima_for_two_points() -> None:
    points = SampleSet.from_arrays([0.0, 1.0], [1.0, 3.0])
    df = interpolation_table(points, [0.25, 0.5])
    assert "akima" not in df.columns
    assert list(df.columns) == ["x", "linear", "lagrange", "newton", "cubic", "quadratic"]
    np.testing.assert_allclose(df["linear"], [1.5, 2.0])


def test_interpolation_table_explicit_methods(line_points) -> None:
    df = interpolation_table(line_points, [1.5, 2.5], methods=["lagrange", "cubic"])
    assert list(df.columns) == ["x", "lagrange", "cubic"]
    np.testing.assert_allclose(df["lagrange"], [3.0, 5.0])


def test_root_table_one_row_per_method() -> None:
    df = root_table(lambda x: x * x - 2.0, 1.0, 2.0, df=lambda x: 2.0 * x, tol=1e-10)
    assert list(df["method"]) == ["bisection", "secant", "newton"]
    assert list(df.columns) == ["method", "root", "converged", "iterations", "f_at_root", "message"]
    np.testing.assert_allclose(df["root"], math.sqrt(2.0), atol=1e-9)
    assert df["converged"].all()
