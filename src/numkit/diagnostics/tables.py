from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence

import numpy as np
import pandas as pd
from numpy.typing import ArrayLike

from numkit.config import DEFAULT_CONFIG, NumericsConfig
from numkit.numerics.interpolation import InterpMethod, interpolate
from numkit.numerics.root_finding import RootMethod, find_root
from numkit.numerics.time_steppers import OdeMethod, trajectory
from numkit.types import SampleSet
from numkit.typing import OdeRhs, ScalarFn


def _observed_order(err: np.ndarray, h: np.ndarray) -> np.ndarray:
    """log(e_{k-1}/e_k) / log(h_{k-1}/h_k); NaN in the first row or on zero errors."""
    order = np.full(err.shape, np.nan, dtype=float)
    with np.errstate(divide="ignore", invalid="ignore"):
        order[1:] = np.log(err[:-1] / err[1:]) / np.log(h[:-1] / h[1:])
    order[~np.isfinite(order)] = np.nan
    return order


def ode_convergence_table(
    f: OdeRhs,
    exact: Callable[[float], float],
    t_i: float,
    y_i: float,
    t: float,
    steps: Iterable[float] = (0.1, 0.05, 0.025, 0.0125),
) -> pd.DataFrame:
    """Euler vs RK4 error against an analytic solution across step sizes.

    The fixed-step march stops past ``t`` by up to one step, so ``exact`` is
    evaluated at the time each method actually reached (``t_end``), not at ``t``.

    Returns a DataFrame with columns:
        h, n_steps, t_end, exact, euler, rk4, euler_abs_error, rk4_abs_error,
        euler_order, rk4_order
    """
    h_vals = np.asarray(list(steps), dtype=float)
    if h_vals.size == 0:
        raise ValueError("steps must be non-empty")
    if np.any(~np.isfinite(h_vals)) or np.any(h_vals <= 0.0):
        raise ValueError("steps must be finite and > 0")

    rows: list[dict[str, object]] = []
    for h in h_vals:
        tr_e = trajectory(f, t_i, y_i, float(h), t, method=OdeMethod.EULER)
        tr_r = trajectory(f, t_i, y_i, float(h), t, method=OdeMethod.RK4)

        # Both methods share the mesh, only y differs.
        t_end = float(tr_r.t[-1])
        ex = float(exact(t_end))
        rows.append(
            {
                "h": float(h),
                "n_steps": tr_r.n_steps,
                "t_end": t_end,
                "exact": ex,
                "euler": float(tr_e.y[-1]),
                "rk4": float(tr_r.y[-1]),
                "euler_abs_error": abs(float(tr_e.y[-1]) - ex),
                "rk4_abs_error": abs(float(tr_r.y[-1]) - ex),
            }
        )

    df = pd.DataFrame(rows)
    df["euler_order"] = _observed_order(df["euler_abs_error"].to_numpy(), h_vals)
    df["rk4_order"] = _observed_order(df["rk4_abs_error"].to_numpy(), h_vals)
    return df


def interpolation_table(
    points: SampleSet,
    xs: ArrayLike,
    *,
    methods: Sequence[InterpMethod | str] | None = None,
    truth: ScalarFn | None = None,
) -> pd.DataFrame:
    """Evaluate several interpolation methods on the same queries.

    One row per query ``x``; one column per method (named by its value). With
    ``truth`` given, adds a ``truth`` column and ``<method>_abs_error`` columns.
    Akima is skipped automatically for sets with fewer than 3 points.
    """
    if methods is None:
        methods = [m for m in InterpMethod if not (m is InterpMethod.AKIMA and points.n < 3)]
    method_list = [InterpMethod(m) for m in methods]

    xq = np.asarray(xs, dtype=float).ravel()
    df = pd.DataFrame({"x": xq})
    for m in method_list:
        df[m.value] = interpolate(points, xq, method=m)

    if truth is not None:
        df["truth"] = [float(truth(float(v))) for v in xq]
        for m in method_list:
            df[f"{m.value}_abs_error"] = (df[m.value] - df["truth"]).abs()
    return df


def root_table(
    f: ScalarFn,
    a: float,
    b: float,
    *,
    df: ScalarFn | None = None,
    x0: float | None = None,
    tol: float | None = None,
    methods: Sequence[RootMethod | str] | None = None,
    config: NumericsConfig = DEFAULT_CONFIG,
) -> pd.DataFrame:
    """Solve the same problem with several root methods, one row per method.

    Columns: method, root, converged, iterations, f_at_root, message
    """
    method_list = [RootMethod(m) for m in (methods or list(RootMethod))]

    rows: list[dict[str, object]] = []
    for m in method_list:
        res = find_root(f, a, b, method=m, df=df, x0=x0, tol=tol, config=config)
        rows.append(
            {
                "method": res.method,
                "root": res.root,
                "converged": res.converged,
                "iterations": res.iterations,
                "f_at_root": res.f_at_root,
                "message": res.message,
            }
        )
    return pd.DataFrame(rows)
