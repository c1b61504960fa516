# src/numkit/numerics/__init__.py
"""
Numerical routines (full API).

Top-level package `numkit` exposes the everyday functions.
This subpackage additionally exposes the result types, dispatch enums and
building blocks (single steps, divided-difference tables, Akima slopes).
"""

from .finite_diff import FDScheme, backward_diff, central_diff, derivative, forward_diff
from .interpolation import (
    InterpMethod,
    divided_difference,
    divided_differences,
    get_interp_method,
    interpolate,
    lagrange,
    linear,
    newton,
    piecewise_linear,
)
from .regression import least_squares
from .root_finding import (
    RootMethod,
    RootResult,
    bisection,
    bisection_result,
    find_root,
    get_root_method,
    newton_method,
    newton_result,
    secant,
    secant_result,
)
from .splines import akima, akima_slopes, find_segment, spline_cubic, spline_quadratic
from .time_steppers import (
    OdeMethod,
    OdeTrajectory,
    euler,
    euler_step,
    integrate,
    rk4,
    rk4_step,
    trajectory,
)

__all__ = [
    # Interpolation
    "InterpMethod",
    "linear",
    "piecewise_linear",
    "lagrange",
    "divided_difference",
    "divided_differences",
    "newton",
    "get_interp_method",
    "interpolate",
    # Piecewise
    "find_segment",
    "spline_cubic",
    "spline_quadratic",
    "akima_slopes",
    "akima",
    # Regression
    "least_squares",
    # Root finding
    "RootMethod",
    "RootResult",
    "bisection",
    "bisection_result",
    "secant",
    "secant_result",
    "newton_method",
    "newton_result",
    "get_root_method",
    "find_root",
    # Finite differences
    "FDScheme",
    "forward_diff",
    "backward_diff",
    "central_diff",
    "derivative",
    # ODE
    "OdeMethod",
    "OdeTrajectory",
    "euler_step",
    "rk4_step",
    "euler",
    "rk4",
    "integrate",
    "trajectory",
]
