"""
numkit

Small numerical-methods toolkit: interpolation, least-squares line fits,
root finding, finite-difference derivatives and fixed-step ODE integration.

The everyday functions are exposed at the top level, so you can write, for
example:

    from numkit import SampleSet, lagrange, bisection, rk4
"""

from .config import DEFAULT_CONFIG, DegeneratePolicy, NumericsConfig
from .exceptions import (
    DegenerateInputError,
    DegenerateResultWarning,
    NonConvergenceError,
    NumericsError,
    RangeError,
)
from .numerics.finite_diff import backward_diff, central_diff, forward_diff
from .numerics.interpolation import interpolate, lagrange, linear, newton
from .numerics.regression import least_squares
from .numerics.root_finding import bisection, find_root, newton_method, secant
from .numerics.splines import akima, spline_cubic, spline_quadratic
from .numerics.time_steppers import euler, rk4, trajectory
from .types import LinearFit, SampleSet

__all__ = [
    # Types
    "SampleSet",
    "LinearFit",
    # Config
    "DegeneratePolicy",
    "NumericsConfig",
    "DEFAULT_CONFIG",
    # Errors
    "NumericsError",
    "DegenerateInputError",
    "RangeError",
    "NonConvergenceError",
    "DegenerateResultWarning",
    # Interpolation
    "linear",
    "lagrange",
    "newton",
    "spline_cubic",
    "spline_quadratic",
    "akima",
    "interpolate",
    "least_squares",
    # Root finding
    "bisection",
    "secant",
    "newton_method",
    "find_root",
    # Derivatives
    "forward_diff",
    "backward_diff",
    "central_diff",
    # ODE
    "euler",
    "rk4",
    "trajectory",
]
