"""Polynomial interpolation over a :class:`~numkit.types.SampleSet`.

- :func:`linear`: two-point straight line.
- :func:`lagrange`: Lagrange form, O(n^2) per query.
- :func:`newton`: Newton form built from divided differences.
- :func:`interpolate`: dispatch over every interpolation method in the package,
  including the piecewise ones in :mod:`numkit.numerics.splines`.

Lagrange and Newton build the same polynomial, but they round differently, so
they are kept as separate formulations rather than one calling the other.
"""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum
from functools import lru_cache

import numpy as np
from numpy.typing import ArrayLike, NDArray

from ..config import DegeneratePolicy
from ..types import SampleSet
from ._ieee import f64, ieee, resolve
from .splines import akima, find_segment, spline_cubic, spline_quadratic

__all__ = [
    "InterpMethod",
    "linear",
    "piecewise_linear",
    "lagrange",
    "divided_difference",
    "divided_differences",
    "newton",
    "get_interp_method",
    "interpolate",
]


def linear(
    x: float,
    x1: float,
    x2: float,
    y1: float,
    y2: float,
    *,
    policy: DegeneratePolicy | str = DegeneratePolicy.PROPAGATE,
) -> float:
    """Straight line through ``(x1, y1)`` and ``(x2, y2)`` evaluated at ``x``.

    ``x1 == x2`` is a precondition violation; the division yields NaN/Inf.
    """
    with ieee():
        y = f64(y1) + (f64(x) - f64(x1)) * ((f64(y2) - f64(y1)) / (f64(x2) - f64(x1)))
    return resolve(y, what="linear", policy=policy)


def piecewise_linear(
    points: SampleSet,
    x: float,
    *,
    policy: DegeneratePolicy | str = DegeneratePolicy.PROPAGATE,
) -> float:
    """:func:`linear` on the segment of ``points`` that contains ``x``."""
    i, hit = find_segment(points, x)
    xs, ys = points.x, points.y
    if hit:
        return float(ys[i])
    return linear(x, xs[i], xs[i + 1], ys[i], ys[i + 1], policy=policy)


def lagrange(
    points: SampleSet,
    x: float,
    *,
    policy: DegeneratePolicy | str = DegeneratePolicy.PROPAGATE,
) -> float:
    """Evaluate the Lagrange interpolating polynomial at ``x``.

    ``sum_i y_i * prod_{j != i} (x - x_j) / (x_i - x_j)``

    Exact at every sample abscissa. Coincident abscissae give NaN/Inf terms.
    """
    xs, ys = points.x, points.y
    xq = f64(x)
    n = xs.size

    result = f64(0.0)
    with ieee():
        for i in range(n):
            term = ys[i]
            for j in range(n):
                if j != i:
                    term *= (xq - xs[j]) / (xs[i] - xs[j])
            result += term
    return resolve(result, what="lagrange", policy=policy)


def divided_difference(points: SampleSet, i: int, k: int) -> float:
    """Single divided difference ``D[i, k]`` by direct recursion.

    ``D[i, i] = y_i`` and ``D[i, k] = (D[i+1, k] - D[i, k-1]) / (x_k - x_i)``.
    Memoised per call; :func:`divided_differences` is the table form.
    """
    n = points.n
    if not (0 <= i <= k < n):
        raise ValueError(f"Need 0 <= i <= k < n={n}, got i={i}, k={k}")
    xs, ys = points.x, points.y

    @lru_cache(maxsize=None)
    def dd(a: int, b: int) -> np.float64:
        if a == b:
            return ys[a]
        return (dd(a + 1, b) - dd(a, b - 1)) / (xs[b] - xs[a])

    with ieee():
        return float(dd(i, k))


def divided_differences(points: SampleSet) -> NDArray[np.float64]:
    """Top row ``[D[0,0], D[0,1], ..., D[0,n-1]]`` of the divided-difference table.

    The table is filled level by level; entry ``col[i]`` at level ``k`` is
    ``D[i, i+k]`` computed with exactly the recursive formula, so the values
    match :func:`divided_difference` bit for bit.
    """
    xs = points.x
    n = xs.size

    col = np.array(points.y, dtype=np.float64, copy=True)
    coef = np.empty(n, dtype=np.float64)
    coef[0] = col[0]
    with ieee():
        for level in range(1, n):
            col = (col[1:] - col[:-1]) / (xs[level:] - xs[:-level])
            coef[level] = col[0]
    return coef


def newton(
    points: SampleSet,
    x: float,
    *,
    policy: DegeneratePolicy | str = DegeneratePolicy.PROPAGATE,
) -> float:
    """Evaluate the Newton-form interpolating polynomial at ``x``.

    ``y_0 + sum_{k=1}^{n-1} D[0,k] * prod_{j<k} (x - x_j)``

    A query equal to a sample abscissa returns that sample's ``y`` as stored.
    """
    xs = points.x
    xq = f64(x)
    hit = np.flatnonzero(xs == xq)
    if hit.size:
        return float(points.y[hit[0]])

    coef = divided_differences(points)

    with ieee():
        result = coef[0]
        prod = f64(1.0)
        for k in range(1, xs.size):
            prod *= xq - xs[k - 1]
            result += coef[k] * prod
    return resolve(result, what="newton", policy=policy)


# ---------------------------
# Method dispatch
# ---------------------------


class InterpMethod(str, Enum):
    LINEAR = "linear"  # piecewise linear between bracketing samples
    LAGRANGE = "lagrange"
    NEWTON = "newton"
    CUBIC = "cubic"
    QUADRATIC = "quadratic"
    AKIMA = "akima"


def _akima_points(
    points: SampleSet, x: float, *, policy: DegeneratePolicy | str
) -> float:
    return akima(points.x, points.y, x, policy=policy)


_INTERP_METHODS: dict[InterpMethod, Callable[..., float]] = {
    InterpMethod.LINEAR: piecewise_linear,
    InterpMethod.LAGRANGE: lagrange,
    InterpMethod.NEWTON: newton,
    InterpMethod.CUBIC: spline_cubic,
    InterpMethod.QUADRATIC: spline_quadratic,
    InterpMethod.AKIMA: _akima_points,
}


def get_interp_method(method: InterpMethod | str) -> Callable[..., float]:
    """Return the ``(points, x, *, policy) -> float`` evaluator for ``method``."""
    return _INTERP_METHODS[InterpMethod(method)]


def interpolate(
    points: SampleSet,
    x: ArrayLike,
    *,
    method: InterpMethod | str = InterpMethod.LAGRANGE,
    policy: DegeneratePolicy | str = DegeneratePolicy.PROPAGATE,
) -> float | NDArray[np.float64]:
    """Evaluate ``method`` at one query or at every element of an array of queries.

    Scalar in, float out; array in, array of the same shape out.
    """
    fn = get_interp_method(method)
    xq = np.asarray(x, dtype=np.float64)
    if xq.ndim == 0:
        return fn(points, float(xq), policy=policy)

    out = np.empty(xq.shape, dtype=np.float64)
    for idx, xi in np.ndenumerate(xq):
        out[idx] = fn(points, float(xi), policy=policy)
    return out
