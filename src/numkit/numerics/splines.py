"""Piecewise interpolation: local two-point cubic/quadratic segments and Akima.

The "cubic" and "quadratic" evaluators here are *local*: each segment's
coefficients come from its two bracketing samples and its width only. No
banded system is solved and the result is not a globally C2 spline. Their
outputs are pinned by tests, so the coefficient formulas must not change.

Akima's method uses slopes from up to two neighbouring segments on each side
to pick node derivatives, which suppresses the wiggles a global cubic spline
shows around outliers. At the ends of the data the missing neighbour slopes
are filled in by linear extrapolation (Akima, 1970).
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike, NDArray

from ..config import DegeneratePolicy
from ..exceptions import RangeError
from ..types import SampleSet
from ._ieee import f64, ieee, resolve

__all__ = [
    "find_segment",
    "spline_cubic",
    "spline_quadratic",
    "akima_slopes",
    "akima",
]

# Relative threshold below which Akima's weights are treated as 0/0.
_AKIMA_WEIGHT_EPS = 1e-9


def _check_in_span(x: float, lo: float, hi: float) -> None:
    if not (lo <= x <= hi):
        raise RangeError(f"Query x={x} outside sample span [{lo}, {hi}]")


def find_segment(points: SampleSet, x: float) -> tuple[int, bool]:
    """Binary-search the segment containing ``x``.

    Returns
    -------
    (i, hit) : tuple[int, bool]
        ``hit`` is True when ``x`` equals a sample abscissa exactly; ``i`` is
        then that sample's index. Otherwise ``i`` is the segment index with
        ``x[i] < x < x[i+1]``.

    Raises
    ------
    RangeError
        If ``x`` is outside ``[x[0], x[-1]]`` (or NaN).
    """
    xs = points.x
    _check_in_span(x, float(xs[0]), float(xs[-1]))

    left = 0
    right = xs.size - 1
    while left <= right:
        mid = (left + right) // 2
        if xs[mid] == x:
            return mid, True
        if xs[mid] < x:
            left = mid + 1
        else:
            right = mid - 1
    return left - 1, False


def spline_cubic(
    points: SampleSet,
    x: float,
    *,
    policy: DegeneratePolicy | str = DegeneratePolicy.PROPAGATE,
) -> float:
    """Local two-point cubic with flat ends on the segment containing ``x``.

    With ``h = x[i+1] - x[i]``, ``dy = y[i+1] - y[i]`` and ``dx = x - x[i]``::

        a = y[i],  b = 0,  c = 3 dy / h^2,  d = -2 dy / h^3
        s(x) = a + dx*(b + dx*(c + dx*d))

    The cubic passes through both endpoints with zero slope at each.
    """
    i, hit = find_segment(points, x)
    xs, ys = points.x, points.y
    if hit:
        return float(ys[i])

    with ieee():
        h = xs[i + 1] - xs[i]
        dy = ys[i + 1] - ys[i]
        dx = f64(x) - xs[i]

        a = ys[i]
        b = f64(0.0)
        c = 3.0 * dy / (h * h)
        d = -2.0 * dy / (h * h * h)
        val = a + dx * (b + dx * (c + dx * d))
    return resolve(val, what="spline_cubic", policy=policy)


def spline_quadratic(
    points: SampleSet,
    x: float,
    *,
    policy: DegeneratePolicy | str = DegeneratePolicy.PROPAGATE,
) -> float:
    """Local two-point quadratic on the segment containing ``x``.

    ::

        a = y[i],  b = dy / (2h),  c = dy / (2h^2)
        s(x) = a + dx*(b + dx*c)

    Passes through both endpoints; the slope is half the chord slope at the
    left end and 1.5 times it at the right end.
    """
    i, hit = find_segment(points, x)
    xs, ys = points.x, points.y
    if hit:
        return float(ys[i])

    with ieee():
        h = xs[i + 1] - xs[i]
        dy = ys[i + 1] - ys[i]
        dx = f64(x) - xs[i]

        a = ys[i]
        b = dy / (2.0 * h)
        c = dy / (2.0 * h * h)
        val = a + dx * (b + dx * c)
    return resolve(val, what="spline_quadratic", policy=policy)


# ---------------------------
# Akima
# ---------------------------


def _akima_arrays(
    x: ArrayLike, y: ArrayLike
) -> tuple[NDArray[np.float64], NDArray[np.float64]]:
    xa = np.asarray(x, dtype=np.float64)
    ya = np.asarray(y, dtype=np.float64)
    if xa.ndim != 1 or ya.ndim != 1:
        raise ValueError("x and y must be 1D")
    if xa.shape != ya.shape:
        raise ValueError(f"x and y must have same shape, got {xa.shape} and {ya.shape}")
    if xa.size < 3:
        raise ValueError("Akima interpolation needs at least 3 points")
    return xa, ya


def akima_slopes(x: ArrayLike, y: ArrayLike) -> NDArray[np.float64]:
    """Akima node derivatives ``s_i`` for every sample, shape (n,).

    With segment slopes ``m_i`` extended by two extrapolated ghost slopes on
    each side (``m_{-1} = 2 m_0 - m_1``, ``m_{-2} = 2 m_{-1} - m_0``, and
    likewise on the right)::

        w1 = |m_{i+1} - m_i|,  w2 = |m_{i-1} - m_{i-2}|
        s_i = (w1 m_{i-1} + w2 m_i) / (w1 + w2)

    Where ``w1 + w2`` is negligible the slope falls back to
    ``(m_{i-2} + m_{i+1}) / 2``.
    """
    xa, ya = _akima_arrays(x, y)
    n = xa.size

    # ext[k] holds m_{k-2}
    ext = np.empty(n + 3, dtype=np.float64)
    with ieee():
        ext[2:-2] = np.diff(ya) / np.diff(xa)
        ext[1] = 2.0 * ext[2] - ext[3]
        ext[0] = 2.0 * ext[1] - ext[2]
        ext[-2] = 2.0 * ext[-3] - ext[-4]
        ext[-1] = 2.0 * ext[-2] - ext[-3]

        dm = np.abs(np.diff(ext))
        w1 = dm[2:]
        w2 = dm[:-2]
        w12 = w1 + w2

        s = 0.5 * (ext[3:] + ext[:-3])
        ok = w12 > _AKIMA_WEIGHT_EPS * np.max(w12, initial=-np.inf)
        s[ok] = (w1[ok] * ext[1:-2][ok] + w2[ok] * ext[2:-1][ok]) / w12[ok]
    return s


def akima(
    x: ArrayLike,
    y: ArrayLike,
    x_val: float,
    *,
    policy: DegeneratePolicy | str = DegeneratePolicy.PROPAGATE,
) -> float:
    """Akima piecewise-cubic interpolation at ``x_val``.

    Parameters
    ----------
    x, y : array_like, shape (n,)
        Samples with strictly increasing ``x`` and ``n >= 3``.
    x_val : float
        Query inside ``[x[0], x[-1]]``.

    Raises
    ------
    ValueError
        If the arrays are not 1D of equal length ``>= 3``.
    RangeError
        If ``x_val`` is outside the sample span.
    """
    xa, ya = _akima_arrays(x, y)
    _check_in_span(x_val, float(xa[0]), float(xa[-1]))
    s = akima_slopes(xa, ya)

    i = 0
    last = xa.size - 2
    while i < last and x_val > xa[i + 1]:
        i += 1
    if x_val == xa[i + 1]:
        return float(ya[i + 1])

    with ieee():
        h = xa[i + 1] - xa[i]
        dy = ya[i + 1] - ya[i]
        t = (f64(x_val) - xa[i]) / h
        s0 = h * s[i]
        s1 = h * s[i + 1]
        val = ya[i] + t * (s0 + t * (3.0 * dy - 2.0 * s0 - s1 + t * (s0 + s1 - 2.0 * dy)))
    return resolve(val, what="akima", policy=policy)
