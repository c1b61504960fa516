import numpy as np
from numpy.typing import ArrayLike

from ..config import DegeneratePolicy
from ..types import LinearFit
from ._ieee import ieee, resolve


def least_squares(
    x: ArrayLike,
    y: ArrayLike,
    *,
    policy: DegeneratePolicy | str = DegeneratePolicy.PROPAGATE,
) -> LinearFit:
    """
    Closed-form ordinary least-squares line through ``(x, y)``.

        slope     = (n*Sxy - Sx*Sy) / (n*Sxx - Sx^2)
        intercept = (Sy - slope*Sx) / n

    All ``x`` equal (vertical data) makes the denominator zero; the result is
    NaN/Inf, handled according to ``policy``.
    """
    x = np.asarray(x, dtype=np.float64)
    y = np.asarray(y, dtype=np.float64)
    if x.ndim != 1 or y.ndim != 1:
        raise ValueError("x and y must be 1D")
    if x.shape != y.shape:
        raise ValueError(f"x and y must have same shape, got {x.shape} and {y.shape}")
    if x.size == 0:
        raise ValueError("Need at least 1 point")

    n = np.float64(x.size)
    sx = np.sum(x)
    sy = np.sum(y)
    sxy = np.sum(x * y)
    sxx = np.sum(x * x)

    with ieee():
        slope = (n * sxy - sx * sy) / (n * sxx - sx * sx)
        intercept = (sy - slope * sx) / n

    return LinearFit(
        slope=resolve(slope, what="least_squares slope", policy=policy),
        intercept=resolve(intercept, what="least_squares intercept", policy=policy),
    )
