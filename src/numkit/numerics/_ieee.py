"""IEEE 754 helpers shared by the numerics modules.

Python floats raise ``ZeroDivisionError`` where IEEE arithmetic returns
``inf``/``nan``. Routines in this package therefore compute in ``np.float64``
inside :func:`ieee` (which silences numpy's RuntimeWarnings) and pass their
result through :func:`resolve` to apply the caller's
:class:`~numkit.config.DegeneratePolicy`.
"""

from __future__ import annotations

import math
import warnings
from contextlib import AbstractContextManager

import numpy as np

from ..config import DegeneratePolicy
from ..exceptions import DegenerateInputError, DegenerateResultWarning


def ieee() -> AbstractContextManager:
    return np.errstate(divide="ignore", invalid="ignore", over="ignore")


def f64(v: float) -> np.float64:
    return np.float64(v)


def resolve(
    value: float | np.floating,
    *,
    what: str,
    policy: DegeneratePolicy | str = DegeneratePolicy.PROPAGATE,
) -> float:
    """Return ``value`` as a Python float, applying ``policy`` if it is not finite."""
    out = float(value)
    if math.isfinite(out):
        return out

    policy = DegeneratePolicy(policy)
    if policy is DegeneratePolicy.RAISE:
        raise DegenerateInputError(f"{what} produced a non-finite result ({out}).")
    if policy is DegeneratePolicy.WARN:
        warnings.warn(
            f"{what} produced a non-finite result ({out}).",
            DegenerateResultWarning,
            stacklevel=3,
        )
    return out
