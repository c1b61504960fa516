"""Single-shot finite-difference derivatives of a scalar function.

Forward difference:   f'(x) ~ (f(x + h) - f(x)) / h
Backward difference:  f'(x) ~ (f(x) - f(x - h)) / h
Central difference:   f'(x) ~ (f(x + h) - f(x - h)) / (2h)

Forward/backward are first-order accurate in ``h``, central is second-order.
Each call costs exactly two evaluations of ``f``. ``h = 0`` gives NaN.
"""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum

from ..config import DegeneratePolicy
from ..typing import ScalarFn
from ._ieee import f64, ieee, resolve

__all__ = [
    "FDScheme",
    "forward_diff",
    "backward_diff",
    "central_diff",
    "derivative",
]


def forward_diff(
    f: ScalarFn,
    x: float,
    h: float,
    *,
    policy: DegeneratePolicy | str = DegeneratePolicy.PROPAGATE,
) -> float:
    x, h = f64(x), f64(h)
    with ieee():
        d = (f64(f(x + h)) - f64(f(x))) / h
    return resolve(d, what="forward_diff", policy=policy)


def backward_diff(
    f: ScalarFn,
    x: float,
    h: float,
    *,
    policy: DegeneratePolicy | str = DegeneratePolicy.PROPAGATE,
) -> float:
    x, h = f64(x), f64(h)
    with ieee():
        d = (f64(f(x)) - f64(f(x - h))) / h
    return resolve(d, what="backward_diff", policy=policy)


def central_diff(
    f: ScalarFn,
    x: float,
    h: float,
    *,
    policy: DegeneratePolicy | str = DegeneratePolicy.PROPAGATE,
) -> float:
    x, h = f64(x), f64(h)
    with ieee():
        d = (f64(f(x + h)) - f64(f(x - h))) / (2.0 * h)
    return resolve(d, what="central_diff", policy=policy)


class FDScheme(str, Enum):
    FORWARD = "forward"
    BACKWARD = "backward"
    CENTRAL = "central"


_SCHEMES: dict[FDScheme, Callable[..., float]] = {
    FDScheme.FORWARD: forward_diff,
    FDScheme.BACKWARD: backward_diff,
    FDScheme.CENTRAL: central_diff,
}


def derivative(
    f: ScalarFn,
    x: float,
    h: float,
    *,
    scheme: FDScheme | str = FDScheme.CENTRAL,
    policy: DegeneratePolicy | str = DegeneratePolicy.PROPAGATE,
) -> float:
    """Finite-difference ``f'(x)`` with the chosen ``scheme``."""
    return _SCHEMES[FDScheme(scheme)](f, x, h, policy=policy)
