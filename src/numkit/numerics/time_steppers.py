# src/numkit/numerics/time_steppers.py
from __future__ import annotations

import math
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from enum import Enum

import numpy as np
from numpy.typing import NDArray

from ..config import DegeneratePolicy
from ..typing import OdeRhs
from ._ieee import f64, ieee, resolve

__all__ = [
    "OdeMethod",
    "OdeTrajectory",
    "euler_step",
    "rk4_step",
    "euler",
    "rk4",
    "integrate",
    "trajectory",
]

type Stepper = Callable[[OdeRhs, np.float64, np.float64, np.float64], np.float64]


class OdeMethod(str, Enum):
    EULER = "euler"
    RK4 = "rk4"


@dataclass(frozen=True, slots=True)
class OdeTrajectory:
    """Every mesh point visited by a fixed-step integration.

    ``t[0], y[0]`` is the initial condition; ``t[-1], y[-1]`` is where the
    march stopped, which may lie past the requested end time by up to one step.
    """

    t: NDArray[np.float64]
    y: NDArray[np.float64]
    method: str

    @property
    def n_steps(self) -> int:
        return int(self.t.size - 1)


def euler_step(f: OdeRhs, t: np.float64, y: np.float64, h: np.float64) -> np.float64:
    """One explicit Euler step: ``y + h f(t, y)``."""
    return y + h * f64(f(t, y))


def rk4_step(f: OdeRhs, t: np.float64, y: np.float64, h: np.float64) -> np.float64:
    """One classical Runge-Kutta step (four stage evaluations of ``f``)."""
    k1 = h * f64(f(t, y))
    k2 = h * f64(f(t + h / 2.0, y + k1 / 2.0))
    k3 = h * f64(f(t + h / 2.0, y + k2 / 2.0))
    k4 = h * f64(f(t + h, y + k3))
    return y + (k1 + 2.0 * k2 + 2.0 * k3 + k4) / 6.0


_STEPPERS: dict[OdeMethod, Stepper] = {
    OdeMethod.EULER: euler_step,
    OdeMethod.RK4: rk4_step,
}


def _march(
    step: Stepper, f: OdeRhs, t_i: float, y_i: float, h: float, t: float
) -> Iterator[tuple[np.float64, np.float64]]:
    """Yield ``(t, y)`` after every step of ``while t_i <= t: step; t_i += h``.

    The loop test precedes the step, so the last step can cross ``t``.
    """
    if not (math.isfinite(h) and h > 0.0):
        raise ValueError(f"Step size h must be finite and > 0, got {h}")

    tc = f64(t_i)
    yc = f64(y_i)
    hc = f64(h)
    while tc <= t:
        yc = step(f, tc, yc, hc)
        tc = tc + hc
        yield tc, yc


def integrate(
    f: OdeRhs,
    t_i: float,
    y_i: float,
    h: float,
    t: float,
    *,
    method: OdeMethod | str = OdeMethod.RK4,
    policy: DegeneratePolicy | str = DegeneratePolicy.PROPAGATE,
) -> float:
    """March ``y' = f(t, y)`` from ``(t_i, y_i)`` with fixed step ``h`` until past ``t``.

    Returns the value at the last mesh point, ``ceil((t - t_i) / h)`` steps
    (plus one when ``t - t_i`` is an exact multiple of ``h``) after ``t_i``.
    The landing point is not corrected onto ``t``.
    """
    method = OdeMethod(method)
    y = f64(y_i)
    with ieee():
        for _, y in _march(_STEPPERS[method], f, t_i, y_i, h, t):
            pass
    return resolve(y, what=method.value, policy=policy)


def euler(
    f: OdeRhs,
    t_i: float,
    y_i: float,
    h: float,
    t: float,
    *,
    policy: DegeneratePolicy | str = DegeneratePolicy.PROPAGATE,
) -> float:
    """Explicit Euler integration; see :func:`integrate` for the loop semantics."""
    return integrate(f, t_i, y_i, h, t, method=OdeMethod.EULER, policy=policy)


def rk4(
    f: OdeRhs,
    t_i: float,
    y_i: float,
    h: float,
    t: float,
    *,
    policy: DegeneratePolicy | str = DegeneratePolicy.PROPAGATE,
) -> float:
    """Classical RK4 integration; see :func:`integrate` for the loop semantics."""
    return integrate(f, t_i, y_i, h, t, method=OdeMethod.RK4, policy=policy)


def trajectory(
    f: OdeRhs,
    t_i: float,
    y_i: float,
    h: float,
    t: float,
    *,
    method: OdeMethod | str = OdeMethod.RK4,
) -> OdeTrajectory:
    """Same march as :func:`integrate`, keeping every mesh point."""
    method = OdeMethod(method)
    ts = [f64(t_i)]
    ys = [f64(y_i)]
    with ieee():
        for tc, yc in _march(_STEPPERS[method], f, t_i, y_i, h, t):
            ts.append(tc)
            ys.append(yc)
    return OdeTrajectory(
        t=np.asarray(ts, dtype=np.float64),
        y=np.asarray(ys, dtype=np.float64),
        method=method.value,
    )
