from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

import numpy as np

from ..config import DEFAULT_CONFIG, DegeneratePolicy, NumericsConfig
from ..exceptions import NonConvergenceError
from ..typing import ScalarFn
from ._ieee import f64, ieee, resolve
from .finite_diff import central_diff

__all__ = [
    "RootResult",
    "RootMethod",
    "bisection_result",
    "secant_result",
    "newton_result",
    "bisection",
    "secant",
    "newton_method",
    "get_root_method",
    "find_root",
]

# ---------------------------
# Results
# ---------------------------


@dataclass(frozen=True, slots=True)
class RootResult:
    root: float
    converged: bool
    iterations: int
    method: str
    f_at_root: float
    bracket: tuple[float, float] | None = None
    message: str = ""


# ---------------------------
# Root finders
# Each returns RootResult; the plain-named wrappers below return the float root.
# ---------------------------


def bisection_result(
    f: ScalarFn,
    a: float,
    b: float,
    tol: float,
    *,
    max_iter: int = 10_000,
    policy: DegeneratePolicy | str = DegeneratePolicy.PROPAGATE,
) -> RootResult:
    """Bisection on the bracket ``[a, b]``.

    Halves the bracket while ``b - a > tol``; stops early when ``f(c) == 0``
    exactly or the half-width drops below ``tol``.

    ``f(a) * f(b) < 0`` is a precondition and is not checked: an invalid
    bracket yields a meaningless (but finite) answer, not an error.
    ``max_iter`` only guards against a ``tol`` below the floating-point
    resolution of the bracket, where the halving can no longer shrink it.
    """
    a = f64(a)
    b = f64(b)
    fa = f64(f(a))

    with ieee():
        c = (a + b) / 2.0
        fc: np.float64 | None = None
        it = 0
        while b - a > tol:
            if it >= max_iter:
                raise NonConvergenceError(
                    f"Bisection did not converge within max_iter={max_iter}."
                )
            it += 1
            c = (a + b) / 2.0
            fc = f64(f(c))
            if fc == 0.0 or (b - a) / 2.0 < tol:
                break
            if fa * fc < 0.0:
                b = c
            else:
                a, fa = c, fc

    if fc is None:
        fc = f64(f(c))
    return RootResult(
        root=resolve(c, what="bisection", policy=policy),
        converged=True,
        iterations=it,
        method="bisection",
        f_at_root=float(fc),
        bracket=(float(a), float(b)),
    )


def secant_result(
    f: ScalarFn,
    a: float,
    b: float,
    tol: float,
    *,
    max_iter: int = DEFAULT_CONFIG.secant_max_iter,
    policy: DegeneratePolicy | str = DegeneratePolicy.PROPAGATE,
) -> RootResult:
    """Secant iteration from the two starting points ``a`` and ``b``.

    Iterates ``c = b - f(b) (b - a) / (f(b) - f(a))`` while ``|b - a| > tol``.
    No bracket is kept, so the iteration can diverge.

    Raises
    ------
    NonConvergenceError
        If ``|b - a| > tol`` still holds after ``max_iter`` iterations.

    Notes
    -----
    ``f(b) == f(a)`` divides by zero. The iterate becomes NaN/Inf, which ends
    the loop; the result has ``converged=False`` and the root is handled
    according to ``policy``.
    """
    if max_iter <= 0:
        raise ValueError("max_iter must be > 0")

    a = f64(a)
    b = f64(b)
    fa = f64(f(a))
    fb = f64(f(b))
    c = b
    it = 0

    with ieee():
        while abs(b - a) > tol:
            if it >= max_iter:
                raise NonConvergenceError(
                    f"Secant did not converge within max_iter={max_iter} "
                    f"(last iterates {float(a)!r}, {float(b)!r})."
                )
            it += 1
            c = b - fb * (b - a) / (fb - fa)
            a, fa = b, fb
            b = c
            fb = f64(f(b)) if np.isfinite(b) else f64(np.nan)

    converged = bool(np.isfinite(c))
    return RootResult(
        root=resolve(c, what="secant", policy=policy),
        converged=converged,
        iterations=it,
        method="secant",
        f_at_root=float(fb),
        message="" if converged else "secant produced a non-finite iterate",
    )


def newton_result(
    f: ScalarFn,
    df: ScalarFn,
    x0: float,
    tol: float,
    max_iter: int,
    *,
    policy: DegeneratePolicy | str = DegeneratePolicy.PROPAGATE,
) -> RootResult:
    """Newton's method ``x <- x - f(x) / df(x)`` from ``x0``.

    Stops when ``|df(x)| < tol`` (returns the current ``x``: a near-stationary
    point is treated as converged instead of taking a huge step) or when the
    step ``|x_new - x| < tol`` (returns ``x_new``). When ``max_iter`` runs out
    the last iterate is returned with ``converged=False``; nothing is raised.
    """
    if max_iter < 0:
        raise ValueError("max_iter must be >= 0")

    x = f64(x0)
    with ieee():
        for it in range(1, max_iter + 1):
            fx = f64(f(x))
            dfx = f64(df(x))

            if abs(dfx) < tol:
                return RootResult(
                    root=resolve(x, what="newton_method", policy=policy),
                    converged=True,
                    iterations=it - 1,
                    method="newton",
                    f_at_root=float(fx),
                    message="derivative below tol",
                )

            x_new = x - fx / dfx
            if abs(x_new - x) < tol:
                return RootResult(
                    root=resolve(x_new, what="newton_method", policy=policy),
                    converged=True,
                    iterations=it,
                    method="newton",
                    f_at_root=float(f(x_new)),
                )
            x = x_new

    return RootResult(
        root=resolve(x, what="newton_method", policy=policy),
        converged=False,
        iterations=max_iter,
        method="newton",
        f_at_root=float(f(x)),
        message=f"max_iter={max_iter} exhausted",
    )


# ---------------------------
# Convenience wrappers: float return
# ---------------------------


def bisection(
    f: ScalarFn,
    a: float,
    b: float,
    tol: float,
    *,
    policy: DegeneratePolicy | str = DegeneratePolicy.PROPAGATE,
) -> float:
    return bisection_result(f, a, b, tol, policy=policy).root


def secant(
    f: ScalarFn,
    a: float,
    b: float,
    tol: float,
    *,
    max_iter: int = DEFAULT_CONFIG.secant_max_iter,
    policy: DegeneratePolicy | str = DegeneratePolicy.PROPAGATE,
) -> float:
    return secant_result(f, a, b, tol, max_iter=max_iter, policy=policy).root


def newton_method(
    f: ScalarFn,
    df: ScalarFn,
    x0: float,
    tol: float,
    max_iter: int,
    *,
    policy: DegeneratePolicy | str = DegeneratePolicy.PROPAGATE,
) -> float:
    return newton_result(f, df, x0, tol, max_iter, policy=policy).root


# ---------------------------
# Unified dispatch
# ---------------------------


class RootMethod(str, Enum):
    BISECTION = "bisection"
    SECANT = "secant"
    NEWTON = "newton"


def _bisection_unified(
    f: ScalarFn,
    a: float,
    b: float,
    *,
    df: ScalarFn | None,
    x0: float | None,
    tol: float,
    config: NumericsConfig,
) -> RootResult:
    return bisection_result(f, a, b, tol, policy=config.degenerate)


def _secant_unified(
    f: ScalarFn,
    a: float,
    b: float,
    *,
    df: ScalarFn | None,
    x0: float | None,
    tol: float,
    config: NumericsConfig,
) -> RootResult:
    return secant_result(
        f, a, b, tol, max_iter=config.secant_max_iter, policy=config.degenerate
    )


def _newton_unified(
    f: ScalarFn,
    a: float,
    b: float,
    *,
    df: ScalarFn | None,
    x0: float | None,
    tol: float,
    config: NumericsConfig,
) -> RootResult:
    # Start from x0 if provided, else midpoint(a, b)
    start = x0 if x0 is not None else 0.5 * (a + b)

    def fd_derivative(x: float) -> float:
        return central_diff(f, x, 1e-5 * max(1.0, abs(x)))

    return newton_result(
        f,
        df if df is not None else fd_derivative,
        start,
        tol,
        config.max_iter,
        policy=config.degenerate,
    )


_ROOT_METHODS: dict[RootMethod, Callable[..., RootResult]] = {
    RootMethod.BISECTION: _bisection_unified,
    RootMethod.SECANT: _secant_unified,
    RootMethod.NEWTON: _newton_unified,
}


def get_root_method(method: RootMethod | str) -> Callable[..., RootResult]:
    """Return the unified-signature solver for ``method``.

    All returned callables accept
    ``(f, a, b, *, df, x0, tol, config)`` and return :class:`RootResult`.
    """
    return _ROOT_METHODS[RootMethod(method)]


def find_root(
    f: ScalarFn,
    a: float,
    b: float,
    *,
    method: RootMethod | str = RootMethod.BISECTION,
    df: ScalarFn | None = None,
    x0: float | None = None,
    tol: float | None = None,
    config: NumericsConfig = DEFAULT_CONFIG,
) -> RootResult:
    """Solve ``f(x) = 0`` with any root method through one signature.

    - Bisection treats ``(a, b)`` as the bracket.
    - Secant uses ``a`` and ``b`` as its two starting iterates.
    - Newton starts from ``x0`` (default: midpoint of ``a`` and ``b``) and, if
      ``df`` is not given, differentiates ``f`` with a central difference.

    ``tol`` defaults to ``config.tol``; iteration caps and the degenerate
    policy come from ``config``.
    """
    solver = get_root_method(method)
    return solver(
        f,
        a,
        b,
        df=df,
        x0=x0,
        tol=config.tol if tol is None else tol,
        config=config,
    )
