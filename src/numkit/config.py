from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class DegeneratePolicy(str, Enum):
    PROPAGATE = "propagate"  # return NaN/Inf as IEEE 754 produces them
    WARN = "warn"  # return NaN/Inf and emit DegenerateResultWarning
    RAISE = "raise"  # raise DegenerateInputError


@dataclass(frozen=True, slots=True)
class NumericsConfig:
    """Default termination controls and degenerate-result handling.

    Parameters
    ----------
    tol : float, default 1e-8
        Tolerance used by iterative routines when the caller does not pass one.
    max_iter : int, default 100
        Iteration budget for Newton's method.
    secant_max_iter : int, default 1000
        Iteration cap for the secant method. Exceeding it raises
        :class:`~numkit.exceptions.NonConvergenceError`.
    degenerate : DegeneratePolicy, default ``PROPAGATE``
        What to do when a routine produces NaN/Inf.
    """

    tol: float = 1e-8
    max_iter: int = 100
    secant_max_iter: int = 1_000
    degenerate: DegeneratePolicy = DegeneratePolicy.PROPAGATE

    def __post_init__(self) -> None:
        if not self.tol > 0:
            raise ValueError("tol must be > 0")
        if self.max_iter <= 0:
            raise ValueError("max_iter must be > 0")
        if self.secant_max_iter <= 0:
            raise ValueError("secant_max_iter must be > 0")
        # accept plain strings ("raise", "warn", ...)
        object.__setattr__(self, "degenerate", DegeneratePolicy(self.degenerate))


DEFAULT_CONFIG: NumericsConfig = NumericsConfig()
