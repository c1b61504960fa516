class NumericsError(Exception):
    """Base class for errors raised by numkit routines."""


class DegenerateInputError(NumericsError, ArithmeticError):
    """Raised when a computation produces NaN/Inf and the policy is ``RAISE``.

    Typical causes are coincident abscissae in an interpolation set, a vertical
    least-squares fit (all ``x`` equal) or a stagnating secant iteration
    (``f(b) == f(a)``).

    Notes
    -----
    The default :class:`~numkit.config.DegeneratePolicy` is ``PROPAGATE``, in
    which case the non-finite value is simply returned. This error only
    appears when the caller opts in with ``policy="raise"``.
    """


class RangeError(NumericsError, ValueError):
    """Raised when a spline or Akima query lies outside the sample span."""


class RootFindingError(NumericsError):
    """Base class for root-finding failures."""


class NonConvergenceError(RootFindingError):
    """Raised when an iteration exceeds its iteration cap without converging."""


class DegenerateResultWarning(RuntimeWarning):
    """Emitted when a computation produces NaN/Inf and the policy is ``WARN``."""
