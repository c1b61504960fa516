from __future__ import annotations

from dataclasses import dataclass

import numpy as np
from numpy.typing import ArrayLike, NDArray


def _readonly_copy(a: ArrayLike, name: str) -> NDArray[np.float64]:
    arr = np.array(a, dtype=np.float64, copy=True)
    if arr.ndim != 1:
        raise ValueError(f"{name} must be 1D")
    arr.setflags(write=False)
    return arr


@dataclass(frozen=True, slots=True)
class SampleSet:
    """Ordered pair of coordinate arrays defining known ``(x, y)`` samples.

    Parameters
    ----------
    x : array_like of float, shape (n,)
        Abscissae. Must be strictly increasing; routines never sort.
    y : array_like of float, shape (n,)
        Ordinates, arbitrary.

    Notes
    -----
    - Both arrays are copied to ``float64`` and marked read-only, so no routine
      can mutate them and later changes to the caller's buffers are not seen.
    - Direct construction checks shape and ``n >= 2`` only. Ordering is the
      caller's responsibility, which keeps deliberately degenerate sets
      (coincident abscissae) constructible. Use :meth:`from_arrays` to have
      strict monotonicity checked as well.
    """

    x: NDArray[np.float64]
    y: NDArray[np.float64]

    def __post_init__(self) -> None:
        x = _readonly_copy(self.x, "x")
        y = _readonly_copy(self.y, "y")
        if x.shape != y.shape:
            raise ValueError(f"x and y must have same shape, got {x.shape} and {y.shape}")
        if x.size < 2:
            raise ValueError("Need at least 2 points")
        object.__setattr__(self, "x", x)
        object.__setattr__(self, "y", y)

    @classmethod
    def from_arrays(cls, x: ArrayLike, y: ArrayLike, *, check: bool = True) -> SampleSet:
        """Build a sample set, validating that ``x`` is strictly increasing."""
        points = cls(x=x, y=y)  # type: ignore[arg-type]
        if check and np.any(np.diff(points.x) <= 0.0):
            raise ValueError("x must be strictly increasing")
        return points

    @property
    def n(self) -> int:
        return int(self.x.size)

    @property
    def span(self) -> tuple[float, float]:
        return float(self.x[0]), float(self.x[-1])

    def __len__(self) -> int:
        return self.n


@dataclass(frozen=True, slots=True)
class LinearFit:
    """Result of an ordinary least-squares line fit ``y = slope * x + intercept``.

    Parameters
    ----------
    slope : float
        Fitted slope. NaN/Inf for vertical data (all ``x`` equal).
    intercept : float
        Fitted intercept.
    """

    slope: float
    intercept: float

    def predict(self, x: ArrayLike) -> float | NDArray[np.float64]:
        xq = np.asarray(x, dtype=np.float64)
        out = self.slope * xq + self.intercept
        if xq.ndim == 0:
            return float(out)
        return out
