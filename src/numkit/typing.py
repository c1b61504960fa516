from __future__ import annotations

from collections.abc import Callable

# typing only
type ScalarFn = Callable[[float], float]
type OdeRhs = Callable[[float, float], float]
