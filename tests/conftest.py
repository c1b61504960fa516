"""Pytest helpers for the numkit library."""

from __future__ import annotations

import numpy as np
import pytest

from numkit.types import SampleSet


@pytest.fixture
def line_points() -> SampleSet:
    """Collinear set x=[1,2,3], y=[2,4,6] (y = 2x) used for the pinned values."""
    return SampleSet.from_arrays([1.0, 2.0, 3.0], [2.0, 4.0, 6.0])


@pytest.fixture
def make_points():
    """Factory fixture: strictly increasing, mildly irregular sample set from a function."""

    def _make(fn, *, n: int, seed: int = 0, x0: float = 0.0) -> SampleSet:
        rng = np.random.default_rng(seed)
        steps = rng.uniform(0.2, 0.6, size=n - 1)
        x = np.concatenate(([x0], x0 + np.cumsum(steps)))
        return SampleSet.from_arrays(x, fn(x))

    return _make


@pytest.fixture
def rng():
    """Seeded RNG factory."""

    def _rng(seed: int) -> np.random.Generator:
        return np.random.default_rng(seed)

    return _rng


@pytest.fixture
def counting():
    """Wrap a scalar function so that calls are counted in ``wrapped.calls``."""

    def _wrap(fn):
        def wrapped(*args):
            wrapped.calls += 1
            return fn(*args)

        wrapped.calls = 0
        return wrapped

    return _wrap
