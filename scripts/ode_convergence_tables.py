"""Print Euler vs RK4 convergence tables for a few test problems with known solutions.

Manual validation harness for the fixed-step integrators.

Run from the repository root:

    PYTHONPATH=src python scripts/ode_convergence_tables.py --case growth
    PYTHONPATH=src python scripts/ode_convergence_tables.py --case all --steps 0.25 0.125 0.0625

Step sizes that are exact binary fractions keep every run landing on the same
end time, so the observed orders are clean.
"""

from __future__ import annotations

import argparse
import math
from collections.abc import Callable, Sequence
from dataclasses import dataclass

import pandas as pd

from numkit.diagnostics import ode_convergence_table


@dataclass(frozen=True, slots=True)
class Problem:
    title: str
    f: Callable[[float, float], float]
    exact: Callable[[float], float]
    t_i: float
    y_i: float
    t: float


PROBLEMS: dict[str, Problem] = {
    "growth": Problem(
        title="y' = y, y(0) = 1",
        f=lambda t, y: y,
        exact=math.exp,
        t_i=0.0,
        y_i=1.0,
        t=0.999999,
    ),
    "logistic": Problem(
        title="y' = y (1 - y), y(0) = 0.1",
        f=lambda t, y: y * (1.0 - y),
        exact=lambda t: 1.0 / (1.0 + 9.0 * math.exp(-t)),
        t_i=0.0,
        y_i=0.1,
        t=1.999999,
    ),
    "oscillating": Problem(
        title="y' = cos(t), y(0) = 0",
        f=lambda t, y: math.cos(t),
        exact=math.sin,
        t_i=0.0,
        y_i=0.0,
        t=0.999999,
    ),
}


def _print_table(title: str, df: pd.DataFrame) -> None:
    print("\n" + title)
    cols = ["h", "n_steps", "t_end", "euler_abs_error", "euler_order", "rk4_abs_error", "rk4_order"]
    with pd.option_context("display.float_format", "{:.3e}".format, "display.width", 120):
        print(df[cols].to_string(index=False))


def run(name: str, steps: Sequence[float]) -> None:
    p = PROBLEMS[name]
    df = ode_convergence_table(p.f, p.exact, p.t_i, p.y_i, p.t, steps=steps)
    _print_table(p.title, df)


def main() -> None:
    ap = argparse.ArgumentParser()
    ap.add_argument("--case", choices=[*PROBLEMS, "all"], default="all")
    ap.add_argument(
        "--steps", type=float, nargs="+", default=[0.25, 0.125, 0.0625, 0.03125]
    )
    args = ap.parse_args()

    names = list(PROBLEMS) if args.case == "all" else [args.case]
    for name in names:
        run(name, args.steps)


if __name__ == "__main__":
    main()
