from __future__ import annotations


def main() -> None:
    # [START README_QUICKSTART]
    import math

    from numkit import (
        SampleSet,
        akima,
        bisection,
        central_diff,
        lagrange,
        least_squares,
        newton_method,
        rk4,
        spline_cubic,
    )

    points = SampleSet.from_arrays([1.0, 2.0, 3.0], [2.0, 4.0, 6.0])
    print("Lagrange p(2.5):", lagrange(points, 2.5))
    print("Local cubic s(2.5):", spline_cubic(points, 2.5))
    print("Akima at 2.5:", akima(points.x, points.y, 2.5))

    fit = least_squares(points.x, points.y)
    print("Least squares:", fit)

    def f(x: float) -> float:
        return x * x - 2.0

    print("Bisection:", bisection(f, 0.0, 2.0, 1e-10))
    print("Newton:", newton_method(f, lambda x: 2.0 * x, 1.0, 1e-12, 50))

    print("d/dx sin at 1:", central_diff(math.sin, 1.0, 1e-5), "vs", math.cos(1.0))
    print("RK4 y'=y to t~1:", rk4(lambda t, y: y, 0.0, 1.0, 0.125, 0.999999))
    # [END README_QUICKSTART]


if __name__ == "__main__":
    main()
