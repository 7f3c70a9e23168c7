"""Natural cubic spline through an ordered knot sequence.

The second-derivative coefficients ``a`` are found from the tridiagonal
system over the interior knots; the natural boundary condition pins
``a[0]`` and ``a[-1]`` to zero. The curve is then sampled as a polyline,
``precision`` vertices per interval.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import numpy as np

from xyspline.errors import DegenerateSplineError
from xyspline.geometry import Point
from xyspline.tridiagonal import solve_tridiagonal


MIN_SPLINE_KNOTS = 3


@dataclass(frozen=True)
class SplineCoefficients:
    x: np.ndarray
    d: np.ndarray
    h: np.ndarray
    a: np.ndarray

    @property
    def knot_count(self) -> int:
        return int(self.x.size)


def build_natural_spline(points: Sequence[Point]) -> SplineCoefficients:
    n = len(points)
    if n < MIN_SPLINE_KNOTS:
        raise ValueError(f"natural spline requires >= {MIN_SPLINE_KNOTS} knots, got {n}")

    x = np.fromiter((p.x for p in points), dtype=np.float64, count=n)
    d = np.fromiter((p.y for p in points), dtype=np.float64, count=n)
    if not (np.all(np.isfinite(x)) and np.all(np.isfinite(d))):
        raise DegenerateSplineError("knot coordinates must be finite")

    h = np.zeros(n, dtype=np.float64)
    with np.errstate(over="ignore", invalid="ignore"):
        h[1:] = np.diff(x)
    zero = np.flatnonzero(h[1:] == 0.0)
    if zero.size:
        i = int(zero[0]) + 1
        raise DegenerateSplineError(f"knots {i - 1} and {i} share x={x[i]!r}")
    wide = np.flatnonzero(~np.isfinite(h[1:]))
    if wide.size:
        i = int(wide[0]) + 1
        raise DegenerateSplineError(f"interval {i - 1}..{i} width overflows")

    # Interior unknowns a[1..n-2] live at band index i-1.
    diag = (h[1 : n - 1] + h[2:n]) / 3.0
    sup = h[2:n] / 6.0
    sub = h[1 : n - 1] / 6.0
    with np.errstate(over="ignore", invalid="ignore", divide="ignore"):
        slopes = np.diff(d) / h[1:]
        rhs = slopes[1:] - slopes[:-1]
    if not np.all(np.isfinite(rhs)):
        raise DegenerateSplineError("knot slopes overflow")

    a = np.zeros(n, dtype=np.float64)
    with np.errstate(over="ignore", invalid="ignore"):
        a[1 : n - 1] = solve_tridiagonal(sub, diag, sup, rhs)
    if not np.all(np.isfinite(a)):
        raise DegenerateSplineError("second-derivative coefficients overflow")
    a[0] = 0.0
    a[n - 1] = 0.0
    return SplineCoefficients(x=x, d=d, h=h, a=a)


def evaluate_spline(coeffs: SplineCoefficients, precision: int) -> tuple[np.ndarray, np.ndarray]:
    """Sample every interval at ``j/precision`` for ``j = 1..precision``.

    The first knot itself is not emitted; the last vertex of each interval
    lands on the interval's right knot.
    """
    if precision <= 0:
        raise ValueError("precision must be > 0")
    x, d, h, a = coeffs.x, coeffs.d, coeffs.h, coeffs.a
    n = x.size
    if n < 2:
        return np.zeros(0, dtype=np.float64), np.zeros(0, dtype=np.float64)

    frac = np.arange(1, precision + 1, dtype=np.float64) / float(precision)
    hi = h[1:, None]
    t1 = hi * frac[None, :]
    t2 = hi - t1
    a0 = a[:-1, None]
    a1 = a[1:, None]
    d0 = d[:-1, None]
    d1 = d[1:, None]
    with np.errstate(over="ignore", invalid="ignore"):
        ys = ((-a0 / 6.0 * (t2 + hi) * t1 + d0) * t2 + (-a1 / 6.0 * (t1 + hi) * t2 + d1) * t1) / hi
        ts = x[:-1, None] + t1
    if not (np.all(np.isfinite(ys)) and np.all(np.isfinite(ts))):
        raise DegenerateSplineError("curve vertices overflow")
    return ts.reshape(-1), ys.reshape(-1)
