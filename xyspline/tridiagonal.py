from __future__ import annotations

import numpy as np

from xyspline.errors import DegenerateSplineError


def solve_tridiagonal(sub: np.ndarray, diag: np.ndarray, sup: np.ndarray, rhs: np.ndarray) -> np.ndarray:
    """Solve ``A x = rhs`` for a tridiagonal ``A`` by elimination without pivoting.

    ``A[i, i-1] = sub[i]``, ``A[i, i] = diag[i]`` and ``A[i, i+1] = sup[i]``;
    ``sub[0]`` and ``sup[n-1]`` are ignored. ``sub`` and ``diag`` are used as
    scratch space and ``rhs`` is overwritten with the solution, which is also
    returned.
    """
    n = rhs.shape[0]
    if sub.shape[0] < n or diag.shape[0] < n or sup.shape[0] < n:
        raise ValueError("band lengths must be >= len(rhs)")
    if n == 0:
        return rhs

    for i in range(1, n):
        _check_pivot(diag[i - 1], i - 1)
        sub[i] /= diag[i - 1]
        diag[i] -= sub[i] * sup[i - 1]
        rhs[i] -= sub[i] * rhs[i - 1]

    _check_pivot(diag[n - 1], n - 1)
    rhs[n - 1] /= diag[n - 1]
    for i in range(n - 2, -1, -1):
        rhs[i] = (rhs[i] - sup[i] * rhs[i + 1]) / diag[i]
    return rhs


def _check_pivot(value: float, index: int) -> None:
    if value == 0.0 or not np.isfinite(value):
        raise DegenerateSplineError(f"tridiagonal pivot {index} is {value!r}")
