from __future__ import annotations


class PlotDataError(ValueError):
    """Raised when raw series input cannot be coerced into numeric x/y arrays."""


class SplineConfigError(ValueError):
    """Raised when a renderer is constructed or reconfigured with invalid settings."""


class DegenerateSplineError(ArithmeticError):
    """Raised when a knot sequence cannot produce a finite spline.

    Typical causes are two knots sharing the same x-coordinate (zero-width
    interval) or a vanishing pivot during the tridiagonal elimination.
    """
