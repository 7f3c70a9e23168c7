from __future__ import annotations

import unittest

import numpy as np

from xyspline.errors import DegenerateSplineError
from xyspline.geometry import Point
from xyspline.spline import build_natural_spline, evaluate_spline


def _knots(*pairs: tuple[float, float]) -> list[Point]:
    return [Point(float(x), float(y)) for x, y in pairs]


class NaturalSplineTests(unittest.TestCase):
    def test_textbook_coefficients(self) -> None:
        coeffs = build_natural_spline(_knots((0, 0), (1, 1), (2, 0), (3, 1)))
        np.testing.assert_allclose(coeffs.a, [0.0, -4.0, 4.0, 0.0], rtol=0.0, atol=1e-12)
        self.assertEqual(coeffs.h.tolist(), [0.0, 1.0, 1.0, 1.0])
        self.assertEqual(coeffs.knot_count, 4)

    def test_natural_boundary_is_exact_zero(self) -> None:
        coeffs = build_natural_spline(_knots((0, 3), (0.7, -1), (2.5, 4), (3.1, 0.5), (5, 2)))
        self.assertEqual(coeffs.a[0], 0.0)
        self.assertEqual(coeffs.a[-1], 0.0)

    def test_vertex_count_is_intervals_times_precision(self) -> None:
        coeffs = build_natural_spline(_knots((0, 0), (1, 2), (2, 1), (3, 3), (4, 0)))
        for precision in (1, 2, 5, 17):
            xs, ys = evaluate_spline(coeffs, precision)
            self.assertEqual(xs.size, 4 * precision)
            self.assertEqual(ys.size, 4 * precision)

    def test_curve_passes_through_every_knot(self) -> None:
        knots = _knots((0, 0), (0.5, 2), (2, 1), (3.5, 3), (4, -1))
        coeffs = build_natural_spline(knots)
        precision = 6
        xs, ys = evaluate_spline(coeffs, precision)
        for i in range(1, len(knots)):
            idx = i * precision - 1
            self.assertAlmostEqual(xs[idx], knots[i].x, places=12)
            self.assertAlmostEqual(ys[idx], knots[i].y, places=12)

    def test_interior_sample_matches_closed_form(self) -> None:
        coeffs = build_natural_spline(_knots((0, 0), (1, 1), (2, 0), (3, 1)))
        xs, ys = evaluate_spline(coeffs, 2)
        self.assertAlmostEqual(xs[0], 0.5, places=12)
        self.assertAlmostEqual(ys[0], 0.75, places=12)
        # Middle interval is symmetric about its centre.
        self.assertAlmostEqual(ys[2], 0.5, places=12)

    def test_collinear_knots_give_straight_line(self) -> None:
        coeffs = build_natural_spline(_knots((0, 0), (1, 2), (2.5, 5), (3, 6)))
        np.testing.assert_allclose(coeffs.a, 0.0, atol=1e-12)
        xs, ys = evaluate_spline(coeffs, 8)
        np.testing.assert_allclose(ys, 2.0 * xs, atol=1e-12)

    def test_decreasing_x_is_accepted(self) -> None:
        knots = _knots((3, 1), (2, 0), (1, 1), (0, 0))
        xs, ys = evaluate_spline(build_natural_spline(knots), 3)
        self.assertTrue(np.all(np.diff(xs) < 0))
        self.assertAlmostEqual(ys[-1], 0.0, places=12)
        self.assertAlmostEqual(ys[2], 0.0, places=12)

    def test_requires_three_knots(self) -> None:
        with self.assertRaises(ValueError):
            build_natural_spline(_knots((0, 0), (1, 1)))

    def test_shared_x_is_degenerate(self) -> None:
        with self.assertRaises(DegenerateSplineError):
            build_natural_spline(_knots((0, 0), (1, 1), (1, 2), (2, 0)))

    def test_non_finite_knot_is_degenerate(self) -> None:
        with self.assertRaises(DegenerateSplineError):
            build_natural_spline(_knots((0, 0), (1, float("inf")), (2, 0)))

    def test_overflowing_interval_width_is_degenerate(self) -> None:
        with self.assertRaises(DegenerateSplineError):
            build_natural_spline(_knots((-1e308, 0), (1e308, 1), (1.5e308, 0)))

    def test_subnormal_interval_width_is_degenerate(self) -> None:
        with self.assertRaises(DegenerateSplineError):
            build_natural_spline(_knots((0, 0), (5e-324, 1), (1, 0)))

    def test_overflowing_slopes_are_degenerate(self) -> None:
        with self.assertRaises(DegenerateSplineError):
            build_natural_spline(_knots((0, -1e308), (1, 1e308), (2, -1e308)))

    def test_precision_must_be_positive(self) -> None:
        coeffs = build_natural_spline(_knots((0, 0), (1, 1), (2, 0)))
        with self.assertRaises(ValueError):
            evaluate_spline(coeffs, 0)


if __name__ == "__main__":
    unittest.main()
