from __future__ import annotations

from dataclasses import dataclass, field

from xyspline.fill import FillType, PlotOrientation, project_to_baseline
from xyspline.geometry import Path2D, Point
from xyspline.spline import MIN_SPLINE_KNOTS, build_natural_spline, evaluate_spline


@dataclass
class SplineSeriesState:
    """Per-render-pass accumulation state, reused (reset) from one series to the next.

    Not safe to share between concurrently rendered charts: each render pass
    owns its own instance.
    """

    points: list[Point] = field(default_factory=list)
    series_path: Path2D = field(default_factory=Path2D)
    fill_area: Path2D = field(default_factory=Path2D)
    _seen: set[Point] = field(default_factory=set, repr=False)

    def add_point(self, point: Point) -> bool:
        # A point equal to any earlier point of the series is dropped, not only
        # the immediate predecessor.
        if not point.is_finite():
            return False
        if point in self._seen:
            return False
        self._seen.add(point)
        self.points.append(point)
        return True

    def start_series(self) -> None:
        self.reset()

    def clear_points(self) -> None:
        self.points.clear()
        self._seen.clear()

    def reset(self) -> None:
        self.clear_points()
        self.series_path.reset()
        self.fill_area.reset()

    @property
    def point_count(self) -> int:
        return len(self.points)


def assemble_series_paths(
    state: SplineSeriesState,
    *,
    precision: int,
    fill_type: FillType,
    origin: Point | None,
    orientation: PlotOrientation,
) -> int:
    """Append the outline (and fill region, when filling) for the accumulated knots.

    Returns the number of vertices appended to the outline after its first
    knot; zero when fewer than two knots were accumulated.
    """
    points = state.points
    if len(points) < 2:
        return 0
    filling = fill_type is not FillType.NONE
    if filling and origin is None:
        raise ValueError("fill origin is required when fill_type is not NONE")

    curve = None
    if len(points) >= MIN_SPLINE_KNOTS:
        # Paths stay untouched when the knot sequence is degenerate.
        curve = evaluate_spline(build_natural_spline(points), precision)

    first = points[0]
    last = points[-1]
    state.series_path.move_to(first.x, first.y)
    if filling:
        base = project_to_baseline(first, origin, orientation)
        state.fill_area.move_to(base.x, base.y)
        state.fill_area.line_to(first.x, first.y)

    if curve is None:
        state.series_path.line_to(last.x, last.y)
        if filling:
            state.fill_area.line_to(last.x, last.y)
        emitted = 1
    else:
        xs, ys = curve
        for t, y in zip(xs.tolist(), ys.tolist(), strict=True):
            state.series_path.line_to(t, y)
            if filling:
                state.fill_area.line_to(t, y)
        emitted = int(xs.size)

    if filling:
        base = project_to_baseline(last, origin, orientation)
        state.fill_area.line_to(base.x, base.y)
        state.fill_area.close_path()
    return emitted
