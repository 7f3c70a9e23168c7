from __future__ import annotations

from pathlib import Path

import numpy as np

from xyspline import (
    FillType,
    GradientPaint,
    LinearAxis,
    Point,
    RasterSurface,
    Rect,
    SplineRenderer,
    XYDataset,
    XYPlotView,
)


def _render_frame(*, fill_type: FillType) -> RasterSurface:
    x = np.arange(12, dtype=np.float64)
    y = np.asarray([1.0, 3.5, 2.0, 4.5, 3.0, 6.0, 4.0, 5.5, 2.5, 3.5, 1.5, 2.0], dtype=np.float64)
    dataset = XYDataset().add_series(y, x=x, label="load")
    dataset.add_series(y * 0.5 + 0.5, x=x, label="baseline")

    plot = XYPlotView(
        domain_axis=LinearAxis(0.0, 11.0),
        range_axis=LinearAxis(0.0, 7.0),
        data_area=Rect(40.0, 20.0, 560.0, 320.0),
    )
    renderer = SplineRenderer(precision=12, fill_type=fill_type, line_width=3)
    renderer.set_series_fill_paint(
        0,
        GradientPaint(Point(0.0, 0.0), (255, 165, 0, 200), Point(0.0, 1.0), (255, 165, 0, 20)),
    )
    surface = RasterSurface(640, 360)
    renderer.render(dataset, plot, surface)
    return surface


def main() -> None:
    out_dir = Path(__file__).resolve().parent / "out"
    out_dir.mkdir(parents=True, exist_ok=True)
    for fill_type in (FillType.NONE, FillType.TO_ZERO, FillType.TO_UPPER_BOUND):
        path = out_dir / f"spline_{fill_type.value}.png"
        _render_frame(fill_type=fill_type).save_png(path)
        print(f"wrote {path}")


if __name__ == "__main__":
    main()
