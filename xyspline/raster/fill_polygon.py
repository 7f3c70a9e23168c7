from __future__ import annotations

import math
from typing import Sequence

import numpy as np

from xyspline.paint import GradientPaint, Paint
from xyspline.raster.canvas import blend_span


def fill_polygons(dst: np.ndarray, rings: Sequence[np.ndarray], paint: Paint) -> int:
    """Scanline-fill closed rings with the even-odd rule, sampling at pixel centres.

    Returns the number of pixels painted.
    """
    edges = _collect_edges(rings)
    if edges.shape[0] == 0:
        return 0
    height, width = dst.shape[0], dst.shape[1]
    ymin = max(0, int(math.floor(float(np.min(edges[:, [1, 3]])))))
    ymax = min(height - 1, int(math.ceil(float(np.max(edges[:, [1, 3]])))))

    painted = 0
    for row in range(ymin, ymax + 1):
        yc = row + 0.5
        y0 = edges[:, 1]
        y1 = edges[:, 3]
        crossing = (np.minimum(y0, y1) <= yc) & (np.maximum(y0, y1) > yc)
        if not np.any(crossing):
            continue
        e = edges[crossing]
        xs = e[:, 0] + (yc - e[:, 1]) * (e[:, 2] - e[:, 0]) / (e[:, 3] - e[:, 1])
        xs.sort()
        for left, right in zip(xs[0::2].tolist(), xs[1::2].tolist(), strict=False):
            x0 = max(0, int(math.ceil(left - 0.5)))
            x1 = min(width - 1, int(math.ceil(right - 0.5)) - 1)
            if x1 < x0:
                continue
            blend_span(dst, row, x0, x1, _span_colors(paint, x0, x1, yc))
            painted += x1 - x0 + 1
    return painted


def _collect_edges(rings: Sequence[np.ndarray]) -> np.ndarray:
    chunks: list[np.ndarray] = []
    for ring in rings:
        if ring.shape[0] < 3:
            continue
        finite = np.all(np.isfinite(ring), axis=1)
        if not np.all(finite):
            continue
        start = ring
        end = np.roll(ring, -1, axis=0)
        seg = np.hstack([start, end])
        chunks.append(seg[seg[:, 1] != seg[:, 3]])
    if not chunks:
        return np.zeros((0, 4), dtype=np.float64)
    return np.vstack(chunks)


def _span_colors(paint: Paint, x0: int, x1: int, yc: float) -> np.ndarray:
    if isinstance(paint, GradientPaint):
        xs = np.arange(x0, x1 + 1, dtype=np.float64) + 0.5
        ys = np.full(xs.shape, yc, dtype=np.float64)
        rgba = paint.colors_at(xs, ys)
        return rgba
    return np.asarray(paint, dtype=np.uint8)
