from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Protocol, Union

import numpy as np

from xyspline.geometry import Point, Rect


RGBA = tuple[int, int, int, int]


@dataclass(frozen=True)
class GradientPaint:
    """Linear two-colour gradient between two anchor points in screen space."""

    start: Point
    start_color: RGBA
    end: Point
    end_color: RGBA
    cyclic: bool = False

    def colors_at(self, xs: np.ndarray, ys: np.ndarray) -> np.ndarray:
        dx = self.end.x - self.start.x
        dy = self.end.y - self.start.y
        length_sq = dx * dx + dy * dy
        if length_sq <= 0.0:
            t = np.zeros(np.broadcast(xs, ys).shape, dtype=np.float64)
        else:
            t = ((xs - self.start.x) * dx + (ys - self.start.y) * dy) / length_sq
        if self.cyclic:
            t = np.abs(t) % 2.0
            t = np.where(t > 1.0, 2.0 - t, t)
        else:
            t = np.clip(t, 0.0, 1.0)
        c0 = np.asarray(self.start_color, dtype=np.float64)
        c1 = np.asarray(self.end_color, dtype=np.float64)
        out = c0 + (c1 - c0) * t[..., None]
        return np.clip(np.rint(out), 0, 255).astype(np.uint8)


Paint = Union[RGBA, GradientPaint]


class GradientPaintTransformer(Protocol):
    def transform(self, paint: GradientPaint, bounds: Rect) -> GradientPaint: ...


class GradientTransformType(Enum):
    VERTICAL = "vertical"
    HORIZONTAL = "horizontal"
    CENTER_VERTICAL = "center_vertical"
    CENTER_HORIZONTAL = "center_horizontal"


@dataclass(frozen=True)
class StandardGradientPaintTransformer:
    """Stretch a gradient's anchors across the bounds of the region being filled."""

    kind: GradientTransformType = GradientTransformType.VERTICAL

    def transform(self, paint: GradientPaint, bounds: Rect) -> GradientPaint:
        c0, c1 = paint.start_color, paint.end_color
        if self.kind is GradientTransformType.VERTICAL:
            return GradientPaint(Point(bounds.center_x, bounds.min_y), c0, Point(bounds.center_x, bounds.max_y), c1)
        if self.kind is GradientTransformType.HORIZONTAL:
            return GradientPaint(Point(bounds.min_x, bounds.center_y), c0, Point(bounds.max_x, bounds.center_y), c1)
        if self.kind is GradientTransformType.CENTER_VERTICAL:
            return GradientPaint(
                Point(bounds.center_x, bounds.max_y), c1, Point(bounds.center_x, bounds.center_y), c0, cyclic=True
            )
        return GradientPaint(
            Point(bounds.min_x, bounds.center_y), c1, Point(bounds.center_x, bounds.center_y), c0, cyclic=True
        )
