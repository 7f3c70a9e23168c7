from __future__ import annotations

from xyspline.fill import FillType


DEFAULT_PRECISION = 5
DEFAULT_FILL_TYPE = FillType.NONE
DEFAULT_LINE_WIDTH = 1

DEFAULT_SERIES_COLORS: tuple[tuple[int, int, int, int], ...] = (
    (255, 165, 0, 255),
    (62, 149, 255, 255),
    (110, 205, 120, 255),
    (236, 92, 108, 255),
    (186, 126, 255, 255),
    (64, 206, 214, 255),
)
