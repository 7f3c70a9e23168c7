from __future__ import annotations

from dataclasses import dataclass
import math

from xyspline.fill import PlotOrientation, RectangleEdge, ValueAxis
from xyspline.geometry import Rect


@dataclass(frozen=True)
class LinearAxis:
    """Linear value axis mapping [lower, upper] onto one side of the data area."""

    lower: float
    upper: float
    inverted: bool = False

    def __post_init__(self) -> None:
        if not (math.isfinite(self.lower) and math.isfinite(self.upper)):
            raise ValueError("axis bounds must be finite")
        if self.upper <= self.lower:
            raise ValueError("axis upper bound must be > lower bound")

    @property
    def lower_bound(self) -> float:
        return self.lower

    @property
    def upper_bound(self) -> float:
        return self.upper

    def value_to_coordinate(self, value: float, data_area: Rect, edge: RectangleEdge) -> float:
        value = float(value)
        if not math.isfinite(value):
            return math.nan
        frac = (value - self.lower) / (self.upper - self.lower)
        if self.inverted:
            frac = 1.0 - frac
        if edge.is_horizontal:
            return data_area.min_x + frac * data_area.width
        # Screen y grows downward.
        return data_area.max_y - frac * data_area.height


@dataclass(frozen=True)
class XYPlotView:
    domain_axis: ValueAxis
    range_axis: ValueAxis
    data_area: Rect
    orientation: PlotOrientation = PlotOrientation.VERTICAL

    @property
    def domain_edge(self) -> RectangleEdge:
        if self.orientation is PlotOrientation.HORIZONTAL:
            return RectangleEdge.LEFT
        return RectangleEdge.BOTTOM

    @property
    def range_edge(self) -> RectangleEdge:
        if self.orientation is PlotOrientation.HORIZONTAL:
            return RectangleEdge.BOTTOM
        return RectangleEdge.LEFT
