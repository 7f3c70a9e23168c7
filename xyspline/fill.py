from __future__ import annotations

from enum import Enum
from typing import Protocol

from xyspline.geometry import Point, Rect


class FillType(Enum):
    NONE = "none"
    TO_ZERO = "to_zero"
    TO_LOWER_BOUND = "to_lower_bound"
    TO_UPPER_BOUND = "to_upper_bound"


class PlotOrientation(Enum):
    # VERTICAL: domain axis runs horizontally, values grow upward.
    VERTICAL = "vertical"
    HORIZONTAL = "horizontal"


class RectangleEdge(Enum):
    TOP = "top"
    BOTTOM = "bottom"
    LEFT = "left"
    RIGHT = "right"

    @property
    def is_horizontal(self) -> bool:
        return self in (RectangleEdge.TOP, RectangleEdge.BOTTOM)


class ValueAxis(Protocol):
    @property
    def lower_bound(self) -> float: ...

    @property
    def upper_bound(self) -> float: ...

    def value_to_coordinate(self, value: float, data_area: Rect, edge: RectangleEdge) -> float: ...


def resolve_fill_origin(
    fill_type: FillType,
    orientation: PlotOrientation,
    domain_axis: ValueAxis,
    range_axis: ValueAxis,
    data_area: Rect,
    domain_edge: RectangleEdge,
    range_edge: RectangleEdge,
) -> Point | None:
    """Return the baseline point the fill region closes against, in screen space."""
    if fill_type is FillType.NONE:
        return None
    if fill_type is FillType.TO_ZERO:
        domain_value, range_value = 0.0, 0.0
    elif fill_type is FillType.TO_LOWER_BOUND:
        domain_value, range_value = domain_axis.lower_bound, range_axis.lower_bound
    elif fill_type is FillType.TO_UPPER_BOUND:
        domain_value, range_value = domain_axis.upper_bound, range_axis.upper_bound
    else:
        raise ValueError(f"unsupported fill type: {fill_type!r}")

    dx = domain_axis.value_to_coordinate(domain_value, data_area, domain_edge)
    ry = range_axis.value_to_coordinate(range_value, data_area, range_edge)
    if orientation is PlotOrientation.HORIZONTAL:
        return Point(ry, dx)
    return Point(dx, ry)


def project_to_baseline(point: Point, origin: Point, orientation: PlotOrientation) -> Point:
    if orientation is PlotOrientation.HORIZONTAL:
        return Point(origin.x, point.y)
    return Point(point.x, origin.y)
