from __future__ import annotations

from dataclasses import dataclass
import logging
from numbers import Integral
from typing import Callable

from xyspline.axis import XYPlotView
from xyspline.config import DEFAULT_FILL_TYPE, DEFAULT_LINE_WIDTH, DEFAULT_PRECISION, DEFAULT_SERIES_COLORS
from xyspline.dataset import XYDataset
from xyspline.errors import DegenerateSplineError, SplineConfigError
from xyspline.fill import FillType, PlotOrientation, resolve_fill_origin
from xyspline.geometry import Point
from xyspline.paint import RGBA, GradientPaint, GradientPaintTransformer, Paint, StandardGradientPaintTransformer
from xyspline.raster.surface import DrawingSurface
from xyspline.state import SplineSeriesState, assemble_series_paths


LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class RendererChangeEvent:
    renderer: "SplineRenderer"


ChangeListener = Callable[[RendererChangeEvent], None]


class SplineRenderer:
    """Draws each series as a natural cubic spline, optionally filled to a baseline.

    Items arrive one at a time through ``draw_item``; the curve is built and
    handed to the drawing surface when the last item of a series is seen.
    """

    def __init__(
        self,
        precision: int = DEFAULT_PRECISION,
        fill_type: FillType = DEFAULT_FILL_TYPE,
        *,
        gradient_transformer: GradientPaintTransformer | None = StandardGradientPaintTransformer(),
        line_width: int = DEFAULT_LINE_WIDTH,
    ) -> None:
        _validate_precision(precision)
        _validate_fill_type(fill_type)
        _validate_line_width(line_width)
        self._precision = int(precision)
        self._fill_type = fill_type
        self._gradient_transformer = gradient_transformer
        self._line_width = int(line_width)
        self._series_paints: dict[int, RGBA] = {}
        self._series_fill_paints: dict[int, Paint] = {}
        self._listeners: list[ChangeListener] = []

    # -- configuration -------------------------------------------------

    @property
    def precision(self) -> int:
        return self._precision

    @precision.setter
    def precision(self, value: int) -> None:
        _validate_precision(value)
        self._precision = int(value)
        self._fire_change_event()

    @property
    def fill_type(self) -> FillType:
        return self._fill_type

    @fill_type.setter
    def fill_type(self, value: FillType) -> None:
        _validate_fill_type(value)
        self._fill_type = value
        self._fire_change_event()

    @property
    def gradient_transformer(self) -> GradientPaintTransformer | None:
        return self._gradient_transformer

    @gradient_transformer.setter
    def gradient_transformer(self, value: GradientPaintTransformer | None) -> None:
        self._gradient_transformer = value
        self._fire_change_event()

    @property
    def line_width(self) -> int:
        return self._line_width

    @line_width.setter
    def line_width(self, value: int) -> None:
        _validate_line_width(value)
        self._line_width = int(value)
        self._fire_change_event()

    def set_series_paint(self, series: int, color: RGBA) -> "SplineRenderer":
        self._series_paints[int(series)] = color
        self._fire_change_event()
        return self

    def set_series_fill_paint(self, series: int, paint: Paint | None) -> "SplineRenderer":
        if paint is None:
            self._series_fill_paints.pop(int(series), None)
        else:
            self._series_fill_paints[int(series)] = paint
        self._fire_change_event()
        return self

    def series_paint(self, series: int) -> RGBA:
        color = self._series_paints.get(series)
        if color is not None:
            return color
        return DEFAULT_SERIES_COLORS[series % len(DEFAULT_SERIES_COLORS)]

    def series_fill_paint(self, series: int) -> Paint:
        paint = self._series_fill_paints.get(series)
        if paint is not None:
            return paint
        return self.series_paint(series)

    def add_change_listener(self, listener: ChangeListener) -> None:
        self._listeners.append(listener)

    def remove_change_listener(self, listener: ChangeListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _fire_change_event(self) -> None:
        event = RendererChangeEvent(renderer=self)
        for listener in list(self._listeners):
            listener(event)

    # -- rendering -----------------------------------------------------

    def initialise(self) -> SplineSeriesState:
        return SplineSeriesState()

    def render(self, dataset: XYDataset, plot: XYPlotView, surface: DrawingSurface) -> SplineSeriesState:
        state = self.initialise()
        for series in range(dataset.series_count):
            for item in range(dataset.item_count(series)):
                self.draw_item(state, surface, plot, dataset, series, item)
        return state

    def draw_item(
        self,
        state: SplineSeriesState,
        surface: DrawingSurface,
        plot: XYPlotView,
        dataset: XYDataset,
        series: int,
        item: int,
    ) -> None:
        if item == 0:
            state.start_series()
        x_value = dataset.x_value(series, item)
        y_value = dataset.y_value(series, item)
        trans_x = plot.domain_axis.value_to_coordinate(x_value, plot.data_area, plot.domain_edge)
        trans_y = plot.range_axis.value_to_coordinate(y_value, plot.data_area, plot.range_edge)
        if plot.orientation is PlotOrientation.HORIZONTAL:
            state.add_point(Point(trans_y, trans_x))
        else:
            state.add_point(Point(trans_x, trans_y))

        if item == dataset.item_count(series) - 1:
            self.flush_series(state, surface, plot, series)

    def flush_series(
        self,
        state: SplineSeriesState,
        surface: DrawingSurface,
        plot: XYPlotView,
        series: int,
    ) -> bool:
        """Build, fill and stroke the accumulated series, then clear the point buffer.

        Returns ``True`` when geometry was handed to ``surface``. Calling it
        again without new points is a no-op.
        """
        try:
            if state.point_count < 2:
                return False
            origin = resolve_fill_origin(
                self._fill_type,
                plot.orientation,
                plot.domain_axis,
                plot.range_axis,
                plot.data_area,
                plot.domain_edge,
                plot.range_edge,
            )
            state.series_path.reset()
            state.fill_area.reset()
            try:
                emitted = assemble_series_paths(
                    state,
                    precision=self._precision,
                    fill_type=self._fill_type,
                    origin=origin,
                    orientation=plot.orientation,
                )
            except DegenerateSplineError as exc:
                LOGGER.warning("skipping series %d: %s", series, exc)
                state.series_path.reset()
                state.fill_area.reset()
                return False

            LOGGER.debug(
                "series %d: %d knots, %d curve vertices, fill=%s",
                series,
                state.point_count,
                emitted,
                self._fill_type.value,
            )
            if self._fill_type is not FillType.NONE:
                surface.fill_path(state.fill_area, self._resolve_fill_paint(state, series))
                state.fill_area.reset()
            surface.stroke_path(state.series_path, self.series_paint(series), self._line_width)
            return True
        finally:
            state.clear_points()

    def _resolve_fill_paint(self, state: SplineSeriesState, series: int) -> Paint:
        paint = self.series_fill_paint(series)
        if self._gradient_transformer is not None and isinstance(paint, GradientPaint):
            bounds = state.fill_area.bounds()
            if bounds is not None:
                return self._gradient_transformer.transform(paint, bounds)
        return paint

    # -- equality ------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if other is self:
            return True
        if not isinstance(other, SplineRenderer):
            return NotImplemented
        return (
            self._precision == other._precision
            and self._fill_type is other._fill_type
            and self._gradient_transformer == other._gradient_transformer
            and self._line_width == other._line_width
            and self._series_paints == other._series_paints
            and self._series_fill_paints == other._series_fill_paints
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"SplineRenderer(precision={self._precision}, fill_type={self._fill_type.name}, "
            f"gradient_transformer={self._gradient_transformer!r})"
        )


def _validate_precision(value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, Integral):
        raise SplineConfigError(f"precision must be an int, got {type(value).__name__}")
    if value <= 0:
        raise SplineConfigError("precision must be > 0")


def _validate_fill_type(value: FillType) -> None:
    if not isinstance(value, FillType):
        raise SplineConfigError(f"fill_type must be a FillType, got {value!r}")


def _validate_line_width(value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, Integral) or value <= 0:
        raise SplineConfigError("line_width must be an int > 0")
