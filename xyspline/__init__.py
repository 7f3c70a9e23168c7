from xyspline.axis import LinearAxis, XYPlotView
from xyspline.dataset import XYDataset
from xyspline.errors import DegenerateSplineError, PlotDataError, SplineConfigError
from xyspline.fill import FillType, PlotOrientation, RectangleEdge, project_to_baseline, resolve_fill_origin
from xyspline.geometry import Path2D, Point, Rect
from xyspline.paint import GradientPaint, GradientTransformType, StandardGradientPaintTransformer
from xyspline.raster import RasterSurface, RecordingSurface
from xyspline.renderer import RendererChangeEvent, SplineRenderer
from xyspline.spline import SplineCoefficients, build_natural_spline, evaluate_spline
from xyspline.state import SplineSeriesState, assemble_series_paths
from xyspline.tridiagonal import solve_tridiagonal

__all__ = [
    "DegenerateSplineError",
    "FillType",
    "GradientPaint",
    "GradientTransformType",
    "LinearAxis",
    "Path2D",
    "PlotDataError",
    "PlotOrientation",
    "Point",
    "RasterSurface",
    "Rect",
    "RecordingSurface",
    "RectangleEdge",
    "RendererChangeEvent",
    "SplineCoefficients",
    "SplineConfigError",
    "SplineRenderer",
    "SplineSeriesState",
    "StandardGradientPaintTransformer",
    "XYDataset",
    "XYPlotView",
    "assemble_series_paths",
    "build_natural_spline",
    "evaluate_spline",
    "project_to_baseline",
    "resolve_fill_origin",
    "solve_tridiagonal",
]
