from .canvas import blend_span, draw_pixel, new_canvas
from .draw_lines import draw_polyline
from .fill_polygon import fill_polygons
from .surface import DrawingSurface, RasterSurface, RecordingSurface

__all__ = [
    "DrawingSurface",
    "RasterSurface",
    "RecordingSurface",
    "blend_span",
    "draw_pixel",
    "draw_polyline",
    "fill_polygons",
    "new_canvas",
]
