from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Protocol

import numpy as np
from PIL import Image
import torch

from xyspline.geometry import Path2D
from xyspline.paint import RGBA, Paint
from xyspline.raster.canvas import new_canvas
from xyspline.raster.draw_lines import draw_polyline
from xyspline.raster.fill_polygon import fill_polygons


class DrawingSurface(Protocol):
    def stroke_path(self, path: Path2D, color: RGBA, width: int = 1) -> None: ...

    def fill_path(self, path: Path2D, paint: Paint) -> None: ...


class RasterSurface:
    """RGBA numpy canvas that strokes and fills ``Path2D`` geometry."""

    def __init__(self, width: int, height: int, background: RGBA = (12, 16, 23, 255)) -> None:
        self.width = int(width)
        self.height = int(height)
        self.background = background
        self._canvas = new_canvas(self.width, self.height, color=background)

    def clear(self) -> None:
        self._canvas[:, :] = np.asarray(self.background, dtype=np.uint8)

    def stroke_path(self, path: Path2D, color: RGBA, width: int = 1) -> None:
        for pts, closed in path.subpaths():
            if closed and pts.shape[0] > 1:
                pts = np.vstack([pts, pts[:1]])
            draw_polyline(self._canvas, pts[:, 0], pts[:, 1], color=color, width=width)

    def fill_path(self, path: Path2D, paint: Paint) -> None:
        # Open subpaths are filled as if implicitly closed.
        rings = [pts for pts, _ in path.subpaths()]
        fill_polygons(self._canvas, rings, paint)

    def to_rgba(self) -> np.ndarray:
        return self._canvas.copy()

    def to_tensor(self) -> torch.Tensor:
        return torch.from_numpy(np.ascontiguousarray(self._canvas)).clone()

    def save_png(self, path: str | Path) -> Path:
        out = Path(path)
        Image.fromarray(self._canvas).save(out)
        return out


@dataclass
class RecordingSurface:
    """Surface that keeps a copy of every stroke/fill request instead of drawing."""

    operations: list[tuple[Any, ...]] = field(default_factory=list)

    def stroke_path(self, path: Path2D, color: RGBA, width: int = 1) -> None:
        self.operations.append(("stroke", path.copy(), color, width))

    def fill_path(self, path: Path2D, paint: Paint) -> None:
        self.operations.append(("fill", path.copy(), paint))

    def strokes(self) -> list[tuple[Any, ...]]:
        return [op for op in self.operations if op[0] == "stroke"]

    def fills(self) -> list[tuple[Any, ...]]:
        return [op for op in self.operations if op[0] == "fill"]
