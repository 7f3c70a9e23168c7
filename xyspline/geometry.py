from __future__ import annotations

from dataclasses import dataclass, field
import math
from typing import Literal

import numpy as np


PathOp = Literal["move", "line", "close"]


@dataclass(frozen=True)
class Point:
    x: float
    y: float

    def is_finite(self) -> bool:
        return math.isfinite(self.x) and math.isfinite(self.y)


@dataclass(frozen=True)
class Rect:
    x: float
    y: float
    width: float
    height: float

    @property
    def min_x(self) -> float:
        return self.x

    @property
    def max_x(self) -> float:
        return self.x + self.width

    @property
    def min_y(self) -> float:
        return self.y

    @property
    def max_y(self) -> float:
        return self.y + self.height

    @property
    def center_x(self) -> float:
        return self.x + self.width * 0.5

    @property
    def center_y(self) -> float:
        return self.y + self.height * 0.5


@dataclass
class Path2D:
    """Append-only polyline geometry made of move/line/close commands."""

    commands: list[tuple[PathOp, float, float]] = field(default_factory=list)

    def move_to(self, x: float, y: float) -> None:
        self.commands.append(("move", float(x), float(y)))

    def line_to(self, x: float, y: float) -> None:
        if not self.commands:
            self.move_to(x, y)
            return
        self.commands.append(("line", float(x), float(y)))

    def close_path(self) -> None:
        if not self.commands or self.commands[-1][0] == "close":
            return
        self.commands.append(("close", math.nan, math.nan))

    def reset(self) -> None:
        self.commands.clear()

    def is_empty(self) -> bool:
        return not self.commands

    def copy(self) -> "Path2D":
        return Path2D(commands=list(self.commands))

    def vertices(self) -> np.ndarray:
        pts = [(x, y) for op, x, y in self.commands if op != "close"]
        if not pts:
            return np.zeros((0, 2), dtype=np.float64)
        return np.asarray(pts, dtype=np.float64)

    def subpaths(self) -> list[tuple[np.ndarray, bool]]:
        """Split into (vertices, closed) runs, one per move command."""
        out: list[tuple[np.ndarray, bool]] = []
        current: list[tuple[float, float]] = []
        closed = False
        for op, x, y in self.commands:
            if op == "move":
                if current:
                    out.append((np.asarray(current, dtype=np.float64), closed))
                current = [(x, y)]
                closed = False
            elif op == "line":
                current.append((x, y))
            else:
                closed = True
        if current:
            out.append((np.asarray(current, dtype=np.float64), closed))
        return out

    def bounds(self) -> Rect | None:
        pts = self.vertices()
        if pts.shape[0] == 0:
            return None
        x0 = float(np.min(pts[:, 0]))
        x1 = float(np.max(pts[:, 0]))
        y0 = float(np.min(pts[:, 1]))
        y1 = float(np.max(pts[:, 1]))
        return Rect(x=x0, y=y0, width=x1 - x0, height=y1 - y0)
