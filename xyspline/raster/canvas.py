from __future__ import annotations

import numpy as np

from xyspline.paint import RGBA


def new_canvas(width: int, height: int, color: RGBA = (0, 0, 0, 255)) -> np.ndarray:
    if width <= 0 or height <= 0:
        raise ValueError("canvas width/height must be > 0")
    canvas = np.empty((height, width, 4), dtype=np.uint8)
    canvas[:, :] = np.asarray(color, dtype=np.uint8)
    return canvas


def draw_pixel(dst: np.ndarray, x: int, y: int, color: RGBA) -> None:
    if y < 0 or y >= dst.shape[0] or x < 0 or x >= dst.shape[1]:
        return
    a = color[3] / 255.0
    inv = 1.0 - a
    current = dst[y, x, :3].astype(np.float32)
    dst[y, x, 0:3] = (np.asarray(color[0:3], dtype=np.float32) * a + current * inv).astype(np.uint8)
    dst[y, x, 3] = 255


def blend_span(dst: np.ndarray, y: int, x0: int, x1: int, colors: np.ndarray) -> None:
    """Alpha-blend a row of RGBA colours onto ``dst[y, x0:x1+1]``.

    ``colors`` is either one RGBA value or an ``(x1 - x0 + 1, 4)`` array.
    """
    if y < 0 or y >= dst.shape[0]:
        return
    xa = max(0, x0)
    xb = min(dst.shape[1] - 1, x1)
    if xa > xb:
        return
    src = np.asarray(colors, dtype=np.float32)
    if src.ndim == 2:
        src = src[xa - x0 : xb - x0 + 1]
    segment = dst[y, xa : xb + 1]
    alpha = src[..., 3:4] / 255.0
    segment[:, :3] = (src[..., :3] * alpha + segment[:, :3].astype(np.float32) * (1.0 - alpha)).astype(np.uint8)
    segment[:, 3] = 255
