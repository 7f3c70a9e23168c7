"""Raw series input to float64 item arrays.

Items are never dropped or reordered here: a missing or non-finite value
stays at its index as NaN, and the renderer skips it when the item is
mapped to screen space.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
import math
from typing import Any

import numpy as np
import torch

from xyspline.errors import PlotDataError


try:
    import pandas as pd
except Exception:  # pragma: no cover - optional dependency
    pd = None  # type: ignore[assignment]


@dataclass(frozen=True)
class SeriesData:
    x: np.ndarray
    y: np.ndarray
    label: str | None = None

    @property
    def item_count(self) -> int:
        return int(self.y.size)


def normalize_xy(
    y: Any = None,
    *,
    x: Any = None,
    data: Any = None,
    label: str | None = None,
) -> SeriesData:
    """Build one series from sequences, arrays, tensors or DataFrame columns.

    With ``data=``, string ``x``/``y`` name columns of the frame and an
    omitted ``y`` picks the frame's only numeric column. An omitted ``x``
    becomes the item index.
    """
    if data is not None:
        y, x = _frame_columns(data, y, x)
    elif pd is not None and isinstance(y, pd.DataFrame):
        y = _only_numeric_column(y)
    if y is None:
        raise PlotDataError("y input is required")

    ys = _as_float_array(y, name="y")
    xs = np.arange(ys.size, dtype=np.float64) if x is None else _as_float_array(x, name="x")
    if xs.size != ys.size:
        raise PlotDataError(f"x and y length mismatch: {xs.size} != {ys.size}")
    return SeriesData(x=xs, y=ys, label=label)


def _frame_columns(frame: Any, y: Any, x: Any) -> tuple[Any, Any]:
    if pd is None:
        raise PlotDataError("pandas is required when using `data=`")
    if not isinstance(frame, pd.DataFrame):
        raise PlotDataError("`data` must be a pandas DataFrame")
    y_col = _only_numeric_column(frame) if y is None else _column(frame, y)
    x_col = None if x is None else _column(frame, x)
    return y_col, x_col


def _column(frame: Any, key: Any) -> Any:
    if not isinstance(key, str):
        return key
    if key not in frame.columns:
        raise PlotDataError(f"column not found: {key}")
    return frame[key]


def _only_numeric_column(frame: Any) -> Any:
    numeric = [c for c in frame.columns if pd.api.types.is_numeric_dtype(frame[c])]
    if len(numeric) != 1:
        raise PlotDataError(f"expected exactly one numeric column, found {len(numeric)}")
    return frame[numeric[0]]


def _as_float_array(value: Any, *, name: str) -> np.ndarray:
    if isinstance(value, torch.Tensor):
        value = value.detach().to("cpu", torch.float64).numpy()
    elif pd is not None and isinstance(value, pd.Series):
        value = value.to_numpy()
    elif isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
        try:
            value = np.asarray(value, dtype=object)
        except ValueError as exc:
            raise PlotDataError(f"{name} must be a flat sequence") from exc

    if not isinstance(value, np.ndarray):
        raise PlotDataError(f"unsupported {name} input type: {type(value)!r}")
    if value.ndim != 1:
        raise PlotDataError(f"{name} must be 1-D, got shape {value.shape}")
    if value.dtype.kind in "biuf":
        return value.astype(np.float64)
    return np.fromiter(
        (_item_to_float(raw, name, i) for i, raw in enumerate(value.tolist())),
        dtype=np.float64,
        count=value.size,
    )


def _item_to_float(raw: Any, name: str, index: int) -> float:
    if raw is None:
        return math.nan
    try:
        return float(raw)
    except (TypeError, ValueError) as exc:
        raise PlotDataError(f"{name}[{index}] is not numeric: {raw!r}") from exc
