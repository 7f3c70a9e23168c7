from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from xyspline.adapters import SeriesData, normalize_xy


@dataclass
class XYDataset:
    """Ordered collection of x/y series, addressed by (series, item) index."""

    series: list[SeriesData] = field(default_factory=list)

    @classmethod
    def from_series(cls, *pairs: tuple[Any, Any]) -> "XYDataset":
        dataset = cls()
        for x, y in pairs:
            dataset.add_series(y, x=x)
        return dataset

    def add_series(self, y: Any = None, *, x: Any = None, data: Any = None, label: str | None = None) -> "XYDataset":
        self.series.append(normalize_xy(y=y, x=x, data=data, label=label))
        return self

    @property
    def series_count(self) -> int:
        return len(self.series)

    def item_count(self, series: int) -> int:
        return self.series[series].item_count

    def x_value(self, series: int, item: int) -> float:
        return float(self.series[series].x[item])

    def y_value(self, series: int, item: int) -> float:
        return float(self.series[series].y[item])

    def label(self, series: int) -> str:
        name = self.series[series].label
        return name if name else f"series {series + 1}"
