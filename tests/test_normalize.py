from __future__ import annotations

from decimal import Decimal
import unittest

import numpy as np
import torch

from xyspline.adapters.normalize import normalize_xy
from xyspline.dataset import XYDataset
from xyspline.errors import PlotDataError


class NormalizeTests(unittest.TestCase):
    def test_missing_items_keep_their_index(self) -> None:
        series = normalize_xy(y=[Decimal("1.5"), Decimal("2.25"), None, Decimal("3.5")])
        self.assertEqual(series.x.tolist(), [0.0, 1.0, 2.0, 3.0])
        self.assertEqual(series.item_count, 4)
        self.assertEqual(series.y[[0, 1, 3]].tolist(), [1.5, 2.25, 3.5])
        self.assertTrue(np.isnan(series.y[2]))

    def test_integer_tensor_becomes_float64_items(self) -> None:
        series = normalize_xy(y=torch.tensor([1, 2, 3], dtype=torch.int64), x=torch.tensor([0.5, 1.0, 1.5]))
        self.assertEqual(series.y.dtype, np.float64)
        self.assertEqual(series.y.tolist(), [1.0, 2.0, 3.0])
        self.assertEqual(series.x.tolist(), [0.5, 1.0, 1.5])

    def test_tensor_must_be_one_dimensional(self) -> None:
        with self.assertRaises(PlotDataError):
            normalize_xy(y=torch.zeros((2, 2)))

    def test_frame_with_one_numeric_column_is_the_y_series(self) -> None:
        try:
            import pandas as pd
        except Exception:
            self.skipTest("pandas is not installed")

        frame = pd.DataFrame({"name": ["a", "b", "c"], "value": [1, 2, 3]})
        self.assertEqual(normalize_xy(y=frame).y.tolist(), [1.0, 2.0, 3.0])
        self.assertEqual(normalize_xy(data=frame).y.tolist(), [1.0, 2.0, 3.0])

    def test_frame_columns_by_name(self) -> None:
        try:
            import pandas as pd
        except Exception:
            self.skipTest("pandas is not installed")

        frame = pd.DataFrame({"t": [0.0, 0.5, 1.0], "v": [2, 4, 8]})
        series = normalize_xy(y="v", x="t", data=frame, label="growth")
        self.assertEqual(series.x.tolist(), [0.0, 0.5, 1.0])
        self.assertEqual(series.y.tolist(), [2.0, 4.0, 8.0])
        self.assertEqual(series.label, "growth")
        with self.assertRaises(PlotDataError):
            normalize_xy(y="missing", data=frame)

    def test_length_mismatch_rejected(self) -> None:
        with self.assertRaises(PlotDataError):
            normalize_xy(y=[1.0, 2.0], x=[0.0])

    def test_non_numeric_rejected(self) -> None:
        with self.assertRaises(PlotDataError):
            normalize_xy(y=[1.0, "abc"])
        with self.assertRaises(PlotDataError):
            normalize_xy(y=np.zeros((2, 2)))
        with self.assertRaises(PlotDataError):
            normalize_xy(y=None)
        with self.assertRaises(PlotDataError):
            normalize_xy(y="1.0")

    def test_empty_series_is_allowed(self) -> None:
        series = normalize_xy(y=[])
        self.assertEqual(series.item_count, 0)
        self.assertEqual(series.x.size, 0)

    def test_dataset_indexing(self) -> None:
        dataset = XYDataset.from_series(([0.0, 1.0], [5.0, 6.0]), (None, [7.0, np.nan, 9.0]))
        dataset.add_series([1.0], label="tail")
        self.assertEqual(dataset.series_count, 3)
        self.assertEqual(dataset.item_count(1), 3)
        self.assertEqual(dataset.x_value(0, 1), 1.0)
        self.assertEqual(dataset.y_value(1, 2), 9.0)
        self.assertTrue(np.isnan(dataset.y_value(1, 1)))
        self.assertEqual(dataset.label(0), "series 1")
        self.assertEqual(dataset.label(2), "tail")


if __name__ == "__main__":
    unittest.main()
