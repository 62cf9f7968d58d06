from __future__ import annotations

from decimal import Decimal
import unittest

import numpy as np

from zoomplot import PlotDataError
from zoomplot.adapters.normalize import normalize_samples


class NormalizeSamplesTests(unittest.TestCase):
    def test_pairs_become_readonly_float_arrays(self) -> None:
        series = normalize_samples([(0, 0), (1, 1.5), (2, 4)], source_name="demo")
        assert series is not None
        self.assertEqual(series.x.tolist(), [0.0, 1.0, 2.0])
        self.assertEqual(series.y.tolist(), [0.0, 1.5, 4.0])
        self.assertEqual(series.x.dtype, np.float64)
        self.assertFalse(series.x.flags.writeable)
        self.assertEqual(series.source_name, "demo")
        self.assertEqual(len(series), 3)
        self.assertEqual(series.point(1), (1.0, 1.5))

    def test_decimal_values_are_accepted(self) -> None:
        series = normalize_samples([[Decimal("1.5"), Decimal("2.25")]])
        assert series is not None
        self.assertEqual(series.point(0), (1.5, 2.25))

    def test_numpy_pair_array(self) -> None:
        arr = np.asarray([[0, 1], [2, 3]], dtype=np.int32)
        series = normalize_samples(arr)
        assert series is not None
        self.assertEqual(series.y.tolist(), [1.0, 3.0])

    def test_absent_or_empty_input_returns_none(self) -> None:
        self.assertIsNone(normalize_samples(None))
        self.assertIsNone(normalize_samples([]))
        self.assertIsNone(normalize_samples(()))
        self.assertIsNone(normalize_samples(np.empty((0, 2))))

    def test_wrong_shapes_are_rejected(self) -> None:
        with self.assertRaises(PlotDataError):
            normalize_samples(np.zeros((3, 3)))
        with self.assertRaises(PlotDataError):
            normalize_samples([(1.0, 2.0, 3.0)])
        with self.assertRaises(PlotDataError):
            normalize_samples([1.0, 2.0])
        with self.assertRaises(PlotDataError):
            normalize_samples("0,0")

    def test_non_numeric_and_non_finite_values_are_rejected(self) -> None:
        with self.assertRaises(PlotDataError):
            normalize_samples([(0.0, "a")])
        with self.assertRaises(PlotDataError):
            normalize_samples([(0.0, None)])
        with self.assertRaises(PlotDataError):
            normalize_samples([(0.0, 1.0), (float("nan"), 2.0)])

    def test_pandas_dataframe_with_xy_columns(self) -> None:
        try:
            import pandas as pd
        except Exception:
            self.skipTest("pandas is not installed")

        df = pd.DataFrame({"label": ["a", "b"], "y": [3, 4], "x": [1, 2]})
        series = normalize_samples(df)
        assert series is not None
        self.assertEqual(series.x.tolist(), [1.0, 2.0])
        self.assertEqual(series.y.tolist(), [3.0, 4.0])

    def test_torch_tensor_pairs(self) -> None:
        try:
            import torch
        except Exception:
            self.skipTest("torch is not installed")

        series = normalize_samples(torch.tensor([[0, 1], [2, 3]], dtype=torch.int64))
        assert series is not None
        self.assertEqual(series.x.tolist(), [0.0, 2.0])


if __name__ == "__main__":
    unittest.main()
