from __future__ import annotations

import unittest

import numpy as np

from zoomplot.adapters import normalize_samples
from zoomplot.scales import (
    DATA_INSET,
    ViewTransform,
    Viewport,
    build_transform,
    compute_initial_viewport,
    compute_scale,
    region_from_corners,
)


class ViewportTests(unittest.TestCase):
    def test_initial_viewport_uses_first_last_x_and_full_y_range(self) -> None:
        series = normalize_samples([(0.0, 0.0), (1.0, 1.0), (2.0, 4.0)])
        self.assertEqual(compute_initial_viewport(series), Viewport(0.0, 2.0, 0.0, 4.0))

    def test_initial_viewport_ignores_interior_x_outside_endpoints(self) -> None:
        series = normalize_samples([(1.0, 2.0), (9.0, -3.0), (4.0, 5.0)])
        self.assertEqual(compute_initial_viewport(series), Viewport(1.0, 4.0, -3.0, 5.0))

    def test_initial_viewport_pads_degenerate_spans(self) -> None:
        series = normalize_samples([(3.0, 5.0)])
        vp = compute_initial_viewport(series)
        self.assertEqual(vp, Viewport(2.0, 4.0, 4.0, 6.0))
        self.assertTrue(vp.is_valid())

    def test_initial_viewport_orders_descending_x(self) -> None:
        series = normalize_samples([(5.0, 0.0), (1.0, 1.0)])
        vp = compute_initial_viewport(series)
        self.assertEqual((vp.xmin, vp.xmax), (1.0, 5.0))

    def test_region_from_corners_normalizes(self) -> None:
        self.assertEqual(region_from_corners(3.0, 4.0, 1.0, -2.0), Viewport(1.0, 3.0, -2.0, 4.0))

    def test_invalid_viewports(self) -> None:
        self.assertFalse(Viewport(1.0, 1.0, 0.0, 1.0).is_valid())
        self.assertFalse(Viewport(0.0, 1.0, 2.0, 1.0).is_valid())
        self.assertFalse(Viewport(0.0, float("inf"), 0.0, 1.0).is_valid())


class ScaleTests(unittest.TestCase):
    def test_scale_is_uniform_minimum_of_both_axes(self) -> None:
        vp = Viewport(0.0, 2.0, 0.0, 4.0)
        self.assertEqual(compute_scale(vp, 200, 200), 50.0)
        self.assertEqual(compute_scale(vp, 400, 200), 50.0)
        self.assertEqual(compute_scale(vp, 100, 800), 50.0)

    def test_zero_size_canvas_has_no_scale(self) -> None:
        vp = Viewport(0.0, 2.0, 0.0, 4.0)
        self.assertIsNone(compute_scale(vp, 0, 200))
        self.assertIsNone(compute_scale(vp, 200, 0))
        self.assertIsNone(build_transform(vp, 0, 0))

    def test_overflowing_or_underflowing_span_has_no_scale(self) -> None:
        self.assertIsNone(compute_scale(Viewport(-1e308, 1e308, 0.0, 1.0), 200, 200))
        self.assertIsNone(compute_scale(Viewport(0.0, 5e-324, 0.0, 5e-324), 200, 200))
        self.assertIsNone(build_transform(Viewport(-1e308, 1e308, 0.0, 1.0), 200, 200))

    def test_degenerate_viewport_is_rejected(self) -> None:
        with self.assertRaises(ValueError):
            compute_scale(Viewport(1.0, 1.0, 0.0, 1.0), 100, 100)


class TransformTests(unittest.TestCase):
    def test_data_to_pixel_applies_inset(self) -> None:
        t = ViewTransform(Viewport(0.0, 2.0, 0.0, 4.0), scale=50.0)
        px, py = t.data_to_pixel(0.0, 0.0)
        self.assertAlmostEqual(px, DATA_INSET * 50.0)
        self.assertAlmostEqual(py, (4.0 - DATA_INSET) * 50.0)
        px, py = t.data_to_pixel(2.0, 4.0)
        self.assertAlmostEqual(px, 2.3 * 50.0)
        self.assertAlmostEqual(py, -DATA_INSET * 50.0)

    def test_pixel_to_data_inverts_data_to_pixel(self) -> None:
        viewports = [
            Viewport(0.0, 2.0, 0.0, 4.0),
            Viewport(-5.5, 12.25, 100.0, 101.0),
            Viewport(1e-3, 2e-3, -1e-3, 0.0),
        ]
        points = [(0.0, 0.0), (1.25, -3.5), (7.0, 100.5), (0.0015, -0.0005)]
        for vp in viewports:
            for width, height in ((200, 200), (640, 480), (37, 911)):
                t = build_transform(vp, width, height)
                assert t is not None
                for x, y in points:
                    rx, ry = t.pixel_to_data(*t.data_to_pixel(x, y))
                    self.assertAlmostEqual(rx, x, places=9)
                    self.assertAlmostEqual(ry, y, places=9)

    def test_map_to_pixels_matches_scalar_transform(self) -> None:
        t = ViewTransform(Viewport(-1.0, 3.0, -2.0, 2.0), scale=25.0)
        xs = np.asarray([-1.0, 0.5, 3.0])
        ys = np.asarray([2.0, 0.0, -2.0])
        px, py = t.map_to_pixels(xs, ys)
        for i in range(xs.size):
            ex, ey = t.data_to_pixel(float(xs[i]), float(ys[i]))
            self.assertAlmostEqual(float(px[i]), ex)
            self.assertAlmostEqual(float(py[i]), ey)


if __name__ == "__main__":
    unittest.main()
