from __future__ import annotations

from dataclasses import replace
import unittest

from zoomplot.scales import Viewport
from zoomplot.state import (
    DisplayFlags,
    PlotState,
    Selection,
    load,
    reset_zoom,
    resize,
    set_flags,
    zoom_to_region,
)


SAMPLES = [(0.0, 0.0), (1.0, 1.0), (2.0, 4.0)]


def _loaded(width: int = 200, height: int = 200) -> PlotState:
    return load(resize(PlotState(), width, height), SAMPLES)


class LoadTests(unittest.TestCase):
    def test_load_sets_initial_and_current_viewport(self) -> None:
        state = _loaded()
        self.assertEqual(state.initial_viewport, Viewport(0.0, 2.0, 0.0, 4.0))
        self.assertEqual(state.viewport, state.initial_viewport)
        self.assertEqual(state.scale, 50.0)
        self.assertEqual(state.interaction_state, "idle")

    def test_empty_input_keeps_state_and_warns(self) -> None:
        state = _loaded()
        with self.assertLogs("zoomplot.state", level="WARNING"):
            self.assertIs(load(state, []), state)
        with self.assertLogs("zoomplot.state", level="WARNING"):
            self.assertIs(load(state, None), state)

    def test_empty_input_before_any_data_leaves_nothing_loaded(self) -> None:
        with self.assertLogs("zoomplot.state", level="WARNING"):
            state = load(PlotState(), [])
        self.assertIsNone(state.series)
        self.assertIsNone(state.transform())

    def test_reload_replaces_data_and_drops_zoom(self) -> None:
        state = zoom_to_region(_loaded(), 0.5, 0.5, 1.5, 1.5)
        state = load(state, [(10.0, -1.0), (20.0, 1.0)])
        self.assertEqual(state.initial_viewport, Viewport(10.0, 20.0, -1.0, 1.0))
        self.assertEqual(state.viewport, state.initial_viewport)
        self.assertIsNone(state.highlighted)
        self.assertIsNone(state.selection)


class ZoomTests(unittest.TestCase):
    def test_zoom_sets_exact_region_and_rescales(self) -> None:
        state = zoom_to_region(_loaded(), -0.1, 1.7, 1.7, 3.5)
        self.assertEqual(state.viewport, Viewport(-0.1, 1.7, 1.7, 3.5))
        self.assertAlmostEqual(state.scale, 200.0 / 1.8)

    def test_zoom_outside_data_range_is_allowed(self) -> None:
        state = zoom_to_region(_loaded(), 100.0, 100.0, 101.0, 102.0)
        self.assertEqual(state.viewport, Viewport(100.0, 101.0, 100.0, 102.0))

    def test_empty_region_is_ignored(self) -> None:
        state = _loaded()
        self.assertIs(zoom_to_region(state, 1.0, 0.0, 1.0, 2.0), state)
        self.assertIs(zoom_to_region(state, 2.0, 0.0, 1.0, 2.0), state)

    def test_zoom_without_data_is_ignored(self) -> None:
        state = PlotState()
        self.assertIs(zoom_to_region(state, 0.0, 0.0, 1.0, 1.0), state)

    def test_zoom_without_finite_scale_is_ignored(self) -> None:
        state = _loaded()
        self.assertIs(zoom_to_region(state, 0.0, 0.0, 5e-324, 5e-324), state)

    def test_view_changes_clear_highlight(self) -> None:
        hovered = replace(_loaded(), highlighted=1)
        self.assertIsNone(zoom_to_region(hovered, 0.5, 0.5, 1.5, 1.5).highlighted)
        zoomed = replace(zoom_to_region(hovered, 0.5, 0.5, 1.5, 1.5), highlighted=1)
        self.assertIsNone(reset_zoom(zoomed).highlighted)
        self.assertIsNone(resize(hovered, 300, 300).highlighted)
        self.assertEqual(resize(hovered, 200, 200).highlighted, 1)

    def test_reset_restores_initial_viewport_and_is_idempotent(self) -> None:
        base = _loaded()
        zoomed = zoom_to_region(base, 0.5, 0.5, 1.5, 1.5)
        once = reset_zoom(zoomed)
        self.assertEqual(once.viewport, base.initial_viewport)
        self.assertIs(reset_zoom(once), once)
        self.assertIs(reset_zoom(base), base)

    def test_reset_without_data_is_a_no_op(self) -> None:
        state = PlotState()
        self.assertIs(reset_zoom(state), state)


class ResizeAndFlagsTests(unittest.TestCase):
    def test_resize_updates_scale(self) -> None:
        state = resize(_loaded(), 400, 800)
        self.assertEqual(state.canvas_size, (400, 800))
        self.assertEqual(state.scale, 200.0)

    def test_zero_size_has_no_transform(self) -> None:
        state = resize(_loaded(), 0, 300)
        self.assertIsNone(state.transform())
        self.assertIsNone(state.scale)

    def test_negative_size_is_rejected(self) -> None:
        with self.assertRaises(ValueError):
            resize(PlotState(), -1, 10)

    def test_flags_default_and_toggle(self) -> None:
        state = PlotState()
        self.assertEqual(state.flags, DisplayFlags(show_axis=True, show_markers=True, show_divisions=False))
        state = set_flags(state, show_divisions=True, show_axis=False)
        self.assertTrue(state.flags.show_divisions)
        self.assertFalse(state.flags.show_axis)
        self.assertIs(set_flags(state, show_axis=False), state)


class SelectionTests(unittest.TestCase):
    def test_rect_is_normalized_for_any_drag_direction(self) -> None:
        self.assertEqual(Selection((10.0, 10.0), (100.0, 60.0)).rect(), (10.0, 10.0, 90.0, 50.0))
        self.assertEqual(Selection((100.0, 60.0), (10.0, 10.0)).rect(), (10.0, 10.0, 90.0, 50.0))
        self.assertEqual(Selection((5.0, 5.0), (5.0, 5.0)).rect(), (5.0, 5.0, 0.0, 0.0))


if __name__ == "__main__":
    unittest.main()
