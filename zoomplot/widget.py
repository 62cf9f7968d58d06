from __future__ import annotations

import logging
from typing import Any, Callable

import numpy as np

from zoomplot import state as transitions
from zoomplot.commands import DrawCommand
from zoomplot.errors import PlotDataError
from zoomplot.events import PointerEvent
from zoomplot.interaction import DEFAULT_INTERACTION, InteractionConfig, handle_pointer_event
from zoomplot.raster import DirtyState, LayerCache, rasterize_layered
from zoomplot.renderer import render_commands
from zoomplot.scales import ViewTransform, Viewport
from zoomplot.series import DEFAULT_STYLE, PlotStyle
from zoomplot.state import DisplayFlags, InteractionState, PlotState


LOGGER = logging.getLogger(__name__)

RedrawCallback = Callable[["PlotWidget"], None]


class PlotWidget:
    """Single-series plot with hover highlight, drag-to-zoom and reset.

    The widget owns the current `PlotState` snapshot. Every public mutator
    routes through a pure transition and, when the snapshot changes, marks the
    widget dirty and calls `on_redraw`. Hosts paint with `render()` (draw
    commands) or `to_rgba()` (raster frame).
    """

    def __init__(
        self,
        width: int = 0,
        height: int = 0,
        *,
        style: PlotStyle = DEFAULT_STYLE,
        interaction: InteractionConfig = DEFAULT_INTERACTION,
        on_redraw: RedrawCallback | None = None,
    ) -> None:
        self.style = style
        self.interaction = interaction
        self._state = transitions.resize(PlotState(), width, height)
        self._on_redraw = on_redraw
        self._dirty = DirtyState()
        self._cache = LayerCache()
        self._generation = 0

    @property
    def state(self) -> PlotState:
        return self._state

    @property
    def viewport(self) -> Viewport | None:
        return self._state.viewport

    @property
    def initial_viewport(self) -> Viewport | None:
        return self._state.initial_viewport

    @property
    def scale(self) -> float | None:
        return self._state.scale

    @property
    def flags(self) -> DisplayFlags:
        return self._state.flags

    @property
    def interaction_state(self) -> InteractionState:
        return self._state.interaction_state

    @property
    def highlighted_sample(self) -> tuple[float, float] | None:
        return self._state.highlighted_sample()

    @property
    def selection_rect(self) -> tuple[float, float, float, float] | None:
        selection = self._state.selection
        return None if selection is None else selection.rect()

    @property
    def needs_redraw(self) -> bool:
        return self._dirty.dirty

    def set_redraw_callback(self, callback: RedrawCallback | None) -> None:
        self._on_redraw = callback

    def load(self, samples: Any, *, source_name: str | None = None) -> None:
        next_state = transitions.load(self._state, samples, source_name=source_name)
        if next_state.series is not self._state.series:
            self._generation += 1
        self._commit(next_state, "load")

    def set_show_axis(self, show: bool) -> None:
        self._commit(transitions.set_flags(self._state, show_axis=show), "flags", force=True)

    def set_show_markers(self, show: bool) -> None:
        self._commit(transitions.set_flags(self._state, show_markers=show), "flags", force=True)

    def set_show_divisions(self, show: bool) -> None:
        self._commit(transitions.set_flags(self._state, show_divisions=show), "flags", force=True)

    def zoom_to_region(self, x1: float, y1: float, x2: float, y2: float) -> None:
        self._commit(transitions.zoom_to_region(self._state, x1, y1, x2, y2), "zoom")

    def reset_zoom(self) -> None:
        self._commit(transitions.reset_zoom(self._state), "reset")

    def resize(self, width: int, height: int) -> None:
        next_state = transitions.resize(self._state, width, height)
        if next_state is not self._state:
            LOGGER.debug("canvas resized to %dx%d", width, height)
        self._commit(next_state, "resize")

    def handle_event(self, event: PointerEvent) -> bool:
        """Feed one pointer event; returns True when the snapshot changed."""

        next_state = handle_pointer_event(self._state, event, self.interaction)
        changed = next_state is not self._state
        self._commit(next_state, event.event_type)
        return changed

    def data_to_pixel(self, x: float, y: float) -> tuple[float, float]:
        return self._require_transform().data_to_pixel(x, y)

    def pixel_to_data(self, px: float, py: float) -> tuple[float, float]:
        return self._require_transform().pixel_to_data(px, py)

    def render(self) -> list[DrawCommand]:
        return render_commands(self._state, self.style)

    def to_rgba(self) -> np.ndarray:
        width, height = self._state.canvas_size
        flags = self._state.flags
        static_key = (
            self._generation,
            self._state.canvas_size,
            self._state.viewport,
            flags.show_axis,
            flags.show_divisions,
            self.style,
        )
        frame = rasterize_layered(self.render(), width, height, cache=self._cache, static_key=static_key)
        self._dirty.take()
        return frame

    def _require_transform(self) -> ViewTransform:
        transform = self._state.transform()
        if transform is None:
            raise PlotDataError("no transform: load samples and give the canvas a non-zero size first")
        return transform

    def _commit(self, next_state: PlotState, reason: str, *, force: bool = False) -> None:
        if next_state is self._state and not force:
            return
        self._state = next_state
        self._dirty.mark(reason)
        if self._on_redraw is not None:
            self._on_redraw(self)
