from __future__ import annotations

from dataclasses import dataclass, replace
import logging
from typing import Literal

import numpy as np

from zoomplot.events import BUTTON_PRIMARY, BUTTON_SECONDARY, PointerEvent
from zoomplot.scales import ViewTransform, region_from_corners
from zoomplot.series import SampleSeries
from zoomplot.state import PlotState, Selection, reset_zoom, zoom_to_region


LOGGER = logging.getLogger(__name__)

HighlightPolicy = Literal["first", "nearest"]


@dataclass(frozen=True)
class InteractionConfig:
    highlight_radius_px: float = 10.0
    # "first" keeps sequence order; "nearest" picks the closest hit inside the radius.
    highlight_policy: HighlightPolicy = "first"
    min_drag_px: float = 2.0

    def __post_init__(self) -> None:
        if self.highlight_radius_px <= 0:
            raise ValueError("highlight_radius_px must be > 0")
        if self.highlight_policy not in ("first", "nearest"):
            raise ValueError(f"unknown highlight policy: {self.highlight_policy}")
        if self.min_drag_px < 0:
            raise ValueError("min_drag_px must be >= 0")


DEFAULT_INTERACTION = InteractionConfig()


def find_highlighted_index(
    series: SampleSeries,
    transform: ViewTransform,
    px: float,
    py: float,
    *,
    radius_px: float = DEFAULT_INTERACTION.highlight_radius_px,
    policy: HighlightPolicy = "first",
) -> int | None:
    """Index of the sample drawn strictly within `radius_px` of (px, py)."""

    xs, ys = transform.map_to_pixels(series.x, series.y)
    dist = np.hypot(xs - px, ys - py)
    hits = np.flatnonzero(dist < radius_px)
    if hits.size == 0:
        return None
    if policy == "nearest":
        return int(hits[int(np.argmin(dist[hits]))])
    return int(hits[0])


def handle_pointer_event(
    state: PlotState,
    event: PointerEvent,
    config: InteractionConfig = DEFAULT_INTERACTION,
) -> PlotState:
    """Apply one pointer event and return the next snapshot."""

    kind = event.event_type
    if kind == "pointer_move":
        return _on_move(state, event, config)
    if kind == "pointer_down":
        return _on_down(state, event)
    if kind == "pointer_up":
        return _on_up(state, event, config)
    if kind == "pointer_leave":
        return _on_leave(state)
    raise ValueError(f"unsupported pointer event type: {kind}")


def _on_move(state: PlotState, event: PointerEvent, config: InteractionConfig) -> PlotState:
    if state.selection is not None:
        return replace(state, selection=replace(state.selection, current=(event.x, event.y)))

    transform = state.transform()
    highlighted = None
    if state.series is not None and transform is not None:
        highlighted = find_highlighted_index(
            state.series,
            transform,
            event.x,
            event.y,
            radius_px=config.highlight_radius_px,
            policy=config.highlight_policy,
        )
    if highlighted == state.highlighted:
        return state
    return replace(state, highlighted=highlighted)


def _on_down(state: PlotState, event: PointerEvent) -> PlotState:
    if event.button == BUTTON_SECONDARY:
        return reset_zoom(state)
    if event.button != BUTTON_PRIMARY or state.selection is not None:
        return state
    point = (event.x, event.y)
    return replace(state, selection=Selection(origin=point, current=point))


def _on_up(state: PlotState, event: PointerEvent, config: InteractionConfig) -> PlotState:
    if event.button != BUTTON_PRIMARY or state.selection is None:
        return state

    origin = state.selection.origin
    cleared = replace(state, selection=None)
    if abs(event.x - origin[0]) < config.min_drag_px or abs(event.y - origin[1]) < config.min_drag_px:
        LOGGER.debug("selection discarded: drag from %s to (%s, %s) is too small", origin, event.x, event.y)
        return cleared

    transform = state.transform()
    if transform is None:
        return cleared
    region = region_from_corners(*transform.pixel_to_data(*origin), *transform.pixel_to_data(event.x, event.y))
    return zoom_to_region(cleared, region.xmin, region.ymin, region.xmax, region.ymax)


def _on_leave(state: PlotState) -> PlotState:
    if state.selection is None and state.highlighted is None:
        return state
    if state.selection is not None:
        LOGGER.debug("selection cancelled: pointer left the canvas")
    return replace(state, selection=None, highlighted=None)
