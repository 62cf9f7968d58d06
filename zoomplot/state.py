from __future__ import annotations

from dataclasses import dataclass, field, replace
import logging
from typing import Any, Literal

from zoomplot.adapters import normalize_samples
from zoomplot.scales import ViewTransform, Viewport, build_transform, compute_initial_viewport
from zoomplot.series import SampleSeries


LOGGER = logging.getLogger(__name__)

InteractionState = Literal["idle", "selecting"]


@dataclass(frozen=True)
class DisplayFlags:
    show_axis: bool = True
    show_markers: bool = True
    show_divisions: bool = False


@dataclass(frozen=True)
class Selection:
    """Rubber-band rectangle in pixel space, anchored at the press point."""

    origin: tuple[float, float]
    current: tuple[float, float]

    def rect(self) -> tuple[float, float, float, float]:
        ox, oy = self.origin
        cx, cy = self.current
        return (min(ox, cx), min(oy, cy), abs(cx - ox), abs(cy - oy))


@dataclass(frozen=True)
class PlotState:
    series: SampleSeries | None = None
    initial_viewport: Viewport | None = None
    viewport: Viewport | None = None
    canvas_size: tuple[int, int] = (0, 0)
    flags: DisplayFlags = field(default_factory=DisplayFlags)
    selection: Selection | None = None
    highlighted: int | None = None

    @property
    def interaction_state(self) -> InteractionState:
        return "selecting" if self.selection is not None else "idle"

    @property
    def scale(self) -> float | None:
        transform = self.transform()
        return None if transform is None else transform.scale

    def transform(self) -> ViewTransform | None:
        if self.viewport is None:
            return None
        width, height = self.canvas_size
        return build_transform(self.viewport, width, height)

    def highlighted_sample(self) -> tuple[float, float] | None:
        if self.series is None or self.highlighted is None:
            return None
        return self.series.point(self.highlighted)


def load(state: PlotState, samples: Any, *, source_name: str | None = None) -> PlotState:
    series = normalize_samples(samples, source_name=source_name)
    if series is None:
        LOGGER.warning("no data to display; keeping the current plot")
        return state
    viewport = compute_initial_viewport(series)
    LOGGER.debug("loaded %d samples; initial viewport %s", len(series), viewport)
    return replace(
        state,
        series=series,
        initial_viewport=viewport,
        viewport=viewport,
        selection=None,
        highlighted=None,
    )


def zoom_to_region(state: PlotState, x1: float, y1: float, x2: float, y2: float) -> PlotState:
    if state.series is None:
        LOGGER.debug("zoom ignored: nothing loaded")
        return state
    region = Viewport(xmin=float(x1), xmax=float(x2), ymin=float(y1), ymax=float(y2))
    if not region.is_valid():
        LOGGER.debug("zoom ignored: region %s has no positive extent", region)
        return state
    width, height = state.canvas_size
    if width > 0 and height > 0 and build_transform(region, width, height) is None:
        LOGGER.debug("zoom ignored: region %s has no finite scale on a %dx%d canvas", region, width, height)
        return state
    return replace(state, viewport=region, highlighted=None)


def reset_zoom(state: PlotState) -> PlotState:
    if state.initial_viewport is None or state.viewport == state.initial_viewport:
        return state
    return replace(state, viewport=state.initial_viewport, highlighted=None)


def resize(state: PlotState, width: int, height: int) -> PlotState:
    if width < 0 or height < 0:
        raise ValueError("canvas width/height must be >= 0")
    size = (int(width), int(height))
    if size == state.canvas_size:
        return state
    return replace(state, canvas_size=size, highlighted=None)


def set_flags(state: PlotState, **changes: bool) -> PlotState:
    flags = replace(state.flags, **{k: bool(v) for k, v in changes.items()})
    if flags == state.flags:
        return state
    return replace(state, flags=flags)
