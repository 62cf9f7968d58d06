from __future__ import annotations

from typing import Any

from zoomplot.display import DEFAULT_ASPECT_RATIO, resolve_default_view_size
from zoomplot.interaction import DEFAULT_INTERACTION, InteractionConfig
from zoomplot.series import DEFAULT_STYLE, PlotStyle
from zoomplot.widget import PlotWidget


def plot_widget(
    samples: Any = None,
    *,
    width: int | None = None,
    height: int | None = None,
    aspect_ratio: float = DEFAULT_ASPECT_RATIO,
    style: PlotStyle = DEFAULT_STYLE,
    interaction: InteractionConfig = DEFAULT_INTERACTION,
) -> PlotWidget:
    """Create a `PlotWidget`, optionally loaded with `samples`.

    A missing dimension is derived from the other one through `aspect_ratio`;
    with neither given the size follows the screen.
    """

    size = _complete_size(width, height, aspect_ratio)
    widget = PlotWidget(*size, style=style, interaction=interaction)
    if samples is not None:
        widget.load(samples)
    return widget


def _complete_size(width: int | None, height: int | None, aspect_ratio: float) -> tuple[int, int]:
    for name, value in (("width", width), ("height", height)):
        if value is not None and value <= 0:
            raise ValueError(f"{name} must be > 0")
    if width is None and height is None:
        return resolve_default_view_size(aspect_ratio=aspect_ratio)
    if width is None:
        return (max(1, round(height * aspect_ratio)), height)
    if height is None:
        return (width, max(1, round(width / aspect_ratio)))
    return (width, height)
