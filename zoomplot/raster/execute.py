from __future__ import annotations

from functools import lru_cache
from typing import Any, Iterable

import numpy as np

from zoomplot.commands import ClearCommand, DrawCommand, LineCommand, PolylineCommand, RectCommand, TextCommand
from zoomplot.raster.canvas import clear, new_canvas
from zoomplot.raster.draw_lines import DashPattern, draw_line, draw_polyline, draw_rect
from zoomplot.raster.draw_text import DEFAULT_FONT_FAMILY, draw_text
from zoomplot.raster.layers import STATIC_LAYERS, LayerCache
from zoomplot.series import Stroke


def rasterize(commands: Iterable[DrawCommand], width: int, height: int) -> np.ndarray:
    frame = new_canvas(width, height)
    for command in commands:
        execute(frame, command)
    return frame


def rasterize_layered(
    commands: list[DrawCommand],
    width: int,
    height: int,
    *,
    cache: LayerCache,
    static_key: tuple[Any, ...],
) -> np.ndarray:
    """Rasterize with the static layers taken from `cache` when the key matches.

    Static layers always precede the overlay layers in paint order, so the
    cached template can stand in for every command up to the first overlay.
    """

    split = next((i for i, cmd in enumerate(commands) if cmd.layer not in STATIC_LAYERS), len(commands))
    template = cache.lookup(static_key)
    if template is None or template.shape[:2] != (height, width):
        template = rasterize(commands[:split], width, height)
        cache.store(static_key, template)
    frame = template.copy()
    for command in commands[split:]:
        execute(frame, command)
    return frame


def execute(dst: np.ndarray, command: DrawCommand) -> None:
    if isinstance(command, ClearCommand):
        clear(dst, command.color)
    elif isinstance(command, LineCommand):
        stroke = command.stroke
        draw_line(
            dst,
            command.x0,
            command.y0,
            command.x1,
            command.y1,
            color=stroke.color,
            width=stroke.width,
            dash=_dash(stroke),
        )
    elif isinstance(command, PolylineCommand):
        stroke = command.stroke
        draw_polyline(dst, command.xs, command.ys, color=stroke.color, width=stroke.width, dash=_dash(stroke))
    elif isinstance(command, RectCommand):
        stroke = command.stroke
        draw_rect(
            dst,
            command.x,
            command.y,
            command.width,
            command.height,
            color=stroke.color,
            width=stroke.width,
            dash=_dash(stroke),
        )
    elif isinstance(command, TextCommand):
        draw_text(
            dst,
            command.x,
            command.y,
            command.text,
            command.color,
            font_family=command.font_family or DEFAULT_FONT_FAMILY,
            font_size_px=command.font_size_px,
            bold=command.bold,
            h_align=command.h_align,
            v_align=command.v_align,
        )
    else:
        raise TypeError(f"unsupported draw command: {type(command).__name__}")


def _dash(stroke: Stroke) -> DashPattern | None:
    if stroke.dash is None:
        return None
    return _dash_pattern(stroke.dash)


@lru_cache(maxsize=32)
def _dash_pattern(runs: tuple[float, ...]) -> DashPattern:
    return DashPattern(runs)
