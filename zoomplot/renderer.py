from __future__ import annotations

import numpy as np

from zoomplot.commands import ClearCommand, DrawCommand, LineCommand, PolylineCommand, RectCommand, TextCommand
from zoomplot.scales import ViewTransform
from zoomplot.series import DEFAULT_STYLE, PlotStyle, SampleSeries, Stroke
from zoomplot.state import PlotState, Selection


_ARROW_LENGTH_PX = 10.0
_ARROW_HALF_WIDTH_PX = 5.0
_AXIS_LABEL_GAP_PX = 10.0


def render_commands(state: PlotState, style: PlotStyle = DEFAULT_STYLE) -> list[DrawCommand]:
    """Draw commands for one frame, in paint order.

    Only the background clear is emitted until data is loaded and the canvas
    has a non-zero size.
    """

    commands: list[DrawCommand] = [ClearCommand(style.background)]
    transform = state.transform()
    if state.series is None or transform is None:
        return commands
    if state.flags.show_axis:
        commands.extend(axis_commands(transform, style))
    if state.flags.show_divisions:
        commands.extend(division_commands(transform, style))
    commands.extend(graph_commands(state.series, transform, style))
    if state.flags.show_markers:
        commands.extend(marker_commands(state.series, transform, state.highlighted, style))
    if state.selection is not None:
        commands.extend(selection_commands(state.selection, style))
    return commands


def axis_span(lo: float, hi: float, style: PlotStyle) -> tuple[float, float]:
    """Axis endpoints along one data axis, reaching well past the visible range."""

    pad = style.axis_extent_factor * (hi - lo)
    return (lo - pad, hi + pad)


def axis_commands(transform: ViewTransform, style: PlotStyle) -> list[DrawCommand]:
    vp = transform.viewport
    y_lo, y_hi = axis_span(vp.ymin, vp.ymax, style)
    x_lo, x_hi = axis_span(vp.xmin, vp.xmax, style)
    stroke = style.axis_stroke
    out: list[DrawCommand] = []

    bx, by = transform.data_to_pixel(0.0, y_lo)
    tx, ty = transform.data_to_pixel(0.0, y_hi)
    out.append(LineCommand(bx, by, tx, ty, stroke, "axis"))
    out.append(LineCommand(tx, ty, tx - _ARROW_HALF_WIDTH_PX, ty + _ARROW_LENGTH_PX, stroke, "axis"))
    out.append(LineCommand(tx, ty, tx + _ARROW_HALF_WIDTH_PX, ty + _ARROW_LENGTH_PX, stroke, "axis"))
    out.append(_axis_label(tx + _AXIS_LABEL_GAP_PX, ty, "Y", "left", style))

    lx, ly = transform.data_to_pixel(x_lo, 0.0)
    rx, ry = transform.data_to_pixel(x_hi, 0.0)
    out.append(LineCommand(lx, ly, rx, ry, stroke, "axis"))
    out.append(LineCommand(rx, ry, rx - _ARROW_LENGTH_PX, ry - _ARROW_HALF_WIDTH_PX, stroke, "axis"))
    out.append(LineCommand(rx, ry, rx - _ARROW_LENGTH_PX, ry + _ARROW_HALF_WIDTH_PX, stroke, "axis"))
    out.append(_axis_label(rx - _AXIS_LABEL_GAP_PX, ry, "X", "right", style))
    return out


def _axis_label(x: float, y: float, text: str, h_align: str, style: PlotStyle) -> TextCommand:
    return TextCommand(
        x=x,
        y=y,
        text=text,
        color=style.text_color,
        font_size_px=style.axis_font_px,
        layer="axis",
        font_family=style.font_family,
        bold=True,
        h_align=h_align,  # type: ignore[arg-type]
        v_align="top",
    )


def division_commands(transform: ViewTransform, style: PlotStyle) -> list[DrawCommand]:
    vp = transform.viewport
    n = style.division_count
    steps = np.arange(n + 1, dtype=np.float64)
    lengths = [
        style.division_major_px if i % style.division_major_every == 0 else style.division_minor_px
        for i in range(n + 1)
    ]
    stroke = style.division_stroke
    out: list[DrawCommand] = []

    xs = vp.xmin + steps * (vp.width / n)
    px, py = transform.map_to_pixels(xs, np.zeros_like(xs))
    for x, y, length in zip(px.tolist(), py.tolist(), lengths, strict=True):
        out.append(LineCommand(x, y - length, x, y + length, stroke, "divisions"))

    ys = vp.ymin + steps * (vp.height / n)
    px, py = transform.map_to_pixels(np.zeros_like(ys), ys)
    for x, y, length in zip(px.tolist(), py.tolist(), lengths, strict=True):
        out.append(LineCommand(x - length, y, x + length, y, stroke, "divisions"))
    return out


def graph_commands(series: SampleSeries, transform: ViewTransform, style: PlotStyle) -> list[DrawCommand]:
    if len(series) < 2:
        return []
    px, py = transform.map_to_pixels(series.x, series.y)
    return [PolylineCommand(px, py, style.graph_stroke, "graph")]


def is_near_integer(values: np.ndarray, tolerance: float) -> np.ndarray:
    return np.abs(values - np.round(values)) <= tolerance


def marker_color(highlighted: bool, near_integer: bool, style: PlotStyle) -> tuple[int, int, int, int]:
    if highlighted and style.highlight_overrides_integer:
        return style.highlight_color
    return style.integer_color if near_integer else style.marker_color


def marker_commands(
    series: SampleSeries,
    transform: ViewTransform,
    highlighted: int | None,
    style: PlotStyle,
) -> list[DrawCommand]:
    px, py = transform.map_to_pixels(series.x, series.y)
    near = is_near_integer(series.y, style.integer_tolerance)
    strokes: dict[tuple[int, int, int, int], Stroke] = {}
    h = style.marker_half_size
    out: list[DrawCommand] = []
    for i, (cx, cy) in enumerate(zip(px.tolist(), py.tolist(), strict=True)):
        is_highlighted = i == highlighted
        color = marker_color(is_highlighted, bool(near[i]), style)
        stroke = strokes.get(color)
        if stroke is None:
            stroke = strokes[color] = Stroke(color, style.marker_width)
        out.append(RectCommand(cx - h, cy - h, 2 * h, 2 * h, stroke, "markers"))
        out.append(LineCommand(cx - h, cy - h, cx + h, cy + h, stroke, "markers"))
        out.append(LineCommand(cx - h, cy + h, cx + h, cy - h, stroke, "markers"))
        if is_highlighted:
            x, y = series.point(i)
            out.append(
                TextCommand(
                    x=cx + style.label_offset_px,
                    y=cy - style.label_offset_px,
                    text=f"({x:.2f}, {y:.2f})",
                    color=style.text_color,
                    font_size_px=style.label_font_px,
                    layer="markers",
                    font_family=style.font_family,
                )
            )
    return out


def selection_commands(selection: Selection, style: PlotStyle) -> list[DrawCommand]:
    x, y, w, h = selection.rect()
    return [RectCommand(x, y, w, h, style.selection_stroke, "selection")]
