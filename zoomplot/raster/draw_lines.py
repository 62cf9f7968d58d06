from __future__ import annotations

from bisect import bisect_right
from itertools import accumulate
import math
from typing import Sequence

import numpy as np

from zoomplot.raster.canvas import RGBA, fill_rect


def brush_radius(width: float) -> int:
    return max(0, int(width) // 2)


def clip_segment(
    x0: float,
    y0: float,
    x1: float,
    y1: float,
    *,
    xmin: float,
    ymin: float,
    xmax: float,
    ymax: float,
) -> tuple[float, float] | None:
    """Liang-Barsky clip; returns the visible parameter range (t0, t1) or None."""

    dx = x1 - x0
    dy = y1 - y0
    t0, t1 = 0.0, 1.0
    for p, q in ((-dx, x0 - xmin), (dx, xmax - x0), (-dy, y0 - ymin), (dy, ymax - y0)):
        if p == 0:
            if q < 0:
                return None
            continue
        r = q / p
        if p < 0:
            if r > t1:
                return None
            t0 = max(t0, r)
        else:
            if r < t0:
                return None
            t1 = min(t1, r)
    return t0, t1


class DashPattern:
    """On/off run lengths in pixels, starting with an "on" run."""

    def __init__(self, runs: Sequence[float]) -> None:
        if not runs or any(r <= 0 for r in runs):
            raise ValueError("dash runs must be a non-empty sequence of positive lengths")
        self._bounds = list(accumulate(float(r) for r in runs))
        self.period = self._bounds[-1]

    def is_on(self, distance: float) -> bool:
        return bisect_right(self._bounds, distance % self.period) % 2 == 0


def draw_line(
    dst: np.ndarray,
    x0: float,
    y0: float,
    x1: float,
    y1: float,
    color: RGBA,
    width: float = 1,
    dash: DashPattern | None = None,
    phase: float = 0.0,
) -> float:
    """Draw one segment and return the dash phase at its end."""

    if not all(math.isfinite(v) for v in (x0, y0, x1, y1)):
        return phase
    length = math.hypot(x1 - x0, y1 - y0)
    radius = brush_radius(width)
    clipped = clip_segment(
        x0,
        y0,
        x1,
        y1,
        xmin=-radius,
        ymin=-radius,
        xmax=dst.shape[1] - 1 + radius,
        ymax=dst.shape[0] - 1 + radius,
    )
    if clipped is not None:
        t0, t1 = clipped
        dx = x1 - x0
        dy = y1 - y0
        _draw_segment(
            dst,
            int(round(x0 + t0 * dx)),
            int(round(y0 + t0 * dy)),
            int(round(x0 + t1 * dx)),
            int(round(y0 + t1 * dy)),
            color=color,
            radius=radius,
            dash=dash,
            phase=phase + t0 * length,
        )
    return phase + length


def draw_polyline(
    dst: np.ndarray,
    xs: np.ndarray,
    ys: np.ndarray,
    color: RGBA,
    width: float = 1,
    dash: DashPattern | None = None,
) -> None:
    if xs.size < 2:
        return
    phase = 0.0
    px = xs.tolist()
    py = ys.tolist()
    for i in range(len(px) - 1):
        phase = draw_line(dst, px[i], py[i], px[i + 1], py[i + 1], color=color, width=width, dash=dash, phase=phase)


def draw_rect(
    dst: np.ndarray,
    x: float,
    y: float,
    w: float,
    h: float,
    color: RGBA,
    width: float = 1,
    dash: DashPattern | None = None,
) -> None:
    xs = np.asarray([x, x + w, x + w, x, x], dtype=np.float64)
    ys = np.asarray([y, y, y + h, y + h, y], dtype=np.float64)
    draw_polyline(dst, xs, ys, color=color, width=width, dash=dash)


def _draw_segment(
    dst: np.ndarray,
    x0: int,
    y0: int,
    x1: int,
    y1: int,
    *,
    color: RGBA,
    radius: int,
    dash: DashPattern | None,
    phase: float,
) -> None:
    sx0, sy0 = x0, y0
    dx = abs(x1 - x0)
    sx = 1 if x0 < x1 else -1
    dy = -abs(y1 - y0)
    sy = 1 if y0 < y1 else -1
    err = dx + dy

    while True:
        if dash is None or dash.is_on(phase + math.hypot(x0 - sx0, y0 - sy0)):
            fill_rect(dst, x0 - radius, y0 - radius, x0 + radius, y0 + radius, color)
        if x0 == x1 and y0 == y1:
            break
        e2 = 2 * err
        if e2 >= dy:
            err += dy
            x0 += sx
        if e2 <= dx:
            err += dx
            y0 += sy
