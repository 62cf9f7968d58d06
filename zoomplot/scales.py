from __future__ import annotations

from dataclasses import dataclass
import math

import numpy as np

from zoomplot.series import SampleSeries


# Fixed visual margin, in data units, applied on both axes by the forward transform.
DATA_INSET = 0.3
DEGENERATE_SPAN_PAD = 1.0


@dataclass(frozen=True)
class Viewport:
    xmin: float
    xmax: float
    ymin: float
    ymax: float

    @property
    def width(self) -> float:
        return self.xmax - self.xmin

    @property
    def height(self) -> float:
        return self.ymax - self.ymin

    def is_valid(self) -> bool:
        values = (self.xmin, self.xmax, self.ymin, self.ymax)
        if not all(math.isfinite(v) for v in values):
            return False
        return self.width > 0 and self.height > 0


def region_from_corners(x1: float, y1: float, x2: float, y2: float) -> Viewport:
    return Viewport(
        xmin=float(min(x1, x2)),
        xmax=float(max(x1, x2)),
        ymin=float(min(y1, y2)),
        ymax=float(max(y1, y2)),
    )


def compute_initial_viewport(series: SampleSeries) -> Viewport:
    """X range from the first and last sample, y range from all samples."""

    xmin = float(series.x[0])
    xmax = float(series.x[-1])
    if xmin > xmax:
        xmin, xmax = xmax, xmin
    ymin = float(np.min(series.y))
    ymax = float(np.max(series.y))

    if xmin == xmax:
        xmin -= DEGENERATE_SPAN_PAD
        xmax += DEGENERATE_SPAN_PAD
    if ymin == ymax:
        ymin -= DEGENERATE_SPAN_PAD
        ymax += DEGENERATE_SPAN_PAD
    return Viewport(xmin=xmin, xmax=xmax, ymin=ymin, ymax=ymax)


def compute_scale(viewport: Viewport, width: int, height: int) -> float | None:
    """Uniform pixels-per-unit factor, or None when no finite positive scale exists."""

    if width <= 0 or height <= 0:
        return None
    if not viewport.is_valid():
        raise ValueError(f"viewport must have positive extent: {viewport}")
    scale = min(width / viewport.width, height / viewport.height)
    # Spans that overflow or underflow leave no usable mapping.
    if not math.isfinite(scale) or scale <= 0:
        return None
    return scale


@dataclass(frozen=True)
class ViewTransform:
    viewport: Viewport
    scale: float
    inset: float = DATA_INSET

    def data_to_pixel(self, x: float, y: float) -> tuple[float, float]:
        vp = self.viewport
        return (
            (x - vp.xmin + self.inset) * self.scale,
            (vp.ymax - y - self.inset) * self.scale,
        )

    def pixel_to_data(self, px: float, py: float) -> tuple[float, float]:
        vp = self.viewport
        return (
            vp.xmin - self.inset + px / self.scale,
            vp.ymax - self.inset - py / self.scale,
        )

    def map_to_pixels(self, x: np.ndarray, y: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
        vp = self.viewport
        px = (np.asarray(x, dtype=np.float64) - vp.xmin + self.inset) * self.scale
        py = (vp.ymax - np.asarray(y, dtype=np.float64) - self.inset) * self.scale
        return px, py


def build_transform(viewport: Viewport, width: int, height: int) -> ViewTransform | None:
    scale = compute_scale(viewport, width, height)
    if scale is None:
        return None
    return ViewTransform(viewport=viewport, scale=scale)
