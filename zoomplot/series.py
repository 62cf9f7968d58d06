from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np


@dataclass(frozen=True)
class SampleSeries:
    x: np.ndarray
    y: np.ndarray
    source_name: str | None = None

    def __len__(self) -> int:
        return int(self.x.size)

    def point(self, index: int) -> tuple[float, float]:
        return (float(self.x[index]), float(self.y[index]))


@dataclass(frozen=True)
class Stroke:
    color: tuple[int, int, int, int]
    width: float = 1.0
    dash: tuple[float, ...] | None = None

    def __post_init__(self) -> None:
        if self.width <= 0:
            raise ValueError("stroke width must be > 0")
        if self.dash is not None:
            if not self.dash:
                raise ValueError("dash pattern must not be empty")
            if any(v <= 0 for v in self.dash):
                raise ValueError("dash pattern entries must be > 0")


GRAPH_DASH = (15.0, 5.0, 2.0, 5.0, 7.0, 5.0, 2.0, 5.0, 15.0, 5.0)


@dataclass(frozen=True)
class PlotStyle:
    """Colours, strokes and geometry used by the renderer."""

    background: tuple[int, int, int, int] = (255, 255, 255, 255)
    graph_stroke: Stroke = field(default_factory=lambda: Stroke((255, 0, 0, 255), 2.0, GRAPH_DASH))
    axis_stroke: Stroke = field(default_factory=lambda: Stroke((0, 0, 0, 255), 2.0))
    division_stroke: Stroke = field(default_factory=lambda: Stroke((0, 0, 0, 255), 2.0))
    selection_stroke: Stroke = field(default_factory=lambda: Stroke((0, 0, 255, 255), 1.0, (5.0, 5.0)))

    marker_width: float = 1.5
    marker_half_size: float = 5.5
    marker_color: tuple[int, int, int, int] = (0, 0, 255, 255)
    integer_color: tuple[int, int, int, int] = (0, 255, 0, 255)
    highlight_color: tuple[int, int, int, int] = (255, 0, 0, 255)
    integer_tolerance: float = 0.1
    # False reproduces the legacy rule where the near-integer colour always wins.
    highlight_overrides_integer: bool = True

    text_color: tuple[int, int, int, int] = (0, 0, 0, 255)
    font_family: str = "DejaVu Serif"
    axis_font_px: float = 18.0
    label_font_px: float = 12.0
    label_offset_px: float = 10.0

    axis_extent_factor: float = 1000.0
    division_count: int = 100
    division_major_every: int = 5
    division_major_px: float = 10.0
    division_minor_px: float = 5.0

    def __post_init__(self) -> None:
        if self.marker_width <= 0:
            raise ValueError("marker_width must be > 0")
        if self.marker_half_size <= 0:
            raise ValueError("marker_half_size must be > 0")
        if self.integer_tolerance < 0 or self.integer_tolerance > 0.5:
            raise ValueError("integer_tolerance must be in [0, 0.5]")
        if self.axis_font_px <= 0 or self.label_font_px <= 0:
            raise ValueError("font sizes must be > 0")
        if self.axis_extent_factor < 1:
            raise ValueError("axis_extent_factor must be >= 1")
        if self.division_count <= 0:
            raise ValueError("division_count must be > 0")
        if self.division_major_every <= 0:
            raise ValueError("division_major_every must be > 0")


DEFAULT_STYLE = PlotStyle()
