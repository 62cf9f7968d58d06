from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Union

import numpy as np

from zoomplot.series import Stroke


Layer = Literal["background", "axis", "divisions", "graph", "markers", "selection"]
LAYER_ORDER: tuple[Layer, ...] = ("background", "axis", "divisions", "graph", "markers", "selection")

HAlign = Literal["left", "right"]
VAlign = Literal["top", "baseline"]


@dataclass(frozen=True)
class ClearCommand:
    color: tuple[int, int, int, int]
    layer: Layer = "background"


@dataclass(frozen=True)
class LineCommand:
    x0: float
    y0: float
    x1: float
    y1: float
    stroke: Stroke
    layer: Layer


@dataclass(frozen=True)
class PolylineCommand:
    xs: np.ndarray
    ys: np.ndarray
    stroke: Stroke
    layer: Layer


@dataclass(frozen=True)
class RectCommand:
    x: float
    y: float
    width: float
    height: float
    stroke: Stroke
    layer: Layer


@dataclass(frozen=True)
class TextCommand:
    x: float
    y: float
    text: str
    color: tuple[int, int, int, int]
    font_size_px: float
    layer: Layer
    font_family: str = ""
    bold: bool = False
    h_align: HAlign = "left"
    v_align: VAlign = "baseline"


DrawCommand = Union[ClearCommand, LineCommand, PolylineCommand, RectCommand, TextCommand]


def commands_in_layer(commands: list[DrawCommand], layer: Layer) -> list[DrawCommand]:
    return [cmd for cmd in commands if cmd.layer == layer]
