from __future__ import annotations

import numpy as np


RGBA = tuple[int, int, int, int]


def new_canvas(width: int, height: int, color: RGBA = (255, 255, 255, 255)) -> np.ndarray:
    if width < 0 or height < 0:
        raise ValueError("canvas width/height must be >= 0")
    canvas = np.empty((height, width, 4), dtype=np.uint8)
    canvas[:, :] = np.asarray(color, dtype=np.uint8)
    return canvas


def clear(dst: np.ndarray, color: RGBA) -> None:
    dst[:, :] = np.asarray(color, dtype=np.uint8)


def fill_rect(dst: np.ndarray, x0: int, y0: int, x1: int, y1: int, color: RGBA) -> None:
    """Blend `color` over the inclusive pixel box, clipped to the canvas."""

    xa = max(0, min(x0, x1))
    xb = min(dst.shape[1] - 1, max(x0, x1))
    ya = max(0, min(y0, y1))
    yb = min(dst.shape[0] - 1, max(y0, y1))
    if xa > xb or ya > yb:
        return
    region = dst[ya : yb + 1, xa : xb + 1]
    if color[3] == 255:
        region[:, :, :3] = np.asarray(color[:3], dtype=np.uint8)
    else:
        a = color[3] / 255.0
        rgb = np.asarray(color[:3], dtype=np.float32) * a
        region[:, :, :3] = (rgb + region[:, :, :3].astype(np.float32) * (1.0 - a)).astype(np.uint8)
    region[:, :, 3] = 255


def blend_coverage(dst: np.ndarray, x: int, y: int, coverage: np.ndarray, color: RGBA) -> None:
    """Blend `color` through an 8-bit coverage mask whose top-left is (x, y)."""

    h, w = coverage.shape
    ys = slice(max(0, y), min(dst.shape[0], y + h))
    xs = slice(max(0, x), min(dst.shape[1], x + w))
    if ys.start >= ys.stop or xs.start >= xs.stop:
        return
    alpha = coverage[ys.start - y : ys.stop - y, xs.start - x : xs.stop - x].astype(np.float32)
    alpha *= color[3] / (255.0 * 255.0)
    region = dst[ys, xs]
    touched = alpha > 0
    if not touched.any():
        return
    a = alpha[:, :, None]
    rgb = np.asarray(color[:3], dtype=np.float32)
    mixed = rgb * a + region[:, :, :3].astype(np.float32) * (1.0 - a)
    region[:, :, :3] = np.clip(mixed, 0, 255).astype(np.uint8)
    region[:, :, 3][touched] = 255
