from __future__ import annotations

from functools import lru_cache
import logging
from pathlib import Path

import numpy as np
from PIL import Image, ImageDraw, ImageFont

from zoomplot.raster.canvas import RGBA, blend_coverage


LOGGER = logging.getLogger(__name__)

Font = ImageFont.FreeTypeFont | ImageFont.ImageFont

DEFAULT_FONT_FAMILY = "DejaVu Serif"
DEFAULT_FONT_SIZE_PX = 12.0
BOLD_SPREAD_PX = 2
# Tried in order after the requested family.
SERIF_FALLBACKS = ("dejavuserif", "liberationserif", "notoserif", "timesnewroman", "times", "georgia", "dejavusans")
FONT_DIRS = (
    Path("/usr/share/fonts"),
    Path("/usr/local/share/fonts"),
    Path.home() / ".local" / "share" / "fonts",
    Path.home() / "Library" / "Fonts",
    Path("/Library/Fonts"),
    Path("/System/Library/Fonts/Supplemental"),
    Path("C:/Windows/Fonts"),
)
FONT_SUFFIXES = frozenset({".ttf", ".otf", ".ttc"})


def draw_text(
    dst: np.ndarray,
    x: float,
    y: float,
    text: str,
    color: RGBA,
    *,
    font_family: str = DEFAULT_FONT_FAMILY,
    font_size_px: float = DEFAULT_FONT_SIZE_PX,
    bold: bool = False,
    h_align: str = "left",
    v_align: str = "baseline",
) -> None:
    """Blend `text` into `dst`.

    (x, y) is the left or right ink edge depending on `h_align`, and the top of
    the line box or the baseline depending on `v_align`.
    """

    if h_align not in ("left", "right"):
        raise ValueError(f"unsupported h_align: {h_align}")
    if v_align not in ("top", "baseline"):
        raise ValueError(f"unsupported v_align: {v_align}")
    if not text:
        return

    font = _load_font(font_family, font_size_px)
    glyphs = _glyph_mask(text, font, BOLD_SPREAD_PX if bold else 1)
    left = x + glyphs.offset_x if h_align == "left" else x - glyphs.mask.shape[1]
    top = y + glyphs.offset_y
    if v_align == "baseline":
        top -= _ascent(font, text)
    blend_coverage(dst, int(round(left)), int(round(top)), glyphs.mask, color)


def text_size(
    text: str,
    *,
    font_family: str = DEFAULT_FONT_FAMILY,
    font_size_px: float = DEFAULT_FONT_SIZE_PX,
) -> tuple[int, int]:
    font = _load_font(font_family, font_size_px)
    if not text:
        return (0, max(1, _ascent(font, "X")))
    mask = _glyph_mask(text, font, 1).mask
    return (mask.shape[1], mask.shape[0])


def _ascent(font: Font, text: str) -> int:
    if isinstance(font, ImageFont.FreeTypeFont):
        return int(font.getmetrics()[0])
    return int(font.getbbox(text)[3])


class _GlyphMask:
    __slots__ = ("mask", "offset_x", "offset_y")

    def __init__(self, mask: np.ndarray, offset_x: int, offset_y: int) -> None:
        self.mask = mask
        self.offset_x = offset_x
        self.offset_y = offset_y


@lru_cache(maxsize=128)
def _glyph_mask(text: str, font: Font, spread: int) -> _GlyphMask:
    x0, y0, x1, y1 = (int(v) for v in font.getbbox(text))
    image = Image.new("L", (max(1, x1 - x0), max(1, y1 - y0)), 0)
    ImageDraw.Draw(image).text((-x0, -y0), text, fill=255, font=font)
    ink = np.asarray(image, dtype=np.uint8)
    if spread > 1:
        # Faux bold: overlay copies shifted right by 0..spread-1 px.
        wide = np.zeros((ink.shape[0], ink.shape[1] + spread - 1), dtype=np.uint8)
        for dx in range(spread):
            np.maximum(wide[:, dx : dx + ink.shape[1]], ink, out=wide[:, dx : dx + ink.shape[1]])
        ink = wide
    ink.setflags(write=False)
    return _GlyphMask(ink, x0, y0)


@lru_cache(maxsize=64)
def _load_font(font_family: str, font_size_px: float) -> Font:
    size = max(1, int(round(font_size_px)))
    path = _find_font_file(font_family or DEFAULT_FONT_FAMILY)
    if path is not None:
        try:
            return ImageFont.truetype(str(path), size=size)
        except OSError as exc:
            LOGGER.warning("could not load font %s: %s", path, exc)
    return ImageFont.load_default(size=size)


def _squash(name: str) -> str:
    return name.lower().replace(" ", "").replace("-", "")


@lru_cache(maxsize=1)
def _installed_fonts() -> tuple[Path, ...]:
    found: list[Path] = []
    for base in FONT_DIRS:
        if base.is_dir():
            found.extend(p for p in base.rglob("*") if p.suffix.lower() in FONT_SUFFIXES)
    return tuple(sorted(found, key=lambda p: (len(p.stem), p.stem)))


@lru_cache(maxsize=16)
def _find_font_file(font_family: str) -> Path | None:
    fonts = _installed_fonts()
    for wanted in (_squash(font_family),) + SERIF_FALLBACKS:
        match = next((p for p in fonts if wanted in _squash(p.stem)), None)
        if match is not None:
            return match
    LOGGER.debug("no installed font matches %r; using Pillow's default font", font_family)
    return None
