from .canvas import fill_rect, new_canvas
from .draw_lines import DashPattern, clip_segment, draw_line, draw_polyline, draw_rect
from .draw_text import draw_text, text_size
from .execute import execute, rasterize, rasterize_layered
from .layers import DirtyState, LayerCache

__all__ = [
    "DashPattern",
    "DirtyState",
    "LayerCache",
    "clip_segment",
    "draw_line",
    "draw_polyline",
    "draw_rect",
    "draw_text",
    "execute",
    "fill_rect",
    "new_canvas",
    "rasterize",
    "rasterize_layered",
    "text_size",
]
