from __future__ import annotations

import logging
import sys
import tkinter as tk
from tkinter import ttk
from typing import Any

from PIL import Image, ImageTk

from zoomplot.display import resolve_default_view_size
from zoomplot.events import (
    BUTTON_PRIMARY,
    BUTTON_SECONDARY,
    PointerEvent,
    pointer_down,
    pointer_leave,
    pointer_move,
    pointer_up,
)
from zoomplot.interaction import DEFAULT_INTERACTION, InteractionConfig
from zoomplot.series import DEFAULT_STYLE, PlotStyle
from zoomplot.widget import PlotWidget


LOGGER = logging.getLogger(__name__)

# Tk on macOS reports the right mouse button as 2.
_SECONDARY_TK_BUTTONS = (2, 3) if sys.platform == "darwin" else (3,)


def pointer_event_from_tk(kind: str, event: Any) -> PointerEvent | None:
    """Translate a tkinter event into a `PointerEvent`, or None if unused."""

    if kind == "leave":
        return pointer_leave()
    if kind == "motion":
        return pointer_move(event.x, event.y)
    try:
        num = int(event.num)
    except (TypeError, ValueError):
        return None
    if num == 1:
        button = BUTTON_PRIMARY
    elif num in _SECONDARY_TK_BUTTONS:
        button = BUTTON_SECONDARY
    else:
        return None
    if kind == "press":
        return pointer_down(event.x, event.y, button)
    if kind == "release":
        return pointer_up(event.x, event.y, button)
    raise ValueError(f"unknown tk event kind: {kind}")


class TkPlotView:
    """Hosts a `PlotWidget` on a tkinter canvas and repaints it on demand."""

    def __init__(
        self,
        master: tk.Misc,
        widget: PlotWidget,
        *,
        width: int | None = None,
        height: int | None = None,
    ) -> None:
        if width is None or height is None:
            default_w, default_h = resolve_default_view_size()
            width = default_w if width is None else width
            height = default_h if height is None else height
        self.widget = widget
        self.canvas = tk.Canvas(master, width=width, height=height, highlightthickness=0, background="white")
        self._photo: ImageTk.PhotoImage | None = None
        self._paint_after_id: str | None = None

        self.canvas.bind("<Configure>", self._on_configure)
        self.canvas.bind("<Motion>", lambda e: self._dispatch("motion", e))
        self.canvas.bind("<B1-Motion>", lambda e: self._dispatch("motion", e))
        self.canvas.bind("<ButtonPress>", lambda e: self._dispatch("press", e))
        self.canvas.bind("<ButtonRelease>", lambda e: self._dispatch("release", e))
        self.canvas.bind("<Leave>", lambda e: self._dispatch("leave", e))

        widget.set_redraw_callback(self._schedule_paint)
        widget.resize(width, height)

    def pack(self, **kwargs: Any) -> None:
        self.canvas.pack(**kwargs)

    def _dispatch(self, kind: str, event: Any) -> None:
        pointer = pointer_event_from_tk(kind, event)
        if pointer is not None:
            self.widget.handle_event(pointer)

    def _on_configure(self, event: Any) -> None:
        self.widget.resize(max(0, int(event.width)), max(0, int(event.height)))

    def _schedule_paint(self, _widget: PlotWidget) -> None:
        if self._paint_after_id is None:
            self._paint_after_id = self.canvas.after_idle(self._paint)

    def _paint(self) -> None:
        self._paint_after_id = None
        frame = self.widget.to_rgba()
        if frame.size == 0:
            return
        self._photo = ImageTk.PhotoImage(Image.fromarray(frame))
        self.canvas.delete("frame")
        self.canvas.create_image(0, 0, image=self._photo, anchor="nw", tags=("frame",))


def show(
    samples: Any,
    *,
    title: str = "zoomplot",
    width: int | None = None,
    height: int | None = None,
    style: PlotStyle = DEFAULT_STYLE,
    interaction: InteractionConfig = DEFAULT_INTERACTION,
) -> PlotWidget:
    """Open a window plotting `samples` and block until it is closed."""

    root = tk.Tk()
    root.title(title)
    widget = PlotWidget(style=style, interaction=interaction)

    toolbar = ttk.Frame(root)
    toolbar.pack(side="top", fill="x")
    flags = widget.flags
    for label, initial, setter in (
        ("Axis", flags.show_axis, widget.set_show_axis),
        ("Markers", flags.show_markers, widget.set_show_markers),
        ("Divisions", flags.show_divisions, widget.set_show_divisions),
    ):
        var = tk.BooleanVar(master=root, value=initial)
        ttk.Checkbutton(
            toolbar,
            text=label,
            variable=var,
            command=lambda v=var, s=setter: s(v.get()),
        ).pack(side="left", padx=(6, 0))

    view = TkPlotView(root, widget, width=width, height=height)
    view.pack(side="bottom", fill="both", expand=True)
    widget.load(samples)
    LOGGER.debug("tk view opened: %s", title)
    root.mainloop()
    return widget
