from __future__ import annotations

from dataclasses import dataclass
import logging


LOGGER = logging.getLogger(__name__)

DEFAULT_ASPECT_RATIO = 4.0 / 3.0


@dataclass(frozen=True)
class ViewSizePolicy:
    """How a host view picks its size when the caller gives none."""

    aspect_ratio: float = DEFAULT_ASPECT_RATIO
    screen_fraction: float = 0.5
    min_size: tuple[int, int] = (480, 360)
    fallback_screen: tuple[int, int] = (1600, 1200)

    def __post_init__(self) -> None:
        if self.aspect_ratio <= 0:
            raise ValueError("aspect_ratio must be > 0")
        if not 0 < self.screen_fraction <= 1:
            raise ValueError("screen_fraction must be in (0, 1]")
        if min(self.min_size) <= 0:
            raise ValueError("min_size entries must be > 0")

    def size_for_screen(self, screen: tuple[int, int] | None) -> tuple[int, int]:
        sw, sh = self.fallback_screen if screen is None else screen
        bound_w = max(1, int(sw * self.screen_fraction))
        bound_h = max(1, int(sh * self.screen_fraction))
        # Widest box with the target aspect that fits the bound.
        width = min(bound_w, int(round(bound_h * self.aspect_ratio)))
        height = int(round(width / self.aspect_ratio))
        return (max(width, self.min_size[0]), max(height, self.min_size[1]))


def resolve_default_view_size(
    *,
    aspect_ratio: float = DEFAULT_ASPECT_RATIO,
    display_fraction: float = 0.5,
) -> tuple[int, int]:
    policy = ViewSizePolicy(aspect_ratio=aspect_ratio, screen_fraction=display_fraction)
    return policy.size_for_screen(_detect_screen_size())


def _detect_screen_size() -> tuple[int, int] | None:
    try:
        import tkinter as tk

        root = tk.Tk()
    except Exception as exc:
        LOGGER.debug("screen size unavailable (%s); using fallback view size", exc)
        return None
    try:
        root.withdraw()
        size = (int(root.winfo_screenwidth()), int(root.winfo_screenheight()))
    finally:
        root.destroy()
    return size if min(size) > 0 else None
