from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Optional


PointerEventType = Literal[
    "pointer_move",
    "pointer_down",
    "pointer_up",
    "pointer_leave",
]

BUTTON_PRIMARY = 1
BUTTON_SECONDARY = 3


@dataclass(frozen=True)
class PointerEvent:
    event_type: PointerEventType
    x: float = 0.0
    y: float = 0.0
    button: Optional[int] = None


def pointer_move(x: float, y: float) -> PointerEvent:
    return PointerEvent("pointer_move", float(x), float(y))


def pointer_down(x: float, y: float, button: int = BUTTON_PRIMARY) -> PointerEvent:
    return PointerEvent("pointer_down", float(x), float(y), button)


def pointer_up(x: float, y: float, button: int = BUTTON_PRIMARY) -> PointerEvent:
    return PointerEvent("pointer_up", float(x), float(y), button)


def pointer_leave() -> PointerEvent:
    return PointerEvent("pointer_leave")
