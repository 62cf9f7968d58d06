from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np


# Layers that depend only on data, viewport, canvas size and display flags.
STATIC_LAYERS = frozenset({"background", "axis", "divisions", "graph"})


@dataclass
class LayerCache:
    static_key: tuple[Any, ...] | None = None
    static_template: np.ndarray | None = None
    hits: int = 0

    def lookup(self, key: tuple[Any, ...]) -> np.ndarray | None:
        if self.static_template is None or self.static_key != key:
            return None
        self.hits += 1
        return self.static_template

    def store(self, key: tuple[Any, ...], frame: np.ndarray) -> None:
        self.static_key = key
        self.static_template = frame.copy()

    def invalidate(self) -> None:
        self.static_key = None
        self.static_template = None


@dataclass
class DirtyState:
    dirty: bool = True
    reason: str | None = None

    def mark(self, reason: str) -> None:
        self.dirty = True
        self.reason = reason

    def take(self) -> bool:
        was_dirty = self.dirty
        self.dirty = False
        self.reason = None
        return was_dirty
