from __future__ import annotations

import logging

import numpy as np

from zoomplot.tk_view import show


def main() -> None:
    logging.basicConfig(level=logging.INFO)
    x = np.linspace(-2.0, 6.0, 81, dtype=np.float64)
    y = 2.0 * np.sin(x) + 0.25 * x
    # Drag with the left button to zoom, right click to reset.
    show(np.column_stack([x, y]), title="zoomplot demo")


if __name__ == "__main__":
    main()
