from __future__ import annotations


class PlotDataError(ValueError):
    """Raised when sample input cannot be turned into a plottable series."""
