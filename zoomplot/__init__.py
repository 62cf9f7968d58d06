from zoomplot.api import plot_widget
from zoomplot.commands import DrawCommand
from zoomplot.errors import PlotDataError
from zoomplot.events import BUTTON_PRIMARY, BUTTON_SECONDARY, PointerEvent
from zoomplot.interaction import InteractionConfig
from zoomplot.scales import ViewTransform, Viewport
from zoomplot.series import PlotStyle, SampleSeries, Stroke
from zoomplot.state import DisplayFlags, PlotState
from zoomplot.widget import PlotWidget

__all__ = [
    "BUTTON_PRIMARY",
    "BUTTON_SECONDARY",
    "DisplayFlags",
    "DrawCommand",
    "InteractionConfig",
    "PlotDataError",
    "PlotState",
    "PlotStyle",
    "PlotWidget",
    "PointerEvent",
    "SampleSeries",
    "Stroke",
    "ViewTransform",
    "Viewport",
    "plot_widget",
]
