"""Rendering components for the terminal viewer."""

from .charts import CHART_STYLES, ChartRenderer, render_chart
from .differential import TerminalDifferentialRenderer
from .downsample import PeakPreservingDownsampler, downsample_with_peaks
from .frame import FrameBuilder
from .panels import PanelRenderer
from .raster import MARKERS, ChartRaster, ChartRasterizer
from .utils import TextUtils

__all__ = [
    "CHART_STYLES",
    "ChartRaster",
    "ChartRasterizer",
    "ChartRenderer",
    "FrameBuilder",
    "MARKERS",
    "PanelRenderer",
    "PeakPreservingDownsampler",
    "TerminalDifferentialRenderer",
    "TextUtils",
    "downsample_with_peaks",
    "render_chart",
]
