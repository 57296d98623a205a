"""Terminal file viewer for scientific data files with inline charts."""

from .configuration import ViewerConfig
from .data import ChartDetector, DetectionConfig, detect_and_extract

__version__ = "0.1.0"

__all__ = ["ChartDetector", "DetectionConfig", "ViewerConfig", "detect_and_extract"]
