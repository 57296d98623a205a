"""Numeric data detection and extraction."""

from .detector import (
    ChartDetector,
    DetectionConfig,
    DetectionResult,
    ExtractionCancelled,
    detect_and_extract,
)
from .parser import LineKind, NumericLineParser, ParsedLine
from .points import AxisRange, DataPoint, PointSeries
from .reader import BinaryFileError, FileInfo, FileReadError, format_size, read_lines

__all__ = [
    "AxisRange",
    "BinaryFileError",
    "ChartDetector",
    "DataPoint",
    "DetectionConfig",
    "DetectionResult",
    "ExtractionCancelled",
    "FileInfo",
    "FileReadError",
    "LineKind",
    "NumericLineParser",
    "ParsedLine",
    "PointSeries",
    "detect_and_extract",
    "format_size",
    "read_lines",
]
