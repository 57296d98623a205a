"""Core CLI components for parsing and logging."""

from .logger import setup_logging
from .parser import CustomHelpFormatter, create_base_parser, wrap_green
from .types import non_negative_int, positive_float, positive_int, ratio

__all__ = [
    "CustomHelpFormatter",
    "create_base_parser",
    "non_negative_int",
    "positive_float",
    "positive_int",
    "ratio",
    "setup_logging",
    "wrap_green",
]
