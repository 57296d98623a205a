"""I/O capture and redirection components."""

from .capture import LogCapture
from .handlers import LOG_FORMAT, ViewerLogHandler
from .output import ViewerOutput

__all__ = ["LOG_FORMAT", "LogCapture", "ViewerLogHandler", "ViewerOutput"]
