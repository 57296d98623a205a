"""Terminal interface for sciview."""

from .viewer import FileViewer

__all__ = ["FileViewer"]
