"""State management for the viewer."""

from .browser import DirectoryBrowser, FileEntry, RecentFiles, list_directory
from .events import EventKind, NavigationEvent
from .extraction import ExtractionResult, ExtractionWorker
from .session import FileCacheEntry, ViewerSession
from .viewport import ViewportController, ViewportState

__all__ = [
    "DirectoryBrowser",
    "EventKind",
    "ExtractionResult",
    "ExtractionWorker",
    "FileCacheEntry",
    "FileEntry",
    "NavigationEvent",
    "RecentFiles",
    "ViewerSession",
    "ViewportController",
    "ViewportState",
    "list_directory",
]
