"""Directory listing and recent-files history for the file tree."""

import logging
import os
from pathlib import Path
from typing import List, NamedTuple

logger = logging.getLogger("sciview.browser")

DEFAULT_RECENT_LIMIT = 10


class FileEntry(NamedTuple):
    name: str
    path: Path
    is_dir: bool


def list_directory(directory) -> List[FileEntry]:
    """
    List a directory: ``..`` first (unless at the root), then directories,
    then files, each group sorted case-insensitively.
    """
    directory = Path(directory)
    entries = []
    parent = directory.parent
    if parent != directory:
        entries.append(FileEntry("..", parent, True))

    try:
        children = list(os.scandir(directory))
    except OSError as e:
        logger.warning("Cannot read directory %s: %s", directory, e.strerror or e)
        return entries

    items = []
    for child in children:
        try:
            is_dir = child.is_dir()
        except OSError:
            is_dir = False
        items.append(FileEntry(child.name, Path(child.path), is_dir))

    items.sort(key=lambda entry: (not entry.is_dir, entry.name.lower()))
    entries.extend(items)
    return entries


class DirectoryBrowser:
    """Current directory, its entries and the selection within them."""

    def __init__(self, start_dir, startup_dir=None):
        self.current_directory = Path(start_dir).resolve()
        self.startup_directory = Path(startup_dir or start_dir).resolve()
        self.entries: List[FileEntry] = []
        self.selected_index = 0
        self.scroll = 0
        self.refresh()

    def refresh(self):
        """Re-read the current directory and reset the selection."""
        self.entries = list_directory(self.current_directory)
        self.selected_index = 0
        self.scroll = 0

    def change_directory(self, directory):
        self.current_directory = Path(directory)
        self.refresh()

    def go_parent(self):
        parent = self.current_directory.parent
        if parent != self.current_directory:
            self.change_directory(parent)

    def go_home(self):
        self.change_directory(Path.home())

    def go_startup(self):
        self.change_directory(self.startup_directory)

    def move_selection(self, delta):
        if not self.entries:
            self.selected_index = 0
            return
        self.selected_index = min(
            max(self.selected_index + delta, 0), len(self.entries) - 1
        )

    @property
    def selected(self):
        if 0 <= self.selected_index < len(self.entries):
            return self.entries[self.selected_index]
        return None

    def activate(self):
        """
        Enter the selected directory, or return the selected file's path.

        Returns None when a directory was entered or nothing is selected.
        """
        entry = self.selected
        if entry is None:
            return None
        if entry.is_dir:
            self.change_directory(entry.path)
            return None
        return entry.path

    def visible_scroll(self, height):
        """Adjust and return the tree scroll so the selection stays visible."""
        height = max(1, height)
        if self.selected_index < self.scroll:
            self.scroll = self.selected_index
        elif self.selected_index >= self.scroll + height:
            self.scroll = self.selected_index - height + 1
        return self.scroll


class RecentFiles:
    """Most-recently-opened files, newest first, without duplicates."""

    def __init__(self, limit=DEFAULT_RECENT_LIMIT):
        self.limit = limit
        self.paths: List[Path] = []
        self.selected_index = 0

    def add(self, path):
        path = Path(path)
        self.paths = [p for p in self.paths if p != path]
        self.paths.insert(0, path)
        del self.paths[self.limit :]

    def __len__(self):
        return len(self.paths)

    def __iter__(self):
        return iter(self.paths)

    def move_selection(self, delta):
        """Move the popup selection, wrapping around at both ends."""
        if not self.paths:
            return
        self.selected_index = (self.selected_index + delta) % len(self.paths)

    @property
    def selected(self):
        if 0 <= self.selected_index < len(self.paths):
            return self.paths[self.selected_index]
        return None
