"""Scroll state of the content pane."""

from typing import NamedTuple


class ViewportState(NamedTuple):
    """Snapshot of the content pane's scroll position."""

    scroll_offset: int
    page_size: int
    total_lines: int

    @property
    def max_offset(self):
        return max(0, self.total_lines - self.page_size)

    @property
    def visible_range(self):
        """Half-open range of line indices shown in the pane."""
        end = min(self.scroll_offset + self.page_size, self.total_lines)
        return range(self.scroll_offset, end)


class ViewportController:
    """
    Tracks which slice of the file's lines is visible.

    Every operation leaves ``0 <= scroll_offset <= max(0, total_lines -
    page_size)``.
    """

    def __init__(self, page_size=20, total_lines=0):
        self.page_size = max(1, page_size)
        self.total_lines = max(0, total_lines)
        self.scroll_offset = 0

    @property
    def max_offset(self):
        return max(0, self.total_lines - self.page_size)

    def _clamp(self, offset):
        return min(max(offset, 0), self.max_offset)

    def scroll_by(self, delta):
        """Move by ``delta`` lines; returns True if the offset changed."""
        old_offset = self.scroll_offset
        self.scroll_offset = self._clamp(self.scroll_offset + delta)
        return self.scroll_offset != old_offset

    def scroll_up(self):
        return self.scroll_by(-1)

    def scroll_down(self):
        return self.scroll_by(1)

    def page_up(self):
        return self.scroll_by(-self.page_size)

    def page_down(self):
        return self.scroll_by(self.page_size)

    def home(self):
        return self.scroll_by(-self.scroll_offset)

    def end(self):
        return self.scroll_by(self.max_offset - self.scroll_offset)

    def load(self, total_lines):
        """Reset to the top for a newly opened file."""
        self.total_lines = max(0, total_lines)
        self.scroll_offset = 0

    def reload(self, total_lines):
        """Keep the position across a refresh of the same file."""
        self.total_lines = max(0, total_lines)
        self.scroll_offset = self._clamp(self.scroll_offset)

    def resize(self, page_size):
        """Apply a new page size and re-clamp the offset."""
        self.page_size = max(1, page_size)
        self.scroll_offset = self._clamp(self.scroll_offset)

    def state(self):
        return ViewportState(self.scroll_offset, self.page_size, self.total_lines)
