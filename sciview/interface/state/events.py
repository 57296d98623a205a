"""Navigation events consumed by the viewer session."""

from enum import Enum
from pathlib import Path
from typing import NamedTuple, Optional


class EventKind(Enum):
    SCROLL_UP = "scroll_up"
    SCROLL_DOWN = "scroll_down"
    PAGE_UP = "page_up"
    PAGE_DOWN = "page_down"
    HOME = "home"
    END = "end"
    FILE_SELECTED = "file_selected"
    TOGGLE_CHART = "toggle_chart"
    REFRESH = "refresh"


class NavigationEvent(NamedTuple):
    kind: EventKind
    path: Optional[Path] = None

    @classmethod
    def file_selected(cls, path):
        return cls(EventKind.FILE_SELECTED, Path(path))


ScrollUp = NavigationEvent(EventKind.SCROLL_UP)
ScrollDown = NavigationEvent(EventKind.SCROLL_DOWN)
PageUp = NavigationEvent(EventKind.PAGE_UP)
PageDown = NavigationEvent(EventKind.PAGE_DOWN)
Home = NavigationEvent(EventKind.HOME)
End = NavigationEvent(EventKind.END)
ToggleChart = NavigationEvent(EventKind.TOGGLE_CHART)
Refresh = NavigationEvent(EventKind.REFRESH)
