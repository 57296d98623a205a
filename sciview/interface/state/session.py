"""Viewer session: the active file, its cached chart data and the viewport."""

import logging
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Optional, Tuple

from ...data.detector import ChartDetector, DetectionConfig
from ...data.points import AxisRange, PointSeries
from ...data.reader import BinaryFileError, FileInfo, FileReadError, read_lines
from ..rendering.charts import CHART_STYLES, ChartRenderer
from .browser import RecentFiles
from .events import EventKind
from .extraction import ExtractionWorker
from .viewport import ViewportController

logger = logging.getLogger("sciview.session")

WELCOME_LINES = (
    "Welcome to sciview!",
    "",
    "Select a file and press Enter to view its contents.",
    "",
    "Supported formats: .txt, .dat, .csv, .cif, .xyz, .pdb",
)

EMPTY_FILE_TEXT = "(empty file)"
BINARY_FILE_TEXT = "Binary file - no text content to display"


@dataclass(frozen=True)
class FileCacheEntry:
    """
    Everything derived from one load of one file.

    Entries are never mutated: a refresh, a finished background extraction
    or a file change installs a new entry.
    """

    path: Path
    raw_lines: Tuple[str, ...]
    info: FileInfo = field(default_factory=FileInfo)
    point_series: Optional[PointSeries] = None
    axis_range: Optional[AxisRange] = None
    parse_failures: int = 0
    generation: int = 0
    error: Optional[str] = None
    pending: bool = False

    @property
    def has_chart(self):
        return bool(self.point_series)


class ViewerSession:
    """
    Owns the state the presentation layer renders from.

    The chart reflects the whole loaded file and is only regenerated when
    the file, the chart size or the chart style changes; scrolling never
    touches it.
    """

    def __init__(
        self,
        detection_config: Optional[DetectionConfig] = None,
        show_chart=True,
        chart_style="scatter",
        marker="braille",
        background_threshold=0,
        recent_limit=10,
        page_size=20,
    ):
        if chart_style not in CHART_STYLES:
            raise ValueError(f"unknown chart style {chart_style!r}")
        self.detector = ChartDetector(detection_config)
        self.viewport = ViewportController(page_size)
        self.recent = RecentFiles(recent_limit)
        self.chart_renderer = ChartRenderer(marker)
        self.show_chart = show_chart
        self.chart_style = chart_style
        self.background_threshold = background_threshold
        self.worker = None
        self.generation = 0
        self.entry: Optional[FileCacheEntry] = None
        self.status = ""
        self._chart_cache = None

        self.viewport.load(len(WELCOME_LINES))

    # Event dispatch

    def handle(self, event):
        """Apply a navigation event; returns True if anything visible changed."""
        kind = event.kind
        if kind is EventKind.SCROLL_UP:
            return self.viewport.scroll_up()
        if kind is EventKind.SCROLL_DOWN:
            return self.viewport.scroll_down()
        if kind is EventKind.PAGE_UP:
            return self.viewport.page_up()
        if kind is EventKind.PAGE_DOWN:
            return self.viewport.page_down()
        if kind is EventKind.HOME:
            return self.viewport.home()
        if kind is EventKind.END:
            return self.viewport.end()
        if kind is EventKind.FILE_SELECTED:
            self.open_file(event.path)
            return True
        if kind is EventKind.TOGGLE_CHART:
            self.toggle_chart()
            return True
        if kind is EventKind.REFRESH:
            self.refresh()
            return True
        raise ValueError(f"unhandled event {event!r}")

    # File lifecycle

    def open_file(self, path):
        """Load ``path`` as the active file, scrolled to the top."""
        path = Path(path)
        self.recent.add(path)
        self._load(path, reset_scroll=True)

    def refresh(self):
        """Reload the active file, keeping the scroll position where possible."""
        if self.entry is None:
            return
        self._load(self.entry.path, reset_scroll=False)

    def _load(self, path, reset_scroll):
        self.generation += 1
        generation = self.generation
        info = FileInfo.from_path(path)

        try:
            lines = read_lines(path)
        except BinaryFileError:
            entry = FileCacheEntry(
                path, (BINARY_FILE_TEXT,), info, generation=generation,
                error="binary file",
            )
        except FileReadError as e:
            logger.warning("Cannot open %s: %s", path, e.reason)
            entry = FileCacheEntry(
                path, (f"Cannot read file: {e.reason}",), info,
                generation=generation, error=e.reason,
            )
        else:
            entry = self._detect(path, lines, info, generation)

        self.status = ""
        if entry.pending:
            self.status = f"Extracting chart data from {path.name}..."
        elif self.worker is not None:
            self.worker.cancel()

        self._install(entry, reset_scroll)

    def _detect(self, path, lines, info, generation):
        raw_lines = tuple(lines) or (EMPTY_FILE_TEXT,)
        if self.background_threshold and info.size >= self.background_threshold:
            if self.worker is None:
                self.worker = ExtractionWorker(self.detector)
            self.worker.submit(path, generation, lines)
            return FileCacheEntry(
                path, raw_lines, info, generation=generation, pending=True
            )

        result = self.detector.detect(lines)
        return FileCacheEntry(
            path,
            raw_lines,
            info,
            point_series=result.series,
            axis_range=AxisRange.from_series(result.series) if result.series else None,
            parse_failures=result.parse_failures,
            generation=generation,
        )

    def _install(self, entry, reset_scroll):
        self.entry = entry
        self._chart_cache = None
        if reset_scroll:
            self.viewport.load(len(entry.raw_lines))
        else:
            self.viewport.reload(len(entry.raw_lines))

    def poll(self):
        """Apply finished background results for the active file; drop stale ones."""
        if self.worker is None:
            return False

        changed = False
        for finished in self.worker.results():
            entry = self.entry
            if (
                entry is None
                or finished.generation != entry.generation
                or finished.path != entry.path
            ):
                logger.debug("Discarding stale extraction result for %s", finished.path)
                continue

            if finished.error is not None:
                entry = replace(entry, pending=False, error=finished.error)
            else:
                series = finished.result.series
                entry = replace(
                    entry,
                    pending=False,
                    point_series=series,
                    axis_range=AxisRange.from_series(series) if series else None,
                    parse_failures=finished.result.parse_failures,
                )
            self.status = ""
            self._install(entry, reset_scroll=False)
            changed = True
        return changed

    def close(self):
        if self.worker is not None:
            self.worker.stop()
            self.worker = None

    # Chart

    def toggle_chart(self):
        self.show_chart = not self.show_chart
        self._chart_cache = None

    def cycle_chart_style(self):
        index = CHART_STYLES.index(self.chart_style)
        self.chart_style = CHART_STYLES[(index + 1) % len(CHART_STYLES)]
        self._chart_cache = None

    def chart_lines(self, width, height):
        """Labelled chart lines for the active file, regenerated only when stale."""
        entry = self.entry
        key = (
            entry.generation if entry else None,
            width,
            height,
            self.chart_style,
            self.chart_renderer.marker,
        )
        if self._chart_cache is not None and self._chart_cache[0] == key:
            return self._chart_cache[1]

        if entry is not None and entry.has_chart:
            lines = self.chart_renderer.draw_chart(
                entry.point_series, entry.axis_range, width, height, self.chart_style
            )
        else:
            lines = self.chart_renderer.draw_placeholder(width, height)
        self._chart_cache = (key, lines)
        return lines

    # Content

    @property
    def content_lines(self):
        if self.entry is None:
            return WELCOME_LINES
        return self.entry.raw_lines

    def resize(self, page_size):
        self.viewport.resize(page_size)

    def viewport_state(self):
        return self.viewport.state()

    def stats(self):
        """Key/value pairs for the stats panel."""
        entry = self.entry
        if entry is None:
            return {"File": "No file selected"}

        stats = {"File": entry.path.name}
        stats.update(entry.info.as_dict())
        if entry.error is not None:
            stats["Error"] = entry.error
            return stats

        stats["Lines"] = len(entry.raw_lines)
        if entry.pending:
            stats["Chart"] = "extracting..."
        elif entry.has_chart:
            stats["Data points"] = len(entry.point_series)
            if entry.parse_failures:
                stats["Skipped"] = entry.parse_failures
        return stats
