"""Core terminal viewer implementation."""

import atexit
import logging
import shutil
import sys
import warnings
from typing import NamedTuple, Optional

import blessed

from .io import LogCapture, ViewerLogHandler, ViewerOutput
from .rendering import FrameBuilder, PanelRenderer, TerminalDifferentialRenderer, TextUtils
from .state import DirectoryBrowser, NavigationEvent, ViewerSession
from .state import events
from .state.bookmark import save_last_directory
from .terminal import TerminalStateManager, managed_terminal

logger = logging.getLogger("sciview.viewer")

HELP_TEXT = (
    "q quit | ↑↓ select | Enter open | Bksp up | j/k scroll | u/d page | "
    "Home/End | c chart | s style | h recent | n icons | r refresh | . start | ~ home"
)

# Frame rows outside the panels: top border, footer separator, path bar,
# status bar and bottom border.
CHROME_ROWS = 5
MIN_BODY_ROWS = 3
MIN_COLUMNS = 24

# Longest wait between redraws while every iteration keeps failing
MAX_ERROR_BACKOFF = 2.0

CHAR_ACTIONS = {
    "q": "quit",
    "j": "scroll_down",
    "k": "scroll_up",
    "d": "page_down",
    "u": "page_up",
    ".": "startup_dir",
    "~": "home_dir",
    "c": "toggle_chart",
    "s": "cycle_style",
    "n": "toggle_icons",
    "r": "refresh",
    "h": "recent_files",
    "\n": "open",
    "\r": "open",
    "\x08": "parent",
    "\x7f": "parent",
}

SEQUENCE_ACTIONS = {
    "KEY_UP": "select_up",
    "KEY_DOWN": "select_down",
    "KEY_ENTER": "open",
    "KEY_BACKSPACE": "parent",
    "KEY_PGUP": "page_up",
    "KEY_PGDOWN": "page_down",
    "KEY_HOME": "top",
    "KEY_END": "bottom",
    "KEY_ESCAPE": "close_popup",
}

SESSION_EVENTS = {
    "scroll_up": events.ScrollUp,
    "scroll_down": events.ScrollDown,
    "page_up": events.PageUp,
    "page_down": events.PageDown,
    "top": events.Home,
    "bottom": events.End,
    "toggle_chart": events.ToggleChart,
}


class Layout(NamedTuple):
    """Column widths and row counts of one frame."""

    tree_width: int
    content_width: int
    right_width: int
    body_height: int
    chart_height: int
    stats_height: int

    @property
    def widths(self):
        return (self.tree_width, self.content_width, self.right_width)


def compute_layout(columns, lines, show_chart=True) -> Optional[Layout]:
    """
    Split the terminal into file tree (20%), content (50%) and right panel
    (30%). The right panel stacks the chart (60%) over the stats.
    """
    inner = columns - 4  # four vertical borders
    body_height = lines - CHROME_ROWS
    if inner < MIN_COLUMNS - 4 or body_height < MIN_BODY_ROWS:
        return None

    tree_width = inner * 20 // 100
    content_width = inner * 50 // 100
    right_width = inner - tree_width - content_width

    if show_chart and body_height >= 6:
        chart_height = body_height * 60 // 100
        stats_height = body_height - chart_height - 1  # one separator row
    else:
        chart_height = 0
        stats_height = body_height

    return Layout(
        tree_width, content_width, right_width, body_height, chart_height, stats_height
    )


def action_for(key):
    """Translate a blessed keystroke into a viewer action name."""
    if key.is_sequence:
        return SEQUENCE_ACTIONS.get(key.name)
    return CHAR_ACTIONS.get(str(key))


class FileViewer:
    """Main terminal viewer class."""

    def __init__(self, config, term=None):
        self.config = config
        self.term = term or blessed.Terminal()
        self.terminal_manager = TerminalStateManager(self.term)

        # Core state
        self.session = ViewerSession(
            detection_config=config.detection_config(),
            show_chart=config.show_chart,
            chart_style=config.chart_style,
            marker=config.marker,
            background_threshold=config.background_threshold,
            recent_limit=config.recent_limit,
        )
        self.browser = DirectoryBrowser(config.start_dir, config.startup_dir)

        # Rendering components
        self.text_utils = TextUtils()
        self.frame_builder = FrameBuilder()
        self.panel_renderer = PanelRenderer()
        self.differential_renderer = TerminalDifferentialRenderer(self.term)

        # Display state
        self.use_nerd_fonts = config.use_nerd_fonts
        self.show_recent_files = False
        self.running = False
        self.previous_size = None
        self.previous_frame = None
        self.status_message = ""
        self.consecutive_errors = 0

        # I/O management
        self.original_stdout = sys.stdout
        self.original_stderr = sys.stderr
        self.output = ViewerOutput(self.original_stdout)
        self.log_capture = LogCapture(self)
        self.log_handler = ViewerLogHandler(self)
        self.original_showwarning = warnings.showwarning

        atexit.register(self._cleanup)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.stop()
        # Don't suppress exceptions
        return False

    # Logging and output capture

    def add_log(self, message, level=logging.WARNING):
        """Show the last line of a warning or error message in the status bar."""
        if level < logging.WARNING:
            return
        stripped = self.text_utils.strip_ansi(str(message))
        lines = [line for line in stripped.splitlines() if line.strip()]
        if lines:
            self.status_message = lines[-1]

    def show_warning(self, message, category, filename, lineno, file=None, line=None):
        self.add_log(warnings.formatwarning(message, category, filename, lineno, line))

    def _attach_io(self):
        logging.getLogger().addHandler(self.log_handler)
        warnings.showwarning = self.show_warning
        sys.stdout = self.log_capture
        sys.stderr = self.log_capture

    def _detach_io(self):
        sys.stdout = self.original_stdout
        sys.stderr = self.original_stderr
        warnings.showwarning = self.original_showwarning
        logging.getLogger().removeHandler(self.log_handler)

    def _cleanup(self):
        """Cleanup on exit."""
        if self.running:
            self.stop()
        if not self.terminal_manager.terminal_restored:
            self.terminal_manager.restore_terminal()

    # Key handling

    def handle_key(self, key):
        self.status_message = ""
        action = action_for(key)
        if action is not None:
            self.dispatch(action)

    def dispatch(self, action):
        """Perform a named action. Returns False for unknown actions."""
        if self.show_recent_files:
            return self._dispatch_popup(action)

        if action == "quit":
            self.quit()
        elif action == "select_up":
            self.browser.move_selection(-1)
        elif action == "select_down":
            self.browser.move_selection(1)
        elif action == "open":
            path = self.browser.activate()
            if path is not None:
                self.session.handle(NavigationEvent.file_selected(path))
                self.force_redraw()
        elif action == "parent":
            self.browser.go_parent()
        elif action == "startup_dir":
            self.browser.go_startup()
        elif action == "home_dir":
            self.browser.go_home()
        elif action == "cycle_style":
            self.session.cycle_chart_style()
        elif action == "toggle_icons":
            self.use_nerd_fonts = not self.use_nerd_fonts
        elif action == "refresh":
            self.browser.refresh()
            self.session.handle(events.Refresh)
        elif action == "recent_files":
            self.show_recent_files = True
            self.session.recent.selected_index = 0
        elif action in SESSION_EVENTS:
            self.session.handle(SESSION_EVENTS[action])
        else:
            return False
        return True

    def _dispatch_popup(self, action):
        recent = self.session.recent
        if action in ("close_popup", "quit", "recent_files"):
            self.show_recent_files = False
        elif action == "select_up":
            recent.move_selection(-1)
        elif action == "select_down":
            recent.move_selection(1)
        elif action == "open":
            path = recent.selected
            if path is not None:
                self.show_recent_files = False
                self.session.handle(NavigationEvent.file_selected(path))
                self.force_redraw()
        else:
            return False
        return True

    def quit(self):
        if self.config.remember_directory:
            save_last_directory(self.browser.current_directory, self.config.config_dir)
        self.running = False

    def force_redraw(self):
        """Force a full redraw."""
        self.differential_renderer.reset()

    # Frame construction

    def _get_terminal_size(self):
        return shutil.get_terminal_size()

    def _content_title(self, state):
        if state.total_lines == 0:
            return "Content"
        end_line = min(state.scroll_offset + state.page_size, state.total_lines)
        return f"Content [{state.scroll_offset + 1}-{end_line}/{state.total_lines}]"

    def _tree_title(self, height):
        total = len(self.browser.entries)
        if total <= height:
            return "Files"
        scroll = self.browser.scroll
        return f"Files [{scroll + 1}-{min(scroll + height, total)}/{total}]"

    def _status_text(self):
        return self.session.status or self.status_message or HELP_TEXT

    def _path_text(self):
        text = f" {self.browser.current_directory}"
        entry = self.session.entry
        if entry is not None:
            text += f"  |  {entry.path}"
        return text

    def _draw_right_panel(self, layout):
        width = layout.right_width
        stats = self.panel_renderer.draw_info_panel(
            self.session.stats(), width, layout.stats_height
        )
        if not layout.chart_height:
            return stats

        chart = self.session.chart_lines(width, layout.chart_height)
        separator = self.text_utils.fit("─ Stats " + "─" * width, width)
        return list(chart) + [separator] + stats

    def _create_frame(self):
        """Create a new viewer frame."""
        current_size = self._get_terminal_size()
        if current_size != self.previous_size:
            self.force_redraw()
            self.previous_size = current_size

        columns, lines = current_size
        layout = compute_layout(columns, lines, self.session.show_chart)
        if layout is None:
            message = self.text_utils.fit(" Terminal too small", columns)
            return [message] + [" " * columns for _ in range(lines - 1)]

        body_height = layout.body_height
        self.session.resize(body_height)
        viewport = self.session.viewport_state()

        tree_scroll = self.browser.visible_scroll(body_height)
        tree = self.panel_renderer.draw_file_tree(
            self.browser.entries,
            self.browser.selected_index,
            tree_scroll,
            layout.tree_width,
            body_height,
            self.use_nerd_fonts,
        )
        content = self.panel_renderer.draw_content(
            self.session.content_lines, viewport, layout.content_width, body_height
        )
        right = self._draw_right_panel(layout)

        titles = (
            self._tree_title(body_height),
            self._content_title(viewport),
            "Chart" if layout.chart_height else "Stats",
        )
        frame = [self.frame_builder.create_top_border(layout.widths, titles)]
        for i in range(body_height):
            frame.append(self.frame_builder.create_row((tree[i], content[i], right[i])))
        frame.append(self.frame_builder.create_footer_separator(layout.widths))

        inner = columns - 2
        frame.append("║" + self.text_utils.fit(self._path_text(), inner) + "║")
        frame.append("║" + self.text_utils.fit(" " + self._status_text(), inner) + "║")
        frame.append(self.frame_builder.create_bottom_border(inner))

        if self.show_recent_files:
            self._overlay_recent_files(frame, columns, lines)

        return frame

    def _overlay_recent_files(self, frame, columns, lines):
        width = min(columns - 4, max(30, columns * 60 // 100))
        height = min(lines - 2, len(self.session.recent) + 2 if self.session.recent else 3)
        popup = self.panel_renderer.draw_popup(
            "Recent files",
            [str(path) for path in self.session.recent],
            self.session.recent.selected_index,
            width,
            max(3, height),
        )
        top = max(0, (lines - len(popup)) // 2)
        left = max(0, (columns - width) // 2)
        self.frame_builder.overlay(frame, popup, top, left)

    def _update_screen(self, new_frame):
        """Update the terminal screen with a new frame."""
        if not self.frame_builder.check_border_alignment(new_frame):
            new_frame = self.frame_builder.correct_borders(new_frame)
        self.differential_renderer.render_frame(new_frame, self.output)
        self.previous_frame = new_frame

    # Main loop

    def tick(self):
        """
        Run one loop iteration: apply background results, redraw, then wait
        for a key. Errors are logged to the status bar and the loop goes on;
        repeated failures slow the redraw down.
        """
        try:
            self.session.poll()
            self._update_screen(self._create_frame())
            self.consecutive_errors = 0
        except Exception as e:
            self.consecutive_errors += 1
            logger.exception("Viewer error: %s", e)

        timeout = self.config.refresh_interval
        if self.consecutive_errors:
            backoff = timeout * 2 ** min(self.consecutive_errors, 8)
            timeout = min(backoff, MAX_ERROR_BACKOFF)

        key = self.term.inkey(timeout=timeout)
        if not key:
            return
        try:
            self.handle_key(key)
        except Exception as e:
            logger.exception("Error handling key %r: %s", str(key), e)

    def run(self):
        """Run the viewer until the user quits."""
        self.running = True
        self._attach_io()
        try:
            with managed_terminal(self.term, self.terminal_manager):
                while self.running:
                    self.tick()
        finally:
            self.stop()

    def stop(self):
        """Stop the viewer and give the terminal back."""
        self.running = False
        self._detach_io()
        self.session.close()
        if not self.terminal_manager.terminal_restored:
            self.terminal_manager.restore_terminal()
