import logging
import os

import pytest
from blessed.keyboard import Keystroke

from sciview.configuration import ViewerConfig
from sciview.interface import FileViewer
from sciview.interface.state.bookmark import load_last_directory
from sciview.interface.viewer import HELP_TEXT, action_for, compute_layout


class FakeTerminal:
    """The handful of terminal capabilities the viewer uses, with scripted keys."""

    home = ""
    clear = ""
    normal = ""
    exit_fullscreen = ""
    visible_cursor = ""

    def __init__(self, keys=()):
        self.keys = list(keys)
        self.timeouts = []

    def inkey(self, timeout=None):
        self.timeouts.append(timeout)
        return self.keys.pop(0) if self.keys else Keystroke("")


def key(ucs, name=None):
    if name is None:
        return Keystroke(ucs)
    return Keystroke(ucs, code=1, name=name)


@pytest.fixture
def workspace(tmp_path):
    root = tmp_path / "work"
    root.mkdir()
    (root / "sub").mkdir()
    (root / "curve.dat").write_text(
        "\n".join(f"{i} {i * i}" for i in range(40)) + "\n", encoding="utf-8"
    )
    (root / "readme.txt").write_text("plain words\n", encoding="utf-8")
    return root


@pytest.fixture
def viewer(workspace, tmp_path, monkeypatch):
    config = ViewerConfig(
        start_dir=workspace,
        use_nerd_fonts=False,
        config_dir=tmp_path / "config",
    )
    viewer = FileViewer(config, term=FakeTerminal())
    monkeypatch.setattr(
        viewer, "_get_terminal_size", lambda: os.terminal_size((80, 24))
    )
    yield viewer
    viewer.stop()


def select(viewer, name):
    names = [entry.name for entry in viewer.browser.entries]
    viewer.browser.selected_index = names.index(name)


class TestLayout:
    def test_columns_fill_the_width(self):
        layout = compute_layout(80, 24)
        assert sum(layout.widths) + 4 == 80
        assert layout.body_height == 19
        assert layout.chart_height + 1 + layout.stats_height == layout.body_height

    def test_chart_hidden(self):
        layout = compute_layout(80, 24, show_chart=False)
        assert layout.chart_height == 0
        assert layout.stats_height == layout.body_height

    @pytest.mark.parametrize("columns, lines", [(10, 24), (80, 6)])
    def test_too_small(self, columns, lines):
        assert compute_layout(columns, lines) is None


class TestKeyMapping:
    @pytest.mark.parametrize(
        "keystroke, action",
        [
            (key("q"), "quit"),
            (key("j"), "scroll_down"),
            (key("k"), "scroll_up"),
            (key("d"), "page_down"),
            (key("u"), "page_up"),
            (key("."), "startup_dir"),
            (key("~"), "home_dir"),
            (key("\x1b[A", "KEY_UP"), "select_up"),
            (key("\x1b[B", "KEY_DOWN"), "select_down"),
            (key("\n", "KEY_ENTER"), "open"),
            (key("\x7f", "KEY_BACKSPACE"), "parent"),
            (key("\x1b[5~", "KEY_PGUP"), "page_up"),
            (key("\x1b[6~", "KEY_PGDOWN"), "page_down"),
            (key("\x1b", "KEY_ESCAPE"), "close_popup"),
            (key("z"), None),
        ],
    )
    def test_action_for(self, keystroke, action):
        assert action_for(keystroke) == action


class TestFileViewer:
    """Frame composition and key dispatch without a real terminal."""

    def test_frame_geometry(self, viewer):
        frame = viewer._create_frame()
        assert len(frame) == 24
        assert viewer.frame_builder.check_border_alignment(frame), "ragged frame"
        assert all(len(line) == 80 for line in frame)
        assert "Files" in frame[0] and "Content" in frame[0] and "Chart" in frame[0]

    def test_help_in_status_bar(self, viewer):
        frame = viewer._create_frame()
        assert HELP_TEXT[:20] in frame[-2]

    def test_open_file_shows_content_and_stats(self, viewer, workspace):
        select(viewer, "curve.dat")
        viewer.handle_key(key("\n", "KEY_ENTER"))
        assert viewer.session.entry.path == workspace.resolve() / "curve.dat"
        frame = viewer._create_frame()
        assert "Content [1-19/40]" in frame[0]
        assert any("Data points: 40" in line for line in frame)
        assert any(" 1 │ 0 0" in line for line in frame)

    def test_enter_directory_and_go_back(self, viewer, workspace):
        select(viewer, "sub")
        viewer.dispatch("open")
        assert viewer.browser.current_directory == (workspace / "sub").resolve()
        viewer.dispatch("parent")
        assert viewer.browser.current_directory == workspace.resolve()

    def test_scroll_keys_move_the_content(self, viewer):
        select(viewer, "curve.dat")
        viewer.dispatch("open")
        viewer._create_frame()
        viewer.handle_key(key("j"))
        assert viewer.session.viewport_state().scroll_offset == 1
        viewer.handle_key(key("\x1b[F", "KEY_END"))
        assert viewer.session.viewport_state().scroll_offset == 40 - 19

    def test_toggle_chart_changes_layout(self, viewer):
        viewer.handle_key(key("c"))
        frame = viewer._create_frame()
        assert "Chart" not in frame[0]
        assert "Stats" in frame[0]

    def test_cycle_style_and_icons(self, viewer):
        viewer.handle_key(key("s"))
        assert viewer.session.chart_style == "line"
        viewer.handle_key(key("n"))
        assert viewer.use_nerd_fonts

    def test_recent_files_popup(self, viewer):
        for name in ("curve.dat", "readme.txt"):
            select(viewer, name)
            viewer.dispatch("open")
        viewer.handle_key(key("h"))
        assert viewer.show_recent_files
        frame = viewer._create_frame()
        assert any("Recent files" in line for line in frame)

        # Navigation keys drive the popup, not the file tree
        tree_selection = viewer.browser.selected_index
        viewer.handle_key(key("\x1b[B", "KEY_DOWN"))
        assert viewer.browser.selected_index == tree_selection
        viewer.handle_key(key("\n", "KEY_ENTER"))
        assert not viewer.show_recent_files
        assert viewer.session.entry.path.name == "curve.dat"

    def test_popup_swallows_quit(self, viewer):
        viewer.running = True
        viewer.dispatch("recent_files")
        viewer.handle_key(key("q"))
        assert not viewer.show_recent_files
        assert viewer.running, "q closes the popup before it quits"

    def test_popup_closes_on_escape(self, viewer):
        viewer.dispatch("recent_files")
        viewer.handle_key(key("\x1b", "KEY_ESCAPE"))
        assert not viewer.show_recent_files

    def test_quit_saves_directory(self, viewer, workspace, tmp_path):
        viewer.running = True
        viewer.handle_key(key("q"))
        assert not viewer.running
        assert load_last_directory(tmp_path / "config") == workspace.resolve()

    def test_quit_without_remembering(self, workspace, tmp_path):
        config = ViewerConfig(
            start_dir=workspace, remember_directory=False, config_dir=tmp_path / "cfg"
        )
        viewer = FileViewer(config, term=FakeTerminal())
        viewer.quit()
        viewer.stop()
        assert load_last_directory(tmp_path / "cfg") is None

    def test_warnings_reach_the_status_bar(self, viewer):
        viewer.add_log("disk on fire", logging.WARNING)
        viewer.add_log("all quiet", logging.INFO)
        assert viewer.status_message == "disk on fire"
        frame = viewer._create_frame()
        assert "disk on fire" in frame[-2]

    def test_keypress_clears_status(self, viewer):
        viewer.add_log("transient", logging.ERROR)
        viewer.handle_key(key("j"))
        assert viewer.status_message == ""

    def test_unreadable_file_is_not_fatal(self, viewer, workspace):
        (workspace / "blob.bin").write_bytes(b"\xff\xfe\xfd")
        viewer.browser.refresh()
        select(viewer, "blob.bin")
        viewer.dispatch("open")
        frame = viewer._create_frame()
        assert any("Binary file" in line for line in frame)

    def test_tiny_terminal(self, viewer, monkeypatch):
        monkeypatch.setattr(viewer, "_get_terminal_size", lambda: os.terminal_size((20, 5)))
        frame = viewer._create_frame()
        assert len(frame) == 5
        assert "Terminal too small" in frame[0]

    def test_stray_output_and_log_records_are_captured(self, viewer):
        viewer.log_capture.write("stray print\n")
        assert viewer.status_message == "stray print"
        viewer.log_handler.emit(
            logging.makeLogRecord({"msg": "bad %s", "args": ("thing",), "levelno": logging.ERROR})
        )
        assert viewer.status_message == "bad thing"

    def test_info_records_stay_out_of_the_status_bar(self, viewer):
        viewer.add_log("routine detail", logging.INFO)
        assert viewer.status_message == ""


class TestMainLoop:
    """Errors inside the loop are reported, never fatal."""

    def test_repeated_frame_errors_keep_running_until_quit(self, workspace, tmp_path, monkeypatch):
        config = ViewerConfig(
            start_dir=workspace, config_dir=tmp_path / "config", refresh_interval=0.1
        )
        term = FakeTerminal()
        viewer = FileViewer(config, term=term)

        def broken_frame():
            raise RuntimeError("frame exploded")

        monkeypatch.setattr(viewer, "_create_frame", broken_frame)
        viewer.running = True
        try:
            for _ in range(25):
                viewer.tick()
                assert viewer.running, "a loop error must not stop the viewer"
            assert viewer.consecutive_errors == 25
            assert max(term.timeouts) <= 2.0
            assert term.timeouts[1] > term.timeouts[0], "redraws should back off"

            term.keys.append(key("q"))
            viewer.tick()
            assert not viewer.running
        finally:
            viewer.stop()

    def test_error_reaches_the_status_bar(self, workspace, tmp_path, monkeypatch):
        config = ViewerConfig(start_dir=workspace, config_dir=tmp_path / "config")
        viewer = FileViewer(config, term=FakeTerminal())

        def broken_poll():
            raise ValueError("poll failed")

        monkeypatch.setattr(viewer.session, "poll", broken_poll)
        logging.getLogger().addHandler(viewer.log_handler)
        try:
            viewer.tick()
        finally:
            logging.getLogger().removeHandler(viewer.log_handler)
            viewer.stop()
        assert viewer.status_message == "Viewer error: poll failed"

    def test_recovery_resets_the_error_count(self, viewer):
        viewer.consecutive_errors = 4
        viewer.tick()
        assert viewer.consecutive_errors == 0
