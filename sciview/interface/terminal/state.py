"""Terminal state management and restoration."""

import logging
import sys

import blessed

logger = logging.getLogger("sciview.terminal")


class TerminalStateManager:
    """Saves the tty settings on start and restores them exactly once."""

    def __init__(self, term=None):
        self.term = term or blessed.Terminal()
        self.saved_terminal_state = None
        self.terminal_restored = False
        self.original_stdout = sys.stdout

    def save_state(self):
        """Save current terminal settings."""
        try:
            import termios
        except ImportError:
            self.saved_terminal_state = None
            return

        try:
            self.saved_terminal_state = termios.tcgetattr(sys.stdin.fileno())
        except (termios.error, OSError, ValueError):
            self.saved_terminal_state = None

    def restore_terminal(self):
        """Fully restore terminal to its original state."""
        if self.terminal_restored:
            return

        try:
            # Exit fullscreen mode, which restores the original terminal content
            print(self.term.exit_fullscreen, end="", file=self.original_stdout)
            print(self.term.normal, end="", file=self.original_stdout)
            print(self.term.visible_cursor, end="", file=self.original_stdout)
            self.original_stdout.flush()
        except (OSError, ValueError) as e:
            logger.debug("Could not reset terminal attributes: %s", e)

        if self.saved_terminal_state is not None:
            # A saved state means termios imported in save_state
            import termios

            try:
                termios.tcsetattr(
                    sys.stdin.fileno(), termios.TCSANOW, self.saved_terminal_state
                )
            except (termios.error, OSError, ValueError) as e:
                logger.debug("Could not restore tty settings: %s", e)

        self.terminal_restored = True
